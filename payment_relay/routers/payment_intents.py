import logging
import httpx
from fastapi import APIRouter, Depends, Request
from ..schemas import IntentRequest, IntentResult, RelayError
from ..services.stripe import create_payment_intent
from ..exceptions import MissingCredentialError, RelayException
from ..config import Settings, get_settings
from ..utils import get_http_client

logger = logging.getLogger(__name__)

router = APIRouter(tags=["payment-intents"])


# any path, like the pre-flight handling
@router.post("/{path:path}", response_model=IntentResult, responses={500: {"model": RelayError}})
async def create_intent(request: Request,
                        settings: Settings = Depends(get_settings),
                        client: httpx.AsyncClient = Depends(get_http_client)):
    """Create a Stripe PaymentIntent and hand back its client secret."""
    logger.debug("STRIPE_SECRET_KEY configured: %s", bool(settings.stripe_secret_key))
    if not settings.stripe_secret_key:
        logger.error("Missing STRIPE_SECRET_KEY environment variable")
        raise MissingCredentialError()

    try:
        # parsed by hand so malformed bodies get the 500 error shape, not a 422
        payload = IntentRequest.model_validate(await request.json())
        logger.info("Creating payment intent for amount: %s currency: %s", payload.amount, payload.currency)
        return await create_payment_intent(
            client,
            settings.stripe_secret_key,
            payload,
            api_base=settings.stripe_api_base,
            default_currency=settings.default_currency,
        )
    except RelayException:
        raise
    except Exception as e:
        logger.exception("Error in create-payment-intent")
        raise RelayException(str(e)) from e
