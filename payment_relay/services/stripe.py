import json
import logging
import httpx
from typing import Any, Dict, Optional
from ..config import settings
from ..exceptions import StripeAPIError
from ..schemas import IntentRequest, IntentResult

logger = logging.getLogger(__name__)


def stringify(value: Any) -> str:
    """Render an amount or metadata value as a form field string."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "null"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (dict, list)):
        return json.dumps(value, separators=(",", ":"))
    return str(value)


def build_intent_form(payload: IntentRequest, default_currency: Optional[str] = None) -> Dict[str, str]:
    """
    Flatten an IntentRequest into Stripe's form-encoded field names.
    """
    form: Dict[str, str] = {}
    # a missing amount is left for Stripe to reject
    if payload.amount is not None:
        form["amount"] = stringify(payload.amount)
    form["currency"] = payload.currency or default_currency or settings.default_currency
    form["automatic_payment_methods[enabled]"] = "true"
    for key, value in (payload.metadata or {}).items():
        form[f"metadata[{key}]"] = stringify(value)
    return form


async def create_payment_intent(client: httpx.AsyncClient,
                                secret_key: str,
                                payload: IntentRequest,
                                api_base: str = "https://api.stripe.com/v1",
                                default_currency: Optional[str] = None,
                                ) -> IntentResult:
    """
    Create a Stripe PaymentIntent and return its client secret and id.

    Raises StripeAPIError when Stripe answers with a non-success status.
    """
    form = build_intent_form(payload, default_currency)
    headers = {
        "Authorization": f"Bearer {secret_key}",
        "Content-Type": "application/x-www-form-urlencoded",
    }
    url = f"{api_base.rstrip('/')}/payment_intents"
    logger.debug("POST %s with metadata keys %s", url, sorted(payload.metadata or {}))

    resp = await client.post(url, data=form, headers=headers)
    if resp.is_error:
        logger.error("Stripe API error (status %s): %s", resp.status_code, resp.text)
        raise StripeAPIError(resp.status_code, resp.text)

    intent = resp.json()
    logger.info("Payment intent created: %s (stripe status %s)", intent.get("id"), resp.status_code)
    return IntentResult(client_secret=intent["client_secret"], id=intent["id"])
