import uvicorn
import httpx
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request, Response
from fastapi.responses import JSONResponse
from .routers import payment_intents
from .config import settings
from .exceptions import RelayException
from .logging_config import configure_logging

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "authorization, x-client-info, apikey, content-type",
    "Access-Control-Allow-Methods": "POST, OPTIONS",
}


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Own one pooled outbound client for the life of the process."""
    async with httpx.AsyncClient(timeout=settings.stripe_timeout_seconds) as client:
        app.state.http_client = client
        yield


def create_app() -> FastAPI:
    configure_logging(settings.log_level, settings.log_json)

    app = FastAPI(title="Payment Intent Relay", lifespan=lifespan)

    # Browser pre-flight: answered for any path before routing
    @app.middleware("http")
    async def cors(request: Request, call_next):
        if request.method == "OPTIONS":
            return Response(status_code=200, headers=CORS_HEADERS)
        response = await call_next(request)
        response.headers.update(CORS_HEADERS)
        return response

    @app.exception_handler(RelayException)
    async def relay_exception_handler(request: Request, exc: RelayException):
        return JSONResponse(status_code=exc.status_code, content=exc.to_model().model_dump(exclude_none=True))

    app.include_router(payment_intents.router)

    @app.get("/health")
    def health():
        """Container health probe endpoint."""
        return {"ok": True}

    return app


app = create_app()

if __name__ == "__main__":
    uvicorn.run("payment_relay.main:app", host=settings.app_host, port=settings.app_port, reload=(settings.env != "production"))
