import httpx
from fastapi import Request


def get_http_client(request: Request) -> httpx.AsyncClient:
    """Shared outbound client, created and closed by the app lifespan."""
    return request.app.state.http_client
