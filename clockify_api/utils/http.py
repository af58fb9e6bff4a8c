"""
HTTP client utilities with sane defaults for clockify-api.
"""
from __future__ import annotations
import httpx


def create_http_client(
    timeout: float = 20.0,
    user_agent: str = "clockify-api/0.1",
    **kwargs
) -> httpx.AsyncClient:
    """
    Create the shared async HTTP client with:
    - Sane timeout defaults (20s, 10s to connect)
    - Custom user-agent and JSON accept header
    - No transport-level retries
    """
    headers = kwargs.pop("headers", {})
    headers.setdefault("User-Agent", user_agent)
    headers.setdefault("Accept", "application/json")

    timeout_config = httpx.Timeout(timeout, connect=min(timeout, 10.0))

    # Calls are one-shot; failures surface to the caller unchanged
    transport = kwargs.pop("transport", None) or httpx.AsyncHTTPTransport(retries=0)

    return httpx.AsyncClient(
        timeout=timeout_config,
        headers=headers,
        transport=transport,
        **kwargs
    )
