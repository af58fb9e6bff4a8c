"""
Entry point to the Clockify API.
"""
from typing import Optional

import httpx

from clockify_api.config import DEFAULT_BASE_URL, Settings
from clockify_api.nodes import ClientNode, ProjectNode, TaskNode, WorkspaceNode
from clockify_api.transport import Transport
from clockify_api.utils.http import create_http_client


class Clockify:
    """
    Async Clockify API client.

    Owns the API key, the base endpoint and one shared httpx.AsyncClient.
    Resource nodes handed out by this object share that connection pool.

        async with Clockify(api_key) as clockify:
            for ws in await clockify.workspace.all():
                clients = await ws.client.all(with_name("Acme"))
    """

    def __init__(
        self,
        api_key: str,
        base_url: Optional[str] = None,
        timeout: float = 20.0,
        http: Optional[httpx.AsyncClient] = None,
    ):
        if not api_key:
            raise ValueError("api_key must be provided")

        self.base_url = (base_url or DEFAULT_BASE_URL).rstrip("/")
        self._owns_http = http is None
        self.http = http or create_http_client(timeout=timeout)
        self.transport = Transport(self.http, api_key)
        self.workspace = WorkspaceNode(self.transport, self.base_url)

    @classmethod
    def from_env(cls, **kwargs) -> "Clockify":
        """Create a client from CLOCKIFY_* environment variables (or .env)."""
        settings = Settings()
        if not settings.CLOCKIFY_API_KEY:
            raise ValueError("CLOCKIFY_API_KEY must be set")
        kwargs.setdefault("base_url", settings.CLOCKIFY_BASE_URL)
        kwargs.setdefault("timeout", settings.CLOCKIFY_TIMEOUT)
        return cls(settings.CLOCKIFY_API_KEY, **kwargs)

    def client(self, workspace_id: str) -> ClientNode:
        return ClientNode(self.transport, self.base_url, workspace_id)

    def project(self, workspace_id: str) -> ProjectNode:
        return ProjectNode(self.transport, self.base_url, workspace_id)

    def task(self, workspace_id: str, project_id: str) -> TaskNode:
        return TaskNode(self.transport, self.base_url, workspace_id, project_id)

    async def aclose(self) -> None:
        if self._owns_http:
            await self.http.aclose()

    async def __aenter__(self) -> "Clockify":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()
