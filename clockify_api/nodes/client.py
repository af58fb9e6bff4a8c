from typing import List, Optional

from clockify_api.decode import decode_many, decode_one
from clockify_api.nodes.base import Node
from clockify_api.options import DESCENDING, Option
from clockify_api.request import Operation
from clockify_api.types import Client, ClientAdd, ClientUpdate

ALL = Operation(
    "client.all",
    "GET",
    query={"archived": False, "page": 1, "page-size": 50, "sort-order": DESCENDING},
    query_keys=frozenset({"archived", "name", "page", "page-size", "sort-column", "sort-order"}),
)
GET = Operation("client.get", "GET")
ADD = Operation(
    "client.add",
    "POST",
    body_keys=frozenset({"name", "email", "address", "note"}),
    body_model=ClientAdd,
)
UPDATE = Operation(
    "client.update",
    "PUT",
    query={"archive-projects": False},
    query_keys=frozenset({"archive-projects"}),
    body_keys=frozenset({"name", "archived", "email", "address", "note"}),
    body_model=ClientUpdate,
)
DELETE = Operation("client.delete", "DELETE")


class ClientNode(Node):
    """Clients of one workspace."""

    def __init__(self, transport, base_url: str, workspace_id: str):
        super().__init__(transport, base_url)
        self.workspace_id = workspace_id

    def _url(self, client_id: Optional[str] = None) -> str:
        url = f"{self._base_url}/workspaces/{self.workspace_id}/clients"
        return f"{url}/{client_id}" if client_id else url

    async def all(self, *options: Option) -> List[Client]:
        """
        List clients.
        Defaults: archived=false, page=1, page-size=50, sort-order=DESCENDING.
        """
        raw = await self._send(ALL, self._url(), options)
        return decode_many(Client, raw)

    async def get(self, client_id: str, *options: Option) -> Client:
        raw = await self._send(GET, self._url(client_id), options)
        return decode_one(Client, raw)

    async def add(self, name: str, *options: Option) -> Client:
        """Create a client named `name`."""
        raw = await self._send(ADD, self._url(), options, {"name": name})
        return decode_one(Client, raw)

    async def update(self, client_id: str, *options: Option) -> Client:
        """
        Update a client. Field options (name, archived, ...) go to the body;
        with_archive_projects is the only query parameter.
        """
        raw = await self._send(UPDATE, self._url(client_id), options)
        return decode_one(Client, raw)

    async def delete(self, client_id: str, *options: Option) -> Optional[Client]:
        """Delete a client. Returns the deleted client when Clockify echoes it."""
        raw = await self._send(DELETE, self._url(client_id), options)
        return decode_one(Client, raw) if raw else None
