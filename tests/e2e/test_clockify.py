"""
E2E tests for the client resource against a stateful respx mock of Clockify.
"""
import json
from unittest import mock

import httpx
import pytest
import respx

from clockify_api import (
    Clockify,
    ClockifyAPIError,
    with_archive_projects,
    with_name,
)

API_KEY = "test_api_key"
BASE = "https://api.clockify.test/v1"

CLIENTS = r"^/v1/workspaces/(?P<workspace_id>[^/]+)/clients$"
CLIENT = r"^/v1/workspaces/(?P<workspace_id>[^/]+)/clients/(?P<client_id>[^/]+)$"


class ClientMockServer:
    """In-memory Clockify serving one workspace and its clients."""

    def __init__(self):
        self.workspaces = [{"id": "ws_001", "name": "Test Workspace"}]
        self.clients = []
        self._next_id = 1
        self.routes = {}

    def add_clients(self, workspace_id, count):
        for _ in range(count):
            self._new_client(workspace_id, f"Client {self._next_id}")

    def _new_client(self, workspace_id, name):
        client = {
            "id": str(self._next_id),
            "name": name,
            "workspaceId": workspace_id,
            "archived": False,
        }
        self._next_id += 1
        self.clients.append(client)
        return client

    def _find(self, client_id):
        for c in self.clients:
            if c["id"] == client_id:
                return c
        return None

    def install(self, router):
        self.routes["workspaces"] = router.get(path="/v1/workspaces").mock(
            side_effect=self._guard(self.list_workspaces)
        )
        self.routes["all"] = router.get(path__regex=CLIENTS).mock(side_effect=self._guard(self.all))
        self.routes["add"] = router.post(path__regex=CLIENTS).mock(side_effect=self._guard(self.add))
        self.routes["get"] = router.get(path__regex=CLIENT).mock(side_effect=self._guard(self.get))
        self.routes["update"] = router.put(path__regex=CLIENT).mock(
            side_effect=self._guard(self.update)
        )
        self.routes["delete"] = router.delete(path__regex=CLIENT).mock(
            side_effect=self._guard(self.delete)
        )

    @staticmethod
    def _guard(handler):
        def checked(request, **kwargs):
            if request.headers.get("X-Api-Key") != API_KEY:
                return httpx.Response(401)
            return handler(request, **kwargs)

        return checked

    def list_workspaces(self, request):
        return httpx.Response(200, json=self.workspaces)

    def all(self, request, workspace_id):
        name = request.url.params.get("name")
        found = [
            c
            for c in self.clients
            if c["workspaceId"] == workspace_id and (not name or name in c["name"])
        ]
        return httpx.Response(200, json=found)

    def get(self, request, workspace_id, client_id):
        client = self._find(client_id)
        if client is None:
            return httpx.Response(404, json={"message": "Client not found"})
        return httpx.Response(200, json=client)

    def add(self, request, workspace_id):
        fields = json.loads(request.content)
        return httpx.Response(201, json=self._new_client(workspace_id, fields["name"]))

    def update(self, request, workspace_id, client_id):
        client = self._find(client_id)
        if client is None:
            return httpx.Response(404)
        fields = json.loads(request.content)
        client.update({k: v for k, v in fields.items() if k in ("name", "archived")})
        return httpx.Response(200, json=client)

    def delete(self, request, workspace_id, client_id):
        client = self._find(client_id)
        if client is None:
            return httpx.Response(404)
        self.clients.remove(client)
        return httpx.Response(200, json=client)


@pytest.fixture
def server():
    mock_server = ClientMockServer()
    with respx.mock(assert_all_called=False) as router:
        mock_server.install(router)
        yield mock_server


@pytest.fixture
def clockify():
    return Clockify(api_key=API_KEY, base_url=BASE, timeout=5.0)


async def first_workspace(clockify):
    workspaces = await clockify.workspace.all()
    assert len(workspaces) == 1
    return workspaces[0]


@pytest.mark.asyncio
async def test_all_returns_seeded_clients(server, clockify):
    """Scenario A: listing returns every seeded client in seed order."""
    async with clockify:
        ws = await first_workspace(clockify)
        server.add_clients(ws.id, 5)

        clients = await ws.client.all()

    assert len(clients) == 5
    assert [c.name for c in clients] == [f"Client {i}" for i in range(1, 6)]


@pytest.mark.asyncio
async def test_all_filters_by_name(server, clockify):
    async with clockify:
        ws = await first_workspace(clockify)
        server.add_clients(ws.id, 5)

        clients = await ws.client.all(with_name("Client 3"))

    assert [c.id for c in clients] == ["3"]


@pytest.mark.asyncio
async def test_get_missing_client_is_not_found(server, clockify):
    """Scenario B: unknown id yields a not-found error and no decoding."""
    with mock.patch("clockify_api.nodes.client.decode_one") as decode:
        async with clockify:
            ws = await first_workspace(clockify)
            with pytest.raises(ClockifyAPIError) as exc_info:
                await ws.client.get("does-not-exist")

    assert exc_info.value.status_code == 404
    assert exc_info.value.code == "not_found"
    decode.assert_not_called()


@pytest.mark.asyncio
async def test_add_then_get(server, clockify):
    """Scenario C: created client can be fetched back by its id."""
    want_name = "Dummy Name"

    async with clockify:
        ws = await first_workspace(clockify)
        created = await ws.client.add(want_name)
        fetched = await ws.client.get(created.id)

    assert created.name == want_name
    assert fetched.name == want_name
    assert fetched.workspaceId == ws.id


@pytest.mark.asyncio
async def test_update_archive_projects_and_name(server, clockify):
    """Scenario D: name travels in the body, archive-projects in the query."""
    async with clockify:
        ws = await first_workspace(clockify)
        server.add_clients(ws.id, 1)

        updated = await ws.client.update("1", with_archive_projects(True), with_name("Client 2"))

    assert updated.name == "Client 2"
    request = server.routes["update"].calls.last.request
    assert json.loads(request.content) == {"name": "Client 2"}
    assert request.url.params["archive-projects"] == "true"
    assert "name" not in request.url.params


@pytest.mark.asyncio
async def test_delete_reduces_listing_by_one(server, clockify):
    """Scenario E: delete then list shows one client less."""
    async with clockify:
        ws = await first_workspace(clockify)
        server.add_clients(ws.id, 5)
        before = await ws.client.all()

        deleted = await ws.client.delete("1")
        after = await ws.client.all()

    assert deleted.name == "Client 1"
    assert len(after) == len(before) - 1
    assert "1" not in [c.id for c in after]


@pytest.mark.asyncio
async def test_wrong_api_key_is_unauthorized(server):
    async with Clockify(api_key="wrong", base_url=BASE) as clockify:
        with pytest.raises(ClockifyAPIError) as exc_info:
            await clockify.workspace.all()

    assert exc_info.value.status_code == 401
    assert exc_info.value.code == "unauthorized"
