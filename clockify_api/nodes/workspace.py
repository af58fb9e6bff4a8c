from typing import List

from clockify_api.decode import decode_many
from clockify_api.nodes.base import Node
from clockify_api.nodes.client import ClientNode
from clockify_api.nodes.project import ProjectNode
from clockify_api.options import Option
from clockify_api.request import Operation
from clockify_api.types import Workspace

ALL = Operation("workspace.all", "GET")


class WorkspaceNode(Node):
    """Workspaces of the API key owner."""

    async def all(self, *options: Option) -> List[Workspace]:
        """List workspaces. Each one carries client and project nodes scoped to it."""
        raw = await self._send(ALL, f"{self._base_url}/workspaces", options)
        workspaces = decode_many(Workspace, raw)
        for w in workspaces:
            w._client_node = ClientNode(self._transport, self._base_url, w.id)
            w._project_node = ProjectNode(self._transport, self._base_url, w.id)
        return workspaces
