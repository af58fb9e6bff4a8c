from typing import List, Optional

from clockify_api.decode import decode_many, decode_one
from clockify_api.nodes.base import Node
from clockify_api.options import Option
from clockify_api.request import Operation
from clockify_api.types import Task, TaskAdd, TaskUpdate

ALL = Operation(
    "task.all",
    "GET",
    query={"page": 1, "page-size": 50, "strict-name-search": False},
    query_keys=frozenset(
        {"is-active", "name", "strict-name-search", "page", "page-size", "sort-column", "sort-order"}
    ),
)
GET = Operation("task.get", "GET")
ADD = Operation(
    "task.add",
    "POST",
    body_keys=frozenset({"name", "assigneeIds", "estimate", "status", "billable"}),
    body_model=TaskAdd,
)
UPDATE = Operation(
    "task.update",
    "PUT",
    body_keys=frozenset(
        {"name", "assigneeIds", "estimate", "status", "billable", "hourly-rate", "cost-rate"}
    ),
    body_model=TaskUpdate,
)
DELETE = Operation("task.delete", "DELETE")


class TaskNode(Node):
    """Tasks of one project."""

    def __init__(self, transport, base_url: str, workspace_id: str, project_id: str):
        super().__init__(transport, base_url)
        self.workspace_id = workspace_id
        self.project_id = project_id

    def _url(self, task_id: Optional[str] = None) -> str:
        url = f"{self._base_url}/workspaces/{self.workspace_id}/projects/{self.project_id}/tasks"
        return f"{url}/{task_id}" if task_id else url

    async def all(self, *options: Option) -> List[Task]:
        """
        List tasks.
        Defaults: page=1, page-size=50, strict-name-search=false.
        """
        raw = await self._send(ALL, self._url(), options)
        return decode_many(Task, raw)

    async def get(self, task_id: str, *options: Option) -> Task:
        raw = await self._send(GET, self._url(task_id), options)
        return decode_one(Task, raw)

    async def add(self, name: str, *options: Option) -> Task:
        raw = await self._send(ADD, self._url(), options, {"name": name})
        return decode_one(Task, raw)

    async def update(self, task_id: str, *options: Option) -> Task:
        raw = await self._send(UPDATE, self._url(task_id), options)
        return decode_one(Task, raw)

    async def delete(self, task_id: str, *options: Option) -> Optional[Task]:
        raw = await self._send(DELETE, self._url(task_id), options)
        return decode_one(Task, raw) if raw else None
