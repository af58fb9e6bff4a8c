from typing import Iterable, List, Optional

from clockify_api.decode import decode_many, decode_one
from clockify_api.nodes.base import Node
from clockify_api.nodes.task import TaskNode
from clockify_api.options import DESCENDING, ESTIMATE_AUTO, Option
from clockify_api.request import Operation
from clockify_api.types import (
    Membership,
    Project,
    ProjectAdd,
    ProjectEstimateUpdate,
    ProjectMembershipsUpdate,
    ProjectTemplateUpdate,
    ProjectUpdate,
)

ALL = Operation(
    "project.all",
    "GET",
    query={
        "hydrated": False,
        "archived": False,
        "page": 1,
        "page-size": 50,
        "sort-order": DESCENDING,
    },
    query_keys=frozenset(
        {
            "hydrated",
            "archived",
            "name",
            "strict-name-search",
            "page",
            "page-size",
            "billable",
            "clients",
            "contains-client",
            "client-status",
            "users",
            "contains-users",
            "user-status",
            "is-template",
            "sort-column",
            "sort-order",
        }
    ),
)
GET = Operation("project.get", "GET")
ADD = Operation(
    "project.add",
    "POST",
    body_keys=frozenset(
        {
            "name",
            "client-id",
            "is-public",
            "color",
            "note",
            "billable",
            "hourly-rate",
            "cost-rate",
            "memberships",
        }
    ),
    body_defaults={"billable": True},
    body_model=ProjectAdd,
)
UPDATE = Operation(
    "project.update",
    "PUT",
    query={"estimate-type": ESTIMATE_AUTO},
    query_keys=frozenset({"estimate-type"}),
    body_keys=frozenset(
        {
            "name",
            "client-id",
            "is-public",
            "hourly-rate",
            "cost-rate",
            "color",
            "note",
            "billable",
            "archived",
        }
    ),
    body_model=ProjectUpdate,
)
UPDATE_ESTIMATE = Operation(
    "project.update_estimate",
    "PATCH",
    query_keys=frozenset({"active", "reset", "type"}),
    body_keys=frozenset({"time-estimate", "budget-estimate"}),
    body_model=ProjectEstimateUpdate,
)
UPDATE_MEMBERSHIPS = Operation(
    "project.update_memberships",
    "PATCH",
    body_keys=frozenset({"memberships"}),
    body_model=ProjectMembershipsUpdate,
)
UPDATE_TEMPLATE = Operation(
    "project.update_template",
    "PATCH",
    body_keys=frozenset({"is-template"}),
    body_model=ProjectTemplateUpdate,
)
DELETE = Operation("project.delete", "DELETE")


class ProjectNode(Node):
    """Projects of one workspace."""

    def __init__(self, transport, base_url: str, workspace_id: str):
        super().__init__(transport, base_url)
        self.workspace_id = workspace_id

    def _url(self, project_id: Optional[str] = None, sub: Optional[str] = None) -> str:
        url = f"{self._base_url}/workspaces/{self.workspace_id}/projects"
        if project_id:
            url = f"{url}/{project_id}"
        if sub:
            url = f"{url}/{sub}"
        return url

    def _attach(self, project: Project) -> Project:
        project._task_node = TaskNode(
            self._transport, self._base_url, self.workspace_id, project.id
        )
        return project

    def _decode(self, raw: bytes) -> Project:
        return self._attach(decode_one(Project, raw))

    async def all(self, *options: Option) -> List[Project]:
        """
        List projects.
        Defaults: hydrated=false, archived=false, page=1, page-size=50,
        sort-order=DESCENDING.
        """
        raw = await self._send(ALL, self._url(), options)
        return [self._attach(p) for p in decode_many(Project, raw)]

    async def get(self, project_id: str, *options: Option) -> Project:
        raw = await self._send(GET, self._url(project_id), options)
        return self._decode(raw)

    async def add(self, name: str, *options: Option) -> Project:
        """Create a project named `name`. New projects are billable unless with_billable(False)."""
        raw = await self._send(ADD, self._url(), options, {"name": name})
        return self._decode(raw)

    async def update(self, project_id: str, *options: Option) -> Project:
        """Update project fields. with_estimate_type is sent as query, defaulting to AUTO."""
        raw = await self._send(UPDATE, self._url(project_id), options)
        return self._decode(raw)

    async def update_estimate(self, project_id: str, *options: Option) -> Project:
        """
        Set time and/or budget estimate (with_time_estimate, with_budget_estimate).
        with_estimate_active, with_estimate_reset and with_estimate_kind go to the query.
        """
        raw = await self._send(UPDATE_ESTIMATE, self._url(project_id, "estimate"), options)
        return self._decode(raw)

    async def update_memberships(
        self, project_id: str, memberships: Iterable[Membership], *options: Option
    ) -> Project:
        """Replace the memberships of a project."""
        raw = await self._send(
            UPDATE_MEMBERSHIPS,
            self._url(project_id, "memberships"),
            options,
            {"memberships": list(memberships)},
        )
        return self._decode(raw)

    async def update_template(
        self, project_id: str, is_template: bool, *options: Option
    ) -> Project:
        raw = await self._send(
            UPDATE_TEMPLATE,
            self._url(project_id, "template"),
            options,
            {"isTemplate": is_template},
        )
        return self._decode(raw)

    async def delete(self, project_id: str, *options: Option) -> Optional[Project]:
        """Delete a project. Clockify only deletes archived projects."""
        raw = await self._send(DELETE, self._url(project_id), options)
        return self._decode(raw) if raw else None
