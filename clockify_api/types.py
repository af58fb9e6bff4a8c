"""
Pydantic models for Clockify API types.
Wire names are kept as-is; every wire field is optional because Clockify
omits empty values.
"""
from datetime import datetime
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, PrivateAttr, ValidationInfo, field_validator


class _Resource(BaseModel):
    """Response model. A JSON null on a field with a non-null default keeps that default."""

    @field_validator("*", mode="before")
    @classmethod
    def _null_keeps_default(cls, value: Any, info: ValidationInfo) -> Any:
        if value is None and info.field_name is not None:
            field = cls.model_fields[info.field_name]
            if not field.is_required() and (
                field.default is not None or field.default_factory is not None
            ):
                return field.get_default(call_default_factory=True)
        return value


class HourlyRate(BaseModel):
    """Hourly rate in cents."""
    amount: Optional[int] = None
    currency: Optional[str] = None


class CostRate(BaseModel):
    """Cost rate in cents."""
    amount: Optional[int] = None
    currency: Optional[str] = None


class Membership(BaseModel):
    """Workspace or project membership."""
    userId: Optional[str] = None
    hourlyRate: Optional[HourlyRate] = None
    costRate: Optional[CostRate] = None
    targetId: Optional[str] = None
    membershipType: Optional[str] = None  # WORKSPACE, PROJECT, USERGROUP
    membershipStatus: Optional[str] = None  # PENDING, ACTIVE, DECLINED, INACTIVE


class AutomaticLock(BaseModel):
    changeDay: Optional[str] = None
    dayOfMonth: Optional[int] = None
    firstDay: Optional[str] = None
    olderThanPeriod: Optional[str] = None
    olderThanValue: Optional[int] = None
    type: Optional[str] = None


class Round(BaseModel):
    minutes: Optional[str] = None
    round: Optional[str] = None


class WorkspaceSettings(_Resource):
    """Workspace-wide settings."""
    adminOnlyPages: List[Any] = []
    automaticLock: Optional[AutomaticLock] = None
    canSeeTimeSheet: Optional[bool] = None
    canSeeTracker: Optional[bool] = None
    defaultBillableProjects: Optional[bool] = None
    forceDescription: Optional[bool] = None
    forceProjects: Optional[bool] = None
    forceTags: Optional[bool] = None
    forceTasks: Optional[bool] = None
    lockTimeEntries: Optional[datetime] = None
    onlyAdminsCreateProject: Optional[bool] = None
    onlyAdminsCreateTag: Optional[bool] = None
    onlyAdminsCreateTask: Optional[bool] = None
    onlyAdminsSeeAllTimeEntries: Optional[bool] = None
    onlyAdminsSeeBillableRates: Optional[bool] = None
    onlyAdminsSeeDashboard: Optional[bool] = None
    onlyAdminsSeePublicProjectsEntries: Optional[bool] = None
    projectFavorites: Optional[bool] = None
    projectGroupingLabel: Optional[str] = None
    projectPickerSpecialFilter: Optional[bool] = None
    round: Optional[Round] = None
    timeRoundingInReports: Optional[bool] = None
    trackTimeDownToSecond: Optional[bool] = None
    isProjectPublicByDefault: Optional[bool] = None
    featureSubscriptionType: Optional[str] = None


class Estimate(BaseModel):
    estimate: Optional[str] = None  # ISO 8601 duration
    type: Optional[str] = None  # AUTO, MANUAL


class TimeEstimate(BaseModel):
    estimate: Optional[str] = None  # ISO 8601 duration
    type: Optional[str] = None  # AUTO, MANUAL
    resetOption: Optional[str] = None  # MONTHLY
    active: Optional[bool] = None
    includeNonBillable: Optional[bool] = None


class BudgetEstimate(BaseModel):
    estimate: Optional[int] = None
    type: Optional[str] = None  # AUTO, MANUAL
    resetOption: Optional[str] = None
    active: Optional[bool] = None


class CustomField(BaseModel):
    customFieldId: Optional[str] = None
    name: Optional[str] = None
    type: Optional[str] = None
    value: Any = None
    status: Optional[str] = None


class Workspace(_Resource):
    """Workspace model."""
    id: Optional[str] = None
    name: Optional[str] = None
    hourlyRate: Optional[HourlyRate] = None
    imageUrl: Optional[str] = None
    memberships: List[Membership] = []
    workspaceSettings: Optional[WorkspaceSettings] = None

    _client_node: Any = PrivateAttr(default=None)
    _project_node: Any = PrivateAttr(default=None)

    @property
    def client(self):
        """ClientNode scoped to this workspace."""
        if self._client_node is None:
            raise RuntimeError(f"workspace {self.id!r} is not attached to a Clockify client")
        return self._client_node

    @property
    def project(self):
        """ProjectNode scoped to this workspace."""
        if self._project_node is None:
            raise RuntimeError(f"workspace {self.id!r} is not attached to a Clockify client")
        return self._project_node


class Client(_Resource):
    """Client model."""
    id: Optional[str] = None
    name: Optional[str] = None
    workspaceId: Optional[str] = None
    archived: bool = False
    email: Optional[str] = None
    address: Optional[str] = None
    note: Optional[str] = None


class Task(_Resource):
    """Task model."""
    id: Optional[str] = None
    name: Optional[str] = None
    projectId: Optional[str] = None
    assigneeIds: List[str] = []
    assigneeId: Optional[str] = None
    userGroupIds: List[str] = []
    estimate: Optional[str] = None  # ISO 8601 duration
    status: Optional[str] = None  # ACTIVE, DONE
    duration: Optional[str] = None
    billable: Optional[bool] = None
    hourlyRate: Optional[HourlyRate] = None
    costRate: Optional[CostRate] = None


class Project(_Resource):
    """Project model."""
    id: Optional[str] = None
    name: Optional[str] = None
    hourlyRate: Optional[HourlyRate] = None
    clientId: Optional[str] = None
    clientName: Optional[str] = None
    workspaceId: Optional[str] = None
    billable: bool = False
    memberships: List[Membership] = []
    color: Optional[str] = None
    estimate: Optional[Estimate] = None
    archived: bool = False
    tasks: List[Task] = []
    note: Optional[str] = None
    duration: Optional[str] = None
    costRate: Optional[CostRate] = None
    timeEstimate: Optional[TimeEstimate] = None
    budgetEstimate: Optional[BudgetEstimate] = None
    customFields: List[CustomField] = []
    public: Optional[bool] = None
    template: Optional[bool] = None
    favorite: Optional[bool] = None

    _task_node: Any = PrivateAttr(default=None)

    @property
    def task(self):
        """TaskNode scoped to this project."""
        if self._task_node is None:
            raise RuntimeError(f"project {self.id!r} is not attached to a Clockify client")
        return self._task_node


# --- Request bodies ---


class _Body(BaseModel):
    model_config = ConfigDict(extra="forbid")


class ClientAdd(_Body):
    """Request body for creating a client."""
    name: str
    email: Optional[str] = None
    address: Optional[str] = None
    note: Optional[str] = None


class ClientUpdate(_Body):
    """Request body for updating a client."""
    name: Optional[str] = None
    archived: Optional[bool] = None
    email: Optional[str] = None
    address: Optional[str] = None
    note: Optional[str] = None


class ProjectAdd(_Body):
    """Request body for creating a project."""
    name: str
    clientId: Optional[str] = None
    isPublic: Optional[bool] = None
    color: Optional[str] = None
    note: Optional[str] = None
    billable: Optional[bool] = None
    hourlyRate: Optional[HourlyRate] = None
    costRate: Optional[CostRate] = None
    memberships: Optional[List[Membership]] = None
    estimate: Optional[Estimate] = None


class ProjectUpdate(_Body):
    """Request body for updating a project."""
    name: Optional[str] = None
    clientId: Optional[str] = None
    isPublic: Optional[bool] = None
    hourlyRate: Optional[HourlyRate] = None
    costRate: Optional[CostRate] = None
    color: Optional[str] = None
    note: Optional[str] = None
    billable: Optional[bool] = None
    archived: Optional[bool] = None


class ProjectEstimateUpdate(_Body):
    """Request body for updating a project estimate."""
    timeEstimate: Optional[TimeEstimate] = None
    budgetEstimate: Optional[BudgetEstimate] = None


class ProjectMembershipsUpdate(_Body):
    """Request body for replacing project memberships."""
    memberships: List[Membership] = []


class ProjectTemplateUpdate(_Body):
    """Request body for marking a project as template."""
    isTemplate: bool


class TaskAdd(_Body):
    """Request body for creating a task."""
    name: str
    assigneeIds: Optional[List[str]] = None
    estimate: Optional[str] = None
    status: Optional[str] = None
    billable: Optional[bool] = None


class TaskUpdate(_Body):
    """Request body for updating a task."""
    name: Optional[str] = None
    assigneeIds: Optional[List[str]] = None
    estimate: Optional[str] = None
    billable: Optional[bool] = None
    status: Optional[str] = None
    hourlyRate: Optional[HourlyRate] = None
    costRate: Optional[CostRate] = None
