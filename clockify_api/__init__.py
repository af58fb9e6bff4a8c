"""clockify_api package exports."""

from clockify_api.client import Clockify
from clockify_api.errors import (
    ClockifyAPIError,
    ClockifyError,
    DeadlineExceededError,
    DecodeError,
    NetworkError,
    RequestBuildError,
    RequestCancelledError,
    TransportError,
)
from clockify_api.nodes import ClientNode, ProjectNode, TaskNode, WorkspaceNode
from clockify_api.options import (
    ASCENDING,
    DESCENDING,
    ESTIMATE_AUTO,
    ESTIMATE_BUDGET,
    ESTIMATE_MANUAL,
    ESTIMATE_TIME,
    RESET_MONTHLY,
    Option,
    RequestContext,
    with_address,
    with_archive_projects,
    with_archived,
    with_assignee_ids,
    with_billable,
    with_budget_estimate,
    with_cancel,
    with_client_id,
    with_client_status,
    with_clients,
    with_color,
    with_contains_client,
    with_contains_users,
    with_cost_rate,
    with_deadline,
    with_email,
    with_estimate,
    with_estimate_active,
    with_estimate_kind,
    with_estimate_reset,
    with_estimate_type,
    with_hourly_rate,
    with_hydrated,
    with_is_active,
    with_is_public,
    with_is_template,
    with_memberships,
    with_name,
    with_note,
    with_page,
    with_page_size,
    with_sort_column,
    with_sort_order,
    with_status,
    with_strict_name_search,
    with_time_estimate,
    with_timeout,
    with_user_status,
    with_users,
)
from clockify_api.types import (
    BudgetEstimate,
    Client,
    CostRate,
    CustomField,
    Estimate,
    HourlyRate,
    Membership,
    Project,
    Task,
    TimeEstimate,
    Workspace,
    WorkspaceSettings,
)
from clockify_api.utils.logging import configure_logging

__all__ = [
    # Client
    "Clockify",
    "WorkspaceNode",
    "ClientNode",
    "ProjectNode",
    "TaskNode",
    # Exceptions
    "ClockifyError",
    "RequestBuildError",
    "TransportError",
    "ClockifyAPIError",
    "NetworkError",
    "RequestCancelledError",
    "DeadlineExceededError",
    "DecodeError",
    # Options
    "Option",
    "RequestContext",
    "ASCENDING",
    "DESCENDING",
    "ESTIMATE_AUTO",
    "ESTIMATE_BUDGET",
    "ESTIMATE_TIME",
    "RESET_MONTHLY",
    "ESTIMATE_MANUAL",
    "with_address",
    "with_archive_projects",
    "with_archived",
    "with_assignee_ids",
    "with_billable",
    "with_budget_estimate",
    "with_cancel",
    "with_client_id",
    "with_client_status",
    "with_clients",
    "with_color",
    "with_contains_client",
    "with_contains_users",
    "with_cost_rate",
    "with_deadline",
    "with_email",
    "with_estimate",
    "with_estimate_active",
    "with_estimate_kind",
    "with_estimate_reset",
    "with_estimate_type",
    "with_hourly_rate",
    "with_hydrated",
    "with_is_active",
    "with_is_public",
    "with_is_template",
    "with_memberships",
    "with_name",
    "with_note",
    "with_page",
    "with_page_size",
    "with_sort_column",
    "with_sort_order",
    "with_status",
    "with_strict_name_search",
    "with_time_estimate",
    "with_timeout",
    "with_user_status",
    "with_users",
    # Resources
    "Workspace",
    "WorkspaceSettings",
    "Client",
    "Project",
    "Task",
    "HourlyRate",
    "CostRate",
    "Membership",
    "Estimate",
    "TimeEstimate",
    "BudgetEstimate",
    "CustomField",
    # Logging
    "configure_logging",
]
