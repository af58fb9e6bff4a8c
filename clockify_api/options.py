"""
Per-call request options.

An Option either writes one query parameter or mutates the request context.
Parameter values are carried as strings so that the same option works as a
listing filter and, on Add/Update operations, can be extracted back out of
the query encoding into a JSON body field (see clockify_api.request).
"""
from __future__ import annotations

import asyncio
import json
import time
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional

from pydantic import BaseModel

from clockify_api.errors import RequestBuildError
from clockify_api.types import BudgetEstimate, CostRate, HourlyRate, Membership, TimeEstimate

Params = Dict[str, List[str]]

# Value kinds
STR = "str"
BOOL = "bool"
INT = "int"
LIST = "list"
JSON = "json"

ASCENDING = "ASCENDING"
DESCENDING = "DESCENDING"

ESTIMATE_AUTO = "AUTO"
ESTIMATE_MANUAL = "MANUAL"

ESTIMATE_TIME = "time"
ESTIMATE_BUDGET = "budget"
RESET_MONTHLY = "MONTHLY"


@dataclass(frozen=True)
class Field:
    """How one option key travels: query name, value kind and body field."""
    param: str
    kind: str
    body: Optional[str] = None


FIELDS: Dict[str, Field] = {
    f.param: f
    for f in (
        Field("name", STR, "name"),
        Field("archived", BOOL, "archived"),
        Field("page", INT),
        Field("page-size", INT),
        Field("sort-column", STR),
        Field("sort-order", STR),
        Field("billable", BOOL, "billable"),
        Field("hydrated", BOOL),
        Field("clients", LIST),
        Field("contains-client", BOOL),
        Field("client-status", STR),
        Field("users", LIST),
        Field("contains-users", BOOL),
        Field("user-status", STR),
        Field("is-template", BOOL, "isTemplate"),
        Field("estimate-type", STR),
        Field("archive-projects", BOOL),
        Field("is-active", BOOL),
        Field("strict-name-search", BOOL),
        Field("assigneeIds", LIST, "assigneeIds"),
        Field("estimate", STR, "estimate"),
        Field("status", STR, "status"),
        Field("client-id", STR, "clientId"),
        Field("is-public", BOOL, "isPublic"),
        Field("hourly-rate", JSON, "hourlyRate"),
        Field("cost-rate", JSON, "costRate"),
        Field("color", STR, "color"),
        Field("note", STR, "note"),
        Field("email", STR, "email"),
        Field("address", STR, "address"),
        Field("memberships", JSON, "memberships"),
        Field("time-estimate", JSON, "timeEstimate"),
        Field("budget-estimate", JSON, "budgetEstimate"),
        Field("active", STR),
        Field("reset", STR),
        Field("type", STR),
    )
}


@dataclass
class RequestContext:
    """Cancellation and deadline carried by one call. Unbounded by default."""
    deadline: Optional[float] = None  # time.monotonic() based
    cancel: Optional[asyncio.Event] = None

    def remaining(self) -> Optional[float]:
        if self.deadline is None:
            return None
        return self.deadline - time.monotonic()

    @property
    def cancelled(self) -> bool:
        return self.cancel is not None and self.cancel.is_set()


@dataclass(frozen=True)
class Option:
    """A single request modifier. Carries exactly one capability."""
    write_param: Optional[Callable[[Params], str]] = None
    mutate_context: Optional[Callable[[RequestContext], None]] = None

    def __post_init__(self):
        if (self.write_param is None) == (self.mutate_context is None):
            raise ValueError("an option must either write a parameter or mutate the context")


def _dump(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump(exclude_none=True)
    if isinstance(value, (list, tuple)):
        return [_dump(v) for v in value]
    return value


def encode_value(kind: str, value: Any) -> List[str]:
    """Encode a native option value into its query representation."""
    if kind == BOOL and isinstance(value, bool):
        return ["true" if value else "false"]
    if kind == LIST:
        if isinstance(value, str):
            return [value]
        return [str(v) for v in value]
    if kind == JSON:
        if isinstance(value, str):
            return [value]
        try:
            return [json.dumps(_dump(value))]
        except (TypeError, ValueError) as e:
            raise RequestBuildError(f"cannot encode {value!r} as JSON: {e}") from e
    return [str(value)]


def decode_value(key: str, values: List[str]) -> Any:
    """
    Parse the query representation of an option back into its native type.
    Raises RequestBuildError on an invalid value.
    """
    kind = FIELDS[key].kind if key in FIELDS else STR
    if kind == LIST:
        return list(values)
    if not values:
        raise RequestBuildError(f"option {key} has no value", key=key)
    raw = values[-1]
    if kind == BOOL:
        lowered = raw.lower()
        if lowered in ("true", "false"):
            return lowered == "true"
        raise RequestBuildError(f"invalid value {raw!r} for option {key}: expected bool", key=key)
    if kind == INT:
        try:
            return int(raw)
        except ValueError as e:
            raise RequestBuildError(
                f"invalid value {raw!r} for option {key}: expected int", key=key
            ) from e
    if kind == JSON:
        try:
            return json.loads(raw)
        except ValueError as e:
            raise RequestBuildError(
                f"invalid value {raw!r} for option {key}: expected JSON", key=key
            ) from e
    return raw


def param(key: str, value: Any) -> Option:
    """
    Option writing `value` under `key`. List-kind keys accumulate, every
    other key overwrites the previous value.
    """
    spec = FIELDS.get(key) or Field(key, STR)
    encoded = encode_value(spec.kind, value)

    def write(params: Params) -> str:
        if spec.kind == LIST:
            params.setdefault(key, []).extend(encoded)
        else:
            params[key] = list(encoded)
        return key

    return Option(write_param=write)


# --- Filters and fields ---


def with_name(name: str) -> Option:
    return param("name", name)


def with_archived(archived: bool = True) -> Option:
    return param("archived", archived)


def with_page(page: int) -> Option:
    return param("page", page)


def with_page_size(page_size: int) -> Option:
    """Page size, max 5000."""
    return param("page-size", page_size)


def with_sort_column(column: str) -> Option:
    return param("sort-column", column)


def with_sort_order(order: str) -> Option:
    """ASCENDING or DESCENDING."""
    return param("sort-order", order)


def with_billable(billable: bool = True) -> Option:
    return param("billable", billable)


def with_hydrated(hydrated: bool = True) -> Option:
    """Include custom fields, tasks and memberships of listed projects."""
    return param("hydrated", hydrated)


def with_clients(*client_ids: str) -> Option:
    """Filter projects by client ids. Accumulates across calls."""
    return param("clients", client_ids)


def with_contains_client(contains: bool = True) -> Option:
    return param("contains-client", contains)


def with_client_status(status: str) -> Option:
    """ACTIVE or ARCHIVED."""
    return param("client-status", status)


def with_users(*user_ids: str) -> Option:
    """Filter projects by user ids with access. Accumulates across calls."""
    return param("users", user_ids)


def with_contains_users(contains: bool = True) -> Option:
    return param("contains-users", contains)


def with_user_status(status: str) -> Option:
    """ACTIVE or INACTIVE."""
    return param("user-status", status)


def with_is_template(is_template: bool = True) -> Option:
    return param("is-template", is_template)


def with_estimate_type(estimate_type: str) -> Option:
    """AUTO (task based) or MANUAL (whole project)."""
    return param("estimate-type", estimate_type)


def with_archive_projects(archive: bool = True) -> Option:
    """Archive the projects of a client being archived."""
    return param("archive-projects", archive)


def with_is_active(active: bool = True) -> Option:
    return param("is-active", active)


def with_strict_name_search(strict: bool = True) -> Option:
    return param("strict-name-search", strict)


def with_assignee_ids(*assignee_ids: str) -> Option:
    """Accumulates across calls."""
    return param("assigneeIds", assignee_ids)


def with_estimate(estimate: str) -> Option:
    """ISO 8601 duration, e.g. PT1H30M."""
    return param("estimate", estimate)


def with_status(status: str) -> Option:
    """ACTIVE or DONE."""
    return param("status", status)


def with_client_id(client_id: str) -> Option:
    return param("client-id", client_id)


def with_is_public(is_public: bool = True) -> Option:
    return param("is-public", is_public)


def _check_rate(key: str, rate: Any) -> None:
    if isinstance(rate, bool):
        raise RequestBuildError(
            f"invalid value {rate!r} for option {key}: expected amount in cents", key=key
        )


def with_hourly_rate(rate: HourlyRate | int) -> Option:
    """Hourly rate, or its amount in cents."""
    _check_rate("hourly-rate", rate)
    if isinstance(rate, int):
        rate = HourlyRate(amount=rate)
    return param("hourly-rate", rate)


def with_cost_rate(rate: CostRate | int) -> Option:
    _check_rate("cost-rate", rate)
    if isinstance(rate, int):
        rate = CostRate(amount=rate)
    return param("cost-rate", rate)


def with_color(color: str) -> Option:
    """Hex color, e.g. #f44336."""
    return param("color", color)


def with_note(note: str) -> Option:
    return param("note", note)


def with_email(email: str) -> Option:
    return param("email", email)


def with_address(address: str) -> Option:
    return param("address", address)


def with_memberships(*memberships: Membership) -> Option:
    return param("memberships", list(memberships))


def with_time_estimate(estimate: TimeEstimate) -> Option:
    return param("time-estimate", estimate)


def with_budget_estimate(estimate: BudgetEstimate) -> Option:
    return param("budget-estimate", estimate)


def with_estimate_active(active: str) -> Option:
    """Which estimate is active: time or budget. Leave unset for no estimate."""
    return param("active", active)


def with_estimate_reset(reset: str) -> Option:
    """MONTHLY resets the estimate every month."""
    return param("reset", reset)


def with_estimate_kind(kind: str) -> Option:
    """MANUAL estimates the whole project, AUTO is task based."""
    return param("type", kind)


# --- Context ---


def with_timeout(seconds: float) -> Option:
    """Fail the call if it has not completed `seconds` after it starts."""
    def mutate(ctx: RequestContext) -> None:
        ctx.deadline = time.monotonic() + seconds

    return Option(mutate_context=mutate)


def with_deadline(deadline: float) -> Option:
    """Absolute deadline on the time.monotonic() clock."""
    def mutate(ctx: RequestContext) -> None:
        ctx.deadline = deadline

    return Option(mutate_context=mutate)


def with_cancel(event: asyncio.Event) -> Option:
    """Abort the call once `event` is set."""
    def mutate(ctx: RequestContext) -> None:
        ctx.cancel = event

    return Option(mutate_context=mutate)
