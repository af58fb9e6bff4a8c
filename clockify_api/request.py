"""
Request builder: merges operation defaults with per-call options into a
single RequestDescriptor.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, Iterable, Mapping, Optional, Type

from pydantic import BaseModel, ValidationError

from clockify_api.errors import RequestBuildError
from clockify_api.options import (
    BOOL,
    FIELDS,
    INT,
    Option,
    Params,
    RequestContext,
    decode_value,
    encode_value,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Operation:
    """
    Constant declaration of one resource operation.

    query: default query parameters, applied before options.
    query_keys: query parameters the operation sends. Anything else written
        by an option is dropped.
    body_keys: option keys extracted into the JSON body. Never sent as query.
    body_defaults: body field values set before options are applied.
    body_model: request body schema; None means the request has no body.
    """
    name: str
    method: str
    query: Mapping[str, Any] = field(default_factory=dict)
    query_keys: FrozenSet[str] = frozenset()
    body_keys: FrozenSet[str] = frozenset()
    body_defaults: Mapping[str, Any] = field(default_factory=dict)
    body_model: Optional[Type[BaseModel]] = None

    def __post_init__(self):
        overlap = self.query_keys & self.body_keys
        if overlap:
            raise ValueError(f"{self.name}: keys both query and body: {sorted(overlap)}")


@dataclass
class RequestDescriptor:
    """Fully resolved request, ready for the transport."""
    method: str
    url: str
    params: Params = field(default_factory=dict)
    body: Optional[BaseModel] = None  # None: no body at all
    context: RequestContext = field(default_factory=RequestContext)

    def json_body(self) -> Optional[Dict[str, Any]]:
        if self.body is None:
            return None
        return self.body.model_dump(mode="json", exclude_none=True)


def apply_options(params: Params, context: RequestContext, options: Iterable[Option]) -> None:
    """Apply options in order; later writes to the same key win."""
    for opt in options:
        if opt.write_param is not None:
            opt.write_param(params)
        else:
            opt.mutate_context(context)


def _normalize(key: str, values: list) -> list:
    spec = FIELDS.get(key)
    if spec is None or spec.kind not in (BOOL, INT):
        return values
    return encode_value(spec.kind, decode_value(key, values))


def build_request(
    operation: Operation,
    url: str,
    options: Iterable[Option] = (),
    fields: Optional[Mapping[str, Any]] = None,
) -> RequestDescriptor:
    """
    Build the descriptor for one call of `operation`.

    `fields` are required body fields given positionally by the caller
    (e.g. the name of a new client), keyed by body field name.
    """
    params: Params = {}
    for key, value in operation.query.items():
        params[key] = encode_value(FIELDS[key].kind, value)
    context = RequestContext()
    apply_options(params, context, options)

    body = None
    if operation.body_model is not None:
        raw: Dict[str, Any] = dict(operation.body_defaults)
        raw.update(fields or {})
        for key in operation.body_keys:
            if key in params:
                raw[FIELDS[key].body] = decode_value(key, params[key])
        try:
            body = operation.body_model.model_validate(raw)
        except ValidationError as e:
            raise RequestBuildError(f"{operation.name}: invalid body: {e}") from e

    for key in operation.body_keys:
        params.pop(key, None)

    unused = sorted(k for k in params if k not in operation.query_keys)
    if unused:
        logger.warning(f"{operation.name}: ignoring options not used by this operation: {unused}")
        for key in unused:
            del params[key]

    params = {k: _normalize(k, v) for k, v in params.items()}

    return RequestDescriptor(
        method=operation.method,
        url=url,
        params=params,
        body=body,
        context=context,
    )
