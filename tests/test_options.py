"""
Tests for request options.
"""
import asyncio
import time

import pytest

from clockify_api.errors import RequestBuildError
from clockify_api.options import (
    Option,
    RequestContext,
    decode_value,
    encode_value,
    with_archived,
    with_cancel,
    with_clients,
    with_cost_rate,
    with_hourly_rate,
    with_memberships,
    with_name,
    with_page,
    with_timeout,
)
from clockify_api.types import Membership


def test_option_requires_exactly_one_capability():
    """An option carries a parameter writer or a context mutator, never both."""
    with pytest.raises(ValueError):
        Option()
    with pytest.raises(ValueError):
        Option(write_param=lambda p: "x", mutate_context=lambda c: None)


def test_param_writer_returns_key():
    params = {}
    assert with_name("Acme").write_param(params) == "name"
    assert params == {"name": ["Acme"]}


def test_scalar_options_overwrite():
    """Same key twice: last value wins."""
    params = {}
    with_page(2).write_param(params)
    with_page(7).write_param(params)
    assert params == {"page": ["7"]}


def test_list_options_accumulate():
    params = {}
    with_clients("c1", "c2").write_param(params)
    with_clients("c3").write_param(params)
    assert params == {"clients": ["c1", "c2", "c3"]}


def test_bool_encoding():
    params = {}
    with_archived().write_param(params)
    assert params["archived"] == ["true"]
    with_archived(False).write_param(params)
    assert params["archived"] == ["false"]


def test_json_options_encode_models():
    params = {}
    with_hourly_rate(2500).write_param(params)
    with_memberships(Membership(userId="u1")).write_param(params)
    assert decode_value("hourly-rate", params["hourly-rate"]) == {"amount": 2500}
    assert decode_value("memberships", params["memberships"]) == [{"userId": "u1"}]


@pytest.mark.parametrize("make", [with_hourly_rate, with_cost_rate])
@pytest.mark.parametrize("flag", [True, False])
def test_rate_rejects_bool_amount(make, flag):
    with pytest.raises(RequestBuildError) as exc_info:
        make(flag)
    assert exc_info.value.stage == "build"


def test_cost_rate_amount_in_cents():
    params = {}
    with_cost_rate(1200).write_param(params)
    assert decode_value("cost-rate", params["cost-rate"]) == {"amount": 1200}


def test_encode_value_rejects_unserializable_json():
    with pytest.raises(RequestBuildError):
        encode_value("json", {"when": object()})


@pytest.mark.parametrize(
    "key,values,expected",
    [
        ("archived", ["true"], True),
        ("archived", ["FALSE"], False),
        ("page", ["3"], 3),
        ("clients", ["a", "b"], ["a", "b"]),
        ("name", ["first", "second"], "second"),
    ],
)
def test_decode_value(key, values, expected):
    assert decode_value(key, values) == expected


@pytest.mark.parametrize(
    "key,values",
    [
        ("archived", ["maybe"]),
        ("page", ["one"]),
        ("hourly-rate", ["{not json"]),
    ],
)
def test_decode_value_invalid(key, values):
    with pytest.raises(RequestBuildError) as exc_info:
        decode_value(key, values)
    assert exc_info.value.key == key


def test_context_options():
    event = asyncio.Event()
    ctx = RequestContext()
    with_cancel(event).mutate_context(ctx)
    with_timeout(30).mutate_context(ctx)

    assert ctx.cancel is event
    assert not ctx.cancelled
    assert 0 < ctx.remaining() <= 30

    event.set()
    assert ctx.cancelled


def test_background_context_is_unbounded():
    ctx = RequestContext()
    assert ctx.remaining() is None
    assert not ctx.cancelled


def test_timeout_is_relative_to_application():
    opt = with_timeout(10)
    ctx = RequestContext()
    before = time.monotonic()
    opt.mutate_context(ctx)
    assert ctx.deadline >= before + 10
