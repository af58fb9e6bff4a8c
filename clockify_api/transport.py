"""
One-shot HTTP execution of request descriptors.
No retries: every failure is surfaced to the caller immediately.
"""
import asyncio
import logging
import time
from typing import Any, Awaitable, Collection

import httpx

from clockify_api.errors import (
    ClockifyAPIError,
    DeadlineExceededError,
    NetworkError,
    RequestCancelledError,
)
from clockify_api.options import RequestContext
from clockify_api.request import RequestDescriptor

logger = logging.getLogger(__name__)

OK = frozenset({200})
OK_OR_CREATED = frozenset({200, 201})


def _stage(method: str) -> str:
    return "del" if method == "DELETE" else method.lower()


async def _within(context: RequestContext, aw: Awaitable[Any], stage: str) -> Any:
    """Await `aw`, aborting it when the context is cancelled or its deadline passes."""
    remaining = context.remaining()
    if context.cancel is None:
        if remaining is None:
            return await aw
        try:
            return await asyncio.wait_for(aw, remaining)
        except asyncio.TimeoutError as e:
            raise DeadlineExceededError("context deadline exceeded", stage=stage) from e

    request = asyncio.ensure_future(aw)
    cancelled = asyncio.ensure_future(context.cancel.wait())
    try:
        done, _ = await asyncio.wait(
            {request, cancelled}, timeout=remaining, return_when=asyncio.FIRST_COMPLETED
        )
    finally:
        for task in (request, cancelled):
            if not task.done():
                task.cancel()
        await asyncio.gather(request, cancelled, return_exceptions=True)
    if request in done:
        return request.result()
    if cancelled in done:
        raise RequestCancelledError("context cancelled", stage=stage)
    raise DeadlineExceededError("context deadline exceeded", stage=stage)


def _error_for(response: httpx.Response, stage: str) -> ClockifyAPIError:
    status = response.status_code
    if status == 400:
        try:
            detail = response.json().get("message", "Unknown error")
        except (ValueError, AttributeError):
            detail = response.text or "Unknown error"
        return ClockifyAPIError("validation_error", f"Bad request: {detail}", 400, stage=stage)
    if status == 401:
        return ClockifyAPIError("unauthorized", "Invalid Clockify API key", 401, stage=stage)
    if status == 403:
        return ClockifyAPIError(
            "forbidden", "Insufficient permissions for this operation", 403, stage=stage
        )
    if status == 404:
        return ClockifyAPIError("not_found", "Resource not found", 404, stage=stage)
    if status == 429:
        return ClockifyAPIError(
            "rate_limited", "Clockify API rate limit exceeded", 429, stage=stage
        )
    if status >= 500:
        return ClockifyAPIError(
            "upstream_error", f"Clockify server error: {status}", status, stage=stage
        )
    return ClockifyAPIError("http_error", f"http error: status code {status}", status, stage=stage)


class Transport:
    """Executes descriptors over a shared httpx.AsyncClient."""

    def __init__(self, http: httpx.AsyncClient, api_key: str):
        self.http = http
        self.api_key = api_key

    def _headers(self) -> dict:
        return {"Content-Type": "application/json", "X-Api-Key": self.api_key}

    async def _do(
        self, method: str, descriptor: RequestDescriptor, success: Collection[int]
    ) -> bytes:
        stage = _stage(method)
        context = descriptor.context
        if context.cancelled:
            raise RequestCancelledError("context cancelled", stage=stage)
        remaining = context.remaining()
        if remaining is not None and remaining <= 0:
            raise DeadlineExceededError("context deadline exceeded", stage=stage)

        kwargs: dict = {"headers": self._headers()}
        if descriptor.params:
            kwargs["params"] = descriptor.params
        if method in ("POST", "PUT", "PATCH"):
            kwargs["json"] = descriptor.json_body()

        start = time.perf_counter()
        try:
            response = await _within(
                context, self.http.request(method, descriptor.url, **kwargs), stage
            )
        except httpx.TimeoutException as e:
            raise NetworkError(f"timeout: {e}", stage=stage) from e
        except httpx.HTTPError as e:
            raise NetworkError(f"do: {e}", stage=stage) from e

        duration_ms = int((time.perf_counter() - start) * 1000)
        logger.debug(
            f"{method} {response.request.url} -> {response.status_code}",
            extra={
                "method": method,
                "url": str(response.request.url),
                "status": response.status_code,
                "duration_ms": duration_ms,
            },
        )

        if response.status_code not in success:
            raise _error_for(response, stage)
        return response.content

    async def get(self, descriptor: RequestDescriptor) -> bytes:
        return await self._do("GET", descriptor, OK)

    async def post(self, descriptor: RequestDescriptor) -> bytes:
        return await self._do("POST", descriptor, OK_OR_CREATED)

    async def put(self, descriptor: RequestDescriptor) -> bytes:
        return await self._do("PUT", descriptor, OK)

    async def patch(self, descriptor: RequestDescriptor) -> bytes:
        return await self._do("PATCH", descriptor, OK)

    async def delete(self, descriptor: RequestDescriptor) -> bytes:
        return await self._do("DELETE", descriptor, OK)

    async def send(self, descriptor: RequestDescriptor) -> bytes:
        """Dispatch on the descriptor's method."""
        verb = {
            "GET": self.get,
            "POST": self.post,
            "PUT": self.put,
            "PATCH": self.patch,
            "DELETE": self.delete,
        }.get(descriptor.method)
        if verb is None:
            raise ValueError(f"unsupported method {descriptor.method!r}")
        return await verb(descriptor)
