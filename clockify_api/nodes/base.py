from typing import Any, Iterable, Mapping, Optional

from clockify_api.options import Option
from clockify_api.request import Operation, build_request
from clockify_api.transport import Transport


class Node:
    """Shared plumbing of the resource nodes: build, send, return raw bytes."""

    def __init__(self, transport: Transport, base_url: str):
        self._transport = transport
        self._base_url = base_url

    async def _send(
        self,
        operation: Operation,
        url: str,
        options: Iterable[Option],
        fields: Optional[Mapping[str, Any]] = None,
    ) -> bytes:
        descriptor = build_request(operation, url, options, fields)
        return await self._transport.send(descriptor)
