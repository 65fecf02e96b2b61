"""Block deletion wrappers for the private API.

Deletion does not go through ``submitTransaction``; ``/deleteBlocks``
takes a flat list of ids and a permanent-delete flag.
"""

from __future__ import annotations

from typing import Any

from notiontx.observability import NoopMetricsHook
from notiontx.transaction import DeleteRequest

from .transport import AsyncNotionTransport, NotionTransport


class BlockAPI:
    """Synchronous wrapper for block deletion.

    Parameters
    ----------
    transport:
        A configured :class:`NotionTransport` instance.
    metrics:
        Optional metrics backend.
    """

    def __init__(self, transport: NotionTransport, metrics: Any | None = None) -> None:
        self._transport = transport
        self._metrics = metrics if metrics is not None else NoopMetricsHook()

    def delete_blocks(self, request: DeleteRequest) -> dict[str, Any]:
        """Permanently delete every block listed in *request*."""
        response = self._transport.request(
            "POST", "/deleteBlocks", json=request.to_dict()
        )
        self._metrics.increment("notiontx.blocks_deleted_total", value=len(request.block_ids))
        return response


class AsyncBlockAPI:
    """Asynchronous wrapper for block deletion.

    Mirrors :class:`BlockAPI` but all methods are coroutines.
    """

    def __init__(self, transport: AsyncNotionTransport, metrics: Any | None = None) -> None:
        self._transport = transport
        self._metrics = metrics if metrics is not None else NoopMetricsHook()

    async def delete_blocks(self, request: DeleteRequest) -> dict[str, Any]:
        """Permanently delete every block listed in *request* (async)."""
        response = await self._transport.request(
            "POST", "/deleteBlocks", json=request.to_dict()
        )
        self._metrics.increment("notiontx.blocks_deleted_total", value=len(request.block_ids))
        return response
