"""Transaction submission wrappers for the private API.

Provides :class:`TransactionAPI` (sync) and :class:`AsyncTransactionAPI`
(async) around ``/submitTransaction``.
"""

from __future__ import annotations

from typing import Any

from notiontx.observability import NoopMetricsHook, get_logger
from notiontx.transaction import Request

from .transport import AsyncNotionTransport, NotionTransport

log = get_logger("notiontx.transactions")


def _record_submission(metrics: Any, request: Request) -> None:
    metrics.increment(
        "notiontx.transactions_submitted_total", value=len(request.transactions)
    )
    metrics.increment(
        "notiontx.operations_submitted_total", value=len(request.operations)
    )
    log.debug(
        "Submitting transaction",
        extra={
            "extra_fields": {
                "op": "submit_transaction",
                "request_id": request.request_id,
                "transactions": len(request.transactions),
                "operations": [
                    f"{op.command.value}:{op.table.value}:{'.'.join(op.path)}"
                    for op in request.operations
                ],
            }
        },
    )


class TransactionAPI:
    """Synchronous wrapper for transaction submission.

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

    def submit(self, request: Request) -> dict[str, Any]:
        """Submit *request* and return the (usually empty) response body."""
        _record_submission(self._metrics, request)
        return self._transport.request(
            "POST", "/submitTransaction", json=request.to_dict()
        )


class AsyncTransactionAPI:
    """Asynchronous wrapper for transaction submission.

    Mirrors :class:`TransactionAPI` but all methods are coroutines.
    """

    def __init__(self, transport: AsyncNotionTransport, metrics: Any | None = None) -> None:
        self._transport = transport
        self._metrics = metrics if metrics is not None else NoopMetricsHook()

    async def submit(self, request: Request) -> dict[str, Any]:
        """Submit *request* (async).  See :meth:`TransactionAPI.submit`."""
        _record_submission(self._metrics, request)
        return await self._transport.request(
            "POST", "/submitTransaction", json=request.to_dict()
        )
