"""Metrics hook protocol and no-op default implementation.

Emitted metric names:

* ``notiontx.requests_total``                -- counter
* ``notiontx.request_duration_ms``           -- timing
* ``notiontx.transactions_submitted_total``  -- counter
* ``notiontx.operations_submitted_total``    -- counter
* ``notiontx.blocks_deleted_total``          -- counter
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class MetricsHook(Protocol):
    """Protocol that any metrics backend must satisfy.

    *tags* keys and values are strings; backends translate them into their
    own labelling mechanism.
    """

    def increment(
        self,
        name: str,
        value: int = 1,
        tags: dict[str, str] | None = None,
    ) -> None:
        """Increment a counter metric."""
        ...

    def timing(
        self,
        name: str,
        ms: float,
        tags: dict[str, str] | None = None,
    ) -> None:
        """Record a duration in milliseconds."""
        ...


class NoopMetricsHook:
    """Default backend that discards every data point."""

    __slots__ = ()

    def increment(
        self,
        name: str,
        value: int = 1,
        tags: dict[str, str] | None = None,
    ) -> None:
        pass

    def timing(
        self,
        name: str,
        ms: float,
        tags: dict[str, str] | None = None,
    ) -> None:
        pass
