"""Tagged result type returned by every mutation.

Mutations never raise for transport or store failures.  They return either
:class:`Ok` carrying the success value or :class:`Err` carrying the error
category and the :class:`~notiontx.errors.NotionTxError` that was caught::

    result = page.change_title("Roadmap")
    if isinstance(result, Err):
        log.warning("rename failed: %s", result.detail.message)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

from notiontx.errors import ErrorCode, NotionTxError

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful outcome."""

    value: T

    @property
    def ok(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Err:
    """Failed outcome.

    Attributes
    ----------
    kind:
        Category of the failure.
    detail:
        The caught error, with its message and structured context.
    """

    kind: ErrorCode
    detail: NotionTxError

    @property
    def ok(self) -> bool:
        return False

    def unwrap(self):
        """Re-raise the wrapped error."""
        raise self.detail

    @classmethod
    def from_error(cls, error: NotionTxError) -> Err:
        return cls(kind=ErrorCode(error.code), detail=error)


Result = Union[Ok[T], Err]
