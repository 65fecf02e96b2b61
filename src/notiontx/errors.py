"""Error hierarchy for the notiontx client.

Every public error class inherits from :class:`NotionTxError`.  Each carries
a machine-readable ``code`` (from :class:`ErrorCode`), a human-readable
``message``, an optional structured ``context`` dict, and an optional
``cause`` (chained exception).

Mutation methods on the handles never let these escape: they are wrapped in
an :class:`~notiontx.result.Err` whose ``kind`` is the error's code.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

# ---------------------------------------------------------------------------
# Error code enum
# ---------------------------------------------------------------------------

class ErrorCode(str, Enum):
    """Machine-readable error codes for every error the client can raise."""

    MALFORMED_IDENTIFIER = "MALFORMED_IDENTIFIER"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    AUTH_ERROR = "AUTH_ERROR"
    PERMISSION_ERROR = "PERMISSION_ERROR"
    NOT_FOUND = "NOT_FOUND"
    SERVER_ERROR = "SERVER_ERROR"
    NETWORK_ERROR = "NETWORK_ERROR"


# ---------------------------------------------------------------------------
# Base error
# ---------------------------------------------------------------------------

class NotionTxError(Exception):
    """Base exception for all notiontx errors.

    Parameters
    ----------
    code:
        A value from :class:`ErrorCode` identifying the error category.
    message:
        A developer-friendly description of what went wrong.
    context:
        Arbitrary structured data providing extra diagnostic detail.
    cause:
        The underlying exception, if this error wraps another.
    """

    def __init__(
        self,
        code: str,
        message: str,
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        self.code: str = code
        self.message: str = message
        self.context: dict[str, Any] = context or {}
        self.cause: Exception | None = cause
        super().__init__(message)
        if cause is not None:
            self.__cause__ = cause

    def with_context(self, **extra: Any) -> NotionTxError:
        """Return a copy of this error with *extra* merged into its context.

        The original error, and the dict it carries, are left untouched.
        """
        clone = type(self).__new__(type(self))
        clone.__dict__.update(self.__dict__)
        clone.args = self.args
        clone.context = {**self.context, **extra}
        clone.__cause__ = self.__cause__
        return clone

    def __repr__(self) -> str:
        ctx = f", context={self.context!r}" if self.context else ""
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r}{ctx})"


class _CodedError(NotionTxError):
    """Subclass helper binding a fixed :class:`ErrorCode`."""

    _code: ErrorCode

    def __init__(
        self,
        message: str,
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(
            code=self._code,
            message=message,
            context=context,
            cause=cause,
        )


# ---------------------------------------------------------------------------
# Input errors
# ---------------------------------------------------------------------------

class MalformedIdentifierError(_CodedError, ValueError):
    """A bare identifier did not contain exactly 32 word characters.

    Only raised in strict mode.  Context keys: ``value``, ``length``.
    """

    _code = ErrorCode.MALFORMED_IDENTIFIER


# ---------------------------------------------------------------------------
# API / transport errors
# ---------------------------------------------------------------------------

class NotionTxValidationError(_CodedError):
    """The store returned 400 (or another non-specific 4xx).

    Context keys: ``status_code``, ``body``.
    """

    _code = ErrorCode.VALIDATION_ERROR


class NotionTxAuthError(_CodedError):
    """The store returned 401; the ``token_v2`` cookie is invalid or expired.

    Context keys: ``status_code``.
    """

    _code = ErrorCode.AUTH_ERROR


class NotionTxPermissionError(_CodedError):
    """The store returned 403.

    Context keys: ``status_code``, ``operation``.
    """

    _code = ErrorCode.PERMISSION_ERROR


class NotionTxNotFoundError(_CodedError):
    """The store returned 404.

    Context keys: ``status_code``, ``path``.
    """

    _code = ErrorCode.NOT_FOUND


class NotionTxServerError(_CodedError):
    """The store returned 5xx or 429.  Nothing is retried.

    Context keys: ``status_code``, ``body``.
    """

    _code = ErrorCode.SERVER_ERROR


class NotionTxNetworkError(_CodedError):
    """A transport-level failure occurred (any ``httpx.TransportError``).

    Covers timeouts, DNS and connection failures, proxy and protocol errors.

    Context keys: ``url``.
    """

    _code = ErrorCode.NETWORK_ERROR
