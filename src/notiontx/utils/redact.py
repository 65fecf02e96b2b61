"""Credential redaction for safe logging.

Request dumps pass through :func:`redact` before they reach *stderr*:

* Values under sensitive keys (``cookie``, ``token``, ``authorization`` ...)
  are masked, keeping only the last four characters of the token.
* ``token_v2=<value>`` cookie fragments are masked wherever they appear.
* The literal session token, if supplied, is scrubbed from every string.
"""

from __future__ import annotations

import copy
import re
from typing import Any

_SENSITIVE_KEY_PATTERNS: frozenset[str] = frozenset({
    "token",
    "secret",
    "password",
    "credential",
    "authorization",
    "cookie",
})

_COOKIE_RE = re.compile(r"(token_v2=)[^;\s]+")


def _placeholder(token: str | None) -> str:
    if token and len(token) >= 8:
        return f"<redacted:...{token[-4:]}>"
    return "<redacted>"


def _mask(value: str, token: str | None) -> str:
    if token and token in value:
        value = value.replace(token, _placeholder(token))
    return _COOKIE_RE.sub(lambda m: f"{m.group(1)}<redacted>", value)


def _redact_value(value: Any, token: str | None) -> Any:
    if isinstance(value, dict):
        return _redact_dict(value, token)
    if isinstance(value, list):
        return [_redact_value(item, token) for item in value]
    if isinstance(value, str):
        return _mask(value, token)
    return value


def _redact_dict(d: dict, token: str | None) -> dict:
    result: dict = {}
    for key, value in d.items():
        key_lower = key.lower() if isinstance(key, str) else ""
        if any(pat in key_lower for pat in _SENSITIVE_KEY_PATTERNS):
            result[key] = _placeholder(token)
        else:
            result[key] = _redact_value(value, token)
    return result


def redact(payload: dict, token: str | None = None) -> dict:
    """Return a deep copy of *payload* with credentials removed.

    Parameters
    ----------
    payload:
        A request/response dump or a header mapping.
    token:
        The session token.  Any occurrence of it is replaced.

    Examples
    --------
    >>> redact({"Cookie": "token_v2=abc"})
    {'Cookie': '<redacted>'}
    """
    return _redact_dict(copy.deepcopy(payload), token)
