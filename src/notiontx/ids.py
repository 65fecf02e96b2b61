"""Identifier normalization.

The store keys every record by a 32-character identifier rendered in the
grouped 8-4-4-4-12 form (``xxxxxxxx-xxxx-xxxx-xxxx-xxxxxxxxxxxx``).  Page
URLs and copy-pasted ids usually carry the bare 32-character form; both
are accepted everywhere an id enters the client and funnelled through
:func:`normalize_id`.
"""

from __future__ import annotations

import re
import uuid

from notiontx.errors import MalformedIdentifierError

BARE_ID_LENGTH = 32

_GROUPED_RE = re.compile(r"\w{8}-\w{4}-\w{4}-\w{4}-\w{12}")
_BARE_RE = re.compile(r"\w{32}")

# Segment boundaries of the grouped form.
_CUTS: tuple[tuple[int, int], ...] = ((0, 8), (8, 12), (12, 16), (16, 20), (20, 32))


def is_grouped_id(value: str) -> bool:
    """Return ``True`` if *value* is already in grouped 8-4-4-4-12 form."""
    return _GROUPED_RE.fullmatch(value) is not None


def normalize_id(value: str, *, strict: bool = True) -> str:
    """Render *value* in grouped form.

    Parameters
    ----------
    value:
        An identifier in grouped or bare form.
    strict:
        When ``True`` (the default) a bare identifier must be exactly 32
        word characters or :class:`MalformedIdentifierError` is raised.
        When ``False`` the bare value is sliced at offsets 8, 12, 16 and 20
        without any check; short input yields empty or truncated segments
        and anything past 32 characters is dropped.

    Returns
    -------
    str
        The grouped identifier.  Already-grouped input is returned as is.
    """
    if is_grouped_id(value):
        return value
    if strict and _BARE_RE.fullmatch(value) is None:
        raise MalformedIdentifierError(
            message=f"Expected a {BARE_ID_LENGTH}-character identifier, got {value!r}",
            context={"value": value, "length": len(value)},
        )
    return "-".join(value[start:end] for start, end in _CUTS)


def new_id() -> str:
    """Generate a fresh random identifier for a block created client-side."""
    return str(uuid.uuid4())
