"""Public value types returned by the handles.

All types are plain dataclasses with no behaviour beyond structural
equality.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Cover:
    """A page cover image.

    Attributes
    ----------
    img:
        URL of the cover image.
    pos:
        Vertical position of the image inside the cover area, ``0.0``-``1.0``.
    """

    img: str
    pos: float = 0.5


@dataclass(frozen=True)
class PageCreateResult:
    """Outcome of :meth:`NotionClient.create_page`.

    Attributes
    ----------
    id:
        Grouped identifier generated client-side for the new page.
    icon:
        The icon applied after creation, if any.
    cover:
        The cover applied after creation, if any.
    """

    id: str
    icon: str | None = None
    cover: Cover | None = None


@dataclass(frozen=True)
class TextCreateResult:
    """Outcome of :meth:`BlockHandle.create_text`."""

    id: str
