"""Block-level handles.

A handle is a local proxy for one block (usually a page).  It owns no
remote state and is cheap to create: it holds the client it was derived
from, and through it the shared :class:`~notiontx.account.Account`, plus
the block's grouped identifier.

Usage::

    page = client.page("0f3c2d9e8a7b4c6d9e8f7a6b5c4d3e2f")
    created = page.create_text("First line")
    if created.ok:
        page.change_text(created.value.id, "First line, edited")
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from notiontx.account import Account
from notiontx.ids import new_id
from notiontx.models import TextCreateResult
from notiontx.result import Ok, Result
from notiontx.transaction import (
    change_cover_request,
    change_icon_request,
    change_text_request,
    create_text_request,
)

if TYPE_CHECKING:
    from notiontx.async_client import AsyncNotionClient
    from notiontx.client import NotionClient


class BlockHandle:
    """Synchronous handle on a single block.

    Parameters
    ----------
    client:
        The :class:`NotionClient` that dispatches requests.
    block_id:
        Identifier of the block, bare or grouped.
    """

    def __init__(self, client: NotionClient, block_id: str) -> None:
        self._client = client
        self.id: str = client.normalize_id(block_id)

    @property
    def account(self) -> Account:
        return self._client.account

    def __repr__(self) -> str:
        return f"BlockHandle(id={self.id!r})"

    def get(self) -> dict[str, Any]:
        """Fetch this block's page chunk.  Same as ``client.get_page(self.id)``."""
        return self._client.get_page(self.id)

    def create_text(self, text: str) -> Result[TextCreateResult]:
        """Append a text block holding *text* to this block's content."""
        text_id = new_id()
        result = self._client.submit(
            create_text_request(text_id, self.id, text, self._client.shard_id)
        )
        if not result.ok:
            return result
        return Ok(TextCreateResult(id=text_id))

    def delete_object(self, block_id: str) -> Result[bool]:
        """Permanently delete the child block *block_id*."""
        return self._client.delete_blocks([block_id])

    def change_text(self, block_id: str, new_text: str) -> Result[bool]:
        """Replace the text of the child block *block_id*."""
        block_id = self._client.normalize_id(block_id)
        return self._client.submit(
            change_text_request(block_id, new_text, self._client.shard_id)
        )

    def change_title(self, new_title: str) -> Result[bool]:
        """Rename this block."""
        return self._client.submit(
            change_text_request(self.id, new_title, self._client.shard_id)
        )

    def change_icon(self, icon: str) -> Result[bool]:
        """Set the page icon, usually a single emoji."""
        return self._client.submit(
            change_icon_request(self.id, icon, self._client.shard_id)
        )

    def change_cover(self, img: str, position: float = 0.5) -> Result[bool]:
        """Set the cover image URL and its vertical *position* (``0.0``-``1.0``)."""
        return self._client.submit(
            change_cover_request(self.id, img, position, self._client.shard_id)
        )


class AsyncBlockHandle:
    """Asynchronous handle on a single block.

    Mirrors :class:`BlockHandle` but every action is a coroutine.
    """

    def __init__(self, client: AsyncNotionClient, block_id: str) -> None:
        self._client = client
        self.id: str = client.normalize_id(block_id)

    @property
    def account(self) -> Account:
        return self._client.account

    def __repr__(self) -> str:
        return f"AsyncBlockHandle(id={self.id!r})"

    async def get(self) -> dict[str, Any]:
        return await self._client.get_page(self.id)

    async def create_text(self, text: str) -> Result[TextCreateResult]:
        text_id = new_id()
        result = await self._client.submit(
            create_text_request(text_id, self.id, text, self._client.shard_id)
        )
        if not result.ok:
            return result
        return Ok(TextCreateResult(id=text_id))

    async def delete_object(self, block_id: str) -> Result[bool]:
        return await self._client.delete_blocks([block_id])

    async def change_text(self, block_id: str, new_text: str) -> Result[bool]:
        block_id = self._client.normalize_id(block_id)
        return await self._client.submit(
            change_text_request(block_id, new_text, self._client.shard_id)
        )

    async def change_title(self, new_title: str) -> Result[bool]:
        return await self._client.submit(
            change_text_request(self.id, new_title, self._client.shard_id)
        )

    async def change_icon(self, icon: str) -> Result[bool]:
        return await self._client.submit(
            change_icon_request(self.id, icon, self._client.shard_id)
        )

    async def change_cover(self, img: str, position: float = 0.5) -> Result[bool]:
        return await self._client.submit(
            change_cover_request(self.id, img, position, self._client.shard_id)
        )
