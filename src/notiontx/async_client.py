"""Asynchronous account-level client.

:class:`AsyncNotionClient` mirrors :class:`~notiontx.client.NotionClient`
but every I/O method is an ``async def`` coroutine.  Composite actions await
each request before issuing the next; nothing runs in parallel.

Usage::

    import asyncio
    from notiontx import AsyncNotionClient

    async def main():
        async with AsyncNotionClient(token="...", user_id="...") as client:
            created = await client.create_page("Notes", space_id="...", icon="📝")
            if created.ok:
                await client.page(created.value.id).create_text("Hello")

    asyncio.run(main())
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from notiontx.account import Account
from notiontx.config import NotionTxConfig
from notiontx.errors import NotionTxError
from notiontx.handles import AsyncBlockHandle
from notiontx.ids import new_id, normalize_id
from notiontx.models import Cover, PageCreateResult
from notiontx.notion_api.blocks import AsyncBlockAPI
from notiontx.notion_api.pages import AsyncPageAPI
from notiontx.notion_api.transactions import AsyncTransactionAPI
from notiontx.notion_api.transport import AsyncNotionTransport
from notiontx.pipeline import coerce_cover, create_page_steps, failure, page_created
from notiontx.result import Ok, Result
from notiontx.transaction import Request, delete_blocks_request


class AsyncNotionClient:
    """Asynchronous client bound to one account.

    Parameters
    ----------
    token:
        Value of the ``token_v2`` cookie.  **Required.**
    user_id:
        The account's user id, bare or grouped.  **Required.**
    **kwargs:
        All remaining keyword arguments are forwarded to
        :class:`NotionTxConfig`.
    """

    def __init__(self, token: str, user_id: str, **kwargs: Any) -> None:
        self._config = NotionTxConfig(token=token, **kwargs)
        self._account = Account.from_credentials(
            token, user_id, strict=self._config.strict_ids
        )
        self._transport = AsyncNotionTransport(self._config, self._account)
        self._pages = AsyncPageAPI(self._transport)
        self._transactions = AsyncTransactionAPI(self._transport, self._config.metrics)
        self._blocks = AsyncBlockAPI(self._transport, self._config.metrics)

    @property
    def account(self) -> Account:
        return self._account

    @property
    def shard_id(self) -> int:
        return self._config.shard_id

    def normalize_id(self, value: str) -> str:
        return normalize_id(value, strict=self._config.strict_ids)

    def page(self, page_id: str) -> AsyncBlockHandle:
        return AsyncBlockHandle(self, page_id)

    async def get_page(
        self,
        page_id: str,
        limit: int | None = None,
        chunk_number: int = 0,
    ) -> dict[str, Any]:
        """Fetch a page's block tree as raw JSON (async).

        See :meth:`NotionClient.get_page` for parameter documentation.
        """
        return await self._pages.load_page_chunk(
            self.normalize_id(page_id),
            limit=limit if limit is not None else self._config.page_chunk_limit,
            chunk_number=chunk_number,
        )

    async def submit(self, request: Request) -> Result[bool]:
        try:
            await self._transactions.submit(request)
        except NotionTxError as exc:
            return failure("submit_transaction", exc, request_id=request.request_id)
        return Ok(True)

    async def create_page(
        self,
        name: str,
        space_id: str,
        icon: str | None = None,
        cover: Cover | Mapping[str, Any] | None = None,
    ) -> Result[PageCreateResult]:
        """Create a page, then apply icon and cover (async).

        See :meth:`NotionClient.create_page` for the step semantics.
        """
        space_id = self.normalize_id(space_id)
        cover = coerce_cover(cover)
        page_id = new_id()

        for step, request in create_page_steps(
            self._account, page_id, name, space_id, icon, cover, self.shard_id
        ):
            try:
                await self._transactions.submit(request)
            except NotionTxError as exc:
                return failure("create_page", exc, page_id=page_id, step=step)

        page_created(page_id, space_id)
        return Ok(PageCreateResult(id=page_id, icon=icon, cover=cover))

    async def delete_page(self, page_id: str) -> Result[bool]:
        return await self.delete_blocks([page_id])

    async def delete_blocks(self, block_ids: Iterable[str]) -> Result[bool]:
        request = delete_blocks_request(self.normalize_id(b) for b in block_ids)
        try:
            await self._blocks.delete_blocks(request)
        except NotionTxError as exc:
            return failure("delete_blocks", exc, block_ids=list(request.block_ids))
        return Ok(True)

    async def close(self) -> None:
        """Close the underlying async HTTP transport."""
        await self._transport.close()

    async def __aenter__(self) -> AsyncNotionClient:
        return self

    async def __aexit__(self, *exc: object) -> None:
        await self.close()
