"""Synchronous account-level client.

Usage::

    from notiontx import NotionClient, Cover

    with NotionClient(token="<token_v2 cookie>", user_id="<notion_user_id>") as client:
        created = client.create_page(
            "Notes",
            space_id="<workspace id>",
            icon="📝",
            cover=Cover(img="https://example.com/cover.png", pos=0.5),
        )
        if created.ok:
            page = client.page(created.value.id)
            page.create_text("Hello")

Result conventions
------------------
* :meth:`NotionClient.get_page` returns the raw JSON payload and raises a
  :class:`~notiontx.errors.NotionTxError` on failure.
* Every mutation returns :class:`~notiontx.result.Ok` or
  :class:`~notiontx.result.Err` and never raises for transport or store
  failures.  Malformed identifiers still raise before anything is sent.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from notiontx.account import Account
from notiontx.config import NotionTxConfig
from notiontx.errors import NotionTxError
from notiontx.handles import BlockHandle
from notiontx.ids import new_id, normalize_id
from notiontx.models import Cover, PageCreateResult
from notiontx.notion_api.blocks import BlockAPI
from notiontx.notion_api.pages import PageAPI
from notiontx.notion_api.transactions import TransactionAPI
from notiontx.notion_api.transport import NotionTransport
from notiontx.pipeline import coerce_cover, create_page_steps, failure, page_created
from notiontx.result import Ok, Result
from notiontx.transaction import Request, delete_blocks_request


class NotionClient:
    """Synchronous client bound to one account.

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
        self._transport = NotionTransport(self._config, self._account)
        self._pages = PageAPI(self._transport)
        self._transactions = TransactionAPI(self._transport, self._config.metrics)
        self._blocks = BlockAPI(self._transport, self._config.metrics)

    @property
    def account(self) -> Account:
        return self._account

    @property
    def shard_id(self) -> int:
        return self._config.shard_id

    def normalize_id(self, value: str) -> str:
        """Normalize *value* with this client's strictness setting."""
        return normalize_id(value, strict=self._config.strict_ids)

    def page(self, page_id: str) -> BlockHandle:
        """Return a handle on an existing page or block."""
        return BlockHandle(self, page_id)

    # ------------------------------------------------------------------
    # Fetch
    # ------------------------------------------------------------------

    def get_page(
        self,
        page_id: str,
        limit: int | None = None,
        chunk_number: int = 0,
    ) -> dict[str, Any]:
        """Fetch a page's block tree as raw JSON.

        Parameters
        ----------
        page_id:
            Page identifier, bare or grouped.
        limit:
            Chunk size.  Defaults to ``config.page_chunk_limit``.
        chunk_number:
            Index of the chunk to load.

        Raises
        ------
        NotionTxError
            On any transport or store failure.
        """
        return self._pages.load_page_chunk(
            self.normalize_id(page_id),
            limit=limit if limit is not None else self._config.page_chunk_limit,
            chunk_number=chunk_number,
        )

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def submit(self, request: Request) -> Result[bool]:
        """Dispatch a prepared transaction request."""
        try:
            self._transactions.submit(request)
        except NotionTxError as exc:
            return failure("submit_transaction", exc, request_id=request.request_id)
        return Ok(True)

    def create_page(
        self,
        name: str,
        space_id: str,
        icon: str | None = None,
        cover: Cover | Mapping[str, Any] | None = None,
    ) -> Result[PageCreateResult]:
        """Create a page at the top level of workspace *space_id*.

        The page id is generated client-side.  The page is created, linked
        into the workspace and granted to this account as editor in one
        transaction; *icon* and *cover* are then applied by two further
        requests.  Creation and decoration are not atomic: if a later step
        fails the page exists undecorated and the :class:`Err` carries
        ``page_id`` and ``step`` in its context.

        Returns
        -------
        Result[PageCreateResult]
        """
        space_id = self.normalize_id(space_id)
        cover = coerce_cover(cover)
        page_id = new_id()

        for step, request in create_page_steps(
            self._account, page_id, name, space_id, icon, cover, self.shard_id
        ):
            try:
                self._transactions.submit(request)
            except NotionTxError as exc:
                return failure("create_page", exc, page_id=page_id, step=step)

        page_created(page_id, space_id)
        return Ok(PageCreateResult(id=page_id, icon=icon, cover=cover))

    def delete_page(self, page_id: str) -> Result[bool]:
        """Permanently delete a page."""
        return self.delete_blocks([page_id])

    def delete_blocks(self, block_ids: Iterable[str]) -> Result[bool]:
        """Permanently delete every block in *block_ids* with one request."""
        request = delete_blocks_request(self.normalize_id(b) for b in block_ids)
        try:
            self._blocks.delete_blocks(request)
        except NotionTxError as exc:
            return failure("delete_blocks", exc, block_ids=list(request.block_ids))
        return Ok(True)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def close(self) -> None:
        """Close the underlying HTTP transport."""
        self._transport.close()

    def __enter__(self) -> NotionClient:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()
