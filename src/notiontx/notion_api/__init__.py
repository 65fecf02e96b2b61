"""notiontx.notion_api -- transport and endpoint wrappers.

This sub-package provides:

* :mod:`.transport` -- HTTP transport with cookie auth and typed errors.
* :mod:`.pages` -- ``loadPageChunk`` wrappers.
* :mod:`.transactions` -- ``submitTransaction`` wrappers.
* :mod:`.blocks` -- ``deleteBlocks`` wrappers.
"""

from __future__ import annotations

from .blocks import AsyncBlockAPI, BlockAPI
from .pages import AsyncPageAPI, PageAPI, page_chunk_body
from .transactions import AsyncTransactionAPI, TransactionAPI
from .transport import AsyncNotionTransport, NotionTransport

__all__ = [
    "AsyncBlockAPI",
    "AsyncNotionTransport",
    "AsyncPageAPI",
    "AsyncTransactionAPI",
    "BlockAPI",
    "NotionTransport",
    "PageAPI",
    "TransactionAPI",
    "page_chunk_body",
]
