"""Page fetch wrappers for the private API.

Provides :class:`PageAPI` (sync) and :class:`AsyncPageAPI` (async) around
the ``/loadPageChunk`` endpoint.  The response is returned verbatim.
"""

from __future__ import annotations

from typing import Any

from .transport import AsyncNotionTransport, NotionTransport


def page_chunk_body(page_id: str, limit: int = 50, chunk_number: int = 0) -> dict[str, Any]:
    """Build the ``loadPageChunk`` body for *page_id*.

    The cursor always starts at index 0 of the page block itself.
    """
    return {
        "pageId": page_id,
        "limit": limit,
        "cursor": {
            "stack": [
                [{"table": "block", "id": page_id, "index": 0}],
            ],
        },
        "chunkNumber": chunk_number,
        "verticalColumns": False,
    }


class PageAPI:
    """Synchronous wrapper for page fetching.

    Parameters
    ----------
    transport:
        A configured :class:`NotionTransport` instance.
    """

    def __init__(self, transport: NotionTransport) -> None:
        self._transport = transport

    def load_page_chunk(
        self,
        page_id: str,
        limit: int = 50,
        chunk_number: int = 0,
    ) -> dict[str, Any]:
        """Fetch the block tree of a page.

        Parameters
        ----------
        page_id:
            Grouped identifier of the page.
        limit:
            Maximum number of blocks in the chunk.
        chunk_number:
            Index of the chunk to load.

        Returns
        -------
        dict
            The raw ``recordMap``/``cursor`` payload.
        """
        return self._transport.request(
            "POST", "/loadPageChunk", json=page_chunk_body(page_id, limit, chunk_number)
        )


class AsyncPageAPI:
    """Asynchronous wrapper for page fetching.

    Mirrors :class:`PageAPI` but all methods are coroutines.
    """

    def __init__(self, transport: AsyncNotionTransport) -> None:
        self._transport = transport

    async def load_page_chunk(
        self,
        page_id: str,
        limit: int = 50,
        chunk_number: int = 0,
    ) -> dict[str, Any]:
        """Fetch the block tree of a page (async).

        See :meth:`PageAPI.load_page_chunk` for parameter documentation.
        """
        return await self._transport.request(
            "POST", "/loadPageChunk", json=page_chunk_body(page_id, limit, chunk_number)
        )
