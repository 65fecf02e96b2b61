"""notiontx: transaction client for Notion's private block API.

Public re-exports
-----------------

* **Clients:** :class:`NotionClient`, :class:`AsyncNotionClient`
* **Handles:** :class:`BlockHandle`, :class:`AsyncBlockHandle`
* **Configuration:** :class:`NotionTxConfig`, :class:`Account`
* **Results:** :class:`Ok`, :class:`Err`, and the value models
* **Errors:** Every :class:`NotionTxError` subclass and :class:`ErrorCode`
* **Identifiers:** :func:`normalize_id`, :func:`new_id`

Usage::

    from notiontx import NotionClient

    client = NotionClient(token="<token_v2>", user_id="<user id>")
    result = client.page("<page id>").change_title("Roadmap")
"""

from __future__ import annotations

# ── Clients ────────────────────────────────────────────────────────────
from notiontx.account import Account
from notiontx.async_client import AsyncNotionClient
from notiontx.client import NotionClient

# ── Configuration ───────────────────────────────────────────────────────
from notiontx.config import DEFAULT_BASE_URL, DEFAULT_SHARD_ID, NotionTxConfig

# ── Errors ──────────────────────────────────────────────────────────────
from notiontx.errors import (
    ErrorCode,
    MalformedIdentifierError,
    NotionTxAuthError,
    NotionTxError,
    NotionTxNetworkError,
    NotionTxNotFoundError,
    NotionTxPermissionError,
    NotionTxServerError,
    NotionTxValidationError,
)
from notiontx.handles import AsyncBlockHandle, BlockHandle
from notiontx.ids import is_grouped_id, new_id, normalize_id

# ── Models ──────────────────────────────────────────────────────────────
from notiontx.models import Cover, PageCreateResult, TextCreateResult
from notiontx.result import Err, Ok, Result

# ── Public surface ──────────────────────────────────────────────────────

__all__ = [
    # Clients
    "NotionClient",
    "AsyncNotionClient",
    "BlockHandle",
    "AsyncBlockHandle",
    "Account",
    # Configuration
    "NotionTxConfig",
    "DEFAULT_BASE_URL",
    "DEFAULT_SHARD_ID",
    # Identifiers
    "normalize_id",
    "new_id",
    "is_grouped_id",
    # Results
    "Ok",
    "Err",
    "Result",
    "Cover",
    "PageCreateResult",
    "TextCreateResult",
    # Errors
    "NotionTxError",
    "ErrorCode",
    "MalformedIdentifierError",
    "NotionTxValidationError",
    "NotionTxAuthError",
    "NotionTxPermissionError",
    "NotionTxNotFoundError",
    "NotionTxServerError",
    "NotionTxNetworkError",
]
