"""Client configuration for notiontx.

:class:`NotionTxConfig` is a dataclass capturing every tuneable knob of the
client.  Instances are shared by :class:`NotionClient` and
:class:`AsyncNotionClient` and by the transports underneath them.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Any

DEFAULT_BASE_URL = "https://www.notion.so/api/v3"

DEFAULT_SHARD_ID = 14084
"""Routing constant required in every transaction envelope."""


@dataclass
class NotionTxConfig:
    """Complete configuration for a notiontx client.

    Parameters
    ----------
    token:
        Value of the ``token_v2`` browser cookie.  Never logged.
    base_url:
        Root of the private API.  Override for proxy or testing environments.
    shard_id:
        Value of ``shardId`` written into every transaction.
    page_chunk_limit:
        Default ``limit`` sent with ``loadPageChunk``.
    strict_ids:
        Reject bare identifiers that are not exactly 32 characters long.
        When ``False`` the legacy slicing is used and malformed input is
        passed through to the store unchanged in spirit.
    timeout_seconds:
        HTTP request timeout in seconds.
    http_proxy:
        Optional HTTP/HTTPS proxy URL.
    metrics:
        Optional :class:`~notiontx.observability.MetricsHook` backend.
    debug_dump_payload:
        Write the (redacted) request and response bodies to *stderr*.
    """

    token: str = ""

    base_url: str = DEFAULT_BASE_URL

    shard_id: int = DEFAULT_SHARD_ID

    page_chunk_limit: int = 50

    strict_ids: bool = True

    # ── HTTP ────────────────────────────────────────────────────────────
    timeout_seconds: float = 30.0

    http_proxy: str | None = None

    # ── Observability ──────────────────────────────────────────────────
    metrics: Any | None = None

    debug_dump_payload: bool = False

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        from urllib.parse import urlparse

        parsed = urlparse(self.base_url)
        if parsed.scheme == "http" and parsed.hostname not in (
            "localhost",
            "127.0.0.1",
            "::1",
        ):
            raise ValueError(
                f"base_url uses insecure HTTP for non-local host '{parsed.hostname}'. "
                "Use HTTPS to protect the session cookie, or target localhost for testing."
            )

        if self.page_chunk_limit <= 0:
            raise ValueError(f"page_chunk_limit must be > 0, got {self.page_chunk_limit}")
        if self.timeout_seconds <= 0:
            raise ValueError(f"timeout_seconds must be > 0, got {self.timeout_seconds}")

    def __repr__(self) -> str:
        """Mask the token to prevent accidental credential leakage."""
        parts: list[str] = []
        for f in dataclasses.fields(self):
            val = getattr(self, f.name)
            if f.name == "token":
                masked = f"...{val[-4:]}" if len(val) >= 4 else "****"
                parts.append(f"token='{masked}'")
            else:
                parts.append(f"{f.name}={val!r}")
        return f"NotionTxConfig({', '.join(parts)})"
