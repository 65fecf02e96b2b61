"""Request pipelines and failure reporting shared by both clients.

Both :class:`~notiontx.client.NotionClient` and
:class:`~notiontx.async_client.AsyncNotionClient` build the same ordered
request sequences and report failures the same way; only the dispatch
(plain call or ``await``) differs.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from notiontx.account import Account
from notiontx.errors import NotionTxError
from notiontx.models import Cover
from notiontx.observability import get_logger
from notiontx.result import Err
from notiontx.transaction import (
    Request,
    change_cover_request,
    change_icon_request,
    create_page_request,
)

log = get_logger("notiontx.client")


def failure(op: str, exc: NotionTxError, **context: Any) -> Err:
    """Log a failed mutation and wrap a copy of *exc*, with *context* added, in an :class:`Err`."""
    detail = exc.with_context(**context)
    log.warning(
        "Mutation failed",
        extra={
            "extra_fields": {
                "op": op,
                "code": detail.code,
                "error": detail.message,
                **context,
            }
        },
    )
    return Err.from_error(detail)


def coerce_cover(cover: Cover | Mapping[str, Any] | None) -> Cover | None:
    if cover is None or isinstance(cover, Cover):
        return cover
    return Cover(img=cover["img"], pos=cover.get("pos", 0.5))


def create_page_steps(
    account: Account,
    page_id: str,
    name: str,
    space_id: str,
    icon: str | None,
    cover: Cover | None,
    shard_id: int,
) -> list[tuple[str, Request]]:
    """Ordered, independently dispatched requests of a page creation.

    Every step after ``create`` addresses the id generated for the page, so
    each must wait for the previous one to be accepted.
    """
    steps = [("create", create_page_request(account, page_id, name, space_id, shard_id))]
    if icon is not None:
        steps.append(("icon", change_icon_request(page_id, icon, shard_id)))
    if cover is not None:
        steps.append(("cover", change_cover_request(page_id, cover.img, cover.pos, shard_id)))
    return steps


def page_created(page_id: str, space_id: str) -> None:
    log.info(
        "Page created",
        extra={"extra_fields": {"op": "create_page", "page_id": page_id, "space_id": space_id}},
    )
