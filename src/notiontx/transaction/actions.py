"""Declarative operation lists for every high-level action.

Each ``*_operations`` function returns the operations of one action in the
order the store needs them: a record is created before it is attached to
its parent, attached before it is linked into the parent's child list, and
linked before permissions or properties are written.  The ``*_request``
functions wrap those lists into ready-to-submit envelopes.

All identifiers passed here must already be in grouped form; the handles
normalize caller input before calling in.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from notiontx.account import Account
from notiontx.config import DEFAULT_SHARD_ID

from .assembler import DeleteRequest, Request, build_request, build_transaction
from .operations import Operation, Table, list_after_op, set_op, title_value, update_op

TITLE_PATH = ("properties", "title")
ICON_PATH = ("format", "page_icon")
COVER_PATH = ("format", "page_cover")
FORMAT_PATH = ("format",)

# Wire key for the cover offset, spelled exactly as the store expects it.
COVER_POSITION_KEY = "age_cover_position"


# ---------------------------------------------------------------------------
# Operation lists
# ---------------------------------------------------------------------------

def create_block_operations(
    block_id: str,
    block_type: str,
    parent_id: str,
    parent_table: Table,
    child_list_path: Sequence[str],
) -> list[Operation]:
    """Create a block record, attach it to its parent and link it in."""
    return [
        set_op(block_id, (), {"type": block_type, "id": block_id, "version": 1}),
        update_op(
            block_id,
            (),
            {"parent_id": parent_id, "parent_table": parent_table.value, "alive": True},
        ),
        list_after_op(parent_id, child_list_path, block_id, table=parent_table),
    ]


def create_page_operations(
    page_id: str,
    space_id: str,
    user_id: str,
    name: str,
) -> list[Operation]:
    """set → update(parent) → listAfter(space.pages) → update(permissions) → set(title)."""
    return [
        *create_block_operations(page_id, "page", space_id, Table.SPACE, ("pages",)),
        update_op(
            page_id,
            (),
            {
                "permissions": [
                    {"type": "user_permission", "user_id": user_id, "role": "editor"},
                ],
            },
        ),
        set_op(page_id, TITLE_PATH, title_value(name)),
    ]


def create_text_operations(text_id: str, page_id: str, text: str) -> list[Operation]:
    """set → update(parent) → listAfter(block.content) → set(title)."""
    return [
        *create_block_operations(text_id, "text", page_id, Table.BLOCK, ("content",)),
        set_op(text_id, TITLE_PATH, title_value(text)),
    ]


def change_title_operations(block_id: str, text: str) -> list[Operation]:
    return [set_op(block_id, TITLE_PATH, title_value(text))]


def change_icon_operations(block_id: str, icon: str) -> list[Operation]:
    return [set_op(block_id, ICON_PATH, icon)]


def change_cover_operations(block_id: str, img: str, pos: float) -> list[list[Operation]]:
    """Cover position and image, each destined for its own transaction."""
    return [
        [update_op(block_id, FORMAT_PATH, {COVER_POSITION_KEY: pos})],
        [set_op(block_id, COVER_PATH, img)],
    ]


# ---------------------------------------------------------------------------
# Request envelopes
# ---------------------------------------------------------------------------

def _single(
    request_id: str,
    label: str,
    operations: Iterable[Operation],
    shard_id: int,
) -> Request:
    return build_request(request_id, [build_transaction(label, operations, shard_id)])


def create_page_request(
    account: Account,
    page_id: str,
    name: str,
    space_id: str,
    shard_id: int = DEFAULT_SHARD_ID,
) -> Request:
    """Request creating page *page_id* titled *name* in workspace *space_id*."""
    return _single(
        f"Creating page {name}",
        name,
        create_page_operations(page_id, space_id, account.user_id, name),
        shard_id,
    )


def create_text_request(
    text_id: str,
    page_id: str,
    text: str,
    shard_id: int = DEFAULT_SHARD_ID,
) -> Request:
    return _single(
        "Creating text",
        f"Creating text {text_id}",
        create_text_operations(text_id, page_id, text),
        shard_id,
    )


def change_text_request(
    block_id: str,
    text: str,
    shard_id: int = DEFAULT_SHARD_ID,
) -> Request:
    """Request replacing the title property of *block_id*.

    Pages and text blocks both keep their visible text under
    ``properties.title``, so renaming a page and editing a text block
    produce the same operation.
    """
    return _single(
        "Editing text",
        f"Editing text {block_id}",
        change_title_operations(block_id, text),
        shard_id,
    )


def change_icon_request(
    block_id: str,
    icon: str,
    shard_id: int = DEFAULT_SHARD_ID,
) -> Request:
    label = f"Editing page icon {block_id}"
    return _single(label, label, change_icon_operations(block_id, icon), shard_id)


def change_cover_request(
    block_id: str,
    img: str,
    pos: float,
    shard_id: int = DEFAULT_SHARD_ID,
) -> Request:
    """Request with two transactions: cover position first, then the image."""
    label = f"Editing page cover {block_id}"
    return build_request(
        label,
        [
            build_transaction(label, ops, shard_id)
            for ops in change_cover_operations(block_id, img, pos)
        ],
    )


def delete_blocks_request(block_ids: Iterable[str]) -> DeleteRequest:
    ids = tuple(block_ids)
    if not ids:
        raise ValueError("delete_blocks_request needs at least one block id")
    return DeleteRequest(block_ids=ids, permanently_delete=True)
