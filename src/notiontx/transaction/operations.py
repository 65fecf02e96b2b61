"""Primitive operations addressed by record id, table and property path.

The store understands three commands:

* ``set`` -- replace the value at *path* on the target record.
* ``update`` -- merge the key/value pairs of *args* into the object at *path*.
* ``listAfter`` -- append ``args["id"]`` to the ordered list at *path*.

An empty path addresses the record itself.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class Table(str, Enum):
    """Record tables an operation can target."""

    BLOCK = "block"
    SPACE = "space"


class Command(str, Enum):
    """Primitive mutation commands."""

    SET = "set"
    UPDATE = "update"
    LIST_AFTER = "listAfter"


@dataclass(frozen=True)
class Operation:
    """A single primitive mutation.

    Attributes
    ----------
    id:
        Grouped identifier of the target record.
    table:
        Table holding the target record.
    path:
        Property path inside the record; ``()`` addresses the record root.
    command:
        One of :class:`Command`.
    args:
        Command payload.  Any JSON-serialisable value.
    """

    id: str
    table: Table
    path: tuple[str, ...]
    command: Command
    args: Any = field(default=None)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "table": self.table.value,
            "path": list(self.path),
            "command": self.command.value,
            "args": self.args,
        }


def set_op(
    record_id: str,
    path: Sequence[str],
    args: Any,
    table: Table = Table.BLOCK,
) -> Operation:
    """Build a ``set`` operation."""
    return Operation(record_id, table, tuple(path), Command.SET, args)


def update_op(
    record_id: str,
    path: Sequence[str],
    args: dict[str, Any],
    table: Table = Table.BLOCK,
) -> Operation:
    """Build an ``update`` operation merging *args* at *path*."""
    return Operation(record_id, table, tuple(path), Command.UPDATE, args)


def list_after_op(
    parent_id: str,
    path: Sequence[str],
    child_id: str,
    table: Table = Table.BLOCK,
) -> Operation:
    """Build a ``listAfter`` operation linking *child_id* under *parent_id*."""
    return Operation(parent_id, table, tuple(path), Command.LIST_AFTER, {"id": child_id})


def title_value(text: str) -> list[list[str]]:
    """Wrap plain *text* in the store's rich-text title shape."""
    return [[text]]
