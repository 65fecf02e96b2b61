"""Group operations into transactions and transactions into request envelopes.

Wire shapes produced by :meth:`to_dict`::

    {"requestId": "...",
     "transactions": [{"id": "...", "shardId": 14084, "operations": [...]}]}

    {"blockIds": ["..."], "permanentlyDelete": true}
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from notiontx.config import DEFAULT_SHARD_ID

from .operations import Operation


@dataclass(frozen=True)
class Transaction:
    """An ordered group of operations applied together.

    ``id`` is a human-readable label and is not required to be unique.
    """

    id: str
    operations: tuple[Operation, ...]
    shard_id: int = DEFAULT_SHARD_ID

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "shardId": self.shard_id,
            "operations": [op.to_dict() for op in self.operations],
        }


@dataclass(frozen=True)
class Request:
    """Body of a ``submitTransaction`` call."""

    request_id: str
    transactions: tuple[Transaction, ...]

    @property
    def operations(self) -> list[Operation]:
        """Every operation of every transaction, in submission order."""
        return [op for tx in self.transactions for op in tx.operations]

    def to_dict(self) -> dict[str, Any]:
        return {
            "requestId": self.request_id,
            "transactions": [tx.to_dict() for tx in self.transactions],
        }


@dataclass(frozen=True)
class DeleteRequest:
    """Body of a ``deleteBlocks`` call.  Not a transaction."""

    block_ids: tuple[str, ...]
    permanently_delete: bool = True

    def to_dict(self) -> dict[str, Any]:
        return {
            "blockIds": list(self.block_ids),
            "permanentlyDelete": self.permanently_delete,
        }


def build_transaction(
    label: str,
    operations: Iterable[Operation],
    shard_id: int = DEFAULT_SHARD_ID,
) -> Transaction:
    """Group *operations* into a transaction, preserving their order."""
    ops = tuple(operations)
    if not ops:
        raise ValueError(f"Transaction {label!r} has no operations")
    return Transaction(id=label, operations=ops, shard_id=shard_id)


def build_request(request_id: str, transactions: Iterable[Transaction]) -> Request:
    """Wrap *transactions* into a request envelope."""
    txs = tuple(transactions)
    if not txs:
        raise ValueError(f"Request {request_id!r} has no transactions")
    return Request(request_id=request_id, transactions=txs)
