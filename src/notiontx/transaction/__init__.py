"""Operation and transaction encoding.

Exports
-------
Operation, Table, Command
    A primitive ``set`` / ``update`` / ``listAfter`` mutation and its enums.
Transaction, Request, DeleteRequest
    Envelopes submitted to the store.
build_transaction, build_request
    Assemble operations into envelopes, preserving order.
create_page_request, create_text_request, change_*_request, delete_blocks_request
    Ready-to-submit envelopes for each block action.
"""

from .actions import (
    change_cover_request,
    change_icon_request,
    change_text_request,
    create_page_request,
    create_text_request,
    delete_blocks_request,
)
from .assembler import DeleteRequest, Request, Transaction, build_request, build_transaction
from .operations import Command, Operation, Table, list_after_op, set_op, update_op

__all__ = [
    "Command",
    "DeleteRequest",
    "Operation",
    "Request",
    "Table",
    "Transaction",
    "build_request",
    "build_transaction",
    "change_cover_request",
    "change_icon_request",
    "change_text_request",
    "create_page_request",
    "create_text_request",
    "delete_blocks_request",
    "list_after_op",
    "set_op",
    "update_op",
]
