"""Tests for the per-action operation lists in notiontx/transaction/actions.py."""

from __future__ import annotations

import pytest

from notiontx.transaction.actions import (
    COVER_POSITION_KEY,
    change_cover_request,
    change_icon_request,
    change_text_request,
    create_page_operations,
    create_page_request,
    create_text_operations,
    create_text_request,
    delete_blocks_request,
)
from notiontx.transaction.operations import Command, Table

PAGE = "abcdef01-2345-6789-abcd-ef0123456789"
SPACE = "fedcba98-7654-3210-fedc-ba9876543210"
USER = "01234567-89ab-cdef-0123-456789abcdef"
TEXT = "11111111-2222-3333-4444-555555555555"


class TestCreatePage:
    def test_five_operations_in_fixed_order(self):
        ops = create_page_operations(PAGE, SPACE, USER, "Notes")
        assert [op.command for op in ops] == [
            Command.SET,
            Command.UPDATE,
            Command.LIST_AFTER,
            Command.UPDATE,
            Command.SET,
        ]

    def test_record_creation(self):
        op = create_page_operations(PAGE, SPACE, USER, "Notes")[0]
        assert op.to_dict() == {
            "id": PAGE,
            "table": "block",
            "path": [],
            "command": "set",
            "args": {"type": "page", "id": PAGE, "version": 1},
        }

    def test_parent_attachment(self):
        op = create_page_operations(PAGE, SPACE, USER, "Notes")[1]
        assert op.id == PAGE
        assert op.args == {"parent_id": SPACE, "parent_table": "space", "alive": True}

    def test_link_into_space_pages(self):
        op = create_page_operations(PAGE, SPACE, USER, "Notes")[2]
        assert op.id == SPACE
        assert op.table is Table.SPACE
        assert op.path == ("pages",)
        assert op.args == {"id": PAGE}

    def test_editor_permission_for_account(self):
        op = create_page_operations(PAGE, SPACE, USER, "Notes")[3]
        assert op.args == {
            "permissions": [
                {"type": "user_permission", "user_id": USER, "role": "editor"},
            ],
        }

    def test_title_last(self):
        op = create_page_operations(PAGE, SPACE, USER, "Notes")[4]
        assert op.path == ("properties", "title")
        assert op.args == [["Notes"]]

    def test_request_single_transaction(self, account):
        req = create_page_request(account, PAGE, "Notes", SPACE)
        body = req.to_dict()
        assert body["requestId"] == "Creating page Notes"
        assert len(body["transactions"]) == 1
        assert body["transactions"][0]["id"] == "Notes"
        assert body["transactions"][0]["shardId"] == 14084
        assert body["transactions"][0]["operations"][3]["args"]["permissions"][0]["user_id"] == (
            account.user_id
        )


class TestCreateText:
    def test_four_operations_in_fixed_order(self):
        ops = create_text_operations(TEXT, PAGE, "Hello")
        assert [op.command for op in ops] == [
            Command.SET,
            Command.UPDATE,
            Command.LIST_AFTER,
            Command.SET,
        ]

    def test_links_into_parent_content(self):
        ops = create_text_operations(TEXT, PAGE, "Hello")
        assert ops[0].args == {"type": "text", "id": TEXT, "version": 1}
        assert ops[1].args == {"parent_id": PAGE, "parent_table": "block", "alive": True}
        assert (ops[2].id, ops[2].table, ops[2].path) == (PAGE, Table.BLOCK, ("content",))
        assert ops[2].args == {"id": TEXT}
        assert ops[3].args == [["Hello"]]

    def test_no_permission_step(self):
        ops = create_text_operations(TEXT, PAGE, "Hello")
        assert all("permissions" not in (op.args if isinstance(op.args, dict) else {}) for op in ops)

    def test_request_labels(self):
        body = create_text_request(TEXT, PAGE, "Hello").to_dict()
        assert body["requestId"] == "Creating text"
        assert body["transactions"][0]["id"] == f"Creating text {TEXT}"


class TestSingleOperationEdits:
    def test_change_text_one_transaction_one_set(self):
        req = change_text_request(PAGE, "Renamed")
        assert len(req.transactions) == 1
        assert len(req.operations) == 1
        op = req.operations[0]
        assert (op.command, op.path, op.args) == (Command.SET, ("properties", "title"), [["Renamed"]])

    def test_change_icon_one_transaction_one_set(self):
        req = change_icon_request(PAGE, "📝")
        assert len(req.transactions) == 1
        assert req.operations[0].to_dict() == {
            "id": PAGE,
            "table": "block",
            "path": ["format", "page_icon"],
            "command": "set",
            "args": "📝",
        }


class TestChangeCover:
    def test_two_transactions_position_first(self):
        req = change_cover_request(PAGE, "http://x/y.png", 0.5)
        assert len(req.transactions) == 2
        first, second = (tx.operations for tx in req.transactions)
        assert len(first) == 1 and len(second) == 1
        assert first[0].command is Command.UPDATE
        assert first[0].path == ("format",)
        assert first[0].args == {COVER_POSITION_KEY: 0.5}
        assert second[0].command is Command.SET
        assert second[0].path == ("format", "page_cover")
        assert second[0].args == "http://x/y.png"

    def test_literal_position_key(self):
        body = change_cover_request(PAGE, "http://x/y.png", 0.3).to_dict()
        assert body["transactions"][0]["operations"][0]["args"] == {"age_cover_position": 0.3}


class TestDeleteBlocks:
    def test_many_ids(self):
        req = delete_blocks_request([PAGE, TEXT])
        assert req.to_dict() == {"blockIds": [PAGE, TEXT], "permanentlyDelete": True}

    def test_empty_rejected(self):
        with pytest.raises(ValueError):
            delete_blocks_request([])
