"""Tests for the error hierarchy, the Ok/Err result type, Account and models."""
from __future__ import annotations

import json

import pytest

from notiontx.account import Account
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
from notiontx.models import Cover, PageCreateResult
from notiontx.result import Err, Ok

_CODES = [
    (MalformedIdentifierError, ErrorCode.MALFORMED_IDENTIFIER),
    (NotionTxValidationError, ErrorCode.VALIDATION_ERROR),
    (NotionTxAuthError, ErrorCode.AUTH_ERROR),
    (NotionTxPermissionError, ErrorCode.PERMISSION_ERROR),
    (NotionTxNotFoundError, ErrorCode.NOT_FOUND),
    (NotionTxServerError, ErrorCode.SERVER_ERROR),
    (NotionTxNetworkError, ErrorCode.NETWORK_ERROR),
]


class TestErrorHierarchy:
    @pytest.mark.parametrize(("cls", "code"), _CODES)
    def test_fixed_code(self, cls, code):
        err = cls("boom")
        assert isinstance(err, NotionTxError)
        assert err.code == code
        assert err.message == "boom"
        assert err.context == {}
        assert str(err) == "boom"

    def test_malformed_identifier_is_value_error(self):
        assert isinstance(MalformedIdentifierError("x"), ValueError)

    def test_cause_chained(self):
        root = OSError("reset")
        err = NotionTxNetworkError("net", cause=root)
        assert err.cause is root
        assert err.__cause__ is root

    def test_repr_includes_context(self):
        err = NotionTxNotFoundError("gone", context={"path": "/deleteBlocks"})
        text = repr(err)
        assert text.startswith("NotionTxNotFoundError(")
        assert "'/deleteBlocks'" in text

    def test_with_context_returns_enriched_copy(self):
        root = OSError("reset")
        err = NotionTxNetworkError("net", context={"url": "/deleteBlocks"}, cause=root)
        copy = err.with_context(step="icon")
        assert type(copy) is NotionTxNetworkError
        assert copy is not err
        assert copy.context == {"url": "/deleteBlocks", "step": "icon"}
        assert err.context == {"url": "/deleteBlocks"}
        assert copy.code == err.code
        assert copy.message == "net"
        assert str(copy) == "net"
        assert copy.cause is root
        assert copy.__cause__ is root

    def test_code_is_json_serialisable(self):
        assert json.dumps({"code": NotionTxAuthError("x").code}) == '{"code": "AUTH_ERROR"}'


class TestResult:
    def test_ok(self):
        result = Ok(3)
        assert result.ok is True
        assert result.unwrap() == 3
        assert result == Ok(3)

    def test_err_from_error(self):
        error = NotionTxPermissionError("denied", context={"status_code": 403})
        result = Err.from_error(error)
        assert result.ok is False
        assert result.kind is ErrorCode.PERMISSION_ERROR
        assert result.detail is error

    def test_err_unwrap_reraises(self):
        error = NotionTxServerError("down")
        with pytest.raises(NotionTxServerError) as exc_info:
            Err.from_error(error).unwrap()
        assert exc_info.value is error


class TestAccount:
    def test_from_credentials_normalizes(self):
        account = Account.from_credentials("tok", "0123456789abcdef0123456789abcdef")
        assert account.user_id == "01234567-89ab-cdef-0123-456789abcdef"

    def test_cookie(self):
        account = Account(token="abc", user_id="u")
        assert account.cookie == "token_v2=abc"
        assert account.auth_headers() == {"Cookie": "token_v2=abc"}

    def test_repr_masks_token(self):
        text = repr(Account(token="super-secret-9876", user_id="u"))
        assert "super-secret" not in text
        assert "...9876" in text

    def test_frozen(self):
        account = Account(token="abc", user_id="u")
        with pytest.raises(AttributeError):
            account.token = "other"  # type: ignore[misc]


class TestModels:
    def test_cover_default_position(self):
        assert Cover("http://x/y.png").pos == 0.5

    def test_page_create_result_defaults(self):
        result = PageCreateResult(id="p")
        assert result.icon is None
        assert result.cover is None
