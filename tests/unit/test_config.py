"""Tests for NotionTxConfig validation and redacted repr."""
from __future__ import annotations

import pytest

from notiontx.config import DEFAULT_BASE_URL, DEFAULT_SHARD_ID, NotionTxConfig


class TestDefaults:
    def test_defaults(self):
        config = NotionTxConfig(token="abc")
        assert config.base_url == DEFAULT_BASE_URL == "https://www.notion.so/api/v3"
        assert config.shard_id == DEFAULT_SHARD_ID == 14084
        assert config.page_chunk_limit == 50
        assert config.strict_ids is True
        assert config.timeout_seconds == 30.0
        assert config.http_proxy is None
        assert config.metrics is None
        assert config.debug_dump_payload is False


class TestValidation:
    def test_https_accepted(self):
        NotionTxConfig(base_url="https://proxy.example.com/api/v3")

    @pytest.mark.parametrize("host", ["localhost", "127.0.0.1"])
    def test_http_localhost_accepted(self, host):
        NotionTxConfig(base_url=f"http://{host}:8080/api/v3")

    def test_http_remote_rejected(self):
        with pytest.raises(ValueError, match="insecure HTTP"):
            NotionTxConfig(base_url="http://www.notion.so/api/v3")

    @pytest.mark.parametrize("limit", [0, -1])
    def test_page_chunk_limit_must_be_positive(self, limit):
        with pytest.raises(ValueError, match="page_chunk_limit"):
            NotionTxConfig(page_chunk_limit=limit)

    def test_timeout_must_be_positive(self):
        with pytest.raises(ValueError, match="timeout_seconds"):
            NotionTxConfig(timeout_seconds=0)


class TestRepr:
    def test_token_masked(self):
        text = repr(NotionTxConfig(token="secret-token-abcd"))
        assert "secret-token" not in text
        assert "token='...abcd'" in text

    def test_short_token_fully_masked(self):
        assert "token='****'" in repr(NotionTxConfig(token="ab"))

    def test_other_fields_visible(self):
        assert "shard_id=14084" in repr(NotionTxConfig(token="abcdefgh"))
