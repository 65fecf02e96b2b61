"""Shared test fixtures for the notiontx test suite."""

from __future__ import annotations

from dataclasses import dataclass

import pytest

from notiontx.account import Account
from notiontx.client import NotionClient
from notiontx.config import NotionTxConfig


@dataclass(frozen=True)
class SampleIds:
    """Credentials and identifiers used across the suite, in bare and grouped form."""

    token: str = "test_token_1234"
    bare_user: str = "0123456789abcdef0123456789abcdef"
    user: str = "01234567-89ab-cdef-0123-456789abcdef"
    bare_space: str = "fedcba9876543210fedcba9876543210"
    space: str = "fedcba98-7654-3210-fedc-ba9876543210"
    bare_page: str = "abcdef0123456789abcdef0123456789"
    page: str = "abcdef01-2345-6789-abcd-ef0123456789"
    text: str = "11111111-2222-3333-4444-555555555555"


@pytest.fixture
def ids() -> SampleIds:
    return SampleIds()


@pytest.fixture
def config(ids: SampleIds) -> NotionTxConfig:
    """Default test configuration with a dummy token."""
    return NotionTxConfig(token=ids.token)


@pytest.fixture
def account(ids: SampleIds) -> Account:
    return Account.from_credentials(ids.token, ids.bare_user)


@pytest.fixture
def client(ids: SampleIds):
    """Sync client with dummy credentials; its HTTP client is patched per test."""
    with NotionClient(token=ids.token, user_id=ids.bare_user) as c:
        yield c
