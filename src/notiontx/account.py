"""Caller credentials shared by every handle derived from a client."""

from __future__ import annotations

from dataclasses import dataclass

from notiontx.ids import normalize_id

TOKEN_COOKIE = "token_v2"


@dataclass(frozen=True)
class Account:
    """The session cookie and user id of the account issuing operations.

    Parameters
    ----------
    token:
        Value of the ``token_v2`` cookie of a logged-in browser session.
    user_id:
        Identifier of the user (the ``notion_user_id`` cookie).  Accepted in
        bare or grouped form.  Carried only inside transaction payloads, as
        the grantee of editor permission on new pages.
    """

    token: str
    user_id: str

    @classmethod
    def from_credentials(cls, token: str, user_id: str, *, strict: bool = True) -> Account:
        """Build an account, normalizing *user_id* to grouped form."""
        return cls(token=token, user_id=normalize_id(user_id, strict=strict))

    @property
    def cookie(self) -> str:
        return f"{TOKEN_COOKIE}={self.token}"

    def auth_headers(self) -> dict[str, str]:
        """Headers attached to every outbound request."""
        return {"Cookie": self.cookie}

    def __repr__(self) -> str:
        masked = f"...{self.token[-4:]}" if len(self.token) >= 4 else "****"
        return f"Account(token='{masked}', user_id={self.user_id!r})"
