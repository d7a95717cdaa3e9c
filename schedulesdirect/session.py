"""
schedulesdirect.session - Session and token state

Holds the credential pair, the current token and its expiry. The state is
either VALID or STALE, decided by a pure predicate over the current time so
it can be exercised without any network I/O.
"""

import hashlib
from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import Optional


class SessionState(Enum):
    VALID = "valid"
    STALE = "stale"


def hash_password(password: str) -> str:
    """Return the lowercase sha1 hex digest the token endpoint expects"""
    return hashlib.sha1(password.encode("utf-8")).hexdigest()


class TokenSession:
    """Credentials and bearer token for one client instance"""

    # Tokens are valid for 24 hours from the server's issue time
    TOKEN_LIFETIME = timedelta(hours=24)

    def __init__(self, username: str, password: str):
        self.username = username
        # Only the digest is kept; the cleartext never leaves this constructor
        self.password_hash = hash_password(password)
        self.token: str = ""
        self.token_expiry: Optional[datetime] = None
        self.failed_request_count = 0

    @property
    def has_token(self) -> bool:
        return bool(self.token)

    def is_stale(self, now: Optional[datetime] = None) -> bool:
        """True when ``now`` is at or after the token expiry"""
        if self.token_expiry is None:
            return True
        if now is None:
            now = datetime.now(timezone.utc)
        return now >= self.token_expiry

    def state(self, now: Optional[datetime] = None) -> SessionState:
        return SessionState.STALE if self.is_stale(now) else SessionState.VALID

    def update(self, token: str, issued_at: Optional[datetime] = None):
        """Store a freshly minted token; expiry derives from the issue time"""
        if issued_at is None:
            issued_at = datetime.now(timezone.utc)
        self.token = token
        self.token_expiry = issued_at + self.TOKEN_LIFETIME

    def credentials_payload(self) -> dict:
        return {"username": self.username, "password": self.password_hash}

    def __repr__(self):
        return (
            f"TokenSession(username={self.username!r}, has_token={self.has_token}, "
            f"token_expiry={self.token_expiry!r})"
        )
