"""
Tests for session and token state
"""
from datetime import datetime, timedelta, timezone

from schedulesdirect import SessionState, TokenSession, hash_password


class TestPasswordHashing:
    """Tests for password hashing"""

    def test_hash_password(self):
        """Test SHA1 password hashing"""
        # SHA1 of "password123"
        assert hash_password("password123") == "cbfdac6008f9cab4083784cbd1874f76618d2a97"

    def test_hash_password_empty(self):
        """Test hashing empty password"""
        assert hash_password("") == "da39a3ee5e6b4b0d3255bfef95601890afd80709"

    def test_cleartext_not_kept(self):
        """Test only the digest is stored"""
        session = TokenSession("testuser", "testpassword")
        assert session.password_hash == "8bb6118f8fd6935ad0876a3be34a717d32708ffd"
        assert "testpassword" not in vars(session).values()
        assert session.credentials_payload() == {
            "username": "testuser",
            "password": "8bb6118f8fd6935ad0876a3be34a717d32708ffd",
        }


class TestStaleness:
    """Tests for the VALID/STALE predicate"""

    def test_new_session_is_stale(self):
        """Test a session without a token needs authentication"""
        session = TokenSession("testuser", "testpassword")
        assert not session.has_token
        assert session.is_stale()
        assert session.state() is SessionState.STALE

    def test_expiry_from_issue_time(self):
        """Test expiry is the server issue time plus 24 hours"""
        issued = datetime(2016, 8, 23, 13, 55, 25, tzinfo=timezone.utc)
        session = TokenSession("testuser", "testpassword")
        session.update("abc", issued)
        assert session.token_expiry == issued + timedelta(hours=24)

    def test_boundary(self):
        """Test the token is stale exactly at expiry"""
        issued = datetime(2016, 8, 23, 13, 55, 25, tzinfo=timezone.utc)
        session = TokenSession("testuser", "testpassword")
        session.update("abc", issued)

        expiry = issued + timedelta(hours=24)
        assert session.state(expiry - timedelta(seconds=1)) is SessionState.VALID
        assert session.state(expiry) is SessionState.STALE
        assert session.is_stale(expiry + timedelta(days=1))

    def test_repr_hides_credentials(self):
        """Test the password digest and token are not printed"""
        session = TokenSession("testuser", "testpassword")
        session.update("secret-token")
        text = repr(session)
        assert "testuser" in text
        assert "secret-token" not in text
        assert session.password_hash not in text
