"""
schedulesdirect.exceptions - Error taxonomy

Exceptions raised by the client. Every failure reaches the caller through one
of these; nothing is swallowed or only logged.
"""

from datetime import datetime
from typing import TYPE_CHECKING, Any, Dict, Optional

if TYPE_CHECKING:
    from .codes import ErrorCode


class SchedulesDirectError(Exception):
    """Base exception for all client errors"""

    def __init__(self, message: str = ""):
        super().__init__(message)
        self.message = message


class ConfigurationError(SchedulesDirectError):
    """Caller misuse, e.g. an authenticated call before any token exists"""

    pass


class TransportError(SchedulesDirectError):
    """Network failure below the HTTP layer (DNS, refused connection, timeout)"""

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.cause = cause


class DecodeError(SchedulesDirectError):
    """Malformed JSON, literal or payload shape"""

    def __init__(self, message: str, fragment: Any = None):
        super().__init__(message)
        self.fragment = fragment


class ServiceError(SchedulesDirectError):
    """Well-formed error envelope returned by the service"""

    def __init__(
        self,
        code: "ErrorCode",
        message: str = "",
        server_id: str = "",
        timestamp: Optional[datetime] = None,
        response: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(code.describe(message))
        self.code = code
        self.server_message = message or code.message
        self.server_id = server_id
        self.timestamp = timestamp
        self.response = response or {}

    @property
    def is_auth_failure(self) -> bool:
        """True when the service rejected the credentials or token"""
        from .codes import AUTH_FAILURE_CODES

        return self.code in AUTH_FAILURE_CODES


class HTTPError(SchedulesDirectError):
    """Error HTTP status that did not carry a service error envelope"""

    EXCERPT_LENGTH = 200

    def __init__(self, status_code: int, body: bytes = b""):
        excerpt = body[: self.EXCERPT_LENGTH].decode("utf-8", errors="replace")
        super().__init__(f"HTTP {status_code}: {excerpt}" if excerpt else f"HTTP {status_code}")
        self.status_code = status_code
        self.body = excerpt
