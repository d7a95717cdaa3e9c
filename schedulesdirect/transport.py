"""
schedulesdirect.transport - Request/response transport core

Sends authenticated requests over a persistent requests session, renews the
token lazily when it goes stale, repairs gzip/deflate bodies the HTTP layer
left compressed, and classifies service error envelopes apart from plain
HTTP failures. Endpoint methods receive raw bytes back.
"""

import gzip
import json
import logging
import zlib
from typing import Any, Dict, Optional, Union

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from .codes import AUTH_FAILURE_CODES, ErrorCode
from .config import ClientConfig
from .exceptions import ConfigurationError, DecodeError, HTTPError, ServiceError, TransportError
from .session import TokenSession
from .wire import parse_datetime

logger = logging.getLogger(__name__)

GZIP_MAGIC = b"\x1f\x8b"
SUPPORTED_METHODS = ("GET", "POST", "PUT", "DELETE")
WRITE_METHODS = ("POST", "PUT", "DELETE")

Body = Union[None, bytes, str, list, dict]


class Transport:
    """Executes requests against the service on behalf of endpoint methods"""

    def __init__(self, config: ClientConfig, session: TokenSession):
        self.config = config
        self.token_session = session
        self.http: Optional[requests.Session] = None
        self.total_requests = 0

        self.init_http()

    def init_http(self):
        """Initialize the persistent HTTP session"""
        if self.http:
            self.http.close()

        self.http = requests.Session()
        self.http.headers.update(
            {
                "User-Agent": self.config.user_agent,
                "Accept": "application/json",
                "Accept-Encoding": "deflate,gzip",
            }
        )

        # The only retry is the authentication retry in send()
        retry_strategy = Retry(total=0, backoff_factor=0, status_forcelist=[])
        adapter = HTTPAdapter(max_retries=retry_strategy)
        self.http.mount("https://", adapter)
        self.http.mount("http://", adapter)

        logger.debug("HTTP session initialized for %s", self.config.api_root)

    def authenticate(self) -> str:
        """
        Mint a fresh token from the credential pair

        On an error envelope the ServiceError propagates and the session keeps
        whatever token and expiry it had.
        """
        data = self.send("POST", "/token", self.token_session.credentials_payload(), needs_auth=False)

        try:
            payload = json.loads(data)
        except ValueError:
            raise DecodeError("Token response is not valid JSON", fragment=data[:200]) from None

        token = payload.get("token") if isinstance(payload, dict) else None
        if not token:
            raise DecodeError("Token response did not contain a token", fragment=payload)

        issued_at = parse_datetime(payload.get("datetime"))
        self.token_session.update(token, issued_at)
        logger.debug("Authenticated as %s, token valid until %s",
                     self.token_session.username, self.token_session.token_expiry)
        return token

    def send(
        self,
        method: str,
        path: str,
        body: Body = None,
        needs_auth: bool = True,
        params: Optional[Dict[str, str]] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> bytes:
        """
        Execute one logical call and return the raw response bytes

        Args:
            method: HTTP verb (GET, POST, PUT, DELETE)
            path: Endpoint path below the API root, or an absolute URL
            body: JSON-serializable payload, or pre-encoded bytes/str
            needs_auth: Whether the call carries the session token
            params: Query string parameters
            headers: Extra request headers

        Raises:
            ConfigurationError: Authenticated call without any token
            TransportError: Connection-level failure
            DecodeError: Body could not be decompressed
            ServiceError: Service error envelope
            HTTPError: Error status without an envelope
        """
        method = method.upper()
        if method not in SUPPORTED_METHODS:
            raise ConfigurationError(f"Unsupported HTTP method: {method}")

        session = self.token_session
        if needs_auth:
            if not session.has_token:
                raise ConfigurationError("Not authenticated: call authenticate() first")
            if session.failed_request_count == 0 and session.is_stale():
                logger.info("Token is stale, renewing before %s %s", method, path)
                self.authenticate()

        try:
            content = self._send_once(method, path, body, needs_auth, params, headers)
        except ServiceError as e:
            if not (needs_auth and e.code in AUTH_FAILURE_CODES and session.failed_request_count == 0):
                raise
        else:
            # Unauthenticated calls include the token mint inside a retry
            if needs_auth:
                session.failed_request_count = 0
            return content

        # The token was rejected server-side: renew and retry the whole call once
        logger.info("Token rejected for %s %s, re-authenticating and retrying once", method, path)
        session.failed_request_count += 1
        try:
            self.authenticate()
            return self.send(method, path, body, needs_auth, params, headers)
        finally:
            session.failed_request_count = 0

    def _send_once(
        self,
        method: str,
        path: str,
        body: Body,
        needs_auth: bool,
        params: Optional[Dict[str, str]],
        headers: Optional[Dict[str, str]],
    ) -> bytes:
        url = self.config.url_for(path)
        request_headers = dict(headers or {})
        if needs_auth:
            request_headers["token"] = self.token_session.token
        if method in WRITE_METHODS:
            request_headers["Content-Type"] = "application/json"

        data = self._encode_body(body)

        self.total_requests += 1
        logger.debug(
            "%s %s", method, url[:100] + "..." if len(url) > 100 else url
        )

        try:
            response = self.http.request(
                method,
                url,
                params=params,
                data=data,
                headers=request_headers,
                timeout=self.config.timeout,
            )
        except requests.exceptions.RequestException as e:
            raise TransportError(f"{method} {url} failed: {e}", cause=e) from e

        content = self._decompress(response)
        logger.debug("  %d bytes received (HTTP %d)", len(content), response.status_code)

        self._raise_for_envelope(content, response.status_code)

        if response.status_code >= 400:
            raise HTTPError(response.status_code, content)

        return content

    @staticmethod
    def _encode_body(body: Body) -> Optional[bytes]:
        if body is None:
            return None
        if isinstance(body, bytes):
            return body
        if isinstance(body, str):
            return body.encode("utf-8")
        return json.dumps(body, separators=(",", ":")).encode("utf-8")

    @staticmethod
    def _decompress(response: requests.Response) -> bytes:
        """Undo a content encoding the HTTP layer did not already remove"""
        content = response.content or b""
        encoding = response.headers.get("Content-Encoding", "").lower()

        try:
            if "gzip" in encoding and content.startswith(GZIP_MAGIC):
                logger.debug("  Decompressing gzip body manually (%d bytes)", len(content))
                return gzip.decompress(content)
            if "deflate" in encoding and content[:1] == b"\x78":
                logger.debug("  Inflating deflate body manually (%d bytes)", len(content))
                return zlib.decompress(content)
        except (OSError, EOFError, zlib.error) as e:
            raise DecodeError(f"Could not decompress {encoding} body: {e}", fragment=content[:40]) from e

        return content

    @staticmethod
    def _raise_for_envelope(content: bytes, status_code: int):
        """Raise ServiceError when the body is an error envelope with a non-zero code"""
        if not content.lstrip().startswith(b"{"):
            return
        try:
            envelope = json.loads(content)
        except ValueError:
            return
        try:
            raise_for_payload(envelope)
        except DecodeError:
            # Not a service envelope, e.g. a gateway error object
            if status_code < 400:
                raise

    def close(self):
        """Clean shutdown"""
        if self.http:
            self.http.close()
            self.http = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()


def parse_envelope_time(value: Any):
    """Parse an envelope timestamp, None when it is malformed"""
    try:
        return parse_datetime(value)
    except DecodeError:
        return None


def raise_for_payload(value: Any):
    """
    Raise ServiceError if a decoded payload is an error envelope

    Used where an endpoint expects an array or map but the service answered
    with an error object in its place.
    """
    if not isinstance(value, dict) or value.get("code") is None:
        return

    code = ErrorCode.from_json(value["code"])
    if code == ErrorCode.OK:
        return

    raise ServiceError(
        code,
        message=value.get("message") or "",
        server_id=value.get("serverID") or "",
        timestamp=parse_envelope_time(value.get("datetime")),
        response=value,
    )
