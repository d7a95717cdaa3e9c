"""
schedulesdirect.client - Schedules Direct JSON API client

Ties the session, the transport and the endpoint groups together:

    with SchedulesDirectClient("user", "secret") as client:
        status = client.account.get_status()
        for lineup in client.lineups.get_lineups().lineups:
            channels = client.lineups.get_channels(lineup.lineup)

A client instance is not thread-safe; serialize calls or use one client per
thread.
"""

import logging
import os
from typing import Optional

from .config import ENV_PREFIX, ClientConfig
from .endpoints import (
    AccountEndpoints,
    ArtworkEndpoints,
    AvailableEndpoints,
    LineupEndpoints,
    ProgramEndpoints,
    ScheduleEndpoints,
)
from .exceptions import ConfigurationError
from .session import TokenSession
from .transport import Transport

logger = logging.getLogger(__name__)


class SchedulesDirectClient:
    """Client for the Schedules Direct JSON API"""

    def __init__(
        self,
        username: str,
        password: str,
        config: Optional[ClientConfig] = None,
        auto_authenticate: bool = True,
    ):
        """
        Args:
            username: Account user name
            password: Account password in cleartext; only its SHA1 digest is kept
            config: Service settings, defaults to ClientConfig()
            auto_authenticate: Fetch a token right away
        """
        if not username:
            raise ConfigurationError("A Schedules Direct username is required")

        self.config = config or ClientConfig()
        self.session = TokenSession(username, password)
        self.transport = Transport(self.config, self.session)

        self.account = AccountEndpoints(self.transport)
        self.lineups = LineupEndpoints(self.transport)
        self.schedules = ScheduleEndpoints(self.transport)
        self.programs = ProgramEndpoints(self.transport)
        self.artwork = ArtworkEndpoints(self.transport)
        self.available = AvailableEndpoints(self.transport)

        logger.debug("Client created for %s against %s", username, self.config.api_root)

        if auto_authenticate:
            self.authenticate()

    @classmethod
    def from_env(cls, environ=None, auto_authenticate: bool = True) -> "SchedulesDirectClient":
        """Build a client from SCHEDULESDIRECT_USERNAME/PASSWORD and the config variables"""
        environ = os.environ if environ is None else environ
        username = environ.get(ENV_PREFIX + "USERNAME", "")
        if not username:
            raise ConfigurationError(f"{ENV_PREFIX}USERNAME is not set")

        return cls(
            username,
            environ.get(ENV_PREFIX + "PASSWORD", ""),
            config=ClientConfig.from_env(environ),
            auto_authenticate=auto_authenticate,
        )

    def authenticate(self) -> str:
        """Fetch a new token; normally only needed with auto_authenticate=False"""
        token = self.transport.authenticate()
        logger.info("Authenticated to Schedules Direct as %s", self.session.username)
        return token

    @property
    def token(self) -> str:
        return self.session.token

    @property
    def total_requests(self) -> int:
        return self.transport.total_requests

    def close(self):
        self.transport.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def __repr__(self):
        return f"SchedulesDirectClient({self.session!r}, api_root={self.config.api_root!r})"
