"""
schedulesdirect - Client library for the Schedules Direct JSON API

Authenticates against the service, keeps the session token fresh, and decodes
lineups, schedules, program metadata and artwork into dataclasses.
"""

__version__ = "1.0.0"
__author__ = "schedulesdirect-python contributors"
__license__ = "GPL-3.0"

import logging

from .client import SchedulesDirectClient
from .codes import ErrorCode
from .config import ClientConfig
from .exceptions import (
    ConfigurationError,
    DecodeError,
    HTTPError,
    SchedulesDirectError,
    ServiceError,
    TransportError,
)
from .session import SessionState, TokenSession, hash_password
from .wire import Date, LooseBool, LooseInt

# Library logging is left to the application to configure
logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "SchedulesDirectClient",
    "ClientConfig",
    "ErrorCode",
    "SchedulesDirectError",
    "ConfigurationError",
    "TransportError",
    "DecodeError",
    "ServiceError",
    "HTTPError",
    "SessionState",
    "TokenSession",
    "hash_password",
    "Date",
    "LooseBool",
    "LooseInt",
]
