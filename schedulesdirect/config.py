"""
schedulesdirect.config - Client configuration

Immutable settings handed to the client at construction: service location,
API version, client identifier, timeout and bulk batch sizes. Environment
variables may override the defaults.
"""

import logging
import os
from dataclasses import dataclass, fields, replace

from . import __version__

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://json.schedulesdirect.org/"
DEFAULT_API_VERSION = "20141201"

# API versions that send schedules and programs as one JSON document per line
LINE_DELIMITED_API_VERSIONS = frozenset({"20140530"})

ENV_PREFIX = "SCHEDULESDIRECT_"


@dataclass(frozen=True)
class ClientConfig:
    """Configuration for SchedulesDirectClient"""

    base_url: str = DEFAULT_BASE_URL
    api_version: str = DEFAULT_API_VERSION
    user_agent: str = f"schedulesdirect-python/{__version__}"
    timeout: int = 30

    # Per-call caps; the description and xref caps are not documented by the service
    program_batch_size: int = 5000
    artwork_batch_size: int = 500
    description_batch_size: int = 500
    xref_batch_size: int = 500

    def __post_init__(self):
        for name in (
            "program_batch_size",
            "artwork_batch_size",
            "description_batch_size",
            "xref_batch_size",
        ):
            if getattr(self, name) < 1:
                raise ValueError(f"{name} must be at least 1")

    @property
    def api_root(self) -> str:
        return f"{self.base_url.rstrip('/')}/{self.api_version}"

    @property
    def line_delimited(self) -> bool:
        return self.api_version in LINE_DELIMITED_API_VERSIONS

    def url_for(self, path: str) -> str:
        """Full URL for an endpoint path, or ``path`` itself if already absolute"""
        if path.startswith(("http://", "https://")):
            return path
        if not path.startswith("/"):
            path = "/" + path
        return self.api_root + path

    @classmethod
    def from_env(cls, environ=None) -> "ClientConfig":
        """Build a config, overriding defaults from SCHEDULESDIRECT_* variables"""
        environ = os.environ if environ is None else environ
        overrides = {}

        for field in fields(cls):
            env_name = ENV_PREFIX + field.name.upper()
            raw = environ.get(env_name)
            if raw is None or raw == "":
                continue

            if field.type in (int, "int"):
                try:
                    overrides[field.name] = int(raw)
                except ValueError:
                    logger.warning("Invalid %s=%r, using default %s", env_name, raw, field.default)
            else:
                overrides[field.name] = raw

        return replace(cls(), **overrides)
