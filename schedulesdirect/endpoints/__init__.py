"""
schedulesdirect.endpoints - Service operations grouped by resource
"""

from .account import AccountEndpoints
from .artwork import ArtworkEndpoints
from .available import AvailableEndpoints
from .base import EndpointGroup, chunked
from .lineups import LineupEndpoints
from .programs import ProgramEndpoints
from .schedules import ScheduleEndpoints

__all__ = [
    "AccountEndpoints",
    "ArtworkEndpoints",
    "AvailableEndpoints",
    "EndpointGroup",
    "LineupEndpoints",
    "ProgramEndpoints",
    "ScheduleEndpoints",
    "chunked",
]
