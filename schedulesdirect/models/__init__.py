"""
schedulesdirect.models - Response and request records
"""

from .artwork import (
    Artwork,
    ArtworkAspectRatio,
    ArtworkCaption,
    ArtworkCategory,
    ArtworkResponse,
    ArtworkSize,
    ArtworkTier,
)
from .available import AvailableDVBS, Country, Service
from .base import BaseResponse
from .lineup import (
    BroadcasterInfo,
    ChangeLineupResponse,
    ChannelMap,
    ChannelResponse,
    ChannelResponseMeta,
    Headend,
    Lineup,
    LineupResponse,
    Station,
    StationLogo,
    StationPreview,
)
from .program import (
    Animation,
    Audience,
    Award,
    ContentRating,
    Description,
    EntityType,
    EventDetails,
    LanguageCrossReference,
    Metadata,
    Movie,
    MovieQualityRating,
    Person,
    ProgramDescription,
    ProgramInfo,
    Recommendation,
    ShowType,
    StillRunningResponse,
    Team,
    Title,
    show_id_for_episode_id,
)
from .schedule import (
    LastModifiedEntry,
    LiveTapeDelay,
    Part,
    PremiereType,
    Program,
    Schedule,
    ScheduleMeta,
    StationScheduleRequest,
    Syndication,
)
from .status import AccountInfo, AccountMessage, StatusResponse, SystemStatus

__all__ = [
    "AccountInfo",
    "AccountMessage",
    "Animation",
    "Artwork",
    "ArtworkAspectRatio",
    "ArtworkCaption",
    "ArtworkCategory",
    "ArtworkResponse",
    "ArtworkSize",
    "ArtworkTier",
    "Audience",
    "AvailableDVBS",
    "Award",
    "BaseResponse",
    "BroadcasterInfo",
    "ChangeLineupResponse",
    "ChannelMap",
    "ChannelResponse",
    "ChannelResponseMeta",
    "ContentRating",
    "Country",
    "Description",
    "EntityType",
    "EventDetails",
    "Headend",
    "LanguageCrossReference",
    "LastModifiedEntry",
    "LiveTapeDelay",
    "Lineup",
    "LineupResponse",
    "Metadata",
    "Movie",
    "MovieQualityRating",
    "Part",
    "Person",
    "PremiereType",
    "Program",
    "ProgramDescription",
    "ProgramInfo",
    "Recommendation",
    "Schedule",
    "ScheduleMeta",
    "Service",
    "ShowType",
    "Station",
    "StationLogo",
    "StationPreview",
    "StationScheduleRequest",
    "StatusResponse",
    "StillRunningResponse",
    "Syndication",
    "SystemStatus",
    "Team",
    "Title",
    "show_id_for_episode_id",
]
