"""
schedulesdirect.models.schedule - Station schedules and airings
"""

from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum
from typing import Any, Dict, List, Optional, Union

from ..wire import Date, optional, parse_datetime
from .program import ContentRating, show_id_for_episode_id


class PremiereType(str, Enum):
    """Values of Program.is_premiere_or_finale"""

    FINALE = "Finale"
    PREMIERE = "Premiere"
    SEASON_FINALE = "Season Finale"
    SEASON_PREMIERE = "Season Premiere"
    SERIES_FINALE = "Series Finale"
    SERIES_PREMIERE = "Series Premiere"


class LiveTapeDelay(str, Enum):
    LIVE = "Live"
    TAPE = "Tape"
    DELAYED = "Delayed"


@dataclass
class Syndication:
    source: str = ""
    type: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Syndication":
        return cls(source=data.get("source", ""), type=data.get("type", ""))


@dataclass
class Part:
    part_number: int = 0
    total_parts: int = 0

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Part":
        return cls(part_number=data.get("partNumber", 0), total_parts=data.get("totalParts", 0))


# Airing flags: attribute name -> JSON key
AIRING_FLAGS = {
    "new": "new",
    "cable_in_the_classroom": "cableInTheClassRoom",
    "catchup": "catchup",
    "continued": "continued",
    "educational": "educational",
    "joined_in_progress": "joinedInProgress",
    "left_in_progress": "leftInProgress",
    "premiere": "premiere",
    "program_break": "programBreak",
    "repeat": "repeat",
    "signed": "signed",
    "subject_to_blackout": "subjectToBlackout",
    "time_approximate": "timeApproximate",
}


@dataclass
class Program:
    """One airing of a program on a station"""

    program_id: str = ""
    air_date_time: Optional[datetime] = None
    md5: str = ""
    duration: int = 0
    live_tape_delay: str = ""
    is_premiere_or_finale: str = ""
    new: bool = False
    cable_in_the_classroom: bool = False
    catchup: bool = False
    continued: bool = False
    educational: bool = False
    joined_in_progress: bool = False
    left_in_progress: bool = False
    premiere: bool = False
    program_break: bool = False
    repeat: bool = False
    signed: bool = False
    subject_to_blackout: bool = False
    time_approximate: bool = False
    audio_properties: List[str] = field(default_factory=list)
    video_properties: List[str] = field(default_factory=list)
    syndication: Optional[Syndication] = None
    ratings: List[ContentRating] = field(default_factory=list)
    multipart: Optional[Part] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Program":
        flags = {name: bool(data.get(key, False)) for name, key in AIRING_FLAGS.items()}
        return cls(
            program_id=data.get("programID", ""),
            air_date_time=parse_datetime(data.get("airDateTime")),
            md5=data.get("md5", ""),
            duration=data.get("duration", 0),
            live_tape_delay=data.get("liveTapeDelay", ""),
            is_premiere_or_finale=data.get("isPremiereOrFinale", ""),
            audio_properties=list(data.get("audioProperties") or []),
            video_properties=list(data.get("videoProperties") or []),
            syndication=optional(Syndication.from_dict, data.get("syndication")),
            ratings=[ContentRating.from_dict(item) for item in data.get("ratings") or []],
            multipart=optional(Part.from_dict, data.get("multipart")),
            **flags,
        )

    @property
    def show_id(self) -> str:
        return show_id_for_episode_id(self.program_id)


@dataclass
class ScheduleMeta:
    modified: Optional[datetime] = None
    md5: str = ""
    start_date: Optional[Date] = None
    end_date: Optional[Date] = None
    days: int = 0

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ScheduleMeta":
        return cls(
            modified=parse_datetime(data.get("modified")),
            md5=data.get("md5", ""),
            start_date=optional(Date.from_json, data.get("startDate")),
            end_date=optional(Date.from_json, data.get("endDate")),
            days=data.get("days", 0),
        )


@dataclass
class Schedule:
    station_id: str = ""
    metadata: Optional[ScheduleMeta] = None
    programs: List[Program] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Schedule":
        return cls(
            station_id=data.get("stationID", ""),
            metadata=optional(ScheduleMeta.from_dict, data.get("metadata")),
            programs=[Program.from_dict(item) for item in data.get("programs") or []],
        )


@dataclass
class StationScheduleRequest:
    """Request body item for schedules and their MD5 hashes"""

    station_id: str
    dates: List[Union[str, date]] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"stationID": self.station_id}
        if self.dates:
            payload["date"] = [
                d.strftime(Date.DAY_FORMAT) if isinstance(d, date) else str(d) for d in self.dates
            ]
        return payload


@dataclass
class LastModifiedEntry:
    """MD5 and modification time of one station's schedule for one day"""

    last_modified: Optional[datetime] = None
    md5: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LastModifiedEntry":
        return cls(
            last_modified=parse_datetime(data.get("lastModified")),
            md5=data.get("md5", ""),
        )
