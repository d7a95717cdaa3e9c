"""
schedulesdirect.models.artwork - Artwork metadata

Image dimensions arrive as quoted strings and the primary/text flags in any of
the boolean spellings the service uses, so both go through the loose wire
types.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

from ..exceptions import DecodeError, ServiceError
from ..wire import LooseBool, LooseInt
from .base import BaseResponse


class ArtworkTier(str, Enum):
    SERIES = "Series"
    SEASON = "Season"
    EPISODE = "Episode"
    TEAM_EVENT = "Team Event (New)"
    ORGANIZATION = "Organization"
    CONFERENCE = "Conference"
    SPORT = "Sport"
    SPORT_EVENT = "Sport Event"
    COLLEGE = "College"
    TEAM = "Team"


class ArtworkCategory(str, Enum):
    BANNER = "Banner"
    BANNER_L1 = "Banner-L1"
    BANNER_L1T = "Banner-L1T"
    BANNER_L2 = "Banner-L2"
    BANNER_L3 = "Banner-L3"
    BANNER_LO = "Banner-LO"
    BANNER_LOT = "Banner-LOT"
    ICONIC = "Iconic"
    STAPLE = "Staple"
    CAST_ENSEMBLE = "Cast Ensemble"
    CAST_IN_CHARACTER = "Cast in Character"
    LOGO = "Logo"
    BOX_ART = "Box Art"
    POSTER_ART = "Poster Art"
    SCENE_STILL = "Scene Still"
    PHOTO = "Photo"
    PHOTO_HEADSHOT = "Photo-headshot"
    VOD_ART = "VOD Art"


class ArtworkSize(str, Enum):
    EXTRA_SMALL = "Xs"
    SMALL = "Sm"
    MEDIUM = "Md"
    LARGE = "Lg"
    MASTER = "Ms"


class ArtworkAspectRatio(str, Enum):
    RATIO_16X9 = "16x9"
    RATIO_4X3 = "4x3"
    RATIO_3X4 = "3x4"
    RATIO_2X3 = "2x3"
    RATIO_1X1 = "1x1"


@dataclass
class ArtworkCaption:
    content: str = ""
    language: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ArtworkCaption":
        return cls(content=data.get("content", ""), language=data.get("lang", ""))


def _loose_bool(value: Any) -> LooseBool:
    return LooseBool() if value is None else LooseBool.from_json(value)


def _loose_int(value: Any) -> LooseInt:
    return LooseInt(0) if value is None or value == "" else LooseInt.from_json(value)


@dataclass
class Artwork:
    uri: str = ""
    height: LooseInt = field(default_factory=lambda: LooseInt(0))
    width: LooseInt = field(default_factory=lambda: LooseInt(0))
    primary: LooseBool = field(default_factory=LooseBool)
    text: LooseBool = field(default_factory=LooseBool)
    aspect: str = ""
    category: str = ""
    size: str = ""
    tier: str = ""
    caption: Optional[ArtworkCaption] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Artwork":
        caption = data.get("caption")
        return cls(
            uri=data.get("uri", ""),
            height=_loose_int(data.get("height")),
            width=_loose_int(data.get("width")),
            primary=_loose_bool(data.get("primary")),
            text=_loose_bool(data.get("text")),
            aspect=data.get("aspect", ""),
            category=data.get("category", ""),
            size=data.get("size", ""),
            tier=data.get("tier", ""),
            caption=ArtworkCaption.from_dict(caption) if caption else None,
        )


def artwork_list(value: Any) -> List[Artwork]:
    if not isinstance(value, list):
        raise DecodeError("Expected a JSON array of artwork", fragment=value)
    return [Artwork.from_dict(item) for item in value]


@dataclass
class ArtworkResponse:
    """
    Artwork found for one requested program ID

    Exactly one of ``artwork`` and ``error`` is set: the service puts either
    an array of artwork or an error envelope under the same ``data`` key.
    """

    program_id: str = ""
    artwork: Optional[List[Artwork]] = None
    error: Optional[BaseResponse] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ArtworkResponse":
        program_id = data.get("programID", "")
        payload = data.get("data")

        if isinstance(payload, list):
            return cls(program_id=program_id, artwork=artwork_list(payload))
        if isinstance(payload, dict):
            return cls(program_id=program_id, error=BaseResponse.from_dict(payload))

        raise DecodeError(
            f"Artwork data for {program_id or 'unknown program'} is neither an array nor an object",
            fragment=payload,
        )

    @property
    def found(self) -> bool:
        return self.artwork is not None

    def raise_for_error(self):
        """Raise the per-program error as a ServiceError, if there is one"""
        if self.error is not None and not self.error.ok:
            raise ServiceError(
                self.error.code,
                message=self.error.message,
                server_id=self.error.server_id,
                timestamp=self.error.timestamp,
            )
