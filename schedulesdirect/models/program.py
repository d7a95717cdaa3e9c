"""
schedulesdirect.models.program - Program metadata records

ProgramInfo is keyed by a 14-character program ID whose first two letters give
the kind (EP episode, SH show, MV movie, SP sports). Episode IDs share their
middle eight characters with the show they belong to.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional

from ..wire import Date, optional, parse_datetime
from .artwork import Artwork


class EntityType(str, Enum):
    EPISODE = "Episode"
    MOVIE = "Movie"
    SHOW = "Show"
    SPORTS = "Sports"


class ShowType(str, Enum):
    FEATURE_FILM = "Feature Film"
    MINISERIES = "Miniseries"
    PAID_PROGRAMMING = "Paid Programming"
    SERIES = "Series"
    SHORT_FILM = "Short Film"
    SPECIAL = "Special"
    SPORTS_EVENT = "Sports event"
    SPORTS_NON_EVENT = "Sports non-event"
    THEATRE_EVENT = "Theatre Event"
    TV_MOVIE = "TV Movie"


class Animation(str, Enum):
    ANIMATED = "Animated"
    ANIME = "Anime"
    LIVE_ACTION_ANIMATED = "Live action/animated"
    LIVE_ACTION_ANIME = "Live action/anime"


class Audience(str, Enum):
    CHILDREN = "Children"
    ADULTS_ONLY = "Adults only"


def show_id_for_episode_id(program_id: str) -> str:
    """
    Return the SH program ID of the show an EP episode belongs to

    Returns an empty string for anything that is not an episode ID.
    """
    if program_id.startswith("EP") and len(program_id) >= 10:
        return f"SH{program_id[2:10]}0000"
    return ""


@dataclass
class ContentRating:
    body: str = ""
    code: str = ""
    country: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ContentRating":
        return cls(
            body=data.get("body", ""),
            code=data.get("code", ""),
            country=data.get("country", ""),
        )


@dataclass
class Award:
    award_name: str = ""
    category: str = ""
    name: str = ""
    person_id: str = ""
    recipient: str = ""
    won: bool = False
    year: Optional[Date] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Award":
        return cls(
            award_name=data.get("awardName", ""),
            category=data.get("category", ""),
            name=data.get("name", ""),
            person_id=data.get("personId", ""),
            recipient=data.get("recipient", ""),
            won=bool(data.get("won", False)),
            year=optional(Date.from_json, data.get("year")),
        )


@dataclass
class Person:
    person_id: str = ""
    name_id: str = ""
    name: str = ""
    role: str = ""
    character_name: str = ""
    billing_order: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Person":
        return cls(
            person_id=data.get("personId", ""),
            name_id=data.get("nameId", ""),
            name=data.get("name", ""),
            role=data.get("role", ""),
            character_name=data.get("characterName", ""),
            billing_order=data.get("billingOrder", ""),
        )


@dataclass
class Description:
    description: str = ""
    language: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Description":
        return cls(
            description=data.get("description", ""),
            language=data.get("descriptionLanguage", ""),
        )


@dataclass
class MovieQualityRating:
    increment: str = ""
    max_rating: str = ""
    min_rating: str = ""
    rating: str = ""
    ratings_body: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MovieQualityRating":
        return cls(
            increment=data.get("increment", ""),
            max_rating=data.get("maxRating", ""),
            min_rating=data.get("minRating", ""),
            rating=data.get("rating", ""),
            ratings_body=data.get("ratingsBody", ""),
        )


@dataclass
class Movie:
    duration: int = 0
    quality_rating: List[MovieQualityRating] = field(default_factory=list)
    year: Optional[Date] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Movie":
        return cls(
            duration=data.get("duration", 0),
            quality_rating=[MovieQualityRating.from_dict(r) for r in data.get("qualityRating") or []],
            year=optional(Date.from_json, data.get("year")),
        )


@dataclass
class Metadata:
    """Season/episode numbering from one metadata provider"""

    episode: int = 0
    episode_id: int = 0
    season: int = 0
    series_id: int = 0
    total_episodes: int = 0
    total_seasons: int = 0

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Metadata":
        return cls(
            episode=data.get("episode", 0),
            episode_id=data.get("episodeID", 0),
            season=data.get("season", 0),
            series_id=data.get("seriesID", 0),
            total_episodes=data.get("totalEpisodes", 0),
            total_seasons=data.get("totalSeasons", 0),
        )


@dataclass
class Team:
    is_home: bool = False
    name: str = ""
    score: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Team":
        return cls(
            is_home=bool(data.get("isHome", False)),
            name=data.get("name", ""),
            score=data.get("score", ""),
        )


@dataclass
class EventDetails:
    game_date: Optional[Date] = None
    teams: List[Team] = field(default_factory=list)
    venue: str = ""
    sub_type: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "EventDetails":
        return cls(
            game_date=optional(Date.from_json, data.get("gameDate")),
            teams=[Team.from_dict(t) for t in data.get("teams") or []],
            venue=data.get("venue100", ""),
            sub_type=data.get("subType", ""),
        )


@dataclass
class Recommendation:
    program_id: str = ""
    title120: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Recommendation":
        return cls(program_id=data.get("programID", ""), title120=data.get("title120", ""))


@dataclass
class Title:
    title120: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Title":
        return cls(title120=data.get("title120", ""))


@dataclass
class ProgramInfo:
    """Full metadata for one program ID"""

    program_id: str = ""
    md5: str = ""
    titles: List[Title] = field(default_factory=list)
    episode_title150: str = ""
    descriptions: Dict[str, List[Description]] = field(default_factory=dict)
    original_air_date: Optional[Date] = None
    genres: List[str] = field(default_factory=list)
    entity_type: str = ""
    show_type: str = ""
    animation: str = ""
    audience: str = ""
    duration: int = 0
    holiday: str = ""
    official_url: str = ""
    resource_id: str = ""
    keywords: Dict[str, List[str]] = field(default_factory=dict)
    metadata: List[Dict[str, Metadata]] = field(default_factory=list)
    cast: List[Person] = field(default_factory=list)
    crew: List[Person] = field(default_factory=list)
    awards: List[Award] = field(default_factory=list)
    content_advisory: List[str] = field(default_factory=list)
    content_rating: List[ContentRating] = field(default_factory=list)
    movie: Optional[Movie] = None
    event_details: Optional[EventDetails] = None
    recommendations: List[Recommendation] = field(default_factory=list)
    episode_image: Optional[Artwork] = None
    has_episode_artwork: bool = False
    has_image_artwork: bool = False
    has_movie_artwork: bool = False
    has_series_artwork: bool = False
    has_sports_artwork: bool = False

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ProgramInfo":
        descriptions = {
            kind: [Description.from_dict(d) for d in items or []]
            for kind, items in (data.get("descriptions") or {}).items()
        }
        metadata = [
            {provider: Metadata.from_dict(values) for provider, values in entry.items()}
            for entry in data.get("metadata") or []
        ]
        return cls(
            program_id=data.get("programID", ""),
            md5=data.get("md5", ""),
            titles=[Title.from_dict(t) for t in data.get("titles") or []],
            episode_title150=data.get("episodeTitle150", ""),
            descriptions=descriptions,
            original_air_date=optional(Date.from_json, data.get("originalAirDate")),
            genres=list(data.get("genres") or []),
            entity_type=data.get("entityType", ""),
            show_type=data.get("showType", ""),
            animation=data.get("animation", ""),
            audience=data.get("audience", ""),
            duration=data.get("duration", 0),
            holiday=data.get("holiday", ""),
            official_url=data.get("officialURL", ""),
            resource_id=data.get("resourceID", ""),
            keywords={k: list(v or []) for k, v in (data.get("keyWords") or {}).items()},
            metadata=metadata,
            cast=[Person.from_dict(p) for p in data.get("cast") or []],
            crew=[Person.from_dict(p) for p in data.get("crew") or []],
            awards=[Award.from_dict(a) for a in data.get("awards") or []],
            content_advisory=list(data.get("contentAdvisory") or []),
            content_rating=[ContentRating.from_dict(r) for r in data.get("contentRating") or []],
            movie=optional(Movie.from_dict, data.get("movie")),
            event_details=optional(EventDetails.from_dict, data.get("eventDetails")),
            recommendations=[Recommendation.from_dict(r) for r in data.get("recommendations") or []],
            episode_image=optional(Artwork.from_dict, data.get("episodeImage")),
            has_episode_artwork=bool(data.get("hasEpisodeArtwork", False)),
            has_image_artwork=bool(data.get("hasImageArtwork", False)),
            has_movie_artwork=bool(data.get("hasMovieArtwork", False)),
            has_series_artwork=bool(data.get("hasSeriesArtwork", False)),
            has_sports_artwork=bool(data.get("hasSportsArtwork", False)),
        )

    @property
    def title(self) -> str:
        return self.titles[0].title120 if self.titles else ""

    @property
    def has_artwork(self) -> bool:
        return (
            self.has_episode_artwork
            or self.has_image_artwork
            or self.has_movie_artwork
            or self.has_series_artwork
            or self.has_sports_artwork
        )

    @property
    def show_id(self) -> str:
        return show_id_for_episode_id(self.program_id)

    def artwork_lookup_ids(self) -> List[str]:
        """
        IDs to pass to the artwork endpoint for this program

        Episodes with their own artwork are looked up alongside their show;
        episodes without it fall back to the show alone.
        """
        show_id = self.show_id
        if self.has_episode_artwork and show_id:
            return [self.program_id, show_id]
        if not self.has_episode_artwork and show_id:
            return [show_id]
        return [self.program_id]


@dataclass
class ProgramDescription:
    code: int = 0
    description100: str = ""
    description1000: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ProgramDescription":
        return cls(
            code=data.get("code", 0),
            description100=data.get("description100", ""),
            description1000=data.get("description1000", ""),
        )


@dataclass
class LanguageCrossReference:
    """Translated title and description of a program in another language"""

    program_id: str = ""
    md5: str = ""
    description_language: str = ""
    description_language_name: str = ""
    title_language: str = ""
    title_language_name: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LanguageCrossReference":
        return cls(
            program_id=data.get("programID", ""),
            md5=data.get("md5", ""),
            description_language=data.get("descriptionLanguage", ""),
            description_language_name=data.get("descriptionLanguageName", ""),
            title_language=data.get("titleLanguage", ""),
            title_language_name=data.get("titleLanguageName", ""),
        )


@dataclass
class StillRunningResponse:
    """Real-time status of a sports event that may run past its slot"""

    program_id: str = ""
    event_start_date_time: Optional[datetime] = None
    is_complete: bool = False
    away_team: Optional[Team] = None
    home_team: Optional[Team] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "StillRunningResponse":
        result = data.get("result") or {}
        return cls(
            program_id=data.get("programID", ""),
            event_start_date_time=parse_datetime(data.get("eventStartDateTime")),
            is_complete=bool(data.get("isComplete", False)),
            away_team=optional(Team.from_dict, result.get("awayTeam")),
            home_team=optional(Team.from_dict, result.get("homeTeam")),
        )
