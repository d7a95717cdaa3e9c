"""
schedulesdirect.models.lineup - Lineup, headend and station records
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional

from ..wire import LooseInt, optional, parse_datetime
from .base import BaseResponse


@dataclass
class Lineup:
    lineup: str = ""
    name: str = ""
    id: str = ""
    modified: Optional[datetime] = None
    uri: str = ""
    is_deleted: bool = False

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Lineup":
        return cls(
            lineup=data.get("lineup", ""),
            name=data.get("name", ""),
            id=data.get("ID", ""),
            modified=parse_datetime(data.get("modified")),
            uri=data.get("uri", ""),
            is_deleted=bool(data.get("isDeleted", False)),
        )


@dataclass
class LineupResponse(BaseResponse):
    """Lineups subscribed to by the account"""

    lineups: List[Lineup] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LineupResponse":
        return cls(
            **vars(BaseResponse.from_dict(data)),
            lineups=[Lineup.from_dict(item) for item in data.get("lineups") or []],
        )


@dataclass
class ChangeLineupResponse(BaseResponse):
    """Reply to adding or removing a lineup"""

    # Sent as a number or as a quoted number depending on the server
    changes_remaining: LooseInt = field(default_factory=lambda: LooseInt(0))

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ChangeLineupResponse":
        remaining = data.get("changesRemaining")
        return cls(
            **vars(BaseResponse.from_dict(data)),
            changes_remaining=LooseInt(0) if remaining is None else LooseInt.from_json(remaining),
        )


@dataclass
class Headend:
    headend: str = ""
    transport: str = ""
    location: str = ""
    lineups: List[Lineup] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Headend":
        return cls(
            headend=data.get("headend", ""),
            transport=data.get("transport", ""),
            location=data.get("location", ""),
            lineups=[Lineup.from_dict(item) for item in data.get("lineups") or []],
        )


@dataclass
class BroadcasterInfo:
    city: str = ""
    state: str = ""
    postalcode: str = ""
    country: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "BroadcasterInfo":
        return cls(
            city=data.get("city", ""),
            state=data.get("state", ""),
            postalcode=data.get("postalcode", ""),
            country=data.get("country", ""),
        )


@dataclass
class StationLogo:
    url: str = ""
    height: int = 0
    width: int = 0
    md5: str = ""
    source: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "StationLogo":
        return cls(
            url=data.get("URL", ""),
            height=data.get("height", 0),
            width=data.get("width", 0),
            md5=data.get("md5", ""),
            source=data.get("source", ""),
        )


@dataclass
class Station:
    station_id: str = ""
    name: str = ""
    callsign: str = ""
    affiliate: str = ""
    broadcaster: Optional[BroadcasterInfo] = None
    broadcast_language: List[str] = field(default_factory=list)
    description_language: List[str] = field(default_factory=list)
    is_commercial_free: bool = False
    is_radio_station: bool = False
    logo: Optional[StationLogo] = None
    logos: List[StationLogo] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Station":
        return cls(
            station_id=data.get("stationID", ""),
            name=data.get("name", ""),
            callsign=data.get("callsign", ""),
            affiliate=data.get("affiliate", ""),
            broadcaster=optional(BroadcasterInfo.from_dict, data.get("broadcaster")),
            broadcast_language=list(data.get("broadcastLanguage") or []),
            description_language=list(data.get("descriptionLanguage") or []),
            is_commercial_free=bool(data.get("isCommercialFree", False)),
            is_radio_station=bool(data.get("isRadioStation", False)),
            logo=optional(StationLogo.from_dict, data.get("logo")),
            logos=[StationLogo.from_dict(item) for item in data.get("stationLogo") or []],
        )


@dataclass
class StationPreview:
    affiliate: str = ""
    callsign: str = ""
    channel: str = ""
    name: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "StationPreview":
        return cls(
            affiliate=data.get("affiliate", ""),
            callsign=data.get("callsign", ""),
            channel=data.get("channel", ""),
            name=data.get("name", ""),
        )


@dataclass
class ChannelMap:
    """
    Maps a station to a channel in a lineup

    Only a subset of the fields is populated, depending on the transport
    (cable, antenna, satellite, DVB).
    """

    station_id: str = ""
    channel: str = ""
    channel_major: int = 0
    channel_minor: int = 0
    delivery_system: str = ""
    fec: str = ""
    frequency_hz: int = 0
    logical_channel_number: str = ""
    match_type: str = ""
    modulation_system: str = ""
    network_id: int = 0
    polarization: str = ""
    provider_callsign: str = ""
    service_id: int = 0
    symbol_rate: int = 0
    transport_id: int = 0
    virtual_channel: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ChannelMap":
        return cls(
            station_id=data.get("stationID", ""),
            channel=data.get("channel", ""),
            channel_major=data.get("channelMajor", 0),
            channel_minor=data.get("channelMinor", 0),
            delivery_system=data.get("deliverySystem", ""),
            fec=data.get("fec", ""),
            frequency_hz=data.get("frequencyHz", 0),
            logical_channel_number=data.get("logicalChannelNumber", ""),
            match_type=data.get("matchType", ""),
            modulation_system=data.get("modulationSystem", ""),
            network_id=data.get("networkID", 0),
            polarization=data.get("polarization", ""),
            provider_callsign=data.get("providerCallsign", ""),
            service_id=data.get("serviceID", 0),
            symbol_rate=data.get("symbolrate", 0),
            transport_id=data.get("transportID", 0),
            virtual_channel=data.get("virtualChannel", ""),
        )


@dataclass
class ChannelResponseMeta:
    lineup: str = ""
    modified: Optional[datetime] = None
    transport: str = ""
    modulation: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ChannelResponseMeta":
        return cls(
            lineup=data.get("lineup", ""),
            modified=parse_datetime(data.get("modified")),
            transport=data.get("transport", ""),
            modulation=data.get("modulation", ""),
        )


@dataclass
class ChannelResponse(BaseResponse):
    """Channel map and station details for one lineup"""

    map: List[ChannelMap] = field(default_factory=list)
    stations: List[Station] = field(default_factory=list)
    metadata: Optional[ChannelResponseMeta] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ChannelResponse":
        return cls(
            **vars(BaseResponse.from_dict(data)),
            map=[ChannelMap.from_dict(item) for item in data.get("map") or []],
            stations=[Station.from_dict(item) for item in data.get("stations") or []],
            metadata=optional(ChannelResponseMeta.from_dict, data.get("metadata")),
        )

    def station(self, station_id: str) -> Optional[Station]:
        for station in self.stations:
            if station.station_id == station_id:
                return station
        return None
