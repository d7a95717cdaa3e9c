"""
schedulesdirect.endpoints.lineups - Headends, lineups and channel maps
"""

import logging
from typing import Any, Dict, List, Optional, Union
from urllib.parse import quote

from ..models import ChangeLineupResponse, ChannelResponse, Headend, LineupResponse, StationPreview
from .base import EndpointGroup

logger = logging.getLogger(__name__)

HDHomeRunScan = Union[str, bytes, List[Dict[str, Any]]]


def _lineup_path(*parts: str) -> str:
    return "/" + "/".join(quote(part, safe="") for part in parts)


class LineupEndpoints(EndpointGroup):
    def get_headends(self, country: str, postal_code: str) -> List[Headend]:
        """Headends serving a postal code, with the lineups each carries"""
        items = self._list(
            "GET",
            "/headends",
            params={"country": country, "postalcode": postal_code},
            what="headends",
        )
        return [Headend.from_dict(item) for item in items]

    def get_lineups(self) -> LineupResponse:
        """Lineups the account is subscribed to"""
        return LineupResponse.from_dict(self._dict("GET", "/lineups", what="lineups"))

    def add_lineup(self, lineup_id: str) -> ChangeLineupResponse:
        response = ChangeLineupResponse.from_dict(
            self._dict("PUT", _lineup_path("lineups", lineup_id), what="lineup change")
        )
        logger.info("Added lineup %s, %d changes remaining", lineup_id, response.changes_remaining)
        return response

    def delete_lineup(self, lineup_id: str) -> ChangeLineupResponse:
        response = ChangeLineupResponse.from_dict(
            self._dict("DELETE", _lineup_path("lineups", lineup_id), what="lineup change")
        )
        logger.info("Deleted lineup %s, %d changes remaining", lineup_id, response.changes_remaining)
        return response

    def preview_lineup(self, lineup_id: str) -> List[StationPreview]:
        """Stations of a lineup, without subscribing to it"""
        items = self._list("GET", _lineup_path("lineups", "preview", lineup_id), what="station previews")
        return [StationPreview.from_dict(item) for item in items]

    def get_channels(self, lineup_id: str, verbose: bool = False) -> ChannelResponse:
        """
        Channel map and stations of a subscribed lineup

        Args:
            lineup_id: Lineup ID, e.g. USA-NY31587-L
            verbose: Ask for every tuning field of the map entries
        """
        headers: Optional[Dict[str, str]] = {"verboseMap": "true"} if verbose else None
        data = self._dict("GET", _lineup_path("lineups", lineup_id), headers=headers, what="channel map")
        return ChannelResponse.from_dict(data)

    def automap_lineup(self, scan: HDHomeRunScan) -> Dict[str, int]:
        """
        Match a tuner channel scan against known lineups

        ``scan`` is the JSON channel list an HDHomeRun reports, either already
        serialized or as a list of dicts. Returns lineup ID to match score.
        """
        data = self._dict("POST", "/map/lineup", scan, what="automap result")
        return {lineup: int(score) for lineup, score in data.items()}

    def submit_lineup(self, scan: HDHomeRunScan, lineup_id: str):
        """Send a channel scan for a lineup to the service for review"""
        self.transport.send("POST", _lineup_path("map", "lineup", lineup_id), scan)
