"""
schedulesdirect.endpoints.available - Service discovery

Lists of what the service offers: countries, languages, satellites and
transmitters. None of these need a token.
"""

from typing import Dict, List
from urllib.parse import quote

from ..models import AvailableDVBS, Country, Service
from ..wire import expect_list
from .base import EndpointGroup


class AvailableEndpoints(EndpointGroup):
    def get_services(self) -> List[Service]:
        items = self._list("GET", "/available", needs_auth=False, what="services")
        return [Service.from_dict(item) for item in items]

    def get_countries(self) -> Dict[str, List[Country]]:
        """Supported countries grouped by region"""
        data = self._dict("GET", "/available/countries", needs_auth=False, what="countries")
        return {
            region: [Country.from_dict(item) for item in expect_list(items, "countries")]
            for region, items in data.items()
        }

    def get_languages(self) -> Dict[str, str]:
        """Language code -> language name"""
        return self._dict("GET", "/available/languages", needs_auth=False, what="languages")

    def get_dvbs(self) -> List[AvailableDVBS]:
        items = self._list("GET", "/available/dvb-s", needs_auth=False, what="satellites")
        return [AvailableDVBS.from_dict(item) for item in items]

    def get_transmitters(self, country: str) -> Dict[str, str]:
        """Transmitter name -> lineup ID for a country's DVB-T network"""
        path = f"/available/transmitters/{quote(country, safe='')}"
        return self._dict("GET", path, needs_auth=False, what="transmitters")
