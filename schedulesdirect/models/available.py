"""
schedulesdirect.models.available - Service discovery records
"""

from dataclasses import dataclass
from typing import Any, Dict


@dataclass
class Service:
    type: str = ""
    description: str = ""
    uri: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Service":
        return cls(
            type=data.get("type", ""),
            description=data.get("description", ""),
            uri=data.get("uri", ""),
        )


@dataclass
class Country:
    full_name: str = ""
    short_name: str = ""
    postal_code: str = ""
    postal_code_example: str = ""
    one_postal_code: bool = False

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Country":
        return cls(
            full_name=data.get("fullName", ""),
            short_name=data.get("shortName", ""),
            postal_code=data.get("postalCode", ""),
            postal_code_example=data.get("postalCodeExample", ""),
            one_postal_code=bool(data.get("onePostalCode", False)),
        )


@dataclass
class AvailableDVBS:
    lineup: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AvailableDVBS":
        return cls(lineup=data.get("lineup", ""))
