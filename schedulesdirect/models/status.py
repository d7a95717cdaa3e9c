"""
schedulesdirect.models.status - Account and system status records
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional

from ..wire import parse_datetime
from .base import BaseResponse
from .lineup import Lineup


@dataclass
class AccountMessage:
    """A system or account message shown in the status response"""

    message_id: str = ""
    date: Optional[datetime] = None
    message: str = ""

    @classmethod
    def from_json(cls, value: Any) -> "AccountMessage":
        # Older API versions send bare strings
        if isinstance(value, str):
            return cls(message=value)
        return cls(
            message_id=value.get("msgID", ""),
            date=parse_datetime(value.get("date")),
            message=value.get("message", ""),
        )


@dataclass
class AccountInfo:
    expires: Optional[datetime] = None
    messages: List[AccountMessage] = field(default_factory=list)
    max_lineups: int = 0

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AccountInfo":
        return cls(
            expires=parse_datetime(data.get("expires")),
            messages=[AccountMessage.from_json(m) for m in data.get("messages") or []],
            max_lineups=data.get("maxLineups", 0),
        )


@dataclass
class SystemStatus:
    date: Optional[datetime] = None
    status: str = ""
    details: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SystemStatus":
        return cls(
            date=parse_datetime(data.get("date")),
            status=data.get("status", ""),
            details=data.get("details", ""),
        )

    @property
    def online(self) -> bool:
        return self.status.lower() == "online"


@dataclass
class StatusResponse(BaseResponse):
    """Account and system status; check ``online`` before syncing"""

    account: Optional[AccountInfo] = None
    lineups: List[Lineup] = field(default_factory=list)
    last_data_update: Optional[datetime] = None
    notifications: List[str] = field(default_factory=list)
    system_status: List[SystemStatus] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "StatusResponse":
        base = BaseResponse.from_dict(data)
        account = data.get("account")
        return cls(
            **vars(base),
            account=AccountInfo.from_dict(account) if account else None,
            lineups=[Lineup.from_dict(item) for item in data.get("lineups") or []],
            last_data_update=parse_datetime(data.get("lastDataUpdate")),
            notifications=list(data.get("notifications") or []),
            system_status=[SystemStatus.from_dict(s) for s in data.get("systemStatus") or []],
        )

    @property
    def online(self) -> bool:
        return bool(self.system_status) and self.system_status[0].online
