"""
schedulesdirect.models.base - Generic response envelope
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional

from ..codes import ErrorCode
from ..wire import parse_datetime


@dataclass
class BaseResponse:
    """Fields every service reply may carry alongside its payload"""

    response: str = ""
    code: ErrorCode = ErrorCode.OK
    server_id: str = ""
    message: str = ""
    timestamp: Optional[datetime] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "BaseResponse":
        code = data.get("code")
        return cls(
            response=data.get("response", ""),
            code=ErrorCode.OK if code is None else ErrorCode.from_json(code),
            server_id=data.get("serverID", ""),
            message=data.get("message", ""),
            timestamp=parse_datetime(data.get("datetime")),
        )

    @property
    def ok(self) -> bool:
        return self.code == ErrorCode.OK
