"""
schedulesdirect.endpoints.account - Account status and messages
"""

import logging
from urllib.parse import quote

from ..models import BaseResponse, StatusResponse
from .base import EndpointGroup

logger = logging.getLogger(__name__)


class AccountEndpoints(EndpointGroup):
    def get_status(self) -> StatusResponse:
        """Account expiry, subscribed lineups and system status"""
        status = StatusResponse.from_dict(self._dict("GET", "/status", what="status"))
        if status.system_status and not status.online:
            logger.warning("Service reports status %r: %s",
                           status.system_status[0].status, status.system_status[0].details)
        return status

    def delete_message(self, message_id: str) -> BaseResponse:
        """Delete a message shown in the status response"""
        data = self._dict("DELETE", f"/messages/{quote(message_id, safe='')}", what="message deletion")
        return BaseResponse.from_dict(data)
