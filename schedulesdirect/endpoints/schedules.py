"""
schedulesdirect.endpoints.schedules - Station schedules and their MD5 hashes
"""

from typing import Any, Dict, List, Sequence, Union

from ..models import LastModifiedEntry, Schedule, StationScheduleRequest
from ..wire import expect_dict
from .base import EndpointGroup

ScheduleRequests = Sequence[Union[StationScheduleRequest, Dict[str, Any]]]


def _request_body(requests: ScheduleRequests) -> List[Dict[str, Any]]:
    return [r.to_dict() if isinstance(r, StationScheduleRequest) else dict(r) for r in requests]


class ScheduleEndpoints(EndpointGroup):
    def get_schedules(self, requests: ScheduleRequests) -> List[Schedule]:
        """
        Airings for each requested station and date set

        Args:
            requests: StationScheduleRequest items (or equivalent dicts);
                a request without dates asks for every available day
        """
        body = _request_body(requests)
        if self.config.line_delimited:
            items = self._json_lines("POST", "/schedules", body)
        else:
            items = self._list("POST", "/schedules", body, what="schedules")
        return [Schedule.from_dict(item) for item in items]

    def get_last_modified(self, requests: ScheduleRequests) -> Dict[str, Dict[str, LastModifiedEntry]]:
        """
        MD5 hash and modification time per station and day

        Compare against stored hashes to only download changed schedules.
        Returns station ID -> date (YYYY-MM-DD) -> entry.
        """
        data = self._dict("POST", "/schedules/md5", _request_body(requests), what="schedule hashes")
        return {
            station_id: {
                day: LastModifiedEntry.from_dict(entry)
                for day, entry in expect_dict(days, "schedule hash days").items()
            }
            for station_id, days in data.items()
        }
