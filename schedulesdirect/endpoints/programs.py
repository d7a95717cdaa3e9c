"""
schedulesdirect.endpoints.programs - Program metadata lookups

The bulk lookups accept any number of program IDs and split them into
batches no larger than the configured per-call cap.
"""

from typing import Dict, List, Sequence
from urllib.parse import quote

from ..models import LanguageCrossReference, ProgramDescription, ProgramInfo, StillRunningResponse
from ..models.program import show_id_for_episode_id
from ..transport import raise_for_payload
from ..wire import decode_json, decode_json_lines, expect_dict, expect_list
from .base import EndpointGroup


class ProgramEndpoints(EndpointGroup):
    show_id_for_episode_id = staticmethod(show_id_for_episode_id)

    def get_program_info(self, program_ids: Sequence[str]) -> List[ProgramInfo]:
        """Full metadata for each program ID, in input order"""
        return self._batched_list(
            "/programs", program_ids, self.config.program_batch_size, self._decode_programs
        )

    def _decode_programs(self, data: bytes) -> List[ProgramInfo]:
        if self.config.line_delimited:
            items = decode_json_lines(data)
            for item in items:
                raise_for_payload(item)
        else:
            value = decode_json(data)
            raise_for_payload(value)
            items = expect_list(value, "programs")

        return [ProgramInfo.from_dict(expect_dict(item, "program")) for item in items]

    def get_descriptions(self, program_ids: Sequence[str]) -> Dict[str, ProgramDescription]:
        """Generic descriptions keyed by program ID"""
        return self._batched_dict(
            "/metadata/description",
            program_ids,
            self.config.description_batch_size,
            _decode_descriptions,
        )

    def get_language_cross_reference(self, program_ids: Sequence[str]) -> Dict[str, List[LanguageCrossReference]]:
        """Titles and descriptions of each program in other languages"""
        return self._batched_dict(
            "/xref", program_ids, self.config.xref_batch_size, _decode_xrefs
        )

    def get_still_running(self, program_id: str) -> StillRunningResponse:
        """Whether a live event is still running past its scheduled end"""
        path = f"/metadata/stillRunning/{quote(program_id, safe='')}"
        return StillRunningResponse.from_dict(self._dict("GET", path, what="still running status"))


def _decode_descriptions(data: bytes) -> Dict[str, ProgramDescription]:
    value = decode_json(data)
    raise_for_payload(value)
    return {
        program_id: ProgramDescription.from_dict(item)
        for program_id, item in expect_dict(value, "descriptions").items()
    }


def _decode_xrefs(data: bytes) -> Dict[str, List[LanguageCrossReference]]:
    value = decode_json(data)
    raise_for_payload(value)
    return {
        program_id: [LanguageCrossReference.from_dict(x) for x in expect_list(items, "cross references")]
        for program_id, items in expect_dict(value, "cross references").items()
    }
