"""
schedulesdirect.endpoints.artwork - Artwork metadata and image downloads

Artwork metadata lookups do not need a token. Image downloads always send
the token, including for URIs already on the public image bucket.
"""

from typing import List, Sequence
from urllib.parse import quote

from ..models import Artwork, ArtworkResponse
from ..models.artwork import artwork_list
from ..transport import raise_for_payload
from ..wire import decode_json, expect_dict, expect_list
from .base import EndpointGroup

# Image URIs under this prefix are absolute and fetched as-is
PUBLIC_IMAGE_PREFIX = "https://s3.amazonaws.com"


class ArtworkEndpoints(EndpointGroup):
    def get_artwork_for_program_ids(self, program_ids: Sequence[str]) -> List[ArtworkResponse]:
        """
        Artwork for each program ID, in input order

        Each ArtworkResponse holds either the artwork found or the error the
        service reported for that one ID; use ProgramInfo.artwork_lookup_ids()
        to pick the IDs worth asking for.
        """
        return self._batched_list(
            "/metadata/programs",
            program_ids,
            self.config.artwork_batch_size,
            _decode_artwork_responses,
            needs_auth=False,
        )

    def get_artwork_for_root_id(self, root_id: str) -> List[Artwork]:
        path = f"/metadata/programs/{quote(root_id, safe='')}"
        return artwork_list(self._json("GET", path, needs_auth=False))

    def get_celebrity_artwork(self, celebrity_id: str) -> List[Artwork]:
        path = f"/metadata/celebrity/{quote(celebrity_id, safe='')}"
        return artwork_list(self._json("GET", path, needs_auth=False))

    def get_image_url(self, image_uri: str) -> str:
        """Fully formed URL for an artwork URI"""
        if image_uri.startswith(PUBLIC_IMAGE_PREFIX):
            return image_uri
        return self.config.url_for(f"/image/{image_uri}")

    def get_image(self, image_uri: str) -> bytes:
        """Download the raw image bytes for an artwork URI"""
        return self.transport.send("GET", self.get_image_url(image_uri))


def _decode_artwork_responses(data: bytes) -> List[ArtworkResponse]:
    value = decode_json(data)
    raise_for_payload(value)
    return [ArtworkResponse.from_dict(expect_dict(item, "artwork response"))
            for item in expect_list(value, "artwork responses")]
