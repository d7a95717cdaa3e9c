"""
schedulesdirect.endpoints.base - Shared plumbing for endpoint groups

Every endpoint group wraps the same Transport; the helpers here turn raw
response bytes into decoded JSON (single document or one per line) and split
bulk ID lists into batches the service accepts.
"""

import logging
from typing import Any, Callable, Dict, Iterator, List, Sequence, TypeVar

from ..transport import Transport, raise_for_payload
from ..wire import decode_json, decode_json_lines, expect_dict, expect_list

T = TypeVar("T")

logger = logging.getLogger(__name__)


def chunked(items: Sequence[T], size: int) -> Iterator[List[T]]:
    """Yield consecutive slices of at most ``size`` items, in input order"""
    if size < 1:
        raise ValueError("Chunk size must be at least 1")
    for start in range(0, len(items), size):
        yield list(items[start:start + size])


class EndpointGroup:
    """Base class for a family of related service operations"""

    def __init__(self, transport: Transport):
        self.transport = transport

    @property
    def config(self):
        return self.transport.config

    def _json(self, method: str, path: str, body=None, needs_auth: bool = True, **kwargs) -> Any:
        """Send a request and decode the body as a single JSON document"""
        value = decode_json(self.transport.send(method, path, body, needs_auth=needs_auth, **kwargs))
        raise_for_payload(value)
        return value

    def _json_lines(self, method: str, path: str, body=None, needs_auth: bool = True) -> List[Any]:
        """Send a request and decode a body of newline-delimited JSON documents"""
        documents = decode_json_lines(self.transport.send(method, path, body, needs_auth=needs_auth))
        for document in documents:
            raise_for_payload(document)
        return documents

    def _list(self, method: str, path: str, body=None, needs_auth: bool = True, what: str = "records",
              **kwargs) -> List[Any]:
        return expect_list(self._json(method, path, body, needs_auth, **kwargs), what)

    def _dict(self, method: str, path: str, body=None, needs_auth: bool = True, what: str = "response",
              **kwargs) -> Dict[str, Any]:
        return expect_dict(self._json(method, path, body, needs_auth, **kwargs), what)

    def _batched_list(
        self,
        path: str,
        ids: Sequence[str],
        batch_size: int,
        decode: Callable[[bytes], List[T]],
        needs_auth: bool = True,
    ) -> List[T]:
        """
        POST ``ids`` in batches and concatenate the decoded results in order

        Any failing batch aborts the whole call; results of earlier batches
        are discarded.
        """
        results: List[T] = []
        batches = list(chunked(list(ids), batch_size))
        if len(batches) > 1:
            logger.debug("Splitting %d IDs for %s into %d batches of up to %d",
                         len(ids), path, len(batches), batch_size)

        for batch in batches:
            data = self.transport.send("POST", path, batch, needs_auth=needs_auth)
            results.extend(decode(data))
        return results

    def _batched_dict(
        self,
        path: str,
        ids: Sequence[str],
        batch_size: int,
        decode: Callable[[bytes], Dict[str, T]],
        needs_auth: bool = True,
    ) -> Dict[str, T]:
        """Like _batched_list, merging per-batch maps keyed by ID"""
        results: Dict[str, T] = {}
        for batch in chunked(list(ids), batch_size):
            data = self.transport.send("POST", path, batch, needs_auth=needs_auth)
            results.update(decode(data))
        return results
