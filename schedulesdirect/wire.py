"""
schedulesdirect.wire - Wire-format coercions

The service is inconsistent about how it spells dates, integers and booleans.
These value types decode every spelling seen in the wild and re-encode in the
form they were parsed from, so a decode/encode cycle is faithful.
"""

import json
import re
from datetime import date, datetime, timezone
from typing import Any, Callable, Dict, List, Optional, TypeVar, Union

from .exceptions import DecodeError

T = TypeVar("T")

Raw = Union[bytes, str]

INT_LITERAL = re.compile(r"-?[0-9]+")


def _to_text(data: Raw) -> str:
    if isinstance(data, bytes):
        try:
            return data.decode("utf-8")
        except UnicodeDecodeError:
            raise DecodeError(f"Literal is not valid UTF-8: {data[:40]!r}", fragment=data) from None
    return data


class Date:
    """Calendar date sent either as ``YYYY`` or ``YYYY-MM-DD``"""

    YEAR_FORMAT = "%Y"
    DAY_FORMAT = "%Y-%m-%d"

    __slots__ = ("value", "fmt")

    def __init__(self, value: date, fmt: str = DAY_FORMAT):
        self.value = value
        self.fmt = fmt

    @property
    def year_only(self) -> bool:
        return self.fmt == self.YEAR_FORMAT

    @classmethod
    def parse(cls, text: str) -> "Date":
        literal = text.strip('"')
        if len(literal) == 4:
            fmt = cls.YEAR_FORMAT
        else:
            fmt = cls.DAY_FORMAT
            literal = literal[:10]
        try:
            parsed = datetime.strptime(literal, fmt).date()
        except ValueError:
            raise DecodeError(f"Date should be YYYY or YYYY-MM-DD, got: {text}", fragment=text) from None
        return cls(parsed, fmt)

    @classmethod
    def decode(cls, data: Raw) -> "Date":
        return cls.parse(_to_text(data))

    @classmethod
    def from_json(cls, value: Any) -> "Date":
        if isinstance(value, int) and not isinstance(value, bool):
            value = str(value)
        if not isinstance(value, str):
            raise DecodeError(f"Date should be a string, got: {value!r}", fragment=value)
        return cls.parse(value)

    def to_json(self) -> str:
        return self.value.strftime(self.fmt)

    def encode(self) -> bytes:
        return json.dumps(self.to_json()).encode("utf-8")

    def __eq__(self, other):
        if isinstance(other, Date):
            return self.value == other.value and self.fmt == other.fmt
        if isinstance(other, date):
            return self.value == other
        return NotImplemented

    def __hash__(self):
        return hash((self.value, self.fmt))

    def __str__(self):
        return self.to_json()

    def __repr__(self):
        return f"Date({self.to_json()!r})"


class LooseInt(int):
    """Integer sent either bare or as a quoted string, always re-encoded bare"""

    @classmethod
    def parse(cls, text: str) -> "LooseInt":
        literal = text.strip('" ')
        if not INT_LITERAL.fullmatch(literal):
            raise DecodeError(f"Invalid integer literal: {text}", fragment=text)
        return cls(int(literal))

    @classmethod
    def decode(cls, data: Raw) -> "LooseInt":
        return cls.parse(_to_text(data))

    @classmethod
    def from_json(cls, value: Any) -> "LooseInt":
        if isinstance(value, bool):
            raise DecodeError(f"Invalid integer literal: {value!r}", fragment=value)
        if isinstance(value, int):
            return cls(value)
        if isinstance(value, str):
            return cls.parse(value)
        raise DecodeError(f"Invalid integer literal: {value!r}", fragment=value)

    def to_json(self) -> int:
        return int(self)

    def encode(self) -> bytes:
        return str(int(self)).encode("ascii")

    def __repr__(self):
        return f"LooseInt({int(self)})"


class LooseBool:
    """
    Boolean sent as 0/1, true/false or yes/no, quoted or not

    Remembers whether the original literal was quoted and re-encodes as 0/1
    in that same quoting style.
    """

    TRUE_VALUES = ("1", "true", "yes")
    FALSE_VALUES = ("0", "false", "no")

    __slots__ = ("value", "quoted")

    def __init__(self, value: bool = False, quoted: bool = False):
        self.value = bool(value)
        self.quoted = quoted

    @classmethod
    def parse(cls, text: str) -> "LooseBool":
        quoted = '"' in text
        literal = text.replace('"', "")
        if literal in cls.TRUE_VALUES:
            return cls(True, quoted)
        if literal in cls.FALSE_VALUES:
            return cls(False, quoted)
        raise DecodeError(f"Boolean unmarshal error: invalid input {literal}", fragment=text)

    @classmethod
    def decode(cls, data: Raw) -> "LooseBool":
        return cls.parse(_to_text(data))

    @classmethod
    def from_json(cls, value: Any) -> "LooseBool":
        if isinstance(value, bool):
            return cls(value, False)
        if isinstance(value, int):
            return cls.parse(str(value))
        if isinstance(value, str):
            return cls.parse(json.dumps(value))
        raise DecodeError(f"Boolean unmarshal error: invalid input {value!r}", fragment=value)

    def to_json(self) -> Union[int, str]:
        bit = 1 if self.value else 0
        return str(bit) if self.quoted else bit

    def encode(self) -> bytes:
        return json.dumps(self.to_json()).encode("ascii")

    def __bool__(self):
        return self.value

    def __eq__(self, other):
        if isinstance(other, LooseBool):
            return self.value == other.value and self.quoted == other.quoted
        if isinstance(other, bool):
            return self.value == other
        return NotImplemented

    def __hash__(self):
        return hash((self.value, self.quoted))

    def __repr__(self):
        return f"LooseBool({self.value}, quoted={self.quoted})"


def parse_datetime(value: Optional[str]) -> Optional[datetime]:
    """Parse an ISO-8601 timestamp from the service into an aware UTC datetime"""
    if not value:
        return None
    if not isinstance(value, str):
        raise DecodeError(f"Timestamp should be a string, got: {value!r}", fragment=value)

    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        raise DecodeError(f"Invalid timestamp: {value}", fragment=value) from None

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def optional(factory: Callable[[Any], T], value: Any) -> Optional[T]:
    """Apply ``factory`` unless the field is absent or null"""
    if value is None:
        return None
    return factory(value)


def decode_json(data: Raw) -> Any:
    """Decode a single JSON document"""
    try:
        return json.loads(data)
    except ValueError as e:
        raise DecodeError(f"Invalid JSON: {e}", fragment=data[:200]) from None


def decode_json_lines(data: Raw) -> List[Any]:
    """Decode newline-delimited JSON where every non-empty line is a document"""
    documents = []
    for line in _to_text(data).splitlines():
        if line.strip():
            documents.append(decode_json(line))
    return documents


def expect_list(value: Any, what: str) -> List[Any]:
    if not isinstance(value, list):
        raise DecodeError(f"Expected a JSON array of {what}", fragment=value)
    return value


def expect_dict(value: Any, what: str) -> Dict[str, Any]:
    if not isinstance(value, dict):
        raise DecodeError(f"Expected a JSON object for {what}", fragment=value)
    return value
