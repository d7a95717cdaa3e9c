"""
schedulesdirect.codes - Service error codes

Closed enumeration of the error codes reported by the Schedules Direct JSON
service. Every member carries its numeric code, the service's machine-readable
wire string and a human-readable message. Unknown numeric codes are still
accepted and round-trip as integers.
"""

import json
from enum import IntEnum
from typing import Optional, Union

from .exceptions import DecodeError

FORUM_URL = "http://forums.schedulesdirect.org/viewforum.php?f=6"


class ErrorCode(IntEnum):
    """Schedules Direct error code with wire string and message"""

    def __new__(cls, code: int, wire: str, message: str):
        obj = int.__new__(cls, code)
        obj._value_ = code
        obj.wire = wire
        obj.message = message
        return obj

    OK = (0, "OK", "OK")
    INVALID_JSON = (1001, "INVALID_JSON", "Unable to decode JSON")
    DEFLATE_REQUIRED = (
        1002,
        "DEFLATE_REQUIRED",
        "Did not receive Accept-Encoding: deflate in request.",
    )
    TOKEN_MISSING = (1004, "TOKEN_MISSING", "Token required but not provided in request header.")
    UNSUPPORTED_COMMAND = (2000, "UNSUPPORTED_COMMAND", "Unsupported command")
    REQUIRED_ACTION_MISSING = (
        2001,
        "REQUIRED_ACTION_MISSING",
        "Request is missing an action to take.",
    )
    REQUIRED_REQUEST_MISSING = (2002, "REQUIRED_REQUEST_MISSING", "Did not receive request.")
    REQUIRED_PARAMETER_MISSING_COUNTRY = (
        2004,
        "REQUIRED_PARAMETER_MISSING:COUNTRY",
        "In order to search for lineups, you must supply a 3-letter country parameter.",
    )
    REQUIRED_PARAMETER_MISSING_POSTALCODE = (
        2005,
        "REQUIRED_PARAMETER_MISSING:POSTALCODE",
        "In order to search for lineups, you must supply a postal code parameter.",
    )
    REQUIRED_PARAMETER_MISSING_MSGID = (
        2006,
        "REQUIRED_PARAMETER_MISSING:MSGID",
        "In order to delete a message you must supply the messageID.",
    )
    INVALID_PARAMETER_COUNTRY = (
        2050,
        "INVALID_PARAMETER:COUNTRY",
        "The COUNTRY parameter must be ISO-3166-1 alpha 3. "
        "See http://en.wikipedia.org/wiki/ISO_3166-1_alpha-3",
    )
    INVALID_PARAMETER_POSTALCODE = (
        2051,
        "INVALID_PARAMETER:POSTALCODE",
        "The POSTALCODE parameter must be valid for the country you are searching. "
        f"Post message to {FORUM_URL} if you are having issues.",
    )
    INVALID_PARAMETER_FETCHTYPE = (
        2052,
        "INVALID_PARAMETER:FETCHTYPE",
        "You didn't provide a fetchtype I know how to handle.",
    )
    DUPLICATE_LINEUP = (2100, "DUPLICATE_LINEUP", "Lineup already in account.")
    LINEUP_NOT_FOUND = (
        2101,
        "LINEUP_NOT_FOUND",
        "Lineup not in account. Add lineup to account before requesting mapping.",
    )
    UNKNOWN_LINEUP = (
        2102,
        "UNKNOWN_LINEUP",
        "Invalid lineup requested. Check your COUNTRY / POSTALCODE combination for validity.",
    )
    INVALID_LINEUP_DELETE = (2103, "INVALID_LINEUP_DELETE", "Delete of lineup not in account.")
    LINEUP_WRONG_FORMAT = (
        2104,
        "LINEUP_WRONG_FORMAT",
        "Lineup must be formatted COUNTRY-LINEUP-DEVICE or COUNTRY-OTA-POSTALCODE",
    )
    INVALID_LINEUP = (2105, "INVALID_LINEUP", "The lineup you submitted doesn't exist.")
    LINEUP_DELETED = (
        2106,
        "LINEUP_DELETED",
        "The lineup you requested has been deleted from the server.",
    )
    LINEUP_QUEUED = (
        2107,
        "LINEUP_QUEUED",
        "The lineup is being generated on the server. Please retry.",
    )
    INVALID_COUNTRY = (
        2108,
        "INVALID_COUNTRY",
        "The country you requested is either mis-typed or does not have valid data.",
    )
    STATIONID_NOT_FOUND = (
        2200,
        "STATIONID_NOT_FOUND",
        "The stationID you requested is not in any of your lineups.",
    )
    SERVICE_OFFLINE = (3000, "SERVICE_OFFLINE", "Server offline for maintenance.")
    ACCOUNT_EXPIRED = (4001, "ACCOUNT_EXPIRED", "Account expired.")
    INVALID_HASH = (
        4002,
        "INVALID_HASH",
        "Password hash must be lowercase 40 character sha1_hex of password.",
    )
    INVALID_USER = (4003, "INVALID_USER", "Invalid username or password.")
    ACCOUNT_LOCKOUT = (
        4004,
        "ACCOUNT_LOCKOUT",
        "Too many login failures. Locked for 15 minutes.",
    )
    ACCOUNT_DISABLED = (
        4005,
        "ACCOUNT_DISABLED",
        "Account has been disabled. Please contact Schedules Direct support: "
        "admin@schedulesdirect.org for more information.",
    )
    TOKEN_EXPIRED = (4006, "TOKEN_EXPIRED", "Token has expired. Request new token.")
    MAX_LINEUP_CHANGES_REACHED = (
        4100,
        "MAX_LINEUP_CHANGES_REACHED",
        "Exceeded maximum number of lineup changes for today.",
    )
    MAX_LINEUPS = (4101, "MAX_LINEUPS", "Exceeded number of lineups for this account.")
    NO_LINEUPS = (4102, "NO_LINEUPS", "No lineups have been added to this account.")
    IMAGE_NOT_FOUND = (
        5000,
        "IMAGE_NOT_FOUND",
        f"Could not find requested image. Post message to {FORUM_URL} if you are having issues.",
    )
    INVALID_PROGRAMID = (
        6000,
        "INVALID_PROGRAMID",
        "Could not find requested programID. Permanent failure.",
    )
    PROGRAMID_QUEUED = (
        6001,
        "PROGRAMID_QUEUED",
        "ProgramID should exist at the server, but doesn't. The server will regenerate "
        "the JSON for the program, so your application should retry.",
    )
    SCHEDULE_NOT_FOUND = (
        7000,
        "SCHEDULE_NOT_FOUND",
        f"The schedule you requested should be available. Post message to {FORUM_URL}",
    )
    INVALID_SCHEDULE_REQUEST = (
        7010,
        "INVALID_SCHEDULE_REQUEST",
        "The server can't determine whether your schedule is valid or not. "
        "Open a support ticket.",
    )
    SCHEDULE_RANGE_EXCEEDED = (
        7020,
        "SCHEDULE_RANGE_EXCEEDED",
        "The date that you've requested is outside of the range of the data for that stationID.",
    )
    SCHEDULE_NOT_IN_LINEUP = (
        7030,
        "SCHEDULE_NOT_IN_LINEUP",
        "You have requested a schedule which is not in any of your configured lineups.",
    )
    SCHEDULE_QUEUED = (
        7100,
        "SCHEDULE_QUEUED",
        "The schedule you requested has been queued for generation but is not yet ready "
        "for download. Retry.",
    )
    HCF = (9999, "HCF", "Unknown error. Open support ticket.")

    @classmethod
    def _missing_(cls, value):
        # Codes the table doesn't know still decode, as pseudo-members
        if not isinstance(value, int) or isinstance(value, bool) or value < 0:
            return None
        placeholder = f"Unknown({value})"
        member = int.__new__(cls, value)
        member._name_ = placeholder
        member._value_ = value
        member.wire = placeholder
        member.message = placeholder
        return cls._value2member_map_.setdefault(value, member)

    @property
    def is_known(self) -> bool:
        """True if the code is part of the service's published table"""
        return self._name_ in type(self).__members__

    def describe(self, message: Optional[str] = None) -> str:
        """Format a complete diagnostic line for this code"""
        text = self.message
        if not self.is_known and message:
            text = message
        return f"{text} (code: {int(self)}, wire: {self.wire})"

    @classmethod
    def from_wire(cls, wire: str) -> "ErrorCode":
        """Look up a code by its machine-readable string"""
        try:
            return _WIRE_TO_CODE[wire]
        except KeyError:
            raise DecodeError(f"Unknown error code string: {wire!r}", fragment=wire) from None

    @classmethod
    def from_json(cls, value: Union[int, str]) -> "ErrorCode":
        """Build a code from an already parsed JSON value"""
        if isinstance(value, bool):
            raise DecodeError(f"Invalid error code: {value!r}", fragment=value)
        if isinstance(value, int):
            try:
                return cls(value)
            except ValueError:
                raise DecodeError(f"Invalid error code: {value!r}", fragment=value) from None
        if isinstance(value, str):
            stripped = value.strip()
            if stripped.isdigit():
                return cls(int(stripped))
            return cls.from_wire(stripped)
        raise DecodeError(f"Invalid error code: {value!r}", fragment=value)

    @classmethod
    def decode(
        cls, data: Optional[bytes], default: Optional["ErrorCode"] = None
    ) -> Optional["ErrorCode"]:
        """
        Decode a raw JSON literal into an error code

        A ``null`` literal leaves the target unchanged and returns ``default``.
        A missing buffer is an error.
        """
        if data is None:
            raise DecodeError("Cannot decode error code from no data")
        if isinstance(data, str):
            data = data.encode("utf-8")
        text = data.strip()
        if text == b"null":
            return default
        try:
            value = json.loads(text)
        except ValueError:
            raise DecodeError(f"Invalid error code literal: {data!r}", fragment=data) from None
        return cls.from_json(value)

    def encode(self) -> bytes:
        """Encode as a bare JSON integer"""
        return str(int(self)).encode("ascii")


_WIRE_TO_CODE = {member.wire: member for member in ErrorCode}

# Codes that mean the token was rejected and a fresh one may fix the call
AUTH_FAILURE_CODES = frozenset({ErrorCode.INVALID_USER, ErrorCode.TOKEN_EXPIRED})
