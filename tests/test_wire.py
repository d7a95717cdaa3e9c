"""
Tests for wire-format coercions
"""
from datetime import date, datetime, timezone

import pytest

from schedulesdirect import Date, DecodeError, LooseBool, LooseInt
from schedulesdirect.wire import decode_json, decode_json_lines, parse_datetime

# ============================================================================
# Boolean Tests
# ============================================================================


class TestLooseBool:
    """Tests for 0/1, true/false and yes/no booleans"""

    @pytest.mark.parametrize(
        "literal,expected,encoded",
        [
            (b"0", False, b"0"),
            (b"1", True, b"1"),
            (b'"0"', False, b'"0"'),
            (b'"1"', True, b'"1"'),
            (b'"true"', True, b'"1"'),
            (b'"false"', False, b'"0"'),
            (b'"yes"', True, b'"1"'),
            (b'"no"', False, b'"0"'),
        ],
    )
    def test_decode_encode_preserves_quoting(self, literal, expected, encoded):
        """Test the value survives and the original quoting style is kept"""
        value = LooseBool.decode(literal)
        assert bool(value) is expected
        assert value.encode() == encoded
        assert bool(LooseBool.decode(value.encode())) is expected
        assert LooseBool.decode(value.encode()).quoted == value.quoted

    def test_unquoted_words(self):
        """Test bare words as they appear after JSON parsing"""
        assert bool(LooseBool.parse("true")) is True
        assert LooseBool.parse("no").quoted is False

    def test_invalid_literal(self):
        """Test anything else is a decode error naming the input"""
        with pytest.raises(DecodeError) as exc_info:
            LooseBool.decode(b'"maybe"')
        assert "maybe" in str(exc_info.value)

    def test_from_json_values(self):
        """Test values already parsed by json.loads"""
        assert LooseBool.from_json(True) == LooseBool(True, quoted=False)
        assert LooseBool.from_json(0) == LooseBool(False, quoted=False)
        assert LooseBool.from_json("yes") == LooseBool(True, quoted=True)
        assert LooseBool.from_json("1").to_json() == "1"

    def test_compares_to_bool(self):
        """Test equality against plain booleans"""
        assert LooseBool.decode(b'"yes"') == True  # noqa: E712


# ============================================================================
# Integer Tests
# ============================================================================


class TestLooseInt:
    """Tests for bare or quoted integers"""

    @pytest.mark.parametrize("literal", [b"42", b'"42"', b'" 42 "', b'"42 "'])
    def test_decode_variants(self, literal):
        """Test bare, quoted and padded spellings"""
        assert LooseInt.decode(literal) == 42

    def test_encode_is_bare(self):
        """Test quoted input re-encodes unquoted"""
        assert LooseInt.decode(b'"270"').encode() == b"270"

    def test_negative(self):
        """Test signed values"""
        assert LooseInt.decode(b'"-5"') == -5

    def test_invalid(self):
        """Test non-numeric input"""
        with pytest.raises(DecodeError):
            LooseInt.decode(b'"twelve"')
        with pytest.raises(DecodeError):
            LooseInt.from_json(True)

    @pytest.mark.parametrize("literal", [b'"1_000"', b'"+5"', b"1_000", b'"', b'"4.0"'])
    def test_rejects_non_decimal_spellings(self, literal):
        """Test only plain base-10 digits with an optional minus are accepted"""
        with pytest.raises(DecodeError):
            LooseInt.decode(literal)

    def test_behaves_as_int(self):
        """Test arithmetic works on the decoded value"""
        assert LooseInt.from_json("5") + 1 == 6


# ============================================================================
# Date Tests
# ============================================================================


class TestDate:
    """Tests for year-only and full dates"""

    def test_year_precision_round_trip(self):
        """Test a year stays a year"""
        value = Date.decode(b'"2015"')
        assert value.year_only
        assert value.encode() == b'"2015"'

    def test_day_precision_round_trip(self):
        """Test a full date keeps its day"""
        value = Date.decode(b'"2015-03-04"')
        assert not value.year_only
        assert value.value == date(2015, 3, 4)
        assert value.encode() == b'"2015-03-04"'

    def test_longer_literal_uses_first_ten_characters(self):
        """Test timestamps are cut to their date"""
        assert Date.decode(b'"2015-03-04T10:00:00Z"').encode() == b'"2015-03-04"'

    def test_unquoted(self):
        """Test bare literals"""
        assert Date.decode(b"1999").to_json() == "1999"
        assert Date.from_json(1999).year_only

    def test_invalid_names_literal(self):
        """Test the error names what could not be parsed"""
        with pytest.raises(DecodeError) as exc_info:
            Date.decode(b'"03/04/2015"')
        assert "03/04/2015" in str(exc_info.value)

    def test_equality(self):
        """Test precision is part of equality"""
        assert Date.decode(b'"2015-01-01"') == date(2015, 1, 1)
        assert Date.decode(b'"2015"') != Date.decode(b'"2015-01-01"')


# ============================================================================
# JSON Helper Tests
# ============================================================================


class TestJsonHelpers:
    """Tests for document and line-delimited decoding"""

    def test_json_lines(self):
        """Test one document per line, blank lines ignored"""
        data = b'{"stationID": "1"}\n\n{"stationID": "2"}\n'
        assert decode_json_lines(data) == [{"stationID": "1"}, {"stationID": "2"}]

    def test_invalid_json(self):
        """Test malformed JSON keeps a fragment for diagnosis"""
        with pytest.raises(DecodeError) as exc_info:
            decode_json(b"[{]")
        assert exc_info.value.fragment == b"[{]"

    def test_parse_datetime(self):
        """Test service timestamps become aware UTC datetimes"""
        assert parse_datetime("2016-08-23T13:55:25Z") == datetime(2016, 8, 23, 13, 55, 25, tzinfo=timezone.utc)
        assert parse_datetime(None) is None

    def test_parse_datetime_invalid(self):
        """Test malformed timestamps"""
        with pytest.raises(DecodeError):
            parse_datetime("yesterday")
