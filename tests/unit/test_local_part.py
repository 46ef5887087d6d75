"""Tests for the local-part validator and value object."""

import pytest

from smtp_address.domain.exceptions import (
    EmptyLocalPart,
    InvalidCharacter,
    InvalidDotAtom,
    InvalidQuotedString,
    LocalPartError,
    LocalPartTooLong,
    NonASCIILocalPart,
)
from smtp_address.domain.value_objects.local_part import (
    LocalPart,
    LocalPartFormat,
    validate_local_part,
)


class TestDotAtom:
    """Test dot-atom local-parts."""

    @pytest.mark.parametrize(
        "text",
        [
            "user",
            "a.b.c",
            "first.last",
            "x",
            "user+tag",
            "!#$%&'*+-/=?^_`{|}~",
            "o'brien",
            "123",
        ],
    )
    def test_valid_dot_atoms(self, text):
        """Test atext runs joined by single dots are accepted."""
        local_part = LocalPart(text)

        assert local_part.value == text
        assert local_part.format is LocalPartFormat.DOT_ATOM
        assert local_part.is_quoted is False

    @pytest.mark.parametrize("text", [".a", "a.", "a..b", ".", ".."])
    def test_dot_placement(self, text):
        """Test leading, trailing and doubled dots are rejected."""
        with pytest.raises(InvalidDotAtom) as exc_info:
            LocalPart(text)

        assert exc_info.value.text == text

    @pytest.mark.parametrize(
        "text,byte",
        [
            ("a b", 0x20),
            ("a,b", 0x2C),
            ("a(b)", 0x28),
            ("a\"b", 0x22),
            ("a@b", 0x40),
            ("tab\there", 0x09),
        ],
    )
    def test_invalid_characters(self, text, byte):
        """Test bytes outside atext report the offending byte."""
        with pytest.raises(InvalidCharacter) as exc_info:
            LocalPart(text)

        assert exc_info.value == InvalidCharacter(text, byte)

    def test_case_is_preserved(self):
        """Test no case folding is applied."""
        assert LocalPart("John.Doe").value == "John.Doe"
        assert LocalPart("John.Doe") != LocalPart("john.doe")


class TestQuotedString:
    """Test quoted-string local-parts."""

    @pytest.mark.parametrize(
        "text",
        [
            '"a b"',
            '"a\\"b"',
            '"a\\\\b"',
            '"john..doe"',
            '"(comment)"',
            '"a@b"',
            '" "',
        ],
    )
    def test_valid_quoted_strings(self, text):
        """Test well-formed quoted strings are accepted and keep their quotes."""
        local_part = LocalPart(text)

        assert local_part.value == text
        assert local_part.format is LocalPartFormat.QUOTED
        assert local_part.is_quoted is True

    @pytest.mark.parametrize(
        "text",
        [
            '"unterminated',
            '"',
            '""',
            '"a"b"',
            '"a"b',
            '"a\\b"',
            '"a\\"',
        ],
    )
    def test_malformed_quoted_strings(self, text):
        """Test quoting errors are reported as invalid quoted strings."""
        with pytest.raises(InvalidQuotedString) as exc_info:
            LocalPart(text)

        assert exc_info.value.text == text

    def test_control_character_inside_quotes(self):
        """Test unescaped non-printable bytes are rejected."""
        with pytest.raises(InvalidCharacter) as exc_info:
            LocalPart('"a\x01b"')

        assert exc_info.value.byte == 0x01

    def test_delete_character_inside_quotes(self):
        """Test 0x7F is outside the printable range."""
        with pytest.raises(InvalidCharacter):
            LocalPart('"a\x7fb"')

    def test_quote_only_at_end_is_dot_atom(self):
        """Test a trailing quote without a leading one goes through dot-atom rules."""
        with pytest.raises(InvalidCharacter):
            LocalPart('a"')


class TestLengthAndEncoding:
    """Test emptiness, ASCII and length checks."""

    def test_empty(self):
        """Test empty local-part is rejected."""
        with pytest.raises(EmptyLocalPart):
            LocalPart("")

    def test_max_length(self):
        """Test exactly 64 bytes is accepted."""
        local_part = LocalPart("a" * 64)

        assert len(local_part) == 64

    def test_too_long(self):
        """Test 65 bytes is rejected with the length."""
        with pytest.raises(LocalPartTooLong) as exc_info:
            LocalPart("a" * 65)

        assert exc_info.value.length == 65
        assert exc_info.value == LocalPartTooLong(65)

    def test_quoted_too_long(self):
        """Test the limit counts the quotes too."""
        with pytest.raises(LocalPartTooLong):
            LocalPart('"' + "a" * 63 + '"')

    def test_non_ascii_text(self):
        """Test non-ASCII code points are rejected."""
        with pytest.raises(NonASCIILocalPart):
            LocalPart("josé")

    def test_non_ascii_checked_before_length(self):
        """Test the ASCII check runs before the length check."""
        with pytest.raises(NonASCIILocalPart):
            LocalPart("é" * 100)

    def test_non_string_rejected(self):
        """Test a non-string value is a type error."""
        with pytest.raises(TypeError):
            LocalPart(42)


class TestFromBytes:
    """Test byte-level construction."""

    def test_from_bytes(self):
        """Test octets are validated and decoded."""
        local_part = LocalPart.from_bytes(b"user.name")

        assert local_part == LocalPart("user.name")
        assert bytes(local_part) == b"user.name"

    def test_from_bytearray(self):
        """Test other bytes-like inputs are accepted."""
        assert LocalPart.from_bytes(bytearray(b"user")).value == "user"

    def test_high_bytes_rejected(self):
        """Test bytes >= 0x80 are rejected."""
        with pytest.raises(NonASCIILocalPart):
            LocalPart.from_bytes("josé".encode("utf-8"))

    def test_empty_bytes(self):
        """Test empty octets are rejected."""
        with pytest.raises(EmptyLocalPart):
            LocalPart.from_bytes(b"")

    def test_validate_returns_format(self):
        """Test the validator classifies without building a value."""
        assert validate_local_part(b"a.b") is LocalPartFormat.DOT_ATOM
        assert validate_local_part(b'"a b"') is LocalPartFormat.QUOTED

    def test_all_errors_share_base(self):
        """Test every local-part failure is a LocalPartError."""
        for data in (b"", b"\xff", b"a" * 65, b".a", b'"a', b"a b"):
            with pytest.raises(LocalPartError):
                validate_local_part(data)


class TestValueSemantics:
    """Test immutability and equality."""

    def test_immutable(self):
        """Test attributes cannot be reassigned."""
        local_part = LocalPart("user")

        with pytest.raises(AttributeError):
            local_part.value = "other"

    def test_hashable(self):
        """Test equal values hash the same."""
        assert len({LocalPart("user"), LocalPart("user"), LocalPart("admin")}) == 2

    def test_str(self):
        """Test string conversion returns the stored text."""
        assert str(LocalPart('"a b"')) == '"a b"'
