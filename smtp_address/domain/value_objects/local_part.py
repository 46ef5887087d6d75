"""Local-part value object."""

from dataclasses import dataclass, field
from enum import Enum

from smtp_address.domain.charset import (
    ATEXT,
    BACKSLASH,
    DOT,
    MAX_LOCAL_PART_LENGTH,
    PRINTABLE,
    QUOTE,
    is_ascii,
)
from smtp_address.domain.exceptions import (
    EmptyLocalPart,
    InvalidCharacter,
    InvalidDotAtom,
    InvalidQuotedString,
    LocalPartTooLong,
    NonASCIILocalPart,
)


class LocalPartFormat(str, Enum):
    """Storage format of a local-part."""

    DOT_ATOM = "dot_atom"
    QUOTED = "quoted"


def validate_local_part(data: bytes) -> LocalPartFormat:
    """Validate raw local-part octets and classify them.

    Checks run in a fixed order: emptiness, ASCII range, length, then the
    grammar. A leading double quote always selects the quoted-string
    grammar; anything else is checked as a dot-atom.

    Args:
        data: The octets before the ``@`` sign

    Returns:
        LocalPartFormat: The format the octets were validated as

    Raises:
        LocalPartError: On the first violation found
    """
    if not data:
        raise EmptyLocalPart()
    if not is_ascii(data):
        raise NonASCIILocalPart()
    if len(data) > MAX_LOCAL_PART_LENGTH:
        raise LocalPartTooLong(len(data))

    text = data.decode("ascii")
    if data[0] == QUOTE:
        _scan_quoted_string(data, text)
        return LocalPartFormat.QUOTED

    _scan_dot_atom(data, text)
    return LocalPartFormat.DOT_ATOM


def _scan_quoted_string(data: bytes, text: str) -> None:
    inside = False
    escaped = False
    closed_at = -1

    for index, byte in enumerate(data):
        if closed_at >= 0:
            # Nothing may follow the closing quote
            raise InvalidQuotedString(text)
        if not inside:
            inside = True
            continue
        if escaped:
            if byte != QUOTE and byte != BACKSLASH:
                raise InvalidQuotedString(text)
            escaped = False
        elif byte == BACKSLASH:
            escaped = True
        elif byte == QUOTE:
            inside = False
            closed_at = index
        elif byte not in PRINTABLE:
            raise InvalidCharacter(text, byte)

    # Unterminated, or "" with no content
    if closed_at != len(data) - 1 or closed_at == 1:
        raise InvalidQuotedString(text)


def _scan_dot_atom(data: bytes, text: str) -> None:
    after_dot = True
    for byte in data:
        if byte == DOT:
            if after_dot:
                raise InvalidDotAtom(text)
            after_dot = True
        elif byte in ATEXT:
            after_dot = False
        else:
            raise InvalidCharacter(text, byte)
    if after_dot:
        raise InvalidDotAtom(text)


@dataclass(frozen=True)
class LocalPart:
    """Value object representing the part of an address before ``@``.

    The value is stored exactly as written, including the surrounding
    quotes of a quoted string. Nothing is case-folded or unescaped.
    """

    value: str
    format: LocalPartFormat = field(init=False, compare=False, repr=False)

    def __post_init__(self) -> None:
        """Validate the local-part after initialization."""
        if not isinstance(self.value, str):
            raise TypeError(
                f"Local-part must be a string, got {type(self.value).__name__}"
            )
        if self.value and not self.value.isascii():
            raise NonASCIILocalPart()

        object.__setattr__(
            self, "format", validate_local_part(self.value.encode("ascii"))
        )

    @classmethod
    def from_bytes(cls, data: bytes) -> "LocalPart":
        """Create a local-part directly from octets."""
        data = bytes(data)
        if not data:
            raise EmptyLocalPart()
        if not is_ascii(data):
            raise NonASCIILocalPart()
        return cls(data.decode("ascii"))

    @property
    def is_quoted(self) -> bool:
        return self.format is LocalPartFormat.QUOTED

    def __bytes__(self) -> bytes:
        return self.value.encode("ascii")

    def __len__(self) -> int:
        """Length in octets."""
        return len(self.value)

    def __str__(self) -> str:
        """String representation returns the local-part as written."""
        return self.value
