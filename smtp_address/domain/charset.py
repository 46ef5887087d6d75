"""ASCII character classes and length limits for the address grammar.

All tables are immutable and built once at import time, so they can be
shared freely between threads.
"""

from typing import FrozenSet

# Length limits in octets (RFC 5321 section 4.5.3.1)
MAX_LOCAL_PART_LENGTH = 64
MAX_ADDRESS_LENGTH = 254
MAX_DOMAIN_LENGTH = 255
MAX_LABEL_LENGTH = 63

# Single-byte tokens
QUOTE = 0x22  # "
BACKSLASH = 0x5C  # \
DOT = 0x2E  # .
AT_SIGN = 0x40  # @
LESS_THAN = 0x3C  # <
GREATER_THAN = 0x3E  # >
HYPHEN = 0x2D  # -
SPACE = 0x20

ASCII_UPPERCASE: FrozenSet[int] = frozenset(range(0x41, 0x5B))
ASCII_LOWERCASE: FrozenSet[int] = frozenset(range(0x61, 0x7B))
ASCII_LETTERS: FrozenSet[int] = ASCII_UPPERCASE | ASCII_LOWERCASE
ASCII_DIGITS: FrozenSet[int] = frozenset(range(0x30, 0x3A))
ASCII_WHITESPACE: FrozenSet[int] = frozenset(b" \t\n\x0b\x0c\r")

# Visible characters plus space, as allowed unescaped inside a quoted string
PRINTABLE: FrozenSet[int] = frozenset(range(0x20, 0x7F))

# RFC 5322 section 3.2.3 atext
ATEXT: FrozenSet[int] = ASCII_LETTERS | ASCII_DIGITS | frozenset(b"!#$%&'*+-/=?^_`{|}~")

# Letters, digits and hyphen (RFC 1123 host name labels)
LDH: FrozenSet[int] = ASCII_LETTERS | ASCII_DIGITS | frozenset((HYPHEN,))

WHITESPACE_CHARS = "".join(chr(b) for b in sorted(ASCII_WHITESPACE))


def is_ascii(data: bytes) -> bool:
    """Check that every byte is below 0x80."""
    return all(b < 0x80 for b in data)


def is_plain_display_char(char: str) -> bool:
    """Check if a display-name character can appear without quoting."""
    if len(char) != 1 or ord(char) >= 0x80:
        return False
    code = ord(char)
    return code in ASCII_LETTERS or code in ASCII_DIGITS or code in ASCII_WHITESPACE


def strip_ascii_whitespace(text: str) -> str:
    """Trim leading and trailing ASCII whitespace, keeping inner runs."""
    return text.strip(WHITESPACE_CHARS)
