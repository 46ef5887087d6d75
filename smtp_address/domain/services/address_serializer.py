"""Canonical address serializer.

Inverse of the address parser: builds the unique, minimally quoted text
form of a validated address.
"""

from typing import TYPE_CHECKING

from smtp_address.domain.charset import is_plain_display_char

if TYPE_CHECKING:
    from smtp_address.domain.value_objects.email_address import EmailAddress


def needs_quoting(name: str) -> bool:
    """Check if a display name must be quoted.

    Only ASCII letters, digits and whitespace may appear unquoted.
    """
    return not all(is_plain_display_char(char) for char in name)


def quote_display_name(name: str) -> str:
    """Wrap a display name in quotes, escaping ``"`` and ``\\``."""
    escaped = name.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def format_display_name(name: str) -> str:
    """Return the display name quoted only when required."""
    return quote_display_name(name) if needs_quoting(name) else name


def serialize_addr_spec(address: "EmailAddress") -> bytes:
    """Serialize ``local-part@domain`` without any display name."""
    return bytes(address.local_part) + b"@" + bytes(address.domain)


def serialize_address(address: "EmailAddress") -> bytes:
    """Serialize an address to its canonical octets.

    Returns ``local@domain`` when there is no display name, otherwise
    ``display <local@domain>`` with exactly one space before ``<``.
    """
    addr_spec = serialize_addr_spec(address)
    if address.display_name is None:
        return addr_spec

    display = format_display_name(address.display_name).encode("utf-8")
    return display + b" <" + addr_spec + b">"


def format_address(address: "EmailAddress") -> str:
    """Canonical text form of an address."""
    return serialize_address(address).decode("utf-8")
