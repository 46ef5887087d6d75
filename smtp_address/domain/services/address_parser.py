"""Address parser.

Splits raw address octets into an optional display name, a local-part and
a domain. Two shapes are accepted::

    [display-name] "<" local-part "@" domain ">"
    local-part "@" domain

The split is an explicit left-to-right scan for the first ``<``, the first
``>`` after it and the first ``@`` between them. No regular expressions are
involved, so the cost is linear in the input length.
"""

import logging
from typing import NamedTuple, Optional, Tuple

from smtp_address.domain.charset import (
    AT_SIGN,
    GREATER_THAN,
    LESS_THAN,
    strip_ascii_whitespace,
)
from smtp_address.domain.exceptions import (
    DomainError,
    InvalidDomain,
    InvalidLocalPart,
    LocalPartError,
    MissingAtSign,
)
from smtp_address.domain.value_objects.domain_name import Domain
from smtp_address.domain.value_objects.local_part import LocalPart

logger = logging.getLogger(__name__)


class ParsedAddress(NamedTuple):
    """Validated components of a parsed address."""

    display_name: Optional[str]
    local_part: LocalPart
    domain: Domain


def parse_address(data: bytes) -> ParsedAddress:
    """Parse address octets into validated components.

    The display-name form is tried first. Without a ``<`` followed later by
    a ``>`` the whole input is parsed as a bare address. Anything after the
    closing ``>`` is ignored.

    Args:
        data: Raw address octets

    Returns:
        ParsedAddress: Display name (unescaped, possibly None), local-part
        and domain

    Raises:
        MissingAtSign: No ``@`` in the address portion
        InvalidLocalPart: The local-part was rejected
        InvalidDomain: The domain was rejected
    """
    data = bytes(data)

    open_index = data.find(LESS_THAN)
    close_index = data.find(GREATER_THAN, open_index + 1) if open_index >= 0 else -1

    if close_index >= 0:
        logger.debug("Parsing display-name form address")
        display_name = extract_display_name(data[:open_index])
        local_part, domain = parse_addr_spec(data[open_index + 1 : close_index])
        return ParsedAddress(display_name, local_part, domain)

    local_part, domain = parse_addr_spec(data)
    return ParsedAddress(None, local_part, domain)


def parse_addr_spec(data: bytes) -> Tuple[LocalPart, Domain]:
    """Split ``local-part@domain`` on the first ``@`` and validate both sides."""
    at_index = data.find(AT_SIGN)
    if at_index < 0:
        raise MissingAtSign()

    try:
        local_part = LocalPart.from_bytes(data[:at_index])
    except LocalPartError as exc:
        raise InvalidLocalPart(exc) from exc

    try:
        domain = Domain.from_bytes(data[at_index + 1 :])
    except DomainError as exc:
        raise InvalidDomain(exc) from exc

    return local_part, domain


def extract_display_name(data: bytes) -> Optional[str]:
    """Decode and unquote the text in front of ``<``.

    Surrounding ASCII whitespace is trimmed, inner whitespace is kept. A
    name wrapped in double quotes loses its quotes and has its escapes
    resolved once.
    """
    # Undecodable octets become U+FFFD
    name = strip_ascii_whitespace(data.decode("utf-8", errors="replace"))

    if len(name) >= 2 and name[0] == '"' and name[-1] == '"':
        name = unescape_display_name(name[1:-1])

    return name or None


def unescape_display_name(text: str) -> str:
    """Resolve ``\\"`` and ``\\\\`` in a single left-to-right pass.

    A backslash before any other character is kept as is.
    """
    chars = []
    index = 0
    length = len(text)
    while index < length:
        char = text[index]
        if char == "\\" and index + 1 < length and text[index + 1] in '"\\':
            chars.append(text[index + 1])
            index += 2
            continue
        chars.append(char)
        index += 1
    return "".join(chars)
