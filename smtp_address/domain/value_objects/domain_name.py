"""Domain name value object (RFC 1123 host names)."""

from dataclasses import dataclass
from typing import Tuple

from smtp_address.domain.charset import (
    ASCII_DIGITS,
    DOT,
    HYPHEN,
    LDH,
    MAX_DOMAIN_LENGTH,
    MAX_LABEL_LENGTH,
    is_ascii,
)
from smtp_address.domain.exceptions import (
    DomainTooLong,
    EmptyDomain,
    InvalidLabel,
    InvalidTopLevelDomain,
    NonASCIIDomain,
)


def validate_domain(data: bytes) -> None:
    """Validate domain octets against the RFC 1123 host name rules.

    Raises:
        DomainError: On the first violation found
    """
    if not data:
        raise EmptyDomain()
    if not is_ascii(data):
        raise NonASCIIDomain()
    if len(data) > MAX_DOMAIN_LENGTH:
        raise DomainTooLong(len(data))

    labels = data.split(bytes((DOT,)))
    for label in labels:
        _validate_label(label)

    tld = labels[-1]
    if len(labels) > 1 and all(b in ASCII_DIGITS for b in tld):
        raise InvalidTopLevelDomain(tld.decode("ascii"))


def _validate_label(label: bytes) -> None:
    text = label.decode("ascii")
    if not label:
        raise InvalidLabel(text, "label cannot be empty")
    if len(label) > MAX_LABEL_LENGTH:
        raise InvalidLabel(text, f"label exceeds {MAX_LABEL_LENGTH} bytes")
    if label[0] == HYPHEN or label[-1] == HYPHEN:
        raise InvalidLabel(text, "label cannot start or end with a hyphen")
    if any(b not in LDH for b in label):
        raise InvalidLabel(text, "only letters, digits and hyphens are allowed")


@dataclass(frozen=True)
class Domain:
    """Value object representing a validated domain name.

    The name is kept as written; no case folding is applied.
    """

    name: str

    def __post_init__(self) -> None:
        """Validate domain name after initialization."""
        if not isinstance(self.name, str):
            raise TypeError(
                f"Domain must be a string, got {type(self.name).__name__}"
            )
        if self.name and not self.name.isascii():
            raise NonASCIIDomain()
        validate_domain(self.name.encode("ascii"))

    @classmethod
    def from_bytes(cls, data: bytes) -> "Domain":
        """Create a domain directly from octets."""
        data = bytes(data)
        if not data:
            raise EmptyDomain()
        if not is_ascii(data):
            raise NonASCIIDomain()
        return cls(data.decode("ascii"))

    @property
    def labels(self) -> Tuple[str, ...]:
        """Get the dot-separated labels."""
        return tuple(self.name.split("."))

    @property
    def tld(self) -> str:
        """Get the rightmost label."""
        return self.labels[-1]

    def __bytes__(self) -> bytes:
        return self.name.encode("ascii")

    def __len__(self) -> int:
        return len(self.name)

    def __str__(self) -> str:
        """String representation returns the domain name."""
        return self.name
