"""SMTP email address validation, parsing and canonical serialization.

Typical use::

    from smtp_address import EmailAddress

    email = EmailAddress.parse('"Doe, John" <john@example.com>')
    email.display_name  # 'Doe, John'
    email.address       # 'john@example.com'
    str(email)          # '"Doe, John" <john@example.com>'
"""

from smtp_address.domain.exceptions import (
    AmbiguousAngleBrackets,
    DomainError,
    DomainTooLong,
    EmailAddressError,
    EmptyDomain,
    EmptyLocalPart,
    ErrorContext,
    InvalidCharacter,
    InvalidDisplayName,
    InvalidDomain,
    InvalidDotAtom,
    InvalidLabel,
    InvalidLocalPart,
    InvalidQuotedString,
    InvalidTopLevelDomain,
    LocalPartError,
    LocalPartTooLong,
    MissingAtSign,
    NonASCIIDomain,
    NonASCIILocalPart,
    TotalLengthExceeded,
    ValidationError,
)
from smtp_address.domain.value_objects import (
    Domain,
    EmailAddress,
    LocalPart,
    LocalPartFormat,
)

__version__ = "0.1.0"

__all__ = [
    "AmbiguousAngleBrackets",
    "Domain",
    "DomainError",
    "DomainTooLong",
    "EmailAddress",
    "EmailAddressError",
    "EmptyDomain",
    "EmptyLocalPart",
    "ErrorContext",
    "InvalidCharacter",
    "InvalidDisplayName",
    "InvalidDomain",
    "InvalidDotAtom",
    "InvalidLabel",
    "InvalidLocalPart",
    "InvalidQuotedString",
    "InvalidTopLevelDomain",
    "LocalPart",
    "LocalPartError",
    "LocalPartFormat",
    "LocalPartTooLong",
    "MissingAtSign",
    "NonASCIIDomain",
    "NonASCIILocalPart",
    "TotalLengthExceeded",
    "ValidationError",
]
