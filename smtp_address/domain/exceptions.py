"""Address validation exceptions.

Every construction failure raises exactly one of the classes below. The
hierarchy is closed and two levels deep:

- component errors (``LocalPartError``, ``DomainError``) describe a
  violation inside one side of the ``@``;
- address errors (``EmailAddressError``) are what the address
  constructors raise. Component errors are always wrapped in
  ``InvalidLocalPart`` or ``InvalidDomain`` at that level.

Following Pythonic principles:
- Rich exception messages with context
- Using dataclasses for structured error data
- Leveraging Python's exception chaining
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

from smtp_address.domain.charset import (
    MAX_ADDRESS_LENGTH,
    MAX_DOMAIN_LENGTH,
    MAX_LOCAL_PART_LENGTH,
)


@dataclass(frozen=True)
class ErrorContext:
    """Structured error context using dataclass."""

    component: Optional[str] = None
    invalid_value: Optional[Any] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary format."""
        result: Dict[str, Any] = {}
        if self.component:
            result["component"] = self.component
        if self.invalid_value is not None:
            result["invalid_value"] = self.invalid_value
        if self.extra:
            result.update(self.extra)
        return result


class ValidationError(Exception):
    """Base exception for all address validation errors.

    Two errors are equal when they are the same variant carrying the same
    payload, so callers and tests can compare against an expected value.
    """

    def __init__(
        self,
        message: str,
        *,  # Force keyword-only arguments
        context: ErrorContext,
    ):
        """Initialize validation error with rich context.

        Args:
            message: Human-readable error message
            context: Structured error context
        """
        super().__init__(message)
        self.message = message
        self.context = context

    def _payload(self) -> Tuple[Any, ...]:
        return ()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ValidationError):
            return NotImplemented
        return type(self) is type(other) and self._payload() == other._payload()

    def __hash__(self) -> int:
        return hash((type(self), self._payload()))

    def __str__(self) -> str:
        """Provide detailed string representation."""
        parts = [self.message]

        if self.context.component:
            parts.append(f"[{self.context.component}]")

        return " - ".join(parts)

    def __repr__(self) -> str:
        """Developer-friendly representation."""
        payload = ", ".join(repr(item) for item in self._payload())
        return f"{self.__class__.__name__}({payload})"


# Local-part errors


class LocalPartError(ValidationError):
    """Raised when a local-part violates the dot-atom or quoted-string grammar."""


class EmptyLocalPart(LocalPartError):
    def __init__(self) -> None:
        super().__init__(
            "Local-part cannot be empty",
            context=ErrorContext(component="local-part"),
        )


class LocalPartTooLong(LocalPartError):
    def __init__(self, length: int):
        super().__init__(
            f"Local-part is too long ({length} bytes, maximum {MAX_LOCAL_PART_LENGTH})",
            context=ErrorContext(
                component="local-part",
                extra={"length": length, "maximum": MAX_LOCAL_PART_LENGTH},
            ),
        )
        self.length = length

    def _payload(self) -> Tuple[Any, ...]:
        return (self.length,)


class NonASCIILocalPart(LocalPartError):
    def __init__(self) -> None:
        super().__init__(
            "Local-part must contain only ASCII characters",
            context=ErrorContext(component="local-part"),
        )


class InvalidDotAtom(LocalPartError):
    """Dot placement is wrong: leading, trailing or doubled dots."""

    def __init__(self, text: str):
        super().__init__(
            f"Invalid dot-atom format in local-part {text!r}",
            context=ErrorContext(component="local-part", invalid_value=text),
        )
        self.text = text

    def _payload(self) -> Tuple[Any, ...]:
        return (self.text,)


class InvalidQuotedString(LocalPartError):
    """Quoting is malformed: unterminated, stray quote or bad escape."""

    def __init__(self, text: str):
        super().__init__(
            f"Invalid quoted string format in local-part {text!r}",
            context=ErrorContext(component="local-part", invalid_value=text),
        )
        self.text = text

    def _payload(self) -> Tuple[Any, ...]:
        return (self.text,)


class InvalidCharacter(LocalPartError):
    """A byte is not allowed at its position in the local-part."""

    def __init__(self, text: str, byte: int):
        super().__init__(
            f"Invalid character {chr(byte)!r} (0x{byte:02X}) in local-part {text!r}",
            context=ErrorContext(
                component="local-part", invalid_value=text, extra={"byte": byte}
            ),
        )
        self.text = text
        self.byte = byte

    def _payload(self) -> Tuple[Any, ...]:
        return (self.text, self.byte)


# Domain errors


class DomainError(ValidationError):
    """Raised when a domain name is not a valid RFC 1123 host name."""


class EmptyDomain(DomainError):
    def __init__(self) -> None:
        super().__init__(
            "Domain cannot be empty", context=ErrorContext(component="domain")
        )


class DomainTooLong(DomainError):
    def __init__(self, length: int):
        super().__init__(
            f"Domain is too long ({length} bytes, maximum {MAX_DOMAIN_LENGTH})",
            context=ErrorContext(
                component="domain",
                extra={"length": length, "maximum": MAX_DOMAIN_LENGTH},
            ),
        )
        self.length = length

    def _payload(self) -> Tuple[Any, ...]:
        return (self.length,)


class NonASCIIDomain(DomainError):
    def __init__(self) -> None:
        super().__init__(
            "Domain must contain only ASCII characters",
            context=ErrorContext(component="domain"),
        )


class InvalidLabel(DomainError):
    def __init__(self, label: str, reason: str):
        super().__init__(
            f"Invalid domain label {label!r}: {reason}",
            context=ErrorContext(
                component="domain", invalid_value=label, extra={"reason": reason}
            ),
        )
        self.label = label
        self.reason = reason

    def _payload(self) -> Tuple[Any, ...]:
        return (self.label, self.reason)


class InvalidTopLevelDomain(DomainError):
    def __init__(self, label: str):
        super().__init__(
            f"Top-level domain {label!r} cannot be all-numeric",
            context=ErrorContext(component="domain", invalid_value=label),
        )
        self.label = label

    def _payload(self) -> Tuple[Any, ...]:
        return (self.label,)


# Address errors


class EmailAddressError(ValidationError):
    """Raised by the email address constructors."""


class MissingAtSign(EmailAddressError):
    def __init__(self) -> None:
        super().__init__(
            "Email address must contain @ sign",
            context=ErrorContext(component="address"),
        )


class TotalLengthExceeded(EmailAddressError):
    def __init__(self, length: int):
        super().__init__(
            f"Email address is too long ({length} bytes, maximum {MAX_ADDRESS_LENGTH})",
            context=ErrorContext(
                component="address",
                extra={"length": length, "maximum": MAX_ADDRESS_LENGTH},
            ),
        )
        self.length = length

    def _payload(self) -> Tuple[Any, ...]:
        return (self.length,)


class InvalidDisplayName(EmailAddressError):
    """The display name cannot be written in the canonical form."""

    def __init__(self, display_name: str, reason: str):
        super().__init__(
            f"Invalid display name {display_name!r}: {reason}",
            context=ErrorContext(
                component="display-name",
                invalid_value=display_name,
                extra={"reason": reason},
            ),
        )
        self.display_name = display_name
        self.reason = reason

    def _payload(self) -> Tuple[Any, ...]:
        return (self.display_name, self.reason)


class AmbiguousAngleBrackets(EmailAddressError):
    """Angle brackets in a quoted local-part would split the canonical form."""

    def __init__(self, local_part: str):
        super().__init__(
            f"Angle brackets in local-part {local_part!r} make the address ambiguous",
            context=ErrorContext(component="address", invalid_value=local_part),
        )
        self.local_part = local_part

    def _payload(self) -> Tuple[Any, ...]:
        return (self.local_part,)


class InvalidLocalPart(EmailAddressError):
    """Wraps the local-part error that rejected the address."""

    def __init__(self, error: LocalPartError):
        super().__init__(
            f"Invalid local-part: {error.message}",
            context=ErrorContext(
                component="address", extra={"cause": error.context.to_dict()}
            ),
        )
        self.error = error

    def _payload(self) -> Tuple[Any, ...]:
        return (self.error,)


class InvalidDomain(EmailAddressError):
    """Wraps the domain error that rejected the address."""

    def __init__(self, error: DomainError):
        super().__init__(
            f"Invalid domain: {error.message}",
            context=ErrorContext(
                component="address", extra={"cause": error.context.to_dict()}
            ),
        )
        self.error = error

    def _payload(self) -> Tuple[Any, ...]:
        return (self.error,)
