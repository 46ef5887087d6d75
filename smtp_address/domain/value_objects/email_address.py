"""Email address value object."""

import json
import logging
from dataclasses import dataclass
from typing import Any, ClassVar, Optional, Union

from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import PydanticCustomError, core_schema

from smtp_address.core.config import get_settings
from smtp_address.domain.charset import MAX_ADDRESS_LENGTH, strip_ascii_whitespace
from smtp_address.domain.exceptions import (
    AmbiguousAngleBrackets,
    EmailAddressError,
    InvalidDisplayName,
    TotalLengthExceeded,
    ValidationError,
)
from smtp_address.domain.services.address_parser import parse_address
from smtp_address.domain.services.address_serializer import (
    format_address,
    serialize_addr_spec,
    serialize_address,
)
from smtp_address.domain.value_objects.domain_name import Domain
from smtp_address.domain.value_objects.local_part import LocalPart

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EmailAddress:
    """Value object representing an SMTP email address.

    An address is a local-part and a domain, optionally with a display
    name. The display name is held unquoted and unescaped with surrounding
    ASCII whitespace removed; quoting is decided again on every
    serialization.

    Construction always validates. Use ``parse`` or ``from_bytes`` for
    text input, or pass already validated components directly.
    """

    local_part: LocalPart
    domain: Domain
    display_name: Optional[str] = None

    MAX_LENGTH: ClassVar[int] = MAX_ADDRESS_LENGTH

    def __post_init__(self) -> None:
        """Normalize the display name and check the total length."""
        if not isinstance(self.local_part, LocalPart):
            raise TypeError(
                f"local_part must be a LocalPart, got {type(self.local_part).__name__}"
            )
        if not isinstance(self.domain, Domain):
            raise TypeError(
                f"domain must be a Domain, got {type(self.domain).__name__}"
            )

        if self.display_name is not None:
            if not isinstance(self.display_name, str):
                raise TypeError(
                    f"display_name must be a string, got {type(self.display_name).__name__}"
                )
            # Whitespace-only names collapse to no name at all
            trimmed = strip_ascii_whitespace(self.display_name) or None
            if trimmed != self.display_name:
                object.__setattr__(self, "display_name", trimmed)

        length = len(self.local_part) + 1 + len(self.domain)
        if length > self.MAX_LENGTH:
            raise TotalLengthExceeded(length)

        self._check_reparsable()

    def _check_reparsable(self) -> None:
        """Reject values the address parser would split differently.

        The parser takes the first ``<`` and the first ``>`` after it as
        the addr-spec brackets, so neither may appear earlier in the
        canonical text than the real ones.
        """
        local_part = self.local_part.value

        if self.display_name is None:
            open_index = local_part.find("<")
            if open_index != -1 and ">" in local_part[open_index + 1:]:
                raise AmbiguousAngleBrackets(local_part)
            return

        if "<" in self.display_name:
            raise InvalidDisplayName(self.display_name, "contains '<'")
        try:
            self.display_name.encode("utf-8")
        except UnicodeEncodeError as exc:
            raise InvalidDisplayName(
                self.display_name, "not encodable as UTF-8"
            ) from exc
        if ">" in local_part:
            raise AmbiguousAngleBrackets(local_part)

    @classmethod
    def parse(cls, text: str) -> "EmailAddress":
        """Create an address from ``local@domain`` or ``Name <local@domain>``."""
        if not isinstance(text, str):
            raise TypeError(f"Expected a string, got {type(text).__name__}")
        # Lone surrogates stay non-ASCII and are rejected by the grammar
        return cls.from_bytes(text.encode("utf-8", errors="surrogatepass"))

    @classmethod
    def from_bytes(cls, data: Union[bytes, bytearray, memoryview]) -> "EmailAddress":
        """Create an address directly from octets."""
        try:
            parsed = parse_address(data)
            return cls(
                local_part=parsed.local_part,
                domain=parsed.domain,
                display_name=parsed.display_name,
            )
        except EmailAddressError as exc:
            if get_settings().log_rejections:
                logger.debug("Rejected email address %r: %s", bytes(data), exc)
            raise

    @classmethod
    def try_parse(cls, text: str) -> Optional["EmailAddress"]:
        """Parse text, returning None instead of raising on invalid input."""
        try:
            return cls.parse(text)
        except ValidationError:
            return None

    @classmethod
    def from_json(cls, document: Union[str, bytes]) -> "EmailAddress":
        """Decode a JSON string document holding the canonical form."""
        value = json.loads(document)
        if not isinstance(value, str):
            raise TypeError(
                f"Expected a JSON string, got {type(value).__name__}"
            )
        return cls.parse(value)

    def to_json(self) -> str:
        """Encode as a single JSON string of the canonical form."""
        return json.dumps(self.value)

    @property
    def address(self) -> str:
        """Get the bare ``local@domain`` form, without any display name."""
        return serialize_addr_spec(self).decode("ascii")

    @property
    def value(self) -> str:
        """Get the canonical text form, including the display name."""
        return format_address(self)

    def with_display_name(self, display_name: Optional[str]) -> "EmailAddress":
        """Create a new address with a different display name."""
        return EmailAddress(
            local_part=self.local_part,
            domain=self.domain,
            display_name=display_name,
        )

    def __bytes__(self) -> bytes:
        return serialize_address(self)

    def __str__(self) -> str:
        """String representation returns the canonical form."""
        return self.value

    # Pydantic integration

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls._validate,
            serialization=core_schema.plain_serializer_function_ser_schema(
                str, when_used="json"
            ),
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls, schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        return {"type": "string", "format": "email"}

    @classmethod
    def _validate(cls, value: Any) -> "EmailAddress":
        if isinstance(value, cls):
            return value
        if not isinstance(value, (str, bytes, bytearray)):
            raise PydanticCustomError(
                "email_address_type", "Input should be a string or bytes"
            )
        try:
            if isinstance(value, str):
                return cls.parse(value)
            return cls.from_bytes(value)
        except EmailAddressError as exc:
            raise PydanticCustomError(
                "email_address",
                "Invalid email address: {reason}",
                {"reason": exc.message, "error": type(exc).__name__},
            ) from exc
