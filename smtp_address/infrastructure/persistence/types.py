"""SQLAlchemy column type for email addresses.

The persisted form is always the canonical string, never a structured
record. Loading re-runs the text constructor, so a row holding an invalid
address fails loudly instead of producing an unchecked value.
"""

from typing import Any, Optional, Union

from sqlalchemy import String
from sqlalchemy.engine import Dialect
from sqlalchemy.types import TypeDecorator

from smtp_address.domain.value_objects.email_address import EmailAddress


class EmailAddressType(TypeDecorator):
    """Store an EmailAddress as its canonical string.

    Example:
        class Contact(Base):
            __tablename__ = "contacts"

            id: Mapped[int] = mapped_column(primary_key=True)
            email: Mapped[EmailAddress] = mapped_column(EmailAddressType())
    """

    impl = String(320)
    cache_ok = True

    @property
    def python_type(self) -> type:
        return EmailAddress

    def process_bind_param(
        self, value: Optional[Union[EmailAddress, str]], dialect: Dialect
    ) -> Optional[str]:
        """Convert to the canonical string before writing."""
        if value is None:
            return None
        if isinstance(value, str):
            value = EmailAddress.parse(value)
        if not isinstance(value, EmailAddress):
            raise TypeError(
                f"Expected EmailAddress or str, got {type(value).__name__}"
            )
        return value.value

    def process_result_value(
        self, value: Optional[str], dialect: Dialect
    ) -> Optional[EmailAddress]:
        """Parse the stored string back into an address."""
        if value is None:
            return None
        return EmailAddress.parse(value)

    def process_literal_param(self, value: Any, dialect: Dialect) -> str:
        return self.process_bind_param(value, dialect)
