"""Value objects for the domain layer.

Value objects are immutable objects defined by their attributes. Each one
validates on construction, so holding an instance means holding a valid
value.
"""

from smtp_address.domain.value_objects.domain_name import Domain
from smtp_address.domain.value_objects.local_part import LocalPart, LocalPartFormat
from smtp_address.domain.value_objects.email_address import EmailAddress

__all__ = [
    "Domain",
    "EmailAddress",
    "LocalPart",
    "LocalPartFormat",
]
