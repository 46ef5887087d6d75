"""Database column types for address values."""

from smtp_address.infrastructure.persistence.types import EmailAddressType

__all__ = ["EmailAddressType"]
