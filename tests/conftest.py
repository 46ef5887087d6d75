"""Pytest configuration and fixtures."""

import sys
from pathlib import Path

# Add the project root to Python path
sys.path.insert(0, str(Path(__file__).parent.parent))

import pytest

from smtp_address.core.config import get_settings
from smtp_address.domain.value_objects import Domain, EmailAddress, LocalPart


@pytest.fixture(autouse=True)
def clear_settings_cache(monkeypatch):
    """Start every test from default settings."""
    for name in ("SMTP_ADDRESS_LOG_LEVEL", "SMTP_ADDRESS_LOG_FORMAT", "SMTP_ADDRESS_LOG_REJECTIONS"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def example_domain() -> Domain:
    """The example.com domain."""
    return Domain("example.com")


@pytest.fixture
def john(example_domain) -> EmailAddress:
    """Address with a plain display name."""
    return EmailAddress(
        local_part=LocalPart("john"),
        domain=example_domain,
        display_name="John Doe",
    )


def make_domain(length: int) -> str:
    """Build a valid domain name of exactly ``length`` bytes."""
    labels = []
    remaining = length
    while remaining > 63:
        # Never leave a trailing empty label
        size = 62 if remaining == 64 else 63
        labels.append("a" * size)
        remaining -= size + 1
    labels.append("a" * remaining)
    return ".".join(labels)


@pytest.fixture
def domain_of_length():
    """Factory building valid domain names of a given byte length."""
    return make_domain
