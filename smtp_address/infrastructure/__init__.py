"""Adapters that plug the address value type into external libraries."""
