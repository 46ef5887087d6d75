"""Pure functions connecting raw octets and address value objects.

- address_parser: octets -> validated components
- address_serializer: address -> canonical octets
"""
