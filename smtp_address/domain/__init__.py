"""Domain layer for smtp-address.

This layer contains the address grammar: value objects for the local-part,
the domain and the full address, the parsing and serialization services
that connect them, and the error taxonomy they raise.
"""
