"""Resolver configuration.

ResolverConfig is a frozen dataclass: immutable after creation, shared by
the route table and every resolver built from it.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ResolverConfig:
    """Routing configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = ResolverConfig(sensitive=True, log_no_match=True)
    """

    # Patterns
    sensitive: bool = False  # Case-sensitive literal segments
    strict: bool = False  # Trailing "/" must match exactly

    # Diagnostics
    log_no_match: bool = False  # Debug-log paths no route matched
