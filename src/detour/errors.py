"""Detour exception hierarchy.

Shared across the pattern compiler, route table, and resolver so every
module raises and catches the same types.

A missing route is not an error: the resolver publishes an empty outlet
mapping and the consumer shows its fallback.
"""


class DetourError(Exception):
    """Base for all detour-specific errors."""


class PatternError(DetourError):
    """Raised when a route pattern cannot be compiled.

    Always raised while building a route table, never while matching,
    so a bad route aborts startup instead of being silently skipped.
    """

    def __init__(self, pattern: str, reason: str) -> None:
        self.pattern = pattern
        self.reason = reason
        super().__init__(f"Invalid route pattern {pattern!r}: {reason}")


class RouteDefinitionError(DetourError):
    """Raised when a route definition is missing a path or has an unusable component."""


class LoadError(DetourError):
    """A route's view loader failed.

    Contained by the resolver: it is handed to the diagnostic sink and
    the outlets are cleared. The loader's own exception is chained as
    ``__cause__`` (an ``ExceptionGroup`` when a named fan-out failed).
    """

    def __init__(self, path: str, pattern: str) -> None:
        self.path = path
        self.pattern = pattern
        super().__init__(f"Loading views for {path!r} (route {pattern!r}) failed")
