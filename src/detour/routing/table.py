"""Ordered route table with first-match-wins selection.

The table is built once from user definitions and never changes.
Order is the only tie-break: a catch-all placed early shadows every
route after it, which is how callers express fallbacks.
"""

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from typing import Any

from detour.config import ResolverConfig
from detour.errors import RouteDefinitionError
from detour.routing.pattern import PatternMatch, compile_pattern
from detour.routing.route import Loader, NamedLoader, Route, RouteEntry, SingleLoader


@dataclass(frozen=True, slots=True)
class RouteTable:
    """An immutable, ordered sequence of compiled route entries."""

    entries: tuple[RouteEntry, ...] = ()

    def __iter__(self) -> Iterator[RouteEntry]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def first_match(self, path: str) -> tuple[RouteEntry, PatternMatch] | None:
        """Return the earliest entry matching *path*, or ``None``."""
        for entry in self.entries:
            found = entry.pattern.match(path)
            if found is not None:
                return entry, found
        return None


def build_table(
    routes: Iterable[Route | Mapping[str, Any]],
    *,
    config: ResolverConfig | None = None,
) -> RouteTable:
    """Compile user route definitions into a ``RouteTable``.

    Accepts ``Route`` instances or plain mappings with ``path``,
    ``component`` and optional ``end`` keys::

        table = build_table([
            {"path": "/", "component": lambda: Home},
            {"path": "/users/:id", "component": load_user_page},
            {"path": "/*", "component": lambda: NotFoundPage},
        ])

    Raises:
        PatternError: If any path pattern is malformed.
        RouteDefinitionError: If a definition lacks a path or its
            component is neither a thunk nor a mapping of thunks.
    """
    config = config or ResolverConfig()
    return RouteTable(tuple(to_entry(route, config) for route in routes))


def to_entry(route: Route | Mapping[str, Any], config: ResolverConfig) -> RouteEntry:
    """Compile a single route definition."""
    if isinstance(route, Mapping):
        if "path" not in route or "component" not in route:
            msg = f"Route definition needs 'path' and 'component', got keys {sorted(route)}"
            raise RouteDefinitionError(msg)
        route = Route(path=route["path"], component=route["component"], end=route.get("end"))

    pattern = compile_pattern(
        route.path,
        full=route.end,
        sensitive=config.sensitive,
        strict=config.strict,
    )
    return RouteEntry(pattern=pattern, loader=_to_loader(route))


def _to_loader(route: Route) -> Loader:
    """Classify a component as a single thunk or a map of named thunks."""
    component = route.component
    if isinstance(component, Mapping):
        for name, thunk in component.items():
            if not callable(thunk):
                msg = (
                    f"Route {route.path!r}: outlet {name!r} must be a zero-argument "
                    f"loader, got {type(thunk).__name__}"
                )
                raise RouteDefinitionError(msg)
        return NamedLoader(dict(component))
    if callable(component):
        return SingleLoader(component)
    msg = (
        f"Route {route.path!r}: component must be a loader or a mapping of "
        f"outlet name to loader, got {type(component).__name__}"
    )
    raise RouteDefinitionError(msg)
