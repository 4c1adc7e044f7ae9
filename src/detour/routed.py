"""Pair a consumer view with the routes that feed its outlets.

``with_routes`` builds the route table once, at decoration time, so a
malformed pattern fails on import rather than on first navigation::

    @with_routes([
        {"path": "/", "component": lambda: Home},
        {"path": "/users", "component": lambda: Users},
    ])
    def shell(children=None, outlets=None):
        return children or NotFound()
"""

from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

from detour.config import ResolverConfig
from detour.resolver import Resolver
from detour.routing.route import Route
from detour.routing.table import RouteTable, build_table


@dataclass(frozen=True, slots=True)
class Routed:
    """A consumer view and its route table."""

    view: Callable[..., Any]
    table: RouteTable
    config: ResolverConfig = field(default_factory=ResolverConfig)

    def resolver(self, path: str | None = None, **kwargs: Any) -> Resolver:
        """Create a resolver over this view's table, fed with *path*."""
        return Resolver(self.table, path=path, config=self.config, **kwargs)


def with_routes(
    routes: Iterable[Route | Mapping[str, Any]],
    *,
    config: ResolverConfig | None = None,
) -> Callable[[Callable[..., Any]], Routed]:
    """Decorator form: attach *routes* to a consumer view."""
    config = config or ResolverConfig()
    table = build_table(routes, config=config)

    def decorator(view: Callable[..., Any]) -> Routed:
        return Routed(view=view, table=table, config=config)

    return decorator
