"""Detour — nested, asynchronous route resolution into named outlets.

A resolver matches a path against an ordered route table, loads the
matched route's views (sync or async), and publishes them as named
outlets. Each outlet carries the unmatched remainder of the path, so a
view can embed its own resolver for nested routes.

Basic usage::

    from detour import Resolver

    routes = [
        {"path": "/", "component": lambda: Home},
        {"path": "/users/:id", "component": load_user_page},
        {"path": "/*", "component": lambda: NotFoundPage},
    ]

    async with Resolver(routes, on_change=render) as resolver:
        resolver.resolve("/users/42/posts")
"""

__version__ = "0.1.0.dev0"
__all__ = [
    "DetourError",
    "LoadError",
    "Outlet",
    "PatternError",
    "Resolution",
    "Resolver",
    "ResolverConfig",
    "Route",
    "RouteDefinitionError",
    "RouteTable",
    "Routed",
    "build_table",
    "compile_pattern",
    "compose",
    "with_routes",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import detour`` fast while providing a clean top-level API.
    """
    if name == "Resolver":
        from detour.resolver import Resolver

        return Resolver

    if name == "ResolverConfig":
        from detour.config import ResolverConfig

        return ResolverConfig

    if name in ("Route", "RouteTable", "build_table", "compile_pattern"):
        from detour import routing as _routing

        return getattr(_routing, name)

    if name in ("Outlet", "Resolution", "compose"):
        from detour import outlets as _outlets

        return getattr(_outlets, name)

    if name in ("Routed", "with_routes"):
        from detour import routed as _routed

        return getattr(_routed, name)

    if name in ("DetourError", "LoadError", "PatternError", "RouteDefinitionError"):
        from detour import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
