"""Route definitions, view loaders, and compiled route entries."""

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any, TypeAlias

import anyio

from detour._internal.invoke import invoke
from detour.routing.pattern import RoutePattern

# Outlet name a single-view route is published under
DEFAULT_OUTLET = "default"

# A zero-argument callable returning a view or an awaitable of one
Thunk: TypeAlias = Callable[[], Any]

# Outlet name -> loaded view
ViewMap: TypeAlias = dict[str, Any]


@dataclass(frozen=True, slots=True)
class Route:
    """A user route definition.

    ``component`` is either one loader thunk (the view lands in the
    ``"default"`` outlet) or a mapping of outlet name to loader thunk.
    ``end`` overrides whether the pattern must consume the whole path.
    """

    path: str
    component: Thunk | Mapping[str, Thunk]
    end: bool | None = None


@dataclass(frozen=True, slots=True)
class SingleLoader:
    """Loads one view into the default outlet."""

    thunk: Thunk


@dataclass(frozen=True, slots=True)
class NamedLoader:
    """Loads one view per named outlet, all or nothing."""

    thunks: Mapping[str, Thunk]


Loader: TypeAlias = SingleLoader | NamedLoader


@dataclass(frozen=True, slots=True)
class RouteEntry:
    """A compiled route: pattern plus loader. Immutable once built."""

    pattern: RoutePattern
    loader: Loader

    async def load_views(self) -> ViewMap:
        """Run this route's loader and return its views keyed by outlet.

        Thunks are invoked on every call; nothing is memoized.
        """
        match self.loader:
            case SingleLoader(thunk=thunk):
                return {DEFAULT_OUTLET: await invoke(thunk)}
            case NamedLoader(thunks=thunks):
                return await load_all(thunks)


async def load_all(thunks: Mapping[str, Thunk]) -> ViewMap:
    """Run every thunk concurrently and join on all of them.

    Returns the views in the mapping's key order. If any thunk fails the
    task group cancels the rest and re-raises as an ``ExceptionGroup``.
    """
    views: ViewMap = {}

    async def _load(name: str, thunk: Thunk) -> None:
        views[name] = await invoke(thunk)

    async with anyio.create_task_group() as tg:
        for name, thunk in thunks.items():
            tg.start_soon(_load, name, thunk)

    return {name: views[name] for name in thunks}
