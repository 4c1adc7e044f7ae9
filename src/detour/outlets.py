"""Outlet composition.

A resolution turns each loaded view into an ``Outlet``: the view, the
path params it is rendered with, and the path remainder any resolver
nested inside it must use. The consumer receives every outlet by name
and, additionally, the ``"default"`` outlet as its implicit children.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any

from detour._internal.invoke import bind_params, invoke
from detour.routing.pattern import PatternMatch
from detour.routing.route import DEFAULT_OUTLET, ViewMap

# Keywords compose always supplies itself
RESERVED_PROPS = frozenset({"children", "outlets"})


@dataclass(frozen=True, slots=True)
class Outlet:
    """A resolved view bound to its params and scoped path.

    Attributes:
        name: Outlet name (``"default"`` for single-view routes).
        view: The loaded view, exactly as the loader returned it.
        params: Path params the view is rendered with.
        path: The unmatched remainder; the only path a resolver nested
            inside this view may see.
    """

    name: str
    view: Any
    params: dict[str, str]
    path: str


@dataclass(frozen=True, slots=True)
class Resolution:
    """The published result of one resolution. Replaced, never patched."""

    params: dict[str, str] = field(default_factory=dict)
    remainder: str = ""
    outlets: dict[str, Outlet] = field(default_factory=dict)

    @classmethod
    def empty(cls) -> Resolution:
        """The cleared state: no route matched, or its loader failed."""
        return cls()

    @property
    def children(self) -> Outlet | None:
        """The default outlet, offered to the consumer as implicit children."""
        return self.outlets.get(DEFAULT_OUTLET)

    def __bool__(self) -> bool:
        return bool(self.outlets)


def build_outlets(views: ViewMap, match: PatternMatch) -> Resolution:
    """Wrap each loaded view as an outlet scoped to the match's remainder."""
    outlets = {
        name: Outlet(name=name, view=view, params=dict(match.params), path=match.remainder)
        for name, view in views.items()
    }
    return Resolution(params=dict(match.params), remainder=match.remainder, outlets=outlets)


async def compose(view: Callable[..., Any], outlets: Mapping[str, Any], /, **props: Any) -> Any:
    """Call a consumer view with its outlets.

    The view receives ``outlets`` (every outlet by name, ``"default"``
    included), ``children`` (the default outlet or ``None``) and those
    of *props* its signature accepts. Works with ``def`` and
    ``async def`` views::

        def layout(children=None, outlets=None):
            return children or "nothing here"

    *outlets* may hold ``Outlet`` objects or whatever the caller rendered
    them into; they are passed through untouched. Props named
    ``children`` or ``outlets`` (e.g. from a ``/:children`` route param)
    are dropped in favour of the composed values.
    """
    props = {name: value for name, value in props.items() if name not in RESERVED_PROPS}
    return await invoke(
        view,
        children=outlets.get(DEFAULT_OUTLET),
        outlets=outlets,
        **bind_params(view, props),
    )
