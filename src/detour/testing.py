"""Test utilities for detour route trees.

``render_path`` drives a tree of plain view callables and ``Routed``
views to completion for one path, so route tables can be tested without
a real view framework::

    from detour.testing import render_path

    A = lambda: "a"

    @with_routes([{"path": "/a", "component": lambda: A}])
    def shell(children=None, outlets=None):
        return children or "fallback"

    assert await render_path(shell, "/a") == "a"
    assert await render_path(shell, "/b") == "fallback"
"""

from typing import Any

from detour._internal.invoke import bind_params, invoke
from detour.outlets import compose
from detour.routed import Routed


async def render_path(node: Any, path: str, /, **props: Any) -> Any:
    """Render *node* for *path*.

    Plain views are called with the *props* their signature accepts. A
    ``Routed`` view resolves *path*, renders each outlet with its params
    and scoped path, then is composed with the rendered outlets.
    """
    if not isinstance(node, Routed):
        return await invoke(node, **bind_params(node, props))

    async with node.resolver(path) as resolver:
        resolution = await resolver.settled()

    rendered = {
        name: await render_path(outlet.view, outlet.path, **outlet.params)
        for name, outlet in resolution.outlets.items()
    }
    return await compose(node.view, rendered, **props)
