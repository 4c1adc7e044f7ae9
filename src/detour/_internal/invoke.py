"""Invoke helpers — call sync or async loaders and views uniformly.

A view loader thunk may return a view directly or an awaitable of one
(e.g. a coroutine that imports a module on demand). Consumer views may
likewise be ``def`` or ``async def``. This module keeps that check in
exactly one place.

Usage::

    from detour._internal.invoke import invoke

    view = await invoke(thunk)
"""

import inspect
from typing import Any

# Annotations bind_params converts path param strings to
COERCIBLE: tuple[type, ...] = (str, int, float)


async def invoke(func: Any, /, *args: Any, **kwargs: Any) -> Any:
    """Call *func* and await the result if it is awaitable.

    Works with both styles of loader::

        # sync: the view is already importable
        {"path": "/a", "component": lambda: AView}

        # async: the view is loaded on demand
        async def load_b():
            module = await fetch_module("b")
            return module.BView

        {"path": "/b", "component": load_b}
    """
    result = func(*args, **kwargs)
    if inspect.isawaitable(result):
        result = await result
    return result


def bind_params(func: Any, params: dict[str, Any]) -> dict[str, Any]:
    """Select the params *func* can accept, coercing annotated ones.

    A view's signature decides which path params it receives::

        def user_page(user_id: int): ...   # receives user_id=42 from "/users/42"

        def about(): ...                   # receives nothing

    Functions taking ``**kwargs`` receive everything unchanged. Only
    ``str``, ``int`` and ``float`` annotations are converted; other
    annotations, and values a converter rejects, pass through as strings.
    """
    try:
        sig = inspect.signature(func, eval_str=True)
    except (TypeError, ValueError):
        return dict(params)

    if any(p.kind is inspect.Parameter.VAR_KEYWORD for p in sig.parameters.values()):
        return dict(params)

    kwargs: dict[str, Any] = {}
    for name, param in sig.parameters.items():
        if name not in params:
            continue
        value = params[name]
        if param.annotation in COERCIBLE and isinstance(value, str):
            try:
                kwargs[name] = param.annotation(value)
            except (ValueError, TypeError):
                kwargs[name] = value
        else:
            kwargs[name] = value
    return kwargs
