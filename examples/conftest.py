"""Shared pytest configuration for detour examples.

Each example's ``app.py`` exposes a routed ``shell`` view. The ``render``
fixture re-imports that file for every test (route tables are built at
import time, so a fresh import means a fresh table) and returns an async
callable that renders the shell for a path.
"""

import importlib.util
from collections.abc import Awaitable, Callable
from pathlib import Path
from typing import Any

import pytest

from detour.routed import Routed
from detour.testing import render_path


def _load_shell(app_path: Path) -> Routed:
    spec = importlib.util.spec_from_file_location(f"example_{app_path.parent.name}", app_path)
    assert spec is not None and spec.loader is not None
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    shell = module.shell
    assert isinstance(shell, Routed), f"{app_path} must define a routed 'shell' view"
    return shell


@pytest.fixture
def render(request: pytest.FixtureRequest) -> Callable[[str], Awaitable[Any]]:
    """Render the sibling app.py's shell for a path."""
    shell = _load_shell(Path(request.path).parent / "app.py")

    async def _render(path: str) -> Any:
        return await render_path(shell, path)

    return _render
