"""Tests for the dashboard example."""

import pytest


@pytest.mark.anyio
class TestDashboard:
    async def test_overview(self, render) -> None:
        assert await render("/") == "[stats] Overview"

    async def test_project_list(self, render) -> None:
        assert await render("/projects") == "[filters] Projects > All projects"

    async def test_lazy_detail(self, render) -> None:
        assert await render("/projects/42") == "[filters] Projects > Project #42"

    async def test_settings_before_detail(self, render) -> None:
        result = await render("/projects/42/settings")
        assert result == "[filters] Projects > Settings for project #42"

    async def test_unknown_project_path(self, render) -> None:
        assert await render("/projects/abc") == "[filters] Projects > Not found"

    async def test_unknown_section(self, render) -> None:
        assert await render("/billing") == "Page not found"
