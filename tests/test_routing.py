"""End-to-end routing through nested routed views."""

import anyio
import pytest

from detour.routed import Routed, with_routes
from detour.testing import render_path


def A() -> str:
    return "a"


def B() -> str:
    return "b"


def C() -> str:
    return "c"


def D() -> str:
    return "d"


class TestBasicRouting:
    @pytest.mark.anyio
    async def test_basic(self) -> None:
        @with_routes([
            {"path": "/a", "component": lambda: A},
            {"path": "/b", "component": lambda: B},
        ])
        def shell(children=None, outlets=None):
            return children or "c"

        assert await render_path(shell, "/") == "c"
        assert await render_path(shell, "/not-found") == "c"
        assert await render_path(shell, "/a") == "a"
        assert await render_path(shell, "/b") == "b"
        assert await render_path(shell, "/a/b/c") == "a"
        assert await render_path(shell, "/b/d") == "b"

    @pytest.mark.anyio
    async def test_index_route(self) -> None:
        @with_routes([
            {"path": "/", "component": lambda: C},
            {"path": "/a", "component": lambda: A},
            {"path": "/b", "component": lambda: B},
        ])
        def shell(children=None, outlets=None):
            return children or "d"

        assert await render_path(shell, "/") == "c"
        assert await render_path(shell, "/not-found") == "d"
        assert await render_path(shell, "/a") == "a"
        assert await render_path(shell, "/b") == "b"
        assert await render_path(shell, "/a/b/c") == "a"
        assert await render_path(shell, "/b/d") == "b"

    @pytest.mark.anyio
    async def test_not_found_route(self) -> None:
        @with_routes([
            {"path": "/a", "component": lambda: A},
            {"path": "/*", "component": lambda: B},
            {"path": "/c", "component": lambda: C},
        ])
        def shell(children=None, outlets=None):
            return children or "d"

        assert await render_path(shell, "/") == "b"
        assert await render_path(shell, "/not-found") == "b"
        assert await render_path(shell, "/a") == "a"
        assert await render_path(shell, "/b") == "b"
        assert await render_path(shell, "/c") == "b"
        assert await render_path(shell, "/a/b") == "a"

    @pytest.mark.anyio
    async def test_path_params(self) -> None:
        def sum_view(a, b):
            return a + b

        @with_routes([{"path": "/:a/:b", "component": lambda: sum_view}])
        def shell(children=None, outlets=None):
            return children or "b"

        assert await render_path(shell, "/") == "b"
        assert await render_path(shell, "/a") == "b"
        assert await render_path(shell, "/a/b") == "ab"
        assert await render_path(shell, "/c/d") == "cd"
        assert await render_path(shell, "/4/2") == "42"
        assert await render_path(shell, "/a/b/c") == "ab"

    @pytest.mark.anyio
    async def test_annotated_params_are_coerced(self) -> None:
        def double(n: int) -> str:
            return str(n * 2)

        @with_routes([{"path": r"/:n(\d+)", "component": lambda: double}])
        def shell(children=None, outlets=None):
            return children or "none"

        assert await render_path(shell, "/21") == "42"

    @pytest.mark.anyio
    async def test_async_loaders_and_views(self) -> None:
        async def async_view() -> str:
            await anyio.sleep(0)
            return "async"

        async def load() -> object:
            await anyio.sleep(0.01)
            return async_view

        @with_routes([{"path": "/lazy", "component": load}])
        async def shell(children=None, outlets=None):
            return children or "shell"

        assert await render_path(shell, "/lazy") == "async"
        assert await render_path(shell, "/") == "shell"


class TestNestedRouting:
    @pytest.mark.anyio
    async def test_nested(self) -> None:
        @with_routes([
            {"path": "/a", "component": lambda: A},
            {"path": "/b", "component": lambda: B},
        ])
        def inner(children=None, outlets=None):
            return children or "c"

        @with_routes([
            {"path": "/c", "component": lambda: inner},
            {"path": "/d", "component": lambda: D},
        ])
        def outer(children=None, outlets=None):
            return children or "e"

        assert isinstance(outer, Routed)
        assert await render_path(outer, "/") == "e"
        assert await render_path(outer, "/not-found") == "e"
        assert await render_path(outer, "/c") == "c"
        assert await render_path(outer, "/d") == "d"
        assert await render_path(outer, "/d/e") == "d"
        assert await render_path(outer, "/c/a") == "a"
        assert await render_path(outer, "/c/a/b") == "a"
        assert await render_path(outer, "/c/b") == "b"
        assert await render_path(outer, "/c/not-found") == "c"

    @pytest.mark.anyio
    async def test_params_reach_nested_view(self) -> None:
        def post(slug):
            return f"post:{slug}"

        @with_routes([{"path": "/posts/:slug", "component": lambda: post}])
        def user(user_id, children=None, outlets=None):
            return f"{user_id}/{children or '-'}"

        @with_routes([{"path": "/users/:user_id", "component": lambda: user}])
        def root(children=None, outlets=None):
            return children or "home"

        assert await render_path(root, "/users/7") == "7/-"
        assert await render_path(root, "/users/7/posts/hello") == "7/post:hello"


class TestNamedOutlets:
    @pytest.mark.anyio
    async def test_named_handlers(self) -> None:
        @with_routes([
            {"path": "/ab", "component": {"one": lambda: A, "two": lambda: B}},
            {"path": "/cd", "component": {"one": lambda: C, "two": lambda: D}},
        ])
        def layout(outlets, children=None):
            return (outlets.get("one") or "") + (outlets.get("two") or "")

        assert await render_path(layout, "/") == ""
        assert await render_path(layout, "/ab") == "ab"
        assert await render_path(layout, "/cd") == "cd"
        assert await render_path(layout, "/ab/cd") == "ab"

    @pytest.mark.anyio
    async def test_default_named_handler_is_children(self) -> None:
        @with_routes([
            {"path": "/a", "component": {"default": lambda: A}},
            {"path": "/b", "component": {"default": lambda: B}},
        ])
        def shell(children=None, outlets=None):
            return children or "c"

        assert await render_path(shell, "/") == "c"
        assert await render_path(shell, "/a") == "a"
        assert await render_path(shell, "/b") == "b"
        assert await render_path(shell, "/d") == "c"
        assert await render_path(shell, "/a/b") == "a"

    @pytest.mark.anyio
    async def test_nested_named_outlets(self) -> None:
        @with_routes([
            {"path": "/a", "component": {"c": lambda: A}},
            {"path": "/b", "component": {"c": lambda: B}},
        ])
        def inner(outlets, children=None):
            return outlets.get("c") or "c"

        @with_routes([
            {"path": "/c", "component": {"e": lambda: inner}},
            {"path": "/d", "component": {"e": lambda: D}},
        ])
        def outer(outlets, children=None):
            return outlets.get("e") or "e"

        assert await render_path(outer, "/") == "e"
        assert await render_path(outer, "/not-found") == "e"
        assert await render_path(outer, "/c") == "c"
        assert await render_path(outer, "/d") == "d"
        assert await render_path(outer, "/d/e") == "d"
        assert await render_path(outer, "/c/a") == "a"
        assert await render_path(outer, "/c/a/b") == "a"
        assert await render_path(outer, "/c/b") == "b"
        assert await render_path(outer, "/c/not-found") == "c"

    @pytest.mark.anyio
    async def test_default_and_named_together(self) -> None:
        @with_routes([
            {"path": "/page", "component": {"default": lambda: A, "sidebar": lambda: B}},
        ])
        def layout(children=None, outlets=None):
            return f"{children}|{outlets['sidebar']}|{outlets['default']}"

        assert await render_path(layout, "/page") == "a|b|a"


class TestRoutedResolver:
    @pytest.mark.anyio
    async def test_resolver_uses_routed_table(self) -> None:
        @with_routes([{"path": "/a", "component": lambda: A}])
        def shell(children=None, outlets=None):
            return children

        async with shell.resolver("/a/x") as resolver:
            result = await resolver.settled()
        assert resolver.table is shell.table
        assert result.children is not None
        assert result.children.path == "/x"


class TestParamNames:
    @pytest.mark.anyio
    async def test_param_named_children_reaches_nested_routed_view(self) -> None:
        @with_routes([{"path": "/a", "component": lambda: A}])
        def inner(children=None, outlets=None, **props):
            return f"{children or '-'}:{sorted(props)}"

        @with_routes([{"path": "/:children", "component": lambda: inner}])
        def outer(children=None, outlets=None):
            return children or "none"

        assert await render_path(outer, "/x") == "-:[]"
        assert await render_path(outer, "/x/a") == "a:[]"

    @pytest.mark.anyio
    async def test_params_sharing_harness_argument_names(self) -> None:
        def view(**props):
            return ",".join(f"{k}={v}" for k, v in sorted(props.items()))

        @with_routes([{"path": "/:path/:node", "component": lambda: view}])
        def shell(children=None, outlets=None):
            return children

        assert await render_path(shell, "/p/n") == "node=n,path=p"
