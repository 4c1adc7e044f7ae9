"""Asynchronous outlet resolution with last-write-wins sessions.

A ``Resolver`` owns one route table and publishes a ``Resolution`` for
the most recently requested path. Loading views may suspend, and paths
may change faster than loads finish, so every ``resolve()`` call opens a
new session. A load that completes under an older session is dropped:
there is no await between the session check and the publish, so on a
single event loop the check cannot race.

Usage::

    async with Resolver(routes, on_change=render) as resolver:
        resolver.resolve("/users/42/edit")
        ...
        resolver.resolve("/settings")

Superseded loads are not interrupted; they run to completion and their
result is ignored. Leaving the ``async with`` block cancels whatever is
still in flight.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping
from typing import Any

import anyio
from anyio.abc import TaskGroup

from detour.config import ResolverConfig
from detour.errors import LoadError
from detour.outlets import Outlet, Resolution, build_outlets
from detour.routing.route import Route, RouteEntry
from detour.routing.table import RouteTable, build_table

logger = logging.getLogger("detour.resolver")


def report_error(error: LoadError) -> None:
    """Default diagnostic sink: log the failure with its cause."""
    logger.error("%s", error, exc_info=error)


class Resolver:
    """Resolves paths against a route table into published outlets.

    Args:
        routes: A built ``RouteTable`` or route definitions to build one.
        path: Resolved once on entering the context. Nested resolvers
            get their path this way, from the parent ``Outlet.path``.
        on_change: Called with each published ``Resolution``.
        report: Diagnostic sink for ``LoadError``; defaults to logging.
        config: Pattern and logging options.
    """

    __slots__ = (
        "_config",
        "_idle",
        "_initial_path",
        "_on_change",
        "_path",
        "_pending",
        "_report",
        "_result",
        "_session",
        "_table",
        "_task_group",
    )

    def __init__(
        self,
        routes: RouteTable | Iterable[Route | Mapping[str, Any]],
        *,
        path: str | None = None,
        on_change: Callable[[Resolution], Any] | None = None,
        report: Callable[[LoadError], Any] | None = None,
        config: ResolverConfig | None = None,
    ) -> None:
        self._config = config or ResolverConfig()
        if isinstance(routes, RouteTable):
            self._table = routes
        else:
            self._table = build_table(routes, config=self._config)
        self._initial_path = path
        self._on_change = on_change
        self._report = report or report_error
        self._session = 0
        self._path: str | None = None
        self._result = Resolution.empty()
        self._task_group: TaskGroup | None = None
        self._pending = 0
        self._idle: anyio.Event | None = None

    async def __aenter__(self) -> Resolver:
        task_group = anyio.create_task_group()
        await task_group.__aenter__()
        self._task_group = task_group
        if self._initial_path is not None:
            self.resolve(self._initial_path)
        return self

    async def __aexit__(self, *exc_info: Any) -> bool | None:
        task_group, self._task_group = self._task_group, None
        assert task_group is not None
        task_group.cancel_scope.cancel()
        return await task_group.__aexit__(*exc_info)

    # -- State --

    @property
    def table(self) -> RouteTable:
        return self._table

    @property
    def path(self) -> str | None:
        """The most recently requested path."""
        return self._path

    @property
    def session(self) -> int:
        """The current session id. Grows by one per ``resolve()`` call."""
        return self._session

    @property
    def result(self) -> Resolution:
        """The last published resolution."""
        return self._result

    @property
    def outlets(self) -> dict[str, Outlet]:
        return self._result.outlets

    # -- Resolution --

    def resolve(self, path: str) -> None:
        """Start resolving *path*, superseding any earlier request.

        Returns immediately. When no route matches, the outlets are
        cleared before this call returns; otherwise the result is
        published once the route's views have loaded, provided no later
        ``resolve()`` call has come in meanwhile.
        """
        if self._task_group is None:
            msg = "Resolver is not running; use it as 'async with Resolver(...)'"
            raise RuntimeError(msg)

        self._session += 1
        session = self._session
        self._path = path

        found = self._table.first_match(path)
        if found is None:
            if self._config.log_no_match:
                logger.debug("No route matches %r", path)
            self._publish(Resolution.empty())
            return

        entry, _ = found
        if not self._pending:
            self._idle = anyio.Event()
        self._pending += 1
        self._task_group.start_soon(self._load, entry, path, session, name=f"detour:{path}")

    async def settled(self) -> Resolution:
        """Wait until no load is in flight, then return the current result."""
        while self._pending and self._idle is not None:
            await self._idle.wait()
        return self._result

    async def _load(self, entry: RouteEntry, path: str, session: int) -> None:
        try:
            try:
                views = await entry.load_views()
            except Exception as exc:
                error = LoadError(path, entry.pattern.path)
                error.__cause__ = exc
                self._report(error)
                if session == self._session:
                    self._publish(Resolution.empty())
                return

            if session != self._session:
                logger.debug(
                    "Discarding stale resolution of %r (session %d, current %d)",
                    path, session, self._session,
                )
                return

            # Re-match the path captured at call time; patterns are pure,
            # so this cannot fail where first_match succeeded.
            found = entry.pattern.match(path)
            assert found is not None
            self._publish(build_outlets(views, found))
        finally:
            self._pending -= 1
            if not self._pending and self._idle is not None:
                self._idle.set()

    def _publish(self, resolution: Resolution) -> None:
        self._result = resolution
        if self._on_change is not None:
            self._on_change(resolution)
