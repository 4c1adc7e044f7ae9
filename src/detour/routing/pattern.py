"""Route pattern compilation.

Turns a user path pattern into a compiled regex plus the ordered list of
parameter names its capture groups fill. Patterns use the familiar
colon syntax::

    "/users"            literal segment
    "/users/:id"        named parameter, one non-empty segment
    "/users/:id(\\d+)"  named parameter with a custom segment regex
    "/:size((?:s|l))"   custom regex with alternation, nested in the group
    "/posts/:slug?"     optional parameter
    "/files/*"          catch-all, captured under "0"

Non-full patterns match only a prefix that ends on a segment boundary,
so a parent route can consume ``/users`` and hand ``/42/edit`` to the
routes nested beneath it.
"""

import re
from dataclasses import dataclass

from detour.errors import PatternError

# One path segment, matched lazily so an optional trailing "/" stays free
SEGMENT = r"[^/]+?"

# Catch-all: the rest of the path, possibly empty
CATCH_ALL = r".*"

_PARAM = re.compile(r":(?P<name>\w*)(?:\((?P<pattern>.*)\))?(?P<optional>\?)?")


@dataclass(frozen=True, slots=True)
class PatternMatch:
    """Result of matching a path against a ``RoutePattern``.

    ``matched + remainder`` is always the original path.
    """

    matched: str
    params: dict[str, str]
    remainder: str


@dataclass(frozen=True, slots=True)
class RoutePattern:
    """A compiled route pattern.

    Created once when the route table is built. ``param_names`` is
    parallel to the regex's capture groups; ``full`` patterns must consume
    the whole path.
    """

    path: str
    regex: re.Pattern[str]
    param_names: tuple[str, ...]
    full: bool

    def match(self, path: str) -> PatternMatch | None:
        """Match *path* from its start. Returns ``None`` on no match."""
        found = self.regex.match(path)
        if found is None:
            return None
        # Optional parameters that did not take part are left out
        params = {
            name: value
            for name, value in zip(self.param_names, found.groups(), strict=True)
            if value is not None
        }
        return PatternMatch(
            matched=found.group(0),
            params=params,
            remainder=path[found.end():],
        )


def compile_pattern(
    path: str,
    *,
    full: bool | None = None,
    sensitive: bool = False,
    strict: bool = False,
) -> RoutePattern:
    """Compile a route pattern string.

    Args:
        path: The pattern, e.g. ``"/users/:id"``.
        full: Require the pattern to consume the whole path. Defaults to
            ``True`` only for the root pattern ``"/"``, so index routes
            don't swallow every path while all other routes prefix-match.
        sensitive: Match literal segments case-sensitively.
        strict: Treat a trailing ``/`` as significant.

    Raises:
        PatternError: If the pattern is malformed.
    """
    if not path.startswith("/"):
        raise PatternError(path, "must start with '/'")
    if full is None:
        full = path == "/"

    parts = path.split("/")[1:]
    route = ""
    names: list[str] = []

    for index, part in enumerate(parts):
        if part == "*":
            if index != len(parts) - 1:
                raise PatternError(path, "'*' is only allowed as the last segment")
            if "0" in names:
                raise PatternError(path, "duplicate parameter '0'")
            names.append("0")
            route += f"/({CATCH_ALL})"
            continue

        if part.startswith(":"):
            param = _PARAM.fullmatch(part)
            if param is None:
                raise PatternError(path, f"malformed parameter segment {part!r}")
            name = param.group("name")
            if not name:
                raise PatternError(path, f"parameter without a name in {part!r}")
            if name in names:
                raise PatternError(path, f"duplicate parameter {name!r}")
            segment = param.group("pattern")
            if segment is None:
                segment = SEGMENT
            else:
                _check_segment_regex(path, segment)
            names.append(name)
            capture = f"/({segment})"
            route += f"(?:{capture})?" if param.group("optional") else capture
            continue

        if "*" in part:
            raise PatternError(path, f"'*' must be a whole segment, got {part!r}")
        route += "/" + re.escape(part)

    ends_with_slash = route.endswith("/")
    if not strict:
        route = (route[:-1] if ends_with_slash else route) + r"(?:/(?=\Z))?"
    if full:
        route += r"\Z"
    elif not (strict and ends_with_slash):
        route += r"(?=/|\Z)"

    regex = re.compile(route, 0 if sensitive else re.IGNORECASE)
    return RoutePattern(path=path, regex=regex, param_names=tuple(names), full=full)


def _check_segment_regex(path: str, segment: str) -> None:
    """Reject custom parameter regexes that are invalid or capture."""
    try:
        compiled = re.compile(segment)
    except re.error as exc:
        raise PatternError(path, f"invalid parameter regex {segment!r}: {exc}") from exc
    if compiled.groups:
        raise PatternError(
            path,
            f"parameter regex {segment!r} must not contain capturing groups; use (?:...)",
        )
