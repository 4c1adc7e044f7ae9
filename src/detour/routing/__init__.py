"""Routing — pattern compilation and the ordered route table.

Patterns are compiled once, when the table is built; matching is pure
and safe to repeat.
"""

from detour.routing.pattern import PatternMatch, RoutePattern, compile_pattern
from detour.routing.route import (
    DEFAULT_OUTLET,
    NamedLoader,
    Route,
    RouteEntry,
    SingleLoader,
)
from detour.routing.table import RouteTable, build_table

__all__ = [
    "DEFAULT_OUTLET",
    "NamedLoader",
    "PatternMatch",
    "Route",
    "RouteEntry",
    "RoutePattern",
    "RouteTable",
    "SingleLoader",
    "build_table",
    "compile_pattern",
]
