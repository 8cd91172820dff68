"""Capabilities the path metadata layer consumes from a handle graph.

Handles are opaque to this package. A graph only has to provide
``get_path_name`` for the per-path accessors; the filtered iterations also
need path and step enumeration. Enumerators follow the usual handle graph
convention: the visitor returns False to stop, and the enumerator returns
False when it was stopped.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Protocol, runtime_checkable

PathHandle = Any
StepHandle = Any
NodeHandle = Any

Visitor = Callable[[Any], Any]


@runtime_checkable
class PathNameProvider(Protocol):
    def get_path_name(self, path_handle: PathHandle) -> str: ...


@runtime_checkable
class PathHandleGraph(PathNameProvider, Protocol):
    def for_each_path_handle(self, visitor: Callable[[PathHandle], bool]) -> bool: ...

    def for_each_step_on_handle(
        self, node_handle: NodeHandle, visitor: Callable[[StepHandle], bool]
    ) -> bool: ...

    def get_path_handle_of_step(self, step_handle: StepHandle) -> PathHandle: ...


@runtime_checkable
class MutablePathHandleGraph(PathHandleGraph, Protocol):
    def create_path_handle(self, name: str, is_circular: bool = False) -> PathHandle: ...


def keep_going(visitor: Visitor) -> Callable[[Any], bool]:
    """Wrap ``visitor`` so only an explicit False stops iteration.

    Visitors that return nothing are treated as always continuing.
    """

    def wrapped(item: Any) -> bool:
        return visitor(item) is not False

    return wrapped


__all__ = [
    "MutablePathHandleGraph",
    "NodeHandle",
    "PathHandle",
    "PathHandleGraph",
    "PathNameProvider",
    "StepHandle",
    "Visitor",
    "keep_going",
]
