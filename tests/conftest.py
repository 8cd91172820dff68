"""Shared pytest fixtures for handlegraph-metadata tests."""

import pytest

# Names used across the tests, in insertion order.
PATH_NAMES = [
    "GRCh38#chrM",
    "CHM13#chr12[300-400]",
    "NA19239#1#chr1",
    "NA29239#1#chr1#0",
    "1[100]",
    "NA29239#2#chr1#0",
    "scaffold_17",
    "CHM13#chrM",
    "unplaced##contig",
]


class InMemoryPathGraph:
    """Minimal handle graph holding only paths and the steps on each node.

    Path handles are list indices and step handles are ``(path, rank)`` pairs.
    """

    def __init__(self):
        self.names: list[str] = []
        self.circular: list[bool] = []
        self.steps: dict[int, list[tuple[int, int]]] = {}
        self.ranks: list[int] = []

    def create_path_handle(self, name, is_circular=False):
        self.names.append(name)
        self.circular.append(is_circular)
        self.ranks.append(0)
        return len(self.names) - 1

    def append_step(self, path_handle, node_handle):
        step = (path_handle, self.ranks[path_handle])
        self.ranks[path_handle] += 1
        self.steps.setdefault(node_handle, []).append(step)
        return step

    def get_path_name(self, path_handle):
        return self.names[path_handle]

    def for_each_path_handle(self, visitor):
        for path_handle in range(len(self.names)):
            if not visitor(path_handle):
                return False
        return True

    def for_each_step_on_handle(self, node_handle, visitor):
        for step in self.steps.get(node_handle, []):
            if not visitor(step):
                return False
        return True

    def get_path_handle_of_step(self, step_handle):
        return step_handle[0]


@pytest.fixture
def empty_graph():
    return InMemoryPathGraph()


@pytest.fixture
def graph():
    """Graph with one path per entry of PATH_NAMES; every path visits node 1."""
    g = InMemoryPathGraph()
    for name in PATH_NAMES:
        path = g.create_path_handle(name)
        g.append_step(path, 1)
    return g


@pytest.fixture
def handle_of(graph):
    """Look up a path handle by its name."""

    def lookup(name):
        return graph.names.index(name)

    return lookup
