"""Shared fixtures for the nodetreelib test suite."""

import sys
from pathlib import Path
from types import SimpleNamespace

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from nodetreelib import Node


def create_example_tree() -> SimpleNamespace:
    """Create the five node example tree.

    Structure:
    0 "zero"
    ├── 1 "one"
    └── 2 "two"
        ├── 3 "three"
        └── 4 "four"
    """
    tree = SimpleNamespace(
        node0=Node(0, "zero"),
        node1=Node(1, "one"),
        node2=Node(2, "two"),
        node3=Node(3, "three"),
        node4=Node(4, "four"),
    )
    tree.node0.push(tree.node1, tree.node2)
    tree.node2.push(tree.node3, tree.node4)
    return tree


def create_uneven_tree() -> SimpleNamespace:
    """Create a tree where pre-order and breadth-first orders differ.

    Structure:
    a
    ├── b
    │   └── e
    └── c
        ├── f
        └── g
    """
    nodes = {name: Node(name, name.upper()) for name in "abcefg"}
    nodes["a"].push(nodes["b"], nodes["c"])
    nodes["b"].add(nodes["e"])
    nodes["c"].push(nodes["f"], nodes["g"])
    return SimpleNamespace(**nodes)


@pytest.fixture
def example_tree():
    return create_example_tree()


@pytest.fixture
def uneven_tree():
    return create_uneven_tree()


def pytest_configure(config):
    config.addinivalue_line("markers", "slow: large trees, excluded by run_tests.py by default")
