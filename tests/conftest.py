"""Shared fixtures and helpers for graphmatrix tests."""

import pathlib
import sys

import pytest

ROOT = pathlib.Path(__file__).resolve().parents[1]  # project root
sys.path.insert(0, str(ROOT))

from graphmatrix.core.matrix import GraphMatrix  # noqa: E402

# ======================================================================
# FIXTURES
# ======================================================================


@pytest.fixture
def small_matrix():
    """4x4 matrix built edge by edge: 0->1, 0->2, 1->2, 2->3."""
    G = GraphMatrix(4)
    G.insert(0, 1)
    G.insert(0, 2)
    G.insert(1, 2)
    G.insert(2, 3)
    return G


@pytest.fixture
def sparse_edges():
    """Unsorted edge list with one duplicate and a gap of empty rows (6..9)."""
    sources = [0, 0, 1, 1, 1, 2, 3, 4, 4, 5, 10, 1]
    targets = [1, 2, 0, 2, 3, 4, 4, 0, 5, 1, 8, 3]
    return sources, targets


@pytest.fixture
def sparse_matrix(sparse_edges):
    return GraphMatrix.from_edges(*sparse_edges)


# ======================================================================
# HELPERS
# ======================================================================


def edge_set(G):
    """All set entries of ``G`` as a Python set of ``(row, col)`` tuples."""
    return {(r, int(c)) for r in range(G.dimension()) for c in G.row(r)}


def assert_matrices_equal(G1, G2):
    """Assert two matrices have the same dimension and entries."""
    assert G1.dimension() == G2.dimension(), "Dimensions differ"
    assert G1.cardinality() == G2.cardinality(), "Cardinalities differ"
    assert edge_set(G1) == edge_set(G2), "Entry sets differ"


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
