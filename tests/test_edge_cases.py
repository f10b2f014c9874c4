import pathlib
import sys

ROOT = pathlib.Path(__file__).resolve().parents[1]  # project root
sys.path.insert(0, str(ROOT))

import pytest  # noqa: E402

from graphmatrix.core._BulkOps import sort_ij  # noqa: E402
from graphmatrix.core._errors import (  # noqa: E402
    GraphMatrixError,
    IndexOutOfRangeError,
    InvalidDimensionError,
    LengthMismatchError,
)
from graphmatrix.core.matrix import GraphMatrix  # noqa: E402


class TestEdgeCases:
    """Documented scenarios and boundary behavior."""

    def test_scenario_a(self):
        G = GraphMatrix(6)
        G.insert(3, 3)
        G.insert(1, 2)
        assert G.is_set(1, 2)
        assert not G.is_set(2, 2)

    def test_scenario_b(self):
        G = GraphMatrix(4)
        for r, c in [(0, 1), (0, 2), (1, 2), (2, 3)]:
            G.insert(r, c)
        assert G.row(0).tolist() == [1, 2]
        assert G.row(1).tolist() == [2]
        assert G.row(2).tolist() == [3]
        assert G.row(3).tolist() == []

    def test_scenario_c(self):
        G = GraphMatrix.from_sorted_ij([0, 0, 1, 2], [1, 2, 2, 3])
        assert [G.is_set(0, 1), G.is_set(0, 2), G.is_set(1, 2), G.is_set(2, 1)] == [
            True,
            True,
            True,
            False,
        ]

    def test_scenario_d(self):
        s, d = sort_ij([1, 2, 3, 0, 0, 2], [2, 3, 2, 1, 2, 3])
        assert s.size == d.size == 5
        assert GraphMatrix.from_sorted_ij(s, d).cardinality() == 5

    def test_self_loops(self):
        G = GraphMatrix(2)
        G.insert(1, 1)
        assert G.is_set(1, 1)
        assert list(G) == [(1, 1)]

    def test_direction_is_not_symmetrized(self):
        G = GraphMatrix(3)
        G.insert(0, 2)
        assert not G.is_set(2, 0)

    def test_insert_into_last_row_touches_only_final_offset(self):
        G = GraphMatrix(3)
        G.insert(2, 0)
        rows, cols = G.to_arrays()
        assert rows.tolist() == [0, 0, 0, 1]
        assert cols.tolist() == [0]

    def test_every_error_is_a_graphmatrix_error(self):
        for call in (
            lambda: GraphMatrix(-1),
            lambda: sort_ij([0], [0, 1]),
            lambda: GraphMatrix(2).insert(2, 0),
            lambda: GraphMatrix(2).row(5),
            lambda: GraphMatrix.from_sorted_ij([0, 1], [1]),
        ):
            with pytest.raises(GraphMatrixError):
                call()

    def test_error_types(self):
        assert issubclass(InvalidDimensionError, ValueError)
        assert issubclass(LengthMismatchError, ValueError)
        assert issubclass(IndexOutOfRangeError, IndexError)

    def test_numpy_scalar_indices(self):
        import numpy as np

        G = GraphMatrix(4)
        G.insert(np.uint32(1), np.int64(3))
        assert G.is_set(np.int32(1), np.uint32(3))
        assert G.row(np.int64(1)).tolist() == [3]
