import numpy as np
import pytest

from graphmatrix.core._helpers import locate


class TestLocate:
    """Binary search over a sub-range, including its sentinel contracts."""

    def test_empty_sequence(self):
        assert locate(np.array([], dtype=np.uint32), 5, 0, 0) == (0, False)
        # bounds are irrelevant when there is nothing to search
        assert locate([], 5, 3, 7) == (0, False)

    def test_empty_range_returns_lo(self):
        v = np.array([1, 3, 5], dtype=np.uint32)
        assert locate(v, 3, 2, 2) == (2, False)
        assert locate(v, 3, 0, 0) == (0, False)

    @pytest.mark.parametrize("lo,hi", [(2, 1), (0, 4), (4, 5), (-1, 2)])
    def test_bad_range_returns_sentinel(self, lo, hi):
        v = np.array([1, 3, 5], dtype=np.uint32)
        assert locate(v, 3, lo, hi) == (-1, False)

    def test_found(self):
        v = np.array([1, 3, 5, 7], dtype=np.uint32)
        assert locate(v, 5, 0, 4) == (2, True)
        assert locate(v, 1, 0, 4) == (0, True)
        assert locate(v, 7, 0, 4) == (3, True)

    def test_insertion_point_when_missing(self):
        v = np.array([1, 3, 5, 7], dtype=np.uint32)
        assert locate(v, 0, 0, 4) == (0, False)
        assert locate(v, 4, 0, 4) == (2, False)
        assert locate(v, 9, 0, 4) == (4, False)

    def test_search_is_confined_to_range(self):
        # two rows: [2, 4] and [1, 6]
        v = np.array([2, 4, 1, 6], dtype=np.uint32)
        assert locate(v, 6, 0, 2) == (2, False)
        assert locate(v, 1, 2, 4) == (2, True)
        assert locate(v, 5, 2, 4) == (3, False)

    def test_match_just_past_hi_is_not_found(self):
        v = np.array([1, 2], dtype=np.uint32)
        assert locate(v, 2, 0, 1) == (1, False)

    def test_plain_list(self):
        assert locate([10, 20, 30], 20, 0, 3) == (1, True)
