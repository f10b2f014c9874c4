import numpy as np

from ..algorithms.traversal import Traversal
from ._BulkOps import BulkOps
from ._errors import IndexOutOfRangeError, InvalidStructureError
from ._helpers import (
    INDICES_DTYPE,
    INDPTR_DTYPE,
    MAX_INDEX,
    _as_index,
    _normalize_dim,
    _validate_csr,
    locate,
)
from ._Iterator import NZIterator


class GraphMatrix(BulkOps, Traversal):
    """Square boolean adjacency matrix of a directed graph in compressed-row form.

    An entry at ``(r, c)`` means the edge ``r -> c`` exists. Undirected graphs
    must set both ``(r, c)`` and ``(c, r)``.

    Parameters
    --
    dim : int
        Number of vertices (rows == columns). Must be non-negative.

    Notes
    -
    - Storage is two private arrays: ``uint64`` row offsets of length
      ``dim + 1`` and ``uint32`` column ids, ascending and unique within
      each row.
    - :meth:`insert` is the slow path: every new entry copies the column-id
      array and bumps all row offsets after ``r``, i.e. O(cardinality + dim).
      Build large matrices with :meth:`from_edges` / :meth:`from_sorted_ij`.
    - No internal locking. Many readers or one writer, enforced by the caller.

    See Also

    from_edges, from_sorted_ij, from_ij, from_arrays, nz_iter

    """

    # Construction

    def __init__(self, dim=0):
        """Create an empty ``dim x dim`` matrix.

        Raises
        --
        InvalidDimensionError
            If ``dim`` is negative or not an integer.

        """
        n = _normalize_dim(dim)
        self._indptr = np.zeros(n + 1, dtype=INDPTR_DTYPE)
        self._indices = np.empty(0, dtype=INDICES_DTYPE)
        # bumped on every structural change; NZIterator compares against it
        self._version = 0

    @classmethod
    def zeros(cls, dim):
        """Empty ``dim x dim`` matrix (same as ``GraphMatrix(dim)``)."""
        return cls(dim)

    @classmethod
    def _wrap(cls, indptr, indices):
        """INTERNAL: adopt already-typed arrays without copying or checking."""
        obj = cls.__new__(cls)
        obj._indptr = indptr
        obj._indices = indices
        obj._version = 0
        return obj

    @classmethod
    def from_arrays(cls, row_offset, column_ids, check=True):
        """Build from precomputed compressed-row arrays.

        Parameters
        --
        row_offset : array-like of int
            Length ``dim + 1``; ``row_offset[r]:row_offset[r+1]`` is row ``r``.
        column_ids : array-like of int
            Column ids, ascending and unique within each row.
        check : bool
            Validate the layout before adopting it.

        Returns
        ---
        GraphMatrix
            Owns copies of both arrays.

        Raises
        --
        InvalidStructureError
            If ``check`` is true and the arrays are not a valid layout.

        """
        indptr = np.asarray(row_offset)
        indices = np.asarray(column_ids)
        for name, arr in (("row offsets", indptr), ("column ids", indices)):
            if arr.size and arr.dtype.kind not in "iu":
                raise TypeError(f"{name} must contain integers, got dtype {arr.dtype}")
            if arr.size and arr.dtype.kind == "i" and int(arr.min()) < 0:
                raise InvalidStructureError(f"{name} must be non-negative")
        if indices.size and int(indices.max()) > MAX_INDEX:
            raise InvalidStructureError(f"column ids must fit in uint32 (max {MAX_INDEX})")

        indptr = indptr.astype(INDPTR_DTYPE)
        indices = indices.astype(INDICES_DTYPE)
        if check:
            _validate_csr(indptr, indices)
        return cls._wrap(indptr, indices)

    def copy(self):
        """Deep copy of the matrix."""
        return type(self)._wrap(self._indptr.copy(), self._indices.copy())

    def to_arrays(self):
        """Copies of ``(row_offset, column_ids)``.

        Returns
        ---
        tuple[numpy.ndarray, numpy.ndarray]
            ``uint64`` row offsets and ``uint32`` column ids.

        """
        return self._indptr.copy(), self._indices.copy()

    # Size

    def dimension(self):
        """Number of rows (== number of columns == number of vertices)."""
        return self._indptr.size - 1

    def cardinality(self):
        """Number of set entries (edges)."""
        return self._indices.size

    @property
    def dim(self):
        return self.dimension()

    @property
    def nnz(self):
        return self.cardinality()

    @property
    def shape(self):
        """``(dim, dim)``."""
        n = self.dimension()
        return n, n

    def number_of_vertices(self):
        return self.dimension()

    def number_of_edges(self):
        return self.cardinality()

    def __len__(self):
        return self.cardinality()

    # Queries

    def _in_range(self, i):
        return 0 <= i < self.dimension()

    def _is_vertex(self, i):
        try:
            return self._in_range(_as_index(i))
        except TypeError:
            return False

    def _row_bounds(self, r):
        return int(self._indptr[r]), int(self._indptr[r + 1])

    def is_set(self, r, c):
        """True if the entry ``(r, c)`` (edge ``r -> c``) is set.

        Never raises: a row or column outside ``[0, dim)``, or one that is
        not an integer, is simply not set.
        """
        if not (self._is_vertex(c) and self._is_vertex(r)):
            return False
        r = _as_index(r)
        c = _as_index(c)
        lo, hi = self._row_bounds(r)
        if lo >= hi:
            return False
        _, found = locate(self._indices, c, lo, hi)
        return found

    def __contains__(self, item):
        try:
            r, c = item
        except (TypeError, ValueError):
            return False
        return self.is_set(r, c)

    def row(self, r):
        """Set columns of row ``r``, ascending and unique.

        Returns
        ---
        numpy.ndarray
            Read-only ``uint32`` view into the matrix storage. It goes stale
            after the next :meth:`insert`.

        Raises
        --
        TypeError
            If ``r`` is not an integer.
        IndexOutOfRangeError
            If ``r`` is outside ``[0, dim)``.

        """
        r = _as_index(r)
        if not self._in_range(r):
            raise IndexOutOfRangeError(
                f"row {r} out of bounds (dimension {self.dimension()})"
            )
        lo, hi = self._row_bounds(r)
        view = self._indices[lo:hi]
        view.flags.writeable = False
        return view

    # Mutation

    def insert(self, r, c):
        """Set entry ``(r, c)``. Idempotent.

        Parameters
        --
        r, c : int
            Row (source vertex) and column (destination vertex).

        Returns
        ---
        bool
            True if a new entry was written, False if it was already set.

        Raises
        --
        TypeError
            If ``r`` or ``c`` is not an integer (floats are not truncated).
        IndexOutOfRangeError
            If ``r`` or ``c`` is outside ``[0, dim)``.

        Notes
        -
        O(log row) search, O(cardinality) copy to open the slot, and
        O(dim - r) row-offset increments. Meant for sparse edits, not bulk
        ingestion.

        """
        r = _as_index(r)
        c = _as_index(c)
        if not (self._in_range(r) and self._in_range(c)):
            raise IndexOutOfRangeError(
                f"index ({r}, {c}) out of range for dimension {self.dimension()}"
            )
        lo, hi = self._row_bounds(r)
        pos, found = locate(self._indices, c, lo, hi)
        if found:
            return False
        if pos < 0:
            raise InvalidStructureError(f"row offsets for row {r} are inconsistent ({lo}, {hi})")

        self._indices = np.insert(self._indices, pos, c)
        self._indptr[r + 1 :] += 1
        self._version += 1
        return True

    # Iteration

    def nz_iter(self):
        """Row-major iterator over every set ``(row, column)``."""
        return NZIterator(self)

    def __iter__(self):
        return self.nz_iter()

    # Dunder

    def __eq__(self, other):
        if not isinstance(other, GraphMatrix):
            return NotImplemented
        return np.array_equal(self._indptr, other._indptr) and np.array_equal(
            self._indices, other._indices
        )

    __hash__ = None

    def __repr__(self):
        return f"GraphMatrix {self._indptr}, {self._indices}, size {self.dimension()}"

    __str__ = __repr__
