import operator

import numpy as np

from ._errors import IndexOutOfRangeError, InvalidDimensionError, InvalidStructureError

# Storage dtypes. Row offsets are twice the width of column ids so a matrix
# can hold more than 2**32 entries.
INDPTR_DTYPE = np.uint64
INDICES_DTYPE = np.uint32
MAX_INDEX = int(np.iinfo(INDICES_DTYPE).max)


def locate(sequence, target, lo, hi):
    """Binary-search the ascending range ``sequence[lo:hi]`` for ``target``.

    Parameters
    ----------
    sequence : array-like
        Values sorted ascending at least within ``[lo, hi)``.
    target : int
        Value to find; must be representable in ``sequence``'s dtype.
    lo, hi : int
        Half-open search range.

    Returns
    -------
    tuple[int, bool]
        ``(position, found)``. ``position`` is the leftmost insertion point
        for ``target`` inside ``[lo, hi]``.

    Notes
    -----
    - Empty ``sequence`` -> ``(0, False)``.
    - ``lo == hi`` -> ``(lo, False)``; this is what gives empty rows their
      insertion point.
    - ``lo > hi``, or a bound outside ``[0, len(sequence)]`` ->
      ``(-1, False)``, a range error distinct from a legitimate miss.

    """
    n = len(sequence)
    if n == 0:
        return 0, False
    lo = int(lo)
    hi = int(hi)
    if lo == hi:
        return lo, False
    if lo > hi or lo < 0 or hi > n:
        return -1, False
    pos = lo + int(np.searchsorted(sequence[lo:hi], target, side="left"))
    # a hit at ``hi`` belongs to the next range, not this one
    found = pos < hi and sequence[pos] == target
    return pos, bool(found)


def _normalize_dim(dim):
    """Return ``dim`` as a non-negative int or raise InvalidDimensionError."""
    if isinstance(dim, bool):
        raise InvalidDimensionError("dimension must be an integer, got bool")
    try:
        n = operator.index(dim)
    except TypeError:
        raise InvalidDimensionError(
            f"dimension must be an integer, got {type(dim).__name__}"
        ) from None
    if n < 0:
        raise InvalidDimensionError(f"dimensions must be non-negative (got {n})")
    if n > MAX_INDEX + 1:
        raise InvalidDimensionError(f"dimension {n} exceeds the uint32 column range")
    return n


def _as_index(value):
    """Return ``value`` as an int vertex id or raise TypeError.

    Accepts Python and NumPy integers. Floats, bools and anything else
    without ``__index__`` are rejected instead of being truncated.
    """
    if isinstance(value, (bool, np.bool_)):
        raise TypeError("vertex ids must be integers, got bool")
    try:
        return operator.index(value)
    except TypeError:
        raise TypeError(
            f"vertex ids must be integers, got {type(value).__name__}"
        ) from None


def _as_index_array(values, name):
    """Copy ``values`` into a fresh uint32 array of vertex ids."""
    arr = np.asarray(values)
    if arr.ndim != 1:
        raise ValueError(f"{name} must be one-dimensional, got shape {arr.shape}")
    if arr.size == 0:
        return np.empty(0, dtype=INDICES_DTYPE)
    if arr.dtype.kind not in "iu":
        raise TypeError(f"{name} must contain integers, got dtype {arr.dtype}")
    if arr.dtype.kind == "i" and int(arr.min()) < 0:
        raise IndexOutOfRangeError(f"{name} contains a negative vertex id ({int(arr.min())})")
    if int(arr.max()) > MAX_INDEX:
        raise IndexOutOfRangeError(f"{name} contains a vertex id above {MAX_INDEX}")
    return arr.astype(INDICES_DTYPE)


def _validate_csr(indptr, indices):
    """Raise InvalidStructureError unless the arrays form a valid square CSR layout."""
    if indptr.ndim != 1 or indices.ndim != 1:
        raise InvalidStructureError("row offsets and column ids must be one-dimensional")
    if indptr.size == 0:
        raise InvalidStructureError("row offsets must have length dim + 1 (got 0)")
    dim = indptr.size - 1
    nnz = indices.size
    if int(indptr[0]) != 0:
        raise InvalidStructureError(f"row offsets must start at 0 (got {int(indptr[0])})")
    if int(indptr[-1]) != nnz:
        raise InvalidStructureError(
            f"last row offset {int(indptr[-1])} does not match {nnz} column ids"
        )
    if dim and np.any(indptr[1:] < indptr[:-1]):
        raise InvalidStructureError("row offsets must be non-decreasing")
    if nnz == 0:
        return
    if int(indices.max()) >= dim:
        raise InvalidStructureError(f"column id {int(indices.max())} out of range for dimension {dim}")

    # strictly increasing inside every row; row starts are exempt
    ascending = np.empty(nnz, dtype=bool)
    ascending[0] = True
    np.greater(indices[1:], indices[:-1], out=ascending[1:])
    starts = indptr[1:-1].astype(np.int64)
    starts = starts[(starts > 0) & (starts < nnz)]
    ascending[starts] = True
    if not ascending.all():
        bad = int(np.flatnonzero(~ascending)[0])
        raise InvalidStructureError(
            f"column ids must be strictly increasing within a row (violation at offset {bad})"
        )
