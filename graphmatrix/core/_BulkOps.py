import logging

import numpy as np

from ._errors import IndexOutOfRangeError, LengthMismatchError
from ._helpers import (
    INDICES_DTYPE,
    INDPTR_DTYPE,
    _as_index_array,
    _normalize_dim,
    _validate_csr,
)

logger = logging.getLogger(__name__)

_LOW_MASK = np.uint64(0xFFFFFFFF)
_SHIFT = np.uint64(32)


def _coerce_pair(sources, destinations):
    """Validate paired edge sequences and return them as uint32 arrays."""
    src = np.asarray(sources)
    dst = np.asarray(destinations)
    if src.shape[:1] != dst.shape[:1]:
        raise LengthMismatchError(len(src), len(dst))
    return _as_index_array(src, "sources"), _as_index_array(dst, "destinations")


def _infer_dim(src, dst, dim):
    """Declared ``dim`` (checked against the ids) or ``1 + max(id)``."""
    observed = 0 if src.size == 0 else max(int(src.max()), int(dst.max())) + 1
    if dim is None:
        return observed
    n = _normalize_dim(dim)
    if observed > n:
        raise IndexOutOfRangeError(
            f"vertex id {observed - 1} out of range for dimension {n}"
        )
    return n


def _row_offsets(rows, dim):
    """Prefix sum of the per-row histogram: ``indptr[r]`` is where row ``r`` starts."""
    counts = np.bincount(rows, minlength=dim)
    indptr = np.zeros(dim + 1, dtype=INDPTR_DTYPE)
    if dim:
        indptr[1:] = np.cumsum(counts)
    return indptr


def _compress(rows, cols, dim):
    """Bucket-count ``(rows, cols)`` into compressed-row arrays.

    Rows may arrive in any order. Each column id is scattered into the next
    free slot of its row, so within a row the input order is kept: the result
    only satisfies the ascending-row invariant when every row's columns arrive
    ascending.

    Linear in ``len(rows) + dim``. The scatter walks a working copy of the
    row start offsets, never sorting.
    """
    indptr = _row_offsets(rows, dim)
    next_free = indptr[:-1].tolist()
    out = [0] * cols.size
    for r, c in zip(rows.tolist(), cols.tolist()):
        slot = next_free[r]
        out[slot] = c
        next_free[r] = slot + 1
    return indptr, np.array(out, dtype=INDICES_DTYPE)


def uniq_sorted(keys):
    """Drop adjacent duplicates from a sorted 1-D array, keeping first occurrences.

    Returns a new array; ``keys`` is left untouched.
    """
    keys = np.asarray(keys)
    if keys.size < 2:
        return keys.copy()
    keep = np.empty(keys.size, dtype=bool)
    keep[0] = True
    np.not_equal(keys[1:], keys[:-1], out=keep[1:])
    return keys[keep]


def sort_ij(sources, destinations):
    """Canonicalize an edge list: sort by source, then destination, and dedupe.

    Each ``(s, d)`` pair is packed into one uint64 key ``s << 32 | d`` so a
    single ascending sort yields row-major, column-ascending order.

    Parameters
    ----------
    sources, destinations : array-like of int
        Paired edge endpoints (same length).

    Returns
    -------
    tuple[numpy.ndarray, numpy.ndarray]
        New uint32 ``(sources, destinations)`` arrays holding the unique pairs.

    Raises
    ------
    LengthMismatchError
        If the two sequences differ in length.

    """
    src, dst = _coerce_pair(sources, destinations)
    keys = (src.astype(np.uint64) << _SHIFT) | dst.astype(np.uint64)
    keys.sort()
    keys = uniq_sorted(keys)
    logger.debug("sort_ij: %d pairs -> %d unique", src.size, keys.size)
    return (
        (keys >> _SHIFT).astype(INDICES_DTYPE),
        (keys & _LOW_MASK).astype(INDICES_DTYPE),
    )


class BulkOps:
    # Bulk construction

    @classmethod
    def from_sorted_ij(cls, sources, destinations, dim=None, check=False):
        """Build from pairs already in canonical (sorted, deduplicated) order.

        Parameters
        ----------
        sources, destinations : array-like of int
            Paired edge endpoints, sorted by source then destination.
        dim : int, optional
            Declared dimension. Inferred as ``1 + max(id)`` when omitted.
        check : bool
            Validate the compressed-row invariants of the result.

        Returns
        -------
        GraphMatrix

        Raises
        ------
        LengthMismatchError
            If the sequences differ in length.
        IndexOutOfRangeError
            If an id does not fit the declared ``dim``.
        InvalidStructureError
            With ``check=True``, if the input was not canonical.

        Notes
        -----
        Duplicate pairs are not removed; they inflate ``cardinality()``.
        Run :func:`sort_ij` first for arbitrary input.

        """
        src, dst = _coerce_pair(sources, destinations)
        n = _infer_dim(src, dst, dim)
        indptr = _row_offsets(src, n)
        if check:
            _validate_csr(indptr, dst)
        logger.debug("from_sorted_ij: dim=%d nnz=%d", n, dst.size)
        return cls._wrap(indptr, dst)

    @classmethod
    def from_ij(cls, sources, destinations, dim=None, check=False):
        """Build from pairs in arbitrary row order by bucket counting.

        Runs in O(len(sources) + dim) with no sort. Row start offsets come
        from a histogram of the sources; each column is then written to the
        next free slot of its row.

        Columns keep their input order inside each row, so each row's
        columns must arrive ascending and unique. Same parameters and errors
        as :meth:`from_sorted_ij`.
        """
        src, dst = _coerce_pair(sources, destinations)
        n = _infer_dim(src, dst, dim)
        indptr, indices = _compress(src, dst, n)
        if check:
            _validate_csr(indptr, indices)
        logger.debug("from_ij: dim=%d nnz=%d", n, indices.size)
        return cls._wrap(indptr, indices)

    @classmethod
    def from_edges(cls, sources, destinations, dim=None):
        """Canonicalize an arbitrary edge list with :func:`sort_ij`, then build.

        Duplicate and unordered pairs are fine here.
        """
        src, dst = sort_ij(sources, destinations)
        return cls.from_sorted_ij(src, dst, dim=dim)
