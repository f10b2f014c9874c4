from __future__ import annotations

import logging
import warnings
from typing import TYPE_CHECKING

import numpy as np
import scipy.sparse as sp

from ..core._errors import InvalidDimensionError

if TYPE_CHECKING:
    from ..core.matrix import GraphMatrix

logger = logging.getLogger(__name__)


def to_scipy(graph: GraphMatrix, fmt: str = "csr", *, array: bool = True):
    """Export a GraphMatrix as a boolean SciPy sparse matrix.

    Parameters
    ----------
    graph : GraphMatrix
        Source matrix.
    fmt : str
        Target sparse format (``"csr"``, ``"csc"``, ``"coo"``, ``"lil"``, ...).
    array : bool
        Return a sparse *array* (``csr_array``) when True, else the legacy
        ``csr_matrix`` class.

    Returns
    -------
    scipy.sparse.sparray | scipy.sparse.spmatrix
        ``dim x dim`` with ``True`` at every set entry.

    """
    row_offset, column_ids = graph.to_arrays()
    n = graph.dimension()
    data = np.ones(column_ids.size, dtype=bool)
    cls = sp.csr_array if array else sp.csr_matrix
    A = cls(
        (data, column_ids.astype(np.int64), row_offset.astype(np.int64)),
        shape=(n, n),
    )
    if fmt != "csr":
        A = A.asformat(fmt)
    return A


def from_scipy(A) -> GraphMatrix:
    """Build a GraphMatrix from a square SciPy sparse matrix or array.

    Every stored nonzero becomes an edge; values are otherwise ignored.
    Duplicate coordinates are summed first, and explicitly stored zeros are
    dropped with a warning.

    Raises
    ------
    TypeError
        If ``A`` is not a SciPy sparse object.
    InvalidDimensionError
        If ``A`` is not square.

    """
    from ..core.matrix import GraphMatrix

    if not sp.issparse(A):
        raise TypeError(f"expected a scipy.sparse matrix or array, got {type(A).__name__}")
    n_rows, n_cols = A.shape
    if n_rows != n_cols:
        raise InvalidDimensionError(f"adjacency matrix must be square, got {A.shape}")

    csr = A.tocsr(copy=True)
    csr.sum_duplicates()
    explicit_zeros = csr.nnz - int(np.count_nonzero(csr.data))
    if explicit_zeros:
        warnings.warn(
            f"from_scipy: ignoring {explicit_zeros} explicitly stored zero(s)",
            stacklevel=2,
        )
        csr.eliminate_zeros()
    csr.sort_indices()
    logger.debug("from_scipy: dim=%d nnz=%d", n_rows, csr.nnz)
    return GraphMatrix.from_arrays(csr.indptr, csr.indices, check=True)
