from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

import narwhals as nw
import numpy as np
import polars as pl
from narwhals.typing import IntoDataFrame

if TYPE_CHECKING:
    from ..core.matrix import GraphMatrix

logger = logging.getLogger(__name__)


def to_dataframe(
    graph: GraphMatrix,
    *,
    source: str = "source",
    target: str = "target",
) -> pl.DataFrame:
    """Export the edge list of a GraphMatrix to a Polars DataFrame.

    Args:
        graph: GraphMatrix to export
        source: Name of the source-vertex column
        target: Name of the target-vertex column

    Returns:
        DataFrame with two ``UInt32`` columns, one row per set entry, in
        row-major, column-ascending order.

    """
    row_offset, column_ids = graph.to_arrays()
    counts = np.diff(row_offset.astype(np.int64))
    sources = np.repeat(np.arange(graph.dimension(), dtype=np.uint32), counts)
    return pl.DataFrame(
        {
            source: pl.Series(source, sources, dtype=pl.UInt32),
            target: pl.Series(target, column_ids, dtype=pl.UInt32),
        }
    )


def from_dataframe(
    df: IntoDataFrame,
    *,
    source: str = "source",
    target: str = "target",
    dim: Optional[int] = None,
) -> GraphMatrix:
    """Build a GraphMatrix from an edge-list DataFrame.

    Any eager frame Narwhals understands works (Polars, pandas, PyArrow).
    Rows may be unordered and repeated; they are canonicalized first.

    Args:
        df: Edge list with integer vertex ids
        source: Name of the source-vertex column
        target: Name of the target-vertex column
        dim: Declared dimension; inferred from the ids when None

    Returns:
        GraphMatrix

    Raises:
        KeyError: If a required column is missing.

    """
    from ..core.matrix import GraphMatrix

    frame = nw.from_native(df, eager_only=True)
    missing = [c for c in (source, target) if c not in frame.columns]
    if missing:
        raise KeyError(f"edge list is missing column(s): {missing}")

    sources = frame[source].to_numpy()
    targets = frame[target].to_numpy()
    logger.debug("from_dataframe: %d rows", len(sources))
    return GraphMatrix.from_edges(sources, targets, dim=dim)
