"""Exceptions raised by graphmatrix.

Every error also derives from the builtin a caller would naturally catch
(``ValueError`` / ``IndexError``), so ``except ValueError`` keeps working.
"""

from __future__ import annotations


class GraphMatrixError(Exception):
    """Base exception for all graphmatrix errors."""


class InvalidDimensionError(GraphMatrixError, ValueError):
    """Matrix dimension is negative, non-integral, or not square."""


class LengthMismatchError(GraphMatrixError, ValueError):
    """Paired source/destination sequences differ in length."""

    def __init__(self, n_sources: int, n_destinations: int):
        self.n_sources = n_sources
        self.n_destinations = n_destinations
        super().__init__(
            f"graph inputs must be of the same length (got {n_sources}, {n_destinations})"
        )


class IndexOutOfRangeError(GraphMatrixError, IndexError):
    """Row or column index outside ``[0, dim)``."""


class InvalidStructureError(GraphMatrixError, ValueError):
    """Row-offset / column-id arrays violate the compressed-row invariants."""
