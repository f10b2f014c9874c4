import numpy as np


# Traversal (neighbors)
class Traversal:
    def _has_vertex(self, vertex):
        # non-integer ids are unknown vertices, not errors
        return self._is_vertex(vertex)

    def successors(self, vertex):
        """Out-neighbors of a vertex (the set columns of its row).

        Parameters
        --
        vertex : int

        Returns
        ---
        list[int]
            Ascending; empty for an unknown vertex.

        """
        if not self._has_vertex(vertex):
            return []
        return self.row(vertex).tolist()

    def predecessors(self, vertex):
        """In-neighbors of a vertex (rows whose slice contains it).

        Scans the whole column-id array, O(cardinality).

        Parameters
        --
        vertex : int

        Returns
        ---
        list[int]
            Ascending; empty for an unknown vertex.

        """
        if not self._has_vertex(vertex):
            return []
        positions = np.flatnonzero(self._indices == vertex).astype(self._indptr.dtype)
        rows = np.searchsorted(self._indptr, positions, side="right") - 1
        return rows.tolist()

    def neighbors(self, vertex):
        """Successors and predecessors of a vertex, ascending and unique."""
        return sorted(set(self.successors(vertex)) | set(self.predecessors(vertex)))

    def out_degree(self, vertex):
        if not self._has_vertex(vertex):
            return 0
        return int(self._indptr[vertex + 1] - self._indptr[vertex])

    def in_degree(self, vertex):
        if not self._has_vertex(vertex):
            return 0
        return int(np.count_nonzero(self._indices == vertex))

    def has_edge(self, source, target):
        """True if the directed edge ``source -> target`` is set."""
        return self.is_set(source, target)
