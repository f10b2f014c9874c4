class NZIterator:
    """Single-pass, row-major cursor over the set entries of a GraphMatrix.

    Yields ``(row, column)`` tuples, columns ascending within a row, skipping
    empty rows. Iteration stops once as many entries have been emitted as the
    matrix held when the iterator was created; afterwards every ``next()``
    raises ``StopIteration``.

    Notes
    -----
    The iterator is only valid while the matrix structure is unchanged. An
    insert that adds an entry mid-iteration makes the next ``next()`` raise
    ``RuntimeError`` instead of reading shifted offsets. Guarding concurrent
    writers is the caller's job.

    """

    def __init__(self, matrix):
        self._matrix = matrix
        self._indptr = matrix._indptr
        self._indices = matrix._indices
        self._version = matrix._version
        self._total = int(self._indices.size)

        self._row = 0
        self._offset = 0  # position inside the current row's slice
        self._emitted = 0

    def __iter__(self):
        return self

    def __next__(self):
        if self._emitted >= self._total:
            raise StopIteration
        if self._matrix._version != self._version:
            raise RuntimeError("GraphMatrix changed during iteration")

        indptr = self._indptr
        start = int(indptr[self._row])
        while start + self._offset >= int(indptr[self._row + 1]):
            self._row += 1
            self._offset = 0
            start = int(indptr[self._row])

        column = int(self._indices[start + self._offset])
        row = self._row
        self._offset += 1
        self._emitted += 1
        return row, column

    def __length_hint__(self):
        return self.remaining

    @property
    def done(self):
        """True once every entry has been emitted."""
        return self._emitted >= self._total

    @property
    def remaining(self):
        return self._total - self._emitted

    def __repr__(self):
        return f"NZIterator(row={self._row}, emitted={self._emitted}/{self._total})"
