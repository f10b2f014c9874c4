class TestTraversal:
    """Neighbor queries over the compressed rows."""

    def test_successors(self, small_matrix):
        assert small_matrix.successors(0) == [1, 2]
        assert small_matrix.successors(3) == []

    def test_predecessors(self, small_matrix):
        assert small_matrix.predecessors(2) == [0, 1]
        assert small_matrix.predecessors(0) == []
        assert small_matrix.predecessors(3) == [2]

    def test_predecessors_across_empty_rows(self, sparse_matrix):
        # 10 -> 8 sits after the empty rows 6..9
        assert sparse_matrix.predecessors(8) == [10]
        assert sparse_matrix.predecessors(4) == [2, 3]
        assert sparse_matrix.predecessors(0) == [1, 4]

    def test_neighbors(self, small_matrix):
        assert small_matrix.neighbors(2) == [0, 1, 3]

    def test_degrees(self, small_matrix):
        assert small_matrix.out_degree(0) == 2
        assert small_matrix.in_degree(2) == 2
        assert small_matrix.in_degree(0) == 0
        total_out = sum(small_matrix.out_degree(v) for v in range(4))
        total_in = sum(small_matrix.in_degree(v) for v in range(4))
        assert total_out == total_in == small_matrix.cardinality()

    def test_unknown_vertices_are_lenient(self, small_matrix):
        assert small_matrix.successors(99) == []
        assert small_matrix.predecessors(-1) == []
        assert small_matrix.out_degree(4) == 0
        assert small_matrix.in_degree(4) == 0
        assert small_matrix.neighbors(12) == []

    def test_non_integer_vertices_are_unknown(self, small_matrix):
        assert small_matrix.successors("a") == []
        assert small_matrix.predecessors("a") == []
        assert small_matrix.neighbors("a") == []
        assert small_matrix.out_degree("a") == 0
        assert small_matrix.in_degree(2.0) == 0
        assert not small_matrix.has_edge("a", 1)

    def test_has_edge_is_directed(self, small_matrix):
        assert small_matrix.has_edge(2, 3)
        assert not small_matrix.has_edge(3, 2)
