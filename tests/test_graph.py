"""Tests for the chain graph."""

from letterboxed.solver.graph import ChainGraph


class TestChainGraph:
    """Test cases for building and querying the chain graph."""

    def test_edges_link_first_to_last_letter(self, grid):
        """Each word is an edge from its first letter to its last letter."""
        graph = ChainGraph(["jbehk", "beg"], grid)
        edge = graph.edge("jbehk")
        assert (edge.first, edge.last) == ("j", "k")
        assert grid.letters_of_mask(edge.mask) == set("jbehk")

    def test_words_starting_with_is_sorted(self, grid):
        """Words leaving a letter come out in lexicographic order, whatever the input order."""
        graph = ChainGraph(["jbehk", "jak", "jad"], grid)
        assert list(graph.words_starting_with("j")) == ["jad", "jak", "jbehk"]

    def test_order_independent_of_input(self, grid):
        """Two graphs built from permuted inputs iterate identically."""
        words = ["adgj", "jbehk", "kcfil", "jak", "beg", "jad"]
        forward = ChainGraph(words, grid)
        backward = ChainGraph(list(reversed(words)), grid)
        assert [e.word for e in forward.edges()] == [e.word for e in backward.edges()]
        assert [e.word for e in forward.edges()] == sorted(words)

    def test_no_words_from_letter(self, grid):
        """A letter without outgoing words yields nothing."""
        graph = ChainGraph(["beg"], grid)
        assert list(graph.words_starting_with("g")) == []

    def test_words_starting_with_is_lazy(self, grid):
        """The query returns an iterator, not a list."""
        graph = ChainGraph(["beg"], grid)
        words = graph.words_starting_with("b")
        assert next(words) == "beg"

    def test_duplicates_ignored(self, grid):
        """A word given twice is one edge."""
        graph = ChainGraph(["beg", "beg"], grid)
        assert len(graph) == 1
        assert "beg" in graph
        assert "jak" not in graph

    def test_letters(self, grid):
        """letters lists the nodes with outgoing edges."""
        graph = ChainGraph(["kcfil", "beg", "jak"], grid)
        assert graph.letters() == ["b", "j", "k"]
