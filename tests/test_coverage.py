"""Tests for the coverage relation."""

from __future__ import annotations

from nsaudit.coverage import find_uncovered, is_covered


class TestIsCovered:
    def test_exact_match(self):
        assert is_covered("A.B", ["A.B"])

    def test_exact_match_regardless_of_other_entries(self):
        assert is_covered("N.M", ["Z", "N.M.Child", "Q.R", "N.M"])

    def test_ancestor_covers_descendant(self):
        assert is_covered("A.B.C.D", ["A.B"])

    def test_descendant_does_not_cover_ancestor(self):
        assert not is_covered("A", ["A.B"])

    def test_text_prefix_without_dot_does_not_cover(self):
        assert not is_covered("A.BC", ["A.B"])

    def test_case_sensitive(self):
        assert not is_covered("a.b", ["A.B"])

    def test_no_file_namespaces(self):
        assert not is_covered("A", [])


class TestFindUncovered:
    def test_returns_sorted_uncovered(self):
        leaves = ["Root.Z", "Root.A.B", "Root.C"]
        assert find_uncovered(leaves, ["Root.A"]) == ["Root.C", "Root.Z"]

    def test_all_covered(self):
        assert find_uncovered(["A.B", "A.C"], ["A"]) == []

    def test_ordinal_ordering(self):
        # Uppercase sorts before lowercase in code-point order
        assert find_uncovered(["b.X", "B.X", "a.X"], []) == ["B.X", "a.X", "b.X"]

    def test_accepts_generators(self):
        leaves = (ns for ns in ["A.B", "C.D"])
        files = (ns for ns in ["A"])
        assert find_uncovered(leaves, files) == ["C.D"]
