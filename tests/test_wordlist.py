"""Tests for loading word lists and filtering them down to legal words."""

import pytest

from letterboxed.errors import UnknownLetterError
from letterboxed.solver.config import config as solver_config
from letterboxed.wordlist import filter_words, is_legal_word, load_word_list


class TestLoadWordList:
    """Test cases for reading dictionary files."""

    def test_load(self, tmp_path):
        """Lines are stripped and lowercased, blank lines skipped, order kept."""
        path = tmp_path / "words.txt"
        path.write_text("Beg\n\n  jak  \nADGJ\n", encoding="utf-8")
        assert load_word_list(path) == ["beg", "jak", "adgj"]

    def test_missing_file(self, tmp_path):
        """A missing file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            load_word_list(tmp_path / "missing.txt")

    def test_default_path(self, tmp_path, monkeypatch):
        """Without a path, the configured word list is used."""
        path = tmp_path / "dict.txt"
        path.write_text("beg\n", encoding="utf-8")
        monkeypatch.setattr(solver_config, "word_list_path", str(path))
        assert load_word_list() == ["beg"]


class TestIsLegalWord:
    """Test cases for the legality rule."""

    def test_legal(self, grid):
        """Letters alternate between sides."""
        assert is_legal_word("beg", grid)

    def test_same_side_pair(self, grid):
        """a and c share a side."""
        assert not is_legal_word("ace", grid)

    def test_letter_not_on_grid(self, grid):
        """x, y and z are not grid letters."""
        assert not is_legal_word("xyz", grid)

    def test_too_short(self, grid):
        """Two-letter words are too short by default."""
        assert not is_legal_word("be", grid)
        assert is_legal_word("be", grid, min_len=2)

    def test_non_alphabetic(self, grid):
        """Punctuation makes a word illegal."""
        assert not is_legal_word("be-g", grid)

    def test_same_letter_twice_in_a_row(self, grid):
        """A doubled letter lies on one side."""
        assert not is_legal_word("bee", grid)

    def test_never_raises_unknown_letter(self, grid):
        """Letters off the grid are rejected, not looked up."""
        try:
            is_legal_word("zebra", grid)
        except UnknownLetterError:
            pytest.fail("is_legal_word looked up a letter that is not on the grid")


class TestFilterWords:
    """Test cases for reducing a raw word list."""

    def test_filter(self, grid, scenario_words):
        """Only legal words survive, in input order."""
        assert filter_words(scenario_words, grid) == ["adgj", "jbehk", "kcfil", "jak", "beg"]

    def test_normalizes_case_and_duplicates(self, grid):
        """Words are lowercased and deduplicated."""
        assert filter_words(["BEG", "beg", " Jak ", "JAK"], grid) == ["beg", "jak"]

    def test_min_len_override(self, grid):
        """min_len overrides the configured minimum."""
        assert filter_words(["be", "beg"], grid, min_len=2) == ["be", "beg"]

    def test_soundness(self, grid):
        """Every surviving word satisfies both legality conditions."""
        words = ["beg", "ace", "jak", "jbehk", "fig", "kcfil", "lid", "hid", "gel", "dial"]
        for word in filter_words(words, grid):
            assert set(word) <= grid.all_letters()
            for a, b in zip(word, word[1:]):
                assert grid.is_adjacency_legal(a, b)

    def test_completeness(self, grid):
        """Every excluded word breaks a legality condition."""
        words = ["beg", "ace", "jak", "jbehk", "fig", "kcfil", "lid", "hid", "gel", "dial"]
        legal = set(filter_words(words, grid))
        for word in set(words) - legal:
            off_grid = not set(word) <= grid.all_letters()
            assert off_grid or any(
                not grid.is_adjacency_legal(a, b) for a, b in zip(word, word[1:])
            )

    def test_empty(self, grid):
        """An empty word list gives no legal words."""
        assert filter_words([], grid) == []
