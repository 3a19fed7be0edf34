"""
Unit tests for the Porter stemmer wrapper.
"""

import pytest
from survey_corpus.tokenization.stemmer import STEMMER_VERSION, get_porter_stemmer, stem


@pytest.mark.unit
class TestStem:
    """Tests for stem function."""

    @pytest.mark.parametrize(
        "word,expected",
        [
            ("running", "run"),
            ("runs", "run"),
            ("run", "run"),
            ("walked", "walk"),
            ("walking", "walk"),
            ("dogs", "dog"),
            ("happy", "happi"),
            ("friend", "friend"),
        ],
    )
    def test_porter_stems(self, word, expected):
        assert stem(word) == expected

    def test_surface_forms_share_a_stem(self):
        """Test the many-to-one mapping completion relies on."""
        assert stem("running") == stem("runs") == stem("run")

    def test_empty_input_returned_unchanged(self):
        assert stem("") == ""

    @pytest.mark.parametrize("word", ["abc123", "well-being", "two words", "ñ1"])
    def test_non_alphabetic_input_returned_unchanged(self, word):
        assert stem(word) == word

    def test_determinism(self):
        assert stem("families") == stem("families")

    def test_singleton_stemmer(self):
        assert get_porter_stemmer() is get_porter_stemmer()


@pytest.mark.unit
def test_stemmer_version_format():
    assert STEMMER_VERSION.startswith("porter-")
