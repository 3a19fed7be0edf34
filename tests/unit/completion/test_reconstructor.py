"""
Unit tests for sentence reconstruction.
"""

import pytest

from survey_corpus.completion.reconstructor import reconstruct, reconstruct_all
from survey_corpus.completion.resolver import StemCompletionIndex, build_index
from survey_corpus.models import CleanedRecord, Record, StemCompletionEntry
from survey_corpus.tokenization.stopwords import build_stopwords


@pytest.fixture
def base_stopwords():
    return build_stopwords(include_survey=False)


@pytest.mark.unit
class TestReconstruct:
    """Tests for reconstruct function."""

    def test_completed_words_in_original_order(self, survey_records, base_stopwords):
        index = build_index(survey_records, base_stopwords)
        cleaned = reconstruct(survey_records[1], index, base_stopwords)
        assert cleaned == CleanedRecord(id=2, text="walked dog work miles")

    def test_id_preserved_and_raw_text_untouched(self, survey_records, base_stopwords):
        index = build_index(survey_records, base_stopwords)
        record = survey_records[0]
        cleaned = reconstruct(record, index, base_stopwords)
        assert cleaned.id == record.id
        assert record.raw_text == "I walked my dog in the park with my daughter."

    def test_determinism(self, survey_records, base_stopwords):
        index = build_index(survey_records, base_stopwords)
        first = reconstruct(survey_records[2], index, base_stopwords)
        second = reconstruct(survey_records[2], index, base_stopwords)
        assert first == second

    def test_all_stopwords_yield_empty_text(self, base_stopwords):
        record = Record(id=7, raw_text="It was what it was.")
        index = build_index([record], base_stopwords)
        assert reconstruct(record, index, base_stopwords).text == ""

    def test_missing_text_yields_empty_text(self, base_stopwords):
        record = Record(id=8, raw_text=None)
        assert reconstruct(record, StemCompletionIndex(), base_stopwords).text == ""

    def test_empty_index_yields_empty_text(self):
        record = Record(id=1, raw_text="sunny beach walk")
        assert reconstruct(record, StemCompletionIndex(), set()).text == ""

    def test_uses_index_word_not_record_word(self):
        index = StemCompletionIndex(
            [StemCompletionEntry(stem="run", resolved_word="running", support_count=3)]
        )
        record = Record(id=1, raw_text="runs run")
        assert reconstruct(record, index, set()).text == "running running"

    def test_vocabulary_applied_consistently(self):
        records = [Record(id=1, raw_text="pizza night with friends")]
        index = build_index(records, {"with"}, vocabulary=["pizza"])
        cleaned = reconstruct(records[0], index, {"with"}, vocabulary=["pizza"])
        assert cleaned.text == "night friends"


@pytest.mark.unit
class TestReconstructAll:
    """Tests for reconstruct_all function."""

    def test_order_and_ids(self, survey_records, base_stopwords):
        index = build_index(survey_records, base_stopwords)
        cleaned = reconstruct_all(survey_records, index, base_stopwords)
        assert [c.id for c in cleaned] == [1, 2, 3, 4, 5, 6]
        assert [c.text for c in cleaned] == [
            "walked dog park daughter",
            "walked dog work miles",
            "daughter walked first time",
            "",
            "",
            "dinner",
        ]

    def test_empty_corpus(self, base_stopwords):
        assert reconstruct_all([], StemCompletionIndex(), base_stopwords) == []
