"""
Unit tests for the CSV input provider and writers.
"""

import pandas as pd
import pytest

from survey_corpus.frequency import count_ngrams
from survey_corpus.ingestion.csv_loader import (
    build_records,
    load_records,
    read_demographics,
    write_cleaned_records,
    write_frequency_table,
)
from survey_corpus.models import CleanedRecord, TaggedRecord


@pytest.mark.unit
class TestBuildRecords:
    """Tests for build_records function."""

    def test_sequential_one_based_ids(self):
        records = build_records(["a", "b", "c"])
        assert [r.id for r in records] == [1, 2, 3]

    def test_missing_text_kept_as_none(self):
        records = build_records(["a", None])
        assert records[1].raw_text is None

    def test_demographics_joined_by_respondent(self):
        records = build_records(
            ["a", "b"],
            respondent_ids=["7", "8"],
            demographics={"7": {"gender": "f"}},
        )
        assert records[0].attributes == {"gender": "f"}
        assert records[1].attributes == {}
        assert records[0].respondent_id == "7"

    def test_row_attributes_take_precedence(self):
        records = build_records(
            ["a"],
            respondent_ids=["7"],
            record_attributes=[{"reflection_period": "3m", "gender": "m"}],
            demographics={"7": {"gender": "f", "parenthood": "y"}},
        )
        assert records[0].attributes == {
            "gender": "m",
            "parenthood": "y",
            "reflection_period": "3m",
        }


@pytest.mark.unit
class TestReadDemographics:
    """Tests for read_demographics function."""

    def test_first_row_wins_and_values_lowercased(self, demographics_csv):
        demographics = read_demographics(
            demographics_csv, key_column="wid", columns=["gender", "marital", "parenthood"]
        )
        assert demographics["2053"] == {"gender": "f", "marital": "married", "parenthood": "y"}
        assert demographics["2"]["gender"] == "m"

    def test_missing_columns_skipped(self, demographics_csv):
        demographics = read_demographics(demographics_csv, columns=["gender", "shoe_size"])
        assert demographics["2"] == {"gender": "m"}


@pytest.mark.unit
class TestLoadRecords:
    """Tests for load_records function."""

    def test_load_with_demographics(self, responses_csv, demographics_csv):
        records = load_records(responses_csv, demographics_csv)
        assert [r.id for r in records] == [1, 2, 3, 4]
        assert records[0].raw_text == "I went running today with my best friend"
        assert records[0].attributes["gender"] == "f"
        assert records[0].attributes["reflection_period"] == "24h"
        assert records[3].attributes["reflection_period"] == "3m"
        assert records[1].attributes["marital"] == "single"

    def test_empty_text_becomes_none(self, responses_csv):
        records = load_records(responses_csv)
        assert records[2].raw_text is None
        assert records[2].attributes == {"reflection_period": "3m"}

    def test_respondent_without_demographics(self, responses_csv, demographics_csv):
        records = load_records(responses_csv, demographics_csv)
        assert records[2].respondent_id == "1936"
        assert "gender" not in records[2].attributes

    def test_na_like_answers_are_kept_as_text(self, tmp_path):
        responses = tmp_path / "answers.csv"
        responses.write_text("wid,cleaned_hm\n1,None\n2,NA\n3,null\n4,\n", encoding="utf-8")
        records = load_records(responses)
        assert [r.raw_text for r in records] == ["None", "NA", "null", None]

    def test_na_like_demographic_values_are_kept(self, tmp_path):
        demographics = tmp_path / "demo.csv"
        demographics.write_text("wid,country,gender\n5,NA,\n", encoding="utf-8")
        result = read_demographics(demographics, columns=["country", "gender"])
        assert result == {"5": {"country": "na"}}

    def test_missing_text_column(self, responses_csv):
        with pytest.raises(KeyError):
            load_records(responses_csv, text_column="original_hm")

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_records(tmp_path / "nope.csv")


@pytest.mark.unit
class TestWriters:
    """Tests for CSV writers."""

    def test_write_cleaned_records(self, tmp_path):
        path = write_cleaned_records(
            [CleanedRecord(id=1, text="best friend"), CleanedRecord(id=2, text="")],
            tmp_path / "out" / "cleaned.csv",
        )
        frame = pd.read_csv(path, keep_default_na=False)
        assert list(frame.columns) == ["id", "text"]
        assert frame["text"].tolist() == ["best friend", ""]

    def test_write_frequency_table(self, tmp_path):
        table = count_ngrams(
            [TaggedRecord(id=1, text="best friend", attributes={"gender": "f"})],
            1,
            group_by="gender",
        )
        path = write_frequency_table(table, tmp_path / "unigrams_by_gender.csv")
        frame = pd.read_csv(path)
        assert list(frame.columns) == ["ngram", "gender", "count"]
        assert frame["count"].sum() == 2
