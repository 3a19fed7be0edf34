"""
Unit tests for application settings.
"""

import pytest

from survey_corpus.config import Settings, parse_csv_list


@pytest.mark.unit
class TestParseCsvList:
    """Tests for parse_csv_list helper."""

    def test_trims_and_drops_empty(self):
        assert parse_csv_list(" a, b ,,c ,") == ["a", "b", "c"]

    def test_empty_string(self):
        assert parse_csv_list("") == []


@pytest.mark.unit
class TestSettings:
    """Tests for Settings defaults and environment overrides."""

    def test_defaults(self, mock_settings):
        assert mock_settings.ngram_size == 2
        assert mock_settings.bigram_min_tokens == 2
        assert mock_settings.allowed_values("gender") == {"m", "f"}
        assert mock_settings.allowed_values("age") is None

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("CUSTOM_STOPWORDS", "Friend,Family")
        monkeypatch.setenv("WORKERS", "3")
        config = Settings()
        assert config.custom_stopword_list() == ["friend", "family"]
        assert config.workers == 3

    def test_removal_vocabulary_list(self):
        config = Settings(removal_vocabulary="Pizza, pasta")
        assert config.removal_vocabulary_list() == ["pizza", "pasta"]

    def test_groupable_attributes_include_loaded_columns(self):
        config = Settings()
        groupable = config.groupable_attributes()
        assert {"age", "country", "gender", "reflection_period"} <= set(groupable)
        assert groupable == sorted(groupable)
