"""
Global pytest fixtures and configuration for test suite.

This module provides reusable fixtures for:
- Mock settings/configuration
- Sample survey records
- Temporary CSV input files
"""

import os
from typing import List

import pytest

from survey_corpus.config import Settings
from survey_corpus.models import Record


@pytest.fixture
def mock_settings() -> Settings:
    """
    Create mock settings for testing with safe defaults.

    Returns:
        Settings instance with test configuration
    """
    return Settings(
        log_level="INFO",
        log_json=False,  # Easier to read in tests
        use_survey_stopwords=False,
        custom_stopwords="",
        removal_vocabulary="",
        ngram_size=2,
        bigram_min_tokens=2,
        workers=1,
    )


@pytest.fixture
def scenario_stopwords() -> set:
    """
    Stopwords of the two-sentence reference scenario.

    Returns:
        Small stopword set
    """
    return {"i", "with", "my", "today"}


@pytest.fixture
def scenario_records() -> List[Record]:
    """
    Two-sentence reference corpus.

    Returns:
        Records with ids 1 and 2
    """
    return [
        Record(id=1, raw_text="I went running today with my best friend"),
        Record(id=2, raw_text="running makes me happy"),
    ]


@pytest.fixture
def survey_records() -> List[Record]:
    """
    Small survey corpus with demographic attributes.

    Returns:
        Records covering stems with several surface forms, a missing text,
        an all-stopword answer and an unrecognized gender value
    """
    return [
        Record(
            id=1,
            raw_text="I walked my dog in the park with my daughter.",
            respondent_id="10",
            attributes={"gender": "f", "marital": "married", "parenthood": "y"},
        ),
        Record(
            id=2,
            raw_text="Walking the dogs after work, 3 miles!",
            respondent_id="11",
            attributes={"gender": "m", "marital": "single", "parenthood": "n"},
        ),
        Record(
            id=3,
            raw_text="My daughter walked for the first time",
            respondent_id="10",
            attributes={"gender": "f", "marital": "married", "parenthood": "y"},
        ),
        Record(
            id=4,
            raw_text=None,
            respondent_id="12",
            attributes={"gender": "m", "marital": "single", "parenthood": "n"},
        ),
        Record(
            id=5,
            raw_text="It was what it was.",
            respondent_id="13",
            attributes={"gender": "o", "marital": "divorced", "parenthood": "n"},
        ),
        Record(
            id=6,
            raw_text="Dinner",
            respondent_id="14",
            attributes={"gender": "m"},
        ),
    ]


@pytest.fixture
def responses_csv(tmp_path):
    """
    Create a response CSV file in the happy-moment layout.

    Returns:
        Path to the CSV file
    """
    path = tmp_path / "cleaned_hm.csv"
    path.write_text(
        "hmid,wid,reflection_period,cleaned_hm\n"
        "27673,2053,24h,I went running today with my best friend\n"
        "27674,2,24h,running makes me happy\n"
        "27675,1936,3m,\n"
        '27676,2053,3m,"My best friend called me, we talked for hours"\n',
        encoding="utf-8",
    )
    return path


@pytest.fixture
def demographics_csv(tmp_path):
    """
    Create a demographic CSV file keyed by wid.

    Returns:
        Path to the CSV file
    """
    path = tmp_path / "demographic.csv"
    path.write_text(
        "wid,age,country,gender,marital,parenthood\n"
        "2053,35,USA,F,married,y\n"
        "2,29,IND,m,single,n\n"
        "2,40,USA,f,married,y\n",
        encoding="utf-8",
    )
    return path


@pytest.fixture(autouse=True)
def reset_env_vars():
    """
    Reset environment variables before each test.

    This prevents test pollution from env var changes.
    """
    original_env = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(original_env)


def pytest_configure(config):
    """
    Configure pytest with custom markers and settings.
    """
    config.addinivalue_line(
        "markers", "unit: Unit tests (fast, no external dependencies)"
    )
    config.addinivalue_line(
        "markers", "integration: Integration tests (end-to-end pipeline, CLI)"
    )
    config.addinivalue_line(
        "markers", "slow: Slow tests that may take longer to run"
    )
