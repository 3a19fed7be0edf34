"""
CSV input provider and writers for survey corpora.

Reads a response table (one free-text answer per row) and an optional
demographic table keyed by respondent id, and turns them into Record objects
with sequential 1-based ids. Also writes cleaned records and frequency tables
back to CSV for the reporting layer.
"""

from pathlib import Path
from typing import Dict, Iterable, List, Optional, Sequence

import pandas as pd
import structlog

from ..frequency.aggregator import FrequencyTable
from ..models.records import CleanedRecord, Record

logger = structlog.get_logger(__name__)


def _clean_value(value) -> Optional[str]:
    """Categorical cell -> stripped lowercase string, or None if missing."""
    if value is None or pd.isna(value):
        return None
    text = str(value).strip().lower()
    return text or None


def _present_columns(frame: pd.DataFrame, columns: Iterable[str], path: Path) -> List[str]:
    present = [c for c in columns if c in frame.columns]
    missing = [c for c in columns if c not in frame.columns]
    if missing:
        logger.warning("csv_columns_missing", path=str(path), columns=missing)
    return present


def read_demographics(
    path: Path, key_column: str = "wid", columns: Sequence[str] = ()
) -> Dict[str, Dict[str, str]]:
    """
    Read the demographic table into respondent id -> attributes.

    The first row wins for duplicated respondent ids; empty cells are omitted
    from the attribute mapping.

    Args:
        path: CSV file path
        key_column: Respondent id column
        columns: Attribute columns to keep

    Returns:
        Mapping of respondent id to attribute dict
    """
    path = Path(path)
    frame = pd.read_csv(path, dtype=str, keep_default_na=False, na_values=[""])
    frame = frame.dropna(subset=[key_column]).drop_duplicates(subset=[key_column], keep="first")
    keep = _present_columns(frame, columns, path)

    demographics: Dict[str, Dict[str, str]] = {}
    for row in frame.to_dict(orient="records"):
        attributes = {}
        for column in keep:
            value = _clean_value(row.get(column))
            if value is not None:
                attributes[column] = value
        demographics[_clean_value(row[key_column])] = attributes

    logger.info("demographics_loaded", path=str(path), respondents=len(demographics))
    return demographics


def build_records(
    texts: Sequence[Optional[str]],
    respondent_ids: Optional[Sequence[Optional[str]]] = None,
    record_attributes: Optional[Sequence[Dict[str, str]]] = None,
    demographics: Optional[Dict[str, Dict[str, str]]] = None,
) -> List[Record]:
    """
    Assign ids and attach attributes to raw answers.

    Ids are 1-based and follow the order of `texts`. Demographic attributes
    are joined by respondent id; attributes carried by the response row
    itself (e.g. reflection_period) take precedence.

    Args:
        texts: Raw answers (None for missing text)
        respondent_ids: Respondent id per answer
        record_attributes: Row-level attributes per answer
        demographics: Respondent id -> attributes

    Returns:
        List of Record

    Examples:
        >>> recs = build_records(["Saw my dog", None], ["7", "8"], demographics={"7": {"gender": "f"}})
        >>> [(r.id, r.raw_text, r.attributes) for r in recs]
        [(1, 'Saw my dog', {'gender': 'f'}), (2, None, {})]
    """
    demographics = demographics or {}
    records = []
    for position, text in enumerate(texts):
        respondent = respondent_ids[position] if respondent_ids is not None else None
        attributes: Dict[str, str] = {}
        if respondent is not None:
            attributes.update(demographics.get(respondent, {}))
        if record_attributes is not None:
            attributes.update(record_attributes[position])
        records.append(
            Record(
                id=position + 1,
                raw_text=text,
                respondent_id=respondent,
                attributes=attributes,
            )
        )
    return records


def load_records(
    responses_path: Path,
    demographics_path: Optional[Path] = None,
    text_column: str = "cleaned_hm",
    respondent_column: str = "wid",
    record_attribute_columns: Sequence[str] = ("reflection_period",),
    demographic_columns: Sequence[str] = ("age", "country", "gender", "marital", "parenthood"),
) -> List[Record]:
    """
    Load survey responses (and optionally demographics) from CSV files.

    Args:
        responses_path: Response table path
        demographics_path: Demographic table path, keyed by `respondent_column`
        text_column: Column with the free-text answer
        respondent_column: Column with the respondent id (both tables)
        record_attribute_columns: Response-table columns kept as attributes
        demographic_columns: Demographic-table columns kept as attributes

    Returns:
        List of Record with ids 1..N in file order

    Raises:
        FileNotFoundError: If an input file does not exist
        KeyError: If the text column is absent from the response table
    """
    responses_path = Path(responses_path)
    frame = pd.read_csv(responses_path, dtype=str, keep_default_na=False, na_values=[""])
    if text_column not in frame.columns:
        raise KeyError(f"Text column '{text_column}' not found in {responses_path}")

    texts = [None if pd.isna(v) else str(v) for v in frame[text_column]]
    missing_text = sum(1 for t in texts if t is None)

    respondent_ids = None
    if respondent_column in frame.columns:
        respondent_ids = [_clean_value(v) for v in frame[respondent_column]]

    keep = _present_columns(frame, record_attribute_columns, responses_path)
    record_attributes = None
    if keep:
        record_attributes = []
        for row in frame[keep].to_dict(orient="records"):
            values = {c: _clean_value(row[c]) for c in keep}
            record_attributes.append({c: v for c, v in values.items() if v is not None})

    demographics = None
    if demographics_path is not None:
        demographics = read_demographics(
            Path(demographics_path), key_column=respondent_column, columns=demographic_columns
        )

    records = build_records(texts, respondent_ids, record_attributes, demographics)

    logger.info(
        "records_loaded",
        path=str(responses_path),
        records=len(records),
        missing_text=missing_text,
    )
    return records


def write_cleaned_records(cleaned: Iterable[CleanedRecord], path: Path) -> Path:
    """
    Write cleaned records as an `id,text` CSV.

    Returns:
        Path written
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    frame = pd.DataFrame([{"id": c.id, "text": c.text} for c in cleaned], columns=["id", "text"])
    frame.to_csv(path, index=False)
    logger.info("output_written", path=str(path), rows=len(frame))
    return path


def write_frequency_table(table: FrequencyTable, path: Path) -> Path:
    """
    Write a frequency table as CSV (see FrequencyTable.to_frame for columns).

    Returns:
        Path written
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    frame = table.to_frame()
    frame.to_csv(path, index=False)
    logger.info("output_written", path=str(path), rows=len(frame))
    return path
