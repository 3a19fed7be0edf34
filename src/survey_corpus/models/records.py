"""
Data models for survey records flowing through the corpus pipeline.

Records are immutable: every stage derives a new value instead of mutating
its input, so stages can run over shards of the corpus independently.
"""

from dataclasses import dataclass
from typing import Dict, List, Optional

from pydantic import BaseModel, Field


class Record(BaseModel):
    """
    A single raw survey response with its respondent attributes.

    `id` is assigned once at ingestion (1-based, sequential) and identifies the
    record for every downstream join.
    """

    id: int = Field(description="Sequential 1-based record identifier", ge=1)
    raw_text: Optional[str] = Field(
        default=None, description="Free-text answer exactly as supplied (None if missing)"
    )
    respondent_id: Optional[str] = Field(
        default=None, description="Respondent key used to join demographic attributes"
    )
    attributes: Dict[str, str] = Field(
        default_factory=dict,
        description="Categorical attributes, e.g. gender, marital, parenthood",
    )

    model_config = {"frozen": True}


@dataclass(frozen=True)
class Token:
    """
    A word at a given position inside one record's normalized text.

    Attributes:
        position: 0-based index in the normalized token stream (dense)
        word: The token text
    """

    position: int
    word: str


class CleanedRecord(BaseModel):
    """
    Cleaned sentence for a record: stopwords removed, stems completed.
    """

    id: int = Field(description="Identifier of the source Record", ge=1)
    text: str = Field(default="", description="Resolved words joined by single spaces")

    model_config = {"frozen": True}

    def tokens(self) -> List[str]:
        return self.text.split()


class TaggedRecord(BaseModel):
    """
    A CleanedRecord joined with its Record's attributes by id.
    """

    id: int = Field(ge=1)
    text: str = Field(default="")
    attributes: Dict[str, str] = Field(default_factory=dict)

    model_config = {"frozen": True}

    def tokens(self) -> List[str]:
        return self.text.split()
