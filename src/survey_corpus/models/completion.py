"""
Data models for stem completion.

A stem completion entry records which original word stands in for a stem
across the whole corpus, together with how often that word was observed.
"""

from pydantic import BaseModel, Field


class StemCompletionEntry(BaseModel):
    """
    Resolved representative word for a single stem.
    """

    stem: str = Field(description="Stem produced by the stemmer")
    resolved_word: str = Field(description="Most frequent original word for the stem")
    support_count: int = Field(description="Occurrences of resolved_word in the corpus", ge=1)

    model_config = {"frozen": True}
