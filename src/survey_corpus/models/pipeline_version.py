"""
Pipeline version model for reproducible corpus runs.

Same version parameters + same corpus snapshot = same cleaned corpus and
frequency tables.
"""

from pydantic import BaseModel, Field


class PipelineVersion(BaseModel):
    """
    Immutable version contract for a corpus run.

    Every component that can change the output is tracked so two runs can be
    compared or reproduced.
    """

    normalizer_version: str = Field(
        description="Text normalization algorithm version", examples=["normalize-1.0.0"]
    )
    tokenizer_version: str = Field(
        description="Whitespace tokenizer and n-gram builder version", examples=["tokenizer-1.0.0"]
    )
    stemmer_version: str = Field(
        description="Stemming algorithm version", examples=["porter-nltk-1.0.0"]
    )
    stoplist_version: str = Field(
        description="Stopword list version", examples=["stopwords-en-survey-1.0"]
    )
    completion_version: str = Field(
        description="Stem completion algorithm version", examples=["stem-completion-1.0.0"]
    )
    aggregator_version: str = Field(
        description="Frequency aggregation version", examples=["ngram-counts-1.0.0"]
    )

    model_config = {"frozen": True}

    def to_repr(self) -> str:
        """
        Short representation for logging.

        Returns:
            Compact string representation with key version components.
        """
        return f"Pipeline-{self.stemmer_version}-{self.completion_version}"
