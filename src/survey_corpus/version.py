"""
Version constants for the survey corpus pipeline.

This module gathers the version constants of every component so that a
corpus run can be tied to the exact algorithms that produced it.
"""

from .models.pipeline_version import PipelineVersion
from .canonicalization.text_normalizer import NORMALIZER_VERSION
from .tokenization.tokenizer import TOKENIZER_VERSION
from .tokenization.stemmer import STEMMER_VERSION
from .tokenization.stopwords import STOPLIST_VERSION
from .completion.resolver import COMPLETION_VERSION
from .frequency.aggregator import AGGREGATOR_VERSION

# Package version
PACKAGE_VERSION = "1.0.0"


def get_current_pipeline_version() -> PipelineVersion:
    """
    Get current pipeline version configuration.

    Returns:
        PipelineVersion instance with current versions
    """
    return PipelineVersion(
        normalizer_version=NORMALIZER_VERSION,
        tokenizer_version=TOKENIZER_VERSION,
        stemmer_version=STEMMER_VERSION,
        stoplist_version=STOPLIST_VERSION,
        completion_version=COMPLETION_VERSION,
        aggregator_version=AGGREGATOR_VERSION,
    )
