"""
Survey corpus: stem-completed text cleaning and n-gram frequencies for
free-text survey responses.
"""

from .completion import StemCompletionIndex, build_index, reconstruct, reconstruct_all
from .frequency import FrequencyTable, attach_attributes, count_ngrams, filter_by_attribute
from .models import CleanedRecord, Record, StemCompletionEntry, TaggedRecord, Token
from .pipeline import CorpusAnalysis, run_pipeline
from .version import PACKAGE_VERSION

__version__ = PACKAGE_VERSION

__all__ = [
    "Record",
    "Token",
    "CleanedRecord",
    "TaggedRecord",
    "StemCompletionEntry",
    "StemCompletionIndex",
    "build_index",
    "reconstruct",
    "reconstruct_all",
    "FrequencyTable",
    "count_ngrams",
    "attach_attributes",
    "filter_by_attribute",
    "CorpusAnalysis",
    "run_pipeline",
]
