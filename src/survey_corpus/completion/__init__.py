"""
Stem completion module.

Public API for building the corpus-wide stem completion index and rebuilding
cleaned sentences from it.
"""

from .resolver import (
    COMPLETION_VERSION,
    StemCompletionIndex,
    build_index,
    count_stem_words,
    index_summary,
    merge_counts,
    select_entries,
)
from .reconstructor import reconstruct, reconstruct_all

__all__ = [
    "COMPLETION_VERSION",
    "StemCompletionIndex",
    "build_index",
    "count_stem_words",
    "merge_counts",
    "select_entries",
    "index_summary",
    "reconstruct",
    "reconstruct_all",
]
