# Data models for the survey corpus pipeline

from .pipeline_version import PipelineVersion
from .records import CleanedRecord, Record, TaggedRecord, Token
from .completion import StemCompletionEntry

__all__ = [
    "PipelineVersion",
    "Record",
    "Token",
    "CleanedRecord",
    "TaggedRecord",
    "StemCompletionEntry",
]
