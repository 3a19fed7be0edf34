# N-gram frequency aggregation

from .aggregator import (
    AGGREGATOR_VERSION,
    FrequencyTable,
    attach_attributes,
    count_ngrams,
    filter_by_attribute,
)

__all__ = [
    "AGGREGATOR_VERSION",
    "FrequencyTable",
    "attach_attributes",
    "count_ngrams",
    "filter_by_attribute",
]
