"""
N-gram frequency tables over cleaned records.

Counts unigrams or bigrams from cleaned sentences, optionally partitioned by a
categorical respondent attribute (gender, marital status, parenthood, ...).
Input text is already cleaned, so no stemming or stopword pass happens here.
"""

from collections import Counter
from dataclasses import dataclass, field
from typing import AbstractSet, Dict, Iterable, List, Optional, Sequence, Tuple, Union

import pandas as pd
import structlog

from ..models.records import CleanedRecord, Record, TaggedRecord
from ..tokenization.tokenizer import ngrams

# Version for audit trail
AGGREGATOR_VERSION = "ngram-counts-1.0.0"

logger = structlog.get_logger(__name__)

CountableRecord = Union[CleanedRecord, TaggedRecord]


@dataclass
class FrequencyTable:
    """
    Counts of n-grams, optionally partitioned by an attribute value.

    Keys are (ngram, group) pairs; group is None for ungrouped tables.

    Attributes:
        n: N-gram size
        group_by: Attribute name used for partitioning, or None
        counts: Counter keyed by (ngram, group)
    """

    n: int
    group_by: Optional[str] = None
    counts: Counter = field(default_factory=Counter)

    def __len__(self) -> int:
        return len(self.counts)

    def total(self) -> int:
        """Sum of all counts."""
        return sum(self.counts.values())

    def get(self, ngram: str, group: Optional[str] = None) -> int:
        """Count for one n-gram (and group, for grouped tables)."""
        return self.counts.get((ngram, group), 0)

    def groups(self) -> List[str]:
        """Distinct group values present in the table, sorted."""
        return sorted({group for _, group in self.counts if group is not None})

    def for_group(self, group: Optional[str] = None) -> Counter:
        """N-gram counts restricted to one group (None for ungrouped tables)."""
        return Counter({ngram: c for (ngram, g), c in self.counts.items() if g == group})

    def most_common(
        self, k: Optional[int] = None, group: Optional[str] = None
    ) -> List[Tuple[str, int]]:
        """
        Highest counts first, ties broken alphabetically.

        Args:
            k: Number of n-grams to return (all if None)
            group: Group to restrict to (None for ungrouped tables)

        Returns:
            List of (ngram, count)
        """
        ranked = sorted(self.for_group(group).items(), key=lambda item: (-item[1], item[0]))
        return ranked if k is None else ranked[:k]

    def to_frame(self) -> pd.DataFrame:
        """
        Table as a DataFrame for reporting.

        Columns are `ngram`, the grouping attribute (grouped tables only) and
        `count`, sorted by group then descending count.
        """
        rows = [
            {"ngram": ngram, "group": group, "count": count}
            for (ngram, group), count in self.counts.items()
        ]
        frame = pd.DataFrame(rows, columns=["ngram", "group", "count"])
        if self.group_by is None:
            frame = frame.drop(columns=["group"])
            sort_cols, ascending = ["count", "ngram"], [False, True]
        else:
            frame = frame.rename(columns={"group": self.group_by})
            sort_cols, ascending = [self.group_by, "count", "ngram"], [True, False, True]
        return frame.sort_values(sort_cols, ascending=ascending).reset_index(drop=True)


def count_ngrams(
    records: Iterable[CountableRecord],
    n: int,
    group_by: Optional[str] = None,
    min_tokens: int = 0,
) -> FrequencyTable:
    """
    Count n-grams over cleaned records.

    Records with fewer than `n` tokens contribute nothing. When grouping,
    records without a value for `group_by` are excluded; restricting values
    to an allowed set is done beforehand with `filter_by_attribute`.

    Args:
        records: Cleaned records (TaggedRecord when grouping)
        n: N-gram size (1=unigram, 2=bigram)
        group_by: Attribute to partition counts by
        min_tokens: Skip records with fewer tokens than this

    Returns:
        FrequencyTable keyed by (ngram, group)

    Raises:
        ValueError: If n < 1

    Examples:
        >>> table = count_ngrams([CleanedRecord(id=1, text="best friend ever")], 2)
        >>> table.get("best friend")
        1
    """
    if n < 1:
        raise ValueError(f"n must be >= 1, got {n}")

    table = FrequencyTable(n=n, group_by=group_by)
    counted = 0
    missing_group = 0

    for record in records:
        tokens = record.tokens()
        if len(tokens) < min_tokens:
            continue

        group: Optional[str] = None
        if group_by is not None:
            group = getattr(record, "attributes", {}).get(group_by)
            if group is None:
                missing_group += 1
                continue

        for gram in ngrams(tokens, n):
            table.counts[(gram, group)] += 1
        counted += 1

    logger.debug(
        "ngrams_counted",
        n=n,
        group_by=group_by,
        records_counted=counted,
        records_missing_group=missing_group,
        distinct_keys=len(table.counts),
        total=table.total(),
    )

    return table


def attach_attributes(
    cleaned: Iterable[CleanedRecord], records: Iterable[Record]
) -> List[TaggedRecord]:
    """
    Join cleaned records with their source attributes by record id.

    Cleaned records without a matching source record get no attributes, so
    they are left out of every grouped table.

    Args:
        cleaned: Cleaned records
        records: Source records carrying attributes

    Returns:
        TaggedRecord list in the order of `cleaned`
    """
    attributes_by_id: Dict[int, Dict[str, str]] = {r.id: r.attributes for r in records}
    return [
        TaggedRecord(id=c.id, text=c.text, attributes=dict(attributes_by_id.get(c.id, {})))
        for c in cleaned
    ]


def filter_by_attribute(
    records: Sequence[TaggedRecord],
    attribute: str,
    allowed: Optional[AbstractSet[str]] = None,
) -> List[TaggedRecord]:
    """
    Keep records whose attribute value is recognized.

    Args:
        records: Tagged records
        attribute: Attribute name, e.g. "gender"
        allowed: Accepted values (None accepts any present value)

    Returns:
        Records with a recognized value for `attribute`

    Examples:
        >>> recs = [TaggedRecord(id=1, attributes={"gender": "m"}),
        ...         TaggedRecord(id=2, attributes={"gender": "o"})]
        >>> [r.id for r in filter_by_attribute(recs, "gender", {"m", "f"})]
        [1]
    """
    kept = []
    for record in records:
        value = record.attributes.get(attribute)
        if value is None:
            continue
        if allowed is not None and value not in allowed:
            continue
        kept.append(record)

    if len(kept) < len(records):
        logger.debug(
            "unrecognized_category_excluded",
            attribute=attribute,
            excluded=len(records) - len(kept),
        )

    return kept
