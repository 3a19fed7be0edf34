"""
Stem completion index built from corpus-wide word frequencies.

Stemming maps many words onto one stem. Completion inverts that: for every
stem it picks the original word observed most often across the whole corpus,
so cleaned sentences read with real words instead of stems.

Building the index is the only corpus-wide pass of the pipeline. It must
finish before any record is reconstructed because the chosen word depends on
global counts, not on the record being cleaned.
"""

import time
from collections import Counter, defaultdict
from concurrent.futures import ProcessPoolExecutor
from functools import partial
from types import MappingProxyType
from typing import AbstractSet, Dict, Iterable, Iterator, List, Mapping, Optional, Sequence, Tuple

import structlog

from ..models.completion import StemCompletionEntry
from ..models.records import Record
from ..tokenization.stemmer import Stemmer, stem
from ..tokenization.tokenizer import content_tokens

# Version for audit trail
COMPLETION_VERSION = "stem-completion-1.0.0"

logger = structlog.get_logger(__name__)

# (stem, original word) -> occurrences
PairCounts = Counter


class StemCompletionIndex(Mapping[str, StemCompletionEntry]):
    """
    Read-only stem -> StemCompletionEntry lookup.

    Instances are produced by `build_index` and never change afterwards; the
    underlying dict is only reachable through a MappingProxyType.
    """

    def __init__(self, entries: Iterable[StemCompletionEntry] = ()):
        self._entries = MappingProxyType({entry.stem: entry for entry in entries})

    def __getitem__(self, key: str) -> StemCompletionEntry:
        return self._entries[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"StemCompletionIndex({len(self)} stems)"

    def resolve(self, stem_: str) -> Optional[str]:
        """
        Representative word for a stem, or None if the stem was never observed.
        """
        entry = self._entries.get(stem_)
        return entry.resolved_word if entry is not None else None


def count_stem_words(
    records: Iterable[Record],
    stopwords: AbstractSet[str],
    stemmer: Stemmer = stem,
    vocabulary: Sequence[str] = (),
) -> PairCounts:
    """
    Count (stem, original word) pairs over a set of records.

    Args:
        records: Records to scan (any shard of the corpus)
        stopwords: Words excluded before stemming
        stemmer: Stemming function
        vocabulary: Custom vocabulary removed by the normalizer

    Returns:
        Counter keyed by (stem, word)
    """
    counts: PairCounts = Counter()
    for record in records:
        for token in content_tokens(record.raw_text, stopwords, vocabulary):
            counts[(stemmer(token.word), token.word)] += 1
    return counts


def merge_counts(shards: Iterable[PairCounts]) -> PairCounts:
    """
    Sum per-shard pair counts. Order of shards does not matter.
    """
    total: PairCounts = Counter()
    for shard in shards:
        total.update(shard)
    return total


def select_entries(counts: PairCounts) -> List[StemCompletionEntry]:
    """
    Pick the most frequent word for every stem.

    Ties on count go to the lexicographically smallest word, so the result does
    not depend on the order in which records were read.

    Args:
        counts: Corpus-wide (stem, word) counts

    Returns:
        One entry per stem, sorted by stem

    Examples:
        >>> counts = Counter({("run", "running"): 5, ("run", "runs"): 5, ("run", "runner"): 3})
        >>> select_entries(counts)[0].resolved_word
        'running'
    """
    by_stem: Dict[str, Dict[str, int]] = defaultdict(dict)
    for (stem_, word), count in counts.items():
        by_stem[stem_][word] = count

    entries = []
    for stem_ in sorted(by_stem):
        word, count = min(by_stem[stem_].items(), key=lambda item: (-item[1], item[0]))
        entries.append(StemCompletionEntry(stem=stem_, resolved_word=word, support_count=count))
    return entries


def _split_shards(records: Sequence[Record], shard_count: int) -> List[Sequence[Record]]:
    size = -(-len(records) // shard_count)  # ceiling division
    return [records[i : i + size] for i in range(0, len(records), size)]


def build_index(
    records: Sequence[Record],
    stopwords: AbstractSet[str],
    stemmer: Stemmer = stem,
    vocabulary: Sequence[str] = (),
    workers: int = 1,
) -> StemCompletionIndex:
    """
    Build the corpus-wide stem completion index.

    Process:
    1. Normalize and tokenize every record, dropping stopwords
    2. Stem each surviving word
    3. Count (stem, word) pairs across the corpus
    4. Select the most frequent word per stem (lexicographic tie-break)

    With `workers > 1` step 1-3 run over shards in separate processes and the
    per-shard counters are summed afterwards. The stemmer must then be a
    picklable module-level function.

    Args:
        records: Full corpus snapshot
        stopwords: Words excluded from completion
        stemmer: Stemming function shared with sentence reconstruction
        vocabulary: Custom vocabulary removed by the normalizer
        workers: Number of worker processes for the counting pass

    Returns:
        Read-only StemCompletionIndex (empty for an empty corpus)

    Raises:
        ValueError: If workers < 1
    """
    if workers < 1:
        raise ValueError(f"workers must be >= 1, got {workers}")

    start_time = time.time()
    records = list(records)
    vocabulary = tuple(vocabulary)

    if not records:
        logger.info("empty_corpus", stage="build_index")
        return StemCompletionIndex()

    shard_count = min(workers, len(records))
    if shard_count == 1:
        counts = count_stem_words(records, stopwords, stemmer, vocabulary)
    else:
        count_shard = partial(
            count_stem_words,
            stopwords=frozenset(stopwords),
            stemmer=stemmer,
            vocabulary=vocabulary,
        )
        with ProcessPoolExecutor(max_workers=shard_count) as executor:
            counts = merge_counts(executor.map(count_shard, _split_shards(records, shard_count)))

    index = StemCompletionIndex(select_entries(counts))

    logger.info(
        "stem_index_built",
        records=len(records),
        shards=shard_count,
        token_count=sum(counts.values()),
        distinct_pairs=len(counts),
        distinct_stems=len(index),
        processing_time_ms=round((time.time() - start_time) * 1000, 2),
    )

    return index


def index_summary(index: StemCompletionIndex, top_n: int = 10) -> List[Tuple[str, str, int]]:
    """
    Best-supported entries of an index, for logging and CLI summaries.

    Returns:
        List of (stem, resolved_word, support_count), highest support first
    """
    entries = sorted(index.values(), key=lambda e: (-e.support_count, e.stem))
    return [(e.stem, e.resolved_word, e.support_count) for e in entries[:top_n]]
