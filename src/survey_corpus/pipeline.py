"""
End-to-end corpus pipeline.

Public entry point that chains normalization, stem completion, sentence
reconstruction and frequency aggregation over a fixed corpus snapshot.
"""

import time
from dataclasses import dataclass, field
from typing import AbstractSet, Dict, List, Optional, Sequence

import structlog

from .completion import StemCompletionIndex, build_index, reconstruct_all
from .config import Settings, settings
from .frequency import FrequencyTable, attach_attributes, count_ngrams, filter_by_attribute
from .models import CleanedRecord, PipelineVersion, Record
from .tokenization import Stemmer, build_stopwords, stem
from .version import get_current_pipeline_version

logger = structlog.get_logger(__name__)


@dataclass
class CorpusAnalysis:
    """
    Complete result of a corpus run.

    Attributes:
        index: Stem completion index built over the corpus
        cleaned_records: One CleanedRecord per input record, same order
        unigrams: Ungrouped unigram counts
        bigrams: Ungrouped n-gram counts (n = settings.ngram_size)
        grouped_unigrams: Unigram tables keyed by grouping attribute
        grouped_bigrams: N-gram tables keyed by grouping attribute
        pipeline_version: Component versions used for the run
        record_count: Number of input records
        token_count: Surviving tokens across all cleaned records
        processing_time_ms: Wall-clock time of the run
    """

    index: StemCompletionIndex
    cleaned_records: List[CleanedRecord]
    unigrams: FrequencyTable
    bigrams: FrequencyTable
    pipeline_version: PipelineVersion
    grouped_unigrams: Dict[str, FrequencyTable] = field(default_factory=dict)
    grouped_bigrams: Dict[str, FrequencyTable] = field(default_factory=dict)
    record_count: int = 0
    token_count: int = 0
    processing_time_ms: float = 0.0


def run_pipeline(
    records: Sequence[Record],
    stopwords: Optional[AbstractSet[str]] = None,
    group_by: Sequence[str] = (),
    vocabulary: Optional[Sequence[str]] = None,
    stemmer: Stemmer = stem,
    workers: Optional[int] = None,
    config: Optional[Settings] = None,
) -> CorpusAnalysis:
    """
    Clean a survey corpus and compute its n-gram frequency tables.

    Pipeline stages:
    1. Build the stem completion index (corpus-wide pass)
    2. Reconstruct a cleaned sentence per record
    3. Join cleaned records with attributes by record id
    4. Count unigrams and bigrams, ungrouped and per attribute

    Args:
        records: Corpus snapshot
        stopwords: Stopword set (default: built from config)
        group_by: Attributes to compute grouped tables for
        vocabulary: Custom vocabulary removed by the normalizer (default: from config)
        stemmer: Stemming function
        workers: Worker processes for the counting pass (default: from config)
        config: Settings to use (default: global settings)

    Returns:
        CorpusAnalysis with cleaned records, tables and run metadata
    """
    config = config or settings
    if stopwords is None:
        stopwords = build_stopwords(
            config.custom_stopword_list(), include_survey=config.use_survey_stopwords
        )
    if vocabulary is None:
        vocabulary = config.removal_vocabulary_list()
    if workers is None:
        workers = config.workers

    start_time = time.time()
    records = list(records)

    logger.info(
        "corpus_pipeline_started",
        records=len(records),
        stopwords=len(stopwords),
        group_by=list(group_by),
        workers=workers,
    )

    # Stage 1: corpus-wide completion index
    index = build_index(records, stopwords, stemmer=stemmer, vocabulary=vocabulary, workers=workers)

    # Stage 2: per-record reconstruction
    cleaned = reconstruct_all(records, index, stopwords, stemmer=stemmer, vocabulary=vocabulary)

    # Stage 3: explicit join by id
    tagged = attach_attributes(cleaned, records)

    # Stage 4: frequency tables
    n = config.ngram_size
    min_tokens = config.bigram_min_tokens
    unigrams = count_ngrams(tagged, 1)
    bigrams = count_ngrams(tagged, n, min_tokens=min_tokens)

    grouped_unigrams: Dict[str, FrequencyTable] = {}
    grouped_bigrams: Dict[str, FrequencyTable] = {}
    for attribute in group_by:
        subset = filter_by_attribute(tagged, attribute, config.allowed_values(attribute))
        grouped_unigrams[attribute] = count_ngrams(subset, 1, group_by=attribute)
        grouped_bigrams[attribute] = count_ngrams(
            subset, n, group_by=attribute, min_tokens=min_tokens
        )
        logger.debug(
            "grouped_tables_built",
            attribute=attribute,
            records=len(subset),
            groups=grouped_unigrams[attribute].groups(),
        )

    processing_time_ms = (time.time() - start_time) * 1000
    token_count = sum(len(c.tokens()) for c in cleaned)
    pipeline_version = get_current_pipeline_version()

    logger.info(
        "corpus_pipeline_complete",
        records=len(records),
        token_count=token_count,
        distinct_stems=len(index),
        distinct_unigrams=len(unigrams),
        distinct_bigrams=len(bigrams),
        pipeline_version=pipeline_version.to_repr(),
        processing_time_ms=round(processing_time_ms, 2),
    )

    return CorpusAnalysis(
        index=index,
        cleaned_records=cleaned,
        unigrams=unigrams,
        bigrams=bigrams,
        pipeline_version=pipeline_version,
        grouped_unigrams=grouped_unigrams,
        grouped_bigrams=grouped_bigrams,
        record_count=len(records),
        token_count=token_count,
        processing_time_ms=processing_time_ms,
    )
