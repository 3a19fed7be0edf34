"""
Sentence reconstruction from a finished stem completion index.

Each record is cleaned on its own: its token stream is derived again with the
same `content_tokens` routine the index was built with, and every surviving
word is replaced with the representative word of its stem.
"""

from typing import AbstractSet, Iterable, List, Sequence

import structlog

from ..models.records import CleanedRecord, Record
from ..tokenization.stemmer import Stemmer, stem
from ..tokenization.tokenizer import content_tokens
from .resolver import StemCompletionIndex

logger = structlog.get_logger(__name__)


def reconstruct(
    record: Record,
    index: StemCompletionIndex,
    stopwords: AbstractSet[str],
    stemmer: Stemmer = stem,
    vocabulary: Sequence[str] = (),
) -> CleanedRecord:
    """
    Build the cleaned sentence for a single record.

    Args:
        record: Source record (raw_text is not modified)
        index: Index returned by build_index for the same corpus
        stopwords: Stopwords used to build the index
        stemmer: Stemmer used to build the index
        vocabulary: Custom vocabulary used to build the index

    Returns:
        CleanedRecord with resolved words in original order. Empty text when
        every token is a stopword or the text is missing.

    Examples:
        >>> from survey_corpus.completion.resolver import build_index
        >>> rec = Record(id=1, raw_text="Running makes me smile")
        >>> idx = build_index([rec], {"me"})
        >>> reconstruct(rec, idx, {"me"}).text
        'running makes smile'
    """
    words: List[str] = []
    for token in content_tokens(record.raw_text, stopwords, vocabulary):
        resolved = index.resolve(stemmer(token.word))
        # Stems missing from the index have no completion; the token is dropped
        if resolved is not None:
            words.append(resolved)
    return CleanedRecord(id=record.id, text=" ".join(words))


def reconstruct_all(
    records: Iterable[Record],
    index: StemCompletionIndex,
    stopwords: AbstractSet[str],
    stemmer: Stemmer = stem,
    vocabulary: Sequence[str] = (),
) -> List[CleanedRecord]:
    """
    Reconstruct every record, preserving input order and ids.

    Args:
        records: Records to clean
        index: Finished completion index
        stopwords: Stopwords used to build the index
        stemmer: Stemmer used to build the index
        vocabulary: Custom vocabulary used to build the index

    Returns:
        List of CleanedRecord in the same order as `records`
    """
    cleaned = [reconstruct(r, index, stopwords, stemmer, vocabulary) for r in records]

    empty = sum(1 for c in cleaned if not c.text)
    logger.debug("records_reconstructed", records=len(cleaned), empty_records=empty)

    return cleaned
