"""
Whitespace tokenizer with deterministic n-gram generation.

Tokenization runs on normalized text only, so splitting on whitespace is
enough: the tokenizer never discards tokens itself. Stopword filtering is a
separate step (`content_tokens`) shared by every stage that needs it.
"""

from typing import AbstractSet, Iterable, List, Optional

from ..canonicalization.text_normalizer import normalize
from ..models.records import Token

# Version for audit trail
TOKENIZER_VERSION = "tokenizer-1.0.0"


def tokenize(text: str) -> List[str]:
    """
    Split normalized text into word tokens.

    Args:
        text: Normalized text

    Returns:
        List of tokens in left-to-right order

    Examples:
        >>> tokenize("running makes me happy")
        ['running', 'makes', 'me', 'happy']
        >>> tokenize("")
        []
    """
    return text.split()


def ngrams(tokens: List[str], n: int) -> List[str]:
    """
    Generate n-grams from token list.

    Args:
        tokens: List of tokens
        n: N-gram size (1=unigram, 2=bigram, 3=trigram)

    Returns:
        List of n-gram strings (space-joined)

    Examples:
        >>> ngrams(["a", "b", "c"], 1)
        ['a', 'b', 'c']
        >>> ngrams(["a", "b", "c"], 2)
        ['a b', 'b c']
        >>> ngrams(["a"], 2)
        []
    """
    if n < 1:
        return []
    if n > len(tokens):
        return []
    return [" ".join(tokens[i : i + n]) for i in range(len(tokens) - n + 1)]


def tokenize_ngrams(text: str, n: int) -> List[str]:
    """
    Tokenize text and build contiguous n-grams with a sliding window.

    Args:
        text: Normalized text
        n: Window width

    Returns:
        `len(tokens) - n + 1` space-joined n-grams, or [] if there are fewer
        than n tokens

    Examples:
        >>> tokenize_ngrams("best friend ever", 2)
        ['best friend', 'friend ever']
    """
    return ngrams(tokenize(text), n)


def positioned_tokens(text: str) -> List[Token]:
    """
    Tokenize text keeping each token's 0-based position.

    Args:
        text: Normalized text

    Returns:
        List of Token(position, word) with dense positions
    """
    return [Token(position=i, word=word) for i, word in enumerate(tokenize(text))]


def content_tokens(
    raw_text: Optional[str],
    stopwords: AbstractSet[str],
    vocabulary: Iterable[str] = (),
) -> List[Token]:
    """
    Normalize, tokenize and drop stopwords from a raw answer.

    This is the one routine used to derive a record's token stream, both when
    the completion index is built and when sentences are reconstructed.

    Args:
        raw_text: Raw answer text (None is treated as empty)
        stopwords: Words to drop
        vocabulary: Custom vocabulary removed by the normalizer

    Returns:
        Surviving tokens with their original positions
    """
    normalized = normalize(raw_text, vocabulary)
    return [token for token in positioned_tokens(normalized) if token.word not in stopwords]
