"""
Text canonicalization and normalization module.

This module handles deterministic normalization of survey answers: lower-casing,
punctuation and digit removal, optional vocabulary removal and whitespace
collapse. Every function is total and `normalize` is idempotent.
"""

import re
from typing import Iterable, Optional

# Version constant for audit trail
NORMALIZER_VERSION = "normalize-1.0.0"

# Anything that is neither a word character nor whitespace, plus underscore
PUNCTUATION_PATTERN = re.compile(r"[^\w\s]|_")


def normalize(text: Optional[str], vocabulary: Iterable[str] = ()) -> str:
    """
    Normalize a raw survey answer into cleaned sentence text.

    Steps:
    1. Convert to lowercase
    2. Remove punctuation
    3. Remove digits
    4. Remove custom vocabulary (whole words, empty by default)
    5. Collapse whitespace and strip

    Args:
        text: Raw answer text (None is treated as an empty answer)
        vocabulary: Words to drop entirely

    Returns:
        Normalized text, words separated by single spaces

    Examples:
        >>> normalize("I went running, today!!  2 times")
        'i went running today times'
        >>> normalize(None)
        ''
    """
    if not text:
        return ""

    # 1. Lowercase
    text = text.lower()

    # 2. Punctuation
    text = remove_punctuation(text)

    # 3. Digits
    text = remove_digits(text)

    # 4. Custom vocabulary
    text = remove_vocabulary(text, vocabulary)

    # 5. Whitespace
    return normalize_whitespace(text)


def remove_punctuation(text: str) -> str:
    """
    Delete punctuation characters.

    Characters are deleted rather than replaced with a space, so contractions
    and hyphenated words stay single tokens ("don't" -> "dont").

    Args:
        text: Input text

    Returns:
        Text without punctuation
    """
    return PUNCTUATION_PATTERN.sub("", text)


def remove_digits(text: str) -> str:
    """
    Delete numeric characters.

    Covers decimal digits as well as superscripts, fractions and other
    characters for which `str.isnumeric()` holds ("x²" -> "x").

    Args:
        text: Input text

    Returns:
        Text without digits
    """
    return "".join(ch for ch in text if not ch.isnumeric())


def remove_vocabulary(text: str, vocabulary: Iterable[str]) -> str:
    """
    Drop whitespace-delimited words that belong to `vocabulary`.

    Args:
        text: Input text (already lowercased)
        vocabulary: Words to remove

    Returns:
        Text with the vocabulary words removed, joined by single spaces
    """
    words = {word.lower() for word in vocabulary}
    if not words:
        return text
    return " ".join(word for word in text.split() if word not in words)


def normalize_whitespace(text: str) -> str:
    """
    Collapse runs of whitespace into a single space and strip both ends.

    Args:
        text: Input text

    Returns:
        Text with normalized whitespace
    """
    return " ".join(text.split())
