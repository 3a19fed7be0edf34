"""
Porter stemming for English survey answers.

Wraps NLTK's PorterStemmer behind a single `stem` function which is the one
stemmer referenced by both the completion index and sentence reconstruction.
"""

from functools import lru_cache
from typing import Callable, Optional

from nltk.stem import PorterStemmer

# Version for audit trail
STEMMER_VERSION = "porter-nltk-1.0.0"

# A stemmer is any deterministic str -> str function
Stemmer = Callable[[str], str]

# Singleton for the NLTK stemmer
_porter: Optional[PorterStemmer] = None


def get_porter_stemmer() -> PorterStemmer:
    """
    Get or initialize the Porter stemmer (singleton pattern).

    Returns:
        Shared PorterStemmer instance
    """
    global _porter
    if _porter is None:
        _porter = PorterStemmer()
    return _porter


@lru_cache(maxsize=65536)
def stem(word: str) -> str:
    """
    Reduce a word to its Porter stem.

    Empty or non-alphabetic input is returned unchanged.

    Args:
        word: Lowercase word token

    Returns:
        Stem of the word

    Examples:
        >>> stem("running")
        'run'
        >>> stem("happy")
        'happi'
        >>> stem("")
        ''
    """
    if not word or not word.isalpha():
        return word
    return get_porter_stemmer().stem(word)
