# Text canonicalization module

from .text_normalizer import (
    NORMALIZER_VERSION,
    normalize,
    normalize_whitespace,
    remove_digits,
    remove_punctuation,
    remove_vocabulary,
)

__all__ = [
    "NORMALIZER_VERSION",
    "normalize",
    "normalize_whitespace",
    "remove_digits",
    "remove_punctuation",
    "remove_vocabulary",
]
