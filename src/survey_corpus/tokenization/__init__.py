# Tokenization, stemming and stopwords

from .tokenizer import (
    TOKENIZER_VERSION,
    content_tokens,
    ngrams,
    positioned_tokens,
    tokenize,
    tokenize_ngrams,
)
from .stemmer import STEMMER_VERSION, Stemmer, stem
from .stopwords import STOPLIST_VERSION, STOPWORDS_EN, SURVEY_STOPWORDS, build_stopwords

__all__ = [
    "TOKENIZER_VERSION",
    "STEMMER_VERSION",
    "STOPLIST_VERSION",
    "tokenize",
    "tokenize_ngrams",
    "ngrams",
    "positioned_tokens",
    "content_tokens",
    "Stemmer",
    "stem",
    "STOPWORDS_EN",
    "SURVEY_STOPWORDS",
    "build_stopwords",
]
