"""
English stopword lists for survey answers.

The base list matches NLTK's English stopword corpus, stored in the package so
no corpus download is needed at runtime. Punctuation is removed before
stopword filtering, so contractions appear in their collapsed form ("dont").
"""

from typing import FrozenSet, Iterable

# Version for audit trail
STOPLIST_VERSION = "stopwords-en-survey-1.0"

STOPWORDS_EN: FrozenSet[str] = frozenset(
    {
        # Pronouns
        "i", "me", "my", "myself", "we", "our", "ours", "ourselves",
        "you", "your", "yours", "yourself", "yourselves",
        "he", "him", "his", "himself", "she", "her", "hers", "herself",
        "it", "its", "itself", "they", "them", "their", "theirs", "themselves",
        "what", "which", "who", "whom", "this", "that", "these", "those",
        # Auxiliaries
        "am", "is", "are", "was", "were", "be", "been", "being",
        "have", "has", "had", "having", "do", "does", "did", "doing",
        "will", "would", "shall", "should", "can", "could", "may", "might", "must",
        # Articles, conjunctions, prepositions
        "a", "an", "the", "and", "but", "if", "or", "because", "as", "until",
        "while", "of", "at", "by", "for", "with", "about", "against", "between",
        "into", "through", "during", "before", "after", "above", "below", "to",
        "from", "up", "down", "in", "out", "on", "off", "over", "under",
        # Adverbs and determiners
        "again", "further", "then", "once", "here", "there", "when", "where",
        "why", "how", "all", "any", "both", "each", "few", "more", "most",
        "other", "some", "such", "no", "nor", "not", "only", "own", "same",
        "so", "than", "too", "very", "just", "now",
        # Contraction fragments and collapsed contractions
        "s", "t", "d", "ll", "m", "o", "re", "ve", "y",
        "don", "dont", "shouldve", "aren", "arent", "couldn",
        "couldnt", "didn", "didnt", "doesn", "doesnt", "hadn", "hadnt", "hasn",
        "hasnt", "haven", "havent", "isn", "isnt", "ma", "mightn", "mightnt",
        "mustn", "mustnt", "needn", "neednt", "shan", "shant", "shouldn",
        "shouldnt", "wasn", "wasnt", "weren", "werent", "won", "wont",
        "wouldn", "wouldnt", "im", "ive", "id", "youre", "youve", "youll",
        "youd", "thats",
    }
)

# Words that appear in nearly every happy-moment answer and carry no signal
SURVEY_STOPWORDS: FrozenSet[str] = frozenset(
    {
        "happy", "happier", "happiest", "happiness", "day", "days", "time",
        "today", "yesterday", "week", "weeks", "month", "months", "year",
        "years", "ago", "last", "past", "moment", "event", "felt", "feel",
        "feeling", "made", "make", "makes", "got", "get", "getting",
        "really", "lot", "able", "one", "first", "also", "still",
    }
)


def build_stopwords(
    custom: Iterable[str] = (), include_survey: bool = True
) -> FrozenSet[str]:
    """
    Assemble the stopword set for a corpus run.

    Args:
        custom: Caller-supplied extra stopwords (lowercased before use)
        include_survey: Whether to add the survey domain stopwords

    Returns:
        Frozen stopword set

    Examples:
        >>> "happy" in build_stopwords()
        True
        >>> "happy" in build_stopwords(include_survey=False)
        False
        >>> "dog" in build_stopwords(["Dog"])
        True
    """
    words = set(STOPWORDS_EN)
    if include_survey:
        words |= SURVEY_STOPWORDS
    words |= {word.strip().lower() for word in custom if word.strip()}
    return frozenset(words)
