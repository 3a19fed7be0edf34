"""
Application configuration management.

This module handles configuration from environment variables using Pydantic Settings.
"""

from typing import Dict, List, Optional, Set

from pydantic_settings import BaseSettings


def parse_csv_list(value: str) -> List[str]:
    """
    Split a comma-separated setting into a list of trimmed, non-empty items.

    Examples:
        >>> parse_csv_list("m, f,")
        ['m', 'f']
    """
    return [item.strip() for item in value.split(",") if item.strip()]


class Settings(BaseSettings):
    """
    Application configuration from environment variables.

    All settings can be overridden via environment variables with the same name.
    """

    # Logging
    log_level: str = "INFO"
    log_json: bool = True

    # Stopwords
    use_survey_stopwords: bool = True
    custom_stopwords: str = ""  # Comma-separated, added to the base set

    # Normalization
    removal_vocabulary: str = ""  # Comma-separated words dropped by the normalizer

    # N-gram extraction
    ngram_size: int = 2
    bigram_min_tokens: int = 2  # Records with a single token never yield bigrams

    # Processing
    workers: int = 1
    top_n: int = 20

    # Input tables
    text_column: str = "cleaned_hm"
    respondent_column: str = "wid"
    record_attribute_columns: str = "reflection_period"
    demographic_columns: str = "age,country,gender,marital,parenthood"

    # Allowed categorical values for grouped frequency tables
    group_allowed_values: Dict[str, List[str]] = {
        "gender": ["m", "f"],
        "marital": ["single", "married"],
        "parenthood": ["y", "n"],
        "reflection_period": ["24h", "3m"],
    }

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
    }

    def custom_stopword_list(self) -> List[str]:
        return parse_csv_list(self.custom_stopwords.lower())

    def removal_vocabulary_list(self) -> List[str]:
        return parse_csv_list(self.removal_vocabulary.lower())

    def allowed_values(self, attribute: str) -> Optional[Set[str]]:
        """
        Allowed values for a grouping attribute.

        Returns:
            Set of allowed values, or None when the attribute has no restriction
        """
        values = self.group_allowed_values.get(attribute)
        if values is None:
            return None
        return set(values)

    def groupable_attributes(self) -> List[str]:
        """Attributes loaded onto records, hence usable for grouped tables."""
        loaded = parse_csv_list(self.record_attribute_columns) + parse_csv_list(
            self.demographic_columns
        )
        return sorted(set(loaded) | set(self.group_allowed_values))


# Global settings instance
settings = Settings()
