"""
CLI module for survey corpus analysis.

Provides command-line tools for batch processing of response files.
"""

from survey_corpus.cli.analyze import main as analyze_main

__all__ = ["analyze_main"]
