"""
Command-line interface for survey corpus analysis.

Loads survey responses from CSV, cleans them with stem completion and writes
the cleaned corpus plus unigram/bigram frequency tables.

Usage:
    # Cleaned corpus and summary on stdout
    survey-corpus cleaned_hm.csv

    # With demographics and grouped tables written to a directory
    survey-corpus cleaned_hm.csv --demographics demographic.csv \\
        --group-by gender --group-by parenthood --output-dir out/

    # Extra stopwords, parallel counting
    survey-corpus cleaned_hm.csv --stopword friend --stopword family --workers 4
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Dict, List, Optional

from survey_corpus.config import parse_csv_list, settings
from survey_corpus.completion import index_summary
from survey_corpus.ingestion import load_records, write_cleaned_records, write_frequency_table
from survey_corpus.logging_config import get_logger, setup_logging
from survey_corpus.pipeline import CorpusAnalysis, run_pipeline
from survey_corpus.tokenization import build_stopwords


# Setup logging
setup_logging()
logger = get_logger(__name__)


# ============================================================================
# CLI FUNCTIONS
# ============================================================================

def write_outputs(analysis: CorpusAnalysis, output_dir: Path) -> List[Path]:
    """
    Write cleaned records and every frequency table to `output_dir`.

    Args:
        analysis: Pipeline result
        output_dir: Target directory (created if missing)

    Returns:
        Paths written
    """
    output_dir = Path(output_dir)
    written = [
        write_cleaned_records(analysis.cleaned_records, output_dir / "cleaned_records.csv"),
        write_frequency_table(analysis.unigrams, output_dir / "unigrams.csv"),
        write_frequency_table(analysis.bigrams, output_dir / "bigrams.csv"),
    ]
    for attribute, table in analysis.grouped_unigrams.items():
        written.append(write_frequency_table(table, output_dir / f"unigrams_by_{attribute}.csv"))
    for attribute, table in analysis.grouped_bigrams.items():
        written.append(write_frequency_table(table, output_dir / f"bigrams_by_{attribute}.csv"))
    return written


def build_summary(analysis: CorpusAnalysis, top_n: int) -> Dict:
    """
    JSON-serializable summary of a corpus run.

    Args:
        analysis: Pipeline result
        top_n: Number of top n-grams per table

    Returns:
        Summary dict
    """
    summary = {
        "records": analysis.record_count,
        "tokens": analysis.token_count,
        "distinct_stems": len(analysis.index),
        "pipeline_version": analysis.pipeline_version.model_dump(),
        "top_completions": [
            {"stem": s, "word": w, "support": c} for s, w, c in index_summary(analysis.index, top_n)
        ],
        "top_unigrams": analysis.unigrams.most_common(top_n),
        "top_bigrams": analysis.bigrams.most_common(top_n),
        "grouped": {},
    }
    for attribute, table in analysis.grouped_unigrams.items():
        bigrams = analysis.grouped_bigrams[attribute]
        summary["grouped"][attribute] = {
            group: {
                "top_unigrams": table.most_common(top_n, group=group),
                "top_bigrams": bigrams.most_common(top_n, group=group),
            }
            for group in table.groups()
        }
    return summary


# ============================================================================
# MAIN CLI
# ============================================================================

def main(argv: Optional[List[str]] = None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Survey corpus analysis - clean answers with stem completion and count n-grams",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Summary of a response file
  %(prog)s cleaned_hm.csv

  # Grouped tables by gender and parenthood
  %(prog)s cleaned_hm.csv -d demographic.csv -g gender -g parenthood -o out/

  # Extra stopwords from the environment
  export CUSTOM_STOPWORDS="friend,family"
  %(prog)s cleaned_hm.csv
        """
    )

    parser.add_argument(
        "responses",
        type=str,
        help="Path to the response CSV file"
    )

    parser.add_argument(
        "--demographics",
        "-d",
        type=str,
        default=None,
        help="Path to the demographic CSV file, keyed by respondent id"
    )

    parser.add_argument(
        "--output-dir",
        "-o",
        type=str,
        default=None,
        help="Directory for cleaned_records.csv and frequency tables (default: none)"
    )

    parser.add_argument(
        "--group-by",
        "-g",
        action="append",
        default=[],
        help=f"Attribute to group frequency tables by (repeatable; one of: "
             f"{', '.join(settings.groupable_attributes())})"
    )

    parser.add_argument(
        "--stopword",
        "-s",
        action="append",
        default=[],
        help="Extra stopword (repeatable)"
    )

    parser.add_argument(
        "--no-survey-stopwords",
        action="store_true",
        help="Only use the base English stopword list"
    )

    parser.add_argument(
        "--workers",
        "-w",
        type=int,
        default=None,
        help=f"Worker processes for the counting pass (default: {settings.workers})"
    )

    parser.add_argument(
        "--top-n",
        "-n",
        type=int,
        default=settings.top_n,
        help=f"Number of top n-grams in the summary (default: {settings.top_n})"
    )

    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose output"
    )

    args = parser.parse_args(argv)

    if args.verbose:
        setup_logging(log_level="DEBUG")

    responses_path = Path(args.responses)
    if not responses_path.is_file():
        print(f"Error: Path not found: {responses_path}", file=sys.stderr)
        sys.exit(1)

    demographics_path = Path(args.demographics) if args.demographics else None
    if demographics_path is not None and not demographics_path.is_file():
        print(f"Error: Path not found: {demographics_path}", file=sys.stderr)
        sys.exit(1)

    groupable = settings.groupable_attributes()
    unknown = [a for a in args.group_by if a not in groupable]
    if unknown:
        print(f"Error: Unknown group-by attribute(s): {', '.join(unknown)}", file=sys.stderr)
        sys.exit(1)

    try:
        records = load_records(
            responses_path,
            demographics_path,
            text_column=settings.text_column,
            respondent_column=settings.respondent_column,
            record_attribute_columns=parse_csv_list(settings.record_attribute_columns),
            demographic_columns=parse_csv_list(settings.demographic_columns),
        )

        stopwords = build_stopwords(
            settings.custom_stopword_list() + args.stopword,
            include_survey=settings.use_survey_stopwords and not args.no_survey_stopwords,
        )

        analysis = run_pipeline(
            records,
            stopwords=stopwords,
            group_by=args.group_by,
            workers=args.workers,
        )

        if args.output_dir:
            written = write_outputs(analysis, Path(args.output_dir))
            if args.verbose:
                print(f"Wrote {len(written)} files to {args.output_dir}", file=sys.stderr)

        print(json.dumps(build_summary(analysis, args.top_n), ensure_ascii=False, indent=2))

        if args.verbose:
            print(
                f"\n✓ Processed {analysis.record_count} records "
                f"in {analysis.processing_time_ms:.0f} ms",
                file=sys.stderr,
            )

    except Exception as e:
        logger.error("cli_failed", error=str(e), exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
