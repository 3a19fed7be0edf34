# CSV input provider and writers

from .csv_loader import (
    build_records,
    load_records,
    read_demographics,
    write_cleaned_records,
    write_frequency_table,
)

__all__ = [
    "build_records",
    "load_records",
    "read_demographics",
    "write_cleaned_records",
    "write_frequency_table",
]
