# src/airbnb_scraper/serializers.py
from __future__ import annotations

import csv
import io
import json
import sys
from typing import List, Optional, Sequence, TextIO

from airbnb_scraper.config import OutputFormat
from airbnb_scraper.errors import ConfigurationError
from airbnb_scraper.extractors.base import ParsedRecord


def csv_columns(records: Sequence[ParsedRecord]) -> List[str]:
    """Union of keys across all records, in first-seen order."""
    columns: dict[str, None] = {}
    for record in records:
        for key in record:
            columns.setdefault(key, None)
    return list(columns)


def to_json(records: Sequence[ParsedRecord]) -> str:
    return json.dumps(list(records), indent=2, ensure_ascii=False) + "\n"


def to_csv(records: Sequence[ParsedRecord]) -> str:
    buf = io.StringIO()
    writer = csv.DictWriter(buf, fieldnames=csv_columns(records), restval="", lineterminator="\n")
    writer.writeheader()
    writer.writerows(records)
    return buf.getvalue()


def render(records: Sequence[ParsedRecord], output_format: Optional[OutputFormat]) -> str:
    if output_format is None:
        raise ConfigurationError("no output format specified")
    if output_format == OutputFormat.JSON:
        return to_json(records)
    return to_csv(records)


def serialize(
    records: Sequence[ParsedRecord],
    output_format: Optional[OutputFormat],
    stream: Optional[TextIO] = None,
) -> None:
    """
    Render the whole document, then write it in one go.
    Nothing reaches the stream if rendering fails.
    """
    out = render(records, output_format)
    (stream or sys.stdout).write(out)
