# src/airbnb_scraper/config.py
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

# Host profile links on listing pages are site-relative
AIRBNB_HOST = "https://airbnb.com"


class OutputFormat(str, Enum):
    CSV = "csv"
    JSON = "json"


@dataclass(frozen=True)
class ScrapeOptions:
    """
    What the CLI hands to the pipeline.
    output_format is None when no format flag was given; the pipeline
    reports that as a ConfigurationError.
    """
    output_format: Optional[OutputFormat] = None
    verbose: bool = False
    timeout_seconds: Optional[float] = None


def resolve_output_format(*, csv: bool = False, json: bool = False) -> Optional[OutputFormat]:
    if csv:
        return OutputFormat.CSV
    if json:
        return OutputFormat.JSON
    return None
