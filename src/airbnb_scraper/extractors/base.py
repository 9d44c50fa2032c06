# src/airbnb_scraper/extractors/base.py
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Dict, Optional

# Flat field name -> value mapping. Key sets may differ between records.
ParsedRecord = Dict[str, Optional[str]]


class BaseExtractor(ABC):
    """
    Contract for all extractors:
    input: raw HTML of one posting
    output: ParsedRecord
    """

    @abstractmethod
    def extract(self, html: str) -> ParsedRecord:
        raise NotImplementedError
