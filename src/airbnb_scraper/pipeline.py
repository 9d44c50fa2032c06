# src/airbnb_scraper/pipeline.py
from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from typing import List, Optional, Protocol, Sequence, TextIO

from airbnb_scraper.config import ScrapeOptions
from airbnb_scraper.errors import ConfigurationError, ScraperError
from airbnb_scraper.extractors.airbnb import AirbnbExtractor
from airbnb_scraper.extractors.base import BaseExtractor, ParsedRecord
from airbnb_scraper.fetchers.http import HttpFetcher
from airbnb_scraper.serializers import serialize

logger = logging.getLogger(__name__)


class Fetcher(Protocol):
    async def fetch(self, url: str) -> str: ...


@dataclass
class ScrapeResult:
    """
    Outcome of a run: either every record, or the error that aborted it.
    """
    records: List[ParsedRecord] = field(default_factory=list)
    error: Optional[ScraperError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def _require_urls(urls: Sequence[str]) -> None:
    if not urls:
        raise ConfigurationError("no posting URLs given")


async def scrape(
    urls: Sequence[str],
    fetcher: Fetcher,
    extractor: Optional[BaseExtractor] = None,
) -> List[ParsedRecord]:
    """
    Download every posting concurrently, then extract them in input order.
    The first failed download aborts the whole scrape.
    """
    _require_urls(urls)
    extractor = extractor or AirbnbExtractor()

    # gather keeps results aligned with urls regardless of completion order
    documents = await asyncio.gather(*(fetcher.fetch(url) for url in urls))

    records = [extractor.extract(html) for html in documents]
    logger.info("Extracted %d postings", len(records))
    return records


async def run(
    urls: Sequence[str],
    options: ScrapeOptions,
    *,
    fetcher: Optional[Fetcher] = None,
    stream: Optional[TextIO] = None,
) -> ScrapeResult:
    try:
        _require_urls(urls)
        if options.output_format is None:
            raise ConfigurationError("no output format specified")

        if fetcher is None:
            async with HttpFetcher(timeout_seconds=options.timeout_seconds) as own_fetcher:
                records = await scrape(urls, own_fetcher)
        else:
            records = await scrape(urls, fetcher)

        serialize(records, options.output_format, stream)
    except ScraperError as exc:
        return ScrapeResult(error=exc)

    return ScrapeResult(records=records)
