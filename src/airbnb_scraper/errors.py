# src/airbnb_scraper/errors.py
from __future__ import annotations


class ScraperError(Exception):
    """Base class for every failure that aborts a scrape run."""


class NetworkError(ScraperError):
    """
    Transport or HTTP failure while downloading a posting.
    Carries the URL and the underlying cause.
    """

    def __init__(self, url: str, cause: object) -> None:
        self.url = url
        self.cause = cause
        super().__init__(f"failed to fetch {url}: {cause}")


class ParseError(ScraperError):
    pass


class ExtractionError(ScraperError):
    pass


class ConfigurationError(ScraperError):
    pass
