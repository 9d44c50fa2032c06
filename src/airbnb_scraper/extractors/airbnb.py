# src/airbnb_scraper/extractors/airbnb.py
from __future__ import annotations

import logging
import re
from typing import Optional

from bs4 import BeautifulSoup
from bs4.builder import ParserRejectedMarkup

from airbnb_scraper.config import AIRBNB_HOST
from airbnb_scraper.errors import ExtractionError, ParseError
from airbnb_scraper.extractors.base import BaseExtractor, ParsedRecord

logger = logging.getLogger(__name__)

TITLE_SELECTOR = "#listing_name"
PRICE_SELECTORS = ("#dayly_price_string", "#price_amount")
HOST_IMAGE_SELECTOR = "#host-profile a > img"
DETAILS_SELECTOR = "#details-column .row > .col-9 > .row > .col-6 > div"

_PRICE_RE = re.compile(r"\$(.+)")
_WHITESPACE_RE = re.compile(r"\s+")


def _normalize_label(label: str) -> str:
    return _WHITESPACE_RE.sub("_", label.strip().lower())


def _select_text(soup: BeautifulSoup, selector: str) -> str:
    el = soup.select_one(selector)
    return el.get_text() if el else ""


class AirbnbExtractor(BaseExtractor):
    """
    Extracts from an Airbnb listing page:
    - title
    - price_per_night (None when no "$" amount is shown)
    - host_profile_url (required, raises ExtractionError when missing)
    - one field per "Label: value" row in the details column
    """

    def extract(self, html: str) -> ParsedRecord:
        soup = self.parse(html)

        record: ParsedRecord = {
            "title": self.get_title(soup),
            "price_per_night": self.get_price(soup),
            "host_profile_url": self.get_host_url(soup),
        }
        # Detail rows are merged last and overwrite fixed fields on collision
        record.update(self.get_details(soup))
        return record

    def parse(self, html: str) -> BeautifulSoup:
        if not isinstance(html, (str, bytes)):
            raise ParseError(f"expected HTML text, got {type(html).__name__}")
        try:
            return BeautifulSoup(html, "lxml")
        except ParserRejectedMarkup as exc:
            raise ParseError(f"could not parse document: {exc}") from exc

    def get_title(self, soup: BeautifulSoup) -> str:
        return _select_text(soup, TITLE_SELECTOR).strip()

    def get_price(self, soup: BeautifulSoup) -> Optional[str]:
        text = ""
        for selector in PRICE_SELECTORS:
            text = _select_text(soup, selector)
            if text:
                break

        m = _PRICE_RE.search(text)
        return m.group(1) if m else None

    def get_host_url(self, soup: BeautifulSoup) -> str:
        img = soup.select_one(HOST_IMAGE_SELECTOR)
        if img is None:
            raise ExtractionError(f"no host profile image matching {HOST_IMAGE_SELECTOR!r}")

        href = img.parent.get("href")
        if not href:
            raise ExtractionError("host profile anchor has no href")
        return AIRBNB_HOST + href

    def get_details(self, soup: BeautifulSoup) -> ParsedRecord:
        details: ParsedRecord = {}
        for el in soup.select(DETAILS_SELECTOR):
            text = el.get_text().strip()
            if not text:
                continue

            label, sep, value = text.partition(":")
            if not sep:
                logger.warning("Detail row without a label separator: %r", text)
                details[_normalize_label(label)] = None
                continue

            details[_normalize_label(label)] = value.strip()
        return details
