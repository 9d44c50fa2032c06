"""Shared fixtures: listing page HTML builders and an in-memory fetcher."""

from __future__ import annotations

import asyncio
from typing import Dict, List, Optional

import pytest

from airbnb_scraper.errors import NetworkError


def listing_html(
    title: str = "  Cozy Loft \n",
    daily_price: str = "$120/night",
    price_amount: str = "",
    host_href: Optional[str] = "/users/show/42",
    details: Optional[List[str]] = None,
) -> str:
    """Build a listing page with the structure the extractor queries."""
    if details is None:
        details = ["Bedrooms: 2", "Bathrooms: 1"]

    host = ""
    if host_href is not None:
        host = f'<div id="host-profile"><a href="{host_href}"><img src="/host.jpg"></a></div>'

    rows = "".join(f"<div>{text}</div>" for text in details)
    return f"""
    <html><body>
      <h1 id="listing_name">{title}</h1>
      <span id="dayly_price_string">{daily_price}</span>
      <span id="price_amount">{price_amount}</span>
      {host}
      <div id="details-column">
        <div class="row">
          <div class="col-9">
            <div class="row">
              <div class="col-6">{rows}</div>
            </div>
          </div>
        </div>
      </div>
    </body></html>
    """


class FakeFetcher:
    """Serves canned pages by URL; records every URL it was asked for."""

    def __init__(
        self,
        pages: Dict[str, str],
        failing: tuple = (),
        delays: Optional[Dict[str, float]] = None,
    ) -> None:
        self.pages = pages
        self.failing = set(failing)
        self.delays = delays or {}
        self.requested: List[str] = []

    async def fetch(self, url: str) -> str:
        self.requested.append(url)
        await asyncio.sleep(self.delays.get(url, 0))
        if url in self.failing:
            raise NetworkError(url, "connection refused")
        return self.pages[url]


@pytest.fixture
def make_listing():
    return listing_html
