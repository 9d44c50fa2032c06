# src/airbnb_scraper/fetchers/http.py
from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Optional

import aiohttp

from airbnb_scraper.errors import NetworkError

logger = logging.getLogger(__name__)


@dataclass
class HttpResponse:
    url: str
    status: int
    text: str
    content_type: str | None = None


class HttpFetcher:
    """
    Small wrapper around aiohttp.
    - One session per fetcher, opened with `async with`
    - Plain GET: no custom headers, cookies or retries
    - Every transport failure or non-2xx status becomes a NetworkError
    """

    def __init__(self, *, timeout_seconds: Optional[float] = None) -> None:
        self._timeout = aiohttp.ClientTimeout(total=timeout_seconds) if timeout_seconds else None
        self._session: Optional[aiohttp.ClientSession] = None

    async def __aenter__(self) -> "HttpFetcher":
        if self._timeout is not None:
            self._session = aiohttp.ClientSession(timeout=self._timeout)
        else:
            self._session = aiohttp.ClientSession()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if self._session:
            await self._session.close()
            self._session = None

    def _require_session(self) -> aiohttp.ClientSession:
        if not self._session:
            raise RuntimeError("HttpFetcher session not started. Use: `async with HttpFetcher() as f:`")
        return self._session

    async def fetch_text(self, url: str) -> HttpResponse:
        """
        GET the URL and return the decoded body.
        Raises NetworkError on DNS, connection, timeout or HTTP status failures.
        """
        session = self._require_session()

        logger.info('Downloading information for posting "%s"...', url)
        try:
            async with session.get(url, allow_redirects=True) as resp:
                resp.raise_for_status()
                text = await resp.text(errors="ignore")
                return HttpResponse(
                    url=str(resp.url),
                    status=resp.status,
                    text=text,
                    content_type=resp.headers.get("Content-Type"),
                )
        except (aiohttp.ClientError, asyncio.TimeoutError) as exc:
            raise NetworkError(url, exc) from exc

    async def fetch(self, url: str) -> str:
        resp = await self.fetch_text(url)
        return resp.text
