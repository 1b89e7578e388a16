"""
Scraping backend abstraction returning structured page content.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

import requests

from app.imaging.types import PageContent


class PageScraper(ABC):
    """
    Fetch one URL and return its links and a markdown rendering of its body.

    Implementations raise `NotFoundError` when the page itself cannot be
    reached or rendered, and `UpstreamError` when the backend fails.
    """

    def __init__(
        self,
        *,
        timeout_seconds: float,
        session: requests.Session | None = None,
    ) -> None:
        self._session = session or requests.Session()
        self._timeout_seconds = timeout_seconds

    @abstractmethod
    def scrape(self, url: str) -> PageContent:
        """
        Return structured content for `url`.
        """
