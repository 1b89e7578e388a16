"""
Firecrawl-compatible scraping API client.
"""

from __future__ import annotations

import logging
from typing import Any

import requests

from app.imaging.errors import NotFoundError, UpstreamError
from app.imaging.logging_utils import log_event
from app.imaging.scrapers.base import PageScraper
from app.imaging.types import PageContent

logger = logging.getLogger(__name__)


class FirecrawlScraper(PageScraper):
    """
    Requests markdown and links for a page from a `POST /scrape` API.
    """

    def __init__(
        self,
        *,
        base_url: str,
        api_key: str | None,
        timeout_seconds: float,
        session: requests.Session | None = None,
    ) -> None:
        super().__init__(timeout_seconds=timeout_seconds, session=session)
        self._endpoint = f"{base_url.rstrip('/')}/scrape"
        self._api_key = api_key

    def scrape(self, url: str) -> PageContent:
        headers = {"Content-Type": "application/json"}
        if self._api_key:
            headers["Authorization"] = f"Bearer {self._api_key}"

        try:
            response = self._session.post(
                self._endpoint,
                json={"url": url, "formats": ["markdown", "links"]},
                headers=headers,
                timeout=self._timeout_seconds,
            )
            response.raise_for_status()
        except requests.HTTPError as exc:
            status_code = exc.response.status_code if exc.response is not None else None
            log_event(
                logger,
                logging.WARNING,
                "scrape_backend_rejected",
                url=url,
                status_code=status_code,
            )
            raise UpstreamError(f"Scraping backend returned status={status_code} for {url}") from exc
        except requests.RequestException as exc:
            raise UpstreamError(f"Scraping backend unreachable for {url}: {exc}") from exc

        try:
            payload = response.json()
        except ValueError as exc:
            raise UpstreamError("Scraping backend response was not valid JSON.") from exc

        return self._parse_payload(url=url, payload=payload)

    @staticmethod
    def _parse_payload(*, url: str, payload: Any) -> PageContent:
        if not isinstance(payload, dict) or not payload.get("success", False):
            error = payload.get("error") if isinstance(payload, dict) else None
            raise NotFoundError(f"Page could not be scraped url={url} error={error}")

        data = payload.get("data")
        if not isinstance(data, dict):
            raise NotFoundError(f"Scraping backend returned no page data for {url}")

        metadata = data.get("metadata") if isinstance(data.get("metadata"), dict) else {}
        page_status = metadata.get("statusCode")
        if isinstance(page_status, int) and page_status >= 400:
            raise NotFoundError(f"Page returned status={page_status} url={url}")

        raw_links = data.get("links") or []
        links = tuple(link for link in raw_links if isinstance(link, str) and link.strip())
        markdown = data.get("markdown") if isinstance(data.get("markdown"), str) else ""
        return PageContent(url=url, links=links, markdown=markdown)
