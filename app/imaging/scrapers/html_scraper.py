"""
Direct HTML scraper used when no scraping API is configured.
"""

from __future__ import annotations

from urllib.parse import urljoin

import requests
from bs4 import BeautifulSoup

from app.imaging.errors import NotFoundError, UpstreamError
from app.imaging.scrapers.base import PageScraper
from app.imaging.types import PageContent

NOT_FOUND_STATUS_CODES = {404, 410}


class HTMLPageScraper(PageScraper):
    """
    Fetch the product page itself and render links and images with BeautifulSoup.
    """

    def __init__(
        self,
        *,
        timeout_seconds: float,
        user_agent: str,
        session: requests.Session | None = None,
    ) -> None:
        super().__init__(timeout_seconds=timeout_seconds, session=session)
        self._headers = {"User-Agent": user_agent}

    def scrape(self, url: str) -> PageContent:
        try:
            response = self._session.get(
                url,
                headers=self._headers,
                timeout=self._timeout_seconds,
                allow_redirects=True,
            )
        except requests.RequestException as exc:
            raise UpstreamError(f"Page fetch failed for {url}: {exc}") from exc

        if response.status_code in NOT_FOUND_STATUS_CODES:
            raise NotFoundError(f"Page returned status={response.status_code} url={url}")
        try:
            response.raise_for_status()
        except requests.HTTPError as exc:
            raise UpstreamError(f"Page returned status={response.status_code} url={url}") from exc

        soup = BeautifulSoup(response.text, "html.parser")
        return PageContent(
            url=url,
            links=self._collect_links(soup, base_url=response.url or url),
            markdown=self._render_markdown(soup, base_url=response.url or url),
        )

    @staticmethod
    def _collect_links(soup: BeautifulSoup, *, base_url: str) -> tuple[str, ...]:
        seen: set[str] = set()
        links: list[str] = []
        for tag, attribute in (("a", "href"), ("img", "src"), ("link", "href")):
            for element in soup.find_all(tag):
                raw = (element.get(attribute) or "").strip()
                if not raw or raw.startswith(("#", "javascript:", "mailto:", "data:")):
                    continue
                absolute = urljoin(base_url, raw)
                if absolute not in seen:
                    seen.add(absolute)
                    links.append(absolute)
        return tuple(links)

    @staticmethod
    def _render_markdown(soup: BeautifulSoup, *, base_url: str) -> str:
        images = []
        for image in soup.find_all("img"):
            src = (image.get("src") or "").strip()
            if src and not src.startswith("data:"):
                alt = (image.get("alt") or "").strip()
                images.append(f"![{alt}]({urljoin(base_url, src)})")

        for element in soup(["script", "style", "noscript"]):
            element.decompose()
        text_lines = [line.strip() for line in soup.get_text("\n").splitlines() if line.strip()]
        return "\n".join([*text_lines, *images])
