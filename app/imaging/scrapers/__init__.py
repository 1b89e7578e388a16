"""
Scraping backend exports.
"""

from app.imaging.scrapers.base import PageScraper
from app.imaging.scrapers.firecrawl_scraper import FirecrawlScraper
from app.imaging.scrapers.html_scraper import HTMLPageScraper

__all__ = ["FirecrawlScraper", "HTMLPageScraper", "PageScraper"]
