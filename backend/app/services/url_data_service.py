"""
URL data service.

Runs the synchronous scraper pipeline off the event loop.
"""
import asyncio
from typing import Mapping, Optional
from loguru import logger

from core.config import Config
from scrapers import ArticleData, extract_url_data


class UrlDataService:
    """Service wrapping article metadata extraction for the API."""

    def __init__(self, config: Optional[Config] = None):
        self.config = config

    async def extract(self, form_data: Mapping) -> ArticleData:
        """
        Extract article metadata for submitted form data.

        Playwright's sync API cannot run inside the event loop, so the whole
        pipeline runs in a worker thread.
        """
        logger.info(f"Extracting URL data for {form_data.get('url')!r}")
        return await asyncio.to_thread(extract_url_data, form_data, self.config)
