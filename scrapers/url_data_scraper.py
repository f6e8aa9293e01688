"""Article metadata scraper: static fetch first, headless render when needed."""
import time
from typing import Mapping, Optional
from loguru import logger
import requests
from bs4.dammit import EncodingDetector
from core.config import Config
from scrapers.article_data import ArticleData
from scrapers.base_scraper import BaseScraper
from scrapers.errors import ExtractionError, MissingUrlError
from scrapers.js_detection import (
    DEFAULT_JS_INDICATORS,
    DEFAULT_JS_REQUIRED_DOMAINS,
    requires_javascript,
)
from scrapers.metadata_extractor import MetadataExtractor


class UrlDataScraper(BaseScraper):
    """Extract title, description, thumbnail and a body excerpt from a web page."""

    scraper_type = 'url_data'

    def __init__(self, **kwargs):
        """Initialize URL data scraper."""
        super().__init__(**kwargs)
        self.fetch_timeout = float(kwargs.get('fetch_timeout', self.config.get_float(self._key('fetch_timeout'), 10.0)))
        self.wait_until = self.scraper_config.get('wait_until') or 'networkidle'
        self.settle_delay = float(kwargs.get('settle_delay', self.config.get_float(self._key('settle_delay'), 2.0)))
        self.js_required_domains = self.config.get_list(
            self._key('js_required_domains'), list(DEFAULT_JS_REQUIRED_DOMAINS)
        )
        self.js_indicators = self.config.get_list(
            self._key('js_indicators'), list(DEFAULT_JS_INDICATORS)
        )

    def extract(self, url: str) -> ArticleData:
        """
        Extract article metadata from a URL.
        Tries a plain HTTP fetch first, renders with Playwright when the fetch
        fails or the page needs JavaScript.

        Args:
            url: Page URL

        Returns:
            ArticleData record

        Raises:
            MissingUrlError: if no URL was given
            ExtractionError: if rendering or parsing failed
        """
        if not url or not url.strip():
            raise MissingUrlError()

        start_time = time.time()
        try:
            html = self._fetch_html(url)
            article = MetadataExtractor(html, url, self.scraper_config).extract()
        except Exception as e:
            logger.error(f"[UrlData] Extraction failed for {url}: {e}")
            raise ExtractionError(str(e) or e.__class__.__name__) from e

        elapsed_time = round(time.time() - start_time, 2)
        logger.info(f"[UrlData] Extraction completed in {elapsed_time}s - {article.title!r}")
        return article

    def _fetch_html(self, url: str) -> str:
        """Return static HTML, or the rendered DOM when the static page is not usable."""
        use_browser = False
        html = ''

        try:
            html = self._fetch_static(url)
            if requires_javascript(html, url, self.js_required_domains, self.js_indicators):
                logger.info(f"[UrlData] Page needs JavaScript, rendering with Playwright: {url}")
                use_browser = True
        except requests.RequestException as e:
            logger.info(f"[UrlData] Static fetch failed ({e}), rendering with Playwright: {url}")
            use_browser = True

        if use_browser:
            html = self._render_with_playwright(url)

        return html

    def _fetch_static(self, url: str) -> str:
        """
        Plain GET with a browser user agent.

        When the Content-Type header carries no charset, the body is decoded
        with the charset the document declares (``<meta charset>``), then with
        the detected encoding, instead of requests' ISO-8859-1 default.

        Raises:
            requests.RequestException: on network errors, timeouts and non-2xx responses
        """
        response = requests.get(
            url,
            headers={'User-Agent': self.user_agent},
            timeout=self.fetch_timeout,
        )
        response.raise_for_status()

        if 'charset' not in response.headers.get('Content-Type', '').lower():
            declared = EncodingDetector.find_declared_encoding(response.content, is_html=True)
            response.encoding = declared or response.apparent_encoding
            logger.debug(f"[UrlData] No charset header, decoding as {response.encoding}")

        return response.text

    def _render_with_playwright(self, url: str) -> str:
        """
        Render the page in a fresh headless browser and return the serialized DOM.

        The browser is closed whether navigation succeeds or raises.
        """
        try:
            context = self._create_context()
            page = context.new_page()

            page.goto(url, wait_until=self.wait_until, timeout=self.timeout)

            # Let deferred scripts finish
            time.sleep(self.settle_delay)

            return page.content()
        finally:
            self.close()


def extract_url_data(form_data: Mapping, config: Optional[Config] = None) -> ArticleData:
    """
    Extract article metadata for the ``url`` field of submitted form data.

    Args:
        form_data: Mapping with a ``url`` entry (form fields, query params, dict)
        config: Configuration object

    Returns:
        ArticleData record
    """
    url = form_data.get('url') if form_data else None
    if not url or not str(url).strip():
        raise MissingUrlError()

    with UrlDataScraper(config=config) as scraper:
        return scraper.extract(str(url))
