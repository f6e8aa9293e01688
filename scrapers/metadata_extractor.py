"""Ordered-fallback metadata extraction from a page's HTML."""
from datetime import datetime, timezone
from typing import Dict, List, Optional
from urllib.parse import urljoin, urlparse

from bs4 import BeautifulSoup
from dateutil import parser as date_parser
from loguru import logger

from scrapers.article_data import ArticleData
from utils.text_normalizer import DISPLAY_FIELD_LIMIT, normalize_whitespace, truncate_display

DEFAULT_CONTENT_SELECTORS = [
    'article',
    '.post-content',
    '.entry-content',
    '.content',
    '.post',
    'main',
    '.article-body',
    '.markdown-section',  # Qiita
    '.it-MdContent',      # Qiita
]
DEFAULT_NOISE_SELECTORS = 'script, style, nav, header, footer, aside'
DEFAULT_CONTENT_LIMIT = 300
DEFAULT_BODY_LIMIT = 1000
DEFAULT_TITLE = 'No Title'

# Attribute/prefix pairs tried for every logical meta property, in order
META_VARIANTS = [
    ('property', ''),
    ('name', ''),
    ('property', 'og:'),
    ('name', 'og:'),
    ('property', 'twitter:'),
    ('name', 'twitter:'),
]

# Two different fill-ins reveal date parts missing from the source string
_FILL_A = datetime(2000, 1, 1)
_FILL_B = datetime(2001, 2, 2)


def _utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat(timespec='milliseconds').replace('+00:00', 'Z')


class MetadataExtractor:
    """Populate an ArticleData record from one HTML document."""

    def __init__(self, html: str, url: str, config: Optional[Dict] = None):
        """
        Args:
            html: Static or rendered page HTML
            url: Page URL (echoed into the record, used for hostname and relative links)
            config: Scraper config section; selector tables and limits override the defaults
        """
        config = config or {}
        self.url = url
        self.soup = BeautifulSoup(html or '', 'html.parser')
        self.content_selectors: List[str] = config.get('content_selectors') or DEFAULT_CONTENT_SELECTORS
        self.noise_selectors: str = config.get('noise_selectors') or DEFAULT_NOISE_SELECTORS
        self.content_limit = int(config.get('content_limit', DEFAULT_CONTENT_LIMIT))
        self.body_limit = int(config.get('body_limit', DEFAULT_BODY_LIMIT))
        self.display_limit = int(config.get('display_field_limit', DISPLAY_FIELD_LIMIT))
        self.default_title = config.get('default_title', DEFAULT_TITLE)

    def get_meta_content(self, prop: str) -> str:
        """Return the first non-empty ``content`` among the meta variants of ``prop``."""
        for attr, prefix in META_VARIANTS:
            element = self.soup.select_one(f'meta[{attr}="{prefix}{prop}"]')
            if element is None:
                continue
            content = (element.get('content') or '').strip()
            if content:
                return content
        return ''

    def _first_meta(self, *props: str) -> str:
        for prop in props:
            value = self.get_meta_content(prop)
            if value:
                return value
        return ''

    def _element_text(self, selector: str) -> str:
        element = self.soup.select_one(selector)
        if element is None:
            return ''
        return normalize_whitespace(element.get_text())

    def get_site_name(self) -> str:
        site_name = self._first_meta('site_name', 'og:site_name')
        if site_name:
            return site_name

        parts = self._element_text('title').split(' | ')
        if len(parts) > 1 and parts[1].strip():
            return parts[1]

        return urlparse(self.url).hostname or ''

    def get_title(self) -> str:
        return (
            self._first_meta('title', 'og:title')
            or self._element_text('h1')
            or self._element_text('title')
            or self.default_title
        )

    def get_description(self) -> str:
        return self._first_meta('description', 'og:description', 'twitter:description')

    def get_published_at(self) -> str:
        """Modified time wins over published time; falls back to the current time."""
        raw = self._first_meta('article:modified_time', 'article:published_time')
        if not raw:
            time_element = self.soup.select_one('time[datetime]')
            if time_element is not None:
                raw = (time_element.get('datetime') or '').strip()
        if not raw:
            return _utc_now_iso()

        try:
            parsed = date_parser.parse(raw, default=_FILL_A)
            if parsed.date() != date_parser.parse(raw, default=_FILL_B).date():
                # Year-only or year-month values stay as written
                return raw
            return parsed.isoformat()
        except (ValueError, OverflowError) as e:
            logger.debug(f"[UrlData] Keeping unparsed date {raw!r}: {e}")
            return raw

    def get_thumbnail(self) -> str:
        image = self._first_meta('image', 'og:image', 'twitter:image')
        if image and not image.startswith(('http://', 'https://', '//', 'data:')):
            image = urljoin(self.url, image)
        return image

    def get_content(self) -> str:
        """
        Body excerpt from the first matching content container.

        Noise elements are dropped from the matched subtree before reading its
        text. Without a container the whole body is used with a larger cap.
        """
        for selector in self.content_selectors:
            element = self.soup.select_one(selector)
            if element is not None:
                logger.debug(f"[UrlData] Content matched selector: {selector}")
                return self._clean_text(element)[:self.content_limit]

        body = self.soup.body
        if body is not None:
            return self._clean_text(body)[:self.body_limit]

        return ''

    def _clean_text(self, element) -> str:
        for noise in element.select(self.noise_selectors):
            noise.decompose()
        return normalize_whitespace(element.get_text())

    def extract(self) -> ArticleData:
        """Build the full record; display fields are normalized and capped."""
        limit = self.display_limit
        return ArticleData(
            url=self.url,
            site_name=truncate_display(self.get_site_name(), limit),
            title=truncate_display(self.get_title(), limit),
            description=truncate_display(self.get_description(), limit),
            published_at=self.get_published_at(),
            thumbnail=truncate_display(self.get_thumbnail(), limit),
            content=self.get_content(),
        )
