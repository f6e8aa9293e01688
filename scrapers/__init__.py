# Scraper modules
from .article_data import ArticleData
from .errors import ExtractionError, MissingUrlError
from .js_detection import requires_javascript
from .metadata_extractor import MetadataExtractor
from .url_data_scraper import UrlDataScraper, extract_url_data

__all__ = [
    'ArticleData',
    'ExtractionError',
    'MissingUrlError',
    'MetadataExtractor',
    'UrlDataScraper',
    'extract_url_data',
    'requires_javascript',
]
