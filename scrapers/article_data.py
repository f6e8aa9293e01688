"""Result record produced by the URL data scraper."""
from dataclasses import dataclass, asdict
from typing import Optional


@dataclass
class ArticleData:
    """Metadata extracted from one web page.

    String fields are always present; an unknown value is the empty string.
    ``is_liked`` and ``is_archived`` are left to the caller.
    """
    url: str
    site_name: str = ''
    title: str = ''
    description: str = ''
    published_at: str = ''
    thumbnail: str = ''
    content: str = ''
    is_liked: Optional[bool] = None
    is_archived: Optional[bool] = None

    def to_dict(self) -> dict:
        return asdict(self)
