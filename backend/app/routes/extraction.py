"""
URL data extraction routes.
"""
from fastapi import APIRouter, Form, HTTPException
from pydantic import BaseModel
from typing import Optional
from loguru import logger

from core.config import Config
from scrapers import ArticleData, ExtractionError, MissingUrlError
from app.services.url_data_service import UrlDataService

router = APIRouter()

# Lazy initialization
_service: Optional[UrlDataService] = None


def get_url_data_service() -> UrlDataService:
    """Get or create the URL data service."""
    global _service

    if _service is None:
        _service = UrlDataService(Config())

    return _service


class ArticleDataResponse(BaseModel):
    """Response model for extracted article metadata."""
    url: str
    siteName: str
    title: str
    description: str
    publishedAt: str
    thumbnail: str
    content: str
    isLiked: Optional[bool] = None
    isArchived: Optional[bool] = None

    @classmethod
    def from_article(cls, article: ArticleData) -> "ArticleDataResponse":
        return cls(
            url=article.url,
            siteName=article.site_name,
            title=article.title,
            description=article.description,
            publishedAt=article.published_at,
            thumbnail=article.thumbnail,
            content=article.content,
            isLiked=article.is_liked,
            isArchived=article.is_archived,
        )


@router.post("", response_model=ArticleDataResponse)
async def extract_url(url: Optional[str] = Form(None)):
    """Extract article metadata from the submitted URL."""
    service = get_url_data_service()

    try:
        article = await service.extract({"url": url})
    except MissingUrlError as e:
        logger.warning(f"Rejected extraction request: {e}")
        raise HTTPException(status_code=400, detail=str(e))
    except ExtractionError as e:
        logger.error(f"Failed to extract {url}: {e}")
        raise HTTPException(status_code=502, detail=str(e))

    return ArticleDataResponse.from_article(article)
