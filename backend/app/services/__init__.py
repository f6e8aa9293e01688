"""Services package."""
from app.services.url_data_service import UrlDataService

__all__ = ["UrlDataService"]
