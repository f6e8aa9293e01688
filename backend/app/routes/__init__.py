"""Routes package."""
from app.routes import extraction

__all__ = ["extraction"]
