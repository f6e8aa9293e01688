"""FastAPI application serving the URL data extractor."""
import sys
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

sys.path.insert(0, str(Path(__file__).resolve().parents[2]))

from core.config import Config
from lib.logging_setup import setup_logging
from app.routes import extraction

config = Config()
setup_logging(config)

app = FastAPI(
    title="URL Data Extractor API",
    description="Extracts article metadata from web pages",
    version="0.1.0",
)

cors = config.get_cors_config()
app.add_middleware(
    CORSMiddleware,
    allow_origins=cors['allowed_origins'],
    allow_credentials=cors['allow_credentials'],
    allow_methods=cors['allow_methods'],
    allow_headers=cors['allow_headers'],
)

app.include_router(extraction.router, prefix="/api/extract", tags=["extraction"])


@app.get("/health")
async def health():
    return {"status": "healthy", "service": app.title, "version": app.version}
