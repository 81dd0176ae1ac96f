"""
Product Scraper - FastAPI Application
Main entry point with REST API endpoints.
"""
import asyncio
from typing import List
from urllib.parse import urlparse

from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel, field_validator

from product_scraper import __version__
from product_scraper.config import config
from product_scraper.errors import FetchError, ScrapeError, UnsupportedPlatformError
from product_scraper.layers.extraction import ExtractionLayer
from product_scraper.layers.platform_detection import is_supported_url
from product_scraper.models.product import StoredProduct
from product_scraper.storage import ProductStorage
from product_scraper.utils.logger import get_logger, set_trace_id


# Initialize FastAPI app
app = FastAPI(
    title="Product Scraper",
    description="Populates catalog entries from Amazon and Flipkart product pages",
    version=__version__,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Initialize collaborators
extraction_layer = ExtractionLayer()
storage = ProductStorage()
# Bounds concurrent outbound fetches
scrape_slots = asyncio.Semaphore(config.MAX_CONCURRENT_SCRAPES)

logger = get_logger("main")


# Request/Response models
class ScrapeRequest(BaseModel):
    """Request model for scraping a product URL."""
    url: str

    @field_validator("url")
    @classmethod
    def validate_url(cls, value: str) -> str:
        value = value.strip()
        parsed = urlparse(value)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise ValueError("Please enter a valid URL")
        return value


class MessageResponse(BaseModel):
    message: str


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    """Malformed request bodies are client errors, reported like the other 400s."""
    logger.info("request_rejected", path=request.url.path, reason="validation_error")
    return JSONResponse(status_code=400, content={"detail": "Invalid URL format"})


# API Routes
@app.get("/api/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "version": __version__}


@app.get("/api/products", response_model=List[StoredProduct])
async def list_products():
    """List stored products, newest first."""
    return await storage.get_products()


@app.get("/api/products/{product_id}", response_model=StoredProduct)
async def get_product(product_id: str):
    """Get a single stored product."""
    product = await storage.get_product(product_id)
    if product is None:
        raise HTTPException(status_code=404, detail="Product not found")
    return product


@app.post("/api/products/scrape", response_model=StoredProduct, status_code=201)
async def scrape_product(request: ScrapeRequest):
    """
    Scrape a product page and store the result.

    Unsupported hosts, unreachable pages and unscrapable markup are client
    errors (400); anything else is a server error (500).
    """
    trace_id = set_trace_id()

    logger.info("scrape_request", url=request.url, trace_id=trace_id)

    if not is_supported_url(request.url):
        logger.info("scrape_rejected", url=request.url, reason="unsupported_platform")
        raise HTTPException(
            status_code=400,
            detail="Unsupported platform. Only Amazon and Flipkart URLs are supported.",
        )

    try:
        async with scrape_slots:
            scraped = await extraction_layer.extract(request.url)
    except (UnsupportedPlatformError, FetchError, ScrapeError) as e:
        logger.warning(
            "scrape_failed",
            url=request.url,
            error=e.message,
            error_type=type(e).__name__,
            status_code=getattr(e, "status_code", None),
        )
        raise HTTPException(status_code=400, detail=e.message)
    except Exception as e:
        logger.error("scrape_error", error=str(e), error_type=type(e).__name__, url=request.url)
        raise HTTPException(status_code=500, detail="Failed to process product URL")

    product = await storage.create_product(scraped)

    logger.info(
        "product_stored",
        product_id=product.id,
        platform=product.platform.value,
        title=product.title,
        sale_price=product.sale_price,
        original_price=product.original_price,
        discount=product.discount,
        category=product.category,
    )
    return product


@app.delete("/api/products/{product_id}", response_model=MessageResponse)
async def delete_product(product_id: str):
    """Delete a stored product."""
    deleted = await storage.delete_product(product_id)
    if not deleted:
        raise HTTPException(status_code=404, detail="Product not found")
    return MessageResponse(message="Product deleted successfully")


def run():
    """Console entry point."""
    import uvicorn
    uvicorn.run(app, host=config.HOST, port=config.PORT)


if __name__ == "__main__":
    run()
