from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, Query, Request
from fastapi.responses import JSONResponse

from post_aggregator.collectors.base import BaseCollector
from post_aggregator.collectors.blog import BlogPostCollector
from post_aggregator.config import settings
from post_aggregator.errors import AggregatorError
from post_aggregator.pipeline import handle
from post_aggregator.utils.logging import get_logger, setup_logging

setup_logging()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("service_started", environment=settings.app_env, upstream=settings.upstream_url)
    yield
    logger.info("service_stopped")


app = FastAPI(
    title="Blog Post Aggregator",
    description=(
        "Fetches blog posts for several tags concurrently from the upstream API "
        "and returns them deduplicated and sorted."
    ),
    version="1.0.0",
    lifespan=lifespan,
)


def get_collector() -> BaseCollector:
    return BlogPostCollector()


@app.exception_handler(AggregatorError)
async def aggregator_error_handler(request: Request, exc: AggregatorError) -> JSONResponse:
    return JSONResponse(status_code=exc.status, content=exc.to_envelope())


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error("unhandled_error", path=request.url.path, error=str(exc))
    return JSONResponse(status_code=500, content=AggregatorError().to_envelope())


@app.get("/api/ping", tags=["Health"])
async def ping():
    return {"success": True}


@app.get("/api/health", tags=["Health"], openapi_extra={"security": []})
async def health():
    """Liveness probe with service metadata."""
    return {
        "status": "ok",
        "service": "post-aggregator",
        "environment": settings.app_env,
    }


@app.get("/api/posts", tags=["Posts"])
async def list_posts(
    tags: str | None = Query(default=None, description="Comma-separated tags"),
    sort_by: str | None = Query(default=None, alias="sortBy"),
    direction: str | None = Query(default=None),
    collector: BaseCollector = Depends(get_collector),
):
    posts = await handle(tags, sort_by, direction, collector=collector)
    return {"posts": [post.to_dict() for post in posts]}
