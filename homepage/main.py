import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from homepage.routers import images, pages
from homepage.settings import settings

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper()),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if settings.posts_path.is_dir():
        logger.info(f"Serving posts from {settings.posts_path.resolve()}")
    else:
        logger.warning(f"Posts directory {settings.posts_path} not found, blog is empty")

    try:
        yield
    finally:
        logger.info("Homepage shut down")


app = FastAPI(title=settings.SITE_TITLE, lifespan=lifespan)

app.include_router(pages.router)
app.include_router(images.router)


@app.get("/healthz")
async def healthz():
    return {"message": "homepage is running"}
