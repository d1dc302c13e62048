import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from blogfront.routers import pages, posts
from blogfront.settings import settings

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper()),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    posts_path = settings.posts_path
    if posts_path.is_dir():
        logger.info(f"Serving posts from {posts_path.resolve()}")
    else:
        logger.warning(f"Posts directory {posts_path} does not exist")
    yield


app = FastAPI(
    title="blogfront", description="Markdown blog front end", lifespan=lifespan
)

app.include_router(posts.router)
app.include_router(pages.router)


@app.get("/health")
async def health():
    return {"message": "blogfront is running"}
