import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException

from blogfront import dependencies as deps
from blogfront.exceptions import MalformedFrontMatter, PostNotFound, UnreadableFile
from blogfront.schemas.blog import PostDetail, PostSummary
from blogfront.services.posts_service import PostsService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api")


@router.get("/posts", response_model=List[PostSummary])
def list_posts(service: PostsService = Depends(deps.get_posts_service)):
    """Get all posts metadata, newest first."""
    try:
        return service.list_posts()
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error listing posts: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve posts")


@router.get("/posts/{slug}", response_model=PostDetail)
def get_post(
    slug: str,
    service: PostsService = Depends(deps.get_posts_service),
):
    """Get a single post by slug, with its body rendered as HTML."""
    try:
        return service.get_post(slug)
    except HTTPException:
        raise
    except PostNotFound:
        raise HTTPException(status_code=404, detail="Post not found")
    except MalformedFrontMatter as e:
        logger.error(f"Cannot render post {slug}: {e}")
        raise HTTPException(status_code=500, detail="Failed to render post")
    except UnreadableFile as e:
        logger.error(f"Cannot read post {slug}: {e}")
        raise HTTPException(status_code=500, detail="Failed to read post")
    except Exception as e:
        logger.error(f"Unexpected error retrieving post {slug}: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve post")
