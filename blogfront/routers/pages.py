import logging

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from blogfront import dependencies as deps
from blogfront.exceptions import MalformedFrontMatter, PostNotFound, UnreadableFile
from blogfront.services.posts_service import PostsService
from blogfront.settings import Settings

logger = logging.getLogger(__name__)

router = APIRouter(default_response_class=HTMLResponse)


@router.get("/")
def index(
    request: Request,
    service: PostsService = Depends(deps.get_posts_service),
    templates: Jinja2Templates = Depends(deps.get_templates),
    current_settings: Settings = Depends(deps.get_settings),
):
    try:
        posts = service.list_posts()
    except Exception as e:
        logger.error(f"Unexpected error listing posts: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve posts")

    return templates.TemplateResponse(
        request,
        "index.html",
        {
            "posts": posts,
            "blog_title": current_settings.BLOG_TITLE,
            "blog_description": current_settings.BLOG_DESCRIPTION,
        },
    )


@router.get("/posts/{slug}")
def show_post(
    slug: str,
    request: Request,
    service: PostsService = Depends(deps.get_posts_service),
    templates: Jinja2Templates = Depends(deps.get_templates),
    current_settings: Settings = Depends(deps.get_settings),
):
    try:
        post = service.get_post(slug)
    except PostNotFound:
        raise HTTPException(status_code=404, detail="Post not found")
    except (MalformedFrontMatter, UnreadableFile) as e:
        logger.error(f"Cannot render post {slug}: {e}")
        raise HTTPException(status_code=500, detail="Failed to render post")
    except Exception as e:
        logger.error(f"Unexpected error retrieving post {slug}: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve post")

    return templates.TemplateResponse(
        request,
        "post.html",
        {"post": post, "blog_title": current_settings.BLOG_TITLE},
    )
