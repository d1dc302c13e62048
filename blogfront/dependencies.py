from functools import lru_cache

from fastapi import Depends
from fastapi.templating import Jinja2Templates

from blogfront.repos.posts_repo import FilePostsRepo
from blogfront.services.markdown_renderer import render_body
from blogfront.services.posts_service import PostsService
from blogfront.settings import Settings, settings
from blogfront.templating import create_templates


def get_settings() -> Settings:
    """Small wrapper to allow dependency overrides in tests."""
    return settings


def get_posts_repo(current_settings: Settings = Depends(get_settings)):
    return FilePostsRepo(current_settings.posts_path, current_settings.POST_SUFFIX)


def get_posts_service(repo=Depends(get_posts_repo)):
    return PostsService(repo=repo, render=render_body)


@lru_cache
def get_templates() -> Jinja2Templates:
    return create_templates(render_body)
