import datetime
import logging
from collections import Counter
from typing import Callable, List

from blogfront.exceptions import MalformedFrontMatter, UnreadableFile
from blogfront.schemas.blog import PostDetail, PostSummary
from blogfront.services.markdown_renderer import render_body
from blogfront.services.post_parser import split_front_matter, to_detail, to_summary

logger = logging.getLogger(__name__)


class PostsService:
    def __init__(self, repo, render: Callable[[str], str] = render_body):
        self.repo = repo
        self.render = render

    def list_posts(self) -> List[PostSummary]:
        posts = []
        for post_file in self.repo.list_post_files():
            try:
                front_matter, _body = split_front_matter(
                    self.repo.read_post(post_file), source=post_file.filename
                )
                posts.append(to_summary(post_file, front_matter))
            except (UnreadableFile, MalformedFrontMatter) as e:
                logger.warning(f"Excluding {post_file.filename} from listing: {e}")

        _warn_duplicate_slugs(posts)
        # Newest first; undated posts sink to the end
        posts.sort(key=lambda p: p.date or datetime.date.min, reverse=True)
        return posts

    def get_post(self, slug: str) -> PostDetail:
        post_file = self.repo.find_by_slug(slug)
        front_matter, body = split_front_matter(
            self.repo.read_post(post_file), source=post_file.filename
        )
        return to_detail(post_file, front_matter, self.render(body))


def _warn_duplicate_slugs(posts: List[PostSummary]) -> None:
    counts = Counter(p.slug for p in posts if p.slug)
    duplicates = sorted(slug for slug, count in counts.items() if count > 1)
    if duplicates:
        logger.warning(f"Duplicate slugs, only the first file is reachable: {duplicates}")
