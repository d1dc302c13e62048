import logging
import os
from pathlib import Path
from typing import List

from blogfront.exceptions import MalformedFrontMatter, PostNotFound, UnreadableFile
from blogfront.models.post_file import PostFile
from blogfront.services.post_parser import split_front_matter

logger = logging.getLogger(__name__)


class FilePostsRepo:
    def __init__(self, posts_dir: Path, suffix: str = ".html.md"):
        self.posts_dir = Path(posts_dir)
        self.suffix = suffix

    def list_post_files(self) -> List[PostFile]:
        """Post files in directory enumeration order (not sorted)."""
        post_files = []
        with os.scandir(self.posts_dir) as entries:
            for entry in entries:
                if not entry.name.endswith(self.suffix):
                    continue
                try:
                    if not entry.is_file():
                        continue
                except OSError as e:
                    logger.warning(f"Skipping unreadable entry {entry.path}: {e}")
                    continue
                post_files.append(
                    PostFile(
                        path=Path(entry.path), filename=entry.name, suffix=self.suffix
                    )
                )
        return post_files

    def read_post(self, post_file: PostFile) -> bytes:
        try:
            return post_file.path.read_bytes()
        except OSError as e:
            raise UnreadableFile(post_file.path, str(e)) from e

    def find_by_slug(self, slug: str) -> PostFile:
        """Return the first post file whose front matter declares ``slug``.

        Every candidate's header is parsed, so the cost grows with the number
        of posts. When two files declare the same slug the first one in
        enumeration order wins, and that order is platform dependent.
        """
        if not self._is_valid_slug(slug):
            raise PostNotFound(slug)

        for post_file in self.list_post_files():
            try:
                front_matter, _body = split_front_matter(
                    self.read_post(post_file), source=post_file.filename
                )
            except (UnreadableFile, MalformedFrontMatter) as e:
                logger.warning(f"Skipping {post_file.filename} during slug lookup: {e}")
                continue
            declared = front_matter.get("slug")
            if declared is not None and str(declared).strip() == slug:
                return post_file

        raise PostNotFound(slug)

    @staticmethod
    def _is_valid_slug(slug) -> bool:
        if not isinstance(slug, str) or not slug.strip():
            return False
        if slug != slug.strip() or slug.startswith("."):
            return False
        return not any(ch in slug for ch in ("/", "\\", "\x00"))
