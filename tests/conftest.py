import textwrap
from pathlib import Path

import pytest

from blogfront.exceptions import PostNotFound
from blogfront.models.post_file import PostFile


def make_post(posts_dir: Path, filename: str, text: str) -> Path:
    path = posts_dir / filename
    path.write_text(textwrap.dedent(text).lstrip(), encoding="utf-8")
    return path


@pytest.fixture
def posts_dir(tmp_path):
    directory = tmp_path / "posts"
    directory.mkdir()
    return directory


class FakeRepo:
    """
    In-memory repo stand-in used in service tests.
    Values of ``contents`` may be an exception instance to simulate a bad read.
    """

    def __init__(self, contents: dict):
        self.contents = contents
        self.reads = []

    def list_post_files(self):
        return [PostFile(path=Path(name), filename=name) for name in self.contents]

    def read_post(self, post_file):
        self.reads.append(post_file.filename)
        raw = self.contents[post_file.filename]
        if isinstance(raw, Exception):
            raise raw
        return textwrap.dedent(raw).lstrip().encode("utf-8")

    def find_by_slug(self, slug):
        for name in self.contents:
            if name.startswith(f"{slug}."):
                return PostFile(path=Path(name), filename=name)
        raise PostNotFound(slug)


class FakePostsService:
    """
    Minimal posts service stand-in for router tests.
    """

    def __init__(self, list_posts_return=None, get_post_return=None, error=None):
        self._list_posts_return = list_posts_return or []
        self._get_post_return = get_post_return
        self._error = error

    def list_posts(self):
        if self._error:
            raise self._error
        return self._list_posts_return

    def get_post(self, slug: str):
        if self._error:
            raise self._error
        return self._get_post_return
