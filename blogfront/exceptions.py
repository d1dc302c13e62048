class PostError(Exception):
    """Base class for errors raised while loading a post."""


class PostNotFound(PostError):
    def __init__(self, slug: str):
        self.slug = slug
        super().__init__(f"No post declares slug {slug!r}")


class MalformedFrontMatter(PostError):
    def __init__(self, source: str, reason: str):
        self.source = source
        self.reason = reason
        super().__init__(f"Malformed front matter in {source}: {reason}")


class UnreadableFile(PostError):
    def __init__(self, path, reason: str = ""):
        self.path = path
        self.reason = reason
        message = f"Cannot read post file {path}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
