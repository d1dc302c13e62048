from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class PostFile:
    """A post file on disk. The filesystem is the only source of truth."""

    path: Path
    filename: str
    suffix: str = ".html.md"

    @property
    def stem(self) -> str:
        if self.suffix and self.filename.endswith(self.suffix):
            return self.filename[: -len(self.suffix)]
        return self.filename.split(".", 1)[0]
