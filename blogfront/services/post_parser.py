import datetime
from typing import Any, Dict, List, Optional, Tuple, Union

import frontmatter
import yaml

from blogfront.exceptions import MalformedFrontMatter
from blogfront.models.post_file import PostFile
from blogfront.schemas.blog import PostDetail, PostSummary

FrontMatter = Dict[str, Any]

_yaml_handler = frontmatter.YAMLHandler()
_ALLOWED_SCALARS = (str, bool, int, float, datetime.date, type(None))


def split_front_matter(
    raw: Union[bytes, str], source: str = "<post>"
) -> Tuple[FrontMatter, str]:
    """Split a post into its decoded YAML header and markdown body.

    Text that does not open with a ``---`` line, or never closes the header,
    is returned untouched as the body with an empty header. A UTF-8 byte
    order mark is only dropped when a header follows it.
    """
    if isinstance(raw, bytes):
        try:
            raw = raw.decode("utf-8")
        except UnicodeDecodeError as e:
            raise MalformedFrontMatter(source, f"not valid UTF-8: {e}") from e
    text = raw.removeprefix("\ufeff")

    if not _yaml_handler.detect(text):
        return {}, raw
    try:
        header, body = _yaml_handler.split(text)
    except ValueError:
        return {}, raw

    try:
        # YAMLHandler.load defaults to yaml.SafeLoader, so python/* tags fail.
        # Constructors raise ValueError for values like 2024-13-45 or !!int abc
        decoded = _yaml_handler.load(header)
    except (yaml.YAMLError, ValueError) as e:
        raise MalformedFrontMatter(source, str(e)) from e

    if decoded is None:
        decoded = {}
    if not isinstance(decoded, dict):
        raise MalformedFrontMatter(
            source, f"header must be a mapping, got {type(decoded).__name__}"
        )
    _check_allowed(decoded, source)

    return decoded, body.lstrip("\r\n")


def _check_allowed(value: Any, source: str, key: str = "") -> None:
    if isinstance(value, dict):
        for k, v in value.items():
            _check_allowed(v, source, f"{key}.{k}" if key else str(k))
    elif isinstance(value, list):
        for item in value:
            _check_allowed(item, source, key)
    elif not isinstance(value, _ALLOWED_SCALARS):
        field = key or "header"
        raise MalformedFrontMatter(
            source, f"{field} has disallowed type {type(value).__name__}"
        )


def normalize_tags(front_matter: FrontMatter) -> List[str]:
    value = front_matter.get("tags")
    if value is None:
        return []
    if isinstance(value, str):
        tokens = value.split(",")
    elif isinstance(value, list):
        tokens = [str(item) for item in value if item is not None]
    else:
        tokens = [str(value)]
    return [token.strip() for token in tokens if token.strip()]


def to_summary(post_file: PostFile, front_matter: FrontMatter) -> PostSummary:
    return PostSummary(**_summary_fields(post_file, front_matter))


def to_detail(post_file: PostFile, front_matter: FrontMatter, html: str) -> PostDetail:
    return PostDetail(
        **_summary_fields(post_file, front_matter),
        tags=normalize_tags(front_matter),
        content=html,
    )


def _summary_fields(post_file: PostFile, front_matter: FrontMatter) -> dict:
    return {
        "title": _derive_title(front_matter, post_file.stem),
        "date": _convert_date(front_matter.get("date"), post_file.filename),
        "author": _optional_str(front_matter.get("author")),
        "slug": _optional_str(front_matter.get("slug")),
    }


def _derive_title(front_matter: FrontMatter, stem: str) -> str:
    title = _optional_str(front_matter.get("title"))
    if title:
        return title
    return stem.replace("-", " ").replace("_", " ").title()


def _optional_str(value) -> Optional[str]:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _convert_date(value, source: str) -> Optional[datetime.date]:
    if value is None or value == "":
        return None
    if isinstance(value, datetime.datetime):
        return value.date()
    if isinstance(value, datetime.date):
        return value
    try:
        return datetime.date.fromisoformat(str(value).strip())
    except ValueError as e:
        raise MalformedFrontMatter(source, f"invalid date {value!r}") from e
