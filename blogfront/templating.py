from pathlib import Path
from typing import Callable

from fastapi.templating import Jinja2Templates
from jinja2 import Environment, FileSystemLoader, select_autoescape

TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"


def create_templates(
    render_markdown: Callable[[str], str], templates_dir: Path = TEMPLATES_DIR
) -> Jinja2Templates:
    """Build the page templates with ``render_markdown`` as the ``markdown`` filter.

    The renderer is handed in by the caller instead of being registered
    globally, so each environment only knows the renderer it was built with.
    """
    env = Environment(
        loader=FileSystemLoader(str(templates_dir)),
        autoescape=select_autoescape(["html"]),
        trim_blocks=True,
        lstrip_blocks=True,
    )
    env.filters["markdown"] = render_markdown
    return Jinja2Templates(env=env)
