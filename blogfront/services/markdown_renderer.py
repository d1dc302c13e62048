"""
Markdown to HTML rendering for post bodies.

The feature set is fixed: bare URLs are autolinked, fenced code blocks become
``<pre><code>`` elements, ``_text_`` renders as underline while ``*text*``
stays emphasis, blockquotes follow CommonMark, and a single newline inside a
paragraph becomes a ``<br />`` (hard wrap) instead of being folded.

Raw HTML in the source is passed through untouched. Only render files that
are part of the deployment; never feed user input to ``render_body`` without
sanitising the result.
"""
from markdown_it import MarkdownIt


def underline_plugin(md: MarkdownIt) -> None:
    """Render underscore-delimited emphasis as ``<u>``."""
    md.add_render_rule("em_open", _render_em_open)
    md.add_render_rule("em_close", _render_em_close)


def _render_em_open(self, tokens, idx, options, env) -> str:
    if tokens[idx].markup == "_":
        return "<u>"
    return self.renderToken(tokens, idx, options, env)


def _render_em_close(self, tokens, idx, options, env) -> str:
    if tokens[idx].markup == "_":
        return "</u>"
    return self.renderToken(tokens, idx, options, env)


def build_markdown() -> MarkdownIt:
    # linkify needs the linkify-it-py package at runtime
    return (
        MarkdownIt("commonmark", {"breaks": True, "linkify": True, "html": True})
        .enable("linkify")
        .use(underline_plugin)
    )


_md = build_markdown()


def render_body(body_text: str) -> str:
    return _md.render(body_text or "")
