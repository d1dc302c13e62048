from blogfront.services.markdown_renderer import build_markdown, render_body


def test_render_heading_and_inline_code():
    html = render_body("# Hi\n\n`code`")

    assert "<h1>Hi</h1>" in html
    assert "<code>code</code>" in html


def test_render_fenced_code_block():
    html = render_body("```python\nprint(1)\n```\n")

    assert '<pre><code class="language-python">' in html
    assert "print(1)\n</code></pre>" in html


def test_render_hard_wraps_single_newlines():
    html = render_body("first line\nsecond line")

    assert html == "<p>first line<br />\nsecond line</p>\n"


def test_render_autolinks_bare_urls():
    html = render_body("see https://example.com for more")

    assert '<a href="https://example.com">https://example.com</a>' in html


def test_render_underscore_as_underline_and_star_as_emphasis():
    html = render_body("_under_ and *em*")

    assert html == "<p><u>under</u> and <em>em</em></p>\n"


def test_render_strong_is_untouched_by_underline():
    assert render_body("__bold__") == "<p><strong>bold</strong></p>\n"


def test_render_blockquote():
    html = render_body("> quoted text")

    assert html == "<blockquote>\n<p>quoted text</p>\n</blockquote>\n"


def test_render_passes_raw_html_through():
    html = render_body('<div class="note">trusted</div>')

    assert '<div class="note">trusted</div>' in html


def test_render_empty_body():
    assert render_body("") == ""


def test_build_markdown_returns_independent_instances():
    assert build_markdown() is not build_markdown()
