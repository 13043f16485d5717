"""
End-to-end rendering tests

Full pipeline: text -> paragraphs -> classified lines -> HTML.
"""

from concurrent.futures import ThreadPoolExecutor

import pytest

from mdhtml import render, DocumentRenderer
from mdhtml.config import AppSettings


class TestPlainText:
    """Text without markup is wrapped in a paragraph"""

    @pytest.mark.parametrize("text", ["iamatest.STUB", "bla-bla-bla", "no markup here!", "x"])
    def test_plain_paragraph(self, settings, text):
        assert render(text, settings) == f"<p>{text}</p>"

    def test_empty_input(self, settings):
        """Empty input renders nothing"""
        assert render("", settings) == ""

    def test_none_input(self, settings):
        """None is a caller error"""
        with pytest.raises(TypeError):
            render(None, settings)


class TestInlineThroughRender:
    """Inline markup inside paragraphs"""

    @pytest.mark.parametrize("text, expected", [
        ("_x_", "<p><em>x</em></p>"),
        ("__x__", "<p><strong>x</strong></p>"),
        (r"\_x\_", "<p>_x_</p>"),
        ("_x__", "<p>_x__</p>"),
        ("_ x_", "<p>_ x_</p>"),
        ("_x _", "<p>_x _</p>"),
        ("_123_", "<p>_123_</p>"),
        ("`123`", "<p><code>123</code></p>"),
        ("`_x_`", "<p><code>_x_</code></p>"),
        ("[T](http://a/)", '<p><a href="http://a/">T</a></p>'),
        (r"\<tag\>", "<p>&lt;tag&gt;</p>"),
    ])
    def test_render(self, settings, text, expected):
        assert render(text, settings) == expected

    def test_base_url(self):
        """Relative links use the configured base"""
        settings = AppSettings(_env_file=None, base_url="http://b/")
        assert render("[T](x/y)", settings) == '<p><a href="http://b/x/y">T</a></p>'

    def test_style_everywhere(self):
        """Style lands on paragraph and inline tags"""
        settings = AppSettings(_env_file=None, style="color:green;")
        assert render("_x_", settings) == (
            '<p style="color:green;"><em style="color:green;">x</em></p>'
        )


class TestParagraphs:
    """Blank lines split paragraphs and survive rendering"""

    def test_single_blank_line(self, settings):
        assert render("a\n\nb", settings) == "<p>a</p>\n\n<p>b</p>"

    def test_two_blank_lines(self, settings):
        assert render("a\n\n\nb", settings) == "<p>a</p>\n\n\n<p>b</p>"

    def test_whitespace_only_line_is_content(self, settings):
        """Only an empty line splits paragraphs; spaces are kept"""
        assert render("a\n   \nb", settings) == "<p>a\n   \nb</p>"

    def test_carriage_returns_survive_newline_split(self, settings):
        """CRLF input split on \\n keeps every \\r"""
        assert render("\r\n", settings) == "<p>\r</p>\n"
        assert render("a\r\n\r\nb", settings) == "<p>a\r\n\r\nb</p>"

    def test_lines_in_one_paragraph(self, settings):
        assert render("a\nb", settings) == "<p>a\nb</p>"

    def test_only_newline(self, settings):
        """A lone separator round-trips"""
        assert render("\n", settings) == "\n"

    def test_leading_and_trailing_blank(self, settings):
        assert render("\na\n", settings) == "\n<p>a</p>\n"

    def test_crlf_separator(self):
        settings = AppSettings(_env_file=None, line_separator="\r\n")
        assert render("a\r\n\r\nb", settings) == "<p>a</p>\r\n\r\n<p>b</p>"


class TestDocuments:
    """Mixed block types"""

    def test_mixed_document(self, settings):
        source = "\n".join([
            "# Title",
            "intro _text_",
            "",
            "1. one",
            "2. two",
            "",
            "    code _x_",
            "    more",
        ])
        expected = "\n".join([
            "<p><h1> Title</h1>",
            "intro <em>text</em></p>",
            "",
            "<p><ol><li>one</li>",
            "<li>two</li></ol></p>",
            "",
            "<p><pre><code>code _x_",
            "more</code></pre></p>",
        ])
        assert render(source, settings) == expected

    def test_adjacent_header_levels_share_wrapper(self, settings):
        """Header runs are keyed by kind, so mixed levels share one wrapper"""
        assert render("# a\n## b", settings) == "<p><h1> a\n b</h2></p>"

    def test_rerender_is_noop_beyond_wrapping(self, settings):
        """Rendered HTML contains no delimiters and only gains a <p>"""
        html = render("_x_ and __y__", settings)
        assert html == "<p><em>x</em> and <strong>y</strong></p>"
        assert render(html, settings) == f"<p>{html}</p>"

    def test_concurrent_renders(self, settings):
        """Independent documents render identically on separate threads"""
        renderer = DocumentRenderer(settings)
        sources = ["_a_ `b`", "__c__\n\nd", "# e\n1. f"] * 20
        expected = [renderer.document_render(s) for s in sources]
        with ThreadPoolExecutor(max_workers=8) as pool:
            assert list(pool.map(renderer.document_render, sources)) == expected


class TestParagraphBuilding:
    """DocumentRenderer.paragraphs_build grouping"""

    def test_groups(self, settings):
        renderer = DocumentRenderer(settings)
        groups = list(renderer.paragraphs_build(["a", "b", "", "", "c"]))
        assert groups == [["a", "b"], [], [], ["c"]]

    def test_lines_split_empty(self, settings):
        assert DocumentRenderer(settings).lines_split("") == []
