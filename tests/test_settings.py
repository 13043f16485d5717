"""
Settings and page wrapper tests
"""

import pytest
from pydantic import ValidationError

from mdhtml.config import AppSettings
from mdhtml.lib.page import page_wrap


class TestAppSettings:
    """Defaults, environment and validation"""

    def test_defaults(self, settings):
        assert settings.base_url == ""
        assert settings.style is None
        assert settings.line_separator == "\n"
        assert settings.styleAttribute_make() == ""

    def test_environment_prefix(self, monkeypatch):
        """MDHTML_ variables populate fields"""
        monkeypatch.setenv("MDHTML_BASE_URL", "http://env/")
        monkeypatch.setenv("MDHTML_STYLE", "color:blue;")
        settings = AppSettings(_env_file=None)
        assert settings.base_url == "http://env/"
        assert settings.styleAttribute_make() == ' style="color:blue;"'

    def test_blank_style_is_none(self):
        assert AppSettings(_env_file=None, style="   ").style is None

    def test_quote_in_style_rejected(self):
        with pytest.raises(ValidationError):
            AppSettings(_env_file=None, style='x"onload="y')

    def test_empty_separator_rejected(self):
        with pytest.raises(ValidationError):
            AppSettings(_env_file=None, line_separator="")


class TestPageWrap:
    """Standalone document skeleton"""

    def test_skeleton(self):
        page = page_wrap("<p>x</p>")
        assert page.startswith("<!DOCTYPE html>")
        assert "<meta charset='utf-8'>" in page
        assert "<body>\n<p>x</p>\n</body>" in page
        assert page.rstrip().endswith("</html>")
