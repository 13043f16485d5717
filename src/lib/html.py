"""
HTML fragment helpers

Small builders shared by the resolver, the classifier and the assembler so
that every generated opening tag carries the configured style attribute.
"""

from urllib.parse import urlparse

from ..config import AppSettings


def tag_open(element: str, settings: AppSettings) -> str:
    """Opening tag for element, with the configured style attribute"""
    return f"<{element}{settings.styleAttribute_make()}>"


def tag_close(element: str) -> str:
    return f"</{element}>"


def tag_wrap(element: str, body: str, settings: AppSettings) -> str:
    """Wrap body in element"""
    return f"{tag_open(element, settings)}{body}{tag_close(element)}"


def url_isAbsolute(url: str) -> bool:
    """
    Check whether url is a well-formed absolute URI

    Both a scheme and a network location are required, so "http://a/" is
    absolute while "docs/page.html", "/page" and "mailto-like:text" are not.
    """
    try:
        parsed = urlparse(url)
    except ValueError:
        return False
    return bool(parsed.scheme) and bool(parsed.netloc)


def link_render(text: str, url: str, settings: AppSettings) -> str:
    """
    Render an anchor element

    Args:
        text: Link text, used verbatim
        url: Link target; prefixed with settings.base_url unless absolute
        settings: Render settings

    Returns:
        <a href="URL">TEXT</a>

    Example:
        >>> link_render("T", "page", AppSettings(base_url="http://b/"))
        '<a href="http://b/page">T</a>'
    """
    href = url if url_isAbsolute(url) else f"{settings.base_url}{url}"
    return f'<a href="{href}"{settings.styleAttribute_make()}>{text}</a>'


def angleBrackets_escape(text: str, escape: str = "\\") -> str:
    r"""
    Turn escaped angle brackets into entities

    Example:
        >>> angleBrackets_escape(r"\<b\>")
        '&lt;b&gt;'
    """
    return text.replace(f"{escape}<", "&lt;").replace(f"{escape}>", "&gt;")
