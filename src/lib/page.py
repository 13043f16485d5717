"""
HTML page wrapper

Embeds a rendered fragment in a minimal standalone document.
"""

PAGE_TEMPLATE = """<!DOCTYPE html>
<html>
<head>
    <meta charset='utf-8'>
</head>
<body>
{content}
</body>
</html>
"""


def page_wrap(content: str) -> str:
    """
    Build a complete HTML document around content

    Args:
        content: Rendered HTML fragment

    Returns:
        Complete HTML document with a UTF-8 meta tag
    """
    return PAGE_TEMPLATE.format(content=content)
