"""
HTML sanitization tool: sanitize-html.

A best-effort textual filter applied to the raw string, not a DOM-aware
sanitizer. Obfuscated markup, single-quoted or unquoted event handlers and
nested or overlapping tags are not caught.
"""

import re

from langchain_core.tools import StructuredTool

from page_toolbox.tools.description import SANITIZE_HTML_DESCRIPTION
from page_toolbox.tools.types import HtmlInput

_BLOCK_FLAGS = re.IGNORECASE | re.DOTALL

# Applied in this order
SANITIZE_PATTERNS: list[re.Pattern[str]] = [
    re.compile(r"<script[^>]*>.*?</script>", _BLOCK_FLAGS),
    re.compile(r"<style[^>]*>.*?</style>", _BLOCK_FLAGS),
    # Handler must start an attribute name; the whitespace run before it goes
    # with it, matched only from the start of the run
    re.compile(r'(?<!\s)\s*(?<![\w-])on\w+="[^"]*"', re.IGNORECASE),
    re.compile(r"javascript:", re.IGNORECASE),
    re.compile(r"<iframe[^>]*>.*?</iframe>", _BLOCK_FLAGS),
]


def sanitize_html(html: str) -> str:
    """Strip script/style/iframe blocks, on*="..." handlers and javascript: prefixes.

    Examples:
        >>> sanitize_html('<p onclick="alert(1)">hi</p>')
        '<p>hi</p>'
        >>> sanitize_html('<script>evil()</script><b>ok</b>')
        '<b>ok</b>'
    """
    sanitized = html
    for pattern in SANITIZE_PATTERNS:
        sanitized = pattern.sub("", sanitized)
    return sanitized


def make_sanitize_html_tool() -> StructuredTool:
    async def sanitize(html: str) -> dict[str, str]:
        return {"sanitized": sanitize_html(html)}

    return StructuredTool.from_function(
        coroutine=sanitize,
        name="sanitize-html",
        description=SANITIZE_HTML_DESCRIPTION.splitlines()[0],
        args_schema=HtmlInput,
    )
