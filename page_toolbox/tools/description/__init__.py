from page_toolbox.tools.description.browser import (
    ANALYZE_PAGE_DESCRIPTION,
    ANALYZE_HTML_DESCRIPTION,
    SCREENSHOT_DESCRIPTION,
    DOM_TREE_DESCRIPTION,
    HTML_CONTENT_DESCRIPTION,
    INNER_HTML_DESCRIPTION,
    SANITIZE_HTML_DESCRIPTION,
)

__all__ = [
    "ANALYZE_PAGE_DESCRIPTION",
    "ANALYZE_HTML_DESCRIPTION",
    "SCREENSHOT_DESCRIPTION",
    "DOM_TREE_DESCRIPTION",
    "HTML_CONTENT_DESCRIPTION",
    "INNER_HTML_DESCRIPTION",
    "SANITIZE_HTML_DESCRIPTION",
]
