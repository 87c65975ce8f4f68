"""
Browser automation tools.

Tools:
- analyze-page: Interactive elements of a URL
- analyze-html: Interactive elements of an HTML string
- get-page-screenshot: Full-page screenshot as base64
- extract-dom-tree: Element tree rooted at the body
- get-html-content: Serialized markup of a URL
- extract-inner-html: innerHTML of one element
"""

from langchain_core.tools import StructuredTool

from page_toolbox.tools.browser.analyze import make_analyze_html_tool, make_analyze_page_tool
from page_toolbox.tools.browser.content import (
    make_html_content_tool,
    make_inner_html_tool,
    make_screenshot_tool,
)
from page_toolbox.tools.browser.dom import make_extract_dom_tree_tool
from page_toolbox.tools.browser.session import (
    BrowserOptions,
    BrowserSession,
    BrowserSessionManager,
)


def get_browser_tools(manager: BrowserSessionManager) -> list[StructuredTool]:
    """Get all browser tools, bound to ``manager``."""
    return [
        make_analyze_page_tool(manager),
        make_analyze_html_tool(manager),
        make_screenshot_tool(manager),
        make_extract_dom_tree_tool(manager),
        make_html_content_tool(manager),
        make_inner_html_tool(manager),
    ]


__all__ = [
    "get_browser_tools",
    "BrowserOptions",
    "BrowserSession",
    "BrowserSessionManager",
]
