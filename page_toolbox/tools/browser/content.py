"""
Page content tools: get-page-screenshot, get-html-content, extract-inner-html.
"""

from typing import Any

from langchain_core.tools import StructuredTool

from page_toolbox.tools.browser.session import BrowserSessionManager
from page_toolbox.tools.description import (
    HTML_CONTENT_DESCRIPTION,
    INNER_HTML_DESCRIPTION,
    SCREENSHOT_DESCRIPTION,
)
from page_toolbox.tools.types import InnerHtmlInput, UrlInput
from page_toolbox.utils.logger import get_logger

logger = get_logger("browser_content")


def make_screenshot_tool(manager: BrowserSessionManager) -> StructuredTool:
    async def get_page_screenshot(url: str) -> dict[str, Any]:
        async with manager.open_session() as session:
            await session.navigate(url)
            return {"imageBase64": await session.screenshot(full_page=True)}

    return StructuredTool.from_function(
        coroutine=get_page_screenshot,
        name="get-page-screenshot",
        description=SCREENSHOT_DESCRIPTION.splitlines()[0],
        args_schema=UrlInput,
    )


def make_html_content_tool(manager: BrowserSessionManager) -> StructuredTool:
    async def get_html_content(url: str) -> dict[str, Any]:
        async with manager.open_session() as session:
            await session.navigate(url)
            return {"html": await session.content()}

    return StructuredTool.from_function(
        coroutine=get_html_content,
        name="get-html-content",
        description=HTML_CONTENT_DESCRIPTION.splitlines()[0],
        args_schema=UrlInput,
    )


def make_inner_html_tool(manager: BrowserSessionManager) -> StructuredTool:
    async def extract_inner_html(url: str, selector: str) -> dict[str, Any]:
        async with manager.open_session() as session:
            await session.navigate(url)
            inner_html = await session.inner_html(selector)
            if inner_html is None:
                logger.info(f"No element matched {selector!r} on {url}")
            # Always set, so a miss is reported as null rather than omitted
            return {"innerHTML": inner_html}

    return StructuredTool.from_function(
        coroutine=extract_inner_html,
        name="extract-inner-html",
        description=INNER_HTML_DESCRIPTION.splitlines()[0],
        args_schema=InnerHtmlInput,
    )
