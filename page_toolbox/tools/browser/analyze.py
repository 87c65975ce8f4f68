"""
Interactive-element analysis tools: analyze-page and analyze-html.

The page-side script only reports raw facts about each element; the
descriptor rules (type, text, selector priority) live in
``build_element_descriptor`` so they run the same for both tools.
"""

from typing import Any, Optional

from langchain_core.tools import StructuredTool

from page_toolbox.tools.browser.session import BrowserSession, BrowserSessionManager
from page_toolbox.tools.description import ANALYZE_HTML_DESCRIPTION, ANALYZE_PAGE_DESCRIPTION
from page_toolbox.tools.types import HtmlInput, UrlInput

INTERACTIVE_SELECTOR = 'input, button, a, select, textarea, [role="button"]'

COLLECT_ELEMENTS_SCRIPT = """(nodes) => nodes.map((el) => ({
    tag: el.tagName,
    type: el.getAttribute('type'),
    text: el.textContent,
    id: el.getAttribute('id'),
    name: el.getAttribute('name'),
}))"""


def build_element_descriptor(raw: dict[str, Any]) -> dict[str, Any]:
    """Turn the raw facts of one element into an ElementDescriptor payload.

    Absent optional fields are left out of the result.

    Args:
        raw: ``{tag, type, text, id, name}`` as reported by the page

    Returns:
        Dict with ``tag``, ``selector`` and, when non-empty, ``type`` and ``text``
    """
    tag = (raw.get("tag") or "").lower()
    descriptor: dict[str, Any] = {"tag": tag}

    element_type: Optional[str] = raw.get("type")
    if element_type:
        descriptor["type"] = element_type

    text = (raw.get("text") or "").strip()
    if text:
        descriptor["text"] = text

    element_id = raw.get("id")
    name = raw.get("name")
    if element_id:
        descriptor["selector"] = f"#{element_id}"
    elif name:
        descriptor["selector"] = f'[name="{name}"]'
    else:
        descriptor["selector"] = tag

    return descriptor


async def analyze_session(session: BrowserSession) -> dict[str, Any]:
    """Title plus interactive elements of whatever the session has loaded."""
    title = await session.title()
    raw_elements = await session.query_all(INTERACTIVE_SELECTOR, COLLECT_ELEMENTS_SCRIPT)
    return {
        "title": title,
        "elements": [build_element_descriptor(raw) for raw in raw_elements],
    }


def make_analyze_page_tool(manager: BrowserSessionManager) -> StructuredTool:
    async def analyze_page(url: str) -> dict[str, Any]:
        async with manager.open_session() as session:
            await session.navigate(url)
            return await analyze_session(session)

    return StructuredTool.from_function(
        coroutine=analyze_page,
        name="analyze-page",
        description=ANALYZE_PAGE_DESCRIPTION.splitlines()[0],
        args_schema=UrlInput,
    )


def make_analyze_html_tool(manager: BrowserSessionManager) -> StructuredTool:
    async def analyze_html(html: str) -> dict[str, Any]:
        async with manager.open_session(offline=True) as session:
            await session.set_content(html)
            return await analyze_session(session)

    return StructuredTool.from_function(
        coroutine=analyze_html,
        name="analyze-html",
        description=ANALYZE_HTML_DESCRIPTION.splitlines()[0],
        args_schema=HtmlInput,
    )
