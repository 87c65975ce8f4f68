"""
Tool registry for managing and discovering available tools.

This module provides:
- RegisteredTool: A Pydantic model for tools with metadata and output schema
- ToolRegistry: The name-keyed set of tools, built once and passed around
- build_tool_registry: Build the registry of every tool, bound to a session manager
"""

from typing import Any, Iterator, Optional

from langchain_core.tools import StructuredTool
from pydantic import BaseModel, ConfigDict, Field

from page_toolbox.tools.browser import BrowserSessionManager, get_browser_tools
from page_toolbox.tools.description import (
    ANALYZE_HTML_DESCRIPTION,
    ANALYZE_PAGE_DESCRIPTION,
    DOM_TREE_DESCRIPTION,
    HTML_CONTENT_DESCRIPTION,
    INNER_HTML_DESCRIPTION,
    SANITIZE_HTML_DESCRIPTION,
    SCREENSHOT_DESCRIPTION,
)
from page_toolbox.tools.errors import ToolNotFoundError
from page_toolbox.tools.html import make_sanitize_html_tool
from page_toolbox.tools.types import (
    AnalyzePageOutput,
    DomTreeOutput,
    DomTreeResult,
    HtmlContentOutput,
    InnerHtmlOutput,
    SanitizeOutput,
    ScreenshotOutput,
)


class RegisteredTool(BaseModel):
    """A registered tool with its rich description and output schema."""

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    name: str = Field(
        ..., description="Tool name (must match the tool's name property)"
    )
    tool: StructuredTool = Field(
        ..., description="The tool instance; its args_schema is the input schema"
    )
    description: str = Field(
        ...,
        description="Rich description advertised to the agent (when to use, when not to use, etc.)",
    )
    output_schema: type[BaseModel] = Field(
        ..., description="Model the handler's return value must satisfy"
    )
    advertised_schema: Optional[type[BaseModel]] = Field(
        default=None,
        description="Model whose JSON schema is advertised, when it differs from output_schema",
    )

    @property
    def input_schema(self) -> type[BaseModel]:
        return self.tool.args_schema

    def input_json_schema(self) -> dict[str, Any]:
        return self.input_schema.model_json_schema()

    def output_json_schema(self) -> dict[str, Any]:
        schema = self.advertised_schema or self.output_schema
        return schema.model_json_schema(by_alias=True)


class ToolRegistry:
    """Ordered, name-keyed collection of registered tools."""

    def __init__(self, tools: list[RegisteredTool]) -> None:
        self._tools: dict[str, RegisteredTool] = {}
        for registered in tools:
            if registered.name in self._tools:
                raise ValueError(f"Duplicate tool name: {registered.name}")
            self._tools[registered.name] = registered

    def get(self, name: str) -> RegisteredTool:
        registered = self._tools.get(name)
        if registered is None:
            raise ToolNotFoundError(name)
        return registered

    def names(self) -> list[str]:
        return list(self._tools)

    def __iter__(self) -> Iterator[RegisteredTool]:
        return iter(self._tools.values())

    def __len__(self) -> int:
        return len(self._tools)

    def __contains__(self, name: object) -> bool:
        return name in self._tools


# Rich description, output schema and (optional) advertised schema per tool name
_TOOL_METADATA: dict[str, tuple[str, type[BaseModel], Optional[type[BaseModel]]]] = {
    "analyze-page": (ANALYZE_PAGE_DESCRIPTION, AnalyzePageOutput, None),
    "analyze-html": (ANALYZE_HTML_DESCRIPTION, AnalyzePageOutput, None),
    "get-page-screenshot": (SCREENSHOT_DESCRIPTION, ScreenshotOutput, None),
    "extract-dom-tree": (DOM_TREE_DESCRIPTION, DomTreeResult, DomTreeOutput),
    "get-html-content": (HTML_CONTENT_DESCRIPTION, HtmlContentOutput, None),
    "extract-inner-html": (INNER_HTML_DESCRIPTION, InnerHtmlOutput, None),
    "sanitize-html": (SANITIZE_HTML_DESCRIPTION, SanitizeOutput, None),
}


def build_tool_registry(manager: BrowserSessionManager) -> ToolRegistry:
    """
    Build the registry of every available tool.

    Args:
        manager: Session manager the browser tools open their sessions from

    Returns:
        ToolRegistry with the browser tools followed by sanitize-html
    """
    tools = [*get_browser_tools(manager), make_sanitize_html_tool()]

    registered: list[RegisteredTool] = []
    for tool in tools:
        description, output_schema, advertised_schema = _TOOL_METADATA[tool.name]
        registered.append(
            RegisteredTool(
                name=tool.name,
                tool=tool,
                description=description,
                output_schema=output_schema,
                advertised_schema=advertised_schema,
            )
        )
    return ToolRegistry(registered)


def build_tool_descriptions(registry: ToolRegistry) -> str:
    """
    Format each tool's rich description with a header, for a system prompt.
    """
    return "\n\n".join(f"### {t.name}\n\n{t.description}" for t in registry)
