from page_toolbox.tools.errors import (
    BrowserSessionError,
    ToolError,
    ToolInputError,
    ToolNotFoundError,
    ToolOutputError,
    ToolValidationError,
)
from page_toolbox.tools.registry import (
    RegisteredTool,
    ToolRegistry,
    build_tool_descriptions,
    build_tool_registry,
)
from page_toolbox.tools.tool_executor import ToolExecutor

__all__ = [
    "BrowserSessionError",
    "ToolError",
    "ToolInputError",
    "ToolNotFoundError",
    "ToolOutputError",
    "ToolValidationError",
    "RegisteredTool",
    "ToolRegistry",
    "build_tool_descriptions",
    "build_tool_registry",
    "ToolExecutor",
]
