"""
Errors raised while dispatching a tool call.

- ToolNotFoundError: no tool registered under the requested name
- ToolInputError / ToolOutputError: payload does not match the tool schema
- BrowserSessionError: the browser failed to launch, navigate or evaluate
"""

from typing import Any, Optional


class ToolError(Exception):
    """Base class for every tool-level failure."""

    def __init__(self, message: str, tool_name: Optional[str] = None) -> None:
        super().__init__(message)
        self.tool_name = tool_name


class ToolNotFoundError(ToolError):
    def __init__(self, tool_name: str) -> None:
        super().__init__(f"Tool {tool_name} not found.", tool_name=tool_name)


class ToolValidationError(ToolError):
    """Input or output does not conform to the declared schema."""

    stage: str = "payload"

    def __init__(self, tool_name: str, errors: list[dict[str, Any]]) -> None:
        details = "; ".join(
            f"{'.'.join(str(part) for part in err.get('loc', ())) or '<root>'}: {err.get('msg')}"
            for err in errors
        )
        super().__init__(
            f"Invalid {self.stage} for tool {tool_name}: {details}",
            tool_name=tool_name,
        )
        self.errors = errors


class ToolInputError(ToolValidationError):
    stage = "input"


class ToolOutputError(ToolValidationError):
    stage = "output"


class BrowserSessionError(ToolError):
    """The headless browser failed to launch, navigate or evaluate."""
