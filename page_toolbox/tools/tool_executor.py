from typing import Any, Optional

from pydantic import ValidationError

from page_toolbox.tools.errors import ToolError, ToolInputError, ToolOutputError
from page_toolbox.tools.registry import ToolRegistry
from page_toolbox.utils.logger import get_logger

logger = get_logger(__name__)


# ======================================================================
## Tool Executor Implementation
# ======================================================================


class ToolExecutor:
    """Validates a tool call, runs its handler and validates the result.

    Holds no state besides the registry; concurrent calls do not interact.
    """

    def __init__(self, registry: ToolRegistry) -> None:
        self.registry = registry

    async def execute(
        self,
        name: str,
        arguments: Optional[dict[str, Any]] = None,
    ) -> dict[str, Any]:
        """Dispatch one tool call.

        Args:
            name (str): Registered tool name
            arguments (Optional[dict[str, Any]]): Raw input payload

        Raises:
            ToolNotFoundError: No tool has that name
            ToolInputError: Payload does not match the input schema
            ToolOutputError: Handler result does not match the output schema
            BrowserSessionError: The browser failed during the call

        Returns:
            dict[str, Any]: JSON-ready output. Optional fields the handler left
            out are omitted; fields it set to None are kept as null.
        """
        registered = self.registry.get(name)

        try:
            validated = registered.input_schema.model_validate(arguments or {})
        except ValidationError as e:
            logger.warning(f"Rejected input for {name}: {e.error_count()} error(s)")
            raise ToolInputError(name, e.errors(include_url=False)) from e

        logger.info(f"Executing tool {name}")
        try:
            result = await registered.tool.ainvoke(validated.model_dump())
        except Exception as e:
            if isinstance(e, ToolError):
                e.tool_name = e.tool_name or name
            logger.error(f"Tool {name} failed: {type(e).__name__}: {e}")
            raise

        try:
            output = registered.output_schema.model_validate(result)
        except ValidationError as e:
            logger.error(f"Tool {name} returned an invalid result: {e}")
            raise ToolOutputError(name, e.errors(include_url=False)) from e

        # Outputs hold only JSON-native values; python mode passes nested
        # DOM trees through untouched instead of re-encoding every level
        return output.model_dump(by_alias=True, exclude_unset=True)
