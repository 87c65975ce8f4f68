import asyncio

from page_toolbox.server import serve
from page_toolbox.tools import ToolExecutor, build_tool_registry
from page_toolbox.tools.browser import BrowserOptions, BrowserSessionManager


def main() -> None:
    options = BrowserOptions.from_env()
    registry = build_tool_registry(BrowserSessionManager(options=options))
    asyncio.run(serve(ToolExecutor(registry)))


if __name__ == "__main__":
    main()
