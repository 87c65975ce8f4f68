from page_toolbox.tools import ToolExecutor, build_tool_registry
from page_toolbox.tools.browser import BrowserOptions, BrowserSessionManager


async def main():
    manager = BrowserSessionManager(options=BrowserOptions(timeout=15000))
    executor = ToolExecutor(registry=build_tool_registry(manager))

    print("page-toolbox basic example\n")

    # Example 1: Interactive elements of an HTML string (no network).
    print("Example 1: analyze-html\n")
    result = await executor.execute(
        "analyze-html",
        {"html": '<title>Search</title><input id="q" type="text"><button name="go">Go</button>'},
    )
    for element in result["elements"]:
        print(f"  {element['tag']:<8} {element['selector']}")

    # Example 2: Sanitize markup.
    print("\nExample 2: sanitize-html\n")
    result = await executor.execute(
        "sanitize-html",
        {"html": '<p onclick="alert(1)">hi</p><script>evil()</script>'},
    )
    print(f"  {result['sanitized']}")

    # Example 3: Outline of a live page.
    print("\nExample 3: extract-dom-tree\n")
    result = await executor.execute("extract-dom-tree", {"url": "https://example.com"})
    print(f"  body has {len(result['tree']['children'])} child element(s)")


if __name__ == "__main__":
    import asyncio

    asyncio.run(main())
