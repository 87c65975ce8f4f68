"""Descriptions for the browser and HTML tools."""

# ============== Page Analysis Tools ==============

ANALYZE_PAGE_DESCRIPTION: str = """
Analyze the interactive elements on a given URL page.

## When to Use

- Finding the inputs, buttons, links, selects and textareas on a live page
- Getting a selector for an element before generating automation code
- Checking the title of a page

## When NOT to Use

- When you already have the HTML as a string (use analyze-html instead)
- When you need the full page structure (use extract-dom-tree instead)

## Usage Notes

- Elements are listed in document order
- Selectors prefer #id, then [name="..."], then the bare tag name
- A tag-name selector is not unique; verify before relying on it
""".strip()


ANALYZE_HTML_DESCRIPTION: str = """
Analyze HTML string and return interactive elements.

## When to Use

- Finding the interactive elements of markup you already have
- Working on HTML that is not served anywhere

## Usage Notes

- Same output as analyze-page
- Malformed markup is parsed best-effort, the way a browser would
- No network access: external resources referenced by the markup are not loaded
""".strip()


# ============== Page Capture Tools ==============

SCREENSHOT_DESCRIPTION: str = """
Take a full-page screenshot and return it as base64.

## When to Use

- Checking what a page looks like after it has loaded
- Visual comparison of layouts

## Usage Notes

- Captures the whole scrollable page, not just the viewport
- Returns a base64-encoded PNG
""".strip()


DOM_TREE_DESCRIPTION: str = """
Extract a simplified DOM tree structure from a page.

## When to Use

- Understanding how a page is laid out before writing selectors
- Finding container elements by id or class

## Usage Notes

- The tree starts at the document body
- Each node has tag, optional id, optional class and its children in order
- Text content is not included
""".strip()


HTML_CONTENT_DESCRIPTION: str = """
Get the full HTML content of a URL.

## When to Use

- Reading the rendered markup of a page, after scripts have run

## When NOT to Use

- When you only need one element (use extract-inner-html instead)
""".strip()


INNER_HTML_DESCRIPTION: str = """
Extract innerHTML of an element using a CSS selector.

## When to Use

- Reading one section of a page (e.g., selector="article", selector="#main")

## Usage Notes

- Only the first matching element is used
- innerHTML is null when no element matches; this is not an error
""".strip()


# ============== HTML Tools ==============

SANITIZE_HTML_DESCRIPTION: str = """
Sanitize an HTML string (remove scripts/styles and unsafe tags).

## Usage Notes

- Removes script, style and iframe blocks, double-quoted on*="..." handler
  attributes and javascript: scheme prefixes
- Best-effort textual filter: single-quoted or unquoted handlers and
  obfuscated markup are not caught
- Never touches the network
""".strip()
