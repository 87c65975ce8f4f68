"""
DOM tree extraction tool: extract-dom-tree.
"""

from typing import Any

from langchain_core.tools import StructuredTool

from page_toolbox.tools.browser.session import BrowserSessionManager
from page_toolbox.tools.description import DOM_TREE_DESCRIPTION
from page_toolbox.tools.errors import BrowserSessionError
from page_toolbox.tools.types import UrlInput

# Flat pre-order list; each entry names its parent's index (-1 for body).
# The class attribute is read directly so SVG nodes yield a string too.
SERIALIZE_BODY_SCRIPT = """() => {
    if (!document.body) {
        return null;
    }
    const nodes = [];
    const stack = [[document.body, -1]];
    while (stack.length > 0) {
        const [el, parent] = stack.pop();
        const index = nodes.length;
        nodes.push({
            tag: el.tagName,
            id: el.getAttribute('id'),
            className: el.getAttribute('class'),
            parent: parent,
        });
        for (let i = el.children.length - 1; i >= 0; i--) {
            stack.push([el.children[i], index]);
        }
    }
    return nodes;
}"""


def _normalize_node(raw: dict[str, Any]) -> dict[str, Any]:
    node: dict[str, Any] = {"tag": (raw.get("tag") or "").lower()}
    if raw.get("id"):
        node["id"] = raw["id"]
    if raw.get("className"):
        node["class"] = raw["className"]
    node["children"] = []
    return node


def build_dom_tree(raw_nodes: list[dict[str, Any]]) -> dict[str, Any]:
    """Rebuild the DomNode tree from the flat list reported by the page.

    The page lists elements in pre-order with the index of their parent, so
    no layer (page script, driver protocol, Python) nests as deep as the
    document. Appending in list order keeps children in document order.

    Args:
        raw_nodes: ``{tag, id, className, parent}`` entries, body first

    Returns:
        The body's DomNode payload
    """
    if not raw_nodes:
        raise ValueError("Serialized DOM tree is empty")

    nodes = [_normalize_node(raw) for raw in raw_nodes]
    for index, raw in enumerate(raw_nodes[1:], start=1):
        parent = raw["parent"]
        if not 0 <= parent < index:
            raise ValueError(f"Node {index} has invalid parent {parent}")
        nodes[parent]["children"].append(nodes[index])
    return nodes[0]


def make_extract_dom_tree_tool(manager: BrowserSessionManager) -> StructuredTool:
    async def extract_dom_tree(url: str) -> dict[str, Any]:
        async with manager.open_session() as session:
            await session.navigate(url)
            raw_nodes = await session.evaluate(SERIALIZE_BODY_SCRIPT)
            if raw_nodes is None:
                raise BrowserSessionError(f"Document at {url} has no body")
            return {"tree": build_dom_tree(raw_nodes)}

    return StructuredTool.from_function(
        coroutine=extract_dom_tree,
        name="extract-dom-tree",
        description=DOM_TREE_DESCRIPTION.splitlines()[0],
        args_schema=UrlInput,
    )
