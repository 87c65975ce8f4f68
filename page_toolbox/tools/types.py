"""
Input and output schemas shared by the tools.

This module provides:
- ElementDescriptor / DomNode: the structured shapes produced by extraction
- *Input models: the ``args_schema`` of each tool
- *Output models: what each tool returns, validated after the handler runs
- DomTreeResult: the DOM tree output, checked without recursing through pydantic
"""

from typing import Any, Optional

from pydantic import AnyUrl, BaseModel, ConfigDict, Field, TypeAdapter, ValidationError, field_validator

_url_adapter = TypeAdapter(AnyUrl)


# ======================================================================
# Extraction shapes
# ======================================================================


class ElementDescriptor(BaseModel):
    tag: str = Field(..., description="Lower-cased tag name")
    type: Optional[str] = Field(None, description="The element's type attribute")
    text: Optional[str] = Field(None, description="Trimmed text content")
    selector: str = Field(
        ...,
        description='Selector to reach the element: #id, [name="..."] or the tag name',
    )


class DomNode(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    tag: str = Field(..., description="Lower-cased tag name")
    id: Optional[str] = Field(None, description="The element id")
    class_: Optional[str] = Field(None, alias="class", description="The class attribute")
    children: list["DomNode"] = Field(default_factory=list)


# ======================================================================
# Tool inputs
# ======================================================================


class UrlInput(BaseModel):
    """Input for tools that navigate to a URL."""

    url: str = Field(..., description="Absolute URL of the page to load")

    @field_validator("url")
    @classmethod
    def check_url(cls, value: str) -> str:
        # Parse only; handlers receive the caller's string untouched
        try:
            _url_adapter.validate_python(value)
        except ValidationError as e:
            raise ValueError(f"invalid URL {value!r}: {e.errors()[0]['msg']}") from e
        return value


class HtmlInput(BaseModel):
    html: str = Field(..., description="Raw HTML markup")


class InnerHtmlInput(UrlInput):
    selector: str = Field(
        ...,
        description="CSS selector of the element (e.g., 'div.content', '#main', 'article')",
    )


# ======================================================================
# Tool outputs
# ======================================================================


class AnalyzePageOutput(BaseModel):
    title: str = Field(..., description="Document title")
    elements: list[ElementDescriptor] = Field(
        ..., description="Interactive elements in document order"
    )


class ScreenshotOutput(BaseModel):
    imageBase64: str = Field(..., description="Base64-encoded full-page PNG")


class DomTreeOutput(BaseModel):
    """Advertised shape of extract-dom-tree's result (recursive ``DomNode``)."""

    tree: DomNode = Field(..., description="Element tree rooted at the document body")


_DOM_NODE_KEYS = frozenset({"tag", "id", "class", "children"})


def check_dom_tree(tree: Any) -> None:
    """Check every node of a serialized DOM tree, walking it with a work stack.

    Raises:
        ValueError: A node is not shaped like ``DomNode``
    """
    stack = [(tree, 0)]
    while stack:
        node, depth = stack.pop()
        if not isinstance(node, dict):
            raise ValueError(f"node at depth {depth} must be an object")
        unknown = set(node) - _DOM_NODE_KEYS
        if unknown:
            raise ValueError(f"node at depth {depth}: unexpected keys {sorted(unknown)}")
        if not isinstance(node.get("tag"), str):
            raise ValueError(f"node at depth {depth}: tag must be a string")
        for key in ("id", "class"):
            if key in node and not isinstance(node[key], str):
                raise ValueError(f"node at depth {depth}: {key} must be a string")
        children = node.get("children")
        if not isinstance(children, list):
            raise ValueError(f"node at depth {depth}: children must be a list")
        stack.extend((child, depth + 1) for child in children)


class DomTreeResult(BaseModel):
    """Validated form of extract-dom-tree's result.

    pydantic-core stops descending into recursive models a few hundred levels
    down, so the tree stays a plain dict and is checked by ``check_dom_tree``.
    """

    tree: dict[str, Any] = Field(..., description="Element tree rooted at the document body")

    @field_validator("tree")
    @classmethod
    def check_tree(cls, value: dict[str, Any]) -> dict[str, Any]:
        check_dom_tree(value)
        return value


class HtmlContentOutput(BaseModel):
    html: str = Field(..., description="Serialized document markup")


class InnerHtmlOutput(BaseModel):
    innerHTML: Optional[str] = Field(
        ..., description="innerHTML of the first match, null when nothing matched"
    )


class SanitizeOutput(BaseModel):
    sanitized: str = Field(..., description="HTML with unsafe constructs removed")
