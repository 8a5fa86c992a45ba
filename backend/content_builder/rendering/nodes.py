"""
Visual tree nodes.

A node is a plain dict ``{"tag", "attrs", "children"}``; text children are
plain strings. Trees are JSON-serializable and can be turned into HTML with
``render_html``.
"""
from typing import Any, Callable, Dict, Iterator, List, Optional, Union

from markupsafe import Markup, escape

Node = Dict[str, Any]
Child = Union[Node, str]

VOID_TAGS = frozenset({"img", "br", "hr", "input", "source"})


def cx(*classes) -> str:
    """Join truthy class names."""
    return " ".join(c for c in classes if c)


def el(tag: str, *children: Optional[Child], cls: str = "", style=None, **attrs) -> Node:
    node_attrs: Dict[str, Any] = {}
    if cls:
        node_attrs["class"] = cls
    if style:
        node_attrs["style"] = {k: v for k, v in style.items() if v is not None}
    for key, value in attrs.items():
        if value is None or value is False:
            continue
        node_attrs[key.rstrip("_").replace("_", "-")] = value

    return {
        "tag": tag,
        "attrs": node_attrs,
        "children": [c for c in children if c is not None and c != ""],
    }


def iter_nodes(node: Child) -> Iterator[Node]:
    """Depth-first walk over element nodes."""
    if isinstance(node, str):
        return
    yield node
    for child in node.get("children", ()):
        yield from iter_nodes(child)


def find_all(node: Node, predicate: Callable[[Node], bool]) -> List[Node]:
    return [n for n in iter_nodes(node) if predicate(n)]


def by_role(node: Node, role: str) -> List[Node]:
    return find_all(node, lambda n: n["attrs"].get("data-role") == role)


def text_content(node: Child) -> str:
    if isinstance(node, str):
        return node
    return "".join(text_content(child) for child in node.get("children", ()))


def _render_attrs(attrs: Dict[str, Any]) -> str:
    parts = []
    for key, value in attrs.items():
        if value is True:
            parts.append(f" {key}")
            continue
        if isinstance(value, dict):
            value = "; ".join(f"{k}: {v}" for k, v in value.items())
        parts.append(f' {key}="{escape(value)}"')
    return "".join(parts)


def render_html(node: Child) -> Markup:
    if isinstance(node, str):
        return escape(node)

    tag = node["tag"]
    attrs = _render_attrs(node.get("attrs", {}))

    if tag in VOID_TAGS:
        return Markup(f"<{tag}{attrs}>")

    inner = "".join(render_html(child) for child in node.get("children", ()))
    return Markup(f"<{tag}{attrs}>{inner}</{tag}>")
