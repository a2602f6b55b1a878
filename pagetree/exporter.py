"""Serialization of element trees."""

from __future__ import annotations

from typing import List, Set

from .tree import NodeKind, TreeNode


def export_html(node: TreeNode) -> str:
    """Serialize ``node`` and its subtree to markup.

    Opening tag and block are emitted before the children, the closing tag
    after them. Children are visited in insertion order.
    """
    return _export(node, set())


def _export(node: TreeNode, ancestors: Set[int]) -> str:
    marker = id(node)
    if marker in ancestors:
        raise ValueError(f"Cycle detected while exporting node {node.key or node.value!r}")
    ancestors.add(marker)

    element = node.value
    parts: List[str] = [element.open_tag(), element.render_block()]
    for child in node.children():
        parts.append(_export(child, ancestors))
    parts.append(element.close_tag())

    ancestors.discard(marker)
    return "".join(parts)


def _format_label(node: TreeNode) -> str:
    label = getattr(node.value, "label", type(node.value).__name__)
    if node.kind is NodeKind.NAMED:
        return f"{label} #{node.key}"
    return label


def export_outline(node: TreeNode) -> str:
    """Render the tree as an ASCII outline, one line per node."""
    lines = [_format_label(node)]
    children = list(node.children())
    for i, child in enumerate(children):
        lines.extend(_outline_subtree(child, "", i == len(children) - 1))
    return "\n".join(lines) + "\n"


def _outline_subtree(node: TreeNode, prefix: str, is_last: bool) -> List[str]:
    connector = "└── " if is_last else "├── "
    lines = [prefix + connector + _format_label(node)]
    child_prefix = prefix + ("    " if is_last else "│   ")
    children = list(node.children())
    for i, child in enumerate(children):
        lines.extend(_outline_subtree(child, child_prefix, i == len(children) - 1))
    return lines
