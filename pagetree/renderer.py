"""Document assembly: named lookup, subtree insertion and rendering."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Set

from .exporter import export_html
from .tree import NodeKind, TreeNode


class NodeNotFoundError(LookupError):
    """Raised by strict appends when no named node matches the target."""


@dataclass
class DocumentRenderer:
    root: TreeNode

    def render(self) -> str:
        return export_html(self.root)

    def append_node(self, target: str, node: TreeNode, *, strict: bool = False) -> bool:
        """Attach ``node`` as the last child of the node named ``target``.

        A missing target leaves the tree untouched and returns ``False``;
        with ``strict=True`` it raises :class:`NodeNotFoundError` instead.
        """
        found = self.find_node_by_name(target)
        if found is None:
            if strict:
                raise NodeNotFoundError(f"No node named '{target}' in document")
            return False
        found.add(node)
        return True

    def find_node_by_name(self, name: str, start: Optional[TreeNode] = None) -> Optional[TreeNode]:
        """Pre-order search for the first named node whose key equals ``name``.

        Raises ``ValueError`` if the search reaches a node on its own ancestor path.
        """
        return _find(name, self.root if start is None else start, set())


def _find(name: str, node: TreeNode, ancestors: Set[int]) -> Optional[TreeNode]:
    if node.kind is NodeKind.NAMED and node.key == name:
        return node
    marker = id(node)
    if marker in ancestors:
        raise ValueError(f"Cycle detected while searching for '{name}'")
    ancestors.add(marker)
    for child in node.children():
        match = _find(name, child, ancestors)
        if match is not None:
            return match
    ancestors.discard(marker)
    return None
