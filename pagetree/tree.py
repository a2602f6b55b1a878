"""Generic ordered tree used to hold document elements."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterator, List, Optional


class NodeKind(str, Enum):
    NAMED = "named"
    ANONYMOUS = "anonymous"


@dataclass(frozen=True, eq=False)
class TreeNode:
    """A node owning a value and an ordered list of children.

    Named nodes carry a ``key`` and can be used as attachment points by
    :class:`pagetree.renderer.DocumentRenderer`. Anonymous nodes have
    ``key=None``. Value and key are fixed at construction; only the children
    grow, in insertion order.
    """

    value: Any
    key: Optional[str] = None
    _children: List["TreeNode"] = field(default_factory=list, init=False, repr=False)

    @classmethod
    def named(cls, key: str, value: Any) -> "TreeNode":
        return cls(value=value, key=key)

    @classmethod
    def anonymous(cls, value: Any) -> "TreeNode":
        return cls(value=value)

    @property
    def kind(self) -> NodeKind:
        return NodeKind.ANONYMOUS if self.key is None else NodeKind.NAMED

    def add(self, *nodes: "TreeNode") -> "TreeNode":
        """Append nodes in argument order and return ``self`` for chaining."""
        self._children.extend(nodes)
        return self

    def children(self) -> Iterator["TreeNode"]:
        return iter(tuple(self._children))
