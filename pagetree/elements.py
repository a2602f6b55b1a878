"""Renderable elements stored in tree nodes."""

from __future__ import annotations

import html
from dataclasses import dataclass
from typing import Dict, List, Mapping, Optional, Protocol, Union

from .blocks import ContentBlock

AttrKey = Union[int, str]


class Element(Protocol):
    def open_tag(self) -> str: ...

    def render_block(self) -> str: ...

    def close_tag(self) -> str: ...


def attributes(*tokens: str, **named: str) -> Dict[AttrKey, str]:
    """Build an attribute mapping: bare tokens first, then ``key='value'`` pairs.

    Names that are not valid Python identifiers (``http-equiv``) can be passed
    by building the dict directly.
    """
    attrs: Dict[AttrKey, str] = dict(enumerate(tokens))
    attrs.update(named)
    return attrs


def render_attributes(attrs: Mapping[AttrKey, str], *, escape: bool = False) -> str:
    parts: List[str] = []
    for key, value in attrs.items():
        text = html.escape(str(value), quote=True) if escape else str(value)
        if isinstance(key, int) and key >= 0:
            parts.append(f" {text}")
        else:
            parts.append(f" {key}='{text}'")
    return "".join(parts)


def _render_optional(block: Optional[ContentBlock]) -> str:
    if block is None:
        return ""
    return block.render()


@dataclass
class HtmlElement:
    """A tagged element. ``self_closing`` suppresses the closing tag."""

    tag: str = "div"
    attributes: Optional[Dict[AttrKey, str]] = None
    block: Optional[ContentBlock] = None
    self_closing: bool = False
    escape: bool = False

    def __post_init__(self) -> None:
        if not self.tag:
            raise ValueError("HtmlElement requires a non-empty tag name")
        self.attributes = dict(self.attributes or {})

    @property
    def label(self) -> str:
        return self.tag

    def open_tag(self) -> str:
        return f"<{self.tag}{render_attributes(self.attributes, escape=self.escape)}>"

    def render_block(self) -> str:
        return _render_optional(self.block)

    def close_tag(self) -> str:
        if self.self_closing:
            return ""
        return f"</{self.tag}>"


@dataclass
class TaglessElement:
    """Grouping wrapper with no markup of its own."""

    block: Optional[ContentBlock] = None

    @property
    def label(self) -> str:
        return "#fragment"

    def open_tag(self) -> str:
        return ""

    def render_block(self) -> str:
        return _render_optional(self.block)

    def close_tag(self) -> str:
        return ""
