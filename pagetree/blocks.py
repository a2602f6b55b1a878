"""Content blocks rendered as the inner body of an element."""

from __future__ import annotations

import html
from dataclasses import dataclass, field
from typing import Any, Dict, Protocol

from jinja2 import Environment, StrictUndefined
from markdown import markdown


class ContentBlock(Protocol):
    def render(self) -> str: ...


@dataclass(frozen=True)
class TextBlock:
    """Literal text, emitted verbatim unless ``escape`` is set."""

    text: str
    escape: bool = False

    def render(self) -> str:
        if self.escape:
            return html.escape(self.text, quote=False)
        return self.text


@dataclass(frozen=True)
class PlaceholderBlock:
    """Stand-in for dynamic content; renders a fixed label."""

    label: str

    def render(self) -> str:
        return self.label


WISHLIST_BLOCK = PlaceholderBlock("WishlistBlock")
FAVOURITE_BLOCK = PlaceholderBlock("FavouriteBlock")


@dataclass(frozen=True)
class MarkdownBlock:
    source: str

    def render(self) -> str:
        return markdown(self.source)


_TEMPLATE_ENV = Environment(
    undefined=StrictUndefined,
    autoescape=True,
    keep_trailing_newline=True,
)


@dataclass(frozen=True)
class TemplateBlock:
    """Jinja2 template string rendered against a fixed context.

    Undefined variables raise ``jinja2.UndefinedError``; substituted values
    are HTML-escaped.
    """

    source: str
    context: Dict[str, Any] = field(default_factory=dict)

    def render(self) -> str:
        return _TEMPLATE_ENV.from_string(self.source).render(**self.context)
