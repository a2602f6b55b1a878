"""The bundled demo page: a two-column layout with sidebar placeholders."""

from __future__ import annotations

from .blocks import FAVOURITE_BLOCK, WISHLIST_BLOCK, TextBlock
from .elements import HtmlElement, TaglessElement, attributes
from .renderer import DocumentRenderer
from .tree import TreeNode

DEMO_TITLE = "Yolo"

DEMO_CSS = """
    .container {
        width: 800px;
        margin: 0 auto;
        border: 1px solid red;
        display: flex;
    }

    .container .sidebar {
        width: 25%;
        border: 1px solid blue;
    }

    .container .content {
        width: 75%;
    }
"""


def build_demo_document() -> TreeNode:
    """Return the base page: doctype, ``head`` and an empty ``body``."""
    head = TreeNode.named("head", HtmlElement("head")).add(
        TreeNode.anonymous(HtmlElement("meta", attributes(charset="UTF-8"), self_closing=True)),
        TreeNode.anonymous(
            HtmlElement(
                "meta",
                {"http-equiv": "X-UA-Compatible", "content": "IE=edge"},
                self_closing=True,
            )
        ),
        TreeNode.anonymous(HtmlElement("title", block=TextBlock(DEMO_TITLE))),
    )
    page = TreeNode.anonymous(HtmlElement("html", attributes(lang="en"))).add(
        head,
        TreeNode.named("body", HtmlElement("body")),
    )
    return TreeNode.anonymous(TaglessElement()).add(
        TreeNode.anonymous(HtmlElement("!DOCTYPE", attributes("html"), self_closing=True)),
        page,
    )


def build_demo_renderer() -> DocumentRenderer:
    """Return a renderer for the demo page with container, sidebar and styles attached."""
    renderer = DocumentRenderer(build_demo_document())

    container = TreeNode.anonymous(
        HtmlElement(attributes={"class": "container", "id": "container"})
    ).add(
        TreeNode.named("sidebar", HtmlElement(attributes={"class": "sidebar"})).add(
            TreeNode.named(
                "wishlist",
                HtmlElement(attributes={"class": "wishlist"}, block=WISHLIST_BLOCK),
            )
        ),
        TreeNode.named("content", HtmlElement(attributes={"class": "content"})),
    )
    renderer.append_node("body", container)
    renderer.append_node(
        "sidebar",
        TreeNode.named(
            "favourite",
            HtmlElement(attributes={"class": "favourites"}, block=FAVOURITE_BLOCK),
        ),
    )
    renderer.append_node("head", TreeNode.named("style", HtmlElement("style")))
    renderer.append_node("style", TreeNode.anonymous(TaglessElement(TextBlock(DEMO_CSS))))
    return renderer
