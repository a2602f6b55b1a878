"""Pydantic models for YAML page layouts."""

from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from .blocks import ContentBlock, MarkdownBlock, PlaceholderBlock, TemplateBlock, TextBlock
from .elements import AttrKey, HtmlElement, TaglessElement
from .io_utils import warn
from .renderer import DocumentRenderer
from .tree import TreeNode

_CONTENT_FIELDS = ("text", "markdown", "template", "placeholder")


def _stringify_value(value: Any) -> Any:
    # YAML reads bare true/no/2 as bool or number; quote them to keep the spelling
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    return value


def _stringify_entry(entry: Any) -> Any:
    if isinstance(entry, dict):
        return {name: _stringify_value(attr) for name, attr in entry.items()}
    return _stringify_value(entry)


class NodeSpec(BaseModel):
    """One node of a layout, with its nested children."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    tag: Optional[str] = Field(
        None, min_length=1, description="Element tag name; omit for a tagless wrapper."
    )
    key: Optional[str] = Field(
        None, description="Name used as an attachment point for later appends."
    )
    attributes: List[Union[str, Dict[str, str]]] = Field(
        default_factory=list,
        description=(
            "Ordered attributes. Strings are bare tokens (e.g. 'html' for the doctype), "
            "mappings render as key='value'."
        ),
    )
    self_closing: bool = Field(
        False, alias="selfClosing", description="Omit the closing tag (void elements)."
    )
    escape: bool = Field(
        False, description="HTML-escape attribute values and literal text; not allowed with other content."
    )
    text: Optional[str] = Field(None, description="Literal body text.")
    markdown: Optional[str] = Field(None, description="Markdown source rendered as the body.")
    template: Optional[str] = Field(
        None, description="Jinja2 template rendered against the layout context."
    )
    placeholder: Optional[str] = Field(None, description="Fixed label standing in for content.")
    children: List["NodeSpec"] = Field(default_factory=list, description="Child nodes in order.")

    @field_validator("attributes", mode="before")
    @classmethod
    def _mapping_to_entries(cls, value: Any) -> Any:
        if isinstance(value, dict):
            value = [{name: attr} for name, attr in value.items()]
        if isinstance(value, list):
            return [_stringify_entry(entry) for entry in value]
        return value

    @model_validator(mode="after")
    def _check_shape(self) -> "NodeSpec":
        given = [name for name in _CONTENT_FIELDS if getattr(self, name) is not None]
        if len(given) > 1:
            raise ValueError(f"Only one of {', '.join(_CONTENT_FIELDS)} may be set (got {', '.join(given)})")
        if self.tag is None and (self.attributes or self.self_closing):
            raise ValueError("Tagless nodes cannot have attributes or be self-closing")
        if self.escape and given and given[0] != "text":
            raise ValueError(f"escape only applies to text content, not {given[0]}")
        return self

    def attribute_mapping(self) -> Dict[AttrKey, str]:
        attrs: Dict[AttrKey, str] = {}
        position = 0
        for entry in self.attributes:
            if isinstance(entry, str):
                attrs[position] = entry
                position += 1
            else:
                attrs.update(entry)
        return attrs


class AppendSpec(BaseModel):
    """A subtree attached under the named node ``target``."""

    model_config = ConfigDict(extra="forbid")

    target: str
    node: NodeSpec


class LayoutSpec(BaseModel):
    """Top-level layout file."""

    model_config = ConfigDict(extra="forbid")

    root: NodeSpec
    appends: List[AppendSpec] = Field(
        default_factory=list, description="Subtrees attached after the root is built, in order."
    )
    context: Dict[str, Any] = Field(
        default_factory=dict, description="Variables available to template blocks."
    )


def load_layout(path: Path) -> LayoutSpec:
    data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    if not isinstance(data, dict):
        raise SystemExit(f"{path} must contain a mapping with a 'root' node.")
    try:
        return LayoutSpec.model_validate(data)
    except ValidationError as exc:
        raise SystemExit(f"Invalid layout in {path}: {exc}") from exc


def _build_block(spec: NodeSpec, context: Dict[str, Any]) -> Optional[ContentBlock]:
    if spec.text is not None:
        return TextBlock(spec.text, escape=spec.escape)
    if spec.markdown is not None:
        return MarkdownBlock(spec.markdown)
    if spec.template is not None:
        return TemplateBlock(spec.template, dict(context))
    if spec.placeholder is not None:
        return PlaceholderBlock(spec.placeholder)
    return None


def build_node(spec: NodeSpec, context: Optional[Dict[str, Any]] = None) -> TreeNode:
    """Turn a validated node spec into a tree node, recursively."""
    context = context or {}
    block = _build_block(spec, context)
    if spec.tag is None:
        element = TaglessElement(block)
    else:
        element = HtmlElement(
            spec.tag,
            spec.attribute_mapping(),
            block,
            self_closing=spec.self_closing,
            escape=spec.escape,
        )
    node = TreeNode(element, key=spec.key)
    return node.add(*(build_node(child, context) for child in spec.children))


def build_renderer(layout: LayoutSpec) -> DocumentRenderer:
    """Build the root tree and apply the layout's appends in order.

    Appends whose target does not exist are skipped with a warning.
    """
    renderer = DocumentRenderer(build_node(layout.root, layout.context))
    for append in layout.appends:
        attached = renderer.append_node(append.target, build_node(append.node, layout.context))
        if not attached:
            warn(f"Append target '{append.target}' not found; node skipped.")
    return renderer
