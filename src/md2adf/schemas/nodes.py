"""ADF document tree models."""

from __future__ import annotations

from pydantic import BaseModel, Field, model_validator

from md2adf.schemas.types import Layout, MarkType, NodeType


class Attributes(BaseModel):
    """Type-specific node attributes."""

    width: float | None = Field(None, gt=0, le=100)
    layout: Layout | None = None
    level: int | None = Field(None, ge=1, le=6)
    language: str | None = None
    order: int | None = Field(None, ge=0)


class MarkAttributes(BaseModel):
    """Link target for link marks."""

    href: str
    title: str | None = None


class Mark(BaseModel):
    """An inline formatting annotation on a text node."""

    type: MarkType
    attrs: MarkAttributes | None = None


class Node(BaseModel):
    """A node in an ADF document.

    Container nodes carry ``content``; text leaves carry ``text`` and
    ``marks``. Fields left as None are omitted when serialized.
    """

    version: int | None = None
    type: NodeType
    attrs: Attributes | None = None
    content: list["Node"] | None = None
    marks: list[Mark] | None = None
    text: str | None = None

    @model_validator(mode="after")
    def check_payload(self) -> "Node":
        if self.content is not None and self.text is not None:
            raise ValueError(f"{self.type.value} node cannot hold both content and text")
        if self.marks is not None and self.type is not NodeType.TEXT:
            raise ValueError(f"marks are only allowed on text nodes, not {self.type.value}")
        return self

    def add_content(self, node: Node) -> None:
        """Append a child node."""
        if self.content is None:
            self.content = []
        self.content.append(node)
