"""Walk a markdown-it syntax tree and build an ADF document."""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Literal, NamedTuple

from md2adf.exceptions import ConversionError, UnmappedNodeError, UnsupportedNodeError
from md2adf.html_utils import html_to_text
from md2adf.mapping import (
    block_node_for,
    compose_marks,
    link_mark,
    literal_text,
    mark_for,
    text_node,
)
from md2adf.schemas import Mark, MarkType, Node, NodeType
from md2adf.stack import BlockContextStack
from md2adf.utils.logging_config import get_logger

if TYPE_CHECKING:
    from markdown_it.tree import SyntaxTreeNode

logger = get_logger(__name__)

RawHtmlPolicy = Literal["text", "reject"]
ImagePolicy = Literal["link", "reject"]

# Structural wrappers with no ADF node of their own.
_TRANSPARENT = frozenset({"root", "inline", "thead", "tbody"})
_BLOCKS = frozenset({"paragraph", "bullet_list", "ordered_list", "tr"})
_STYLES = frozenset({"em", "strong", "s", "link"})


class Step(NamedTuple):
    """What the walker does after entering a node.

    Attributes:
        descend: Visit the node's children.
        opened: Block contexts to close when the node is exited.
        marked: A mark was pushed and must be removed on exit.
        filled: A container that gets an empty paragraph on exit if nothing
            was added to it.
    """

    descend: bool
    opened: int = 0
    marked: bool = False
    filled: Node | None = None


class AdfTransformer:
    """Convert one markdown syntax tree into an ADF document.

    An instance holds the state of a single conversion and cannot be reused.

    Args:
        stack_marks: Accumulate marks through nested styling. When False, a
            styling node becomes one text leaf carrying only its own mark.
        raw_html: ``"text"`` keeps the visible text of raw HTML, ``"reject"``
            raises UnsupportedNodeError.
        images: ``"link"`` renders an image as its alt text linked to the
            image URL, ``"reject"`` raises UnsupportedNodeError.
    """

    def __init__(
        self,
        *,
        stack_marks: bool = True,
        raw_html: RawHtmlPolicy = "text",
        images: ImagePolicy = "link",
    ) -> None:
        self.stack_marks = stack_marks
        self.raw_html = raw_html
        self.images = images
        self.document = Node(type=NodeType.DOC, version=1, content=[])
        self._stack = BlockContextStack(self.document)
        self._marks: list[Mark] = []
        self._used = False
        self._handlers: dict[str, Callable[[SyntaxTreeNode], Step]] = {
            "heading": self._enter_heading,
            "blockquote": self._enter_blockquote,
            "list_item": self._enter_list_item,
            "table": self._enter_table,
            "hr": self._enter_rule,
            "fence": self._enter_code_block,
            "code_block": self._enter_code_block,
            "th": self._enter_table_cell,
            "td": self._enter_table_cell,
            "text": self._enter_text,
            "softbreak": self._enter_text,
            "hardbreak": self._enter_hard_break,
            "code_inline": self._enter_code_inline,
            "image": self._enter_image,
            "html_block": self._enter_html_block,
            "html_inline": self._enter_html_inline,
        }

    def transform(self, tree: SyntaxTreeNode) -> Node:
        """Walk ``tree`` and return the finished ADF document."""
        if self._used:
            raise ConversionError("AdfTransformer instances convert a single document")
        self._used = True

        self._walk(tree)
        if self._stack.depth != 1 or self._stack.restricted:
            raise ConversionError("Unbalanced block context after traversal")
        return self.document

    def _walk(self, node: SyntaxTreeNode) -> None:
        step = self._enter(node)
        if step.descend:
            for child in node.children:
                self._walk(child)
        self._exit(step)

    def _enter(self, node: SyntaxTreeNode) -> Step:
        if node.type in _TRANSPARENT:
            return Step(descend=True)
        if node.type in _BLOCKS:
            self._stack.push_block(block_node_for(node))
            return Step(descend=True, opened=1)
        if node.type in _STYLES:
            return self._enter_style(node)

        handler = self._handlers.get(node.type)
        if handler is None:
            raise UnmappedNodeError(f"No ADF mapping for markdown node type {node.type!r}")
        return handler(node)

    def _exit(self, step: Step) -> None:
        if step.marked:
            self._marks.pop()
        if step.filled is not None and not step.filled.content:
            # ADF block quotes and list items need at least one child.
            step.filled.add_content(Node(type=NodeType.PARAGRAPH))
        for _ in range(step.opened):
            self._stack.pop_block()

    def _enter_heading(self, node: SyntaxTreeNode) -> Step:
        # ADF headings are only valid at the document root.
        if self._stack.restricted or self._stack.peek().type is not NodeType.DOC:
            logger.debug("Nested heading rendered as paragraph")
            self._stack.push_block(Node(type=NodeType.PARAGRAPH))
        else:
            self._stack.push_block(block_node_for(node))
        return Step(descend=True, opened=1)

    def _enter_blockquote(self, node: SyntaxTreeNode) -> Step:
        quote = block_node_for(node)
        if not self._stack.restricted and self._stack.peek().type is NodeType.LIST_ITEM:
            logger.debug("Blockquote inside list item flattened into the item")
            self._stack.flatten_block(quote)
            return Step(descend=True, opened=1)

        materialized = self._stack.push_block(quote)
        if not materialized:
            logger.debug("Nested blockquote flattened into enclosing blockquote")
        # ADF block quotes hold paragraphs only.
        self._stack.begin_restriction(quote)
        return Step(descend=True, opened=1, filled=quote if materialized else None)

    def _enter_list_item(self, node: SyntaxTreeNode) -> Step:
        item = block_node_for(node)
        materialized = self._stack.push_block(item)
        return Step(descend=True, opened=1, filled=item if materialized else None)

    def _enter_table(self, node: SyntaxTreeNode) -> Step:
        table = block_node_for(node)
        if not self._stack.restricted and self._stack.peek().type is NodeType.LIST_ITEM:
            logger.debug("Table inside list item flattened into the item")
            self._stack.flatten_block(table)
        else:
            self._stack.push_block(table)
        return Step(descend=True, opened=1)

    def _enter_rule(self, node: SyntaxTreeNode) -> Step:
        if self._stack.restricted or self._stack.peek().type is not NodeType.DOC:
            logger.debug("Nested rule dropped")
            return Step(descend=False)
        self._stack.push_block(block_node_for(node))
        return Step(descend=False, opened=1)

    def _enter_code_block(self, node: SyntaxTreeNode) -> Step:
        # Code content is kept verbatim and never parsed as markdown.
        if self._stack.restricted:
            logger.debug("Code block inside restricted block rendered as code text")
            paragraph = Node(type=NodeType.PARAGRAPH)
            paragraph.add_content(
                text_node(node.content.rstrip("\n"), compose_marks([], Mark(type=MarkType.CODE)))
            )
            self._stack.push_block(paragraph)
            return Step(descend=False, opened=1)

        code_block = block_node_for(node)
        code_block.add_content(text_node(node.content))
        self._stack.push_block(code_block)
        return Step(descend=False, opened=1)

    def _enter_table_cell(self, node: SyntaxTreeNode) -> Step:
        # ADF cells hold blocks; markdown cells hold inline content.
        self._stack.push_block(block_node_for(node))
        self._stack.push_block(Node(type=NodeType.PARAGRAPH))
        return Step(descend=True, opened=2)

    def _enter_text(self, node: SyntaxTreeNode) -> Step:
        if node.type == "text" and not node.content:
            # Left over around emphasis delimiters, not a text run.
            return Step(descend=False)
        text = node.content if node.type == "text" else ""
        self._stack.push_content(text_node(text, compose_marks(self._marks)))
        return Step(descend=False)

    def _enter_hard_break(self, node: SyntaxTreeNode) -> Step:
        self._stack.push_content(Node(type=NodeType.HARD_BREAK))
        return Step(descend=False)

    def _enter_code_inline(self, node: SyntaxTreeNode) -> Step:
        marks = compose_marks(self._marks, mark_for(node))
        self._stack.push_content(text_node(node.content, marks))
        return Step(descend=False)

    def _enter_style(self, node: SyntaxTreeNode) -> Step:
        mark = mark_for(node)
        if not self.stack_marks:
            self._stack.push_content(text_node(literal_text(node), [mark]))
            return Step(descend=False)

        self._marks.append(mark)
        return Step(descend=True, marked=True)

    def _enter_image(self, node: SyntaxTreeNode) -> Step:
        src = str(node.attrs.get("src", ""))
        if self.images == "reject":
            raise UnsupportedNodeError(f"Images are not supported: {src}")

        mark = link_mark(src, node.attrs.get("title"))
        self._stack.push_content(text_node(node.content or src, compose_marks(self._marks, mark)))
        return Step(descend=False)

    def _enter_html_block(self, node: SyntaxTreeNode) -> Step:
        text = self._html_text(node)
        if text:
            paragraph = Node(type=NodeType.PARAGRAPH)
            paragraph.add_content(text_node(text))
            self._stack.push_block(paragraph)
            self._stack.pop_block()
        return Step(descend=False)

    def _enter_html_inline(self, node: SyntaxTreeNode) -> Step:
        text = self._html_text(node)
        if text:
            self._stack.push_content(text_node(text, compose_marks(self._marks)))
        return Step(descend=False)

    def _html_text(self, node: SyntaxTreeNode) -> str:
        if self.raw_html == "reject":
            raise UnsupportedNodeError(f"Raw HTML is not supported: {node.content.strip()!r}")
        return html_to_text(node.content)
