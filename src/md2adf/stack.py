"""Block context stack tracking where new ADF content is inserted."""

from __future__ import annotations

from dataclasses import dataclass, field

from md2adf.exceptions import StackError
from md2adf.schemas import Node, NodeType, is_inline_type


@dataclass
class Restriction:
    """A scope in which only paragraphs may be materialized.

    Attributes:
        owner: The node that opened the scope (a block quote).
        covered: Nodes pushed inside the scope, owner first, whether or not
            they reached the document.
        materialized: False when the owner itself was never added, so its
            paragraphs surface in the enclosing block.
    """

    owner: Node
    covered: list[Node] = field(default_factory=list)
    materialized: bool = True


class BlockContextStack:
    """Open block nodes from the document root to the current insertion point.

    ADF nests less freely than markdown. While a restriction is active only
    paragraphs are added to the document; other blocks are tracked so that
    pops stay balanced, and their paragraph descendants surface as siblings
    inside the restricting node.
    """

    def __init__(self, root: Node) -> None:
        self._nodes: list[Node] = [root]
        self.restriction: Restriction | None = None

    @property
    def depth(self) -> int:
        """Number of materialized open nodes, root included."""
        return len(self._nodes)

    @property
    def restricted(self) -> bool:
        return self.restriction is not None

    def peek(self) -> Node:
        """Return the node currently receiving content."""
        return self._nodes[-1]

    def push_content(self, node: Node) -> None:
        """Append ``node`` to the current block without opening it."""
        self.peek().add_content(node)

    def push_block(self, node: Node) -> bool:
        """Append ``node`` and make it the insertion point.

        Returns:
            True if the node was added to the document, False if a restriction
            dropped it.

        Raises:
            StackError: If ``node`` is an inline node.
        """
        if is_inline_type(node.type):
            raise StackError(f"Inline {node.type.value} node cannot open a block context")
        if self.restriction is not None:
            self.restriction.covered.append(node)
            if node.type is not NodeType.PARAGRAPH:
                return False

        self.push_content(node)
        self._nodes.append(node)
        return True

    def pop_block(self) -> Node:
        """Close the most recently pushed block and return it.

        Raises:
            StackError: If only the root is open.
        """
        restriction = self.restriction
        if restriction is not None:
            node = restriction.covered.pop()
            if not restriction.covered:
                self.restriction = None
                if not restriction.materialized:
                    return node
            elif node.type is not NodeType.PARAGRAPH:
                # Dropped by the restriction, never opened.
                return node

        if len(self._nodes) == 1:
            raise StackError("Cannot pop the document root")
        return self._nodes.pop()

    def begin_restriction(self, node: Node) -> None:
        """Allow only paragraphs below ``node`` until it is popped.

        Has no effect while a restriction is already active; the outermost
        restricting node keeps the scope.
        """
        if self.restriction is not None:
            return
        self.restriction = Restriction(owner=node, covered=[node])

    def flatten_block(self, node: Node) -> None:
        """Open ``node`` as a restriction owner without adding it to the document.

        Paragraphs below ``node`` are appended to the current block instead,
        and every other block below it is dropped. Close it with
        :meth:`pop_block` like any other block.
        """
        if self.restriction is not None:
            self.restriction.covered.append(node)
            return
        self.restriction = Restriction(owner=node, covered=[node], materialized=False)
