"""Change locator: where does new content begin?

Finds the leftmost position separating content that is certainly unchanged
from content that might be new, using generation stamps only. A subtree
older than the root was reused by reference and is skipped without descent.

Example:
    doc(paragraph("Hello"), paragraph("world"))   # second paragraph is new
        ^                   ^          ^
        0                   7          8

    ``first_changed_position`` returns 8: the start of the new text.

"""

from gentree.nodes import Branch, Leaf, Node
from gentree.stamps import NodeFactory

NO_CHANGE = -1


def first_changed_position(factory: NodeFactory, root: Branch) -> int:
    """Position of the first content built in ``root``'s generation.

    Returns:
        The start position of the first new leaf. A new branch none of whose
        children are new (for instance an empty one) answers with its own
        opening boundary. ``NO_CHANGE`` when nothing below the root is new.

    Raises:
        StampMissingError: A visited node was not built by ``factory``.

    """
    current = factory.gen_id(root)

    def visit(node: Node, pos: int) -> int:
        if factory.gen_id(node) < current:
            return NO_CHANGE
        if isinstance(node, Leaf):
            return pos
        cursor = pos + 1
        for child in node.children:
            found = visit(child, cursor)
            if found != NO_CHANGE:
                return found
            cursor += child.size
        return pos

    # The root boundary sits at -1, so an unchanged root reports NO_CHANGE.
    return visit(root, -1)


__all__ = ["NO_CHANGE", "first_changed_position"]
