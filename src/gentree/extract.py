"""New-content extractor: which parts of the latest document must be inserted?

Mirror of :mod:`gentree.detect`, in the coordinates of the current root.
The walk alternates between two modes:

- searching for a range start: reused subtrees (older ``gen_id``) are skipped
  whole. A wholly new subtree opens a range at its own start, boundary
  included, and is absorbed without descent. A new branch that still holds
  older content is descended; its boundary tokens stand in for those of the
  orphaned container it replaced, so they are not new.
- extending an open range: wholly new subtrees are absorbed. Anything else
  closes the range at its start and is then handled as in searching mode.
  Leaving a descended branch closes the range before its closing boundary.

Because a wholly new subtree opens the range at its outermost new boundary, a
new leaf that is the sole content of several nested new branches yields one
range starting at the outermost of them.

Example:
    doc(paragraph("[]"), paragraph(), paragraph("{}"))   # middle one reused
        ^                ^            ^                ^
        0                4            6                10

    new_ranges(factory, root) == [NewRange(0, 4), NewRange(6, 10)]

"""

from typing import NamedTuple

from gentree.nodes import Branch, Node
from gentree.positions import content_span
from gentree.stamps import NodeFactory


class NewRange(NamedTuple):
    """Half-open range ``[start, end)`` of content new in this generation."""

    start: int
    end: int


def new_ranges(factory: NodeFactory, current_root: Branch) -> list[NewRange]:
    """Find the minimal ranges of ``current_root`` built in its own generation.

    Returns:
        Ascending, non-overlapping ranges in ``current_root`` coordinates. Each
        covers whole sibling subtrees, so it can be sliced out verbatim.

    Raises:
        StampMissingError: A visited node was not built by ``factory``.

    """
    current = factory.gen_id(current_root)
    ranges: list[NewRange] = []
    open_start: int | None = None

    def visit(node: Node, pos: int) -> None:
        nonlocal open_start
        wholly_new = factory.oldest_gen_id(node) == current
        if open_start is not None:
            if wholly_new:
                return
            ranges.append(NewRange(open_start, pos))
            open_start = None

        if wholly_new:
            open_start = pos
            return
        # A new branch around older content: only its children can be new.
        if isinstance(node, Branch) and factory.gen_id(node) == current:
            visit_children(node, pos + 1)

    def visit_children(node: Branch, cursor: int) -> None:
        nonlocal open_start
        for child in node.children:
            visit(child, cursor)
            cursor += child.size
        if open_start is not None and node is not current_root:
            ranges.append(NewRange(open_start, cursor))
            open_start = None

    visit_children(current_root, 0)
    if open_start is not None:
        ranges.append(NewRange(open_start, content_span(current_root)))
    return ranges


__all__ = ["NewRange", "new_ranges"]
