"""Linear position model shared by every reconciliation algorithm.

A tree is addressed as a flat sequence of positions. A leaf occupies one
position per UTF-16 unit of its text. A branch occupies one position for its
opening boundary, its children, and one for its closing boundary. The document
root is the exception: its own boundary is not addressable, and position 0 is
the point just inside the root, before its first child.

    doc(paragraph("Hello"), paragraph("world"))
        ^          ^        ^          ^
        0          1        7          8

All traversals are depth-first, left to right. Entering a non-root branch
advances the running position by 1 before its children are visited; each
child's full span is added after the child is done.

"""

from gentree.nodes import Branch, Node


def span(node: Node) -> int:
    """Number of positions ``node`` occupies, boundaries included."""
    return node.size


def content_span(root: Branch) -> int:
    """Addressable size of a document root (its boundary excluded)."""
    return root.size - 2


def slice_content(root: Branch, start: int, end: int) -> tuple[Node, ...]:
    """Return the consecutive sibling subtrees that exactly tile ``[start, end)``.

    Positions are in ``root``'s content coordinates. The range may lie at any
    depth: the walk descends into the branch whose content holds it.

    Raises:
        ValueError: The range is out of bounds or does not fall on sibling
            boundaries.

    """
    if not 0 <= start <= end <= content_span(root):
        raise ValueError(f"Range [{start}, {end}) is outside the document")
    if start == end:
        return ()

    node, base = root, 0
    while True:
        picked: list[Node] = []
        cursor = base
        descend: tuple[Branch, int] | None = None
        for child in node.children:
            child_end = cursor + child.size
            if start <= cursor and child_end <= end:
                picked.append(child)
            elif isinstance(child, Branch) and cursor < start and end < child_end:
                descend = (child, cursor + 1)
                break
            cursor = child_end
        if descend is None:
            break
        node, base = descend

    covered = sum(child.size for child in picked)
    if not picked or covered != end - start:
        raise ValueError(f"Range [{start}, {end}) does not fall on sibling boundaries")
    return tuple(picked)


__all__ = ["content_span", "slice_content", "span"]
