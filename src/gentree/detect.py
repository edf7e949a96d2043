"""Dead-range detector: which parts of an old document did the edit remove?

Works in the coordinates of a previous root. A node is orphaned when no branch
built after that root's generation has claimed it as a child
(``parent_gen_id <= old_gen``). Live nodes are skipped whole; orphaned leaves
are dead outright; orphaned branches are dead where their children are.

Adjacent ranges are merged as children are combined, and a branch whose
children are all dead collapses into one range that also covers its own
boundary tokens, so a removed paragraph is deleted in one patch rather than
leaving an empty shell behind.

Example:
    gen 1: doc(paragraph("Hello"), paragraph("world"))
    gen 2: doc(paragraph())

    dead_ranges(factory, gen1_root) == [DeadRange(0, 14, "paragraph")]

"""

from typing import NamedTuple

from gentree.nodes import Branch, Leaf, Node
from gentree.stamps import NodeFactory


class DeadRange(NamedTuple):
    """Half-open range ``[start, end)`` of orphaned content.

    ``kind`` is the kind of the outermost node the range started from.
    """

    start: int
    end: int
    kind: str


def dead_ranges(factory: NodeFactory, previous_root: Branch) -> list[DeadRange]:
    """Find the minimal ranges of ``previous_root`` no longer reachable.

    Args:
        factory: The factory that stamped both generations.
        previous_root: Root of the generation being replaced. Must be
            evaluated after the next generation has been built.

    Returns:
        Ascending, non-overlapping ranges in ``previous_root`` coordinates.

    Raises:
        StampMissingError: A visited node was not built by ``factory``.

    """
    old_gen = factory.gen_id(previous_root)

    def visit(node: Node, pos: int) -> tuple[list[DeadRange], bool]:
        """Return the node's dead ranges and whether it is entirely dead."""
        if factory.parent_gen_id(node) > old_gen:
            return [], False
        if isinstance(node, Leaf):
            return [DeadRange(pos, pos + node.size, node.kind)], True

        ranges: list[DeadRange] = []
        all_dead = True
        cursor = pos + 1
        for child in node.children:
            child_ranges, child_dead = visit(child, cursor)
            all_dead = all_dead and child_dead
            _extend_merged(ranges, child_ranges)
            cursor += child.size

        if all_dead and node is not previous_root:
            return [DeadRange(pos, cursor + 1, node.kind)], True
        return ranges, False

    ranges, _ = visit(previous_root, -1)
    return ranges


def _extend_merged(ranges: list[DeadRange], following: list[DeadRange]) -> None:
    """Append ``following`` to ``ranges``, joining ranges that touch."""
    if ranges and following and ranges[-1].end == following[0].start:
        last = ranges.pop()
        ranges.append(last._replace(end=following[0].end))
        following = following[1:]
    ranges.extend(following)


__all__ = ["DeadRange", "dead_ranges"]
