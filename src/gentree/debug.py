"""Diagnostic dumps of stamped trees.

``format_tree`` prints one line per node with its start position and its
stamp record, which is usually the quickest way to see why a range was or was
not reported as dead or new:

    doc  gen=1 min=0 oldest=0 parent=1
      paragraph @0  gen=0 min=0 oldest=0 parent=1
        "Hello" @1  gen=0 min=0 oldest=0 parent=0
      paragraph @7  gen=1 min=1 oldest=1 parent=1
        "world" @8  gen=1 min=1 oldest=1 parent=1

"""

from gentree.nodes import Branch, Node
from gentree.stamps import NodeFactory
from gentree.utils.text import quote_text


def format_tree(factory: NodeFactory, root: Branch, *, indent: str = "  ") -> str:
    """Render ``root`` with positions and generation stamps.

    Raises:
        StampMissingError: A node was not built by ``factory``.

    """
    lines: list[str] = []

    def visit(node: Node, pos: int | None, depth: int) -> None:
        info = factory.gen_info(node)
        label = node.kind if isinstance(node, Branch) else quote_text(node.text)
        where = "" if pos is None else f" @{pos}"
        lines.append(
            f"{indent * depth}{label}{where}  gen={info.gen_id} min={info.min_gen_id} "
            f"oldest={info.oldest_gen_id} parent={info.parent_gen_id}"
        )
        if isinstance(node, Branch):
            cursor = 0 if pos is None else pos + 1
            for child in node.children:
                visit(child, cursor, depth + 1)
                cursor += child.size

    visit(root, None, 0)
    return "\n".join(lines)


__all__ = ["format_tree"]
