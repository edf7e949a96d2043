"""Patch assembler: turn two adjacent generations into editing-surface patches.

``reconcile`` combines the dead ranges of the previous root and the new
ranges of the current root into an ordered, directly applicable patch list:

1. Deletions, highest offset first. All of them are expressed in the
   previous root's coordinates; going right to left keeps the offsets of the
   ones still pending valid.
2. Insertions, lowest offset first, in the current root's coordinates. Once
   the dead content is gone, everything before an insertion point is already
   identical to the current root, so its offset is valid as it stands.

Editing surfaces do not allow a document without content. A deletion that
would clear everything carries replacement content instead: the current
root's leading new content when there is some, otherwise one empty default
container.

Example:
    gen 1: doc(paragraph("Hello"), paragraph("world"))
    gen 2: doc(paragraph())

    reconcile(factory, gen1_root, gen2_root)
    # [Delete(start=0, end=14, replacement=(Branch(kind='paragraph', children=()),))]

"""

from dataclasses import dataclass
from typing import TypeAlias

from gentree.config import ReconcileConfig, get_config
from gentree.detect import dead_ranges
from gentree.errors import NonAdjacentGenerationsError
from gentree.extract import new_ranges
from gentree.nodes import Branch, Node
from gentree.positions import content_span, slice_content
from gentree.profiling import get_reconcile_accumulator
from gentree.stamps import NodeFactory
from gentree.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class Delete:
    """Remove positions ``[start, end)``, then insert ``replacement`` at ``start``."""

    start: int
    end: int
    replacement: tuple[Node, ...] = ()


@dataclass(frozen=True, slots=True)
class Insert:
    """Insert ``content`` at position ``at``."""

    at: int
    content: tuple[Node, ...]


PatchOp: TypeAlias = Delete | Insert


def reconcile(
    factory: NodeFactory,
    previous_root: Branch,
    current_root: Branch,
    *,
    config: ReconcileConfig | None = None,
) -> list[PatchOp]:
    """Compute the patches that turn ``previous_root`` into ``current_root``.

    Args:
        factory: The factory that stamped both generations.
        previous_root: Root of the generation the editing surface shows.
        current_root: Root of the generation that immediately follows it.
        config: Overrides the context configuration.

    Content reused in ``current_root`` must come from ``previous_root``.
    If a subtree is instead revived from an older root in history while all
    of ``previous_root`` is dead, the full-content deletion carries the
    default container (which stays beside the insertions) and the revived
    subtree itself is never inserted.

    Returns:
        Deletions (descending offsets) followed by insertions (ascending).

    Raises:
        NonAdjacentGenerationsError: The roots are not consecutive
            generations (unless ``check_adjacency`` is disabled).
        StampMissingError: A node in either tree was not built by ``factory``.

    """
    config = config or get_config()
    previous_gen = factory.gen_id(previous_root)
    current_gen = factory.gen_id(current_root)
    if config.check_adjacency and previous_gen + 1 != current_gen:
        raise NonAdjacentGenerationsError(previous_gen, current_gen)

    dead = dead_ranges(factory, previous_root)
    fresh = new_ranges(factory, current_root)
    logger.debug(
        "Generation %d -> %d: %d dead range(s), %d new range(s)",
        previous_gen,
        current_gen,
        len(dead),
        len(fresh),
    )

    total = content_span(previous_root)
    deletions: list[Delete] = []
    for r in reversed(dead):
        if r.start == 0 and r.end == total:
            if fresh and fresh[0].start == 0:
                replacement = slice_content(current_root, *fresh[0])
                fresh = fresh[1:]
            else:
                replacement = (Branch(config.placeholder_kind),)
            deletions.append(Delete(r.start, r.end, replacement))
        else:
            deletions.append(Delete(r.start, r.end))

    insertions = [Insert(r.start, slice_content(current_root, *r)) for r in fresh]

    acc = get_reconcile_accumulator()
    if acc is not None:
        acc.record_reconcile(
            deletions=len(deletions),
            insertions=len(insertions),
            dead_units=sum(d.end - d.start for d in deletions),
            new_units=sum(
                node.size for op in (*deletions, *insertions) for node in _payload(op)
            ),
        )

    return [*deletions, *insertions]


def _payload(op: PatchOp) -> tuple[Node, ...]:
    return op.replacement if isinstance(op, Delete) else op.content


__all__ = ["Delete", "Insert", "PatchOp", "reconcile"]
