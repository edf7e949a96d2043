"""Generation stamping for gentree nodes.

``NodeFactory`` wraps node construction. Every node it builds is stamped
with the generation counter value at construction time, and every branch it
builds claims its children for the current generation. Reconciliation then
reads those stamps instead of comparing trees:

- ``gen_id``: generation in which this exact instance was built.
- ``min_gen_id``: smallest ``gen_id`` among a branch's direct children.
- ``oldest_gen_id``: smallest ``gen_id`` anywhere in the subtree.
- ``parent_gen_id``: generation of the most recent branch that took the node
  as a child. The one mutable stamp, used as a liveness marker.

Stamps live outside the nodes, in two tables keyed by node identity: an
immutable birth table and a mutable claim table. Both hold nodes weakly, so
a stamp disappears with the last root that reaches its node.

Example:
    >>> factory = NodeFactory()
    >>> para = factory.branch("paragraph", [factory.leaf("Hello")])
    >>> doc0 = factory.branch("doc", [para])
    >>> factory.advance()
    1
    >>> doc1 = factory.branch("doc", [para])
    >>> factory.gen_info(para).parent_gen_id
    1

Thread Safety:
    Not thread-safe. One writer builds a generation; reconciliation reads
    stamps only after that generation is complete.

"""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import NamedTuple
from weakref import WeakKeyDictionary

from gentree.errors import StampMissingError
from gentree.nodes import Branch, Leaf, Node
from gentree.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class GenerationInfo:
    """Snapshot of a node's stamp record.

    Attributes:
        gen_id: Generation in which the node was constructed
        min_gen_id: Leaf: ``gen_id``. Branch: minimum ``gen_id`` of its direct
            children (its own ``gen_id`` when it has none)
        parent_gen_id: Generation of the latest branch that claimed the node
        oldest_gen_id: Minimum ``gen_id`` over the whole subtree, node included

    """

    gen_id: int
    min_gen_id: int
    parent_gen_id: int
    oldest_gen_id: int


class _Birth(NamedTuple):
    gen_id: int
    min_gen_id: int
    oldest_gen_id: int


class NodeFactory:
    """Constructs nodes and tracks which generation they belong to."""

    __slots__ = ("_births", "_claims", "_generation")

    def __init__(self) -> None:
        self._generation = 0
        self._births: WeakKeyDictionary[Node, _Birth] = WeakKeyDictionary()
        self._claims: WeakKeyDictionary[Node, int] = WeakKeyDictionary()

    @property
    def current_generation(self) -> int:
        """The generation new nodes are stamped with."""
        return self._generation

    def advance(self) -> int:
        """Start the next generation.

        Called once per completed edit, before the edit's tree is built.

        Returns:
            The new generation id.

        """
        self._generation += 1
        logger.debug("Advanced to generation %d", self._generation)
        return self._generation

    def reset(self) -> None:
        """Forget every stamp and restart counting at generation 0."""
        self._generation = 0
        self._births = WeakKeyDictionary()
        self._claims = WeakKeyDictionary()

    # -- Construction ----------------------------------------------------------

    def create(self, kind_or_text: str, children: Sequence[Node] | None = None) -> Node:
        """Build and stamp a node.

        Args:
            kind_or_text: Leaf text when ``children`` is None, otherwise the
                branch kind.
            children: Child nodes for a branch. Each must have been built by
                this factory.

        Returns:
            A ``Leaf`` or ``Branch`` stamped with the current generation.

        Raises:
            StampMissingError: A child was not built by this factory. No
                child is claimed in that case.
            ValueError: A leaf was requested with empty text.

        """
        if children is None:
            return self.leaf(kind_or_text)
        return self.branch(kind_or_text, children)

    def leaf(self, text: str) -> Leaf:
        """Build a stamped leaf.

        Raises:
            ValueError: ``text`` is empty. An empty leaf would occupy no
                positions, so it could never be addressed by a patch.

        """
        if not text:
            raise ValueError("Leaf text must not be empty")
        gen = self._generation
        node = Leaf(text)
        self._births[node] = _Birth(gen, gen, gen)
        self._claims[node] = gen
        return node

    def branch(self, kind: str, children: Sequence[Node] = ()) -> Branch:
        """Build a stamped branch, claiming ``children`` for this generation."""
        gen = self._generation
        births = [self._birth(child) for child in children]
        node = Branch(kind, tuple(children))
        for child in node.children:
            self._claims[child] = gen
        min_gen = min((b.gen_id for b in births), default=gen)
        oldest = min([gen, *(b.oldest_gen_id for b in births)])
        self._births[node] = _Birth(gen, min_gen, oldest)
        # Self-claim; overwritten if a newer branch adopts this one.
        self._claims[node] = gen
        return node

    # -- Stamp accessors -------------------------------------------------------

    def is_stamped(self, node: Node) -> bool:
        """Whether ``node`` carries a stamp from this factory."""
        return node in self._births

    def gen_info(self, node: Node) -> GenerationInfo:
        """Return a snapshot of ``node``'s stamp record.

        Raises:
            StampMissingError: ``node`` was not built by this factory.

        """
        birth = self._birth(node)
        return GenerationInfo(
            gen_id=birth.gen_id,
            min_gen_id=birth.min_gen_id,
            parent_gen_id=self._claims[node],
            oldest_gen_id=birth.oldest_gen_id,
        )

    def gen_id(self, node: Node) -> int:
        """Generation in which ``node`` was constructed."""
        return self._birth(node).gen_id

    def oldest_gen_id(self, node: Node) -> int:
        """Oldest generation found anywhere in ``node``'s subtree."""
        return self._birth(node).oldest_gen_id

    def parent_gen_id(self, node: Node) -> int:
        """Generation of the latest branch that claimed ``node``."""
        try:
            return self._claims[node]
        except KeyError:
            raise StampMissingError(node) from None

    def is_live(self, node: Node) -> bool:
        """Whether the current generation has claimed ``node``."""
        return self.parent_gen_id(node) == self._generation

    def _birth(self, node: Node) -> _Birth:
        try:
            return self._births[node]
        except KeyError:
            raise StampMissingError(node) from None


__all__ = ["GenerationInfo", "NodeFactory"]
