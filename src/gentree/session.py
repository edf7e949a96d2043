"""Edit sessions: parse, reconcile and patch, one generation per edit.

``EditSession`` plays the editor loop around the reconciliation core. For
each edit it advances the generation counter, lets the parser build the new
tree, keeps the root in history, reconciles it against the previous root and
applies the resulting patches to its editing surface.

Example:
    >>> session = EditSession("= Title\\n\\nHello world")
    >>> patches = session.edit(15, 20, "universe")
    >>> session.document.render()
    'heading("Title"), paragraph("Hello universe")'
    >>> [type(p).__name__ for p in patches]
    ['Delete', 'Insert']

Thread Safety:
    Not thread-safe. Edits must arrive in order, one at a time.

"""

from gentree.config import ReconcileConfig, get_config
from gentree.nodes import Branch
from gentree.parser import LineParser
from gentree.patch import PatchOp, reconcile
from gentree.protocols import IncrementalParser
from gentree.stamps import NodeFactory
from gentree.surface import LinearDocument
from gentree.utils.logger import get_logger

logger = get_logger(__name__)


class EditSession:
    """Sequences edits through a parser, the reconciler and a surface.

    Args:
        source: Initial document source
        factory: Node factory; a fresh one when omitted
        parser: Parser building nodes with ``factory``; a ``LineParser`` when
            omitted
        config: Overrides the context configuration

    Raises:
        ValueError: ``parser`` was given without the ``factory`` it stamps
            nodes with.

    """

    __slots__ = ("_config", "_history", "document", "factory", "parser")

    def __init__(
        self,
        source: str = "",
        *,
        factory: NodeFactory | None = None,
        parser: IncrementalParser | None = None,
        config: ReconcileConfig | None = None,
    ) -> None:
        if parser is not None and factory is None:
            raise ValueError("A custom parser needs the factory it builds nodes with")
        self._config = config or get_config()
        self.factory = factory or NodeFactory()
        self.parser: IncrementalParser = parser or LineParser(self.factory, config=self._config)
        root = self.parser.parse(source)
        self._history: list[Branch] = [root]
        self.document = LinearDocument.from_root(root)

    @property
    def source(self) -> str:
        return self.parser.source

    @property
    def history(self) -> tuple[Branch, ...]:
        """Retained roots, oldest first."""
        return tuple(self._history)

    @property
    def current_root(self) -> Branch:
        return self._history[-1]

    @property
    def previous_root(self) -> Branch | None:
        return self._history[-2] if len(self._history) > 1 else None

    def edit(self, start: int, end: int, text: str) -> list[PatchOp]:
        """Replace ``source[start:end]`` with ``text`` and patch the surface.

        Returns:
            The patches applied to ``document``.

        Raises:
            ValueError: The edit range is outside the current source. The
                generation counter is left untouched.

        """
        if not 0 <= start <= end <= len(self.source):
            raise ValueError(
                f"Edit range [{start}, {end}) is outside source of length {len(self.source)}"
            )

        self.factory.advance()
        root = self.parser.edit(start, end, text)
        previous = self._history[-1]
        self._history.append(root)
        limit = self._config.history_limit
        if limit is not None and len(self._history) > limit:
            del self._history[:-limit]

        patches = reconcile(self.factory, previous, root, config=self._config)
        self.document.apply_all(patches)
        logger.debug(
            "Generation %d: applied %d patch(es)",
            self.factory.current_generation,
            len(patches),
        )
        return patches


__all__ = ["EditSession"]
