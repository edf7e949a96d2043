"""Reference incremental line parser.

A deliberately small document grammar, enough to drive the reconciler end to
end:

- every non-empty line is one block;
- a line starting with the heading marker (``"= "`` by default) becomes
  ``heading(text)``; the text child is omitted when nothing follows the marker;
- any other non-empty line becomes ``paragraph(text)``;
- blank lines only separate blocks;
- a document without blocks holds one empty placeholder container, because
  editing surfaces refuse an empty root.

When a user edits one line, only that line needs re-parsing. ``edit``:

1. Identifies the lines that lie wholly before or after the edited range,
   including the newline that ends them.
2. Reuses their block nodes as the *same instances* (offsets are tracked
   beside the nodes, so nothing has to be copied).
3. Re-parses only the source between them.
4. Builds a new root over before + new + after.

Example:
    >>> factory = NodeFactory()
    >>> parser = LineParser(factory)
    >>> root = parser.parse("= Title\\n\\nHello world")
    >>> str(root)
    'doc(heading("Title"), paragraph("Hello world"))'
    >>> _ = factory.advance()
    >>> new_root = parser.edit(15, 20, "universe")
    >>> new_root.children[0] is root.children[0]
    True

Thread Safety:
    A parser remembers the previous tree; drive it from one thread.

"""

from collections.abc import Iterator
from typing import NamedTuple

from gentree.config import ReconcileConfig, get_config
from gentree.nodes import Branch
from gentree.stamps import NodeFactory
from gentree.utils.logger import get_logger

logger = get_logger(__name__)


class SourceLine(NamedTuple):
    """A parsed line and its block node.

    Attributes:
        start: Offset of the first character of the line
        end: Offset just past its last character (the newline excluded)
        node: The block built for the line

    """

    start: int
    end: int
    node: Branch


class LineParser:
    """Line-oriented parser that reuses untouched blocks across edits."""

    __slots__ = ("_config", "_factory", "_lines", "_placeholder", "_source")

    def __init__(self, factory: NodeFactory, *, config: ReconcileConfig | None = None) -> None:
        self._factory = factory
        self._config = config or get_config()
        self._source = ""
        self._lines: tuple[SourceLine, ...] = ()
        self._placeholder: Branch | None = None

    @property
    def source(self) -> str:
        return self._source

    @property
    def lines(self) -> tuple[SourceLine, ...]:
        """Non-empty lines of the latest tree, in document order."""
        return self._lines

    def parse(self, source: str) -> Branch:
        """Parse ``source`` from scratch."""
        self._source = source
        self._lines = tuple(self._scan(source, 0, len(source)))
        return self._build_root()

    def edit(self, start: int, end: int, text: str) -> Branch:
        """Apply an edit to the source and parse only what it touched.

        Args:
            start: Offset in the current source where the edit begins
            end: Offset where the replaced text ends (exclusive)
            text: Replacement text

        Returns:
            A new root. Blocks outside the edited lines are the previous
            tree's instances.

        Raises:
            ValueError: The edit range is outside the current source.

        """
        old_source = self._source
        if not 0 <= start <= end <= len(old_source):
            raise ValueError(
                f"Edit range [{start}, {end}) is outside source of length {len(old_source)}"
            )

        new_source = old_source[:start] + text + old_source[end:]
        delta = len(text) - (end - start)

        if start == end and not text:
            before, after = list(self._lines), []
        else:
            before = [line for line in self._lines if line.end < start]
            after = [
                line._replace(start=line.start + delta, end=line.end + delta)
                for line in self._lines
                if line.start > end
            ]

        region_start = before[-1].end + 1 if before else 0
        region_end = after[0].start - 1 if after else len(new_source)
        region = list(self._scan(new_source, region_start, region_end))

        logger.debug(
            "Reused %d of %d line(s), reparsed %d",
            len(before) + len(after),
            len(self._lines),
            len(region),
        )
        self._source = new_source
        self._lines = (*before, *region, *after)
        return self._build_root()

    def _scan(self, source: str, start: int, end: int) -> Iterator[SourceLine]:
        """Parse the lines of ``source[start:end]``; ``start`` begins a line."""
        pos = start
        for raw in source[start:end].split("\n"):
            if raw:
                yield SourceLine(pos, pos + len(raw), self._block(raw))
            pos += len(raw) + 1

    def _block(self, line: str) -> Branch:
        config = self._config
        factory = self._factory
        if line.startswith(config.heading_marker):
            title = line[len(config.heading_marker) :]
            children = [factory.leaf(title)] if title else []
            return factory.branch(config.heading_kind, children)
        return factory.branch(config.paragraph_kind, [factory.leaf(line)])

    def _build_root(self) -> Branch:
        blocks = [line.node for line in self._lines]
        if blocks:
            self._placeholder = None
        else:
            # An empty document keeps its placeholder across edits.
            if self._placeholder is None:
                self._placeholder = self._factory.branch(self._config.placeholder_kind)
            blocks = [self._placeholder]
        return self._factory.branch(self._config.root_kind, blocks)


__all__ = ["LineParser", "SourceLine"]
