"""Protocols for gentree.

Defines the contract between the reconciliation core and the parser that
produces one document tree per edit.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from gentree.nodes import Branch


class IncrementalParser(Protocol):
    """Protocol for parsers feeding the reconciler.

    Implementations build every node through one ``NodeFactory`` and must
    return the *same instance* for any subtree whose source is untouched by an
    edit. The reconciler relies on that reference identity and does not check
    it; :func:`gentree.testing.assert_structural_sharing` does, in tests.

    Thread Safety:
        Implementations are stateful (they remember the previous tree) and
        are driven by a single writer.

    """

    @property
    def source(self) -> str:
        """The complete source text of the latest tree."""
        ...

    def parse(self, source: str) -> Branch:
        """Parse ``source`` from scratch and return the document root."""
        ...

    def edit(self, start: int, end: int, text: str) -> Branch:
        """Replace ``source[start:end]`` with ``text`` and return the new root.

        Called after the factory's generation counter has been advanced, so
        every node built here belongs to the new generation.

        Args:
            start: Offset in the current source where the edit begins
            end: Offset where the replaced text ends (exclusive)
            text: Replacement text

        Complexity: O(edited lines + number of lines)
        """
        ...
