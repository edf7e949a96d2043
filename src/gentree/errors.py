"""Exception classes for gentree.

Provides standardized exceptions for error handling throughout gentree.
All failures are local precondition checks, surfaced immediately to the
caller; nothing in the library retries.
"""

from __future__ import annotations


class GentreeError(Exception):
    """Base exception for all gentree errors.

    Subclass this for specific error categories.
    """

    pass


class StampMissingError(GentreeError, LookupError):
    """A node has no generation stamp.

    Raised when a node handed to the stamper or to any traversal was never
    produced by that ``NodeFactory``, or was retained across a ``reset()``.
    """

    def __init__(self, node: object) -> None:
        """Initialize with the offending node.

        Args:
            node: The unstamped node
        """
        self.node = node
        description = str(node)
        if len(description) > 40:
            description = description[:37] + "..."
        super().__init__(f"Node {description} has no generation stamp")


class NonAdjacentGenerationsError(GentreeError, ValueError):
    """Reconciliation was asked to bridge non-consecutive generations.

    The dead/new range math assumes the previous root belongs to the
    generation immediately preceding the current root's.
    """

    def __init__(self, previous_gen: int, current_gen: int) -> None:
        """Initialize with both generation ids.

        Args:
            previous_gen: Generation id of the previous root
            current_gen: Generation id of the current root
        """
        self.previous_gen = previous_gen
        self.current_gen = current_gen
        super().__init__(
            f"Cannot reconcile generation {previous_gen} into generation {current_gen}: "
            f"expected previous generation {current_gen - 1}"
        )


class PatchError(GentreeError):
    """The editing surface rejected a patch operation.

    Raised for offsets outside the document and for patches that would
    leave the document without any content.
    """

    pass
