"""Token-level model of an editing surface.

``LinearDocument`` holds a document as the flat token sequence the position
model describes: ``Open(kind)`` and ``Close(kind)`` for branch boundaries and
one ``str`` per UTF-16 unit of text. Token ``i`` sits at position ``i``, so
patch offsets index the list directly.

It applies patches the way an editor would (no tree diffing, no rebuild) and
enforces the usual editor rule that a document never ends up without
content. Use it to check that a patch list really transforms one generation
into the next.

Example:
    doc = LinearDocument.from_root(previous_root)
    doc.apply_all(reconcile(factory, previous_root, current_root))
    assert doc.matches(current_root)

Thread Safety:
    Mutable; not safe to share across threads.

"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import TypeAlias

from gentree.errors import PatchError
from gentree.nodes import Branch, Leaf, Node
from gentree.patch import Delete, Insert, PatchOp
from gentree.utils.text import join_utf16_units, quote_text, utf16_units


@dataclass(frozen=True, slots=True)
class Open:
    """Opening boundary of a branch."""

    kind: str


@dataclass(frozen=True, slots=True)
class Close:
    """Closing boundary of a branch."""

    kind: str


SurfaceToken: TypeAlias = Open | Close | str


def tokenize(nodes: Iterable[Node]) -> Iterator[SurfaceToken]:
    """Yield the surface tokens of ``nodes`` in document order."""
    for node in nodes:
        if isinstance(node, Leaf):
            yield from utf16_units(node.text)
        else:
            yield Open(node.kind)
            yield from tokenize(node.children)
            yield Close(node.kind)


class LinearDocument:
    """A patchable, flat rendering of a document's content."""

    __slots__ = ("_tokens",)

    def __init__(self, tokens: Iterable[SurfaceToken] = ()) -> None:
        self._tokens: list[SurfaceToken] = list(tokens)

    @classmethod
    def from_root(cls, root: Branch) -> "LinearDocument":
        """Initialize from a document root (the root boundary is implicit)."""
        return cls(tokenize(root.children))

    @property
    def tokens(self) -> tuple[SurfaceToken, ...]:
        return tuple(self._tokens)

    def __len__(self) -> int:
        return len(self._tokens)

    # -- Patching --------------------------------------------------------------

    def apply(self, op: PatchOp) -> None:
        """Apply one patch.

        Raises:
            PatchError: Offsets fall outside the document, or the patch would
                leave the document empty.

        """
        size = len(self._tokens)
        if isinstance(op, Delete):
            if not 0 <= op.start <= op.end <= size:
                raise PatchError(f"Delete [{op.start}, {op.end}) outside document of size {size}")
            if op.start == 0 and op.end == size and not op.replacement:
                raise PatchError("Patch would leave the document empty")
            self._tokens[op.start : op.end] = tokenize(op.replacement)
        elif isinstance(op, Insert):
            if not 0 <= op.at <= size:
                raise PatchError(f"Insert at {op.at} outside document of size {size}")
            self._tokens[op.at : op.at] = tokenize(op.content)
        else:
            raise PatchError(f"Unknown patch operation: {op!r}")

    def apply_all(self, ops: Iterable[PatchOp]) -> None:
        """Apply patches in order."""
        for op in ops:
            self.apply(op)

    # -- Inspection ------------------------------------------------------------

    def matches(self, root: Branch) -> bool:
        """Whether this document's content equals ``root``'s."""
        return self._tokens == list(tokenize(root.children))

    def is_well_formed(self) -> bool:
        """Whether every ``Open`` has a matching ``Close`` of the same kind."""
        stack: list[str] = []
        for token in self._tokens:
            if isinstance(token, Open):
                stack.append(token.kind)
            elif isinstance(token, Close):
                if not stack or stack.pop() != token.kind:
                    return False
        return not stack

    def render(self) -> str:
        """Render content as ``kind("text", kind(...))``, like ``str(node)``.

        Raises:
            PatchError: The token sequence is not well formed.

        """
        if not self.is_well_formed():
            raise PatchError("Cannot render a document with unbalanced boundaries")

        frames: list[list[str]] = [[]]
        text: list[str] = []

        def flush() -> None:
            if text:
                frames[-1].append(quote_text(join_utf16_units(text)))
                text.clear()

        for token in self._tokens:
            if isinstance(token, Open):
                flush()
                frames.append([])
            elif isinstance(token, Close):
                flush()
                parts = frames.pop()
                frames[-1].append(f"{token.kind}({', '.join(parts)})")
            else:
                text.append(token)
        flush()
        return ", ".join(frames[0])


__all__ = ["Close", "LinearDocument", "Open", "SurfaceToken", "tokenize"]
