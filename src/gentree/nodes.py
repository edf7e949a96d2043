"""Document tree nodes for gentree.

A tree is made of two node variants:

Node
├── Leaf    (text content)
└── Branch  (kind tag + ordered children)

Nodes are frozen dataclasses with slots, built once and never mutated.
Identity is reference identity (``eq=False``): two leaves holding the same
text are different nodes unless one instance is literally reused across
generations. That is what lets the reconciler detect reuse without comparing
trees.

Each node precomputes ``size``, its span in the linear position model:
a leaf occupies one position per UTF-16 unit of its text, a branch adds one
opening and one closing boundary around its children.

Generation stamps are not stored on the node; see :mod:`gentree.stamps`.

Thread Safety:
All nodes are frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar, TypeAlias

from gentree.utils.text import quote_text, utf16_len

TEXT_KIND = "text"


@dataclass(frozen=True, slots=True, eq=False, weakref_slot=True)
class Leaf:
    """Text content.

    Attributes:
        text: The text, measured in UTF-16 code units.
        size: Span of the leaf (``utf16_len(text)``).

    """

    kind: ClassVar[str] = TEXT_KIND

    text: str
    size: int = field(init=False, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "size", utf16_len(self.text))

    def __str__(self) -> str:
        return quote_text(self.text)


@dataclass(frozen=True, slots=True, eq=False, weakref_slot=True)
class Branch:
    """A kind-tagged container of ordered children.

    Attributes:
        kind: Tag such as ``"doc"``, ``"paragraph"`` or ``"heading"``.
        children: Child nodes, in document order.
        size: Span of the branch, boundaries included.

    """

    kind: str
    children: tuple[Leaf | Branch, ...] = ()
    size: int = field(init=False, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "size", 2 + sum(child.size for child in self.children))

    def __str__(self) -> str:
        return f"{self.kind}({', '.join(str(child) for child in self.children)})"


Node: TypeAlias = Leaf | Branch


__all__ = ["TEXT_KIND", "Branch", "Leaf", "Node"]
