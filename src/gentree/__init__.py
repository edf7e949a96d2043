"""
gentree — Generation-stamped document tree reconciliation

Turns two successive parses of a document into a minimal list of
delete/insert patches for an editing surface, so that only the content an
edit touched is replaced and cursor, selection and undo history survive.

No tree diff is involved. Every node is stamped with the generation that
built it and with the generation of the latest branch that claimed it; a
parser that reuses untouched subtrees by reference is enough for the stamps
to tell old content from new.

Quick Start:
    >>> from gentree import NodeFactory, reconcile
    >>> factory = NodeFactory()
    >>> hello = factory.branch("paragraph", [factory.leaf("Hello")])
    >>> gen0 = factory.branch("doc", [hello])
    >>> _ = factory.advance()
    >>> world = factory.branch("paragraph", [factory.leaf("world")])
    >>> gen1 = factory.branch("doc", [hello, world])
    >>> reconcile(factory, gen0, gen1)
    [Insert(at=7, content=(Branch(kind='paragraph', children=(Leaf(text='world'),)),))]

    >>> # Or let a session drive parser, reconciler and surface
    >>> from gentree import EditSession
    >>> session = EditSession("Hello")
    >>> _ = session.edit(5, 5, " world")
    >>> session.document.render()
    'paragraph("Hello world")'

Installation:
    pip install gentree              # Zero runtime dependencies
    pip install gentree[test]        # + pytest and hypothesis
"""

from gentree.config import (
    ReconcileConfig,
    config_context,
    get_config,
    reset_config,
    set_config,
)
from gentree.debug import format_tree
from gentree.detect import DeadRange, dead_ranges
from gentree.errors import (
    GentreeError,
    NonAdjacentGenerationsError,
    PatchError,
    StampMissingError,
)
from gentree.extract import NewRange, new_ranges
from gentree.locate import NO_CHANGE, first_changed_position
from gentree.nodes import TEXT_KIND, Branch, Leaf, Node
from gentree.parser import LineParser, SourceLine
from gentree.patch import Delete, Insert, PatchOp, reconcile
from gentree.positions import content_span, slice_content, span
from gentree.profiling import (
    ReconcileAccumulator,
    get_reconcile_accumulator,
    profiled_reconcile,
)
from gentree.protocols import IncrementalParser
from gentree.session import EditSession
from gentree.stamps import GenerationInfo, NodeFactory
from gentree.surface import LinearDocument

__version__ = "0.1.0"

__all__ = [
    # Nodes and stamping
    "TEXT_KIND",
    "Branch",
    "GenerationInfo",
    "Leaf",
    "Node",
    "NodeFactory",
    # Position model
    "content_span",
    "slice_content",
    "span",
    # Algorithms
    "NO_CHANGE",
    "DeadRange",
    "NewRange",
    "dead_ranges",
    "first_changed_position",
    "new_ranges",
    # Patches
    "Delete",
    "Insert",
    "PatchOp",
    "reconcile",
    # Collaborators
    "EditSession",
    "IncrementalParser",
    "LineParser",
    "LinearDocument",
    "SourceLine",
    # Configuration
    "ReconcileConfig",
    "config_context",
    "get_config",
    "reset_config",
    "set_config",
    # Diagnostics
    "ReconcileAccumulator",
    "format_tree",
    "get_reconcile_accumulator",
    "profiled_reconcile",
    # Errors
    "GentreeError",
    "NonAdjacentGenerationsError",
    "PatchError",
    "StampMissingError",
    # Version
    "__version__",
]
