"""Error-path tests.

Exercise the exception hierarchy and the precondition checks surfaced by the
stamper, the reconciler, the position model and the editing surface.
"""

import pytest

from gentree import (
    Branch,
    Delete,
    GentreeError,
    Leaf,
    LinearDocument,
    NodeFactory,
    NonAdjacentGenerationsError,
    PatchError,
    StampMissingError,
    format_tree,
    reconcile,
    slice_content,
)

# =========================================================================
# Exception construction and formatting
# =========================================================================


class TestStampMissingError:
    def test_keeps_node(self) -> None:
        node = Leaf("x")
        err = StampMissingError(node)
        assert err.node is node
        assert str(err) == 'Node "x" has no generation stamp'

    def test_long_description_truncated(self) -> None:
        err = StampMissingError(Leaf("x" * 100))
        assert "..." in str(err)
        assert len(str(err)) < 80

    def test_hierarchy(self) -> None:
        err = StampMissingError(Leaf("x"))
        assert isinstance(err, GentreeError)
        assert isinstance(err, LookupError)


class TestNonAdjacentGenerationsError:
    def test_attributes(self) -> None:
        err = NonAdjacentGenerationsError(1, 4)
        assert err.previous_gen == 1
        assert err.current_gen == 4

    def test_message(self) -> None:
        err = NonAdjacentGenerationsError(1, 4)
        assert str(err) == (
            "Cannot reconcile generation 1 into generation 4: expected previous generation 3"
        )

    def test_hierarchy(self) -> None:
        err = NonAdjacentGenerationsError(0, 2)
        assert isinstance(err, GentreeError)
        assert isinstance(err, ValueError)


class TestPatchError:
    def test_is_gentree_error(self) -> None:
        assert isinstance(PatchError("x"), GentreeError)


# =========================================================================
# Precondition checks surfaced to callers
# =========================================================================


class TestForeignNodes:
    def test_reconcile_with_unstamped_root(self) -> None:
        factory = NodeFactory()
        stamped = factory.branch("doc")
        with pytest.raises(StampMissingError):
            reconcile(factory, stamped, Branch("doc"))

    def test_reconcile_with_other_factory(self) -> None:
        factory, other = NodeFactory(), NodeFactory()
        previous = factory.branch("doc")
        other.advance()
        with pytest.raises(StampMissingError) as exc_info:
            reconcile(factory, previous, other.branch("doc"))
        assert exc_info.value.node.kind == "doc"

    def test_format_tree_with_unstamped_node(self) -> None:
        with pytest.raises(StampMissingError):
            format_tree(NodeFactory(), Branch("doc"))


class TestCatchAll:
    def test_gentree_error_catches_library_failures(self) -> None:
        factory = NodeFactory()
        previous = factory.branch("doc")
        factory.advance()
        factory.advance()
        current = factory.branch("doc")
        with pytest.raises(GentreeError):
            reconcile(factory, previous, current)
        with pytest.raises(GentreeError):
            LinearDocument().apply(Delete(0, 1))

    def test_misaligned_slice_is_value_error(self) -> None:
        root = Branch("doc", (Branch("paragraph", (Leaf("ab"),)),))
        with pytest.raises(ValueError):
            slice_content(root, 0, 2)
