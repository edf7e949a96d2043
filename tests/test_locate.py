"""Tests for gentree.locate — first changed position."""

import pytest

from gentree import NO_CHANGE, Branch, NodeFactory, StampMissingError, first_changed_position


class TestFixture:
    def test_first_generation_starts_at_first_text(self, text_fixture: list[Branch], factory: NodeFactory) -> None:
        assert first_changed_position(factory, text_fixture[0]) == 1

    def test_appended_paragraph(self, text_fixture: list[Branch], factory: NodeFactory) -> None:
        # The new paragraph opens at 7; its text starts at 8.
        assert first_changed_position(factory, text_fixture[1]) == 8

    def test_empty_new_paragraph(self, text_fixture: list[Branch], factory: NodeFactory) -> None:
        assert first_changed_position(factory, text_fixture[2]) == 0


class TestNoChange:
    def test_new_root_over_reused_children(self, factory: NodeFactory) -> None:
        para = factory.branch("paragraph", [factory.leaf("Hello")])
        factory.branch("doc", [para])
        factory.advance()
        root = factory.branch("doc", [para])
        assert first_changed_position(factory, root) == NO_CHANGE

    def test_empty_root(self, factory: NodeFactory) -> None:
        assert first_changed_position(factory, factory.branch("doc")) == NO_CHANGE


class TestNestedChanges:
    def test_new_wrapper_around_old_text(self, factory: NodeFactory) -> None:
        hello = factory.leaf("Hello")
        factory.advance()
        root = factory.branch("doc", [factory.branch("paragraph", [hello])])
        # Nothing below the wrapper is new, so the wrapper itself is reported.
        assert first_changed_position(factory, root) == 0

    def test_skips_old_subtrees_without_descent(self, factory: NodeFactory) -> None:
        first = factory.branch("paragraph", [factory.leaf("ab")])
        second = factory.branch("paragraph", [factory.leaf("cd")])
        factory.advance()
        section = factory.branch("section", [second, factory.branch("paragraph", [factory.leaf("ef")])])
        root = factory.branch("doc", [first, section])
        # doc(paragraph("ab"), section(paragraph("cd"), paragraph("ef")))
        #     ^0               ^4      ^5               ^9         ^10
        assert first_changed_position(factory, root) == 10

    def test_new_leaf_after_old_leaf(self, factory: NodeFactory) -> None:
        old = factory.leaf("ab")
        factory.advance()
        root = factory.branch("doc", [factory.branch("paragraph", [old, factory.leaf("cd")])])
        assert first_changed_position(factory, root) == 3


class TestErrors:
    def test_unstamped_root(self, factory: NodeFactory) -> None:
        with pytest.raises(StampMissingError):
            first_changed_position(factory, Branch("doc"))
