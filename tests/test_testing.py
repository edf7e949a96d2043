"""Tests for gentree.testing — structural sharing assertions."""

import pytest

from gentree import NodeFactory, SourceLine
from gentree.testing import assert_structural_sharing


def _line(factory: NodeFactory, start: int, text: str) -> SourceLine:
    return SourceLine(start, start + len(text), factory.branch("paragraph", [factory.leaf(text)]))


class TestAssertStructuralSharing:
    def test_passes_when_untouched_lines_are_shared(self, factory: NodeFactory) -> None:
        a, b = _line(factory, 0, "ab"), _line(factory, 3, "cd")
        after = [a, SourceLine(5, 7, b.node)]
        assert_structural_sharing([a, b], after, 3, 3, 2)

    def test_touched_lines_may_be_rebuilt(self, factory: NodeFactory) -> None:
        a = _line(factory, 0, "ab")
        assert_structural_sharing([a], [_line(factory, 0, "abc")], 2, 2, 1)

    def test_rebuilt_line_fails(self, factory: NodeFactory) -> None:
        a, b = _line(factory, 0, "ab"), _line(factory, 3, "cd")
        with pytest.raises(AssertionError, match="rebuilt"):
            assert_structural_sharing([a, b], [_line(factory, 0, "ab"), b], 3, 4, 0)

    def test_missing_line_fails(self, factory: NodeFactory) -> None:
        a, b = _line(factory, 0, "ab"), _line(factory, 3, "cd")
        with pytest.raises(AssertionError, match="disappeared"):
            assert_structural_sharing([a, b], [b], 3, 4, 0)
