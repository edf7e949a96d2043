"""Test helpers for parsers that feed the reconciler.

The reconciler trusts its parser to return the same node instance for every
subtree an edit did not touch. ``assert_structural_sharing`` checks that
promise independently, so parser tests (and property tests that replay random
edits) can fail loudly instead of producing wrong patches.
"""

from collections.abc import Sequence

from gentree.parser import SourceLine


def assert_structural_sharing(
    before: Sequence[SourceLine],
    after: Sequence[SourceLine],
    start: int,
    end: int,
    delta: int,
) -> None:
    """Assert that lines outside an edit kept their node instances.

    Args:
        before: Lines of the tree before the edit
        after: Lines of the tree after the edit
        start: Edit start offset, in the old source
        end: Edit end offset (exclusive), in the old source
        delta: Length change of the source caused by the edit

    Raises:
        AssertionError: An unaffected line is missing or was rebuilt.

    """
    by_start = {line.start: line for line in after}
    for line in before:
        if line.end < start:
            expected_start = line.start
        elif line.start > end:
            expected_start = line.start + delta
        else:
            continue
        match = by_start.get(expected_start)
        assert match is not None, f"Line at {line.start} disappeared after the edit"
        assert match.node is line.node, (
            f"Line at {line.start} ({line.node}) was rebuilt although the edit "
            f"[{start}, {end}) did not touch it"
        )


__all__ = ["assert_structural_sharing"]
