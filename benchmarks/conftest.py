"""Benchmark fixtures and configuration."""

from __future__ import annotations

import pytest


@pytest.fixture
def large_document() -> str:
    """Generate a large document source (~100KB, 2000 blocks)."""
    sections = []
    for i in range(1000):
        sections.append(f"= Section {i}\n\nThis is paragraph {i} with some text to carry the section.")
    return "\n\n".join(sections)


@pytest.fixture
def wide_generations() -> tuple:
    """Two adjacent generations of a 2000-paragraph tree differing in every tenth block."""
    from gentree import NodeFactory

    factory = NodeFactory()
    blocks = [factory.branch("paragraph", [factory.leaf(f"paragraph {i}")]) for i in range(2000)]
    previous = factory.branch("doc", blocks)
    factory.advance()
    current = factory.branch(
        "doc",
        [
            factory.branch("paragraph", [factory.leaf(f"edited {i}")]) if i % 10 == 0 else block
            for i, block in enumerate(blocks)
        ],
    )
    return factory, previous, current
