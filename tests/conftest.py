"""Shared fixtures for gentree tests."""

import pytest

from gentree import Branch, NodeFactory


def build_text_fixture(factory: NodeFactory) -> list[Branch]:
    """Three generations of a small document.

    gen 0: doc(paragraph("Hello"))
    gen 1: doc(paragraph("Hello"), paragraph("world"))   # first paragraph reused
    gen 2: doc(paragraph())                              # everything replaced
    """
    hello = factory.branch("paragraph", [factory.leaf("Hello")])
    docs = [factory.branch("doc", [hello])]

    factory.advance()
    world = factory.branch("paragraph", [factory.leaf("world")])
    docs.append(factory.branch("doc", [hello, world]))

    factory.advance()
    docs.append(factory.branch("doc", [factory.branch("paragraph")]))
    return docs


@pytest.fixture
def factory() -> NodeFactory:
    return NodeFactory()


@pytest.fixture
def text_fixture(factory: NodeFactory) -> list[Branch]:
    return build_text_fixture(factory)
