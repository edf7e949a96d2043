"""Tests for gentree.surface — the token-level editing surface."""

import pytest

from gentree import Branch, Delete, Insert, Leaf, LinearDocument, PatchError
from gentree.surface import Close, Open, tokenize


def _doc(*blocks: Branch) -> Branch:
    return Branch("doc", blocks)


def _para(text: str) -> Branch:
    return Branch("paragraph", (Leaf(text),))


class TestTokenize:
    def test_one_token_per_position(self) -> None:
        assert list(tokenize([_para("Hi")])) == [
            Open("paragraph"),
            "H",
            "i",
            Close("paragraph"),
        ]

    def test_boundaries_are_distinct_tokens(self) -> None:
        assert Open("paragraph") != Close("paragraph")

    def test_astral_text_takes_two_tokens(self) -> None:
        tokens = list(tokenize([Leaf("🎉")]))
        assert len(tokens) == 2

    def test_root_boundary_not_included(self) -> None:
        doc = LinearDocument.from_root(_doc(_para("Hello"), _para("world")))
        assert len(doc) == 14


class TestApply:
    def test_insert(self) -> None:
        doc = LinearDocument.from_root(_doc(_para("Hello")))
        doc.apply(Insert(7, (_para("world"),)))
        assert doc.render() == 'paragraph("Hello"), paragraph("world")'

    def test_delete(self) -> None:
        doc = LinearDocument.from_root(_doc(_para("Hello"), _para("world")))
        doc.apply(Delete(7, 14))
        assert doc.render() == 'paragraph("Hello")'

    def test_delete_with_replacement(self) -> None:
        doc = LinearDocument.from_root(_doc(_para("Hello")))
        doc.apply(Delete(0, 7, (Branch("paragraph"),)))
        assert doc.render() == "paragraph()"

    def test_text_level_patch(self) -> None:
        doc = LinearDocument.from_root(_doc(_para("Hello")))
        doc.apply(Delete(1, 6))
        doc.apply(Insert(1, (Leaf("Bye"),)))
        assert doc.render() == 'paragraph("Bye")'

    def test_clearing_document_rejected(self) -> None:
        doc = LinearDocument.from_root(_doc(_para("Hello")))
        with pytest.raises(PatchError, match="empty"):
            doc.apply(Delete(0, 7))
        assert len(doc) == 7

    def test_out_of_bounds_rejected(self) -> None:
        doc = LinearDocument.from_root(_doc(_para("Hello")))
        with pytest.raises(PatchError):
            doc.apply(Delete(3, 8))
        with pytest.raises(PatchError):
            doc.apply(Insert(8, (Leaf("x"),)))

    def test_unknown_operation_rejected(self) -> None:
        doc = LinearDocument.from_root(_doc(_para("Hello")))
        with pytest.raises(PatchError, match="Unknown"):
            doc.apply("delete everything")  # type: ignore[arg-type]

    def test_apply_all_in_order(self) -> None:
        doc = LinearDocument.from_root(_doc(_para("a"), _para("b")))
        doc.apply_all([Delete(3, 6), Insert(3, (_para("c"),))])
        assert doc.render() == 'paragraph("a"), paragraph("c")'


class TestInspection:
    def test_matches(self) -> None:
        root = _doc(_para("Hello"))
        doc = LinearDocument.from_root(root)
        assert doc.matches(root)
        assert doc.matches(_doc(_para("Hello")))
        assert not doc.matches(_doc(_para("Hullo")))

    def test_well_formed(self) -> None:
        assert LinearDocument.from_root(_doc(_para("a"))).is_well_formed()
        assert not LinearDocument([Open("paragraph"), "a"]).is_well_formed()
        assert not LinearDocument([Open("paragraph"), Close("heading")]).is_well_formed()
        assert not LinearDocument([Close("paragraph")]).is_well_formed()

    def test_render_nested(self) -> None:
        root = _doc(Branch("section", (_para("a"), Branch("paragraph"))))
        assert LinearDocument.from_root(root).render() == 'section(paragraph("a"), paragraph())'

    def test_render_matches_node_str(self) -> None:
        root = _doc(_para('say "hi"\n'), Branch("heading", (Leaf("🎉 x"),)))
        rendered = LinearDocument.from_root(root).render()
        assert rendered == ", ".join(str(child) for child in root.children)

    def test_render_rejects_unbalanced(self) -> None:
        with pytest.raises(PatchError, match="unbalanced"):
            LinearDocument([Open("paragraph")]).render()

    def test_tokens_is_a_snapshot(self) -> None:
        doc = LinearDocument.from_root(_doc(_para("a")))
        tokens = doc.tokens
        doc.apply(Insert(0, (_para("b"),)))
        assert len(tokens) == 3
        assert len(doc.tokens) == 6
