import json
from pathlib import Path

import pytest

from declsort.core.errors import RepresentationError
from declsort.core.models import Token
from declsort.core.nodes import (
    AliasRef, Atom, FunctionDef, Import, ListLiteral, Literal, Module,
    MultiAlias, Opaque, Pair, TupleLiteral,
)
from declsort.frontend.codec import (
    decode_document, decode_node, decode_token, discover, load_document, loads_document,
)

FIXTURES = Path(__file__).parent / "fixtures"


def test_load_fixture_document():
    doc = load_document(FIXTURES / "sample_module.yaml")

    assert doc.filename == "lib/credo_sample_module.ex"
    assert doc.tokens[0] == Token("identifier", 1, 1, "defmodule")
    assert doc.tokens[14] == Token("at_op", 6, 3, "@")

    assert isinstance(doc.ast, Module)
    first_import, _, multi, attribute, deps = doc.ast.body
    assert isinstance(first_import, Import)
    assert first_import.target == AliasRef(("Cherry",), line=2, column=10)
    assert isinstance(multi.target, MultiAlias)
    assert [s.full_name for s in multi.target.suffixes] == ["Two", "One"]
    assert isinstance(attribute, Opaque) and attribute.tag == "attribute"
    assert isinstance(deps, FunctionDef) and deps.private and deps.params == ()


def test_decode_dependency_entries():
    doc = load_document(FIXTURES / "sample_module.yaml")
    deps = doc.ast.body[-1]

    plug, mdex = deps.body.items
    assert plug == Pair(Atom("plug"), Literal("~> 1.14"))
    assert isinstance(mdex, TupleLiteral) and mdex.line == 12
    assert mdex.elements[0] == Atom("mdex", line=12)
    assert isinstance(mdex.elements[2], ListLiteral)


def test_loads_json_document():
    payload = {
        "tokens": [["eol", 1, 1, 1]],
        "ast": {"node": "import", "line": 1, "target": {"node": "alias", "segments": "Foo.Bar"}},
    }
    doc = loads_document(json.dumps(payload), filename="foo.json")

    assert doc.filename == "foo.json"
    assert doc.tokens == (Token("eol", 1, 1, 1),)
    assert doc.ast.target.full_name == "Foo.Bar"


def test_decode_scalars_and_bare_lists():
    assert decode_node("text") == Literal("text")
    assert decode_node(3) == Literal(3)
    assert decode_node({"name": "no tag"}) == Literal({"name": "no tag"})
    assert decode_node([1, {"node": "atom", "name": "a"}]) == ListLiteral((Literal(1), Atom("a")))


def test_unknown_tags_keep_their_children():
    node = decode_node({
        "node": "quote",
        "line": 4,
        "body": [{"node": "atom", "name": "x"}],
        "extra": {"node": "literal", "value": 1},
    })
    assert node == Opaque("quote", (Atom("x"), Literal(1)), line=4)


def test_empty_document():
    doc = loads_document("", filename="empty.yaml")
    assert doc.tokens == () and doc.ast is None


@pytest.mark.parametrize("text", [
    "- just\n- a list\n",
    "tokens: 3\n",
    "tokens:\n  - [eol, 1, 1]\n",
    "ast: {node: alias}\n",
    "ast: {node: module, name: M, body: not-a-list}\n",
    "ast: {node: multi_alias, prefix: {node: atom, name: x}}\n",
    "tokens: [unclosed\n",
])
def test_malformed_documents_raise(text):
    with pytest.raises(RepresentationError):
        loads_document(text)


def test_decode_token_forms():
    assert decode_token({"type": "eol"}) == Token("eol")
    with pytest.raises(RepresentationError):
        decode_token("eol")


def test_decode_document_rejects_non_mapping():
    with pytest.raises(RepresentationError):
        decode_document(["tokens"])


def test_load_missing_file(tmp_path):
    with pytest.raises(RepresentationError):
        load_document(tmp_path / "missing.yaml")


def test_discover(tmp_path):
    (tmp_path / "b.yaml").write_text("tokens: []\n")
    (tmp_path / "a.json").write_text("{}")
    (tmp_path / "notes.txt").write_text("skip me")
    (tmp_path / "nested").mkdir()
    (tmp_path / "nested" / "c.yaml").write_text("tokens: []\n")

    assert [p.name for p in discover(tmp_path)] == ["a.json", "b.yaml"]
    assert discover(tmp_path / "b.yaml") == [tmp_path / "b.yaml"]


@pytest.mark.parametrize("text", [
    "tokens:\n  - [at_op, '2', 3, '@']\n",
    "tokens:\n  - {type: eol, line: 1, column: '4'}\n",
    "tokens:\n  - [eol, true, 1, 1]\n",
    "ast: {node: atom, name: x, line: '3'}\n",
    "ast: {node: alias, segments: [Foo], line: 1, column: 2.5}\n",
    "ast: {node: quote, line: one}\n",
])
def test_non_integer_positions_raise(text):
    with pytest.raises(RepresentationError):
        loads_document(text)
