import json

import pytest
from glisp.diagnostics import ParseError
from glisp.encoding import dumps, encode_diagnostic, encode_location, encode_node, encode_tree
from glisp.parser import parse


def test_encode_location():
    node = parse("(init)")[0]
    assert encode_location(node.location) == {
        "startRow": 1, "startCol": 1, "endRow": 1, "endCol": 7,
    }


def test_encode_diagnostic():
    with pytest.raises(ParseError) as exc:
        parse("(init (set x 5)")
    out = encode_diagnostic(exc.value.diagnostic)
    assert out["recoverable"] is True
    assert out["msg"] == "expected list terminator"
    assert out["startRow"] == 1
    assert out["endCol"] == 16


def test_encode_node_types():
    node = parse('(f sym "s" 2 @up)')[0]
    out = encode_node(node)
    assert out["type"] == "list"
    children = out["children"]
    assert [c["type"] for c in children] == ["symbol", "symbol", "str", "num", "key"]
    assert children[1]["ident"] == "sym"
    assert children[2]["value"] == "s"
    assert children[3]["value"] == 2.0
    assert children[4]["name"] == "up"
    assert children[4]["startCol"] == 14


def test_dumps_tree():
    text = dumps(encode_tree(parse("(init) (draw)")))
    assert " " not in text
    decoded = json.loads(text)
    assert len(decoded) == 2
    assert decoded[1]["startCol"] == 8
