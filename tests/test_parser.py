import pytest
from glisp.diagnostics import ParseError, Position, Severity
from glisp.parser import parse
from glisp.syntax import KeyNameNode, ListNode, NumberNode, StringNode, SymbolNode
from glisp.types import ParseOptions


def parse_one(src):
    nodes = parse(src)
    assert len(nodes) == 1
    return nodes[0]


def parse_error(src, options=None):
    with pytest.raises(ParseError) as exc:
        parse(src, options)
    return exc.value.diagnostic


def walk(node):
    yield node
    if isinstance(node.value, ListNode):
        for child in node.value.children:
            yield from walk(child)


# --- Atoms ---

def test_parse_empty_source():
    assert parse("") == ()
    assert parse("  \n\t ") == ()


def test_parse_integer():
    assert parse_one("42").value == NumberNode(42.0)


def test_parse_negative_float():
    assert parse_one("-3.14").value == NumberNode(-3.14)


def test_parse_exponent():
    assert parse_one("3.5e2").value == NumberNode(350.0)
    assert parse_one("+2").value == NumberNode(2.0)


def test_parse_string():
    assert parse_one('"hello world"').value == StringNode("hello world")


def test_parse_string_escapes():
    assert parse_one(r'"a\nb\tc\"d\\e"').value == StringNode('a\nb\tc"d\\e')


def test_parse_symbol():
    assert parse_one("foo").value == SymbolNode("foo")


def test_parse_operator_symbols():
    node = parse_one("(<= - -x + key-down? *)")
    names = [c.value.name for c in node.value.children]
    assert names == ["<=", "-", "-x", "+", "key-down?", "*"]


def test_parse_key_name():
    node = parse_one("@up")
    assert node.value == KeyNameNode("up")
    assert node.location.start == Position(1, 1)
    assert node.location.end == Position(1, 4)


# --- Lists ---

def test_parse_list():
    node = parse_one("(set x 5)")
    assert isinstance(node.value, ListNode)
    assert [c.value for c in node.value.children] == [
        SymbolNode("set"), SymbolNode("x"), NumberNode(5.0),
    ]
    assert node.location.start == Position(1, 1)
    assert node.location.end == Position(1, 10)


def test_parse_empty_list():
    assert parse_one("()").value == ListNode(())


def test_parse_multiple_top_level():
    nodes = parse("(init) (update)\n(draw)")
    assert len(nodes) == 3
    assert nodes[2].location.start == Position(2, 1)


def test_parse_multiline_locations():
    node = parse_one("(init\n  (set x 5))")
    inner = node.value.children[1]
    assert inner.location.start == Position(2, 3)
    assert inner.location.end == Position(2, 12)
    assert node.location.end == Position(2, 13)


def test_parent_spans_contain_children():
    src = '(update\n  (if (key-down @left)\n    (set x (- x 1.5)))\n  (print "hi" 2 2))'
    for top in parse(src):
        for node in walk(top):
            if isinstance(node.value, ListNode):
                for child in node.value.children:
                    assert node.location.contains(child.location)


def test_parse_is_deterministic():
    src = '(init (set x 5) (print "a\\n" @space))'
    assert parse(src) == parse(src)


# --- Errors ---

def test_unterminated_list_is_recoverable():
    diag = parse_error("(init (set x 5)")
    assert diag.severity is Severity.RECOVERABLE
    assert diag.message == "expected list terminator"
    assert diag.location.start == Position(1, 1)
    assert diag.location.end == Position(1, 16)


def test_unterminated_nested_list_reports_enclosing_list():
    diag = parse_error("(init\n  (set x (+ 1 2)")
    assert diag.recoverable
    assert diag.location.start == Position(1, 1)


def test_unterminated_string():
    diag = parse_error('(init "abc')
    assert diag.severity is Severity.NONRECOVERABLE
    assert diag.message == "unterminated string"
    assert diag.location.start == Position(1, 7)
    assert diag.location.end == Position(1, 11)


def test_unterminated_string_after_backslash():
    diag = parse_error('"abc\\')
    assert diag.message == "unterminated string"


def test_invalid_escape():
    diag = parse_error(r'"\q"')
    assert not diag.recoverable
    assert diag.message == "invalid escape sequence `\\q`"
    assert diag.location.start == Position(1, 1)
    assert diag.location.end == Position(1, 4)


def test_expected_key_name():
    diag = parse_error("(f @ up)")
    assert not diag.recoverable
    assert diag.message == "expected key name"
    assert diag.location.start == Position(1, 4)


def test_expected_key_name_at_end_of_input():
    diag = parse_error("@")
    assert diag.message == "expected key name"


@pytest.mark.parametrize("text", ["1.", "12abc", "1e", "1.2.3", "5@up", "5+", "5-3", "2_x", "1e5*"])
def test_malformed_number(text):
    diag = parse_error(f"(f {text})")
    assert not diag.recoverable
    assert diag.message == f"malformed number `{text}`"


def test_expected_expression():
    diag = parse_error("(f #)")
    assert not diag.recoverable
    assert diag.message == "expected an expression, found `#`"


def test_unexpected_close_paren():
    diag = parse_error("(init))")
    assert not diag.recoverable
    assert diag.message == "unexpected `)`"
    assert diag.location.start == Position(1, 7)
    assert diag.location.end == Position(1, 8)


def test_max_depth():
    src = "(" * 5 + ")" * 5
    assert len(parse(src, ParseOptions(max_depth=5))) == 1
    diag = parse_error(src, ParseOptions(max_depth=4))
    assert diag.message == "maximum nesting depth exceeded"


def test_deep_nesting_reports_diagnostic():
    diag = parse_error("(" * 2000 + ")" * 2000)
    assert diag.message == "maximum nesting depth exceeded"


def test_error_string_form():
    with pytest.raises(ParseError, match="1:1: expected list terminator"):
        parse("(init")
