import pytest
from hypothesis import given, strategies as st

from fundot.errors import (
    FundotError,
    FundotSyntaxError,
    InvalidEscape,
    InvalidNumericLiteral,
    MalformedMapPair,
    MalformedVectorElement,
    NestingTooDeep,
    UnbalancedDelimiter,
    UnexpectedEndOfInput,
    UnterminatedString,
)
from fundot.reader.parser import TokenStream, lex, parse, parse_all
from fundot.types import (
    FALSE,
    INT64_MAX,
    TRUE,
    Boolean,
    Float,
    Integer,
    List,
    Map,
    Null,
    NullType,
    String,
    Symbol,
    Vector,
)
from fundot.types.scalars import quote


def values(source):
    return [token.value for token in lex(source)]


@pytest.mark.parametrize(
    "source,expected",
    [
        ("a", [Symbol("a")]),
        ("(a b c)", [Symbol("("), Symbol("a"), Symbol("b"), Symbol("c"), Symbol(")")]),
        ("foo_bar", [Symbol("foo_bar")]),
        ("foo-bar", [Symbol("foo"), Symbol("-"), Symbol("bar")]),
        ("a.b", [Symbol("a"), Symbol("."), Symbol("b")]),
        (". 5", [Symbol("."), Integer(5)]),
        ("-5", [Symbol("-"), Integer(5)]),
        ('"hi" there', [String("hi"), Symbol("there")]),
        ('abc"def"', [Symbol("abc"), String("def")]),
        ("{a: 1}", [Symbol("{"), Symbol("a"), Symbol(":"), Integer(1), Symbol("}")]),
        ("[1,2]", [Symbol("["), Integer(1), Symbol(","), Integer(2), Symbol("]")]),
        ("  \t\n ", []),
        ("", []),
    ]
)
def test_lexer_basic(source, expected):
    assert values(source) == expected


def test_lexer_keeps_trailing_word():
    assert values("(get x") == [Symbol("("), Symbol("get"), Symbol("x")]
    assert values("last") == [Symbol("last")]


def test_lexer_literals_are_exact_variants():
    null, true, false = values("null true false")
    assert isinstance(null, NullType)
    assert isinstance(true, Boolean) and true.value is True
    assert isinstance(false, Boolean) and false.value is False


def test_lexer_offsets():
    tokens = list(lex('(ab "c")'))
    assert [token.offset for token in tokens] == [0, 1, 4, 7]


@pytest.mark.parametrize(
    "source,expected_type,expected",
    [
        ("0", Integer, 0),
        ("007", Integer, 7),
        ("9223372036854775807", Integer, INT64_MAX),
        ("9223372036854775808", Float, 9223372036854775808.0),
        ("3.14", Float, 3.14),
        ("2.", Float, 2.0),
        ("1e3", Float, 1000.0),
        ("1.5E2", Float, 150.0),
    ]
)
def test_numeric_classification(source, expected_type, expected):
    (value,) = values(source)
    assert type(value) is expected_type
    assert value.value == expected


@pytest.mark.parametrize("source", ["1.2.3", "12abc", "1_000", "0x10", "1e"])
def test_invalid_numeric_literal(source):
    with pytest.raises(InvalidNumericLiteral):
        list(lex(source))


@given(st.integers(min_value=0, max_value=INT64_MAX))
def test_integer_text_round_trip(n):
    value = parse(str(n))
    assert isinstance(value, Integer)
    assert value.value == n
    assert parse(str(value)) == value


def test_large_float_text_round_trip():
    value = parse("100000000000000000000")
    assert isinstance(value, Float)
    assert str(value) == "100000000000000000000.0"
    again = parse(str(value))
    assert isinstance(again, Float)
    assert again == value


@given(st.floats(min_value=0.0, allow_nan=False, allow_infinity=False).map(abs))
def test_float_text_round_trip(x):
    value = parse(str(Float(x)))
    assert isinstance(value, Float)
    assert value.value == x


@given(st.integers(min_value=1, max_value=INT64_MAX))
def test_negative_integer_text_reads_as_minus_then_integer(n):
    assert parse_all(str(-n)) == [Symbol("-"), Integer(n)]


@given(
    st.text(alphabet=st.characters(exclude_categories=("Cc", "Cs")))
    | st.text(alphabet='"\\\n\r\tab ')
)
def test_string_escape_round_trip(text):
    value = parse(quote(text))
    assert isinstance(value, String)
    assert value.value == text


@pytest.mark.parametrize(
    "source,expected",
    [
        (r'"a\"b"', 'a"b'),
        (r'"a\\b"', "a\\b"),
        (r'"\n\r\t"', "\n\r\t"),
        ('"(not [a] list)"', "(not [a] list)"),
        ('""', ""),
    ]
)
def test_string_escapes(source, expected):
    assert parse(source) == String(expected)


@pytest.mark.parametrize(
    "source,error,offset",
    [
        ('"abc', UnterminatedString, 0),
        ('(a "b', UnterminatedString, 3),
        ('"abc\\', UnterminatedString, 0),
        ('"a\\qb"', InvalidEscape, 2),
        ("(1 2", UnbalancedDelimiter, 0),
        ("(a [1, 2", UnbalancedDelimiter, 3),
        ('[{"k": 1', UnbalancedDelimiter, 1),
        ("[1 2]", MalformedVectorElement, 1),
        ("[1, 2 3]", MalformedVectorElement, 4),
        ("[1,]", MalformedVectorElement, 3),
        ("[1,,2]", MalformedVectorElement, 3),
        ('{"a" 1}', MalformedMapPair, 1),
        ('{"a" = 1}', MalformedMapPair, 1),
        ('{"a": 1, "b"}', MalformedMapPair, 9),
        ("", UnexpectedEndOfInput, 0),
    ]
)
def test_syntax_errors(source, error, offset):
    with pytest.raises(error) as excinfo:
        parse(source)
    assert excinfo.value.offset == offset
    assert f"at offset {offset}" in str(excinfo.value)
    assert isinstance(excinfo.value, FundotSyntaxError)
    assert isinstance(excinfo.value, FundotError)


def test_parse_empty_list():
    value = parse("()")
    assert isinstance(value, List)
    assert len(value) == 0
    assert str(value) == "()"


def test_parse_nested_list():
    value = parse("(a (b c) [1, 2])")
    assert value == List([
        Symbol("a"),
        List([Symbol("b"), Symbol("c")]),
        Vector([Integer(1), Integer(2)]),
    ])


def test_parse_vector():
    value = parse("[1, 2, 3]")
    assert isinstance(value, Vector)
    assert list(value) == [Integer(1), Integer(2), Integer(3)]
    assert all(type(item) is Integer for item in value)


@pytest.mark.parametrize(
    "source,expected",
    [
        ("[]", Vector()),
        ("[,1]", Vector([Integer(1)])),
        ("[ (a b) , [c] ]", Vector([List([Symbol("a"), Symbol("b")]), Vector([Symbol("c")])])),
        ('["x", null]', Vector([String("x"), Null])),
    ]
)
def test_parse_vector_shapes(source, expected):
    assert parse(source) == expected


def test_parse_map():
    value = parse('{"a": 1, "b": 2}')
    assert isinstance(value, Map)
    assert len(value) == 2
    assert value[String("a")] == Integer(1)
    assert value[String("b")] == Integer(2)


def test_parse_map_with_compound_keys_and_values():
    value = parse("{[1, 2]: (a b), k: {x: y}}")
    assert value[Vector([Integer(1), Integer(2)])] == List([Symbol("a"), Symbol("b")])
    assert value[Symbol("k")] == Map([(Symbol("x"), Symbol("y"))])


def test_parse_map_last_write_wins():
    value = parse('{"a": 1, "a": 2}')
    assert len(value) == 1
    assert value[String("a")] == Integer(2)


def test_parse_empty_map():
    assert parse("{}") == Map()
    with pytest.raises(MalformedMapPair):
        parse("{,}")


def test_commas_and_colons_are_plain_symbols_inside_lists():
    assert parse("(a , b : c)") == List(
        [Symbol("a"), Symbol(","), Symbol("b"), Symbol(":"), Symbol("c")]
    )


def test_stray_closing_bracket_reads_as_symbol():
    assert parse(")") == Symbol(")")
    assert parse("(a ] b)") == List([Symbol("a"), Symbol("]"), Symbol("b")])


def test_parse_returns_first_form_only():
    assert parse("1 2 (3") == Integer(1)
    assert parse_all("1 [2] foo") == [Integer(1), Vector([Integer(2)]), Symbol("foo")]


def test_token_stream_cursor():
    stream = TokenStream(lex("(a) b"))
    assert stream.peek().value == Symbol("(")
    assert stream.parse_expr() == List([Symbol("a")])
    assert not stream.at_end()
    assert stream.parse_expr() == Symbol("b")
    assert stream.at_end()
    assert stream.peek() is None
    assert stream.advance() is None


def test_literals_inside_structures():
    value = parse("[null, true, false]")
    assert type(value[0]) is NullType
    assert value[1] is TRUE
    assert type(value[2]) is Boolean and not value[2].value
    assert value[2] == FALSE


def test_nesting_limit():
    with pytest.raises(NestingTooDeep):
        parse("(" * 101 + ")" * 101)
    deep = parse("(" * 100 + ")" * 100)
    assert isinstance(deep, List)


def test_nesting_limit_is_configurable(monkeypatch):
    assert isinstance(parse("[" * 120 + "]" * 120, max_depth=150), Vector)
    with pytest.raises(NestingTooDeep):
        parse("(((a)))", max_depth=2)
    monkeypatch.setenv("FUNDOT_MAX_DEPTH", "2")
    with pytest.raises(NestingTooDeep):
        parse("(((a)))")


def test_nesting_limit_above_recursion_limit():
    with pytest.raises(NestingTooDeep):
        parse("[" * 900 + "]" * 900, max_depth=1000)
    with pytest.raises(NestingTooDeep):
        parse_all("1 " + "(" * 900 + ")" * 900, max_depth=1000)
    # shallow input still reads under the same limit
    assert parse("[[1]]", max_depth=1000) == Vector([Vector([Integer(1)])])
