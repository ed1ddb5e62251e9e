"""Tests for bubble.lexer."""

import pytest

from bubble.lexer import Token, TokenKind, classify, is_number, tokenize


def kinds(source):
    return [t.kind for t in tokenize(source)]


def texts(source):
    return [t.text for t in tokenize(source)]


# ---------------------------------------------------------------------------
# classify
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("word, kind", [
    ("say", TokenKind.SAY),
    ("plus", TokenKind.PLUS),
    ("+", TokenKind.PLUS),
    ("minus", TokenKind.MINUS),
    ("-", TokenKind.MINUS),
    ("times", TokenKind.TIMES),
    ("*", TokenKind.TIMES),
    ("over", TokenKind.DIVIDED_BY),
    ("/", TokenKind.DIVIDED_BY),
    ("remember", TokenKind.REMEMBER),
    ("as", TokenKind.AS),
    ("by", TokenKind.IDENTIFIER),
])
def test_classify_keywords(word, kind):
    assert classify(word) == Token(kind, word)


def test_classify_is_case_sensitive():
    assert classify("Say").kind == TokenKind.IDENTIFIER
    assert classify("PLUS").kind == TokenKind.IDENTIFIER


def test_classify_whole_word_only():
    assert classify("sayx").kind == TokenKind.IDENTIFIER
    assert classify("plusminus").kind == TokenKind.IDENTIFIER


@pytest.mark.parametrize("word", ["0", "42", "2.5", ".5", "5.", "1e3", "2.5E-2", "nan", "Inf", "infinity"])
def test_classify_numbers(word):
    assert classify(word).kind == TokenKind.NUMBER


@pytest.mark.parametrize("word", [
    "x", "5x", "1.2.3", "e5", "3*2", "1e999", "<z>", "0x1p4", "٣", "５", "1٣.5",
])
def test_classify_identifiers(word):
    assert classify(word).kind == TokenKind.IDENTIFIER


def test_is_number_rejects_overflow():
    assert is_number("1e308")
    assert not is_number("1e309")


# ---------------------------------------------------------------------------
# tokenize
# ---------------------------------------------------------------------------

def test_empty_input_is_just_eof():
    assert tokenize("") == [Token(TokenKind.EOF, "")]


def test_always_ends_with_eof():
    assert tokenize("say 1")[-1].kind == TokenKind.EOF


def test_simple_say():
    assert kinds("say 1") == [TokenKind.SAY, TokenKind.NUMBER, TokenKind.EOF]


def test_repeated_spaces_are_ignored():
    assert texts("  a   b ") == ["a", "b", ""]


def test_plus_minus_split_without_spaces():
    assert kinds("5+3-1") == [
        TokenKind.NUMBER, TokenKind.PLUS, TokenKind.NUMBER,
        TokenKind.MINUS, TokenKind.NUMBER, TokenKind.EOF,
    ]


def test_times_over_need_spaces():
    assert tokenize("5*3") == [Token(TokenKind.IDENTIFIER, "5*3"), Token(TokenKind.EOF, "")]
    assert kinds("5 * 3") == [TokenKind.NUMBER, TokenKind.TIMES, TokenKind.NUMBER, TokenKind.EOF]
    assert kinds("6 / 3") == [TokenKind.NUMBER, TokenKind.DIVIDED_BY, TokenKind.NUMBER, TokenKind.EOF]


def test_assign_splits_without_spaces():
    assert tokenize("x=5") == [
        Token(TokenKind.IDENTIFIER, "x"),
        Token(TokenKind.ASSIGN, "="),
        Token(TokenKind.NUMBER, "5"),
        Token(TokenKind.EOF, ""),
    ]


def test_exponent_with_minus_is_split():
    assert texts("1e-5") == ["1e", "-", "5", ""]


def test_string_keeps_spaces_and_operators():
    assert tokenize('"a + b = c"') == [Token(TokenKind.STRING, "a + b = c"), Token(TokenKind.EOF, "")]


def test_string_has_no_escapes():
    assert tokenize(r'"a\nb"')[0] == Token(TokenKind.STRING, r"a\nb")


def test_empty_string():
    assert tokenize('""')[0] == Token(TokenKind.STRING, "")


def test_strings_and_operator():
    assert tokenize('"foo" plus "bar"') == [
        Token(TokenKind.STRING, "foo"),
        Token(TokenKind.PLUS, "plus"),
        Token(TokenKind.STRING, "bar"),
        Token(TokenKind.EOF, ""),
    ]


def test_keyword_inside_string_stays_text():
    assert tokenize('"say"')[0] == Token(TokenKind.STRING, "say")


def test_unterminated_string_becomes_word():
    assert tokenize('say "abc') == [
        Token(TokenKind.SAY, "say"),
        Token(TokenKind.IDENTIFIER, "abc"),
        Token(TokenKind.EOF, ""),
    ]


def test_opening_quote_continues_current_word():
    assert tokenize('ab"cd"')[0] == Token(TokenKind.STRING, "abcd")


# ---------------------------------------------------------------------------
# Re-lexing
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("source", [
    "x = 5 plus 3*2 over y",
    "remember total as 1+2-3",
    "say a b  c",
    "x=y=z",
    "1e-5 times by",
])
def test_relex_joined_texts(source):
    first = tokenize(source)
    joined = " ".join(t.text for t in first[:-1])
    assert tokenize(joined) == first


def test_non_ascii_digit_is_a_name():
    assert tokenize("٣ = 5")[:2] == [
        Token(TokenKind.IDENTIFIER, "٣"),
        Token(TokenKind.ASSIGN, "="),
    ]
