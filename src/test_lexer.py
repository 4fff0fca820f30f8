import pytest

from plot_lang.lexer import Lexer, lex
from plot_lang.core import token as tk
from plot_lang.core.source_range import SourceRange
from plot_lang.errors import IllegalCharacterError, EscapeError, EndError


def kinds(tokens):
    return [(t.type, t.value) for t in tokens]


def test_directive_and_equation_tokens():
    tokens = lex("test", "#frame(0,0,10,10)\ny=x")
    assert kinds(tokens) == [
        (tk.HEADER, ''), (tk.HEADFUNC, 'frame'), (tk.LPAREN, ''),
        (tk.NUMBER, '0'), (tk.COMMA, ''), (tk.NUMBER, '0'), (tk.COMMA, ''),
        (tk.NUMBER, '10'), (tk.COMMA, ''), (tk.NUMBER, '10'), (tk.RPAREN, ''),
        (tk.EOL, ''),
        (tk.VARIABLE, 'y'), (tk.EQUALS, ''), (tk.VARIABLE, 'x'),
        (tk.EOL, ''), (tk.EOF, ''),
    ]


def test_unknown_identifier_splits_into_single_letter_variables():
    tokens = lex("test", "xy")
    assert kinds(tokens)[:2] == [(tk.VARIABLE, 'x'), (tk.VARIABLE, 'y')]
    assert tokens[0].range == SourceRange("test", 0, 1)
    assert tokens[1].range == SourceRange("test", 1, 2)


def test_function_and_directive_names_are_single_tokens():
    tokens = lex("test", "root sin #print_now")
    assert kinds(tokens)[:4] == [
        (tk.FUNCTION, 'root'), (tk.FUNCTION, 'sin'), (tk.HEADER, ''), (tk.HEADFUNC, 'print_now'),
    ]


def test_number_separators_and_single_dot():
    tokens = lex("test", "1_000.5")
    assert kinds(tokens)[0] == (tk.NUMBER, '1000.5')
    assert tokens[0].range == SourceRange("test", 0, 7)


def test_second_dot_ends_number():
    with pytest.raises(IllegalCharacterError) as info:
        lex("test", "1.2.3")
    assert info.value.range == SourceRange("test", 3, 4)


def test_string_escapes():
    tokens = lex("test", r'"a\"b\\c\nd\te"')
    assert kinds(tokens)[0] == (tk.STRING, 'a"b\\c\nd\te')


def test_escaped_literal_newline_is_kept():
    tokens = lex("test", '"a\\\nb"')
    assert tokens[0].value == 'a\nb'


def test_unknown_escape_fails():
    with pytest.raises(EscapeError):
        lex("test", r'"bad\q"')


def test_unterminated_string_at_end_of_line():
    with pytest.raises(EndError) as info:
        lex("test", '"open\n"')
    assert info.value.message == "Invalid EOL."


def test_unterminated_string_at_end_of_file():
    with pytest.raises(EndError) as info:
        lex("test", '"open')
    assert info.value.message == "Invalid EOF."


def test_illegal_character_reports_range():
    with pytest.raises(IllegalCharacterError) as info:
        lex("script.plot", "y = X")
    assert info.value.range == SourceRange("script.plot", 4, 5)
    assert str(info.value).startswith("IllegalCharacterError: ")


def test_stream_always_ends_with_eol_and_eof():
    assert kinds(lex("test", "")) == [(tk.EOL, ''), (tk.EOF, '')]
    assert kinds(lex("test", "x\n"))[-3:] == [(tk.EOL, ''), (tk.EOL, ''), (tk.EOF, '')]


def test_tokenize_is_repeatable():
    lexer = Lexer("#resolution(5, 5)\n2x + 1", "test")
    assert lexer.tokenize() == lexer.tokenize()
    assert lex("test", "2x + 1") == lex("test", "2x + 1")


def test_underscore_outside_names_and_numbers_is_illegal():
    with pytest.raises(IllegalCharacterError) as info:
        lex("test", "y = x_")
    assert info.value.range == SourceRange("test", 5, 6)
    with pytest.raises(IllegalCharacterError) as info:
        lex("test", "a_b")
    assert info.value.range == SourceRange("test", 1, 2)


def test_single_quote_escape():
    tokens = lex("test", r'"it\'s"')
    assert kinds(tokens)[0] == (tk.STRING, "it's")


def test_carriage_return_ends_line():
    tokens = lex("test", "x\ry")
    assert kinds(tokens) == [
        (tk.VARIABLE, 'x'), (tk.EOL, ''), (tk.VARIABLE, 'y'), (tk.EOL, ''), (tk.EOF, ''),
    ]
    assert tokens[1].range == SourceRange("test", 1, 2)
