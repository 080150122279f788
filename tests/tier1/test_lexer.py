"""Tier 1 unit tests: Tokenizer."""

import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from header_parser.lexer import Lexer, tokenize
from header_parser.tokens import TokenType, CommentKind

TT = TokenType


def types(text):
    return [t.type for t in tokenize(text)]


class TestBasicTokens:
    def test_pickup_line(self):
        tokens = tokenize("0|5000")
        assert [t.type for t in tokens] == [TT.NUMBER, TT.SEPARATOR, TT.NUMBER, TT.EOF]
        assert [t.range for t in tokens] == [(0, 1), (1, 2), (2, 6), (6, 6)]

    def test_identifier(self):
        assert types("setup_2") == [TT.IDENTIFIER, TT.EOF]

    def test_identifier_cannot_start_with_digit(self):
        assert types("2abc") == [TT.NUMBER, TT.IDENTIFIER, TT.EOF]

    def test_punctuation(self):
        assert types("|=:#!$().") == [
            TT.SEPARATOR, TT.EQ, TT.COLON, TT.POUND, TT.BANG,
            TT.DOLLAR, TT.OPEN_PAREN, TT.CLOSE_PAREN, TT.DOT, TT.EOF,
        ]

    def test_icon_spec(self):
        assert types("Shard:5") == [TT.IDENTIFIER, TT.COLON, TT.NUMBER, TT.EOF]

    def test_unknown_character(self):
        assert types("@") == [TT.UNKNOWN, TT.EOF]

    def test_lone_slash_is_unknown(self):
        assert types("/x") == [TT.UNKNOWN, TT.IDENTIFIER, TT.EOF]


class TestNumbers:
    def test_negative_number_keeps_sign(self):
        tokens = tokenize("-5000")
        assert tokens[0].type == TT.NUMBER
        assert tokens[0].range == (0, 5)

    def test_minus_before_interpolation(self):
        assert types("-$Param(x)") == [
            TT.MINUS, TT.DOLLAR, TT.IDENTIFIER, TT.OPEN_PAREN,
            TT.IDENTIFIER, TT.CLOSE_PAREN, TT.EOF,
        ]

    def test_decimal(self):
        tokens = tokenize("1.5")
        assert tokens[0].type == TT.NUMBER
        assert tokens[0].range == (0, 3)

    def test_trailing_dot_is_separate(self):
        assert types("1.") == [TT.NUMBER, TT.DOT, TT.EOF]


class TestStrings:
    def test_terminated(self):
        tok = tokenize('"abc"')[0]
        assert tok.type == TT.STRING
        assert tok.terminated
        assert tok.range == (0, 5)

    def test_unterminated_at_newline(self):
        tokens = tokenize('"abc\nx')
        assert tokens[0].type == TT.STRING
        assert not tokens[0].terminated
        assert tokens[0].range == (0, 4)
        assert tokens[1].type == TT.NEWLINE

    def test_unterminated_at_end_of_input(self):
        tok = tokenize('file:"abc')[2]
        assert tok.type == TT.STRING
        assert not tok.terminated
        assert tok.range == (5, 9)


class TestComments:
    def test_note(self):
        tok = tokenize("// skip-validate")[0]
        assert tok.type == TT.COMMENT
        assert tok.comment_kind == CommentKind.NOTE
        assert tok.range == (0, 16)

    def test_header_doc(self):
        tok = tokenize("/// Bonus items")[0]
        assert tok.comment_kind == CommentKind.HEADER_DOC

    def test_config_doc(self):
        tok = tokenize("//// Adds items")[0]
        assert tok.comment_kind == CommentKind.CONFIG_DOC

    def test_comment_stops_at_newline(self):
        assert types("0 // note\n1") == [
            TT.NUMBER, TT.WHITESPACE, TT.COMMENT, TT.NEWLINE, TT.NUMBER, TT.EOF,
        ]


class TestWhitespace:
    def test_blank_run_is_one_token(self):
        tokens = tokenize(" \t  x")
        assert tokens[0].type == TT.WHITESPACE
        assert tokens[0].range == (0, 4)

    def test_crlf_is_one_newline(self):
        tokens = tokenize("\r\n")
        assert tokens[0].type == TT.NEWLINE
        assert tokens[0].range == (0, 2)

    def test_newlines_are_not_merged(self):
        assert types("\n\n") == [TT.NEWLINE, TT.NEWLINE, TT.EOF]


class TestEof:
    def test_empty_input(self):
        tokens = tokenize("")
        assert len(tokens) == 1
        assert tokens[0].type == TT.EOF
        assert tokens[0].range == (0, 0)

    def test_eof_is_repeatable(self):
        lexer = Lexer("0|1")
        first = lexer.token_at(3)
        assert first.type == TT.EOF
        assert lexer.token_at(3) == first
        assert lexer.token_at(10).range == (3, 3)

    def test_token_at_is_pure(self):
        lexer = Lexer("0|5000")
        assert lexer.token_at(2) == lexer.token_at(2)
        assert lexer.token_at(2).range == (2, 6)
