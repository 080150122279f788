"""Value parsing mixin: literals, interpolation parameters and removable numbers."""

from .tokens import TokenType
from . import ast_nodes as ast
from .keywords import (
    BOOLEANS, ICON_KINDS, INTERPOLATION_COMMANDS, IconKind, InterpolationCommand,
)
from .parser_base import Suggestion

TT = TokenType

U32_MAX = 2 ** 32 - 1
I32_MIN = -2 ** 31
I32_MAX = 2 ** 31 - 1


# ----------------------------------------------------------------------
# Decoders: the textual grammar of each literal type.  All raise ValueError.
# ----------------------------------------------------------------------
def decode_unsigned(text):
    if not (text.isascii() and text.isdigit()):
        raise ValueError(f"not an unsigned integer: {text!r}")
    value = int(text)
    if value > U32_MAX:
        raise ValueError(f"out of range: {text!r}")
    return value


def decode_integer(text):
    digits = text[1:] if text.startswith('-') else text
    if not (digits.isascii() and digits.isdigit()):
        raise ValueError(f"not an integer: {text!r}")
    value = int(text)
    if not I32_MIN <= value <= I32_MAX:
        raise ValueError(f"out of range: {text!r}")
    return value


def decode_float(text):
    digits = text[1:] if text.startswith('-') else text
    if not digits or not all(c.isascii() and (c.isdigit() or c == '.') for c in digits):
        raise ValueError(f"not a float: {text!r}")
    return float(text)


def decode_bool(text):
    try:
        return BOOLEANS[text.lower()]
    except KeyError:
        raise ValueError(f"not a boolean: {text!r}") from None


def decode_numeric_bool(text):
    if text not in ('0', '1'):
        raise ValueError(f"not a numeric boolean: {text!r}")
    return text == '1'


def decode_string(text):
    return text


def decode_enum(enum_cls):
    """Decoder for a numbered enum; numbers that are not members are invalid."""
    def _decode(text):
        return enum_cls(decode_unsigned(text))
    return _decode


_ICON_SUGGESTIONS = {
    IconKind.SHARD: Suggestion.SHARD_ICON,
    IconKind.SPELL: Suggestion.SPELL_ICON,
    IconKind.OPHER: Suggestion.OPHER_ICON,
    IconKind.LUPO: Suggestion.LUPO_ICON,
    IconKind.GROM: Suggestion.GROM_ICON,
    IconKind.TULEY: Suggestion.TULEY_ICON,
}


class ValueMixin:
    """Mixin providing the value grammar shared by every statement kind.

    Numeric and identifier-typed fields go through ``parse_v_number`` /
    ``parse_v_ident`` so that any of them may be written as
    ``$Param(name)`` instead of a literal.  Mismatches are reported
    without consuming the offending token.
    """

    def _decode(self, tok, text, decode, suggestion):
        try:
            return decode(text)
        except ValueError:
            raise self.error(f"Invalid {suggestion.label}",
                             tok.start, tok.end, suggestion) from None

    # ------------------------------------------------------------------
    # Plain literals
    # ------------------------------------------------------------------
    def parse_keyword(self, table, suggestion):
        tok = self.eat_or_suggest(TT.IDENTIFIER, suggestion)
        kind = table.get(self.read_token(tok).lower())
        if kind is None:
            raise self.error(f"Invalid {suggestion.label}", tok.start, tok.end, suggestion)
        return kind

    def parse_identifier(self, suggestion=Suggestion.IDENTIFIER):
        tok = self.eat_or_suggest(TT.IDENTIFIER, suggestion)
        return self.read_token(tok)

    def parse_number(self, suggestion, decode=decode_unsigned):
        tok = self.eat_or_suggest(TT.NUMBER, suggestion)
        return self._decode(tok, self.read_token(tok), decode, suggestion)

    def parse_removable_number(self, suggestion, decode=decode_unsigned):
        """Parse ``N`` or ``-N`` and return ``(N, removed)``."""
        tok = self.eat_or_suggest(TT.NUMBER, suggestion)
        text = self.read_token(tok)
        remove = text.startswith('-')
        if remove:
            text = text[1:]
        return self._decode(tok, text, decode, suggestion), remove

    def parse_string(self, suggestion=Suggestion.STRING):
        tok = self.current_token()
        if tok.type != TT.STRING:
            raise self.error("Expected string", tok.start, tok.end, suggestion)
        self.next_token()
        if not tok.terminated:
            raise self.error("Unterminated string", tok.start, tok.end, suggestion)
        return self.read(tok.start + 1, tok.end - 1)

    def parse_text(self, suggestion=Suggestion.TEXT):
        """Raw rest of the line, up to a newline or comment."""
        first = self.current_token()
        self.skip_while(lambda tt: tt not in (TT.NEWLINE, TT.COMMENT))
        text = self.read(first.start, self.current_token().start).strip()
        if not text:
            raise self.error(f"Expected {suggestion.label}", first.start, first.end, suggestion)
        return text

    # ------------------------------------------------------------------
    # Literal-or-parameter values
    # ------------------------------------------------------------------
    def parse_v_ident(self, suggestion, decode=decode_string):
        return self._parse_v_or_kind(TT.IDENTIFIER, suggestion, decode)

    def parse_v_number(self, suggestion, decode=decode_unsigned):
        return self._parse_v_or_kind(TT.NUMBER, suggestion, decode)

    def parse_v_removable_number(self, suggestion, decode=decode_unsigned):
        """Parse a value that a leading ``-`` marks as a removal.

        ``-5000`` and ``-$Param(x)`` both come back with ``removed=True``;
        the first strips the sign from the literal, the second sees a
        separate MINUS token in front of the interpolation.
        """
        tok = self.current_token()
        if tok.type == TT.NUMBER:
            value, remove = self.parse_removable_number(suggestion, decode)
            return ast.Literal(value, start=tok.start, end=tok.end), remove
        if tok.type == TT.MINUS:
            self.next_token()
            return self.parse_v_number(suggestion, decode), True
        return self._parse_v_interpolation(suggestion), False

    def _parse_v_or_kind(self, tt, suggestion, decode):
        tok = self.current_token()
        if tok.type == tt:
            self.next_token()
            value = self._decode(tok, self.read_token(tok), decode, suggestion)
            return ast.Literal(value, start=tok.start, end=tok.end)
        return self._parse_v_interpolation(suggestion)

    def _parse_v_interpolation(self, suggestion):
        tok = self.current_token()
        if tok.type != TT.DOLLAR:
            raise self.error(f"Expected {suggestion.label}", tok.start, tok.end, suggestion)
        self.next_token()
        command = self.parse_keyword(INTERPOLATION_COMMANDS, Suggestion.INTERPOLATION_COMMAND)
        if command == InterpolationCommand.PARAM:
            return self._parse_v_param(tok.start)

    def _parse_v_param(self, start):
        self.eat_or_suggest(TT.OPEN_PAREN, Suggestion.INTERPOLATION_COMMAND)
        name = self.read_token(self.eat(TT.IDENTIFIER))
        end = self.eat(TT.CLOSE_PAREN).end
        return ast.Parameter(name, start=start, end=end)

    # ------------------------------------------------------------------
    # Compound values
    # ------------------------------------------------------------------
    def parse_uber_identifier(self):
        start = self.current_token().start
        group = self.parse_number(Suggestion.UBER_GROUP)
        self.eat_or_suggest(TT.SEPARATOR, Suggestion.UBER_GROUP)
        uber_id = self.parse_number(Suggestion.UBER_ID)
        return ast.UberIdentifier(group, uber_id, start=start, end=self.last_end)

    def parse_icon(self):
        start = self.current_token().start
        kind = self.parse_keyword(ICON_KINDS, Suggestion.ICON_KIND)
        self.eat_or_suggest(TT.COLON, Suggestion.ICON_KIND)
        if kind == IconKind.FILE:
            value = self.parse_string()
        else:
            value = self.parse_number(_ICON_SUGGESTIONS[kind])
        return ast.Icon(kind, value, start=start, end=self.last_end)
