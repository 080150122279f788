"""Base class for the header parser: error types, suggestions, token cursor."""

from enum import Enum

from .lexer import Lexer
from .tokens import TokenType

TT = TokenType


class Suggestion(Enum):
    """The grammatical construct expected where a parse failed."""

    UBER_GROUP = 'uber group'
    UBER_ID = 'uber id'
    UBER_TRIGGER_VALUE = 'uber trigger value'
    INTEGER = 'integer'
    FLOAT = 'float'
    BOOLEAN = 'boolean'
    NUMERIC_BOOLEAN = 'numeric boolean'
    IDENTIFIER = 'identifier'
    STRING = 'string'
    TEXT = 'text'
    ICON_KIND = 'icon kind'
    SHARD_ICON = 'shard icon'
    SPELL_ICON = 'spell icon'
    OPHER_ICON = 'opher icon'
    LUPO_ICON = 'lupo icon'
    GROM_ICON = 'grom icon'
    TULEY_ICON = 'tuley icon'
    SETUP_KIND = 'setup kind'
    ANNOTATION = 'annotation'
    EXPRESSION = 'expression'
    INTERPOLATION_COMMAND = 'interpolation command'
    UBER_CONDITION_VALUE = 'uber condition value'
    ITEM_KIND = 'item kind'
    RESOURCE = 'resource'
    SKILL = 'skill'
    SHARD = 'shard'
    COMMAND_KIND = 'command kind'
    TOGGLE_COMMAND_KIND = 'toggle command kind'
    EQUIP_SLOT = 'equip slot'
    SPELL = 'spell'
    TELEPORTER = 'teleporter'
    MESSAGE_FLAG = 'message flag'
    UBER_TYPE = 'uber type'
    WORLD_EVENT = 'world event'
    BONUS_ITEM = 'bonus item'
    BONUS_UPGRADE = 'bonus upgrade'
    ZONE = 'zone'
    SYS_MESSAGE_KIND = 'sys message kind'
    WHEEL_COMMAND_KIND = 'wheel command kind'
    WHEEL_ITEM_POSITION = 'wheel item position'
    WHEEL_BIND = 'wheel bind'
    SHOP_COMMAND_KIND = 'shop command kind'
    HEADER_COMMAND = 'header command'
    PARAMETER_TYPE = 'parameter type'

    @property
    def label(self):
        return self.value

    def __str__(self):
        return self.value


class ParseError(Exception):
    """Parse error covering the source range ``start..end``."""

    def __init__(self, message, start=0, end=0, suggestion=None):
        self.message = message
        self.start = start
        self.end = end
        self.suggestion = suggestion
        super().__init__(message)

    @property
    def range(self):
        return self.start, self.end

    def with_suggestion(self, suggestion):
        self.suggestion = suggestion
        return self

    def location(self, text):
        """1-based (line, col) of the error start within *text*."""
        line = text.count('\n', 0, self.start) + 1
        col = self.start - (text.rfind('\n', 0, self.start) + 1) + 1
        return line, col

    def format(self, text, filename="<input>"):
        line, col = self.location(text)
        rendered = f"{filename}:L{line}:{col}: {self.message}"
        if self.suggestion is not None:
            rendered += f" [{self.suggestion.label}]"
        return rendered

    def __eq__(self, other):
        if not isinstance(other, ParseError):
            return NotImplemented
        return (self.message, self.start, self.end, self.suggestion) == \
            (other.message, other.start, other.end, other.suggestion)

    __hash__ = Exception.__hash__

    def __repr__(self):
        suggestion = f", {self.suggestion.name}" if self.suggestion else ''
        return f"ParseError({self.message!r}, {self.start}..{self.end}{suggestion})"


class ParseErrorCollection:
    """Ordered, append-only sequence of ParseError."""

    __slots__ = ('_errors',)

    def __init__(self, errors=None):
        self._errors = list(errors or [])

    def push(self, error):
        self._errors.append(error)

    def __iter__(self):
        return iter(self._errors)

    def __len__(self):
        return len(self._errors)

    def __getitem__(self, index):
        return self._errors[index]

    def __bool__(self):
        return bool(self._errors)

    def is_empty(self):
        return not self._errors

    def format(self, text, filename="<input>"):
        return '\n'.join(error.format(text, filename) for error in self._errors)

    def __repr__(self):
        return f"ParseErrorCollection({self._errors!r})"


class HeaderSyntaxError(Exception):
    """Raised by ``parse`` when a header contains one or more errors."""

    def __init__(self, errors, text='', filename="<input>"):
        self.errors = errors
        self.text = text
        self.filename = filename
        super().__init__(
            f"{len(errors)} error(s) in {filename}\n{errors.format(text, filename)}")


class ParserBase:
    """Token cursor over a lazily tokenized header source."""

    def __init__(self, text, filename="<input>"):
        self.text = text
        self.filename = filename
        self.lexer = Lexer(text)
        self._token = self.lexer.token_at(0)
        self.last_end = 0

    # ------------------------------------------------------------------
    # Token stream helpers
    # ------------------------------------------------------------------
    def current_token(self):
        return self._token

    def next_token(self):
        tok = self._token
        if tok.type != TT.EOF:
            self._token = self.lexer.token_at(tok.end)
        self.last_end = tok.end
        return tok

    def at(self, tt):
        return self._token.type == tt

    def eat(self, tt):
        if self._token.type == tt:
            return self.next_token()
        c = self._token
        raise self.error(f"Expected {tt.label}", c.start, c.end)

    def eat_or_suggest(self, tt, suggestion):
        if self._token.type == tt:
            return self.next_token()
        c = self._token
        raise self.error(f"Expected {suggestion.label}", c.start, c.end, suggestion)

    def skip(self, tt):
        while self._token.type == tt and tt != TT.EOF:
            self.next_token()

    def skip_while(self, predicate):
        while self._token.type != TT.EOF and predicate(self._token.type):
            self.next_token()

    # ------------------------------------------------------------------
    # Source text
    # ------------------------------------------------------------------
    def read_token(self, token):
        return self.text[token.start:token.end]

    def read(self, start, end):
        return self.text[start:end]

    def error(self, message, start, end, suggestion=None):
        return ParseError(message, start, end, suggestion)
