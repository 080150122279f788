"""Token types and Token class for the header lexer."""

from enum import Enum, auto


class TokenType(Enum):
    # Literals
    IDENTIFIER = auto()
    NUMBER = auto()
    STRING = auto()

    # Trivia
    WHITESPACE = auto()
    NEWLINE = auto()
    COMMENT = auto()

    # Punctuation
    SEPARATOR = auto()     # |
    EQ = auto()            # =
    COLON = auto()         # :
    POUND = auto()         # #
    BANG = auto()          # !
    DOLLAR = auto()        # $
    OPEN_PAREN = auto()    # (
    CLOSE_PAREN = auto()   # )
    MINUS = auto()         # -
    DOT = auto()           # .

    # Special
    UNKNOWN = auto()
    EOF = auto()

    @property
    def label(self):
        return _LABELS.get(self, self.name.lower().replace('_', ' '))


_LABELS = {
    TokenType.SEPARATOR: "'|'",
    TokenType.EQ: "'='",
    TokenType.COLON: "':'",
    TokenType.POUND: "'#'",
    TokenType.BANG: "'!'",
    TokenType.DOLLAR: "'$'",
    TokenType.OPEN_PAREN: "'('",
    TokenType.CLOSE_PAREN: "')'",
    TokenType.MINUS: "'-'",
    TokenType.DOT: "'.'",
    TokenType.EOF: 'end of input',
}

# Single reserved characters, mapped one-to-one onto their token type
PUNCTUATION = {
    '|': TokenType.SEPARATOR,
    '=': TokenType.EQ,
    ':': TokenType.COLON,
    '#': TokenType.POUND,
    '!': TokenType.BANG,
    '$': TokenType.DOLLAR,
    '(': TokenType.OPEN_PAREN,
    ')': TokenType.CLOSE_PAREN,
    '.': TokenType.DOT,
}


class CommentKind(Enum):
    NOTE = 2          # //
    HEADER_DOC = 3    # ///
    CONFIG_DOC = 4    # ////

    @property
    def marker_length(self):
        return self.value


class Token:
    __slots__ = ('type', 'start', 'end', 'terminated', 'comment_kind')

    def __init__(self, type: TokenType, start: int, end: int,
                 terminated: bool = True, comment_kind: CommentKind = None):
        self.type = type
        self.start = start
        self.end = end
        self.terminated = terminated
        self.comment_kind = comment_kind

    @property
    def range(self):
        return self.start, self.end

    def __eq__(self, other):
        if not isinstance(other, Token):
            return NotImplemented
        return (self.type, self.start, self.end, self.terminated, self.comment_kind) == \
            (other.type, other.start, other.end, other.terminated, other.comment_kind)

    def __hash__(self):
        return hash((self.type, self.start, self.end))

    def __repr__(self):
        extra = ''
        if self.type == TokenType.STRING and not self.terminated:
            extra = ', unterminated'
        elif self.comment_kind is not None:
            extra = f', {self.comment_kind.name}'
        return f"Token({self.type.name}, {self.start}..{self.end}{extra})"
