"""Lexer for header source files. Converts raw text into a lazy token stream."""

from .tokens import TokenType, Token, CommentKind, PUNCTUATION

TT = TokenType


class Lexer:
    """Tokenizer for header source text.

    ``token_at(offset)`` is a pure function of the text and the offset, so
    any number of cursors can share one lexer.  It never fails: characters
    it cannot classify become one-character ``UNKNOWN`` tokens and the end
    of input is a zero-width ``EOF`` token, returned again on every request.
    """

    def __init__(self, text: str):
        self.text = text
        self.length = len(text)

    # ------------------------------------------------------------------
    # Public
    # ------------------------------------------------------------------
    def tokens(self):
        """Yield every token in order, ending with a single EOF."""
        pos = 0
        while True:
            token = self.token_at(pos)
            yield token
            if token.type == TT.EOF:
                return
            pos = token.end

    def token_at(self, pos: int) -> Token:
        if pos >= self.length:
            return Token(TT.EOF, self.length, self.length)

        ch = self.text[pos]

        if ch == '\n':
            return Token(TT.NEWLINE, pos, pos + 1)
        if ch == '\r':
            end = pos + 2 if self._ch(pos + 1) == '\n' else pos + 1
            return Token(TT.NEWLINE, pos, end)

        if ch in (' ', '\t'):
            return Token(TT.WHITESPACE, pos, self._scan_while(pos, _is_blank))

        if ch == '/' and self._ch(pos + 1) == '/':
            return self._scan_comment(pos)

        if ch == '"':
            return self._scan_string(pos)

        if ch.isdigit():
            return Token(TT.NUMBER, pos, self._scan_number(pos))

        if ch == '-':
            if self._ch(pos + 1).isdigit():
                return Token(TT.NUMBER, pos, self._scan_number(pos + 1))
            return Token(TT.MINUS, pos, pos + 1)

        if ch.isalpha() or ch == '_':
            return Token(TT.IDENTIFIER, pos, self._scan_while(pos, _is_ident_char))

        return Token(PUNCTUATION.get(ch, TT.UNKNOWN), pos, pos + 1)

    # ------------------------------------------------------------------
    # Core scanning helpers
    # ------------------------------------------------------------------
    def _ch(self, pos):
        if pos < self.length:
            return self.text[pos]
        return '\0'

    def _scan_while(self, pos, predicate):
        while pos < self.length and predicate(self.text[pos]):
            pos += 1
        return pos

    def _scan_line(self, pos):
        while pos < self.length and self.text[pos] not in ('\n', '\r'):
            pos += 1
        return pos

    # ------------------------------------------------------------------
    # Comments
    # ------------------------------------------------------------------
    def _scan_comment(self, start):
        slashes = self._scan_while(start, lambda c: c == '/') - start
        if slashes >= 4:
            kind = CommentKind.CONFIG_DOC
        elif slashes == 3:
            kind = CommentKind.HEADER_DOC
        else:
            kind = CommentKind.NOTE
        return Token(TT.COMMENT, start, self._scan_line(start), comment_kind=kind)

    # ------------------------------------------------------------------
    # String literals
    # ------------------------------------------------------------------
    def _scan_string(self, start):
        pos = start + 1  # opening quote
        while pos < self.length:
            ch = self.text[pos]
            if ch == '"':
                return Token(TT.STRING, start, pos + 1)
            if ch in ('\n', '\r'):
                break
            pos += 1
        # Unterminated string at newline or end of input
        return Token(TT.STRING, start, pos, terminated=False)

    # ------------------------------------------------------------------
    # Number literals
    # ------------------------------------------------------------------
    def _scan_number(self, pos):
        pos = self._scan_while(pos, _is_digit)
        if self._ch(pos) == '.' and self._ch(pos + 1).isdigit():
            pos = self._scan_while(pos + 1, _is_digit)
        return pos


def _is_blank(ch):
    return ch in (' ', '\t')


def _is_digit(ch):
    return ch.isdigit()


def _is_ident_char(ch):
    return ch.isalnum() or ch == '_'


def tokenize(text):
    """Return the full token list for *text*, including the final EOF."""
    return list(Lexer(text).tokens())
