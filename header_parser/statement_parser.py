"""Statement parsing mixin: statement dispatch and the error-recovering driver."""

import logging

from .tokens import TokenType, CommentKind
from . import ast_nodes as ast
from .keywords import EXPRESSION_IDENTS, SETUP_KINDS, ExpressionIdentKind, SetupKind
from .parser_base import ParseError, ParseErrorCollection, Suggestion
from .value_parser import decode_string

TT = TokenType

logger = logging.getLogger(__name__)

SKIP_VALIDATE = 'skip-validate'


class ParseContext:
    """State threaded through one run of the statement loop."""

    __slots__ = ('contents', 'errors', 'skip_validation')

    def __init__(self):
        self.contents = []
        self.errors = ParseErrorCollection()
        # Set by a "// skip-validate" note, cleared after every statement
        self.skip_validation = False


class StatementMixin:
    """Mixin providing statement-level parsing for the header parser."""

    # ------------------------------------------------------------------
    # Main entry point
    # ------------------------------------------------------------------
    def parse(self):
        """Parse the whole header.

        Returns ``(contents, errors)``.  Every malformed line contributes one
        error and parsing resumes on the next line; ``contents`` is None
        whenever any error was recorded.
        """
        context = ParseContext()

        while True:
            self._parse_whitespace(context)
            if self.at(TT.EOF):
                break
            try:
                context.contents.append(self._parse_expression(context))
                self.skip_while(lambda tt: tt in (TT.WHITESPACE, TT.COMMENT))
                if self.at(TT.EOF):
                    break
                self.eat(TT.NEWLINE)
            except ParseError as err:
                self._recover(err, context)
            context.skip_validation = False

        if context.errors:
            logger.debug("%s: %d error(s), discarding %d statement(s)",
                         self.filename, len(context.errors), len(context.contents))
            return None, context.errors
        logger.debug("%s: parsed %d statement(s)", self.filename, len(context.contents))
        return context.contents, context.errors

    def _recover(self, err, context):
        """Record *err* and resynchronize on the next line."""
        context.errors.push(err)
        if logger.isEnabledFor(logging.DEBUG):
            line, col = err.location(self.text)
            logger.debug("%s:L%d:%d: %s, skipping to next line",
                         self.filename, line, col, err.message)
        self.skip_while(lambda tt: tt != TT.NEWLINE)
        self.next_token()

    # ------------------------------------------------------------------
    # Whitespace, comments and documentation between statements
    # ------------------------------------------------------------------
    def _parse_whitespace(self, context):
        while True:
            tok = self.current_token()
            if tok.type == TT.COMMENT:
                kind = tok.comment_kind
                comment = self.read_token(tok)[kind.marker_length:].strip()
                if kind == CommentKind.NOTE:
                    if comment == SKIP_VALIDATE:
                        context.skip_validation = True
                elif kind == CommentKind.HEADER_DOC:
                    context.contents.append(
                        ast.OuterDocumentation(comment, start=tok.start, end=tok.end))
                else:
                    context.contents.append(
                        ast.InnerDocumentation(comment, start=tok.start, end=tok.end))
            elif tok.type not in (TT.NEWLINE, TT.WHITESPACE):
                return
            self.next_token()

    # ------------------------------------------------------------------
    # Statement dispatch
    # ------------------------------------------------------------------
    def _parse_expression(self, context):
        t = self.current_token()
        tt = t.type

        if tt == TT.IDENTIFIER:
            kind = self.parse_keyword(EXPRESSION_IDENTS, Suggestion.EXPRESSION)
            if kind == ExpressionIdentKind.SETUP:
                content = self._parse_setup()
        elif tt == TT.BANG:
            self.next_token()
            if self.at(TT.BANG):
                self.next_token()
                content = self.parse_header_command()
            else:
                content = self._parse_pickup(context, ignore=True)
        elif tt in (TT.NUMBER, TT.DOLLAR):
            content = self._parse_pickup(context, ignore=False)
        elif tt == TT.POUND:
            self.next_token()
            content = ast.Annotation(self.parse_identifier(Suggestion.ANNOTATION))
        else:
            raise self.error("Expected expression", t.start, t.end, Suggestion.EXPRESSION)

        content.start = t.start
        content.end = self.last_end
        return content

    # ------------------------------------------------------------------
    # setup <kind>|...
    # ------------------------------------------------------------------
    def _parse_setup(self):
        self.skip(TT.WHITESPACE)
        if self.at(TT.DOT) or self.at(TT.SEPARATOR):
            self.next_token()
            self.skip(TT.WHITESPACE)
        kind = self.parse_keyword(SETUP_KINDS, Suggestion.SETUP_KIND)
        self.eat_or_suggest(TT.SEPARATOR, Suggestion.SETUP_KIND)
        if kind == SetupKind.TIMER:
            return self._parse_timer()

    def _parse_timer(self):
        switch = self.parse_uber_identifier()
        self.eat_or_suggest(TT.SEPARATOR, Suggestion.UBER_ID)
        counter = self.parse_uber_identifier()
        return ast.SetupTimer(switch, counter)

    # ------------------------------------------------------------------
    # Pickups: group|id[=value]|item
    # ------------------------------------------------------------------
    def _parse_pickup(self, context, ignore):
        identifier = self.parse_uber_identifier()
        if self.at(TT.EQ):
            self.next_token()
            value = self.parse_v_number(Suggestion.UBER_TRIGGER_VALUE, decode_string)
            suggestion = Suggestion.UBER_TRIGGER_VALUE
        else:
            value = ast.NO_TRIGGER_VALUE
            suggestion = Suggestion.UBER_ID
        trigger = ast.VUberState(identifier, value,
                                 start=identifier.start, end=self.last_end)

        self.eat_or_suggest(TT.SEPARATOR, suggestion)

        item = self.parse_item()
        return ast.VPickup(trigger, item, ignore, context.skip_validation)
