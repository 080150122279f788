"""header_parser - A hand-written recursive descent parser for seed header files."""

import logging

from .lexer import Lexer, tokenize
from .parser import Parser
from .parser_base import ParseError, ParseErrorCollection, HeaderSyntaxError, Suggestion
from . import ast_nodes as ast

logger = logging.getLogger(__name__)


def parse_with_diagnostics(text, filename="<input>"):
    """Parse header source text and return ``(contents, errors)``.

    ``contents`` is the list of HeaderContent nodes in source order, or None
    when ``errors`` (a ParseErrorCollection) is non-empty.
    """
    parser = Parser(text, filename=filename)
    return parser.parse()


def parse(text, filename="<input>"):
    """Parse header source text and return its list of HeaderContent nodes.

    Raises HeaderSyntaxError carrying every error found.
    """
    contents, errors = parse_with_diagnostics(text, filename=filename)
    if errors:
        raise HeaderSyntaxError(errors, text, filename)
    return contents


def _read(path):
    with open(path, 'r', encoding='utf-8', errors='replace') as f:
        return f.read()


def parse_file(path):
    """Parse a header file and return its list of HeaderContent nodes."""
    logger.debug("Parsing header file %s", path)
    return parse(_read(path), filename=str(path))


def parse_file_with_diagnostics(path):
    """Parse a header file and return ``(contents, errors)``."""
    logger.debug("Parsing header file %s", path)
    return parse_with_diagnostics(_read(path), filename=str(path))
