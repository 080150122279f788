"""Recursive descent parser for header source files."""

from .parser_base import ParserBase
from .value_parser import ValueMixin
from .item_parser import ItemMixin
from .command_parser import CommandMixin
from .statement_parser import StatementMixin


class Parser(StatementMixin, CommandMixin, ItemMixin, ValueMixin, ParserBase):
    """Header parser: statement driver, sub-grammars and token cursor in one.

    One instance parses one source text; call ``parse()`` once.
    """
