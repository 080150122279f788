"""Header command parsing mixin: everything after a ``!!``."""

from .tokens import TokenType
from . import ast_nodes as ast
from .keywords import HEADER_COMMANDS, PARAMETER_TYPES, HeaderCommandKind, ParameterType
from .parser_base import Suggestion
from .value_parser import decode_bool, decode_float, decode_integer, decode_string

TT = TokenType


class CommandMixin:
    """Mixin providing ``!!<command> <arguments>`` parsing."""

    _COMMAND_DISPATCH = {
        HeaderCommandKind.INCLUDE: '_parse_include',
        HeaderCommandKind.EXCLUDE: '_parse_exclude',
        HeaderCommandKind.ADD: '_parse_add',
        HeaderCommandKind.REMOVE: '_parse_remove',
        HeaderCommandKind.NAME: '_parse_name',
        HeaderCommandKind.DISPLAY: '_parse_display',
        HeaderCommandKind.DESCRIPTION: '_parse_description',
        HeaderCommandKind.PRICE: '_parse_price',
        HeaderCommandKind.ICON: '_parse_icon_command',
        HeaderCommandKind.PARAMETER: '_parse_parameter',
        HeaderCommandKind.SET: '_parse_set',
        HeaderCommandKind.IF: '_parse_if',
    }

    def parse_header_command(self):
        kind = self.parse_keyword(HEADER_COMMANDS, Suggestion.HEADER_COMMAND)
        if kind == HeaderCommandKind.ENDIF:
            return ast.EndIf()
        self.eat(TT.WHITESPACE)
        return getattr(self, self._COMMAND_DISPATCH[kind])()

    # ------------------------------------------------------------------
    # Header composition
    # ------------------------------------------------------------------
    def _parse_include(self):
        return ast.Include(self.parse_identifier())

    def _parse_exclude(self):
        return ast.Exclude(self.parse_identifier())

    # ------------------------------------------------------------------
    # Item pool and item presentation
    # ------------------------------------------------------------------
    def _parse_add(self):
        return ast.Add(self.parse_item())

    def _parse_remove(self):
        return ast.Remove(self.parse_item())

    def _parse_item_then(self):
        item = self.parse_item()
        self.eat(TT.WHITESPACE)
        return item

    def _parse_name(self):
        item = self._parse_item_then()
        return ast.Name(item, self.parse_text())

    def _parse_display(self):
        item = self._parse_item_then()
        return ast.Display(item, self.parse_text())

    def _parse_description(self):
        item = self._parse_item_then()
        return ast.Description(item, self.parse_text())

    def _parse_price(self):
        item = self._parse_item_then()
        return ast.Price(item, self.parse_v_number(Suggestion.INTEGER))

    def _parse_icon_command(self):
        item = self._parse_item_then()
        return ast.IconCommand(item, self.parse_icon())

    # ------------------------------------------------------------------
    # Parameters: parameter <name> <type>:<default>
    # ------------------------------------------------------------------
    def _parse_parameter(self):
        identifier = self.parse_identifier()
        self.eat(TT.WHITESPACE)
        parameter_type = self.parse_keyword(PARAMETER_TYPES, Suggestion.PARAMETER_TYPE)
        self.eat_or_suggest(TT.COLON, Suggestion.PARAMETER_TYPE)
        if parameter_type == ParameterType.BOOL:
            tok = self.eat_or_suggest(TT.IDENTIFIER, Suggestion.BOOLEAN)
            default = self._decode(tok, self.read_token(tok), decode_bool, Suggestion.BOOLEAN)
        elif parameter_type == ParameterType.INT:
            default = self.parse_number(Suggestion.INTEGER, decode_integer)
        elif parameter_type == ParameterType.FLOAT:
            default = self.parse_number(Suggestion.FLOAT, decode_float)
        else:
            default = self.parse_text(Suggestion.STRING)
        return ast.DefineParameter(identifier, parameter_type, default)

    # ------------------------------------------------------------------
    # Logic states and conditionals
    # ------------------------------------------------------------------
    def _parse_set(self):
        return ast.SetLogicState(self.parse_uber_identifier())

    def _parse_if(self):
        identifier = self.parse_uber_identifier()
        self.eat_or_suggest(TT.SEPARATOR, Suggestion.UBER_ID)
        value = self.parse_v_number(Suggestion.UBER_CONDITION_VALUE, decode_string)
        return ast.If(ast.VUberState(identifier, value))
