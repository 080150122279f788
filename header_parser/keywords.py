"""Centralized keyword tables for the header parser.

Every keyword-routed grammar level has one enum and one table mapping the
lower-cased identifier text onto its members.  Matching is
case-insensitive: ``Setup``, ``setup`` and ``SETUP`` are the same keyword.
"""

from enum import Enum


class ExpressionIdentKind(Enum):
    SETUP = 'setup'


class SetupKind(Enum):
    TIMER = 'timer'


class InterpolationCommand(Enum):
    PARAM = 'param'


class IconKind(Enum):
    SHARD = 'shard'
    SPELL = 'spell'
    OPHER = 'opher'
    LUPO = 'lupo'
    GROM = 'grom'
    TULEY = 'tuley'
    FILE = 'file'


class UberType(Enum):
    BOOL = 'bool'
    TELEPORTER = 'teleporter'
    BYTE = 'byte'
    INT = 'int'
    FLOAT = 'float'


class ParameterType(Enum):
    BOOL = 'bool'
    INT = 'int'
    FLOAT = 'float'
    STRING = 'string'


class HeaderCommandKind(Enum):
    INCLUDE = 'include'
    EXCLUDE = 'exclude'
    ADD = 'add'
    REMOVE = 'remove'
    NAME = 'name'
    DISPLAY = 'display'
    DESCRIPTION = 'description'
    PRICE = 'price'
    ICON = 'icon'
    PARAMETER = 'parameter'
    SET = 'set'
    IF = 'if'
    ENDIF = 'endif'


def keyword_table(enum_cls):
    return {member.value: member for member in enum_cls}


EXPRESSION_IDENTS = keyword_table(ExpressionIdentKind)
SETUP_KINDS = keyword_table(SetupKind)
INTERPOLATION_COMMANDS = keyword_table(InterpolationCommand)
ICON_KINDS = keyword_table(IconKind)
UBER_TYPES = keyword_table(UberType)
PARAMETER_TYPES = keyword_table(ParameterType)
HEADER_COMMANDS = keyword_table(HeaderCommandKind)

BOOLEANS = {'true': True, 'false': False}
