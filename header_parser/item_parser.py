"""Item parsing mixin: the ``<kind>|<fields...>`` item grammar."""

from .tokens import TokenType
from . import ast_nodes as ast
from .game_data import (
    BonusItem, BonusUpgrade, CommandKind, EquipSlot, ItemKind, Resource,
    Shard, Skill, SysMessageKind, Teleporter, ToggleCommandKind, Zone,
)
from .keywords import UBER_TYPES, UberType
from .parser_base import Suggestion
from .value_parser import (
    decode_bool, decode_enum, decode_float, decode_integer, decode_numeric_bool,
)

TT = TokenType


class ItemMixin:
    """Mixin providing item parsing for pickups and header commands.

    ``parse_item`` consumes exactly the tokens of one item and leaves the
    cursor on whatever trails it (whitespace, comment, newline).
    """

    _ITEM_DISPATCH = {
        ItemKind.SPIRIT_LIGHT: '_parse_spirit_light',
        ItemKind.RESOURCE: '_parse_resource',
        ItemKind.SKILL: '_parse_skill',
        ItemKind.SHARD: '_parse_shard',
        ItemKind.COMMAND: '_parse_command_item',
        ItemKind.TELEPORTER: '_parse_teleporter',
        ItemKind.MESSAGE: '_parse_message',
        ItemKind.UBER_STATE: '_parse_uber_state_item',
        ItemKind.WATER: '_parse_water',
        ItemKind.BONUS_ITEM: '_parse_bonus_item',
        ItemKind.BONUS_UPGRADE: '_parse_bonus_upgrade',
        ItemKind.RELIC: '_parse_relic',
        ItemKind.SYS_MESSAGE: '_parse_sys_message',
    }

    def parse_item(self):
        start = self.current_token().start
        kind = self.parse_number(Suggestion.ITEM_KIND, decode_enum(ItemKind))
        self.eat_or_suggest(TT.SEPARATOR, Suggestion.ITEM_KIND)
        item = getattr(self, self._ITEM_DISPATCH[kind])()
        item.start = start
        item.end = self.last_end
        return item

    # ------------------------------------------------------------------
    # Simple kinds
    # ------------------------------------------------------------------
    def _parse_spirit_light(self):
        amount, remove = self.parse_v_removable_number(Suggestion.INTEGER)
        return ast.SpiritLight(amount, remove)

    def _parse_resource(self):
        resource = self.parse_v_number(Suggestion.RESOURCE, decode_enum(Resource))
        return ast.ResourceItem(resource)

    def _parse_skill(self):
        skill, remove = self.parse_v_removable_number(Suggestion.SKILL, decode_enum(Skill))
        return ast.SkillItem(skill, remove)

    def _parse_shard(self):
        shard, remove = self.parse_v_removable_number(Suggestion.SHARD, decode_enum(Shard))
        return ast.ShardItem(shard, remove)

    def _parse_teleporter(self):
        teleporter, remove = self.parse_v_removable_number(
            Suggestion.TELEPORTER, decode_enum(Teleporter))
        return ast.TeleporterItem(teleporter, remove)

    def _parse_message(self):
        return ast.Message(self.parse_text())

    def _parse_water(self):
        tok = self.current_token()
        value, remove = self.parse_removable_number(Suggestion.INTEGER)
        if value != 0:
            raise self.error("Invalid water, expected 0", tok.start, tok.end, Suggestion.INTEGER)
        return ast.Water(remove)

    def _parse_bonus_item(self):
        bonus, remove = self.parse_v_removable_number(Suggestion.BONUS_ITEM, decode_enum(BonusItem))
        return ast.Bonus(bonus, remove)

    def _parse_bonus_upgrade(self):
        upgrade, remove = self.parse_v_removable_number(
            Suggestion.BONUS_UPGRADE, decode_enum(BonusUpgrade))
        return ast.Upgrade(upgrade, remove)

    def _parse_relic(self):
        return ast.Relic(self.parse_v_number(Suggestion.ZONE, decode_enum(Zone)))

    def _parse_sys_message(self):
        kind = self.parse_number(Suggestion.SYS_MESSAGE_KIND, decode_enum(SysMessageKind))
        return ast.SysMessage(kind)

    # ------------------------------------------------------------------
    # Uber states: group|id|type|value
    # ------------------------------------------------------------------
    def _parse_uber_state_item(self):
        identifier = self.parse_uber_identifier()
        self.eat_or_suggest(TT.SEPARATOR, Suggestion.UBER_ID)
        uber_type = self.parse_keyword(UBER_TYPES, Suggestion.UBER_TYPE)
        self.eat_or_suggest(TT.SEPARATOR, Suggestion.UBER_TYPE)
        if uber_type in (UberType.BOOL, UberType.TELEPORTER):
            value = self.parse_v_ident(Suggestion.BOOLEAN, decode_bool)
        elif uber_type == UberType.FLOAT:
            value = self.parse_v_number(Suggestion.FLOAT, decode_float)
        else:
            value = self.parse_v_number(Suggestion.INTEGER, decode_integer)
        return ast.UberStateItem(identifier, uber_type, value)

    # ------------------------------------------------------------------
    # Commands: 4|<command kind>|...
    # ------------------------------------------------------------------
    def _parse_command_item(self):
        kind = self.parse_number(Suggestion.COMMAND_KIND, decode_enum(CommandKind))
        if kind == CommandKind.AUTOSAVE:
            return ast.Autosave()
        if kind == CommandKind.CHECKPOINT:
            return ast.Checkpoint()

        self.eat_or_suggest(TT.SEPARATOR, Suggestion.COMMAND_KIND)
        if kind == CommandKind.TOGGLE:
            target = self.parse_number(Suggestion.TOGGLE_COMMAND_KIND, decode_enum(ToggleCommandKind))
            self.eat_or_suggest(TT.SEPARATOR, Suggestion.TOGGLE_COMMAND_KIND)
            on = self.parse_v_number(Suggestion.NUMERIC_BOOLEAN, decode_numeric_bool)
            return ast.Toggle(target, on)
        if kind == CommandKind.WARP:
            x = self.parse_v_number(Suggestion.FLOAT, decode_float)
            self.eat_or_suggest(TT.SEPARATOR, Suggestion.FLOAT)
            y = self.parse_v_number(Suggestion.FLOAT, decode_float)
            return ast.Warp(x, y)
        if kind == CommandKind.START_TIMER:
            return ast.StartTimer(self.parse_uber_identifier())
        if kind == CommandKind.STOP_TIMER:
            return ast.StopTimer(self.parse_uber_identifier())
        if kind == CommandKind.SET_HEALTH:
            return ast.SetHealth(self.parse_v_number(Suggestion.INTEGER))
        if kind == CommandKind.SET_ENERGY:
            return ast.SetEnergy(self.parse_v_number(Suggestion.INTEGER))
        if kind == CommandKind.SET_SPIRIT_LIGHT:
            return ast.SetSpiritLight(self.parse_v_number(Suggestion.INTEGER))
        # CommandKind.EQUIP
        slot = self.parse_number(Suggestion.EQUIP_SLOT, decode_enum(EquipSlot))
        self.eat_or_suggest(TT.SEPARATOR, Suggestion.EQUIP_SLOT)
        ability = self.parse_v_number(Suggestion.SPELL, decode_enum(Skill))
        return ast.Equip(slot, ability)
