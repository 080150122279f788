"""Node classes for a parsed header document."""


class AstNode:
    """Base class for all nodes.

    ``start``/``end`` locate the node in the source.  Equality is
    structural over every other slot, so two nodes parsed from different
    places compare equal when they mean the same thing.
    """
    __slots__ = ('start', 'end')

    def __init__(self, start=0, end=0):
        self.start = start
        self.end = end

    def _fields(self):
        fields = []
        for cls in reversed(type(self).__mro__):
            for slot in cls.__dict__.get('__slots__', ()):
                if slot not in ('start', 'end'):
                    fields.append(slot)
        return fields

    def _values(self):
        return tuple(getattr(self, f, None) for f in self._fields())

    def __eq__(self, other):
        if type(self) is not type(other):
            return NotImplemented
        return self._values() == other._values()

    def __hash__(self):
        return hash((type(self).__name__,) + self._values())

    def __repr__(self):
        args = ', '.join(f"{f}={getattr(self, f, None)!r}" for f in self._fields())
        return f"{type(self).__name__}({args})"


# ---- Values ----

class UberIdentifier(AstNode):
    __slots__ = ('group', 'id')

    def __init__(self, group=0, id=0, **kw):
        super().__init__(**kw)
        self.group = group
        self.id = id

    def __str__(self):
        return f"{self.group}|{self.id}"


class V(AstNode):
    """A value that is either a literal or a late-bound parameter."""
    __slots__ = ()

    is_parameter = False


class Literal(V):
    __slots__ = ('value',)

    def __init__(self, value=None, **kw):
        super().__init__(**kw)
        self.value = value


class Parameter(V):
    __slots__ = ('name',)

    is_parameter = True

    def __init__(self, name='', **kw):
        super().__init__(**kw)
        self.name = name


# An uber state without a comparison value fires on any change.  Only this
# exact literal means "no condition"; see VUberState.has_condition.
NO_TRIGGER_VALUE = Literal('')


class VUberState(AstNode):
    __slots__ = ('identifier', 'value')

    def __init__(self, identifier=None, value=NO_TRIGGER_VALUE, **kw):
        super().__init__(**kw)
        self.identifier = identifier
        self.value = value

    @property
    def has_condition(self):
        return self.value != NO_TRIGGER_VALUE


class Icon(AstNode):
    __slots__ = ('kind', 'value')

    def __init__(self, kind=None, value=None, **kw):
        super().__init__(**kw)
        self.kind = kind
        self.value = value


# ---- Header content ----

class HeaderContent(AstNode):
    __slots__ = ()


class OuterDocumentation(HeaderContent):
    __slots__ = ('text',)

    def __init__(self, text='', **kw):
        super().__init__(**kw)
        self.text = text


class InnerDocumentation(HeaderContent):
    __slots__ = ('text',)

    def __init__(self, text='', **kw):
        super().__init__(**kw)
        self.text = text


class Annotation(HeaderContent):
    __slots__ = ('name',)

    def __init__(self, name='', **kw):
        super().__init__(**kw)
        self.name = name


class Setup(HeaderContent):
    __slots__ = ()


class SetupTimer(Setup):
    __slots__ = ('switch', 'counter')

    def __init__(self, switch=None, counter=None, **kw):
        super().__init__(**kw)
        self.switch = switch
        self.counter = counter


class VPickup(HeaderContent):
    __slots__ = ('trigger', 'item', 'ignore', 'skip_validation')

    def __init__(self, trigger=None, item=None, ignore=False,
                 skip_validation=False, **kw):
        super().__init__(**kw)
        self.trigger = trigger
        self.item = item
        self.ignore = ignore
        self.skip_validation = skip_validation


# ---- Items ----

class Item(AstNode):
    __slots__ = ()


class SpiritLight(Item):
    __slots__ = ('amount', 'remove')

    def __init__(self, amount=None, remove=False, **kw):
        super().__init__(**kw)
        self.amount = amount
        self.remove = remove


class ResourceItem(Item):
    __slots__ = ('resource',)

    def __init__(self, resource=None, **kw):
        super().__init__(**kw)
        self.resource = resource


class SkillItem(Item):
    __slots__ = ('skill', 'remove')

    def __init__(self, skill=None, remove=False, **kw):
        super().__init__(**kw)
        self.skill = skill
        self.remove = remove


class ShardItem(Item):
    __slots__ = ('shard', 'remove')

    def __init__(self, shard=None, remove=False, **kw):
        super().__init__(**kw)
        self.shard = shard
        self.remove = remove


class TeleporterItem(Item):
    __slots__ = ('teleporter', 'remove')

    def __init__(self, teleporter=None, remove=False, **kw):
        super().__init__(**kw)
        self.teleporter = teleporter
        self.remove = remove


class Message(Item):
    __slots__ = ('text',)

    def __init__(self, text='', **kw):
        super().__init__(**kw)
        self.text = text


class UberStateItem(Item):
    __slots__ = ('identifier', 'uber_type', 'value')

    def __init__(self, identifier=None, uber_type=None, value=None, **kw):
        super().__init__(**kw)
        self.identifier = identifier
        self.uber_type = uber_type
        self.value = value


class Water(Item):
    __slots__ = ('remove',)

    def __init__(self, remove=False, **kw):
        super().__init__(**kw)
        self.remove = remove


class Bonus(Item):
    __slots__ = ('bonus_item', 'remove')

    def __init__(self, bonus_item=None, remove=False, **kw):
        super().__init__(**kw)
        self.bonus_item = bonus_item
        self.remove = remove


class Upgrade(Item):
    __slots__ = ('bonus_upgrade', 'remove')

    def __init__(self, bonus_upgrade=None, remove=False, **kw):
        super().__init__(**kw)
        self.bonus_upgrade = bonus_upgrade
        self.remove = remove


class Relic(Item):
    __slots__ = ('zone',)

    def __init__(self, zone=None, **kw):
        super().__init__(**kw)
        self.zone = zone


class SysMessage(Item):
    __slots__ = ('kind',)

    def __init__(self, kind=None, **kw):
        super().__init__(**kw)
        self.kind = kind


# ---- Command items (item kind 4) ----

class CommandItem(Item):
    __slots__ = ()


class Autosave(CommandItem):
    __slots__ = ()


class Checkpoint(CommandItem):
    __slots__ = ()


class Toggle(CommandItem):
    __slots__ = ('target', 'on')

    def __init__(self, target=None, on=None, **kw):
        super().__init__(**kw)
        self.target = target
        self.on = on


class Warp(CommandItem):
    __slots__ = ('x', 'y')

    def __init__(self, x=None, y=None, **kw):
        super().__init__(**kw)
        self.x = x
        self.y = y


class StartTimer(CommandItem):
    __slots__ = ('identifier',)

    def __init__(self, identifier=None, **kw):
        super().__init__(**kw)
        self.identifier = identifier


class StopTimer(CommandItem):
    __slots__ = ('identifier',)

    def __init__(self, identifier=None, **kw):
        super().__init__(**kw)
        self.identifier = identifier


class SetHealth(CommandItem):
    __slots__ = ('amount',)

    def __init__(self, amount=None, **kw):
        super().__init__(**kw)
        self.amount = amount


class SetEnergy(CommandItem):
    __slots__ = ('amount',)

    def __init__(self, amount=None, **kw):
        super().__init__(**kw)
        self.amount = amount


class SetSpiritLight(CommandItem):
    __slots__ = ('amount',)

    def __init__(self, amount=None, **kw):
        super().__init__(**kw)
        self.amount = amount


class Equip(CommandItem):
    __slots__ = ('slot', 'ability')

    def __init__(self, slot=None, ability=None, **kw):
        super().__init__(**kw)
        self.slot = slot
        self.ability = ability


# ---- Header commands (!!) ----

class HeaderCommand(HeaderContent):
    __slots__ = ()


class Include(HeaderCommand):
    __slots__ = ('name',)

    def __init__(self, name='', **kw):
        super().__init__(**kw)
        self.name = name


class Exclude(HeaderCommand):
    __slots__ = ('name',)

    def __init__(self, name='', **kw):
        super().__init__(**kw)
        self.name = name


class Add(HeaderCommand):
    __slots__ = ('item',)

    def __init__(self, item=None, **kw):
        super().__init__(**kw)
        self.item = item


class Remove(HeaderCommand):
    __slots__ = ('item',)

    def __init__(self, item=None, **kw):
        super().__init__(**kw)
        self.item = item


class Name(HeaderCommand):
    __slots__ = ('item', 'name')

    def __init__(self, item=None, name='', **kw):
        super().__init__(**kw)
        self.item = item
        self.name = name


class Display(HeaderCommand):
    __slots__ = ('item', 'name')

    def __init__(self, item=None, name='', **kw):
        super().__init__(**kw)
        self.item = item
        self.name = name


class Description(HeaderCommand):
    __slots__ = ('item', 'description')

    def __init__(self, item=None, description='', **kw):
        super().__init__(**kw)
        self.item = item
        self.description = description


class Price(HeaderCommand):
    __slots__ = ('item', 'price')

    def __init__(self, item=None, price=None, **kw):
        super().__init__(**kw)
        self.item = item
        self.price = price


class IconCommand(HeaderCommand):
    __slots__ = ('item', 'icon')

    def __init__(self, item=None, icon=None, **kw):
        super().__init__(**kw)
        self.item = item
        self.icon = icon


class DefineParameter(HeaderCommand):
    __slots__ = ('identifier', 'parameter_type', 'default')

    def __init__(self, identifier='', parameter_type=None, default=None, **kw):
        super().__init__(**kw)
        self.identifier = identifier
        self.parameter_type = parameter_type
        self.default = default


class SetLogicState(HeaderCommand):
    __slots__ = ('identifier',)

    def __init__(self, identifier=None, **kw):
        super().__init__(**kw)
        self.identifier = identifier


class If(HeaderCommand):
    __slots__ = ('comparison',)

    def __init__(self, comparison=None, **kw):
        super().__init__(**kw)
        self.comparison = comparison


class EndIf(HeaderCommand):
    __slots__ = ()
