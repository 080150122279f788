"""Static game data: numbered domain enums and read-only lookup tables.

Nothing in here is consulted while parsing a header apart from the enums,
which give meaning to the numbers the item grammar reads.  The tables are
for whoever compiles the parsed document into seed instructions.
"""

from enum import IntEnum

from .ast_nodes import UberIdentifier


# ---- Numbered enums used by the item grammar ----

class ItemKind(IntEnum):
    SPIRIT_LIGHT = 0
    RESOURCE = 1
    SKILL = 2
    SHARD = 3
    COMMAND = 4
    TELEPORTER = 5
    MESSAGE = 6
    UBER_STATE = 8
    WATER = 9
    BONUS_ITEM = 10
    BONUS_UPGRADE = 11
    RELIC = 12
    SYS_MESSAGE = 13


class Resource(IntEnum):
    HEALTH = 0
    ENERGY = 1
    ORE = 2
    KEYSTONE = 3
    SHARD_SLOT = 4


class Skill(IntEnum):
    BASH = 0
    DOUBLE_JUMP = 5
    LAUNCH = 8
    GLIDE = 14
    WATER_BREATH = 23
    GRENADE = 51
    GRAPPLE = 57
    FLASH = 62
    SPEAR = 74
    REGENERATE = 77
    BOW = 97
    HAMMER = 98
    SWORD = 100
    BURROW = 101
    DASH = 102
    WATER_DASH = 104
    SHURIKEN = 106
    SEIR = 108
    BLAZE = 115
    SENTRY = 116
    FLAP = 118
    ANCESTRAL_LIGHT_1 = 120
    ANCESTRAL_LIGHT_2 = 121


class Shard(IntEnum):
    OVERCHARGE = 1
    TRIPLE_JUMP = 2
    WINGCLIP = 3
    BOUNTY = 4
    SWAP = 5
    MAGNET = 8
    SPLINTER = 9
    RECKLESS = 13
    QUICKSHOT = 14
    RESILIENCE = 18
    LIGHT_HARVEST = 19
    VITALITY = 22
    LIFE_HARVEST = 23
    ENERGY_HARVEST = 25
    ENERGY = 26
    LIFE_PACT = 27
    LAST_STAND = 28
    SENSE = 30
    ULTRA_BASH = 31
    ULTRA_GRAPPLE = 32
    OVERFLOW = 33
    THORN = 34
    CATALYST = 35
    TURMOIL = 36
    STICKY = 37
    FINESSE = 40
    SPIRIT_SURGE = 41
    LIFEFORCE = 43
    DEFLECTOR = 44
    FRACTURE = 46
    ARCING = 47


class Teleporter(IntEnum):
    BURROWS = 0
    DEN = 1
    EAST_POOLS = 2
    WELLSPRING = 3
    REACH = 4
    HOLLOW = 5
    DEPTHS = 6
    WEST_WOODS = 7
    EAST_WOODS = 8
    WEST_WASTES = 9
    EAST_WASTES = 10
    OUTER_RUINS = 11
    WILLOW = 12
    WEST_POOLS = 13
    INNER_RUINS = 14
    SHRIEK = 15
    MARSH = 16
    GLADES = 17


class BonusItem(IntEnum):
    RELIC = 20
    HEALTH_REGENERATION = 30
    ENERGY_REGENERATION = 31
    EXTRA_DOUBLE_JUMP = 35
    EXTRA_AIR_DASH = 36


class BonusUpgrade(IntEnum):
    RAPID_HAMMER = 0
    RAPID_SWORD = 1
    BLAZE_EFFICIENCY = 2
    SPEAR_EFFICIENCY = 3
    SHURIKEN_EFFICIENCY = 4
    SENTRY_EFFICIENCY = 5
    BOW_EFFICIENCY = 6
    REGENERATION_EFFICIENCY = 7
    FLASH_EFFICIENCY = 8
    GRENADE_EFFICIENCY = 9


class Zone(IntEnum):
    MARSH = 0
    HOLLOW = 1
    GLADES = 2
    WELLSPRING = 3
    POOLS = 4
    BURROWS = 5
    REACH = 6
    WOODS = 7
    DEPTHS = 8
    WASTES = 9
    RUINS = 10
    WILLOW = 11
    VOID = 12


class SysMessageKind(IntEnum):
    RELIC_LIST = 0
    MAP_RELIC_LIST = 1
    PICKUP_COUNT = 2
    GOAL_PROGRESS = 3


class CommandKind(IntEnum):
    AUTOSAVE = 0
    CHECKPOINT = 2
    TOGGLE = 7
    WARP = 8
    START_TIMER = 9
    STOP_TIMER = 10
    SET_HEALTH = 12
    SET_ENERGY = 13
    SET_SPIRIT_LIGHT = 14
    EQUIP = 15


class ToggleCommandKind(IntEnum):
    KWOLOK_DOOR = 0
    RAIN = 1
    HOWL = 2


class EquipSlot(IntEnum):
    ABILITY_1 = 0
    ABILITY_2 = 1
    ABILITY_3 = 2


# ---- Seed generation tables ----

DEFAULT_SPAWN = "MarshSpawn.Main"
MOKI_SPAWNS = (
    "MarshSpawn.Main",
    "HowlsDen.Teleporter",
    "GladesTown.Teleporter",
    "InnerWellspring.Teleporter",
    "MidnightBurrows.Teleporter",
)
GORLEK_SPAWNS = (
    "MarshSpawn.Main",
    "HowlsDen.Teleporter",
    "EastHollow.Teleporter",
    "GladesTown.Teleporter",
    "InnerWellspring.Teleporter",
    "MidnightBurrows.Teleporter",
    "WoodsEntry.Teleporter",
    "WoodsMain.Teleporter",
    "LowerReach.Teleporter",
    "UpperDepths.Teleporter",
    "EastPools.Teleporter",
    "LowerWastes.WestTP",
    "LowerWastes.EastTP",
    "UpperWastes.NorthTP",
    "WillowsEnd.InnerTP",
)
RELIC_ZONES = (
    "Inkwater Marsh",
    "Midnight Burrows",
    "Kwoloks Hollow",
    "Wellspring Glades",
    "The Wellspring",
    "Luma Pools",
    "Silent Woods",
    "Baurs Reach",
    "Mouldwood Depths",
    "Windswept Wastes",
    "Willows End",
)
KEYSTONE_DOORS = {
    "MarshSpawn.KeystoneDoor": 2,
    "HowlsDen.KeystoneDoor": 2,
    "MarshPastOpher.EyestoneDoor": 2,
    "MidnightBurrows.KeystoneDoor": 4,
    "WoodsEntry.KeystoneDoor": 2,
    "WoodsMain.KeystoneDoor": 4,
    "LowerReach.KeystoneDoor": 4,
    "UpperReach.KeystoneDoor": 4,
    "UpperDepths.EntryKeystoneDoor": 2,
    "UpperDepths.CentralKeystoneDoor": 2,
    "UpperPools.KeystoneDoor": 4,
    "UpperWastes.KeystoneDoor": 2,
}

RESERVE_SLOTS = 2           # slots kept free after random placements for the next iteration
RETRIES = 5                 # attempts per seed
RANDOM_PROGRESSION = 0.1    # chance of a progression item as a random placement

# (location, uber state of the shop item, uber state holding its price)
SHOP_PRICES = (
    ("TwillenShop.Overcharge", UberIdentifier(2, 1), UberIdentifier(12, 0)),
    ("TwillenShop.TripleJump", UberIdentifier(2, 2), UberIdentifier(12, 1)),
    ("TwillenShop.Wingclip", UberIdentifier(2, 3), UberIdentifier(12, 2)),
    ("TwillenShop.Swap", UberIdentifier(2, 5), UberIdentifier(12, 3)),
    ("TwillenShop.LightHarvest", UberIdentifier(2, 19), UberIdentifier(12, 4)),
    ("TwillenShop.Vitality", UberIdentifier(2, 22), UberIdentifier(12, 5)),
    ("TwillenShop.Energy", UberIdentifier(2, 26), UberIdentifier(12, 6)),
    ("TwillenShop.Finesse", UberIdentifier(2, 40), UberIdentifier(12, 7)),
    ("OpherShop.WaterBreath", UberIdentifier(1, 23), UberIdentifier(12, 8)),
    ("OpherShop.Spike", UberIdentifier(1, 74), UberIdentifier(12, 9)),
    ("OpherShop.SpiritSmash", UberIdentifier(1, 98), UberIdentifier(12, 10)),
    ("OpherShop.Teleport", UberIdentifier(1, 105), UberIdentifier(12, 11)),
    ("OpherShop.SpiritStar", UberIdentifier(1, 106), UberIdentifier(12, 12)),
    ("OpherShop.Blaze", UberIdentifier(1, 115), UberIdentifier(12, 13)),
    ("OpherShop.Sentry", UberIdentifier(1, 116), UberIdentifier(12, 14)),
    ("LupoShop.HCMapIcon", UberIdentifier(48248, 19396), UberIdentifier(12, 15)),
    ("LupoShop.ECMapIcon", UberIdentifier(48248, 57987), UberIdentifier(12, 16)),
    ("LupoShop.ShardMapIcon", UberIdentifier(48248, 41666), UberIdentifier(12, 17)),
)

_PRICE_BY_LOCATION = {location: price for location, _, price in SHOP_PRICES}
_PRICE_BY_ITEM = {item: price for _, item, price in SHOP_PRICES}


def shop_price_identifier(key):
    """Uber state holding the price of a shop slot.

    *key* is either the location name or the shop item's UberIdentifier.
    Returns None for anything that is not a shop slot.
    """
    if isinstance(key, UberIdentifier):
        return _PRICE_BY_ITEM.get(key)
    return _PRICE_BY_LOCATION.get(key)


def keystone_cost(door):
    return KEYSTONE_DOORS.get(door)
