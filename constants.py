from enum import Enum

class Climate(str, Enum):
    COOL = "Cool"
    MODERATE = "Moderate"
    WARM = "Warm"

class Acidity(str, Enum):
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"

class Tannins(str, Enum):
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"

class Sweetness(str, Enum):
    DRY = "Dry"
    OFF_DRY = "Off-dry"
    MEDIUM = "Medium"
    SWEET = "Sweet"

class Body(str, Enum):
    LIGHT = "Light"
    MEDIUM = "Medium"
    FULL = "Full"

# Field name -> vocabulary
VOCABULARIES = {
    "climate": Climate,
    "acidity": Acidity,
    "tannins": Tannins,
    "sweetness": Sweetness,
    "body": Body,
}

FALLBACK_COLOR = "gray"

# Keyed by label string: Enum members hash by name, not value
BADGE_COLORS = {
    "climate": {Climate.COOL.value: "blue", Climate.MODERATE.value: "orange", Climate.WARM.value: "red"},
    "acidity": {Acidity.LOW.value: "lime", Acidity.MEDIUM.value: "orange", Acidity.HIGH.value: "red"},
    "tannins": {Tannins.LOW.value: "lime", Tannins.MEDIUM.value: "orange", Tannins.HIGH.value: "red"},
    "sweetness": {
        Sweetness.DRY.value: "blue", Sweetness.OFF_DRY.value: "lime",
        Sweetness.MEDIUM.value: "orange", Sweetness.SWEET.value: "red",
    },
    "body": {Body.LIGHT.value: "blue", Body.MEDIUM.value: "teal", Body.FULL.value: "red"},
}

# Badge palette (name -> (background, text))
COLOR_HEX = {
    "blue": ("#d0ebff", "#1864ab"),
    "orange": ("#ffe8cc", "#d9480f"),
    "red": ("#ffe3e3", "#c92a2a"),
    "lime": ("#e9fac8", "#5c940d"),
    "teal": ("#c3fae8", "#087f5b"),
    "gray": ("#f1f3f5", "#495057"),
}
