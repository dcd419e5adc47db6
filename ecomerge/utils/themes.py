"""Eco theme: what each tile value stands for."""

TILE_EMOJIS = {
    2: "\U0001F33F",
    4: "\U0001FAB4",
    8: "\U0001F4A1",
    16: "\U0001F6B2",
    32: "\U0001F31E",
    64: "\U0001F32C️",
    128: "\U0001F30A",
    256: "\U0001F3D9️",
    512: "\U0001F30D",
    1024: "\U0001F6F8",
}

TILE_NAMES = {
    2: "Compost Bin",
    4: "Urban Garden",
    8: "LED Lightbulb",
    16: "Bike Share Program",
    32: "Rooftop Solar",
    64: "Wind Turbine",
    128: "Tidal Energy",
    256: "Green Smart City",
    512: "Planet in Balance",
    1024: "Utopian Eco Future",
}

# ##: Background colour per tile value, 0 is an empty cell.
COLORS = {
    0: "#CDC1B4",
    2: "#EEE4DA",
    4: "#EDE0C8",
    8: "#F2B179",
    16: "#F59563",
    32: "#F67C5F",
    64: "#F65E3B",
    128: "#EDCF72",
    256: "#EDCC61",
    512: "#EDC850",
    1024: "#EDC53F",
}
BEYOND_COLOR = "#EDC22E"


def tile_label(value: int) -> str:
    """Short name of a tile; values past the theme get a generic label."""
    return TILE_NAMES.get(value, f"Eco Tile {value}")


def tile_badge(value: int) -> str:
    """Emoji followed by the value, the bare value past the theme."""
    return f"{TILE_EMOJIS.get(value, '')}{value}"


def tile_color(value: int) -> str:
    return COLORS.get(value, BEYOND_COLOR)


def text_color(value: int) -> str:
    """Dark text on the two lightest tiles, light text elsewhere."""
    return "#776E65" if value <= 4 else "#F9F6F2"
