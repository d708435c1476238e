"""Tile display formatting with colors for terminal output."""

from rich.text import Text

from mahjong_rules.core.tile import Tile, TileSuit, HONOR_NAMES


# Color schemes
SUIT_COLORS = {
    TileSuit.CHARACTERS: "red",
    TileSuit.CIRCLES: "blue",
    TileSuit.BAMBOO: "green",
    TileSuit.HONORS: "yellow",
}


def tile_to_display_str(tile: Tile) -> str:
    """Display name: shorthand for numerals, kanji for honors."""
    if tile.is_honor:
        return HONOR_NAMES[tile.rank - 1]
    return tile.name


def tile_to_rich_text(tile: Tile, highlight: bool = False) -> Text:
    """Convert a tile to a Rich Text object with appropriate colors."""
    if tile.is_round:
        style = "bold red on white"
    else:
        style = f"bold {SUIT_COLORS[tile.suit]}"
        if highlight:
            style += " on white"
    return Text(f"[{tile_to_display_str(tile)}]", style=style)


def tiles_to_rich_text(tiles, separator: str = " ") -> Text:
    """Convert a list of tiles to Rich Text."""
    result = Text()
    for i, tile in enumerate(tiles):
        if i > 0:
            result.append(separator)
        result.append_text(tile_to_rich_text(tile))
    return result


def numbered_tiles_text(tiles, draw_tile=None) -> Text:
    """Closed tiles with their 1-based discard selectors, drawn tile as 0."""
    result = Text()
    for i, tile in enumerate(tiles, start=1):
        result.append(f"{i}:", style="dim")
        result.append_text(tile_to_rich_text(tile))
        result.append(" ")
    if draw_tile is not None:
        result.append("  0:", style="dim")
        result.append_text(tile_to_rich_text(draw_tile, highlight=True))
    return result


def format_discard_pool(tiles) -> Text:
    """Format a discard pool, oldest first."""
    if not tiles:
        return Text("-", style="dim")
    return tiles_to_rich_text(tiles)
