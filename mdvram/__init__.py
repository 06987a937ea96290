"""Mega Drive VDP pattern names, tiles, VRAM, plane tables and sprite mapping entries."""

__version__ = "0.2.0"
__all__ = ["mappings", "pattern_name", "pattern_name_table", "tile", "tile_iterator", "vram"]