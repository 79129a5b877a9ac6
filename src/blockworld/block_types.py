"""Elevation bands and the block kinds they produce."""

from enum import Enum


class Band(str, Enum):
    """Discrete elevation class picked from the terrain number."""

    WATER = "water"
    VALLEY = "valley"
    PLAINS = "plains"
    HILLS = "hills"
    MOUNTAINS = "mountains"

    @property
    def stepped(self) -> bool:
        """Whether elevation inside this band is quantized into steps."""
        return self in _STEPPED_BANDS

    @property
    def decorated(self) -> bool:
        """Whether overlays and vegetation may be placed on this band."""
        return self not in _BARE_BANDS


class BlockKind(str, Enum):
    """Terrain material assigned to a cell."""

    MOUNTAIN_HIGH = "mountain_high"
    MOUNTAIN_LOW = "mountain_low"
    HILLS = "hills"
    PLAINS = "plains"
    VALLEY = "valley"
    WATER = "water"

    @property
    def glyph(self) -> str:
        """Single character used by text maps."""
        return _GLYPHS[self]


_STEPPED_BANDS = frozenset({
    Band.PLAINS,
    Band.HILLS,
    Band.MOUNTAINS,
})

_BARE_BANDS = frozenset({
    Band.WATER,
    Band.MOUNTAINS,
})

_GLYPHS: dict[BlockKind, str] = {
    BlockKind.MOUNTAIN_HIGH: "^",
    BlockKind.MOUNTAIN_LOW: "A",
    BlockKind.HILLS: "n",
    BlockKind.PLAINS: ".",
    BlockKind.VALLEY: ",",
    BlockKind.WATER: "~",
}
