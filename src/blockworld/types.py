"""Core types for terrain generation."""

from pydantic import BaseModel


class Coordinate(BaseModel, frozen=True):
    """Immutable integer grid address of a terrain cell."""

    x: int
    y: int

    def __hash__(self) -> int:
        return hash((self.x, self.y))

    def __str__(self) -> str:
        return f"{self.x},{self.y}"

    def __repr__(self) -> str:
        return f"Coordinate(x={self.x}, y={self.y})"


class WorldPosition(BaseModel, frozen=True):
    """Position of a placed object in scene space.

    The vertical axis is ``y``; grid rows map onto ``z``.
    """

    x: float
    y: float
    z: float
