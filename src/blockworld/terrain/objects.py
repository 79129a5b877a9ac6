"""Object placement: blocks, walkable overlays and vegetation."""

from collections import Counter
from dataclasses import dataclass
from enum import Enum
from typing import Protocol

from ..block_types import BlockKind
from ..types import Coordinate, WorldPosition
from .config import PlacementConfig


class ObjectKind(str, Enum):
    """Types of objects handed to a placement sink."""

    BLOCK = "block"
    OVERLAY = "overlay"
    VEGETATION = "vegetation"


@dataclass(frozen=True)
class PlacedObject:
    """A placement request for one scene object."""

    kind: ObjectKind
    coordinate: Coordinate
    position: WorldPosition
    block_kind: BlockKind | None = None
    variant: int = 0


class PlacementSink(Protocol):
    """Receives placement requests and instantiates the objects."""

    def place(self, obj: PlacedObject) -> None: ...


class ObjectCollector:
    """PlacementSink that keeps every request in memory."""

    def __init__(self) -> None:
        self.objects: list[PlacedObject] = []

    def place(self, obj: PlacedObject) -> None:
        self.objects.append(obj)

    def of_kind(self, kind: ObjectKind) -> list[PlacedObject]:
        """Return placed objects of one kind, in placement order."""
        return [obj for obj in self.objects if obj.kind == kind]

    def counts(self) -> Counter[ObjectKind]:
        """Count placed objects per kind."""
        return Counter(obj.kind for obj in self.objects)

    def __len__(self) -> int:
        return len(self.objects)


def world_position(
    coordinate: Coordinate,
    elevation: float,
    config: PlacementConfig,
    jitter: tuple[float, float] = (0.0, 0.0),
) -> WorldPosition:
    """Convert a grid cell and elevation to a scene position.

    Args:
        coordinate: Grid cell.
        elevation: Height of the object in elevation units.
        config: Scale and base height.
        jitter: Horizontal (x, z) offset in scene units.

    Returns:
        WorldPosition with grid x on x, elevation on y and grid y on z.
    """
    jitter_x, jitter_z = jitter
    return WorldPosition(
        x=coordinate.x * config.block_scale + jitter_x,
        y=elevation * config.block_scale + config.base_height,
        z=coordinate.y * config.block_scale + jitter_z,
    )
