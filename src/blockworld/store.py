"""Coordinate-indexed store of generated terrain blocks."""

import threading
from types import MappingProxyType
from typing import Mapping

import numpy as np
from numpy.typing import NDArray
from pydantic import BaseModel

from .block_types import BlockKind
from .exceptions import DuplicateCoordinateError
from .types import Coordinate

# Returned for coordinates that were never generated. Valid elevations are >= 0.
UNKNOWN_ALTITUDE = -1.0


class BlockRecord(BaseModel, frozen=True):
    """Immutable generation result for one coordinate."""

    block_kind: BlockKind
    elevation: float
    wooded: bool = False

    def __str__(self) -> str:
        return f"{self.block_kind.value},{self.elevation:g},{1 if self.wooded else 0}"


class TerrainStore:
    """Write-once map of coordinates to generated blocks.

    A store is owned by whoever runs generation and handed to query sites by
    reference. Inserts and lookups share one lock, so readers on other threads
    never observe a half-finished insert.
    """

    def __init__(self) -> None:
        self._records: dict[Coordinate, BlockRecord] = {}
        self._lock = threading.Lock()

    def insert(self, coordinate: Coordinate, record: BlockRecord) -> None:
        """Record the block generated at coordinate.

        Raises:
            DuplicateCoordinateError: If the coordinate already has a record.
        """
        with self._lock:
            if coordinate in self._records:
                raise DuplicateCoordinateError(
                    f"Coordinate {coordinate} already generated "
                    f"as {self._records[coordinate]}"
                )
            self._records[coordinate] = record

    def get(self, coordinate: Coordinate) -> BlockRecord | None:
        """Get the record at coordinate, or None."""
        with self._lock:
            return self._records.get(coordinate)

    def altitude_of(self, x: int, y: int) -> float:
        """Elevation at (x, y), or UNKNOWN_ALTITUDE if never generated."""
        record = self.get(Coordinate(x=x, y=y))
        if record is None:
            return UNKNOWN_ALTITUDE
        return record.elevation

    def is_wooded(self, x: int, y: int) -> bool:
        """Whether vegetation occupies (x, y). False if never generated."""
        record = self.get(Coordinate(x=x, y=y))
        return record is not None and record.wooded

    def clear(self) -> None:
        """Drop every record so the same range can be generated again."""
        with self._lock:
            self._records.clear()

    def records(self) -> Mapping[Coordinate, BlockRecord]:
        """Return a read-only snapshot of all records.

        Later inserts and clears do not show up in the returned mapping.
        """
        with self._lock:
            return MappingProxyType(dict(self._records))

    def elevation_grid(self, grid_range: int) -> NDArray[np.float32]:
        """Dense elevation array covering [-grid_range, grid_range) on both axes.

        Args:
            grid_range: Half-width of the square to export.

        Returns:
            Array of shape (2 * grid_range, 2 * grid_range) indexed
            [y + grid_range, x + grid_range]. Cells with no record hold
            UNKNOWN_ALTITUDE.
        """
        size = 2 * grid_range
        grid = np.full((size, size), UNKNOWN_ALTITUDE, dtype=np.float32)

        with self._lock:
            for coordinate, record in self._records.items():
                row = coordinate.y + grid_range
                col = coordinate.x + grid_range
                if 0 <= row < size and 0 <= col < size:
                    grid[row, col] = record.elevation

        return grid

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    def __contains__(self, coordinate: object) -> bool:
        with self._lock:
            return coordinate in self._records
