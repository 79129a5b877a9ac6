"""Block terrain generation core."""

from .block_types import Band, BlockKind
from .config import find_config, list_configs, load_config
from .exceptions import ConfigurationError, DuplicateCoordinateError, TerrainError
from .store import UNKNOWN_ALTITUDE, BlockRecord, TerrainStore
from .types import Coordinate, WorldPosition

__all__ = [
    # Types
    "Coordinate",
    "WorldPosition",
    "Band",
    "BlockKind",
    # Store
    "BlockRecord",
    "TerrainStore",
    "UNKNOWN_ALTITUDE",
    # Config
    "load_config",
    "find_config",
    "list_configs",
    # Exceptions
    "TerrainError",
    "DuplicateCoordinateError",
    "ConfigurationError",
]
