"""Main terrain generation orchestration."""

from collections import Counter

import numpy as np
import structlog

from ..block_types import BlockKind
from ..exceptions import TerrainError
from ..store import UNKNOWN_ALTITUDE, BlockRecord, TerrainStore
from ..types import Coordinate
from .classification import ElevationClassifier
from .config import TerrainConfig
from .noise import NoiseField, SimplexNoiseField
from .objects import (
    ObjectCollector,
    ObjectKind,
    PlacedObject,
    PlacementSink,
    world_position,
)
from .vegetation import VegetationModel

logger = structlog.get_logger()


class GenerationResult:
    """Summary of one generation pass."""

    def __init__(
        self,
        store: TerrainStore,
        config: TerrainConfig,
        grid_range: int,
        block_counts: Counter[BlockKind],
        wooded_count: int,
        placed_count: int,
    ):
        self.store = store
        self.config = config
        self.grid_range = grid_range
        self.block_counts = block_counts
        self.wooded_count = wooded_count
        self.placed_count = placed_count

    @property
    def cell_count(self) -> int:
        """Number of cells generated in this pass."""
        return sum(self.block_counts.values())


class TerrainGenerator:
    """Generates a square grid of blocks into a store and a placement sink.

    Collaborators not supplied are created from the config: a fresh
    TerrainStore, an in-memory ObjectCollector, simplex noise and a numpy
    Generator, the last two seeded with config.seed.
    """

    def __init__(
        self,
        config: TerrainConfig,
        store: TerrainStore | None = None,
        sink: PlacementSink | None = None,
        noise: NoiseField | None = None,
        rng: np.random.Generator | None = None,
    ):
        self.config = config
        self.store = store if store is not None else TerrainStore()
        self.sink = sink if sink is not None else ObjectCollector()
        self.noise = noise if noise is not None else SimplexNoiseField(config.seed)
        self.rng = rng if rng is not None else np.random.default_rng(config.seed)

        self.classifier = ElevationClassifier(config.elevation, config.classification)
        self.vegetation = VegetationModel(config.vegetation, self.rng)

    def generate(self, grid_range: int | None = None) -> GenerationResult:
        """Generate every cell with x and y in [-grid_range, grid_range).

        Args:
            grid_range: Half-width of the grid. Defaults to config.range.

        Returns:
            GenerationResult for this pass.

        Raises:
            DuplicateCoordinateError: If a cell is already in the store.
        """
        grid_range = self.config.range if grid_range is None else grid_range
        if self.config.placement.overlay_range is not None:
            overlay_range: float = self.config.placement.overlay_range
        else:
            overlay_range = grid_range / 2

        logger.info(
            "terrain_generation_started",
            grid_range=grid_range,
            seed=self.config.seed,
            cells=(2 * grid_range) ** 2,
        )

        block_counts: Counter[BlockKind] = Counter()
        wooded_count = 0
        placed_count = 0

        try:
            for i in range(-grid_range, grid_range):
                for j in range(-grid_range, grid_range):
                    record, placed = self._generate_block(i, j, overlay_range)
                    block_counts[record.block_kind] += 1
                    wooded_count += int(record.wooded)
                    placed_count += placed
        except TerrainError as e:
            logger.error("terrain_generation_aborted", error=str(e))
            raise

        result = GenerationResult(
            store=self.store,
            config=self.config,
            grid_range=grid_range,
            block_counts=block_counts,
            wooded_count=wooded_count,
            placed_count=placed_count,
        )
        _log_terrain_stats(result)
        return result

    def _generate_block(
        self, i: int, j: int, overlay_range: float
    ) -> tuple[BlockRecord, int]:
        """Generate, store and place one cell.

        Returns:
            The stored record and the number of objects placed.
        """
        terrain = self.config.elevation.noise
        raw = self.noise.sample(terrain.base_x, terrain.base_y, terrain.grain, i, j)
        classification = self.classifier.classify(raw)
        elevation = classification.elevation

        wood = self.config.vegetation.noise
        wood_sample = self.noise.sample(wood.base_x, wood.base_y, wood.grain, i, j)
        wooded = self.vegetation.is_wooded(elevation, wood_sample)

        coordinate = Coordinate(x=i, y=j)
        record = BlockRecord(
            block_kind=classification.block_kind,
            elevation=elevation,
            wooded=wooded,
        )
        self.store.insert(coordinate, record)

        placement = self.config.placement
        self.sink.place(
            PlacedObject(
                kind=ObjectKind.BLOCK,
                coordinate=coordinate,
                position=world_position(coordinate, elevation, placement),
                block_kind=classification.block_kind,
            )
        )
        placed = 1

        if not classification.band.decorated:
            return record, placed

        surface = elevation + placement.object_lift

        if -overlay_range < i < overlay_range and -overlay_range < j < overlay_range:
            self.sink.place(
                PlacedObject(
                    kind=ObjectKind.OVERLAY,
                    coordinate=coordinate,
                    position=world_position(coordinate, surface, placement),
                )
            )
            placed += 1

        if wooded:
            variant = int(self.rng.integers(0, placement.vegetation_variants))
            jitter_x, jitter_z = self.rng.uniform(
                -placement.jitter, placement.jitter, size=2
            )
            self.sink.place(
                PlacedObject(
                    kind=ObjectKind.VEGETATION,
                    coordinate=coordinate,
                    position=world_position(
                        coordinate,
                        surface,
                        placement,
                        jitter=(float(jitter_x), float(jitter_z)),
                    ),
                    variant=variant,
                )
            )
            placed += 1

        return record, placed


def generate_terrain(
    config: TerrainConfig,
    store: TerrainStore | None = None,
    sink: PlacementSink | None = None,
    noise: NoiseField | None = None,
    rng: np.random.Generator | None = None,
) -> GenerationResult:
    """Generate terrain for config.range.

    Args:
        config: Terrain generation configuration.
        store: Store to populate. A new one is created if omitted.
        sink: Receives placement requests. Defaults to an ObjectCollector.
        noise: Noise field. Defaults to simplex noise seeded from config.
        rng: Random source. Defaults to a Generator seeded from config.

    Returns:
        GenerationResult with the populated store.
    """
    generator = TerrainGenerator(config, store=store, sink=sink, noise=noise, rng=rng)
    return generator.generate()


def _log_terrain_stats(result: GenerationResult) -> None:
    """Log terrain generation statistics."""
    total = result.cell_count
    if total == 0:
        return

    grid = result.store.elevation_grid(result.grid_range)
    known = grid[grid != UNKNOWN_ALTITUDE]

    logger.info(
        "terrain_stats",
        cells=total,
        wooded=result.wooded_count,
        placed=result.placed_count,
        elevation_min=float(known.min()) if known.size else None,
        elevation_max=float(known.max()) if known.size else None,
        **{
            kind.value: f"{result.block_counts[kind]} ({result.block_counts[kind] / total:.1%})"
            for kind in BlockKind
        },
    )
    logger.info("terrain_generation_complete", cells=total)
