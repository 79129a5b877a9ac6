"""Command-line interface for terrain generation."""

import argparse
import logging
import time

import structlog

from ..store import TerrainStore
from ..types import Coordinate


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for terrain generation."""
    parser = argparse.ArgumentParser(
        description="Generate block terrain and report what was built"
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path or name of terrain TOML config (default: built-in defaults)",
    )
    parser.add_argument(
        "--range", type=int, default=None, help="Grid half-width (overrides config)"
    )
    parser.add_argument(
        "--seed", type=int, default=None, help="Random seed (overrides config)"
    )
    parser.add_argument(
        "--map", action="store_true", help="Print a text map of block kinds"
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Verbose logging"
    )

    args = parser.parse_args(argv)

    level = logging.DEBUG if args.verbose else logging.INFO
    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
    )
    logger = structlog.get_logger()

    # Import here to avoid slow startup for --help
    from ..config import find_config, load_config
    from .config import TerrainConfig
    from .generator import generate_terrain

    if args.config:
        try:
            config_path = find_config(args.config)
        except FileNotFoundError as e:
            logger.error("config_not_found", path=args.config, error=str(e))
            raise SystemExit(1)
        config = load_config(config_path)
        logger.info("config_loaded", path=str(config_path))
    else:
        config = TerrainConfig()
        logger.info("using_default_config")

    overrides = {}
    if args.range is not None:
        overrides["range"] = args.range
    if args.seed is not None:
        overrides["seed"] = args.seed
    if overrides:
        config = TerrainConfig.model_validate(config.model_dump() | overrides)

    start_time = time.time()
    result = generate_terrain(config)
    logger.info(
        "generation_timed",
        seconds=round(time.time() - start_time, 2),
        cells=result.cell_count,
    )

    if args.map:
        print(render_text_map(result.store, result.grid_range))


def render_text_map(store: TerrainStore, grid_range: int) -> str:
    """Render block kinds as one glyph per cell, wooded cells as 'T'.

    Rows run from y = -grid_range at the top; unknown cells are blank.
    """
    lines = []
    for y in range(-grid_range, grid_range):
        row = []
        for x in range(-grid_range, grid_range):
            record = store.get(Coordinate(x=x, y=y))
            if record is None:
                row.append(" ")
            elif record.wooded:
                row.append("T")
            else:
                row.append(record.block_kind.glyph)
        lines.append("".join(row))
    return "\n".join(lines)


if __name__ == "__main__":
    main()
