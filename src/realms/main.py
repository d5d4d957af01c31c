"""Command-line entry point: generate one world and log a summary."""

import logging
import sys

from realms.config import Settings, settings
from realms.terrain import World, random_seed


def setup_logging(config: Settings = settings) -> None:
    """Configure logging for the generator."""
    level = getattr(logging, config.log_level.upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
    )


def main(config: Settings = settings) -> World:
    """Generate a world from *config* and log its statistics."""
    setup_logging(config)
    logger = logging.getLogger(__name__)

    parameters = config.world_parameters()
    seed = config.seed if config.seed is not None else random_seed()
    logger.info("Realms generator starting (seed=%d)", seed)

    world = World(seed, parameters)
    logger.info(
        "World ready: %dx%d, elevation [%.4f, %.4f], %.1f%% land at sea level %.2f",
        parameters.width, parameters.height,
        world.elevation.min, world.elevation.max,
        world.land_fraction() * 100, parameters.sea_level,
    )
    return world


def run() -> None:
    """Entry point for the ``realms`` command."""
    main()


if __name__ == "__main__":
    run()
