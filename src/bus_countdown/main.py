"""Main entry point for the bus countdown application."""

import logging
import sys

from bus_countdown.adapters.catalog import JsonCatalogLoader
from bus_countdown.adapters.config import AppConfig
from bus_countdown.cli import build_parser, run_command

logger = logging.getLogger(__name__)


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging on stderr."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


def main(argv: list[str] | None = None) -> int:
    """Main application entry point; returns the process exit status."""
    args = build_parser().parse_args(argv)

    try:
        config = AppConfig(config_file=args.config_file) if args.config_file else AppConfig()
        config.load_toml_overrides()
    except (ValueError, FileNotFoundError) as e:
        configure_logging()
        logger.error(f"Invalid configuration: {e}")
        return 1

    configure_logging(config.log_level)

    # Load the catalog once; every request shares it by reference
    try:
        catalog = JsonCatalogLoader.load(config)
    except FileNotFoundError as e:
        logger.error(str(e))
        logger.error("Set ROUTES_JSON and STOPS_JSON, or configure [catalog] in your config.toml.")
        return 1
    except ValueError as e:
        logger.error(f"Invalid catalog data: {e}")
        return 1

    try:
        return run_command(args, catalog, config)
    except (KeyboardInterrupt, EOFError):
        print("\nInterrupted.", file=sys.stderr)
        return 1


def cli_main() -> None:
    """Synchronous entry point for the console script."""
    sys.exit(main())


if __name__ == "__main__":
    cli_main()
