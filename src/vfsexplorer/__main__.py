"""Entry point for vfsexplorer."""

import argparse
import logging
import sys
from pathlib import Path

from .app import run_app
from .config import Config


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="vfsexplorer",
        description="Browse a remote virtual file tree served over /vfs.",
    )
    parser.add_argument("path", nargs="?", help="directory to open (default: from config)")
    parser.add_argument("--server", help="backend base URL, e.g. http://localhost:9000")
    parser.add_argument("--config", type=Path, help="config file (default: ~/.config/vfsexplorer/config.toml)")
    return parser.parse_args(argv)


def setup_logging(config: Config) -> None:
    """Send log records to the configured file; the TUI owns the terminal."""
    log_file = config.get_log_file()
    if log_file is None:
        return
    log_file.parent.mkdir(parents=True, exist_ok=True)
    logging.basicConfig(
        filename=log_file,
        level=getattr(logging, config.logging.level, logging.WARNING),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def main(argv: list[str] | None = None) -> int:
    """Main entry point for vfsexplorer."""
    args = parse_args(argv)
    try:
        # Load configuration
        config = Config.load(args.config)
        if args.server:
            config.server_url = args.server.rstrip("/")

        setup_logging(config)

        # Run the application
        run_app(config, start_path=args.path)

        return 0
    except KeyboardInterrupt:
        return 0
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
