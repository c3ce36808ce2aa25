"""Command-line interface for the Gopher client."""

import argparse
import logging
import sys
from dataclasses import replace

import yaml

from .config import Config, load_config
from .console import TerminalConsole
from .errors import SessionExit
from .shell import GopherShell
from .transport import TcpTransport


def setup_logging(verbose: bool = False) -> None:
    """Configure logging."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def parse_args() -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="delve - a simple terminal gopher client",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s                                # Start with rc files only
  %(prog)s gopher://gopher.floodgap.com/  # Open a start page
  %(prog)s -c delve.yaml                  # Use specific config file
  %(prog)s --no-rc --timeout 10           # Skip rc files, 10s socket timeout
""",
    )

    parser.add_argument(
        "url",
        nargs="?",
        help="Gopher URL to open at startup",
    )

    parser.add_argument(
        "-c", "--config",
        metavar="FILE",
        help="Path to YAML configuration file",
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )

    parser.add_argument(
        "--no-rc",
        action="store_true",
        help="Do not evaluate command rc files at startup",
    )

    parser.add_argument(
        "--timeout",
        metavar="SECONDS",
        type=float,
        help="Socket timeout in seconds (default: wait until the server closes)",
    )

    return parser.parse_args()


def main() -> int:
    """Main entry point."""
    args = parse_args()
    setup_logging(args.verbose)

    logger = logging.getLogger(__name__)

    # Load configuration
    if args.config:
        try:
            config = load_config(args.config)
        except FileNotFoundError:
            logger.error(f"Config file not found: {args.config}")
            return 1
        except yaml.YAMLError as e:
            logger.error(f"Cannot parse config file {args.config}: {e}")
            return 1
        except ValueError as e:
            logger.error(f"Invalid config file {args.config}: {e}")
            return 1
    else:
        config = Config()

    # Override config with command line arguments
    if args.timeout is not None:
        config = replace(config, timeout_seconds=args.timeout)
    if args.no_rc:
        config = replace(config, rc_files=[])

    try:
        config.validate()
    except ValueError as e:
        logger.error(f"Invalid settings: {e}")
        return 1

    console = TerminalConsole()
    transport = TcpTransport(timeout=config.timeout_seconds)
    shell = GopherShell(transport, console, config)

    console.print(shell.BANNER)
    logger.info(f"  Timeout: {config.timeout_seconds}")
    logger.info(f"  Max nesting: {config.max_nesting}")

    try:
        shell.load_rc_files(config.get_rc_paths())
        start = args.url or config.home
        if start:
            shell.open(start)
        shell.run()
    except SessionExit:
        logger.debug("Quit requested during startup")
    except KeyboardInterrupt:
        console.print("")
        return 130

    return 0


if __name__ == "__main__":
    sys.exit(main())
