"""
Command Line Interface

Parses arguments, merges them with the optional configuration file, sets up
logging and runs the Deduplicator. This is the only place errors are
turned into exit codes.

Author: StemPrune Project
License: MIT
"""

import argparse
import sys
from typing import List, Optional

from pydantic import ValidationError

from . import __version__
from .config.config_loader import ConfigError, ConfigLoader
from .config.schema import Config, DedupOptions, LogLevel
from .core.deduplicator import Deduplicator
from .core.prompt import Prompter
from .utils.logger import get_logger, setup_logging

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2
EXIT_INTERRUPTED = 130


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="stemprune",
        description=(
            "Find files sharing a stem but differing in extension, keep one per "
            "stem by extension priority and offer to delete or move the rest."
        ),
    )
    p.add_argument("in_dir", help="Directory to scan")
    p.add_argument("-r", "--recursive", action=argparse.BooleanOptionalAction, default=None,
                   help="Descend into subdirectories (--no-recursive overrides a configured default)")
    p.add_argument("-k", "--keep", action="append", metavar="EXT",
                   help="Extension to keep; repeat in priority order, highest first")
    p.add_argument("-m", "--move", dest="move_to", metavar="PATH",
                   help="Move discarded files under PATH instead of deleting them")
    p.add_argument("-c", "--config", metavar="PATH",
                   help="YAML configuration file (default: $STEMPRUNE_CONFIG)")
    p.add_argument("--log-level", choices=[level.value for level in LogLevel],
                   type=str.upper, help="Diagnostic log level (default: WARNING)")
    p.add_argument("--log-file", metavar="PATH", help="Also write diagnostics to PATH")
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return p


def _configure_logging(config: Config, args: argparse.Namespace) -> None:
    settings = config.logging
    setup_logging(
        log_level=args.log_level or settings.log_level,
        log_to_file=bool(args.log_file) or settings.log_to_file,
        log_file_path=args.log_file or settings.log_file_path,
        log_rotation_size=settings.log_rotation_size,
        log_retention_count=settings.log_retention_count,
        json_format=settings.json_format,
    )


def build_options(config: Config, args: argparse.Namespace) -> DedupOptions:
    """
    Merge command line arguments over configured defaults.

    Raises:
        ValidationError: If the merged options are invalid (e.g. no keep list)
    """
    defaults = config.defaults
    recursive = args.recursive if args.recursive is not None else defaults.recursive
    return DedupOptions(
        in_dir=args.in_dir,
        keep=args.keep or defaults.keep,
        recursive=recursive,
        move_to=args.move_to or defaults.move_to,
    )


def main(argv: Optional[List[str]] = None, prompter: Optional[Prompter] = None) -> int:
    """
    Entry point for the stemprune command.

    Args:
        argv: Argument list (defaults to sys.argv[1:])
        prompter: Confirmation source (console by default)

    Returns:
        Process exit code
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = ConfigLoader(args.config).load()
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_USAGE

    try:
        _configure_logging(config, args)
    except (OSError, ValueError) as e:
        print(f"Error: cannot set up logging: {e}", file=sys.stderr)
        return EXIT_USAGE

    try:
        options = build_options(config, args)
    except ValidationError as e:
        messages = "; ".join(error["msg"] for error in e.errors())
        print(f"Error: invalid options: {messages}", file=sys.stderr)
        return EXIT_USAGE

    try:
        Deduplicator(options, prompter=prompter).process()
    except KeyboardInterrupt:
        print(file=sys.stderr)
        logger.warning("Interrupted")
        return EXIT_INTERRUPTED
    except EOFError:
        print("Error: input closed while waiting for an answer", file=sys.stderr)
        return EXIT_FAILURE
    except OSError as e:
        logger.debug("Run aborted", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_FAILURE

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
