import argparse
import logging
import os
import sys
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

from . import config
from .cancellation import CancellationToken, install_interrupt_handler
from .core import MediaManagerApp
from .exceptions import MediaManagerError


def setup_logging(verbose: bool, log_file: Optional[Path] = None):
    """
    Console logging, plus a log file when requested.
    Level: --verbose, else $MEDIA_MANAGER_LOG_LEVEL, else INFO.
    """
    if verbose:
        log_level = logging.DEBUG
    else:
        level_name = os.environ.get(config.LOG_LEVEL_ENV, "INFO").upper()
        log_level = logging.getLevelName(level_name)
        if not isinstance(log_level, int):
            log_level = logging.INFO

    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding='utf-8'))

    logging.basicConfig(
        level=log_level,
        format=config.LOG_FORMAT,
        handlers=handlers,
        force=True,
    )

    # Silence chatty libraries
    logging.getLogger("exifread").setLevel(logging.ERROR)


def parse_args(argv: Optional[List[str]] = None):
    p = argparse.ArgumentParser(
        prog="media-manager",
        description="Media Manager: catalog media files based on all metadata available",
    )
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    p.add_argument("--log-file", type=Path, default=None, help="Also write the log to this file")

    sub = p.add_subparsers(dest="command", required=True)

    imp = sub.add_parser("import", help="Import media files from INPUT_PATH into OUTPUT_PATH")
    imp.add_argument("input_path", type=Path, help="Input path")
    imp.add_argument("output_path", type=Path, help="Output path")
    imp.add_argument("--no-traverse", action="store_true", help="Do not traverse input directory")
    imp.add_argument("--levels", type=int, default=config.DEFAULT_PATH_LEVELS,
                     help="Parent directories folded into destination names")

    return p.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    load_dotenv()
    args = parse_args(argv)
    setup_logging(args.verbose, args.log_file)
    logging.debug(f"Args: {args}")

    token = CancellationToken()
    restore_handler = install_interrupt_handler(token)

    try:
        if args.command == "import":
            result = MediaManagerApp().import_media(
                token,
                args.input_path,
                args.output_path,
                no_traverse=args.no_traverse,
                levels=args.levels,
            )
            if result.cancelled:
                return 0
    except (MediaManagerError, OSError) as e:
        logging.error(f"Error: {e}")
        return 1
    finally:
        restore_handler()

    logging.info("Done")
    return 0


if __name__ == "__main__":
    sys.exit(main())
