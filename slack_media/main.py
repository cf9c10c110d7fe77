#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Main CLI entry point for the Slack export media extractor.
"""

import argparse
import logging
import sys
from pathlib import Path

from .commands.extract import ExtractCommand
from .config import DEFAULT_TIMEOUT, DEFAULT_WORKERS
from .storage.archive import ExportPathError


class _ArgumentParser(argparse.ArgumentParser):
    """Argument parser that exits with status 1 on usage errors."""

    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def setup_logging(verbose: bool):
    """Configure logging for the CLI tool."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)]
    )
    logging.getLogger("urllib3").setLevel(logging.WARNING)
    logging.debug("Verbose logging enabled (DEBUG level).")


def create_parser():
    """Create and configure the argument parser."""
    parser = _ArgumentParser(
        prog="slack-media",
        description="Extract images and videos from a Slack workspace export",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""Examples:
  # Copy media stored inside an export directory
  %(prog)s ./slack-export ./media

  # Extract a zip export and also download files referenced in messages
  %(prog)s export.zip ./media --token xoxp-...
        """
    )
    parser.add_argument("export_path",
                        help="Slack export directory or .zip archive")
    parser.add_argument("output_dir",
                        help="Directory to write media into")
    parser.add_argument("--token", nargs="?", const="", default="",
                        help="Slack token used to download files referenced in messages")
    parser.add_argument("--workers", type=int, default=DEFAULT_WORKERS,
                        help=f"Maximum concurrent downloads (default: {DEFAULT_WORKERS})")
    parser.add_argument("--timeout", type=float, default=DEFAULT_TIMEOUT,
                        help=f"Per-request timeout in seconds (default: {DEFAULT_TIMEOUT:g})")
    parser.add_argument("--keep-extracted", action="store_true",
                        help="Keep the temporary directory a .zip export is extracted into")
    parser.add_argument("--unique-names", action="store_true",
                        help="Add a short hash to output names so same-named files never overwrite")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Enable verbose (DEBUG) output")
    return parser


def main(argv=None) -> int:
    """Main CLI entry point."""
    parser = create_parser()
    args, extras = parser.parse_known_args(argv)
    setup_logging(args.verbose)
    if extras:
        logging.warning("Ignoring unrecognized arguments: %s", " ".join(extras))

    export_path = Path(args.export_path).resolve()
    output_dir = Path(args.output_dir).resolve()
    logging.debug("Parsed arguments: export=%s output=%s workers=%d",
                  export_path, output_dir, args.workers)

    try:
        command = ExtractCommand(
            output_dir,
            workers=args.workers,
            timeout=args.timeout,
            keep_extracted=args.keep_extracted,
            unique_names=args.unique_names,
        )
        command.execute(export_path, token=args.token)
    except ExportPathError as e:
        logging.error("%s", e)
        return 1
    except KeyboardInterrupt:
        logging.warning("Operation interrupted by user.")
        return 130
    except Exception as e:
        logging.error("Error occurred: %s", e, exc_info=args.verbose)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
