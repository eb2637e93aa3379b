"""
Command-line entry point.

Usage:
    env-roulette                  # Check the env file in the working directory
    env-roulette --format yaml    # Same report, as YAML
    env-roulette --verbose        # Debug logging on stderr

Exit codes:
    0  report printed, or no env file found
    1  an env file was found but could not be read
"""

import argparse
import logging
import sys
from typing import List, Optional

from envroulette import __version__
from envroulette.checker import check
from envroulette.env_parser import EnvReadError
from envroulette.locator import CANDIDATE_FILES
from envroulette.reporter import print_report
from envroulette.serialization import report_to_json, report_to_yaml

EXIT_OK = 0
EXIT_READ_ERROR = 1

FORMATTERS = {
    "json": report_to_json,
    "yaml": report_to_yaml,
}


def configure_logging(verbose: bool = False) -> None:
    """Send log records to stderr so stdout only carries the report."""
    logger = logging.getLogger("envroulette")
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))

    # Replace existing handlers (avoid duplicate logs on repeated calls)
    logger.handlers = [handler]
    logger.propagate = False


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="env-roulette",
        description="Find the local .env file and warn about likely misconfigurations.",
    )
    parser.add_argument(
        "--format",
        choices=["text", *FORMATTERS],
        default="text",
        help="Output format (default: text)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    text_mode = args.format == "text"
    # Chatter goes to stdout only for the text report; machine formats keep stdout clean.
    info = sys.stdout if text_mode else sys.stderr

    if text_mode:
        print("🎰 Spinning the ENV Roulette wheel...")
        print("💀 May the odds be ever in your favor (they won't be)\n")

    try:
        report = check(candidates=CANDIDATE_FILES)
    except EnvReadError as e:
        print(f"📖 Can't read {e.path}. Maybe it's shy? Error: {e.reason}", file=info)
        return EXIT_READ_ERROR

    if report is None:
        print("❌ No .env file found. Your app will probably crash. Surprise!", file=info)
        print("💡 Pro tip: Create one of " + ", ".join(CANDIDATE_FILES) + ". Or don't. I'm not your mom.", file=info)
        return EXIT_OK

    if text_mode:
        print(f"🎯 Found {report.source}! Because who needs consistent naming?")
        print_report(report)
    else:
        print(FORMATTERS[args.format](report))

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
