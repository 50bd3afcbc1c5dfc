"""CLI entry point."""

import argparse
import logging
import sys

from textual.logging import TextualHandler

from scantriage.adapters.grype_client import GrypeError, load_report, parse_report, scan
from scantriage.app.main import TriageApp
from scantriage.domain.match_store import MatchStore

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="scantriage",
        description="scantriage - browse Grype vulnerability matches in the terminal",
    )
    parser.add_argument(
        "report",
        nargs="?",
        help="Path to a Grype JSON report",
    )
    parser.add_argument(
        "--scan",
        metavar="TARGET",
        help="Run grype against TARGET instead of reading a report",
    )
    parser.add_argument(
        "--details",
        action="store_true",
        help="Start with the detail pane shown",
    )
    parser.add_argument(
        "--log-file",
        metavar="PATH",
        help="Write log records to PATH",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug messages",
    )
    return parser


def configure_logging(log_file: str | None, verbose: bool) -> None:
    """Send log records somewhere that cannot draw over the TUI."""
    level = logging.DEBUG if verbose else logging.INFO
    if log_file:
        logging.basicConfig(
            filename=log_file,
            level=level,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )
    else:
        logging.basicConfig(level=level, handlers=[TextualHandler()])


def load_store(args: argparse.Namespace) -> MatchStore:
    """Read or produce the scan report named on the command line."""
    if args.scan:
        report = parse_report(scan(args.scan))
    else:
        report = load_report(args.report)
    return MatchStore.from_matches(report.matches)


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.report and not args.scan:
        parser.error("a report path or --scan TARGET is required")
    if args.report and args.scan:
        parser.error("give either a report path or --scan TARGET, not both")

    configure_logging(args.log_file, args.verbose)

    try:
        store = load_store(args)
    except GrypeError as e:
        logger.error("%s", e)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    app = TriageApp(store, show_details=args.details)
    app.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
