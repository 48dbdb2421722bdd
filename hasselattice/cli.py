"""Command line entry point: ``hasse-lattice a,b,c --format svg``."""

import argparse
import logging
import sys
from typing import List, Optional

import graphviz

from hasselattice.errors import HasseLatticeError, InvalidInput
from hasselattice.io import write_dot
from hasselattice.render import graphviz_version
from hasselattice.session import DiagramSession
from hasselattice.types import (
    DEFAULT_ELEMENTS,
    DEFAULT_FORMAT,
    DEFAULT_SPACING,
    OutputFormat,
    RenderConfig,
)

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hasse-lattice",
        description="Render the Hasse diagram of the powerset of a set of elements.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument(
        "elements",
        nargs="?",
        default=DEFAULT_ELEMENTS,
        help="Comma-separated element names.",
    )
    parser.add_argument(
        "-s",
        "--spacing",
        type=float,
        default=DEFAULT_SPACING,
        help="Rank and node separation of the layout.",
    )
    parser.add_argument(
        "-f",
        "--format",
        choices=[fmt.value for fmt in OutputFormat],
        default=DEFAULT_FORMAT.value,
        help="Image encoding requested from Graphviz.",
    )
    parser.add_argument(
        "-o",
        "--output",
        default=None,
        help="Output path (default: hasse.<format>).",
    )
    parser.add_argument(
        "--dot-only",
        action="store_true",
        help="Print the DOT description instead of rendering it.",
    )
    parser.add_argument(
        "--dot-output",
        default=None,
        help="Also write the DOT description to this path.",
    )
    parser.add_argument(
        "--verify",
        action="store_true",
        help="Decode the rendered image before saving it.",
    )
    parser.add_argument(
        "--engine",
        choices=sorted(graphviz.ENGINES),
        default="dot",
        help="Graphviz layout engine.",
    )
    parser.add_argument(
        "--version-check",
        action="store_true",
        help="Print the Graphviz version and exit.",
    )
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    config = RenderConfig(
        engine=args.engine,
        logger_name="hasselattice.cli",
    )

    if args.version_check:
        version = graphviz_version()
        if version is None:
            print("Graphviz is not available", file=sys.stderr)
            return 1
        print(f"Graphviz {version}")
        return 0

    session = DiagramSession(
        elements_text=args.elements,
        spacing=args.spacing,
        output_format=OutputFormat.parse(args.format),
        config=config,
    )

    try:
        if args.dot_only:
            result = session.build()
            print(result.description)
            logger.info(f"{result.subset_count} subsets, {result.edge_count} edges")
        else:
            session.generate(decode=args.verify)
            path = session.save(args.output)
            print(f"Saved {session.subset_count} subsets to {path}")
        if args.dot_output:
            write_dot(session.description, args.dot_output)
    except InvalidInput as e:
        print(f"Invalid input: {e}", file=sys.stderr)
        return 2
    except HasseLatticeError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
