"""``hasse-lattice-web``: serve the diagram endpoints with Flask's dev server."""

import argparse
from typing import Any, Dict, List, Optional

import graphviz
from flask import Flask

from hasselattice.render import graphviz_version
from webapp import create_app


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="hasse-lattice-web")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=5000)
    parser.add_argument(
        "--engine",
        choices=sorted(graphviz.ENGINES),
        default=None,
        help="Override GRAPHVIZ_ENGINE for this server.",
    )
    parser.add_argument(
        "--max-elements",
        type=int,
        default=None,
        help="Override MAX_ELEMENTS (each request enumerates 2**N subsets).",
    )
    return parser


def app_from_args(args: argparse.Namespace) -> Flask:
    overrides: Dict[str, Any] = {}
    if args.engine is not None:
        overrides["GRAPHVIZ_ENGINE"] = args.engine
    if args.max_elements is not None:
        overrides["MAX_ELEMENTS"] = args.max_elements

    app = create_app(overrides)
    version = graphviz_version()
    if version is None:
        app.logger.warning(
            "[STARTUP] Graphviz not found; /diagram will answer 502 until it is installed"
        )
    else:
        app.logger.info(
            f"[STARTUP] Graphviz {version}, engine {app.config['GRAPHVIZ_ENGINE']}"
        )
    return app


def main(argv: Optional[List[str]] = None) -> None:
    args = build_parser().parse_args(argv)
    app = app_from_args(args)
    debug_mode = bool(app.config.get("DEBUG", False))
    app.logger.info(f"[STARTUP] Serving on {args.host}:{args.port} (debug={debug_mode})")
    # Development server only
    app.run(host=args.host, port=args.port, debug=debug_mode)


if __name__ == "__main__":
    main()
