# --------------------------------------------------------------
#  routes.py
# --------------------------------------------------------------
from __future__ import annotations

from logging import Logger
from typing import Any, Tuple, Union

from flask import Blueprint, Response, current_app, jsonify, request

from hasselattice.diagram import build_diagram
from hasselattice.errors import InvalidInput
from hasselattice.io import default_filename
from hasselattice.render import graphviz_version
from webapp.routes.helpers import parse_diagram_request
from webapp.services.diagram_service import (
    DiagramServiceError,
    describe,
    generate_diagram,
    render_image,
)

bp = Blueprint("main", __name__)


@bp.route("/about")
def about() -> Response:
    """Simple health-check / about endpoint."""
    return jsonify(
        {
            "about": "Hasse diagrams of powerset lattices, rendered with Graphviz.",
            "graphviz": graphviz_version(),
            "engine": current_app.config["GRAPHVIZ_ENGINE"],
        }
    )


# ----------------------------------------------------------------------
# Diagram endpoints
# ----------------------------------------------------------------------


@bp.route("/diagram", methods=["POST"])
def diagram() -> Union[Response, Tuple[dict[str, Any], int]]:
    log: Logger = current_app.logger
    log.info("[diagram] POST /diagram from %s", request.remote_addr)

    try:
        req = parse_diagram_request(request, current_app.config)
        log.info(
            f"[diagram] Elements: {len(req.elements)}, Spacing: {req.spacing}, "
            f"Format: {req.output_format.value}, Render: {req.render}"
        )
        return jsonify(generate_diagram(req))

    except InvalidInput as e:
        log.warning(f"[diagram] Bad request: {e}")
        return _fail(400, str(e)), 400

    except DiagramServiceError as e:
        log.error(f"[diagram] {type(e.cause).__name__}: {e}")
        body = _fail(502, str(e))
        body.update(describe(e.result, req))
        return body, 502


@bp.route("/diagram/image", methods=["GET", "POST"])
def diagram_image() -> Union[Response, Tuple[dict[str, Any], int]]:
    """Rendered bytes as a download named ``hasse.<ext>``."""
    log: Logger = current_app.logger
    try:
        req = parse_diagram_request(request, current_app.config)
        _, data = render_image(req)
    except InvalidInput as e:
        log.warning(f"[diagram/image] Bad request: {e}")
        return _fail(400, str(e)), 400
    except DiagramServiceError as e:
        log.error(f"[diagram/image] Render failed: {e}")
        return _fail(502, str(e)), 502

    filename = default_filename(req.output_format)
    log.info(f"[diagram/image] Sending {len(data)} bytes as {filename}")
    return Response(
        data,
        mimetype=req.output_format.mimetype,
        headers={"Content-Disposition": f"attachment; filename={filename}"},
    )


@bp.route("/diagram/dot", methods=["GET", "POST"])
def diagram_dot() -> Union[Response, Tuple[dict[str, Any], int]]:
    """The DOT description alone, without invoking Graphviz."""
    try:
        req = parse_diagram_request(request, current_app.config)
        result = build_diagram(req.elements, req.spacing)
    except InvalidInput as e:
        current_app.logger.warning(f"[diagram/dot] Bad request: {e}")
        return _fail(400, str(e)), 400
    return Response(
        result.description,
        mimetype="text/vnd.graphviz",
        headers={"X-Subset-Count": str(result.subset_count)},
    )


# ----------------------------------------------------------------------
# Error handling
# ----------------------------------------------------------------------
@bp.errorhandler(Exception)
def global_error(exc: Exception):  # Flask passes the exception instance in
    current_app.logger.error("[global] Unhandled exception", exc_info=True)
    return _fail(500, str(exc)), 500


# ----------------------------------------------------------------------
# Utility: short error JSON helper
# ----------------------------------------------------------------------
def _fail(status_code: int, message: str) -> dict[str, Any]:
    return {
        "error": message,
        "status": status_code,
    }
