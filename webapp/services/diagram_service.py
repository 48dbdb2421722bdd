"""Diagram generation for the HTTP surface."""

import base64
from logging import Logger
from typing import Any, Dict, Mapping, Tuple

from flask import current_app

from hasselattice.decode import decode_image
from hasselattice.diagram import build_diagram
from hasselattice.errors import DecodeFailure, RenderFailure
from hasselattice.render import render_description
from hasselattice.types import DiagramResult, RenderConfig
from webapp.routes.helpers import DiagramRequest


class DiagramServiceError(Exception):
    """A collaborator failure that still carries the generated description."""

    def __init__(self, cause: Exception, result: DiagramResult):
        super().__init__(str(cause))
        self.cause = cause
        self.result = result


def render_config_from(config: Mapping[str, Any]) -> RenderConfig:
    return RenderConfig(
        engine=config["GRAPHVIZ_ENGINE"],
        logger_name="webapp.render",
    )


def describe(result: DiagramResult, req: DiagramRequest) -> Dict[str, Any]:
    return {
        "elements": list(result.elements),
        "description": result.description,
        "subset_count": result.subset_count,
        "edge_count": result.edge_count,
        "spacing": req.spacing,
        "format": req.output_format.value,
    }


def render_image(req: DiagramRequest) -> Tuple[DiagramResult, bytes]:
    """Build and render; collaborator failures are wrapped with the description."""
    result = build_diagram(req.elements, req.spacing)
    try:
        data = render_description(
            result.description,
            req.output_format,
            render_config_from(current_app.config),
        )
    except RenderFailure as e:
        raise DiagramServiceError(e, result) from e
    return result, data


def generate_diagram(req: DiagramRequest) -> Dict[str, Any]:
    """
    Build the diagram and, unless ``req.render`` is false, render and decode it.

    Returns:
        JSON-ready dictionary with the description, counts and, when rendered,
        the base64 image and its pixel size.
    """
    logger: Logger = current_app.logger

    if not req.render:
        result = build_diagram(req.elements, req.spacing)
        logger.info(f"[diagram] Built {result.edge_count} edges (no render)")
        return describe(result, req)

    result, data = render_image(req)
    try:
        image = decode_image(data, req.output_format)
    except DecodeFailure as e:
        raise DiagramServiceError(e, result) from e

    logger.info(
        f"[diagram] Rendered {result.subset_count} subsets as "
        f"{req.output_format.value} ({image.width}x{image.height})"
    )
    payload = describe(result, req)
    payload.update(
        {
            "image": base64.b64encode(data).decode("ascii"),
            "mimetype": req.output_format.mimetype,
            "width": image.width,
            "height": image.height,
        }
    )
    return payload
