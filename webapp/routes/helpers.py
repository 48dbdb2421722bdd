"""Request handling helpers."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from flask import Request

from hasselattice.elements.element_set import ElementSet, parse_elements
from hasselattice.errors import InvalidInput
from hasselattice.types import OutputFormat

_TRUE_VALUES = {"1", "true", "on", "yes"}


@dataclass
class DiagramRequest:
    """Parameters of a diagram generation request."""

    elements: ElementSet
    spacing: float
    output_format: OutputFormat
    render: bool = True


def _request_values(request: Request) -> Mapping[str, Any]:
    if request.is_json:
        payload = request.get_json(silent=True)
        if not isinstance(payload, dict):
            raise InvalidInput("JSON body must be an object")
        return payload
    if request.method == "POST":
        return request.form
    return request.args


def _as_flag(value: Any, default: bool) -> bool:
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in _TRUE_VALUES


def parse_diagram_request(request: Request, config: Mapping[str, Any]) -> DiagramRequest:
    """Parses and validates the incoming request for diagram generation."""
    values = _request_values(request)

    elements_value = values.get("elements", config["DEFAULT_ELEMENTS"])
    if elements_value is None:
        raise InvalidInput("Elements must be a string or a list, got null")
    if isinstance(elements_value, list):
        elements = ElementSet(str(v) for v in elements_value)
        if len(elements) == 0:
            raise InvalidInput("At least one element is required")
    else:
        elements = parse_elements(str(elements_value))

    max_elements = int(config["MAX_ELEMENTS"])
    if len(elements) > max_elements:
        raise InvalidInput(
            f"Too many elements ({len(elements)}); at most {max_elements} are allowed"
        )

    raw_spacing = values.get("spacing", config["DEFAULT_SPACING"])
    if raw_spacing is None or isinstance(raw_spacing, bool):
        raise InvalidInput(f"Spacing must be a number, got {raw_spacing!r}")
    try:
        spacing = float(raw_spacing)
    except (TypeError, ValueError) as e:
        raise InvalidInput(f"Spacing must be a number, got {raw_spacing!r}") from e

    output_format = OutputFormat.parse(
        str(values.get("format", config["DEFAULT_FORMAT"]))
    )

    return DiagramRequest(
        elements=elements,
        spacing=spacing,
        output_format=output_format,
        render=_as_flag(values.get("render"), default=True),
    )
