"""State of an interactive diagram surface.

The lattice builder is a pure function; whatever a surface wants to keep
between actions (the last description, the rendered bytes) lives here.
"""

import logging
from pathlib import Path
from typing import Optional, Tuple

from hasselattice.decode import decode_image
from hasselattice.diagram import build_diagram
from hasselattice.elements.element_set import parse_elements
from hasselattice.io import PathLike, default_filename, save_image
from hasselattice.render import render_description
from hasselattice.types import (
    DEFAULT_ELEMENTS,
    DEFAULT_FORMAT,
    DEFAULT_SPACING,
    DecodedImage,
    DiagramResult,
    OutputFormat,
    RenderConfig,
)


class DiagramSession:
    """Generation parameters plus the most recent diagram and image."""

    def __init__(
        self,
        elements_text: str = DEFAULT_ELEMENTS,
        spacing: float = DEFAULT_SPACING,
        output_format: OutputFormat = DEFAULT_FORMAT,
        config: Optional[RenderConfig] = None,
        display_size: Tuple[Optional[int], Optional[int]] = (None, None),
    ):
        self.elements_text = elements_text
        self.spacing = spacing
        self.output_format = output_format
        self.config = config or RenderConfig()
        self.display_size = display_size
        self.logger = logging.getLogger(self.config.logger_name)

        self.result: Optional[DiagramResult] = None
        self.image_data: Optional[bytes] = None
        self.image: Optional[DecodedImage] = None
        self.image_format: Optional[OutputFormat] = None

    @property
    def description(self) -> str:
        return self.result.description if self.result else ""

    @property
    def subset_count(self) -> int:
        return self.result.subset_count if self.result else 0

    @property
    def has_image_data(self) -> bool:
        return self.image_data is not None

    @property
    def suggested_filename(self) -> str:
        return default_filename(self.image_format or self.output_format)

    def build(self) -> DiagramResult:
        """Parse the element text and rebuild the description without rendering."""
        elements = parse_elements(self.elements_text)
        self.result = build_diagram(elements, self.spacing)
        return self.result

    def generate(self, decode: bool = True) -> Optional[DecodedImage]:
        """
        Build, render and (optionally) decode the diagram.

        The description is stored before rendering, so it stays available
        when rendering or decoding fails. Image data from an earlier
        successful run is only replaced on success.
        """
        result = self.build()
        self.logger.info(
            f"[session] Generating {self.output_format.value} for "
            f"{len(result.elements)} elements ({result.subset_count} subsets)"
        )
        fmt = self.output_format
        data = render_description(result.description, fmt, self.config)
        image: Optional[DecodedImage] = None
        if decode:
            width, height = self.display_size
            image = decode_image(data, fmt, width=width, height=height)

        self.image_data = data
        self.image = image
        self.image_format = fmt
        return image

    def save(self, path: Optional[PathLike] = None) -> Path:
        """Write the current image bytes; defaults to ``hasse.<ext>``."""
        target = path if path is not None else self.suggested_filename
        return save_image(self.image_data, target)
