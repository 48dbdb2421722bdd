"""Decode rendered diagram bytes into a displayable image."""

import io
import logging
from typing import Optional

from PIL import Image, UnidentifiedImageError

from hasselattice.errors import DecodeFailure
from hasselattice.types import DecodedImage, OutputFormat

logger = logging.getLogger(__name__)

_PIL_FORMATS = {OutputFormat.JPG: "JPEG", OutputFormat.PNG: "PNG"}


def load_image(
    data: bytes,
    output_format: OutputFormat,
    width: Optional[int] = None,
    height: Optional[int] = None,
) -> Image.Image:
    """
    Open ``data`` as a fully loaded Pillow image.

    SVG is rasterised with CairoSVG first; ``width``/``height`` set the target
    pixel size (CairoSVG keeps the aspect ratio when only one is given).
    Raster data is returned at its native size.

    Raises:
        DecodeFailure: empty data, or bytes that are not a valid image of
            the requested format.
    """
    if not data:
        raise DecodeFailure("No image data to decode")

    if output_format.is_vector:
        data = _rasterize_svg(data, width, height)
        expected = "PNG"
    else:
        expected = _PIL_FORMATS[output_format]

    try:
        with io.BytesIO(data) as stream:
            with Image.open(stream) as image:
                image.load()
                if image.format != expected:
                    raise DecodeFailure(
                        f"Expected {expected} data but got {image.format}"
                    )
                # copy() detaches the pixels from the closed stream
                return image.copy()
    except (UnidentifiedImageError, OSError, SyntaxError) as e:
        raise DecodeFailure(
            f"Could not decode {output_format.value} image: {e}"
        ) from e


def decode_image(
    data: bytes,
    output_format: OutputFormat,
    width: Optional[int] = None,
    height: Optional[int] = None,
) -> DecodedImage:
    """Decode ``data`` and describe the resulting image."""
    image = load_image(data, output_format, width=width, height=height)
    logger.debug(
        f"[decode] {output_format.value}: {image.width}x{image.height} ({image.mode})"
    )
    return DecodedImage(
        width=image.width,
        height=image.height,
        mode=image.mode,
        output_format=output_format,
    )


def _rasterize_svg(data: bytes, width: Optional[int], height: Optional[int]) -> bytes:
    try:
        # Import locally: cairosvg needs the system cairo library
        import cairosvg
    except (ImportError, OSError) as e:
        raise DecodeFailure(f"SVG display needs CairoSVG and Cairo: {e}") from e

    try:
        return cairosvg.svg2png(
            bytestring=data,
            output_width=width,
            output_height=height,
            background_color="white",
        )
    except Exception as e:
        # cairosvg surfaces malformed XML through several unrelated exception types
        raise DecodeFailure(f"Could not decode svg image: {e}") from e
