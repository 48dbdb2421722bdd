import logging
from pathlib import Path
from typing import Optional, Union

from hasselattice.errors import SaveFailure
from hasselattice.types import OutputFormat

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]

DEFAULT_STEM = "hasse"


def default_filename(output_format: OutputFormat) -> str:
    return f"{DEFAULT_STEM}.{output_format.extension}"


def save_image(data: Optional[bytes], path: PathLike) -> Path:
    """
    Write rendered image bytes verbatim to ``path``.

    Raises:
        SaveFailure: nothing to save, or the write failed. The caller's
            bytes are left untouched so the save can be retried.
    """
    if not data:
        raise SaveFailure("No image data generated yet.")
    target = Path(path)
    try:
        with open(target, mode="wb") as f:
            f.write(data)
    except OSError as e:
        raise SaveFailure(f"Error saving file: {e}") from e
    logger.info(f"[save] Wrote {len(data)} bytes to {target}")
    return target


def write_dot(description: str, path: PathLike) -> Path:
    """Write a DOT description as UTF-8 text."""
    target = Path(path)
    try:
        with open(target, mode="w", encoding="utf-8") as f:
            f.write(description)
    except OSError as e:
        raise SaveFailure(f"Error saving file: {e}") from e
    return target
