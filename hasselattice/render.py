"""Run the Graphviz layout engine on a DOT description."""

import logging
from typing import Optional

import graphviz

from hasselattice.errors import InvalidInput, RenderFailure
from hasselattice.types import OutputFormat, RenderConfig


def render_description(
    description: str,
    output_format: OutputFormat,
    config: Optional[RenderConfig] = None,
) -> bytes:
    """
    Pipe ``description`` through the layout engine and return the encoded image.

    Raises:
        InvalidInput: ``config.engine`` is not a Graphviz layout engine.
        RenderFailure: executable missing, non-zero exit, or empty output.
    """
    config = config or RenderConfig()
    logger = logging.getLogger(config.logger_name)
    if config.engine not in graphviz.ENGINES:
        raise InvalidInput(f"Unknown Graphviz layout engine '{config.engine}'")

    logger.info(
        f"[render] {config.engine} -T{output_format.value} "
        f"({len(description)} chars of DOT)"
    )
    try:
        data = graphviz.pipe(
            config.engine, output_format.value, description.encode("utf-8")
        )
    except graphviz.ExecutableNotFound as e:
        raise RenderFailure(
            f"Graphviz executable '{config.engine}' not found. Please install Graphviz."
        ) from e
    except graphviz.CalledProcessError as e:
        stderr = (e.stderr or b"").decode("utf-8", errors="replace").strip()
        raise RenderFailure(
            f"Graphviz failed with exit code {e.returncode}: {stderr}"
        ) from e

    if not data:
        raise RenderFailure("Graphviz produced no output")

    logger.debug(f"[render] Received {len(data)} bytes of {output_format.value}")
    return data


def graphviz_version() -> Optional[str]:
    """Installed Graphviz version as ``"major.minor.patch"``, or ``None``."""
    try:
        version = graphviz.version()
    except (graphviz.ExecutableNotFound, graphviz.CalledProcessError, RuntimeError):
        logging.getLogger(__name__).warning("[render] Graphviz is not available")
        return None
    return ".".join(str(part) for part in version)
