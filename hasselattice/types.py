"""Core type definitions for diagram generation and rendering."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Tuple

from hasselattice.errors import InvalidInput


class OutputFormat(Enum):
    """Image encodings the layout engine is asked to produce."""

    JPG = "jpg"
    PNG = "png"
    SVG = "svg"

    @property
    def extension(self) -> str:
        return self.value

    @property
    def mimetype(self) -> str:
        return {
            OutputFormat.JPG: "image/jpeg",
            OutputFormat.PNG: "image/png",
            OutputFormat.SVG: "image/svg+xml",
        }[self]

    @property
    def is_vector(self) -> bool:
        return self is OutputFormat.SVG

    @classmethod
    def parse(cls, text: "str | OutputFormat") -> "OutputFormat":
        """Case-insensitive lookup by name; ``jpeg`` is accepted for ``jpg``."""
        if isinstance(text, OutputFormat):
            return text
        key = (text or "").strip().lower()
        if key == "jpeg":
            key = "jpg"
        for fmt in cls:
            if fmt.value == key:
                return fmt
        choices = ", ".join(f.value for f in cls)
        raise InvalidInput(f"Unsupported output format '{text}'. Choose one of: {choices}")


DEFAULT_FORMAT = OutputFormat.PNG
DEFAULT_SPACING = 0.8
DEFAULT_ELEMENTS = "a,b,c,d"


@dataclass
class RenderConfig:
    """Configuration for the external layout engine."""

    engine: str = "dot"
    """Graphviz layout engine name (one of ``graphviz.ENGINES``)."""
    logger_name: str = __name__


@dataclass(frozen=True)
class DiagramResult:
    """Output of the lattice graph builder."""

    description: str
    """Complete DOT description."""

    subset_count: int
    """Number of subsets, 2**N."""

    edge_count: int
    """Number of edge statements, N * 2**(N-1)."""

    elements: Tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class DecodedImage:
    """A rendered diagram decoded for display."""

    width: int
    height: int
    mode: str
    output_format: OutputFormat

    @property
    def size(self) -> Tuple[int, int]:
        return (self.width, self.height)
