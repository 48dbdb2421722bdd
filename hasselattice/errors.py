"""Error taxonomy shared by the core and its surfaces."""


class HasseLatticeError(Exception):
    """Base class for all errors raised by hasselattice."""


class InvalidInput(HasseLatticeError, ValueError):
    """Malformed or degenerate element list, or an unusable spacing value."""


class RenderFailure(HasseLatticeError, RuntimeError):
    """The external layout engine could not produce output."""


class DecodeFailure(HasseLatticeError, RuntimeError):
    """Rendered bytes could not be read as the requested image format."""


class SaveFailure(HasseLatticeError, OSError):
    """Writing image bytes to disk failed."""
