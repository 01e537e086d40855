"""Contrast widget: WCAG contrast ratio between two editable color swatches."""

from .design.contrast import contrast_ratio, relative_luminance, hex_to_rgb, is_valid_hex  # noqa: F401
from .design.errors import ContrastError, InvalidColorFormat, InvalidInputType  # noqa: F401

__version__ = "0.1.0"
