"""Color math for the contrast widget.

Contains the hex parsing, relative luminance and contrast ratio helpers plus
their error types.
"""

from .contrast import (  # noqa: F401
    ColorInput,
    is_valid_hex,
    hex_to_rgb,
    relative_luminance,
    contrast_ratio,
)
from .errors import ContrastError, InvalidColorFormat, InvalidInputType  # noqa: F401
