"""Global configuration and constants for the contrast widget."""

from __future__ import annotations

import os
from typing import Final

DATA_DIR: Final = os.environ.get("CONTRAST_WIDGET_DATA_DIR", "data")
STATE_FILENAME: Final = "widget_state.json"

# Initial swatch colors for a fresh widget
DEFAULT_FOREGROUND: Final = "#898989"
DEFAULT_BACKGROUND: Final = "#454545"

INVALID_HEX_MESSAGE: Final = "Please enter a valid HEX value"
NOTIFICATION_TIMEOUT_MS: Final = int(os.environ.get("CONTRAST_WIDGET_TOAST_MS", "3000"))

LOG_LEVEL: Final = os.environ.get("CONTRAST_WIDGET_LOG_LEVEL", "INFO")
RESET_NOTICE: Final = "Saved widget settings were reset"
