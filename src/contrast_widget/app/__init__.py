"""Application state for the contrast widget (persistence, no Qt)."""

from .widget_state import WidgetState, StateStore, STATE_VERSION  # noqa: F401
