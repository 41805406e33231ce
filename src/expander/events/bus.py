from blinker import Signal
from typing import Dict

class EventBus:
    """Simple event bus leveraging blinker Signal objects."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # Strong references: widget systems are often created without being stored.
        sig.connect(fn, weak=False)

    def emit(self, name: str, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)


# ============================================================================
# RAW INPUT (host window)
# ============================================================================
EVENT_MOUSE_PRESS_RAW = "mouse_press_raw"        # payload: x, y, button, modifiers
EVENT_MOUSE_RELEASE_RAW = "mouse_release_raw"    # payload: x, y, button, modifiers


# ============================================================================
# WIDGET INPUT
# ============================================================================
EVENT_PRESS_START = "press_start"                # payload: entity=int
EVENT_PRESS_END = "press_end"                    # payload: entity=int


# ============================================================================
# LAYOUT
# ============================================================================
EVENT_WIDGET_RESIZED = "widget_resized"          # payload: entity=int, left, bottom, width, height, padding=Padding|None


# ============================================================================
# ANIMATION
# ============================================================================
EVENT_ANIMATION_START = "animation_start"        # payload: entity=int, kind=str ('expand'|'contract')
EVENT_ANIMATION_COMPLETE = "animation_complete"  # payload: entity=int, expanded=bool
