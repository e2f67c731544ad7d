from blinker import Signal
from typing import Dict

class EventBus:
    """Simple event bus leveraging blinker Signal objects."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # Use weak=False to retain strong reference to bound methods so systems not kept in a variable still receive events.
        sig.connect(fn, weak=False)

    def unsubscribe(self, name: str, fn):
        sig = self._signals.get(name)
        if sig:
            sig.disconnect(fn)

    def emit(self, name: str, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)


# ============================================================================
# SYSTEM & TIMING
# ============================================================================
EVENT_TICK = "tick"                                # payload: dt=float (seconds)


# ============================================================================
# INPUT & INTERACTION
# ============================================================================
EVENT_MOUSE_PRESS = "mouse_press"                  # payload: x, y, button
EVENT_MOUSE_DRAG = "mouse_drag"                    # payload: x, y, dx, dy, buttons
EVENT_MOUSE_RELEASE = "mouse_release"              # payload: x, y, button
EVENT_KEY_PRESS = "key_press"                      # payload: symbol, modifiers


# ============================================================================
# PLAYBACK COMMANDS
# ============================================================================
EVENT_PLAY_FORWARD_REQUEST = "play_forward_request"        # payload: none
EVENT_PLAY_REVERSE_REQUEST = "play_reverse_request"        # payload: none
EVENT_PLAYBACK_SPEED_REQUEST = "playback_speed_request"    # payload: speed=float


# ============================================================================
# PLAYBACK STATE
# ============================================================================
EVENT_PHASE_PROGRESS = "phase_progress"                    # payload: phase_index=int, phase_progress=float, playing_forward=bool
EVENT_PHASE_ADVANCED = "phase_advanced"                    # payload: previous_index=int, new_index=int
EVENT_PHASE_RETREATED = "phase_retreated"                  # payload: previous_index=int, new_index=int
EVENT_PLAYBACK_SPEED_CHANGED = "playback_speed_changed"    # payload: speed=float
EVENT_DRIVER_STATUS = "driver_status"                      # payload: status=DriverStatus
