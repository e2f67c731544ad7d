import math

# Base length of one phase at playback speed 1.0, in milliseconds.
STANDARD_PHASE_TIME_MS = 250

# Playback speed slider range; the controller itself does not clamp.
SPEED_MIN = 0.0
SPEED_MAX = 2.0
DEFAULT_SPEED = 1.0

WINDOW_WIDTH = 800
WINDOW_HEIGHT = 600
WINDOW_TITLE = "Phase Player"
UPDATE_RATE = 1 / 60

# Player panel geometry (pixels). The panel sits along the bottom of the window
# and the stage preview fills whatever is left above it.
PANEL_PADDING = 15
SPEED_LABEL_HEIGHT = 20
SLIDER_HEIGHT = 24
INDICATOR_PADDING = 10
INDICATOR_HEIGHT = 5
BUTTON_HEIGHT = 40
BUTTON_GAP = 10

# arcade.key.LEFT / arcade.key.RIGHT, kept numeric so input handling stays
# importable without a display.
KEY_LEFT = 65361
KEY_RIGHT = 65363


def phase_duration(speed: float) -> float:
    """Seconds one phase takes at ``speed``.

    Durations are rounded to whole milliseconds. A speed of zero or below, NaN,
    or one so small the duration overflows maps to ``math.inf``: the driver
    never moves and the phase never completes.
    """
    if math.isnan(speed) or speed <= 0.0:
        return math.inf
    ms = STANDARD_PHASE_TIME_MS / speed
    if not math.isfinite(ms):
        return math.inf
    return round(ms) / 1000.0
