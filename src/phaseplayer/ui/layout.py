from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Tuple

from phaseplayer.constants import (
    BUTTON_GAP,
    BUTTON_HEIGHT,
    INDICATOR_HEIGHT,
    INDICATOR_PADDING,
    PANEL_PADDING,
    SLIDER_HEIGHT,
    SPEED_LABEL_HEIGHT,
    SPEED_MAX,
    SPEED_MIN,
)


@dataclass(slots=True)
class Rect:
    """Axis aligned rectangle in window coordinates (origin bottom-left)."""
    left: float
    bottom: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.left + self.width

    @property
    def top(self) -> float:
        return self.bottom + self.height

    @property
    def center_x(self) -> float:
        return self.left + self.width / 2

    @property
    def center_y(self) -> float:
        return self.bottom + self.height / 2

    def contains(self, x: float, y: float) -> bool:
        return self.left <= x <= self.right and self.bottom <= y <= self.top


@dataclass(slots=True)
class PlayerLayout:
    window_width: int
    window_height: int
    prev_button: Rect
    next_button: Rect
    slider: Rect
    label_x: float
    label_y: float
    stage: Rect
    indicators: List[Rect] = field(default_factory=list)


def compute_player_layout(window_width: int, window_height: int, phase_count: int) -> PlayerLayout:
    """Lay out the player panel from the bottom of the window upward.

    Buttons sit on the bottom row, one progress bar per phase above them, then
    the speed slider and its label. The stage preview takes the rest.
    """
    inner_width = max(0.0, window_width - 2 * PANEL_PADDING)

    button_width = max(0.0, (inner_width - BUTTON_GAP) / 2)
    button_bottom = PANEL_PADDING
    prev_button = Rect(PANEL_PADDING, button_bottom, button_width, BUTTON_HEIGHT)
    next_button = Rect(PANEL_PADDING + button_width + BUTTON_GAP, button_bottom, button_width, BUTTON_HEIGHT)

    indicator_bottom = prev_button.top + INDICATOR_PADDING
    indicators: List[Rect] = []
    if phase_count > 0:
        column_width = window_width / phase_count
        for i in range(phase_count):
            left = i * column_width + INDICATOR_PADDING
            width = max(0.0, column_width - 2 * INDICATOR_PADDING)
            indicators.append(Rect(left, indicator_bottom, width, INDICATOR_HEIGHT))
    indicator_top = indicator_bottom + INDICATOR_HEIGHT

    slider = Rect(PANEL_PADDING, indicator_top + INDICATOR_PADDING + PANEL_PADDING, inner_width, SLIDER_HEIGHT)
    label_x = PANEL_PADDING
    label_y = slider.top + PANEL_PADDING
    stage_bottom = label_y + SPEED_LABEL_HEIGHT + PANEL_PADDING
    stage = Rect(
        PANEL_PADDING,
        stage_bottom,
        inner_width,
        max(0.0, window_height - PANEL_PADDING - stage_bottom),
    )

    return PlayerLayout(
        window_width=window_width,
        window_height=window_height,
        prev_button=prev_button,
        next_button=next_button,
        slider=slider,
        label_x=label_x,
        label_y=label_y,
        stage=stage,
        indicators=indicators,
    )


def clamp_speed(value: float) -> float:
    return max(SPEED_MIN, min(SPEED_MAX, value))


def speed_from_slider_x(layout: PlayerLayout, x: float) -> float:
    """Map a pointer x coordinate on the slider track to a clamped speed."""
    track = layout.slider
    if track.width <= 0:
        return SPEED_MIN
    fraction = (x - track.left) / track.width
    return clamp_speed(SPEED_MIN + fraction * (SPEED_MAX - SPEED_MIN))


def slider_x_for_speed(layout: PlayerLayout, speed: float) -> float:
    track = layout.slider
    fraction = (clamp_speed(speed) - SPEED_MIN) / (SPEED_MAX - SPEED_MIN)
    return track.left + fraction * track.width


def indicator_flex(percent: float) -> Tuple[int, int]:
    """Integer flex weights for the played and remaining parts of a bar."""
    return round(percent * 100), round((1.0 - percent) * 100)


def indicator_segments(bar: Rect, percent: float) -> Tuple[float, float]:
    """Widths of the played and remaining parts of a progress bar."""
    played, remaining = indicator_flex(percent)
    total = played + remaining
    played_width = bar.width * played / total if total else 0.0
    return played_width, bar.width - played_width
