from __future__ import annotations

from typing import Any

from phaseplayer.constants import KEY_LEFT, KEY_RIGHT
from phaseplayer.events.bus import (
    EVENT_KEY_PRESS,
    EVENT_MOUSE_DRAG,
    EVENT_MOUSE_PRESS,
    EVENT_MOUSE_RELEASE,
    EVENT_PLAY_FORWARD_REQUEST,
    EVENT_PLAY_REVERSE_REQUEST,
    EVENT_PLAYBACK_SPEED_REQUEST,
    EventBus,
)
from phaseplayer.ui.layout import PlayerLayout, compute_player_layout, speed_from_slider_x

# Extra vertical reach around the slider track so a thin bar is easy to grab.
SLIDER_GRAB_MARGIN = 8


class PlayerInputSystem:
    """Translates pointer and keyboard input into playback requests.

    Clicks on ``<- Prev`` / ``Next ->`` become reverse/forward requests, presses
    and drags on the slider become speed requests (already clamped), and the
    arrow keys mirror the buttons.
    """

    def __init__(self, event_bus: EventBus, window, phase_count: int) -> None:
        self.event_bus = event_bus
        self.window = window
        self.phase_count = phase_count
        self._dragging_slider = False
        event_bus.subscribe(EVENT_MOUSE_PRESS, self.on_mouse_press)
        event_bus.subscribe(EVENT_MOUSE_DRAG, self.on_mouse_drag)
        event_bus.subscribe(EVENT_MOUSE_RELEASE, self.on_mouse_release)
        event_bus.subscribe(EVENT_KEY_PRESS, self.on_key_press)

    @property
    def dragging_slider(self) -> bool:
        return self._dragging_slider

    def layout(self) -> PlayerLayout:
        return compute_player_layout(self.window.width, self.window.height, self.phase_count)

    def on_mouse_press(self, sender: Any, **payload: Any) -> None:
        point = _point(payload)
        if point is None:
            return
        x, y = point
        layout = self.layout()
        if layout.prev_button.contains(x, y):
            self.event_bus.emit(EVENT_PLAY_REVERSE_REQUEST)
        elif layout.next_button.contains(x, y):
            self.event_bus.emit(EVENT_PLAY_FORWARD_REQUEST)
        elif self._on_slider(layout, x, y):
            self._dragging_slider = True
            self.event_bus.emit(EVENT_PLAYBACK_SPEED_REQUEST, speed=speed_from_slider_x(layout, x))

    def on_mouse_drag(self, sender: Any, **payload: Any) -> None:
        if not self._dragging_slider:
            return
        point = _point(payload)
        if point is None:
            return
        layout = self.layout()
        self.event_bus.emit(EVENT_PLAYBACK_SPEED_REQUEST, speed=speed_from_slider_x(layout, point[0]))

    def on_mouse_release(self, sender: Any, **payload: Any) -> None:
        self._dragging_slider = False

    def on_key_press(self, sender: Any, **payload: Any) -> None:
        symbol = payload.get("symbol")
        if symbol == KEY_LEFT:
            self.event_bus.emit(EVENT_PLAY_REVERSE_REQUEST)
        elif symbol == KEY_RIGHT:
            self.event_bus.emit(EVENT_PLAY_FORWARD_REQUEST)

    def _on_slider(self, layout: PlayerLayout, x: float, y: float) -> bool:
        track = layout.slider
        return (
            track.left <= x <= track.right
            and track.bottom - SLIDER_GRAB_MARGIN <= y <= track.top + SLIDER_GRAB_MARGIN
        )


def _point(payload: dict[str, Any]) -> tuple[float, float] | None:
    x = payload.get("x")
    y = payload.get("y")
    if x is None or y is None:
        return None
    try:
        return float(x), float(y)
    except (TypeError, ValueError):
        return None
