"""Entry point for the Phase Player animation scrubbing tool.

Sets up the ECS world, event bus, playback systems, and Arcade window around
the demo animation.
"""
import logging

import arcade
from arcade import Window, run, set_background_color, color
from phaseplayer.constants import UPDATE_RATE, WINDOW_HEIGHT, WINDOW_TITLE, WINDOW_WIDTH
from phaseplayer.components.playable_animation import PlayableAnimation
from phaseplayer.demo import create_demo_world
from phaseplayer.events.bus import (
    EVENT_KEY_PRESS,
    EVENT_MOUSE_DRAG,
    EVENT_MOUSE_PRESS,
    EVENT_MOUSE_RELEASE,
    EVENT_TICK,
    EventBus,
)
from phaseplayer.rendering.player_renderer import PlayerRenderSystem
from phaseplayer.systems.input import PlayerInputSystem
from phaseplayer.systems.playback_controller import PlaybackController
from phaseplayer.world import create_world


class AnimationPlayerWindow(Window):
    """Plays a :class:`PlayableAnimation` forward and backward one phase at a time.

    Without an animation the built-in demo is loaded.
    """

    def __init__(self, animation: PlayableAnimation | None = None):
        super().__init__(WINDOW_WIDTH, WINDOW_HEIGHT, WINDOW_TITLE, resizable=True)
        self.set_update_rate(UPDATE_RATE)
        self.event_bus = EventBus()
        self.world = create_demo_world() if animation is None else create_world(animation)
        self.controller = PlaybackController(self.world, self.event_bus)
        self.input_system = PlayerInputSystem(self.event_bus, self, self.controller.phase_count)
        self.render_system = PlayerRenderSystem(self.world, self, self.controller, arcade)
        set_background_color(color.BLACK)

    def on_draw(self):
        self.clear()
        self.render_system.process()

    def on_update(self, delta_time: float):
        self.event_bus.emit(EVENT_TICK, dt=delta_time)

    def on_mouse_press(self, x: float, y: float, button: int, modifiers: int):
        self.event_bus.emit(EVENT_MOUSE_PRESS, x=x, y=y, button=button)

    def on_mouse_drag(self, x: float, y: float, dx: float, dy: float, buttons: int, modifiers: int):
        self.event_bus.emit(EVENT_MOUSE_DRAG, x=x, y=y, dx=dx, dy=dy, buttons=buttons)

    def on_mouse_release(self, x: float, y: float, button: int, modifiers: int):
        self.event_bus.emit(EVENT_MOUSE_RELEASE, x=x, y=y, button=button)

    def on_key_press(self, symbol: int, modifiers: int):
        self.event_bus.emit(EVENT_KEY_PRESS, symbol=symbol, modifiers=modifiers)

    def on_close(self):
        self.controller.dispose()
        super().on_close()


def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")
    window = AnimationPlayerWindow()
    run()

if __name__ == "__main__":
    main()
