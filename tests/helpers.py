from __future__ import annotations

from typing import Sequence

from esper import World

from phaseplayer.components.phase import Phase
from phaseplayer.components.playable_animation import PlayableAnimation
from phaseplayer.events.bus import EVENT_TICK, EventBus
from phaseplayer.systems.playback_controller import PlaybackController
from phaseplayer.world import create_world


class Recorder:
    """Transition stand-in that remembers every progress value it was given."""

    def __init__(self) -> None:
        self.calls: list[float] = []

    def __call__(self, progress: float) -> None:
        self.calls.append(progress)

    @property
    def last(self) -> float | None:
        return self.calls[-1] if self.calls else None


def drive(bus: EventBus, ticks: int, dt: float = 0.02) -> None:
    for _ in range(ticks):
        bus.emit(EVENT_TICK, dt=dt)


def make_player(
    phases: Sequence[Phase],
    *,
    speed: float = 1.0,
) -> tuple[World, EventBus, PlaybackController]:
    """Build a world, bus and controller around ``phases``."""

    bus = EventBus()
    world = create_world(PlayableAnimation.of(phases), speed=speed)
    controller = PlaybackController(world, bus)
    return world, bus, controller
