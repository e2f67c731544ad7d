from __future__ import annotations

import math
from enum import Enum, auto
from typing import Any, Callable, Protocol

from phaseplayer.constants import phase_duration, DEFAULT_SPEED
from phaseplayer.events.bus import EVENT_TICK, EventBus


class DriverStatus(Enum):
    """Direction or resting bound of a progress driver."""
    FORWARD = auto()    # moving toward 1.0
    REVERSE = auto()    # moving toward 0.0
    COMPLETED = auto()  # stopped at 1.0
    DISMISSED = auto()  # stopped at 0.0


TickListener = Callable[[float], None]
StatusListener = Callable[[DriverStatus], None]


class Driver(Protocol):
    """Linear 0..1 progress source consumed by the playback controller."""

    value: float
    duration: float

    @property
    def status(self) -> DriverStatus:
        ...

    @property
    def is_animating(self) -> bool:
        ...

    def add_tick_listener(self, fn: TickListener) -> None:
        ...

    def add_status_listener(self, fn: StatusListener) -> None:
        ...

    def forward(self, from_value: float | None = None) -> None:
        ...

    def reverse(self, from_value: float | None = None) -> None:
        ...

    def stop(self) -> None:
        ...

    def dispose(self) -> None:
        ...


class TickProgressDriver:
    """Advances a value linearly over ``duration`` seconds on each bus tick.

    Starting a run (``forward``/``reverse``) redirects whatever run was in
    flight. Status listeners hear about direction changes when a run starts;
    tick listeners only fire once time has actually passed, so a fresh run does
    not emit a tick of its own. ``advance`` may be called directly to step the
    driver without a bus.
    """

    def __init__(self, event_bus: EventBus | None = None, *, duration: float | None = None) -> None:
        self.value = 0.0
        self.duration = phase_duration(DEFAULT_SPEED) if duration is None else duration
        self._status = DriverStatus.DISMISSED
        self._animating = False
        self._tick_listeners: list[TickListener] = []
        self._status_listeners: list[StatusListener] = []
        self._event_bus = event_bus
        self._disposed = False
        self._run = 0
        if event_bus is not None:
            event_bus.subscribe(EVENT_TICK, self.on_tick)

    @property
    def status(self) -> DriverStatus:
        return self._status

    @property
    def is_animating(self) -> bool:
        return self._animating

    @property
    def disposed(self) -> bool:
        return self._disposed

    def add_tick_listener(self, fn: TickListener) -> None:
        self._tick_listeners.append(fn)

    def add_status_listener(self, fn: StatusListener) -> None:
        self._status_listeners.append(fn)

    def forward(self, from_value: float | None = None) -> None:
        self._start(DriverStatus.FORWARD, from_value)

    def reverse(self, from_value: float | None = None) -> None:
        self._start(DriverStatus.REVERSE, from_value)

    def stop(self) -> None:
        self._animating = False

    def dispose(self) -> None:
        if self._disposed:
            return
        self.stop()
        if self._event_bus is not None:
            self._event_bus.unsubscribe(EVENT_TICK, self.on_tick)
            self._event_bus = None
        self._tick_listeners.clear()
        self._status_listeners.clear()
        self._disposed = True

    def on_tick(self, sender: Any, **kwargs: Any) -> None:
        dt = kwargs.get('dt', 1/60)
        try:
            dt = float(dt)
        except (TypeError, ValueError):
            return
        self.advance(dt)

    def advance(self, dt: float) -> None:
        if not self._animating or dt <= 0.0:
            return
        forward = self._status == DriverStatus.FORWARD
        run = self._run
        if self.duration <= 0.0:
            step = 1.0
        elif math.isinf(self.duration):
            step = 0.0
        else:
            step = dt / self.duration
        if forward:
            self.value = min(1.0, self.value + step)
        else:
            self.value = max(0.0, self.value - step)
        for fn in list(self._tick_listeners):
            fn(self.value)
        if not self._animating or run != self._run:
            # A tick listener redirected or stopped the run.
            return
        if forward and self.value >= 1.0:
            self._animating = False
            self._set_status(DriverStatus.COMPLETED)
        elif not forward and self.value <= 0.0:
            self._animating = False
            self._set_status(DriverStatus.DISMISSED)

    def _start(self, direction: DriverStatus, from_value: float | None) -> None:
        if self._disposed:
            return
        if from_value is not None:
            self.value = max(0.0, min(1.0, float(from_value)))
        self._run += 1
        self._animating = True
        self._set_status(direction)

    def _set_status(self, status: DriverStatus) -> None:
        if status == self._status:
            return
        self._status = status
        for fn in list(self._status_listeners):
            fn(status)
