from __future__ import annotations

import logging
import math
from typing import Any

from esper import World

from phaseplayer.components.playable_animation import PlayableAnimation
from phaseplayer.components.playback_state import PlaybackState, PlaybackStatus
from phaseplayer.constants import phase_duration
from phaseplayer.events.bus import (
    EVENT_DRIVER_STATUS,
    EVENT_PHASE_ADVANCED,
    EVENT_PHASE_PROGRESS,
    EVENT_PHASE_RETREATED,
    EVENT_PLAY_FORWARD_REQUEST,
    EVENT_PLAY_REVERSE_REQUEST,
    EVENT_PLAYBACK_SPEED_CHANGED,
    EVENT_PLAYBACK_SPEED_REQUEST,
    EventBus,
)
from phaseplayer.systems.progress_driver import Driver, DriverStatus, TickProgressDriver
from phaseplayer.systems.progress_report import phase_reportable_progress, reportable_progress
from phaseplayer.world import get_playable_animation, get_playback_state

logger = logging.getLogger(__name__)


class PlaybackController:
    """Plays the phases of a :class:`PlayableAnimation` one at a time.

    A single linear driver runs 0.0 -> 1.0 for the active phase going forward
    and 1.0 -> 0.0 for the previous phase going in reverse. Each driver tick is
    mapped onto the active phase:

    * forward: ``phase_progress = value`` and ``phase.forward(phase_progress)``
    * reverse: ``phase_progress = 1.0 - value``; a uniform phase is called with
      ``1.0 - phase_progress`` (the raw driver value, sweeping 1 -> 0) while a
      bidirectional phase's reverse transition is called with
      ``phase_progress`` (sweeping 0 -> 1).

    Only a completed forward run moves the active phase up; only a reverse
    command moves it down, and it does so the moment the command is issued.
    Invalid commands are ignored.
    """

    def __init__(
        self,
        world: World,
        event_bus: EventBus,
        *,
        driver: Driver | None = None,
    ) -> None:
        self.world = world
        self.event_bus = event_bus
        animation = get_playable_animation(world)
        state = get_playback_state(world)
        if animation is None or state is None:
            raise ValueError("PlaybackController requires a world built by create_world")
        self._animation: PlayableAnimation = animation
        self._state: PlaybackState = state
        self._driver: Driver = driver if driver is not None else TickProgressDriver(event_bus)
        self._driver.add_tick_listener(self._on_driver_tick)
        self._driver.add_status_listener(self._on_driver_status)
        self._disposed = False
        self.event_bus.subscribe(EVENT_PLAY_FORWARD_REQUEST, self.on_play_forward_request)
        self.event_bus.subscribe(EVENT_PLAY_REVERSE_REQUEST, self.on_play_reverse_request)
        self.event_bus.subscribe(EVENT_PLAYBACK_SPEED_REQUEST, self.on_speed_request)

    # ------------------------------------------------------------------
    # Read-only state

    @property
    def animation(self) -> PlayableAnimation:
        return self._animation

    @property
    def driver(self) -> Driver:
        return self._driver

    @property
    def phase_count(self) -> int:
        return len(self._animation)

    @property
    def active_phase_index(self) -> int:
        return self._state.active_phase_index

    @property
    def phase_progress(self) -> float:
        return self._state.phase_progress

    @property
    def playing_forward(self) -> bool:
        return self._state.playing_forward

    @property
    def speed(self) -> float:
        return self._state.playback_speed

    @property
    def status(self) -> PlaybackStatus:
        if self._driver.is_animating:
            return PlaybackStatus.PLAYING_FORWARD if self._state.playing_forward else PlaybackStatus.PLAYING_REVERSE
        if self._state.active_phase_index == 0 and self.get_phase_reportable_progress(0) == 0.0:
            return PlaybackStatus.AT_LOWER_BOUND
        if self._state.active_phase_index >= self.phase_count:
            return PlaybackStatus.AT_UPPER_BOUND
        return PlaybackStatus.IDLE

    def get_active_phase_index(self) -> int:
        return self.active_phase_index

    def is_playing_forward(self) -> bool:
        return self.playing_forward

    def get_speed(self) -> float:
        return self.speed

    def get_phase_reportable_progress(self, index: int) -> float:
        return phase_reportable_progress(self._state, index)

    def get_reportable_progress(self) -> list[float]:
        return reportable_progress(self._state, self.phase_count)

    # ------------------------------------------------------------------
    # Commands

    def play_forward(self) -> None:
        """Play the active phase forward from its start."""
        if self._disposed:
            return
        if self._state.active_phase_index >= self.phase_count:
            logger.debug("Ignoring play forward: all %d phases played", self.phase_count)
            return
        self._driver.duration = phase_duration(self._state.playback_speed)
        self._driver.forward(0.0)

    def play_previous_in_reverse(self) -> None:
        """Step back to the previous phase and play it in reverse from its end."""
        if self._disposed:
            return
        if self._state.active_phase_index < 1:
            logger.debug("Ignoring play reverse: already at the first phase")
            return
        previous = self._state.active_phase_index
        self._state.active_phase_index -= 1
        self._state.phase_progress = 1.0
        self.event_bus.emit(
            EVENT_PHASE_RETREATED,
            previous_index=previous,
            new_index=self._state.active_phase_index,
        )
        self._driver.duration = phase_duration(self._state.playback_speed)
        self._driver.reverse(1.0)

    def set_speed(self, value: float) -> None:
        """Store a new playback speed; it applies from the next command on."""
        self._state.playback_speed = value
        self.event_bus.emit(EVENT_PLAYBACK_SPEED_CHANGED, speed=value)

    def dispose(self) -> None:
        """Stop the driver and detach from the event bus. Safe to call twice."""
        if self._disposed:
            return
        self._disposed = True
        self._driver.dispose()
        self.event_bus.unsubscribe(EVENT_PLAY_FORWARD_REQUEST, self.on_play_forward_request)
        self.event_bus.unsubscribe(EVENT_PLAY_REVERSE_REQUEST, self.on_play_reverse_request)
        self.event_bus.unsubscribe(EVENT_PLAYBACK_SPEED_REQUEST, self.on_speed_request)

    # ------------------------------------------------------------------
    # Bus handlers

    def on_play_forward_request(self, sender: Any, **payload: Any) -> None:
        self.play_forward()

    def on_play_reverse_request(self, sender: Any, **payload: Any) -> None:
        self.play_previous_in_reverse()

    def on_speed_request(self, sender: Any, **payload: Any) -> None:
        speed = payload.get("speed")
        if speed is None:
            return
        try:
            speed_f = float(speed)
        except (TypeError, ValueError):
            return
        if not math.isfinite(speed_f):
            return
        self.set_speed(speed_f)

    # ------------------------------------------------------------------
    # Driver callbacks

    def _on_driver_tick(self, value: float) -> None:
        state = self._state
        if state.active_phase_index >= self.phase_count:
            return
        phase = self._animation[state.active_phase_index]
        if state.playing_forward:
            state.phase_progress = value
            phase.forward(state.phase_progress)
        else:
            state.phase_progress = 1.0 - value
            if phase.is_uniform:
                phase.reverse(1.0 - state.phase_progress)
            else:
                phase.reverse(state.phase_progress)
        self.event_bus.emit(
            EVENT_PHASE_PROGRESS,
            phase_index=state.active_phase_index,
            phase_progress=state.phase_progress,
            playing_forward=state.playing_forward,
        )

    def _on_driver_status(self, status: DriverStatus) -> None:
        state = self._state
        if status == DriverStatus.FORWARD:
            state.playing_forward = True
        elif status == DriverStatus.REVERSE:
            state.playing_forward = False
        elif status == DriverStatus.DISMISSED:
            logger.info("Animation reached 0.0.")
        elif status == DriverStatus.COMPLETED:
            logger.info("Animation reached 1.0.")
            if state.playing_forward and state.active_phase_index < self.phase_count:
                previous = state.active_phase_index
                state.active_phase_index += 1
                state.phase_progress = 0.0
                self.event_bus.emit(
                    EVENT_PHASE_ADVANCED,
                    previous_index=previous,
                    new_index=state.active_phase_index,
                )
        logger.info(
            "New active phase: %d, phase progress: %.3f",
            state.active_phase_index,
            state.phase_progress,
        )
        self.event_bus.emit(EVENT_DRIVER_STATUS, status=status)
