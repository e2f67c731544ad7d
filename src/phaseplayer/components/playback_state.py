"""Playback state resource owned by the playback controller."""
from dataclasses import dataclass
from enum import Enum, auto

from phaseplayer.constants import DEFAULT_SPEED


class PlaybackStatus(Enum):
    """Where the player sits in the phase sequence."""
    IDLE = auto()
    PLAYING_FORWARD = auto()
    PLAYING_REVERSE = auto()
    AT_LOWER_BOUND = auto()
    AT_UPPER_BOUND = auto()


@dataclass
class PlaybackState:
    """Singleton component storing the active phase and its progress.

    ``active_phase_index`` ranges over ``[0, len(phases)]``; the upper value
    means every phase has been played.
    """
    active_phase_index: int = 0
    phase_progress: float = 0.0
    playing_forward: bool = True
    playback_speed: float = DEFAULT_SPEED
