"""Per-phase completion fractions for progress indicators.

Pure reads of :class:`PlaybackState`; nothing here mutates state.
"""
from __future__ import annotations

from phaseplayer.components.playback_state import PlaybackState


def phase_reportable_progress(state: PlaybackState, index: int) -> float:
    """Return how much of phase ``index`` should show as played."""

    active = state.active_phase_index
    if index < active:
        return 1.0
    if index == active:
        if state.playing_forward:
            return state.phase_progress
        return 1.0 - state.phase_progress
    return 0.0


def reportable_progress(state: PlaybackState, phase_count: int) -> list[float]:
    return [phase_reportable_progress(state, i) for i in range(phase_count)]
