from phaseplayer.components.playback_state import PlaybackState
from phaseplayer.systems.progress_report import phase_reportable_progress, reportable_progress


def test_phases_before_active_are_full_and_after_are_empty():
    state = PlaybackState(active_phase_index=2, phase_progress=0.3, playing_forward=True)

    assert reportable_progress(state, 5) == [1.0, 1.0, 0.3, 0.0, 0.0]


def test_active_phase_in_reverse_reports_inverted_progress():
    state = PlaybackState(active_phase_index=1, phase_progress=0.25, playing_forward=False)

    assert phase_reportable_progress(state, 1) == 0.75
    assert phase_reportable_progress(state, 0) == 1.0
    assert phase_reportable_progress(state, 2) == 0.0


def test_terminal_index_reports_every_phase_full():
    state = PlaybackState(active_phase_index=3)

    assert reportable_progress(state, 3) == [1.0, 1.0, 1.0]


def test_reporting_does_not_touch_state():
    state = PlaybackState(active_phase_index=1, phase_progress=0.6, playing_forward=False)
    before = (state.active_phase_index, state.phase_progress, state.playing_forward, state.playback_speed)

    reportable_progress(state, 4)

    assert (state.active_phase_index, state.phase_progress, state.playing_forward, state.playback_speed) == before
