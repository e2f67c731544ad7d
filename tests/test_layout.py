import math

import pytest

from phaseplayer.constants import SPEED_MAX, SPEED_MIN, phase_duration
from phaseplayer.ui.layout import (
    clamp_speed,
    compute_player_layout,
    Rect,
    indicator_flex,
    indicator_segments,
    slider_x_for_speed,
    speed_from_slider_x,
)


def test_layout_stacks_panel_rows_bottom_up():
    layout = compute_player_layout(800, 600, 3)

    assert len(layout.indicators) == 3
    assert layout.prev_button.right < layout.next_button.left
    assert layout.prev_button.top < layout.indicators[0].bottom
    assert layout.indicators[0].top < layout.slider.bottom
    assert layout.slider.top < layout.label_y
    assert layout.label_y < layout.stage.bottom
    assert layout.stage.top <= 600


def test_indicators_split_width_without_overlap():
    layout = compute_player_layout(900, 600, 3)
    bars = layout.indicators

    assert bars[0].left > 0
    assert bars[0].right < bars[1].left
    assert bars[1].right < bars[2].left
    assert bars[2].right < 900
    assert bars[0].width == pytest.approx(bars[2].width)


def test_layout_without_phases_has_no_indicators():
    layout = compute_player_layout(800, 600, 0)
    assert layout.indicators == []


def test_slider_maps_track_to_speed_range():
    layout = compute_player_layout(800, 600, 2)
    track = layout.slider

    assert speed_from_slider_x(layout, track.left) == SPEED_MIN
    assert speed_from_slider_x(layout, track.right) == SPEED_MAX
    assert speed_from_slider_x(layout, track.center_x) == pytest.approx(1.0)
    assert speed_from_slider_x(layout, track.left - 50) == SPEED_MIN
    assert speed_from_slider_x(layout, track.right + 50) == SPEED_MAX
    assert slider_x_for_speed(layout, 1.0) == pytest.approx(track.center_x)
    assert slider_x_for_speed(layout, 5.0) == pytest.approx(track.right)


def test_clamp_speed_bounds():
    assert clamp_speed(-1.0) == 0.0
    assert clamp_speed(0.7) == 0.7
    assert clamp_speed(3.0) == 2.0


def test_indicator_flex_weights():
    assert indicator_flex(0.0) == (0, 100)
    assert indicator_flex(0.25) == (25, 75)
    assert indicator_flex(1.0) == (100, 0)


def test_phase_duration_scales_with_speed():
    assert phase_duration(1.0) == 0.25
    assert phase_duration(2.0) == 0.125
    assert phase_duration(0.5) == 0.5
    assert phase_duration(0.3) == 0.833
    assert math.isinf(phase_duration(0.0))
    assert math.isinf(phase_duration(1e-320))
    assert math.isinf(phase_duration(float("nan")))


def test_indicator_segments_split_bar_width():
    bar = Rect(10, 0, 200, 5)

    assert indicator_segments(bar, 0.0) == (0.0, 200)
    assert indicator_segments(bar, 0.25) == (50.0, 150.0)
    assert indicator_segments(bar, 1.0) == (200.0, 0.0)
