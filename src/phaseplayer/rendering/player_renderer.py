"""Rendering system for the player panel and the demo stage.

The drawing module is passed in so the system can run against a stub when no
display is available; ``main`` hands it the real ``arcade`` module.
"""
from esper import World

from phaseplayer.components.stage_visual import StageVisual
from phaseplayer.systems.playback_controller import PlaybackController
from phaseplayer.ui.layout import (
    PlayerLayout,
    Rect,
    compute_player_layout,
    indicator_segments,
    slider_x_for_speed,
)

# arcade.color equivalents, kept as plain tuples.
PLAYED_COLOR = (0, 0, 255)
REMAINING_COLOR = (128, 128, 128)
TEXT_COLOR = (255, 255, 255)
BUTTON_FILL = (72, 61, 139)
BUTTON_OUTLINE = (255, 255, 255)
ACTIVE_LABEL_COLOR = (224, 255, 255)
STAGE_BACKGROUND = (30, 34, 44)
SPRITE_SIZE = 48


class PlayerRenderSystem:
    """Draws the speed slider, per-phase progress bars, buttons and stage."""

    def __init__(self, world: World, window, controller: PlaybackController, arcade=None) -> None:
        self.world = world
        self.window = window
        self.controller = controller
        if arcade is None:
            import arcade
        self.arcade = arcade

    def process(self) -> PlayerLayout:
        layout = compute_player_layout(self.window.width, self.window.height, self.controller.phase_count)
        self._draw_stage(layout.stage)
        self._draw_speed_slider(layout)
        self._draw_indicators(layout)
        self._draw_button(layout.prev_button, "<- Prev")
        self._draw_button(layout.next_button, "Next ->")
        return layout

    def _draw_stage(self, stage: Rect) -> None:
        if stage.height <= 0:
            return
        self.arcade.draw_lbwh_rectangle_filled(stage.left, stage.bottom, stage.width, stage.height, STAGE_BACKGROUND)
        travel = max(0.0, stage.width - SPRITE_SIZE * 2)
        for _, visual in self.world.get_component(StageVisual):
            cx = stage.left + SPRITE_SIZE + visual.x * travel
            cy = stage.center_y
            size = SPRITE_SIZE * visual.scale
            alpha = int(max(0.0, min(1.0, visual.alpha)) * 255)
            self.arcade.draw_lbwh_rectangle_filled(
                cx - size / 2,
                cy - size / 2,
                size,
                size,
                (*visual.color, alpha),
            )

    def _draw_speed_slider(self, layout: PlayerLayout) -> None:
        self.arcade.draw_text(
            f"Playback Speed: {self.controller.speed:.2f}x",
            layout.label_x,
            layout.label_y,
            TEXT_COLOR,
            14,
        )
        track = layout.slider
        knob_x = slider_x_for_speed(layout, self.controller.speed)
        self.arcade.draw_lbwh_rectangle_filled(track.left, track.center_y - 2, track.width, 4, REMAINING_COLOR)
        self.arcade.draw_lbwh_rectangle_filled(track.left, track.center_y - 2, knob_x - track.left, 4, PLAYED_COLOR)
        self.arcade.draw_circle_filled(knob_x, track.center_y, track.height / 2, PLAYED_COLOR)

    def _draw_indicators(self, layout: PlayerLayout) -> None:
        animation = self.controller.animation
        active = self.controller.active_phase_index
        progress = self.controller.get_reportable_progress()
        for i, (bar, percent) in enumerate(zip(layout.indicators, progress)):
            played_width, remaining_width = indicator_segments(bar, percent)
            if played_width > 0:
                self.arcade.draw_lbwh_rectangle_filled(bar.left, bar.bottom, played_width, bar.height, PLAYED_COLOR)
            if remaining_width > 0:
                self.arcade.draw_lbwh_rectangle_filled(
                    bar.left + played_width,
                    bar.bottom,
                    remaining_width,
                    bar.height,
                    REMAINING_COLOR,
                )
            self.arcade.draw_text(
                animation.phase_label(i),
                bar.center_x,
                bar.top + 4,
                ACTIVE_LABEL_COLOR if i == active else TEXT_COLOR,
                11,
                anchor_x="center",
            )

    def _draw_button(self, rect: Rect, label: str) -> None:
        self.arcade.draw_lbwh_rectangle_filled(rect.left, rect.bottom, rect.width, rect.height, BUTTON_FILL)
        self.arcade.draw_lbwh_rectangle_outline(rect.left, rect.bottom, rect.width, rect.height, BUTTON_OUTLINE, border_width=2)
        self.arcade.draw_text(
            label,
            rect.center_x,
            rect.center_y,
            TEXT_COLOR,
            16,
            anchor_x="center",
            anchor_y="center",
            bold=True,
        )
