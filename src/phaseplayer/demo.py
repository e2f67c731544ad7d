"""Sample animation so the player has something to scrub out of the box.

The sprite slides across the stage, pops (with a different shrink on the way
back), then shifts colour. Slide and tint are uniform phases; pop is
bidirectional.
"""
from __future__ import annotations

from esper import World

from phaseplayer.components.phase import Phase
from phaseplayer.components.playable_animation import PlayableAnimation
from phaseplayer.components.stage_visual import StageVisual
from phaseplayer.world import create_world

START_COLOR = (66, 133, 244)
END_COLOR = (244, 160, 0)
POP_SCALE = 1.5


def smoothstep(t: float) -> float:
    t = max(0.0, min(1.0, t))
    return t * t * (3.0 - 2.0 * t)


def ease_out_back(t: float, overshoot: float = 1.70158) -> float:
    t = max(0.0, min(1.0, t)) - 1.0
    return 1.0 + t * t * ((overshoot + 1.0) * t + overshoot)


def lerp_color(a: tuple[int, int, int], b: tuple[int, int, int], t: float) -> tuple[int, int, int]:
    return tuple(int(round(ca + (cb - ca) * t)) for ca, cb in zip(a, b))  # type: ignore[return-value]


def build_demo_animation(visual: StageVisual) -> PlayableAnimation:
    def slide(progress: float) -> None:
        visual.x = smoothstep(progress)

    def pop(progress: float) -> None:
        visual.scale = 1.0 + (POP_SCALE - 1.0) * ease_out_back(progress)

    def shrink(progress: float) -> None:
        visual.scale = POP_SCALE - (POP_SCALE - 1.0) * progress

    def tint(progress: float) -> None:
        visual.color = lerp_color(START_COLOR, END_COLOR, progress)
        visual.alpha = 1.0 - 0.4 * progress

    return PlayableAnimation.of([
        Phase.uniform(slide, name="Slide"),
        Phase.bidirectional(forward=pop, reverse=shrink, name="Pop"),
        Phase.uniform(tint, name="Tint"),
    ])


def create_demo_world() -> World:
    """Build a world holding the demo animation and the sprite it moves."""
    visual = StageVisual(color=START_COLOR)
    world = create_world(build_demo_animation(visual))
    world.create_entity(visual)
    return world
