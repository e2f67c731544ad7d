from __future__ import annotations

from esper import World

from phaseplayer.components.playable_animation import PlayableAnimation
from phaseplayer.components.playback_state import PlaybackState
from phaseplayer.constants import DEFAULT_SPEED


def create_world(
    animation: PlayableAnimation | None,
    *,
    speed: float = DEFAULT_SPEED,
) -> World:
    """Create a world holding the animation and a fresh playback state.

    Both live on a single player entity; systems look them up by component type.
    """
    if animation is None:
        raise ValueError("create_world requires a PlayableAnimation")
    if not isinstance(animation, PlayableAnimation):
        raise TypeError(f"Expected PlayableAnimation, got {type(animation).__name__}")
    world = World()
    world.create_entity(animation, PlaybackState(playback_speed=speed))
    return world


def get_playable_animation(world: World) -> PlayableAnimation | None:
    for _, animation in world.get_component(PlayableAnimation):
        return animation
    return None


def get_playback_state(world: World) -> PlaybackState | None:
    for _, state in world.get_component(PlaybackState):
        return state
    return None
