"""Phase: one bidirectional segment of a playable animation."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

Transition = Callable[[float], None]


@dataclass(frozen=True, slots=True)
class Phase:
    """A transition that supports forward and reverse playback.

    Build one with :meth:`uniform` or :meth:`bidirectional`; exactly one of the
    two shapes is ever populated.

    * A uniform phase reuses one transition in both directions. Going forward it
      is passed 0.0 -> 1.0, going in reverse 1.0 -> 0.0.
    * A bidirectional phase has independent forward and reverse transitions.
      Both are always passed 0.0 -> 1.0, whichever direction is playing.

    A phase holds no playback position, so the same instance can be replayed
    any number of times.
    """

    uniform_transition: Optional[Transition] = None
    forward_transition: Optional[Transition] = None
    reverse_transition: Optional[Transition] = None
    name: str = ""

    def __post_init__(self) -> None:
        has_uniform = self.uniform_transition is not None
        has_pair = self.forward_transition is not None or self.reverse_transition is not None
        if has_uniform and has_pair:
            raise ValueError("Phase takes a uniform transition or a forward/reverse pair, not both")
        if not has_uniform and not has_pair:
            raise ValueError("Phase requires a uniform transition or a forward/reverse pair")
        if has_pair and (self.forward_transition is None or self.reverse_transition is None):
            raise ValueError("Bidirectional phase requires both forward and reverse transitions")
        for transition in (self.uniform_transition, self.forward_transition, self.reverse_transition):
            if transition is not None and not callable(transition):
                raise TypeError(f"Transition must be callable, got {type(transition).__name__}")

    @classmethod
    def uniform(cls, transition: Transition, *, name: str = "") -> "Phase":
        return cls(uniform_transition=transition, name=name)

    @classmethod
    def bidirectional(cls, forward: Transition, reverse: Transition, *, name: str = "") -> "Phase":
        return cls(forward_transition=forward, reverse_transition=reverse, name=name)

    @property
    def is_uniform(self) -> bool:
        return self.uniform_transition is not None

    @property
    def forward(self) -> Transition:
        if self.uniform_transition is not None:
            return self.uniform_transition
        return self.forward_transition  # type: ignore[return-value]

    @property
    def reverse(self) -> Transition:
        if self.uniform_transition is not None:
            return self.uniform_transition
        return self.reverse_transition  # type: ignore[return-value]
