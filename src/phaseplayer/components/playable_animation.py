from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Tuple

from phaseplayer.components.phase import Phase


@dataclass(frozen=True, slots=True)
class PlayableAnimation:
    """A series of phases, each of which can be played forward and backward."""

    phases: Tuple[Phase, ...] = ()

    def __post_init__(self) -> None:
        if self.phases is None:
            raise ValueError("PlayableAnimation requires a sequence of phases")
        phases = tuple(self.phases)
        for index, phase in enumerate(phases):
            if not isinstance(phase, Phase):
                raise TypeError(f"Phase {index} is {type(phase).__name__}, expected Phase")
        # Frozen dataclass: normalise lists and generators into a tuple.
        object.__setattr__(self, "phases", phases)

    @classmethod
    def of(cls, phases: Iterable[Phase]) -> "PlayableAnimation":
        return cls(phases=tuple(phases))

    def __len__(self) -> int:
        return len(self.phases)

    def __getitem__(self, index: int) -> Phase:
        return self.phases[index]

    def __iter__(self) -> Iterator[Phase]:
        return iter(self.phases)

    def phase_label(self, index: int) -> str:
        name = self.phases[index].name
        return name if name else f"Phase {index + 1}"
