from dataclasses import dataclass
from typing import Tuple

@dataclass(slots=True)
class StageVisual:
    """Visual state of the demo sprite mutated by the demo transitions."""
    x: float = 0.0  # 0..1 across the stage
    scale: float = 1.0
    alpha: float = 1.0
    color: Tuple[int, int, int] = (66, 133, 244)
