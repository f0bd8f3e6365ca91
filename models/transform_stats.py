"""Per-call statistics for a 2D transform."""

from dataclasses import dataclass, field
from typing import List

from models.transform_kind import TransformKind


@dataclass
class TransformStats:
    """Timings and kernel bookkeeping collected while running one transform."""
    
    kind: TransformKind
    shape: tuple
    
    # Runtime of the two separable passes, in execution order
    first_pass_ms: float = 0.0
    second_pass_ms: float = 0.0
    
    kernels_planned: int = 0
    skipped_axes: List[str] = field(default_factory=list)
    
    @property
    def total_ms(self) -> float:
        return self.first_pass_ms + self.second_pass_ms
