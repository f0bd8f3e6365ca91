"""Engine configuration."""

from dataclasses import dataclass
from typing import Optional


@dataclass
class EngineParams:
    """Execution settings for the separable transform engine."""
    
    parallel: bool = False
    max_workers: Optional[int] = None
    cache_kernels: bool = False
    
    def __post_init__(self):
        if self.max_workers is not None and self.max_workers < 1:
            raise ValueError(f"max_workers must be >= 1, got {self.max_workers}")
