"""Data models for matrices, transform kinds and engine settings."""

from .transform_kind import TransformKind
from .engine_params import EngineParams
from .transform_stats import TransformStats
from .errors import (
    TransformError,
    InvalidShapeError,
    UnsupportedElementTypeError,
    TransformNotImplementedError,
)
from .matrix import Matrix

__all__ = [
    'TransformKind',
    'EngineParams',
    'TransformStats',
    'Matrix',
    'TransformError',
    'InvalidShapeError',
    'UnsupportedElementTypeError',
    'TransformNotImplementedError',
]
