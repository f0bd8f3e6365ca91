"""Shared utilities."""

from .metrics import Timer, max_abs_error, spectrum_energy
from .test_matrices import unit_impulse, scaled_identity, checkerboard, gradient, sequential

__all__ = [
    'Timer',
    'max_abs_error',
    'spectrum_energy',
    'unit_impulse',
    'scaled_identity',
    'checkerboard',
    'gradient',
    'sequential',
]
