"""Spectral engines - pure computation on 2D matrices."""

from .kernels import Kernel, KernelProvider, plan
from .type_adapter import to_working_representation, cast_scale, supports_cosine_arithmetic
from .separable import TransformPlan, apply, apply_with_stats
from .selector import select, transform, transform_with_stats
from .spectrum_shift import fftshift, fftshift_inplace
from .wrappers import Dct, Dft

__all__ = [
    'Kernel',
    'KernelProvider',
    'plan',
    'to_working_representation',
    'cast_scale',
    'supports_cosine_arithmetic',
    'TransformPlan',
    'apply',
    'apply_with_stats',
    'select',
    'transform',
    'transform_with_stats',
    'fftshift',
    'fftshift_inplace',
    'Dct',
    'Dft',
]
