"""1D transform kernels backed by scipy.fft.

The separable engine only needs "give me something that maps a length-N
buffer to a length-N buffer" for a given transform kind. This module plans
such kernels on top of scipy.fft, using unnormalized conventions:

    DCT type t:   y = dct(x, type=t) / 2
    forward DFT:  y = fft(x)
    inverse DFT:  y = ifft(x) * N   (no 1/N; the engine normalizes once in 2D)
"""

import logging
import threading
from typing import Dict, Optional, Tuple

import numpy as np
from scipy import fft as sp_fft

from models.errors import InvalidShapeError, TransformNotImplementedError
from models.transform_kind import TransformKind

logger = logging.getLogger(__name__)


class Kernel:
    """A planned 1D transform bound to one kind and one buffer length."""

    def __init__(self, kind: TransformKind, length: int):
        self.kind = kind
        self.length = length
        self._run = _kernel_function(kind)

    def process(self, buffer: np.ndarray, output: Optional[np.ndarray] = None) -> np.ndarray:
        """Transform `buffer` into `output` (allocated when not given) and return it."""
        if buffer.shape != (self.length,):
            raise InvalidShapeError(
                f"{self.kind.label} kernel planned for length {self.length}, got buffer of shape {buffer.shape}"
            )
        result = self._run(buffer)
        if output is None:
            return result
        output[...] = result
        return output

    def __repr__(self):
        return f"Kernel({self.kind.label}, length={self.length})"


def _dct_function(dct_type: int):
    def run(buffer):
        return sp_fft.dct(buffer, type=dct_type) / 2
    return run


def _fft(buffer):
    return sp_fft.fft(buffer)


def _ifft_unscaled(buffer):
    return sp_fft.ifft(buffer, norm='forward')


def _kernel_function(kind: TransformKind):
    if kind is TransformKind.DCT1:
        return _dct_function(1)
    if kind is TransformKind.DCT2:
        return _dct_function(2)
    if kind is TransformKind.DCT3:
        return _dct_function(3)
    if kind is TransformKind.DCT4:
        return _dct_function(4)
    if kind is TransformKind.FFT_FORWARD:
        return _fft
    if kind is TransformKind.FFT_INVERSE:
        return _ifft_unscaled
    raise TransformNotImplementedError(f"No 1D kernel wired up for {kind!r}")


def _check_length(kind: TransformKind, length: int) -> None:
    if length < 1:
        raise InvalidShapeError(f"Kernel length must be >= 1, got {length}")
    # DCT-I samples the boundary on both ends, so it needs two points
    if kind is TransformKind.DCT1 and length < 2:
        raise InvalidShapeError("DCT-I needs a length of at least 2")


class KernelProvider:
    """Plans kernels, optionally caching them by (kind, length)."""

    def __init__(self, cache: bool = False):
        self.cache_enabled = cache
        self._cache: Dict[Tuple[TransformKind, int], Kernel] = {}
        self._lock = threading.RLock()
        self.plan_count = 0
        self.cache_hits = 0

    def plan(self, kind: TransformKind, length: int) -> Kernel:
        _check_length(kind, length)
        key = (kind, length)
        with self._lock:
            if self.cache_enabled and key in self._cache:
                self.cache_hits += 1
                logger.debug("Kernel cache hit for %s, length %d", kind.label, length)
                return self._cache[key]
            kernel = Kernel(kind, length)
            self.plan_count += 1
            logger.debug("Planned %s kernel of length %d", kind.label, length)
            if self.cache_enabled:
                self._cache[key] = kernel
            return kernel

    def clear(self) -> None:
        with self._lock:
            self._cache.clear()

    def __len__(self):
        return len(self._cache)


def plan(kind: TransformKind, length: int) -> Kernel:
    """Plan a single uncached kernel."""
    return KernelProvider().plan(kind, length)
