"""Metrics: pass timing and numerical error."""

import time
import numpy as np
from typing import Dict


class Timer:
    """Simple timer for the passes of a transform."""
    
    def __init__(self):
        self.timings_ms: Dict[str, float] = {}
    
    def measure(self, label: str, func, *args, **kwargs):
        start = time.perf_counter()
        result = func(*args, **kwargs)
        self.timings_ms[label] = (time.perf_counter() - start) * 1000.0
        return result
    
    def get(self, label: str) -> float:
        return self.timings_ms.get(label, 0.0)


def max_abs_error(actual: np.ndarray, expected: np.ndarray) -> float:
    """Largest elementwise |actual - expected|, complex-aware."""
    actual = np.asarray(actual)
    expected = np.asarray(expected)
    if actual.shape != expected.shape:
        raise ValueError(f"Shape mismatch: {actual.shape} vs {expected.shape}")
    return float(np.max(np.abs(actual - expected)))


def spectrum_energy(coeffs: np.ndarray) -> float:
    """Sum of squared magnitudes."""
    return float(np.sum(np.abs(coeffs) ** 2))
