"""Tests for the 1D kernel provider."""

import numpy as np
import pytest
from scipy.fft import dct

from engines.kernels import KernelProvider, plan
from models.errors import InvalidShapeError
from models.transform_kind import TransformKind


def test_dct1_kernel_convention():
    """Unnormalized DCT-I: boundary samples weighted by 1/2."""
    out = plan(TransformKind.DCT1, 3).process(np.array([0.0, 1.0, 0.0]))
    assert np.allclose(out, [1.0, 0.0, -1.0])


@pytest.mark.parametrize("dct_type", [1, 2, 3, 4])
def test_dct_kernels_are_half_scipy(dct_type):
    x = np.random.rand(8)
    kind = TransformKind('dct%d' % dct_type)
    assert np.allclose(plan(kind, 8).process(x), dct(x, type=dct_type) / 2)


def test_dct2_length_one_is_identity():
    assert np.allclose(plan(TransformKind.DCT2, 1).process(np.array([7.0])), [7.0])


def test_inverse_fourier_kernel_is_unscaled():
    x = np.random.rand(6) + 1j * np.random.rand(6)
    out = plan(TransformKind.FFT_INVERSE, 6).process(x)
    assert np.allclose(out, np.fft.ifft(x) * 6)


def test_forward_fourier_kernel():
    x = np.random.rand(5).astype(np.complex128)
    assert np.allclose(plan(TransformKind.FFT_FORWARD, 5).process(x), np.fft.fft(x))


def test_process_fills_given_output():
    x = np.arange(4, dtype=np.complex128)
    out = np.zeros(4, dtype=np.complex128)
    returned = plan(TransformKind.FFT_FORWARD, 4).process(x, out)
    assert returned is out
    assert np.allclose(out, np.fft.fft(x))


def test_process_rejects_wrong_length():
    with pytest.raises(InvalidShapeError):
        plan(TransformKind.DCT2, 4).process(np.zeros(5))


@pytest.mark.parametrize("kind,length", [
    (TransformKind.FFT_FORWARD, 0),
    (TransformKind.DCT3, -1),
    (TransformKind.DCT1, 1),
])
def test_plan_rejects_bad_lengths(kind, length):
    with pytest.raises(InvalidShapeError):
        plan(kind, length)


def test_cached_provider_reuses_kernels():
    provider = KernelProvider(cache=True)
    first = provider.plan(TransformKind.DCT2, 8)
    second = provider.plan(TransformKind.DCT2, 8)
    other = provider.plan(TransformKind.DCT3, 8)
    assert first is second
    assert other is not first
    assert provider.plan_count == 2
    assert provider.cache_hits == 1
    assert len(provider) == 2
    
    provider.clear()
    assert len(provider) == 0


def test_uncached_provider_plans_every_time():
    provider = KernelProvider()
    assert provider.plan(TransformKind.FFT_FORWARD, 4) is not provider.plan(TransformKind.FFT_FORWARD, 4)
    assert provider.plan_count == 2
    assert len(provider) == 0
