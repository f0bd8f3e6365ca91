"""Element type coercion for the separable engine."""

import logging

import numpy as np

from models.errors import TransformNotImplementedError, UnsupportedElementTypeError
from models.transform_kind import TransformKind

logger = logging.getLogger(__name__)


def supports_cosine_arithmetic(dtype) -> bool:
    """True for real numeric dtypes the DCT kernels can multiply, add and scale."""
    return np.dtype(dtype).kind in 'iuf'


def cosine_working_dtype(dtype) -> np.dtype:
    """Float dtype the DCT passes run in for a given element dtype."""
    dtype = np.dtype(dtype)
    if dtype.kind == 'f' and dtype.itemsize >= 4:
        return dtype
    if dtype == np.float16:
        return np.dtype(np.float32)
    return np.dtype(np.float64)


def cast_scale(value: float, dtype):
    """
    Cast a normalization constant into the element type.

    Integers truncate toward zero like any float-to-int conversion. A value
    the element type cannot represent (out of range or non-finite) falls
    back to the multiplicative identity.
    """
    dtype = np.dtype(dtype)
    if dtype.kind in 'iu':
        info = np.iinfo(dtype)
        if not np.isfinite(value) or not info.min <= value <= info.max:
            logger.debug("Scale %r not representable as %s, using 1", value, dtype)
            return dtype.type(1)
        return dtype.type(int(value))
    with np.errstate(over='ignore'):
        scaled = dtype.type(value)
    if not np.isfinite(scaled) and np.isfinite(value):
        logger.debug("Scale %r overflows %s, using 1", value, dtype)
        return dtype.type(1)
    return scaled


def _element_to_float(value) -> float:
    try:
        return float(value)
    except (TypeError, ValueError, OverflowError):
        logger.debug("Element %r has no float value, using 0.0", value)
        return 0.0


def _to_complex(data: np.ndarray) -> np.ndarray:
    if data.dtype.kind in 'biuf':
        return data.astype(np.float64).astype(np.complex128)
    if data.dtype.kind == 'c':
        return data.astype(np.complex128)
    real = np.array([_element_to_float(v) for v in data.ravel()], dtype=np.float64)
    return real.reshape(data.shape).astype(np.complex128)


def to_working_representation(data: np.ndarray, kind: TransformKind) -> np.ndarray:
    """
    Convert a matrix into the representation `kind` runs on.

    Cosine kinds keep element values and run in the element's float type
    (integers in float64). The forward DFT casts each element to float64 and
    makes it the real part of a complex128; elements without a float value
    become 0.0. The inverse DFT runs on complex128 input.

    Args:
        data: 2D input array (never modified)
        kind: Requested transform

    Returns:
        New array in the working representation
    """
    if kind.is_cosine:
        if not supports_cosine_arithmetic(data.dtype):
            raise UnsupportedElementTypeError(
                f"{kind.label} needs real numeric elements, got dtype {data.dtype}"
            )
        return data.astype(cosine_working_dtype(data.dtype), copy=True)

    if kind is TransformKind.FFT_FORWARD:
        return _to_complex(data)

    if kind is TransformKind.FFT_INVERSE:
        if data.dtype.kind not in 'biufc':
            raise UnsupportedElementTypeError(
                f"{kind.label} needs complex input, got dtype {data.dtype}"
            )
        return data.astype(np.complex128, copy=True)

    raise TransformNotImplementedError(f"No working representation for {kind!r}")


def from_working_representation(result: np.ndarray, dtype, kind: TransformKind) -> np.ndarray:
    """Cast a cosine result back to the caller's element type."""
    if not kind.is_cosine:
        return result
    dtype = np.dtype(dtype)
    if dtype.kind in 'iu':
        info = np.iinfo(dtype)
        return np.clip(np.rint(result), info.min, info.max).astype(dtype)
    return result.astype(dtype, copy=False)
