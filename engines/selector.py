"""Transform kind dispatch and the public transform entry point."""

from typing import Optional, Tuple

import numpy as np

from engines.separable import (
    TransformPlan,
    apply_with_stats,
    column_pass,
    cosine_scale,
    inverse_fourier_scale,
    no_scale,
    row_pass,
    transposed_row_pass,
)
from models.engine_params import EngineParams
from models.errors import TransformNotImplementedError
from models.matrix import Matrix
from models.transform_kind import TransformKind


_COSINE_PLAN = TransformPlan(row_pass, column_pass, cosine_scale)
_FORWARD_FOURIER_PLAN = TransformPlan(row_pass, column_pass, no_scale)
# The inverse runs the column axis first: it pre-transposes, and its second
# pass is an ordinary row pass
_INVERSE_FOURIER_PLAN = TransformPlan(transposed_row_pass, row_pass, inverse_fourier_scale)


def _coerce_kind(kind) -> TransformKind:
    if isinstance(kind, TransformKind):
        return kind
    try:
        return TransformKind(kind)
    except ValueError:
        raise TransformNotImplementedError(f"Transform kind {kind!r} is not implemented") from None


def select(kind) -> TransformPlan:
    """Map a transform kind (member or value string) to its (row pass, column pass, normalization) triple."""
    kind = _coerce_kind(kind)
    if kind is TransformKind.DCT1:
        return _COSINE_PLAN
    if kind is TransformKind.DCT2:
        return _COSINE_PLAN
    if kind is TransformKind.DCT3:
        return _COSINE_PLAN
    if kind is TransformKind.DCT4:
        return _COSINE_PLAN
    if kind is TransformKind.FFT_FORWARD:
        return _FORWARD_FOURIER_PLAN
    if kind is TransformKind.FFT_INVERSE:
        return _INVERSE_FOURIER_PLAN
    raise TransformNotImplementedError(f"Transform kind {kind!r} is not implemented")


def transform_with_stats(matrix, kind, params: Optional[EngineParams] = None) -> Tuple[object, object]:
    """Like transform(), also returning the TransformStats of the run."""
    kind = _coerce_kind(kind)
    data = matrix.view() if isinstance(matrix, Matrix) else np.asarray(matrix)
    result, stats = apply_with_stats(data, kind, select(kind), params)
    if isinstance(matrix, Matrix):
        return Matrix(result), stats
    return result, stats


def transform(matrix, kind, params: Optional[EngineParams] = None):
    """
    Apply a 2D transform of the given kind.

    Args:
        matrix: Matrix or 2D array-like (not modified)
        kind: TransformKind member or its value string ('dct1' ... 'fft_inverse')
        params: Optional engine settings

    Returns:
        Matrix if a Matrix was given, otherwise a new ndarray. DCT results
        keep the input dtype; DFT results are complex128.
    """
    result, _ = transform_with_stats(matrix, kind, params)
    return result
