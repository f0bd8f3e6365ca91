"""Separable 2D transform engine.

A 2D DCT or DFT factors into two 1D transforms along orthogonal axes. The
engine runs a row pass (every row through a length-cols kernel), then a
column pass (transpose, every row of the transpose through a length-rows
kernel, transpose back), then applies one kind-specific scalar.

Which pass functions and which scalar a kind uses is decided by
engines.selector; this module holds the passes and the orchestration.
"""

import logging
from collections import namedtuple
from concurrent.futures import ThreadPoolExecutor
from contextlib import nullcontext
from typing import Optional, Tuple

import numpy as np

from engines.kernels import Kernel, KernelProvider
from engines.type_adapter import cast_scale, from_working_representation, to_working_representation
from models.engine_params import EngineParams
from models.errors import InvalidShapeError
from models.matrix import check_shape
from models.transform_kind import TransformKind
from models.transform_stats import TransformStats
from utils.metrics import Timer

logger = logging.getLogger(__name__)

TransformPlan = namedtuple('TransformPlan', ['row_pass', 'column_pass', 'normalization'])

# Kernels are pure functions of (kind, length), so one cache serves every call
_shared_provider = KernelProvider(cache=True)


class PassContext:
    """What a pass needs besides the matrix: kind, kernel source, executor, stats."""

    def __init__(self, kind: TransformKind, provider: KernelProvider,
                 executor: Optional[ThreadPoolExecutor], stats: TransformStats):
        self.kind = kind
        self.provider = provider
        self.executor = executor
        self.stats = stats

    def kernel(self, length: int) -> Kernel:
        return self.provider.plan(self.kind, length)

    def skip(self, axis: str) -> None:
        logger.debug("%s: length-1 %s axis, skipping pass", self.kind.label, axis)
        self.stats.skipped_axes.append(axis)


def transform_rows(matrix: np.ndarray, kernel: Kernel,
                   executor: Optional[ThreadPoolExecutor] = None) -> np.ndarray:
    """
    Run every row of `matrix` through `kernel` into a new matrix.

    With an executor the rows are processed concurrently; all of them are
    written before this returns.
    """
    out = np.empty(matrix.shape, dtype=matrix.dtype)

    def work(i):
        kernel.process(matrix[i], out[i])

    if executor is None:
        for i in range(matrix.shape[0]):
            work(i)
    else:
        list(executor.map(work, range(matrix.shape[0])))
    return out


def row_pass(matrix: np.ndarray, ctx: PassContext) -> np.ndarray:
    """Transform along each row (length-cols kernel)."""
    cols = matrix.shape[1]
    if ctx.kind.is_fourier and cols == 1:
        ctx.skip('row')
        return matrix
    return transform_rows(matrix, ctx.kernel(cols), ctx.executor)


def column_pass(matrix: np.ndarray, ctx: PassContext) -> np.ndarray:
    """Transform along each column via transpose, row transform, transpose back."""
    rows = matrix.shape[0]
    if ctx.kind.is_fourier and rows == 1:
        ctx.skip('column')
        return matrix
    return transform_rows(matrix.T, ctx.kernel(rows), ctx.executor).T


def transposed_row_pass(matrix: np.ndarray, ctx: PassContext) -> np.ndarray:
    """
    Row pass over the pre-transposed input.

    The rows of the transpose are the original columns, so this runs the
    column-axis transform first. The result is transposed back so the
    following pass sees the original orientation.
    """
    transposed = matrix.T
    inner = transposed.shape[1]
    if inner == 1:
        ctx.skip('column')
        return matrix
    return transform_rows(transposed, ctx.kernel(inner), ctx.executor).T


def cosine_scale(shape: Tuple[int, int], dtype):
    rows, cols = shape
    return cast_scale((rows * cols - 1) / 2.0, dtype)


def inverse_fourier_scale(shape: Tuple[int, int], dtype):
    rows, cols = shape
    return 1.0 / (rows * cols)


def no_scale(shape: Tuple[int, int], dtype):
    return None


def check_kernel_lengths(shape: Tuple[int, int], kind: TransformKind) -> None:
    """Reject shapes a kind cannot plan kernels for, before any planning."""
    if kind is TransformKind.DCT1 and min(shape) < 2:
        raise InvalidShapeError(f"DCT-I needs rows >= 2 and cols >= 2, got {shape[0]}x{shape[1]}")


def _executor(params: EngineParams):
    if not params.parallel:
        return nullcontext(None)
    return ThreadPoolExecutor(max_workers=params.max_workers, thread_name_prefix='separable')


def apply_with_stats(data, kind: TransformKind, plan: TransformPlan,
                     params: Optional[EngineParams] = None) -> Tuple[np.ndarray, TransformStats]:
    """
    Run a planned 2D transform and report pass timings.

    Args:
        data: 2D array-like, not modified
        kind: Transform kind the plan was selected for
        plan: Row pass, column pass and normalization from the selector
        params: Engine settings (defaults to serial, uncached)

    Returns:
        Tuple of (new row-major result array, TransformStats)
    """
    params = params or EngineParams()
    array = np.asarray(data)
    check_shape(array)
    check_kernel_lengths(array.shape, kind)

    stats = TransformStats(kind=kind, shape=array.shape)
    provider = _shared_provider if params.cache_kernels else KernelProvider()
    planned_before = provider.plan_count

    working = to_working_representation(array, kind)
    timer = Timer()
    with _executor(params) as executor:
        ctx = PassContext(kind, provider, executor, stats)
        intermediate = timer.measure('first', plan.row_pass, working, ctx)
        # Passes return only after every row is written, so the column pass
        # always reads a complete intermediate matrix
        result = timer.measure('second', plan.column_pass, intermediate, ctx)

    scale = plan.normalization(array.shape, array.dtype)
    if scale is not None:
        result = result * scale
    result = from_working_representation(result, array.dtype, kind)

    stats.first_pass_ms = timer.get('first')
    stats.second_pass_ms = timer.get('second')
    stats.kernels_planned = provider.plan_count - planned_before
    logger.debug("%s on %dx%d took %.3f ms", kind.label, array.shape[0], array.shape[1], stats.total_ms)
    return np.ascontiguousarray(result), stats


def apply(data, kind: TransformKind, plan: TransformPlan,
          params: Optional[EngineParams] = None) -> np.ndarray:
    """Run a planned 2D transform."""
    result, _ = apply_with_stats(data, kind, plan, params)
    return result
