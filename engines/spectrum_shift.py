"""Spectrum centering: circular quadrant swap of a 2D matrix."""

import numpy as np

from models.matrix import Matrix, check_shape


def _shifted(data: np.ndarray) -> np.ndarray:
    rows, cols = data.shape
    # Row (i + rows//2) % rows receives row i, then the same for columns of
    # the row-shifted result
    row_shifted = np.roll(data, rows // 2, axis=0)
    return np.roll(row_shifted, cols // 2, axis=1)


def fftshift_inplace(matrix) -> None:
    """
    Move the zero-frequency entry from the corner to the center, in place.

    Offsets are floor(rows/2) and floor(cols/2), so applying the shift twice
    only restores the input when both dimensions are even.
    """
    if isinstance(matrix, Matrix):
        data = matrix.view()
    elif isinstance(matrix, np.ndarray):
        data = matrix
    else:
        raise TypeError(f"fftshift_inplace needs a Matrix or ndarray, got {type(matrix).__name__}")
    check_shape(data)
    data[...] = _shifted(data)


def fftshift(matrix):
    """Shifted copy of a Matrix or 2D array; the input is left untouched."""
    if isinstance(matrix, Matrix):
        result = matrix.copy()
        fftshift_inplace(result)
        return result
    data = np.array(matrix, copy=True)
    fftshift_inplace(data)
    return data
