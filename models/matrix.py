"""Dense 2D matrix wrapper."""

import numpy as np

from models.errors import InvalidShapeError


def check_shape(data: np.ndarray) -> None:
    """Reject anything that is not a non-empty 2D array."""
    if data.ndim != 2:
        raise InvalidShapeError(f"Expected a 2D matrix, got {data.ndim}D with shape {data.shape}")
    rows, cols = data.shape
    if rows < 1 or cols < 1:
        raise InvalidShapeError(f"Matrix needs rows >= 1 and cols >= 1, got {rows}x{cols}")


class Matrix:
    """Row-major 2D matrix with a fixed shape.
    
    The wrapper owns a private copy of the data it is built from, so
    transforms that consume one Matrix and return another never alias.
    """
    
    def __init__(self, data, dtype=None):
        array = np.array(data, dtype=dtype, copy=True)
        check_shape(array)
        self._data = array
    
    @property
    def rows(self) -> int:
        return self._data.shape[0]
    
    @property
    def cols(self) -> int:
        return self._data.shape[1]
    
    @property
    def shape(self) -> tuple:
        return self._data.shape
    
    @property
    def dtype(self) -> np.dtype:
        return self._data.dtype
    
    def __getitem__(self, index):
        return self._data[index]
    
    def __setitem__(self, index, value):
        self._data[index] = value
    
    def __eq__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return np.array_equal(self._data, other._data)
    
    def __array__(self, dtype=None, copy=None):
        if dtype is None and not copy:
            return self._data
        return self._data.astype(dtype if dtype is not None else self._data.dtype, copy=True)
    
    def __repr__(self):
        return f"Matrix({self.rows}x{self.cols}, dtype={self.dtype})"
    
    def copy(self) -> 'Matrix':
        return Matrix(self._data)
    
    def to_numpy(self) -> np.ndarray:
        """Return a copy of the underlying array."""
        return self._data.copy()
    
    def view(self) -> np.ndarray:
        """Read/write view of the underlying array (no copy)."""
        return self._data
    
    def transform(self, kind, params=None) -> 'Matrix':
        from engines.selector import transform
        return transform(self, kind, params)
    
    def fftshift(self) -> 'Matrix':
        from engines.spectrum_shift import fftshift
        return fftshift(self)
    
    def fftshift_inplace(self) -> None:
        from engines.spectrum_shift import fftshift_inplace
        fftshift_inplace(self)
