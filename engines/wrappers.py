"""Forward/inverse wrappers around the separable engine.

`Dct` maps the forward direction to DCT-II and the inverse to DCT-III and
also exposes all four DCT types; `Dft` pairs the forward and inverse DFT.
"""

from typing import Optional

from engines.selector import transform
from models.engine_params import EngineParams
from models.matrix import Matrix
from models.transform_kind import TransformKind


class _Wrapper:
    def __init__(self, matrix, params: Optional[EngineParams] = None):
        self.matrix = matrix if isinstance(matrix, Matrix) else Matrix(matrix)
        self.params = params
    
    def _run(self, kind: TransformKind) -> Matrix:
        return transform(self.matrix, kind, self.params)


class Dct(_Wrapper):
    """Real matrix in the cosine domain."""
    
    def transform(self) -> Matrix:
        return self.perform_dct2()
    
    def inverse(self) -> Matrix:
        return self.perform_dct3()
    
    def perform_dct1(self) -> Matrix:
        return self._run(TransformKind.DCT1)
    
    def perform_dct2(self) -> Matrix:
        return self._run(TransformKind.DCT2)
    
    def perform_dct3(self) -> Matrix:
        return self._run(TransformKind.DCT3)
    
    def perform_dct4(self) -> Matrix:
        return self._run(TransformKind.DCT4)


class Dft(_Wrapper):
    """Matrix moving between the spatial and Fourier domains."""
    
    def transform(self) -> Matrix:
        """Forward DFT; the result is complex128."""
        return self._run(TransformKind.FFT_FORWARD)
    
    def inverse(self) -> Matrix:
        """Inverse DFT, scaled by 1/(rows*cols)."""
        return self._run(TransformKind.FFT_INVERSE)
