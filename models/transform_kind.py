"""Transform kind enumeration."""

from enum import Enum
from typing import Optional


class TransformKind(Enum):
    """Closed set of 2D transforms the engine can run."""
    
    DCT1 = 'dct1'
    DCT2 = 'dct2'
    DCT3 = 'dct3'
    DCT4 = 'dct4'
    FFT_FORWARD = 'fft_forward'
    FFT_INVERSE = 'fft_inverse'
    
    @property
    def is_cosine(self) -> bool:
        return self.dct_type is not None
    
    @property
    def is_fourier(self) -> bool:
        return self in (TransformKind.FFT_FORWARD, TransformKind.FFT_INVERSE)
    
    @property
    def dct_type(self) -> Optional[int]:
        """DCT type number (1-4), or None for Fourier kinds."""
        return _DCT_TYPES.get(self)
    
    @property
    def label(self) -> str:
        return _LABELS[self]


_DCT_TYPES = {
    TransformKind.DCT1: 1,
    TransformKind.DCT2: 2,
    TransformKind.DCT3: 3,
    TransformKind.DCT4: 4,
}

_LABELS = {
    TransformKind.DCT1: 'DCT-I',
    TransformKind.DCT2: 'DCT-II',
    TransformKind.DCT3: 'DCT-III',
    TransformKind.DCT4: 'DCT-IV',
    TransformKind.FFT_FORWARD: 'DFT',
    TransformKind.FFT_INVERSE: 'IDFT',
}
