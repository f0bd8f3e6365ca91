"""Exceptions raised by the transform engine."""


class TransformError(Exception):
    """Base class for transform failures."""


class InvalidShapeError(TransformError, ValueError):
    """Matrix is not 2D, has a zero-length axis, or is too short for the kernel."""


class UnsupportedElementTypeError(TransformError, TypeError):
    """Element dtype lacks the arithmetic the requested transform needs."""


class TransformNotImplementedError(TransformError, NotImplementedError):
    """A transform kind reached the dispatcher without a wired-up kernel path."""
