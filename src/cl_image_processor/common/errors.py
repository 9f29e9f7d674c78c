"""Exceptions raised while processing an image.

Every codec failure aborts the whole request, so there is a single root
(``ProcessingError``) that callers can catch at the service boundary.
"""

from typing_extensions import override


class ProcessingError(Exception):
    """Base class for every failure that aborts a processing request."""

    def __init__(self, message: str = "Image processing failed."):
        self.message: str = message
        super().__init__(self.message)

    @override
    def __str__(self):
        return f"{type(self).__name__}: {self.message}"


class DecodeError(ProcessingError):
    """Source bytes cannot be decoded, or decode to an image with a zero axis."""


class ResizeError(ProcessingError):
    """The codec rejected a resize, interpolation or strip operation."""


class BlurError(ProcessingError):
    """The codec rejected a Gaussian blur."""


class EncodeSettingError(ProcessingError):
    """The codec rejected an encode setting, or could not re-encode the image."""


class DimensionResolutionError(ProcessingError):
    """Clamping to the configured maxima did not converge."""
