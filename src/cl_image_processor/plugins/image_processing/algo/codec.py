"""Image codec capability consumed by the image processor.

The processor never touches pixels itself. It drives a working context handed
out by an ``ImageCodec``; backends (Pillow, test fakes) implement the two
protocols below.
"""

from contextlib import AbstractContextManager
from enum import StrEnum
from typing import Protocol

from ....common.schemas import ImageDimensions


class ResizeFilter(StrEnum):
    LANCZOS = "lanczos"


class PixelInterpolation(StrEnum):
    BICUBIC = "bicubic"


class InterlaceScheme(StrEnum):
    PLANE = "plane"


class CompressionType(StrEnum):
    UNDEFINED = "undefined"
    JPEG = "jpeg"


def mime_type_for_format(image_format: str) -> str:
    """Return the MIME type for a codec format name, e.g. ``JPEG`` -> ``image/jpeg``."""
    return f"image/{image_format.lower()}"


class ImageContext(Protocol):
    """Decoded image owned by a single request.

    Every mutating method raises the matching ``ProcessingError`` subclass
    when the backend rejects the operation.
    """

    @property
    def dimensions(self) -> ImageDimensions: ...

    @property
    def format(self) -> str: ...

    def resize(self, dimensions: ImageDimensions, filter: ResizeFilter, blur: float = 1.0) -> None: ...

    def set_interpolate_method(self, method: PixelInterpolation) -> None: ...

    def strip(self) -> None: ...

    def set_interlace_scheme(self, scheme: InterlaceScheme) -> None: ...

    def set_compression(self, compression: CompressionType) -> None: ...

    def set_compression_quality(self, quality: int) -> None: ...

    def gaussian_blur(self, radius: float, sigma: float) -> None: ...

    def to_bytes(self) -> bytes: ...

    def signature(self) -> str: ...

    def close(self) -> None: ...


class ImageCodec(Protocol):
    def open(self, data: bytes) -> AbstractContextManager[ImageContext]:
        """Decode ``data`` into a working context released when the block exits.

        Raises:
            DecodeError: If the bytes cannot be decoded
        """
        ...
