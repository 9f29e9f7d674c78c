"""Image processing algorithms."""

from .codec import (
    CompressionType,
    ImageCodec,
    ImageContext,
    InterlaceScheme,
    PixelInterpolation,
    ResizeFilter,
    mime_type_for_format,
)
from .dimensions import (
    clamp_dimensions_to_maxima,
    resolve_dimensions,
    scale_to_requested_dimensions,
)
from .image_processor import ImageProcessor, compute_blur_radius
from .pillow_codec import PillowCodec, PillowImageContext

__all__ = [
    "ImageProcessor",
    "compute_blur_radius",
    "resolve_dimensions",
    "scale_to_requested_dimensions",
    "clamp_dimensions_to_maxima",
    "ImageCodec",
    "ImageContext",
    "PillowCodec",
    "PillowImageContext",
    "ResizeFilter",
    "PixelInterpolation",
    "InterlaceScheme",
    "CompressionType",
    "mime_type_for_format",
]
