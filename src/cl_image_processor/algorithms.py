"""Public algorithm API for cl_image_processor.

This module exports the dimension resolver, the processor and the codec
backends for direct use by a serving pipeline.

Example:
    Resizing a JPEG to a 600px wide, softened variant::

        from cl_image_processor.algorithms import (
            ImageProcessor,
            ProcessingRequest,
            ProcessorConfig,
        )

        config = ProcessorConfig(
            name="thumbnails",
            max_image_width=1200,
            image_compression_quality=82,
        )
        processor = ImageProcessor(config)

        with open("photo.jpg", "rb") as f:
            image = processor.process_image(
                f.read(), ProcessingRequest.for_size(width=600, blur_radius=0.01)
            )
        if image is not None:
            print(image.mime_type, image.signature)

    Resolving dimensions without touching the image::

        from cl_image_processor.algorithms import ImageDimensions, resolve_dimensions

        target = resolve_dimensions(
            ImageDimensions.of(1000, 500),
            ProcessingRequest.for_size(width=800),
            config,
        )
        print(target)  # 800x400
"""

from .common.schemas import ImageDimensions, ProcessorConfig
from .plugins.image_processing.algo.codec import (
    CompressionType,
    ImageCodec,
    ImageContext,
    InterlaceScheme,
    PixelInterpolation,
    ResizeFilter,
    mime_type_for_format,
)
from .plugins.image_processing.algo.dimensions import (
    clamp_dimensions_to_maxima,
    resolve_dimensions,
    scale_to_requested_dimensions,
)
from .plugins.image_processing.algo.image_processor import (
    ImageProcessor,
    compute_blur_radius,
)
from .plugins.image_processing.algo.pillow_codec import PillowCodec
from .plugins.image_processing.schema import (
    ProcessedImage,
    ProcessingOutcome,
    ProcessingRequest,
)

__all__ = [
    # Schemas
    "ImageDimensions",
    "ProcessorConfig",
    "ProcessingRequest",
    "ProcessedImage",
    "ProcessingOutcome",
    # Dimension resolution
    "resolve_dimensions",
    "scale_to_requested_dimensions",
    "clamp_dimensions_to_maxima",
    # Processing
    "ImageProcessor",
    "compute_blur_radius",
    # Codec
    "ImageCodec",
    "ImageContext",
    "PillowCodec",
    "ResizeFilter",
    "PixelInterpolation",
    "InterlaceScheme",
    "CompressionType",
    "mime_type_for_format",
]
