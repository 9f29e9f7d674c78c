"""Pure dimension resolution logic.

Resolves a requested (possibly partial) width/height pair against the source
image's aspect ratio and the processor's configured maxima. No image data is
touched here; everything operates on frozen ``ImageDimensions`` values.
"""

import math

from loguru import logger

from ....common.errors import DimensionResolutionError
from ....common.schemas import ImageDimensions, ProcessorConfig
from ..schema import ProcessingRequest

# Clamping converges in at most two passes for any real ratio.
MAX_CLAMP_DEPTH = 8


def resolve_dimensions(
    current: ImageDimensions,
    request: ProcessingRequest,
    config: ProcessorConfig,
) -> ImageDimensions:
    """
    Compute the final output dimensions for a request.

    Args:
        current: Dimensions of the source image (height must be non-zero)
        request: Processing request carrying the requested dimensions
        config: Processor policy (defaults, maxima, aspect handling)

    Returns:
        Fully resolved dimensions, clamped to the configured maxima

    Raises:
        DimensionResolutionError: If clamping does not converge
    """
    requested = request.dimensions
    if requested.is_unspecified:
        requested = config.default_dimensions

    dimensions = scale_to_requested_dimensions(current, requested, config)
    return clamp_dimensions_to_maxima(dimensions, config)


def scale_to_requested_dimensions(
    current: ImageDimensions,
    requested: ImageDimensions,
    config: ProcessorConfig,
) -> ImageDimensions:
    """Fill in unspecified axes of ``requested`` from the source aspect ratio."""
    image_aspect_ratio = current.aspect_ratio()

    if requested.width > 0 and requested.height > 0:
        requested_aspect_ratio = requested.aspect_ratio()
        logger.bind(processor=f"image_processor.{config.name}").info(
            f"Requested image ratio {requested_aspect_ratio:f}, "
            f"image ratio {image_aspect_ratio:f}, {config.maintain_aspect_ratio}"
        )

        if not config.maintain_aspect_ratio:
            return requested

        if requested_aspect_ratio > image_aspect_ratio:
            # Wider than the source: height is the binding axis.
            return scale_to_requested_dimensions(
                current, ImageDimensions.of(0, requested.height), config
            )
        if requested_aspect_ratio < image_aspect_ratio:
            return scale_to_requested_dimensions(
                current, ImageDimensions.of(requested.width, 0), config
            )
        return requested

    if requested.width > 0:
        return ImageDimensions.of(
            requested.width, aspect_scaled_height(image_aspect_ratio, requested.width)
        )

    if requested.height > 0:
        return ImageDimensions.of(
            aspect_scaled_width(image_aspect_ratio, requested.height), requested.height
        )

    return current


def clamp_dimensions_to_maxima(
    dimensions: ImageDimensions,
    config: ProcessorConfig,
    depth: int = 0,
) -> ImageDimensions:
    """Shrink ``dimensions`` to fit the non-zero maxima, keeping their own ratio."""
    if depth > MAX_CLAMP_DEPTH:
        raise DimensionResolutionError(
            f"Could not clamp {dimensions} to maxima "
            f"{config.max_image_width}x{config.max_image_height} "
            f"after {MAX_CLAMP_DEPTH} adjustments"
        )

    max_width = config.max_image_width
    max_height = config.max_image_height

    if max_width > 0 and dimensions.width > max_width:
        scaled_height = aspect_scaled_height(dimensions.aspect_ratio(), max_width)
        return clamp_dimensions_to_maxima(
            ImageDimensions.of(max_width, scaled_height), config, depth + 1
        )

    if max_height > 0 and dimensions.height > max_height:
        scaled_width = aspect_scaled_width(dimensions.aspect_ratio(), max_height)
        return clamp_dimensions_to_maxima(
            ImageDimensions.of(scaled_width, max_height), config, depth + 1
        )

    return dimensions


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def aspect_scaled_height(aspect_ratio: float, width: int) -> int:
    # A derived axis never collapses to 0 pixels.
    return max(1, round_half_up(width / aspect_ratio))


def aspect_scaled_width(aspect_ratio: float, height: int) -> int:
    return max(1, round_half_up(height * aspect_ratio))
