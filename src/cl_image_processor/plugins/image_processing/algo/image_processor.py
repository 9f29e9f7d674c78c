"""Image processor: decides which transforms a request needs and applies them."""

from loguru import logger

from ....common.errors import DecodeError, ProcessingError
from ....common.schemas import ProcessorConfig
from ....utils.profiling import timed
from ..schema import ProcessedImage, ProcessingOutcome, ProcessingRequest
from .codec import (
    CompressionType,
    ImageCodec,
    ImageContext,
    InterlaceScheme,
    PixelInterpolation,
    ResizeFilter,
    mime_type_for_format,
)
from .dimensions import resolve_dimensions
from .pillow_codec import PillowCodec

JPEG_FORMAT = "JPEG"


def compute_blur_radius(width: int, blur_fraction: float, radius_scale: float) -> float:
    """Blur radius in pixels for a blur expressed as a fraction of the width."""
    return width * blur_fraction * radius_scale


class ImageProcessor:
    """Scales and blurs images according to a request and the processor policy.

    One working context is opened per call and released when the call
    returns, whether it succeeds or not. The processor itself keeps no
    per-request state, so a single instance can serve concurrent callers.
    """

    def __init__(self, config: ProcessorConfig, codec: ImageCodec | None = None):
        self.config: ProcessorConfig = config
        self.codec: ImageCodec = codec if codec is not None else PillowCodec()
        self.logger = logger.bind(processor=f"image_processor.{config.name}")

    def process_image(self, source: bytes, request: ProcessingRequest) -> ProcessedImage | None:
        """
        Process ``source`` and return the resulting image.

        Failures have already been logged by ``process``; the caller gets
        ``None`` and decides on a fallback (serve original, serve error).
        """
        try:
            return self.process(source, request).image
        except ProcessingError:
            return None

    @timed
    def process(self, source: bytes, request: ProcessingRequest) -> ProcessingOutcome:
        """
        Apply scaling and blurring to ``source``.

        Args:
            source: Encoded source image
            request: Requested dimensions and blur radius

        Returns:
            ProcessingOutcome with the image and which operations modified it

        Raises:
            DecodeError: If the source cannot be decoded
            ResizeError: If the codec rejects the resize
            EncodeSettingError: If the codec rejects an encode setting
            BlurError: If the codec rejects the blur
            DimensionResolutionError: If the target dimensions cannot be clamped
        """
        try:
            with self.codec.open(source) as context:
                return self._process_context(context, source, request)
        except DecodeError as exc:
            self.logger.warning(f"Error decoding image: {exc}")
            raise

    def _process_context(
        self, context: ImageContext, source: bytes, request: ProcessingRequest
    ) -> ProcessingOutcome:
        if not context.dimensions.is_resolved:
            raise DecodeError(f"Decoded image has a zero dimension: {context.dimensions}")

        try:
            scale_modified = self.scale(context, request)
        except ProcessingError as exc:
            self.logger.warning(f"Error scaling image: {exc}")
            raise

        try:
            blur_radius = self.blur(context, request)
        except ProcessingError as exc:
            self.logger.warning(f"Error blurring image: {exc}")
            raise
        blur_modified = blur_radius is not None

        if not scale_modified and not blur_modified:
            data = source
        else:
            try:
                data = context.to_bytes()
            except ProcessingError as exc:
                self.logger.warning(f"Error encoding image: {exc}")
                raise

        return ProcessingOutcome(
            image=ProcessedImage(
                data=data,
                mime_type=mime_type_for_format(context.format),
                signature=context.signature(),
            ),
            dimensions=context.dimensions,
            scale_modified=scale_modified,
            blur_modified=blur_modified,
            blur_radius=blur_radius or 0.0,
        )

    def scale(self, context: ImageContext, request: ProcessingRequest) -> bool:
        """Resize the context to the resolved dimensions; False when already there."""
        current_dimensions = context.dimensions
        new_dimensions = resolve_dimensions(current_dimensions, request, self.config)

        if new_dimensions == current_dimensions:
            self.logger.debug(f"Image already {current_dimensions}, skipping resize")
            return False

        context.resize(new_dimensions, ResizeFilter.LANCZOS, 1.0)
        context.set_interpolate_method(PixelInterpolation.BICUBIC)
        context.strip()

        if context.format == JPEG_FORMAT:
            context.set_interlace_scheme(InterlaceScheme.PLANE)
            context.set_compression(CompressionType.JPEG)
            context.set_compression_quality(self.config.image_compression_quality)

        return True

    def blur(self, context: ImageContext, request: ProcessingRequest) -> float | None:
        """Blur the context in place, returning the applied radius (None if not blurred)."""
        if request.blur_radius == 0:
            return None

        blur_radius = compute_blur_radius(
            context.dimensions.width,
            request.blur_radius,
            self.config.max_blur_radius_percentage,
        )
        context.gaussian_blur(blur_radius, blur_radius)
        return blur_radius
