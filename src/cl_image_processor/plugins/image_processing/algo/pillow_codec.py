"""Pillow implementation of the image codec capability."""

import hashlib
from collections.abc import Iterator
from contextlib import contextmanager
from io import BytesIO
from typing_extensions import override

from PIL import Image, ImageFilter, UnidentifiedImageError
from pillow_heif import register_heif_opener

from ....common.errors import BlurError, DecodeError, EncodeSettingError, ResizeError
from ....common.schemas import ImageDimensions
from .codec import (
    CompressionType,
    ImageCodec,
    ImageContext,
    InterlaceScheme,
    PixelInterpolation,
    ResizeFilter,
)

register_heif_opener()

_RESAMPLING: dict[ResizeFilter, Image.Resampling] = {
    ResizeFilter.LANCZOS: Image.Resampling.LANCZOS,
}

# Formats whose encoder cannot store an alpha channel or palette.
_RGB_ONLY_FORMATS = {"JPEG"}

# Pillow opens JPEGs carrying an MPF segment (depth or gain maps) as MPO.
_FORMAT_ALIASES = {"MPO": "JPEG"}

_DECODE_ERRORS = (UnidentifiedImageError, Image.DecompressionBombError, OSError, ValueError)


class PillowImageContext(ImageContext):
    """Working context around a decoded ``PIL.Image.Image``.

    Encode settings (interlacing, compression, quality) are recorded and
    applied when the image is re-encoded by ``to_bytes``. A JPEG re-encoded
    without an explicit quality keeps the source's quantization tables and
    interlacing.
    """

    def __init__(self, data: bytes):
        try:
            image = Image.open(BytesIO(data))
        except _DECODE_ERRORS as exc:
            raise DecodeError(f"Cannot decode image: {exc}") from exc

        try:
            image.load()
        except _DECODE_ERRORS as exc:
            image.close()
            raise DecodeError(f"Cannot decode image: {exc}") from exc

        if image.format is None:
            image.close()
            raise DecodeError("Decoded image has no format")

        self._image: Image.Image = image
        self._format: str = _FORMAT_ALIASES.get(image.format, image.format)
        self._metadata: dict[str, object] = {
            key: image.info[key] for key in ("exif", "icc_profile") if image.info.get(key)
        }
        self._qtables: dict[int, list[int]] | None = getattr(image, "quantization", None) or None
        self._stripped: bool = False
        self._interpolation: PixelInterpolation | None = None
        self._progressive: bool = bool(image.info.get("progressive"))
        self._compression: CompressionType = CompressionType.UNDEFINED
        self._quality: int | None = None

    @property
    @override
    def dimensions(self) -> ImageDimensions:
        width, height = self._image.size
        return ImageDimensions.of(width, height)

    @property
    @override
    def format(self) -> str:
        return self._format

    @property
    def interpolation(self) -> PixelInterpolation | None:
        return self._interpolation

    @override
    def resize(self, dimensions: ImageDimensions, filter: ResizeFilter, blur: float = 1.0) -> None:
        if not dimensions.is_resolved:
            raise ResizeError(f"Cannot resize to {dimensions}")
        if blur != 1.0:
            raise ResizeError(f"Resize blur factor {blur} is not supported by Pillow")
        try:
            resized = self._image.resize(
                (dimensions.width, dimensions.height), _RESAMPLING[filter]
            )
        except (OSError, ValueError) as exc:
            raise ResizeError(f"Cannot resize image to {dimensions}: {exc}") from exc
        self._replace(resized)

    @override
    def set_interpolate_method(self, method: PixelInterpolation) -> None:
        self._interpolation = method

    @override
    def strip(self) -> None:
        self._image.info = {}
        self._metadata = {}
        self._stripped = True

    @override
    def set_interlace_scheme(self, scheme: InterlaceScheme) -> None:
        self._progressive = scheme == InterlaceScheme.PLANE

    @override
    def set_compression(self, compression: CompressionType) -> None:
        if compression == CompressionType.JPEG and self._format not in _RGB_ONLY_FORMATS:
            raise EncodeSettingError(f"JPEG compression is not available for {self._format}")
        self._compression = compression

    @override
    def set_compression_quality(self, quality: int) -> None:
        if not 1 <= quality <= 100:
            raise EncodeSettingError(f"Compression quality must be 1..100, got {quality}")
        self._quality = quality

    @override
    def gaussian_blur(self, radius: float, sigma: float) -> None:
        # Pillow derives the kernel extent from sigma alone.
        if sigma < 0 or radius < 0:
            raise BlurError(f"Invalid blur radius {radius} / sigma {sigma}")
        image = self._image
        if image.mode in ("1", "P"):
            image = image.convert("RGBA" if "transparency" in image.info else "RGB")
        try:
            blurred = image.filter(ImageFilter.GaussianBlur(radius=sigma))
        except (OSError, ValueError) as exc:
            raise BlurError(f"Cannot blur image: {exc}") from exc
        self._replace(blurred)

    @override
    def to_bytes(self) -> bytes:
        image = self._image
        save_kwargs: dict[str, object] = dict(self._metadata)

        if self._format in _RGB_ONLY_FORMATS:
            if image.mode not in ("RGB", "L", "CMYK"):
                image = image.convert("RGB")
            save_kwargs["progressive"] = self._progressive
            if self._quality is not None:
                save_kwargs["quality"] = self._quality
            elif self._qtables:
                save_kwargs["qtables"] = self._qtables

        buffer = BytesIO()
        try:
            image.save(buffer, format=self._format, **save_kwargs)
        except (OSError, ValueError, KeyError) as exc:
            raise EncodeSettingError(f"Cannot encode image as {self._format}: {exc}") from exc
        return buffer.getvalue()

    @override
    def signature(self) -> str:
        return hashlib.sha512(self._image.tobytes()).hexdigest()

    @override
    def close(self) -> None:
        self._image.close()

    def _replace(self, image: Image.Image) -> None:
        if image is not self._image:
            self._image.close()
        if self._stripped:
            image.info = {}
        self._image = image


class PillowCodec(ImageCodec):
    """Image codec backed by Pillow (HEIF/HEIC via pillow-heif)."""

    @override
    @contextmanager
    def open(self, data: bytes) -> Iterator[PillowImageContext]:
        context = PillowImageContext(data)
        try:
            yield context
        finally:
            context.close()
