"""Test configuration and fixtures for cl_image_processor.

This module provides:
- Image fixtures (real encoded images generated with Pillow)
- A recording fake codec for processor decision tests
- A loguru capture fixture
"""

from collections.abc import Callable, Iterator
from contextlib import contextmanager
from io import BytesIO

import pytest
from loguru import logger
from PIL import Image

from cl_image_processor.common.errors import (
    BlurError,
    DecodeError,
    EncodeSettingError,
    ResizeError,
)
from cl_image_processor.common.schemas import ImageDimensions, ProcessorConfig
from cl_image_processor.plugins.image_processing.algo.codec import (
    CompressionType,
    InterlaceScheme,
    PixelInterpolation,
    ResizeFilter,
)

# ============================================================================
# Image fixtures
# ============================================================================


def encode_image(
    width: int,
    height: int,
    image_format: str = "JPEG",
    mode: str = "RGB",
    **save_kwargs: object,
) -> bytes:
    """Encode a gradient image so resizing and blurring change its pixels."""
    image = Image.new(mode, (width, height))
    if mode in ("RGB", "RGBA"):
        pixels = [
            (x * 255 // max(1, width - 1), y * 255 // max(1, height - 1), 128, 255)[
                : len(mode)
            ]
            for y in range(height)
            for x in range(width)
        ]
        image.putdata(pixels)
    buffer = BytesIO()
    image.save(buffer, format=image_format, **save_kwargs)
    return buffer.getvalue()


@pytest.fixture
def make_image() -> Callable[..., bytes]:
    """Factory producing encoded images: make_image(width, height, format)."""
    return encode_image


@pytest.fixture
def jpeg_bytes() -> bytes:
    return encode_image(100, 50, "JPEG")


@pytest.fixture
def png_bytes() -> bytes:
    return encode_image(80, 80, "PNG", mode="RGBA")


@pytest.fixture
def default_config() -> ProcessorConfig:
    return ProcessorConfig(
        name="test",
        default_image_width=200,
        default_image_height=200,
        image_compression_quality=80,
    )


# ============================================================================
# Fake codec
# ============================================================================


_ERRORS: dict[str, type[Exception]] = {
    "resize": ResizeError,
    "set_interpolate_method": ResizeError,
    "strip": ResizeError,
    "set_interlace_scheme": EncodeSettingError,
    "set_compression": EncodeSettingError,
    "set_compression_quality": EncodeSettingError,
    "gaussian_blur": BlurError,
    "to_bytes": EncodeSettingError,
}


class FakeImageContext:
    """Working context recording every call made by the processor."""

    def __init__(self, width: int, height: int, image_format: str, fail_on: set[str]):
        self._dimensions = ImageDimensions.of(width, height)
        self._format = image_format
        self.fail_on = fail_on
        self.calls: list[tuple[object, ...]] = []
        self.closed = False

    @property
    def dimensions(self) -> ImageDimensions:
        return self._dimensions

    @property
    def format(self) -> str:
        return self._format

    def _record(self, name: str, *args: object) -> None:
        self.calls.append((name, *args))
        if name in self.fail_on:
            raise _ERRORS[name](f"{name} rejected")

    @property
    def call_names(self) -> list[str]:
        return [str(call[0]) for call in self.calls]

    def resize(self, dimensions: ImageDimensions, filter: ResizeFilter, blur: float = 1.0) -> None:
        self._record("resize", dimensions, filter, blur)
        self._dimensions = dimensions

    def set_interpolate_method(self, method: PixelInterpolation) -> None:
        self._record("set_interpolate_method", method)

    def strip(self) -> None:
        self._record("strip")

    def set_interlace_scheme(self, scheme: InterlaceScheme) -> None:
        self._record("set_interlace_scheme", scheme)

    def set_compression(self, compression: CompressionType) -> None:
        self._record("set_compression", compression)

    def set_compression_quality(self, quality: int) -> None:
        self._record("set_compression_quality", quality)

    def gaussian_blur(self, radius: float, sigma: float) -> None:
        self._record("gaussian_blur", radius, sigma)

    def to_bytes(self) -> bytes:
        self._record("to_bytes")
        return f"encoded:{self._dimensions}".encode()

    def signature(self) -> str:
        return f"sig:{self._dimensions}"

    def close(self) -> None:
        self.closed = True


class FakeCodec:
    """Codec handing out FakeImageContext instances with canned dimensions."""

    def __init__(
        self,
        width: int,
        height: int,
        image_format: str = "JPEG",
        fail_on: set[str] | None = None,
        undecodable: bool = False,
    ):
        self.width = width
        self.height = height
        self.image_format = image_format
        self.fail_on = fail_on or set()
        self.undecodable = undecodable
        self.contexts: list[FakeImageContext] = []

    @property
    def context(self) -> FakeImageContext:
        return self.contexts[-1]

    @contextmanager
    def open(self, data: bytes) -> Iterator[FakeImageContext]:
        if self.undecodable:
            raise DecodeError("cannot decode fake bytes")
        context = FakeImageContext(self.width, self.height, self.image_format, self.fail_on)
        self.contexts.append(context)
        try:
            yield context
        finally:
            context.close()


@pytest.fixture
def fake_codec() -> type[FakeCodec]:
    """Return the FakeCodec class so tests can build codecs with canned state."""
    return FakeCodec


# ============================================================================
# Logging
# ============================================================================


@pytest.fixture
def log_messages() -> Iterator[list[str]]:
    """Capture loguru records as "LEVEL message" strings."""
    messages: list[str] = []
    handler_id = logger.add(
        lambda message: messages.append(
            f"{message.record['level'].name} {message.record['message']}"
        ),
        level="DEBUG",
    )
    yield messages
    logger.remove(handler_id)
