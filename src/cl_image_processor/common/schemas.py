"""Pydantic schemas for image dimensions and processor configuration."""

from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field

# ─────────────────────────────────────────────────────────────
# Dimensions
# ─────────────────────────────────────────────────────────────


class ImageDimensions(BaseModel):
    """Width/height pair in pixels.

    A value of 0 on either axis means "unspecified": the axis is derived from
    the source image's aspect ratio during resolution.
    """

    width: int = Field(0, ge=0, description="Width in pixels (0 = unspecified)")
    height: int = Field(0, ge=0, description="Height in pixels (0 = unspecified)")

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True)

    @classmethod
    def of(cls, width: int, height: int) -> "ImageDimensions":
        return cls(width=width, height=height)

    def aspect_ratio(self) -> float:
        """Return ``width / height``.

        Raises:
            ValueError: If height is 0
        """
        if self.height == 0:
            raise ValueError(f"Aspect ratio undefined for zero height: {self.width}x0")
        return self.width / self.height

    @property
    def is_unspecified(self) -> bool:
        return self.width == 0 and self.height == 0

    @property
    def is_resolved(self) -> bool:
        return self.width > 0 and self.height > 0

    def __str__(self) -> str:
        return f"{self.width}x{self.height}"


# ─────────────────────────────────────────────────────────────
# Processor configuration
# ─────────────────────────────────────────────────────────────


class ProcessorConfig(BaseModel):
    """Read-only processing policy shared by every request of a processor.

    Attributes:
        name: Processor name, used to tag log records
        default_image_width: Width used when a request specifies no dimensions
        default_image_height: Height used when a request specifies no dimensions
        max_image_width: Upper bound for output width (0 = unbounded)
        max_image_height: Upper bound for output height (0 = unbounded)
        maintain_aspect_ratio: Fit requests that give both axes to the source ratio
        image_compression_quality: JPEG quality applied to rescaled JPEG output
        max_blur_radius_percentage: Scale factor applied to the requested blur fraction
    """

    name: str = Field("default", min_length=1)
    default_image_width: int = Field(0, ge=0)
    default_image_height: int = Field(0, ge=0)
    max_image_width: int = Field(0, ge=0)
    max_image_height: int = Field(0, ge=0)
    maintain_aspect_ratio: bool = True
    image_compression_quality: int = Field(85, ge=1, le=100)
    max_blur_radius_percentage: float = Field(1.0, ge=0.0)

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="forbid")

    @property
    def default_dimensions(self) -> ImageDimensions:
        return ImageDimensions.of(self.default_image_width, self.default_image_height)
