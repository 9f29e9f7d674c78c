"""Image processing request/result schemas."""

from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field

from ...common.schemas import ImageDimensions


class ProcessingRequest(BaseModel):
    """Parameters of a single processing request.

    Attributes:
        dimensions: Requested output dimensions; either axis may be 0
                    (derived from the source aspect ratio), both 0 selects
                    the processor's default dimensions
        blur_radius: Blur radius as a fraction of the image width (0 = no blur)
    """

    dimensions: ImageDimensions = Field(default_factory=ImageDimensions)
    blur_radius: float = Field(0.0, ge=0.0)

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True)

    @classmethod
    def for_size(
        cls, width: int = 0, height: int = 0, blur_radius: float = 0.0
    ) -> "ProcessingRequest":
        return cls(dimensions=ImageDimensions.of(width, height), blur_radius=blur_radius)


class ProcessedImage(BaseModel):
    """Image handed back to the serving pipeline."""

    data: bytes = Field(description="Encoded image bytes")
    mime_type: str = Field(description="image/<lowercased codec format>")
    signature: str = Field(description="Content signature reported by the codec")

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True)


class ProcessingOutcome(BaseModel):
    """Processed image plus a record of which operations modified it."""

    image: ProcessedImage
    dimensions: ImageDimensions
    scale_modified: bool = False
    blur_modified: bool = False
    blur_radius: float = 0.0

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True)

    @property
    def modified(self) -> bool:
        return self.scale_modified or self.blur_modified
