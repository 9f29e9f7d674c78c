"""Common module - schemas and exceptions."""

from .errors import (
    BlurError,
    DecodeError,
    DimensionResolutionError,
    EncodeSettingError,
    ProcessingError,
    ResizeError,
)
from .schemas import ImageDimensions, ProcessorConfig

__all__ = [
    "ImageDimensions",
    "ProcessorConfig",
    "ProcessingError",
    "DecodeError",
    "ResizeError",
    "BlurError",
    "EncodeSettingError",
    "DimensionResolutionError",
]
