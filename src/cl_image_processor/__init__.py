"""cl_image_processor - request-driven image scaling and blurring."""

from .common.errors import (
    BlurError,
    DecodeError,
    DimensionResolutionError,
    EncodeSettingError,
    ProcessingError,
    ResizeError,
)
from .common.schemas import ImageDimensions, ProcessorConfig
from .plugins.image_processing.algo.image_processor import ImageProcessor
from .plugins.image_processing.schema import (
    ProcessedImage,
    ProcessingOutcome,
    ProcessingRequest,
)

__version__ = "0.1.0"

__all__ = [
    "ImageDimensions",
    "ProcessorConfig",
    "ProcessingRequest",
    "ProcessedImage",
    "ProcessingOutcome",
    "ImageProcessor",
    "ProcessingError",
    "DecodeError",
    "ResizeError",
    "BlurError",
    "EncodeSettingError",
    "DimensionResolutionError",
    "__version__",
]
