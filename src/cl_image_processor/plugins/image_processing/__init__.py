"""Image processing plugin: scale and blur images on request."""

from .algo.image_processor import ImageProcessor
from .schema import ProcessedImage, ProcessingOutcome, ProcessingRequest

__all__ = ["ImageProcessor", "ProcessingRequest", "ProcessedImage", "ProcessingOutcome"]
