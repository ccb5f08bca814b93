"""Preview rendering pipeline."""

from .engine import PreviewPipeline
from .factory import build_pipeline, get_pipeline

__all__ = ["PreviewPipeline", "build_pipeline", "get_pipeline"]
