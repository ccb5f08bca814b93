"""Business logic services."""

from .composition import CompositionService
from .counter import OrderCounter
from .selector import TemplateBatches, TemplateSelector, partition
from .status import StatusPoller
from .synthesized import SynthesizedPhotoAppender

__all__ = [
    "CompositionService",
    "OrderCounter",
    "TemplateBatches",
    "TemplateSelector",
    "partition",
    "StatusPoller",
    "SynthesizedPhotoAppender",
]
