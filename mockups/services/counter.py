"""Preview order counters."""

import logging
import threading

from ..config import PRODUCT_DETAILS_ORDER, SIZING_PHOTO_ORDER
from ..models import Template

logger = logging.getLogger(__name__)


class OrderCounter:
    """
    Two running counters for one pipeline run.

    Model templates and non-model templates count independently, both from 1.
    Both partitions share one preview list, so their values can repeat each
    other and can reach the fixed synthesized positions; that overlap is kept.
    """

    def __init__(self):
        self.model_order_count = 0
        self.mockup_order_count = 0
        self._lock = threading.Lock()

    def next_for(self, template: Template) -> int:
        with self._lock:
            if template.with_model:
                self.model_order_count += 1
                order = self.model_order_count
            else:
                self.mockup_order_count += 1
                order = self.mockup_order_count

        if order in (SIZING_PHOTO_ORDER, PRODUCT_DETAILS_ORDER):
            logger.warning(f"Template {template.id} got order {order}, same as a fixed synthesized photo")
        return order
