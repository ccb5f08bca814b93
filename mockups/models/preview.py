"""Preview model."""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class Preview:
    """A generated image shown to the customer for one artwork."""

    id: int
    artwork_id: int
    order: int | None
    image_url: str
    for_marketing: bool = False
    params: dict[str, Any] = field(default_factory=dict)  # upload params, e.g. skip_distribution
