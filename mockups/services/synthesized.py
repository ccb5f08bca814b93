"""Static photos appended to every preview set."""

from ..config import (
    PRODUCT_DETAILS_ORDER,
    PRODUCT_DETAILS_URL,
    SIZING_PHOTO_ORDER,
    sizing_photo_url,
)
from ..models import Artwork, Preview
from ..stores import ArtworkRepository


class SynthesizedPhotoAppender:
    """Add the product details and sizing chart photos at fixed positions."""

    def __init__(self, repository: ArtworkRepository):
        self.repository = repository

    def append_product_details(self, artwork: Artwork) -> Preview:
        return self.repository.create_preview(
            artwork.id,
            PRODUCT_DETAILS_URL,
            order=PRODUCT_DETAILS_ORDER,
            params={"skip_distribution": True},
        )

    def append_sizing_photo(self, artwork: Artwork) -> Preview:
        return self.repository.create_preview(
            artwork.id,
            sizing_photo_url(artwork.template_type.value),
            order=SIZING_PHOTO_ORDER,
            params={"skip_distribution": True},
        )
