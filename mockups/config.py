import os
from dotenv import load_dotenv

load_dotenv()

# API Keys and Config - loaded from .env
RENDER_API_URL = os.getenv("RENDER_API_URL", "https://image.adobe.io/pie/psdService")
RENDER_API_TOKEN = os.getenv("RENDER_API_TOKEN")
RENDER_API_KEY = os.getenv("RENDER_API_KEY")
RENDER_SMART_OBJECT_LAYER = os.getenv("RENDER_SMART_OBJECT_LAYER", "artwork")
UPLOAD_CALLBACK_URL = os.getenv("UPLOAD_CALLBACK_URL", "")
QUEUE_URL = os.getenv("QUEUE_URL")

# Store backends: a registered name ("memory") or "package.module:ClassName"
ARTWORK_REPOSITORY_BACKEND = os.getenv("ARTWORK_REPOSITORY_BACKEND", "memory")
INTEGRATION_LOG_BACKEND = os.getenv("INTEGRATION_LOG_BACKEND", "memory")

# Dispatch behaviour
SUBMIT_RETRIES = int(os.getenv("SUBMIT_RETRIES", "2"))
SUBMIT_BACKOFF = float(os.getenv("SUBMIT_BACKOFF", "1.0"))
DISPATCH_WORKERS = int(os.getenv("DISPATCH_WORKERS", "1"))

# Composition constants
COMPOSITION_WIDTH = 3000
UPLOAD_TYPE_PREVIEW = "preview"
LOG_ACTION_RENDER_PREVIEWS = "render.previews"
LOG_ACTION_RUN_STARTED = "render.previews.started"

# Synthesized photos (fixed positions, outside the order counters)
PRODUCT_DETAILS_URL = "https://cc-templates.s3.us-west-1.amazonaws.com/product_details.jpg"
PRODUCT_DETAILS_ORDER = 8
SIZING_PHOTO_ORDER = 7

# Physical print sizes per template shape, largest first
TEMPLATE_SIZES: dict[str, list[str]] = {
    "vertical": ["24x36", "16x24", "12x18"],
    "horizontal": ["36x24", "24x16", "18x12"],
    "tall": ["20x60", "16x48", "12x36"],
    "square": ["36x36", "24x24", "12x12"],
    "wide": ["60x20", "48x16", "36x12"],
}

SIZING_PHOTO_URLS: dict[str, str] = {
    "vertical": "https://cc-templates.s3.us-west-1.amazonaws.com/sizing_vertical.jpg",
    "horizontal": "https://cc-templates.s3.us-west-1.amazonaws.com/sizing_horizontal.jpg",
    "tall": "https://cc-templates.s3.us-west-1.amazonaws.com/sizing_tall.jpg",
    "square": "https://cc-templates.s3.us-west-1.amazonaws.com/sizing_square.jpg",
    "wide": "https://cc-templates.s3.us-west-1.amazonaws.com/sizing_wide.jpg",
}


def required_sizes(template_type: str) -> list[str]:
    """Ordered print sizes for a template shape. The first one is authoritative."""
    if template_type not in TEMPLATE_SIZES:
        raise ValueError(f"Invalid template_type: {template_type}. Valid: {list(TEMPLATE_SIZES.keys())}")
    return TEMPLATE_SIZES[template_type]


def sizing_photo_url(template_type: str) -> str:
    """Static sizing chart image for a template shape."""
    if template_type not in SIZING_PHOTO_URLS:
        raise ValueError(f"Invalid template_type: {template_type}. Valid: {list(SIZING_PHOTO_URLS.keys())}")
    return SIZING_PHOTO_URLS[template_type]
