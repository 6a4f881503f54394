from .events import EventBus
from .config import Config
from .safety import (
    Category,
    ContentRatingEngine,
    RatingResult,
    Strictness,
    assess_content_rating,
)

__version__ = "0.1.0"
