from .domain.enums import OnFailPolicy, Rating
from .domain.errors import (
    ConstructionError,
    InvalidBoxInterval,
    InvalidFirstInterval,
    LeitnerError,
    NotDueYet,
    ReviewError,
)
from .domain.ids import MillisecondIdAllocator
from .domain.models import Card, ReviewLog
from .domain.scheduler import LeitnerScheduler
from .services.reviews import record_review, replay_reviews
from .utils.log import configure_logging

__all__ = [
    "Card",
    "ConstructionError",
    "InvalidBoxInterval",
    "InvalidFirstInterval",
    "LeitnerError",
    "LeitnerScheduler",
    "MillisecondIdAllocator",
    "NotDueYet",
    "OnFailPolicy",
    "Rating",
    "ReviewError",
    "ReviewLog",
    "configure_logging",
    "record_review",
    "replay_reviews",
]
