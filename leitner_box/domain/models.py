from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..utils.time import from_iso, to_iso, to_utc
from .enums import Rating
from .ids import next_card_id


@dataclass(frozen=True)
class Card:
    """
    Scheduling state of one reviewable card.
    A card without a due date has never been reviewed and is due immediately.
    """

    card_id: Optional[int] = None
    box_number: int = 1
    due: Optional[datetime] = None

    def __post_init__(self):
        if self.card_id is None:
            object.__setattr__(self, "card_id", next_card_id())
        if self.due is not None:
            object.__setattr__(self, "due", to_utc(self.due))

    def to_dict(self) -> dict:
        return {
            "id": self.card_id,
            "box_number": self.box_number,
            "due": to_iso(self.due),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Card":
        card_id = data.get("id", data.get("card_id"))
        return cls(
            card_id=int(card_id) if card_id is not None else None,
            box_number=int(data["box_number"]),
            due=from_iso(data.get("due")),
        )


@dataclass(frozen=True)
class ReviewLog:
    """Record of a single review, holding the card as it was before the review."""

    card: Card
    rating: Rating
    review_datetime: datetime

    def __post_init__(self):
        object.__setattr__(self, "rating", Rating.parse(self.rating))
        object.__setattr__(self, "review_datetime", to_utc(self.review_datetime))

    def to_dict(self) -> dict:
        return {
            "card": self.card.to_dict(),
            "rating": self.rating.label,
            "reviewed_at": to_iso(self.review_datetime),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "ReviewLog":
        return cls(
            card=Card.from_dict(data["card"]),
            rating=Rating.parse(data["rating"]),
            review_datetime=from_iso(data.get("reviewed_at", data.get("review_datetime"))),
        )
