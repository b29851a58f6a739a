from dataclasses import InitVar, dataclass, replace
from datetime import datetime
from typing import Optional, Tuple

from ..config import DEFAULT_BOX_INTERVALS, DEFAULT_ON_FAIL, FIRST_BOX_INTERVAL, GRID_OFFSET_DAYS
from ..utils.time import days, from_iso, start_of_day_utc, to_iso, to_naive_utc, to_utc, utc_now
from .enums import OnFailPolicy, Rating
from .errors import ConstructionError, InvalidBoxInterval, InvalidFirstInterval, NotDueYet
from .logic import next_box_number, next_grid_due
from .models import Card, ReviewLog


@dataclass(frozen=True)
class LeitnerScheduler:
    """
    Leitner box scheduler.

    Immutable once built, so one instance can be shared by any number of
    callers. Due dates fall on a grid anchored one day before
    ``start_datetime``, which keeps every card of a box on the same dates.

    Args:
        box_intervals: review interval in days for each box, box 1 first.
            Box 1 must be 1 day.
        start_datetime: grid anchor, defaults to now. Stored as naive UTC.
        on_fail: what a failed review does to the box ("first_box",
            "prev_box" or "no_change"). Unknown strings behave as "no_change"
            unless ``strict_policy`` is set.
    """

    box_intervals: Tuple[int, ...] = DEFAULT_BOX_INTERVALS
    start_datetime: Optional[datetime] = None
    on_fail: OnFailPolicy = OnFailPolicy(DEFAULT_ON_FAIL)
    strict_policy: InitVar[bool] = False

    def __post_init__(self, strict_policy):
        intervals = tuple(self.box_intervals)
        if not intervals or intervals[0] != FIRST_BOX_INTERVAL:
            raise InvalidFirstInterval(intervals)
        for box_number, interval in enumerate(intervals, start=1):
            if isinstance(interval, bool) or not isinstance(interval, int) or interval <= 0:
                raise InvalidBoxInterval(box_number, interval)

        start = self.start_datetime if self.start_datetime is not None else utc_now()

        object.__setattr__(self, "box_intervals", intervals)
        object.__setattr__(self, "start_datetime", to_naive_utc(start))
        if self.start_datetime < datetime.min + days(GRID_OFFSET_DAYS):
            raise ConstructionError(
                f"start_datetime must be at least {GRID_OFFSET_DAYS} day after datetime.min to anchor the grid."
            )
        object.__setattr__(self, "on_fail", OnFailPolicy.parse(self.on_fail, strict=strict_policy))

    @property
    def box_count(self) -> int:
        return len(self.box_intervals)

    @property
    def start_datetime_utc(self) -> datetime:
        return to_utc(self.start_datetime)

    @property
    def anchor(self) -> datetime:
        return self.start_datetime - days(GRID_OFFSET_DAYS)

    def is_due(self, card: Card, now: Optional[datetime] = None) -> bool:
        if card.due is None:
            return True
        now = to_utc(now) if now is not None else utc_now()
        return now >= card.due

    def review_card(
        self, card: Card, rating: Rating, review_datetime: Optional[datetime] = None
    ) -> Tuple[Card, ReviewLog]:
        """
        Apply one review to ``card`` and return the updated card with its log.

        Raises NotDueYet when ``review_datetime`` is before the card's due date.
        A card that was never reviewed is due from midnight UTC of the review day.
        """
        review_datetime = to_utc(review_datetime) if review_datetime is not None else utc_now()
        rating = Rating.parse(rating)

        review_log = ReviewLog(card=card, rating=rating, review_datetime=review_datetime)

        due = card.due if card.due is not None else start_of_day_utc(review_datetime)
        if review_datetime < due:
            raise NotDueYet(card.card_id, due, review_datetime)

        box_number = next_box_number(card.box_number, rating, self.on_fail, self.box_count)
        interval = self.box_intervals[box_number - 1]
        next_due = next_grid_due(self.anchor, interval, to_naive_utc(review_datetime))

        updated = replace(card, box_number=box_number, due=to_utc(next_due))
        return updated, review_log

    review = review_card

    def to_dict(self) -> dict:
        return {
            "box_intervals": list(self.box_intervals),
            "start_datetime": to_iso(self.start_datetime),
            "on_fail": self.on_fail.value,
        }

    @classmethod
    def from_dict(cls, data: dict, strict_policy: bool = False) -> "LeitnerScheduler":
        return cls(
            box_intervals=tuple(data["box_intervals"]),
            start_datetime=from_iso(data.get("start_datetime")),
            on_fail=data.get("on_fail", DEFAULT_ON_FAIL),
            strict_policy=strict_policy,
        )
