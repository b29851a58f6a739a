class LeitnerError(Exception):
    """Base class for every error raised by leitner_box."""


class ConstructionError(LeitnerError, ValueError):
    """The scheduler configuration is invalid; no scheduler was built."""


class InvalidFirstInterval(ConstructionError):
    def __init__(self, box_intervals):
        self.box_intervals = tuple(box_intervals)
        super().__init__("Box 1 must have an interval of 1 day.")


class InvalidBoxInterval(ConstructionError):
    def __init__(self, box_number, interval):
        self.box_number = box_number
        self.interval = interval
        super().__init__(
            f"Box {box_number} must have a positive whole number of days, got {interval!r}."
        )


class ReviewError(LeitnerError):
    """A review was rejected; the card was not changed."""


class NotDueYet(ReviewError):
    def __init__(self, card_id, due, review_datetime):
        self.card_id = card_id
        self.due = due
        self.review_datetime = review_datetime
        super().__init__(
            f"Card {card_id} is not due for review yet "
            f"(due {due.isoformat()}, reviewed {review_datetime.isoformat()})."
        )
