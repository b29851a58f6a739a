from datetime import datetime, timedelta

from .enums import OnFailPolicy, Rating


def next_box_number(box_number: int, rating: Rating, on_fail: OnFailPolicy, box_count: int) -> int:
    if rating == Rating.PASS:
        proposed = box_number + 1
    elif on_fail == OnFailPolicy.RESET_TO_FIRST_BOX:
        proposed = 1
    elif on_fail == OnFailPolicy.STEP_BACK_ONE_BOX:
        proposed = box_number - 1
    else:
        proposed = box_number

    # Top box does not overflow, box 1 is the floor
    return max(1, min(proposed, box_count))


def next_grid_due(anchor: datetime, interval_days: int, review_datetime: datetime) -> datetime:
    """
    First point of the grid ``anchor + k * interval_days`` (k >= 1) strictly after
    ``review_datetime``. Overdue cards skip ahead to the next future grid point.

    Raises OverflowError when that point is past ``datetime.max``.
    """
    if interval_days <= 0:
        raise ValueError(f"Interval must be a positive number of days, got {interval_days}")

    step = timedelta(days=interval_days)
    k = max(1, (review_datetime - anchor) // step + 1)
    try:
        return anchor + k * step
    except OverflowError as exc:
        raise OverflowError(
            f"Next due date after {review_datetime.isoformat()} is outside the supported datetime range"
        ) from exc
