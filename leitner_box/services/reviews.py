import structlog

from ..domain.errors import NotDueYet
from ..domain.enums import Rating
from ..utils.time import to_iso, to_utc, utc_now

logger = structlog.get_logger()


def record_review(scheduler, card, rating, review_datetime=None):
    rating = Rating.parse(rating)
    review_datetime = to_utc(review_datetime) if review_datetime is not None else utc_now()
    logger.info("review_received",
        card_id=card.card_id,
        box_number=card.box_number,
        rating=rating.label,
        review_utc=to_iso(review_datetime),
    )

    try:
        updated, review_log = scheduler.review_card(card, rating, review_datetime)
    except NotDueYet as exc:
        logger.info("review_rejected",
            card_id=card.card_id,
            due_utc=to_iso(exc.due),
            review_utc=to_iso(exc.review_datetime),
        )
        raise

    logger.info("review_scheduled",
        card_id=updated.card_id,
        previous_box=card.box_number,
        box_number=updated.box_number,
        interval_days=scheduler.box_intervals[updated.box_number - 1],
        next_review_utc=to_iso(updated.due),
    )
    return updated, review_log


def replay_reviews(scheduler, card, events):
    """
    Rebuild a card's state from a review history of (rating, review_datetime) pairs,
    applied in order. Returns the final card and one log per event.
    """
    review_logs = []
    for rating, review_datetime in events:
        card, review_log = record_review(scheduler, card, rating, review_datetime)
        review_logs.append(review_log)

    logger.info("reviews_replayed",
        card_id=card.card_id,
        review_count=len(review_logs),
        box_number=card.box_number,
        next_review_utc=to_iso(card.due),
    )
    return card, review_logs
