from datetime import datetime, timedelta, timezone

import pytest

from leitner_box.domain.enums import OnFailPolicy, Rating
from leitner_box.domain.ids import MillisecondIdAllocator
from leitner_box.domain.models import Card, ReviewLog
from leitner_box.domain.scheduler import LeitnerScheduler

from .conftest import utc


def test_card_defaults():
    card = Card()

    assert isinstance(card.card_id, int)
    assert card.box_number == 1
    assert card.due is None


def test_default_card_ids_are_unique():
    ids = {Card().card_id for _ in range(200)}

    assert len(ids) == 200


def test_allocator_bumps_on_same_millisecond():
    frozen = utc(2024, 1, 1)
    allocate = MillisecondIdAllocator(clock=lambda: frozen)

    first = allocate()
    second = allocate()

    assert first == int(frozen.timestamp() * 1000)
    assert second == first + 1


def test_card_due_is_normalised_to_utc():
    tokyo = timezone(timedelta(hours=9))
    card = Card(card_id=1, due=datetime(2024, 1, 12, 9, 0, tzinfo=tokyo))

    assert card.due == utc(2024, 1, 12)
    assert card.due.tzinfo == timezone.utc


def test_card_to_dict():
    card = Card(card_id=7, box_number=2, due=utc(2024, 1, 12))

    assert card.to_dict() == {
        "id": 7,
        "box_number": 2,
        "due": "2024-01-12T00:00:00+00:00",
    }
    assert Card(card_id=8).to_dict()["due"] is None


def test_card_from_dict_accepts_z_suffix():
    card = Card.from_dict({"id": 7, "box_number": 2, "due": "2024-01-12T00:00:00Z"})

    assert card == Card(card_id=7, box_number=2, due=utc(2024, 1, 12))


def test_card_from_dict_reads_naive_timestamp_as_utc():
    card = Card.from_dict({"id": 7, "box_number": 2, "due": "2024-01-12T00:00:00"})

    assert card.due == utc(2024, 1, 12)
    assert card.due.tzinfo == timezone.utc


def test_card_from_dict_accepts_card_id_key():
    card = Card.from_dict({"card_id": 7, "box_number": 2, "due": None})

    assert card.card_id == 7


def test_card_from_dict_without_id_allocates_one():
    card = Card.from_dict({"box_number": 1, "due": None})

    assert isinstance(card.card_id, int)
    assert card.box_number == 1


def test_review_log_to_dict():
    review_log = ReviewLog(
        card=Card(card_id=1, box_number=1),
        rating=Rating.PASS,
        review_datetime=utc(2024, 1, 10, 12),
    )

    assert review_log.to_dict() == {
        "card": {"id": 1, "box_number": 1, "due": None},
        "rating": "Pass",
        "reviewed_at": "2024-01-10T12:00:00+00:00",
    }


def test_review_log_from_dict_accepts_integer_rating():
    review_log = ReviewLog.from_dict({
        "card": {"card_id": 1, "box_number": 2, "due": None},
        "rating": 0,
        "reviewed_at": "2024-01-10T12:00:00+00:00",
    })

    assert review_log.rating is Rating.FAIL
    assert review_log.card.box_number == 2


def test_scheduler_dict_round_trip(scheduler):
    data = scheduler.to_dict()

    assert data == {
        "box_intervals": [1, 2, 7],
        "start_datetime": "2024-01-01T00:00:00+00:00",
        "on_fail": "first_box",
    }
    assert LeitnerScheduler.from_dict(data) == scheduler


@pytest.mark.parametrize("value, expected", [("Pass", Rating.PASS), ("fail", Rating.FAIL), (1, Rating.PASS)])
def test_rating_parse(value, expected):
    assert Rating.parse(value) is expected


@pytest.mark.parametrize("value", ["maybe", 2])
def test_rating_parse_rejects_unknown(value):
    with pytest.raises(ValueError):
        Rating.parse(value)


def test_on_fail_policy_parse():
    assert OnFailPolicy.parse("first_box") is OnFailPolicy.RESET_TO_FIRST_BOX
    assert OnFailPolicy.parse("prev_box") is OnFailPolicy.STEP_BACK_ONE_BOX
    assert OnFailPolicy.parse(OnFailPolicy.NO_CHANGE) is OnFailPolicy.NO_CHANGE
    assert OnFailPolicy.parse("last_box") is OnFailPolicy.NO_CHANGE


def test_review_log_from_dict_accepts_review_datetime_key():
    review_log = ReviewLog.from_dict({
        "card": {"card_id": 1, "box_number": 2, "due": None},
        "rating": "Fail",
        "review_datetime": "2024-01-10T12:00:00+00:00",
    })

    assert review_log.review_datetime == utc(2024, 1, 10, 12)
