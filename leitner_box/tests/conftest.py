from datetime import datetime, timezone

import pytest

from leitner_box.domain.scheduler import LeitnerScheduler


def utc(*args):
    return datetime(*args, tzinfo=timezone.utc)


@pytest.fixture
def start():
    return utc(2024, 1, 1)


@pytest.fixture
def scheduler(start):
    return LeitnerScheduler(box_intervals=[1, 2, 7], start_datetime=start, on_fail="first_box")


@pytest.fixture
def step_back_scheduler(start):
    return LeitnerScheduler(box_intervals=[1, 2, 7], start_datetime=start, on_fail="prev_box")
