from enum import Enum, IntEnum

import structlog

from .errors import ConstructionError

logger = structlog.get_logger()


class Rating(IntEnum):
    FAIL = 0
    PASS = 1

    @property
    def label(self) -> str:
        return RATING_LABELS[self]

    @classmethod
    def parse(cls, value):
        """Accept a Rating, its integer value or its label ("Fail"/"Pass")."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            for rating, label in RATING_LABELS.items():
                if value.lower() == label.lower():
                    return rating
            raise ValueError(f"Unknown rating: {value!r}")
        return cls(value)


RATING_LABELS = {
    Rating.FAIL: "Fail",
    Rating.PASS: "Pass",
}


class OnFailPolicy(str, Enum):
    RESET_TO_FIRST_BOX = "first_box"
    STEP_BACK_ONE_BOX = "prev_box"
    NO_CHANGE = "no_change"

    @classmethod
    def parse(cls, value, strict: bool = False) -> "OnFailPolicy":
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            if strict:
                raise ConstructionError(f"Unknown on-fail policy: {value!r}") from None
        # Unrecognised policies leave the box untouched on Fail
        logger.warning("unknown_on_fail_policy", on_fail=str(value), fallback=cls.NO_CHANGE.value)
        return cls.NO_CHANGE
