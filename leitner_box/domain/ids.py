import threading

from ..utils.time import utc_now


class MillisecondIdAllocator:
    """
    Hands out card ids derived from the current UTC time in milliseconds.
    Ids never repeat within one allocator: a collision bumps to last + 1.
    """

    def __init__(self, clock=utc_now):
        self._clock = clock
        self._last = None
        self._lock = threading.Lock()

    def __call__(self) -> int:
        candidate = int(self._clock().timestamp() * 1000)
        with self._lock:
            if self._last is not None and candidate <= self._last:
                candidate = self._last + 1
            self._last = candidate
        return candidate


default_id_allocator = MillisecondIdAllocator()


def next_card_id() -> int:
    return default_id_allocator()
