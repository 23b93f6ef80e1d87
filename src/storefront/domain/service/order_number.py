"""Domain service: human-readable order numbers.

Format: ``BG-<base36 millisecond timestamp>-<5 random base36 chars>``,
upper-cased, e.g. ``BG-LXQ2Z4K1-7F3KD``.

Numbers are unique in practice within one process. Nothing here checks
persisted orders for collisions.
"""

from __future__ import annotations

import random
from datetime import datetime, timezone
from typing import Callable

PREFIX = "BG"
SUFFIX_LENGTH = 5
BASE36_DIGITS = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ"


def to_base36(value: int) -> str:
    if value < 0:
        raise ValueError("base36 encoding requires a non-negative integer")
    if value == 0:
        return "0"
    digits = []
    while value:
        value, remainder = divmod(value, 36)
        digits.append(BASE36_DIGITS[remainder])
    return "".join(reversed(digits))


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class OrderNumberGenerator:

    def __init__(
        self,
        clock: Callable[[], datetime] = _utc_now,
        rng: random.Random | None = None,
    ) -> None:
        self._clock = clock
        self._rng = rng or random.SystemRandom()
        self._last_millis = -1

    def generate(self) -> str:
        # Never reuse or go back on a timestamp, even within one millisecond
        # or across a clock adjustment.
        millis = int(self._clock().timestamp() * 1000)
        millis = max(millis, self._last_millis + 1)
        self._last_millis = millis

        suffix = "".join(
            self._rng.choice(BASE36_DIGITS) for _ in range(SUFFIX_LENGTH)
        )
        return f"{PREFIX}-{to_base36(millis)}-{suffix}".upper()
