"""Confirmation code generation."""

import secrets
import string
import threading
import time
from collections.abc import Callable

CODE_ALPHABET = string.digits + string.ascii_lowercase
MIN_RANDOM_LENGTH = 9


def _now_millis() -> int:
    return time.time_ns() // 1_000_000


class ConfirmationCodeGenerator:
    """
    Produces opaque confirmation codes of the form ``<prefix>-<millis>-<random>``.

    The millisecond component never goes backwards within one generator, even
    if the wall clock does. The random component is drawn from ``secrets`` so
    two codes issued in the same millisecond still differ with overwhelming
    probability. Uniqueness is not checked against the store.
    """

    def __init__(
        self,
        prefix: str = "uid",
        random_length: int = MIN_RANDOM_LENGTH,
        clock: Callable[[], int] = _now_millis,
    ):
        """Initialize generator with code prefix, random length and clock."""
        if random_length < MIN_RANDOM_LENGTH:
            raise ValueError(f"random_length must be at least {MIN_RANDOM_LENGTH}")
        self.prefix = prefix
        self.random_length = random_length
        self._clock = clock
        self._last_millis = 0
        self._lock = threading.Lock()

    def _timestamp(self) -> int:
        with self._lock:
            self._last_millis = max(self._last_millis, self._clock())
            return self._last_millis

    def generate(self) -> str:
        """
        Generate a new confirmation code.

        Returns:
            Confirmation code string
        """
        suffix = "".join(secrets.choice(CODE_ALPHABET) for _ in range(self.random_length))
        return f"{self.prefix}-{self._timestamp()}-{suffix}"
