"""A circuit breaker that wraps the methods of another object."""

from __future__ import annotations

import threading
import time
from datetime import timedelta
from functools import wraps
from typing import Any, Callable


class CircuitOpenError(Exception):
    """Raised when a call is refused because the circuit is open."""

    def __init__(self, message: str = "CircuitBreaker: circuit is open") -> None:
        super().__init__(message)


class CircuitBreaker:
    """Proxy that opens the circuit after a run of consecutive failures.

    After ``consecutive_errors`` failing calls in a row, calls are refused with
    :class:`CircuitOpenError` for ``open_interval`` (seconds or a ``timedelta``).
    Exceptions matching any extra positional argument (an exception class or
    instance, also found through ``__cause__``) count as success.
    """

    def __init__(self, base: Any, consecutive_errors: int, open_interval: Any, *args: Any) -> None:
        if isinstance(open_interval, timedelta):
            open_interval = open_interval.total_seconds()
        self._base = base
        self._max_consecutive_errors = consecutive_errors
        self._open_interval = float(open_interval)
        self._ignore_errors = args
        self._consecutive_errors = 0
        self._closes_at: float | None = None
        self._lock = threading.Lock()

    def is_open(self) -> bool:
        """Return True while calls are being refused."""
        return self._closes_at is not None and self._closes_at > time.monotonic()

    def _is_ignored(self, error: BaseException | None) -> bool:
        while error is not None:
            for ignored in self._ignore_errors:
                if error is ignored or (isinstance(ignored, type) and isinstance(error, ignored)):
                    return True
            error = error.__cause__
        return False

    def call(self, func: Callable[..., Any] | str, *args: Any, **kwargs: Any) -> Any:
        """Call ``func`` (a callable or a method name of the base) through the breaker."""
        if isinstance(func, str):
            func = getattr(self._base, func)
        with self._lock:
            if self.is_open():
                raise CircuitOpenError()
        try:
            result = func(*args, **kwargs)
        except Exception as error:
            with self._lock:
                if self._is_ignored(error):
                    self._consecutive_errors, self._closes_at = 0, None
                else:
                    self._consecutive_errors += 1
                    if self._consecutive_errors >= self._max_consecutive_errors:
                        self._closes_at = time.monotonic() + self._open_interval
            raise
        with self._lock:
            self._consecutive_errors, self._closes_at = 0, None
        return result

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            raise AttributeError(name)
        attribute = getattr(self._base, name)
        if not callable(attribute):
            return attribute

        @wraps(attribute)
        def guarded(*args: Any, **kwargs: Any) -> Any:
            return self.call(attribute, *args, **kwargs)

        return guarded