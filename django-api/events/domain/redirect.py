"""Delayed navigation shown after a successful booking."""

import threading
from collections.abc import Callable
from dataclasses import dataclass, field


@dataclass
class PendingRedirect:
    """Navigate to ``to`` once ``delay_seconds`` have elapsed, unless cancelled first.

    A redirect fires at most once. Cancelling it, for example when the view
    that scheduled it is torn down, guarantees the callback never runs.

    The API only returns ``to`` and ``delay_seconds``; the countdown itself is
    run by in-process clients and tests.
    """

    to: str
    delay_seconds: float
    _timer: threading.Timer | None = field(default=None, init=False, repr=False, compare=False)
    _cancelled: bool = field(default=False, init=False, repr=False, compare=False)
    _lock: threading.Lock = field(default_factory=threading.Lock, init=False, repr=False, compare=False)

    def start(self, navigate: Callable[[str], None]) -> None:
        with self._lock:
            if self._timer is not None or self._cancelled:
                return
            self._timer = threading.Timer(self.delay_seconds, self._fire, args=(navigate,))
            self._timer.daemon = True
            self._timer.start()

    def cancel(self) -> None:
        with self._lock:
            self._cancelled = True
            if self._timer is not None:
                self._timer.cancel()

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def _fire(self, navigate: Callable[[str], None]) -> None:
        with self._lock:
            if self._cancelled:
                return
        navigate(self.to)
