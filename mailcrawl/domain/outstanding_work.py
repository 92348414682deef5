import threading
from typing import Optional


class OutstandingWork:
    """
    Thread-safe count of crawl tasks that are scheduled but not yet finished.

    A parent reserves a slot for each child with `add()` before the child is
    started; every task calls `done()` exactly once when it exits. Waiters are
    released when the count returns to zero, which only happens once the whole
    recursive tree has finished.
    """

    def __init__(self):
        self._cond = threading.Condition()
        self._pending = 0

    @property
    def pending(self) -> int:
        with self._cond:
            return self._pending

    def add(self, count: int = 1) -> None:
        if count < 0:
            raise ValueError("count must be >= 0")
        with self._cond:
            self._pending += count

    def done(self) -> None:
        with self._cond:
            if self._pending <= 0:
                raise ValueError("done() called more times than add()")
            self._pending -= 1
            if self._pending == 0:
                self._cond.notify_all()

    def wait(self, timeout: Optional[float] = None) -> bool:
        """Block until no work is outstanding. Returns False on timeout."""
        with self._cond:
            return self._cond.wait_for(lambda: self._pending == 0, timeout=timeout)
