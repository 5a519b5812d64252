import threading


class Counters:
    """Process-wide map of named integer counters, published at /debug/vars."""

    def __init__(self):
        self._lock = threading.Lock()
        self._values: dict[str, int] = {}

    def add(self, key: str, delta: int = 1) -> int:
        with self._lock:
            value = self._values.get(key, 0) + delta
            self._values[key] = value
            return value

    def get(self, key: str) -> int:
        with self._lock:
            return self._values.get(key, 0)

    def snapshot(self) -> dict[str, int]:
        with self._lock:
            return dict(self._values)

    def reset(self) -> None:
        with self._lock:
            self._values.clear()


counters = Counters()


def get_counters() -> Counters:
    return counters
