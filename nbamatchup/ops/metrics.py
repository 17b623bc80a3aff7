"""In-process counters and timings for forecast runs."""

from contextlib import contextmanager
from typing import Dict, Iterator, List
import threading
import time


class MetricsRecorder:
    """Thread-safe counter/timing store; one shared instance per process."""

    def __init__(self) -> None:
        self._counters: Dict[str, int] = {}
        self._timings: Dict[str, List[float]] = {}
        self._lock = threading.Lock()

    def increment(self, key: str, value: int = 1) -> None:
        with self._lock:
            self._counters[key] = self._counters.get(key, 0) + int(value)

    def timing(self, key: str, value_ms: float) -> None:
        with self._lock:
            self._timings.setdefault(key, []).append(float(value_ms))

    @contextmanager
    def timed(self, key: str) -> Iterator[None]:
        start = time.perf_counter()
        try:
            yield
        finally:
            self.timing(key, (time.perf_counter() - start) * 1000)

    def count(self, key: str) -> int:
        with self._lock:
            return self._counters.get(key, 0)

    def snapshot(self) -> Dict[str, Dict]:
        with self._lock:
            timing_summary = {
                key: {
                    "count": len(values),
                    "avg_ms": sum(values) / len(values),
                    "max_ms": max(values),
                }
                for key, values in self._timings.items()
                if values
            }
            return {
                "counters": dict(self._counters),
                "timings": timing_summary,
            }

    def reset(self) -> None:
        with self._lock:
            self._counters.clear()
            self._timings.clear()


_DEFAULT_RECORDER = MetricsRecorder()


def get_metrics_recorder() -> MetricsRecorder:
    return _DEFAULT_RECORDER
