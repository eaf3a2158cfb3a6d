"""Performance profiling utilities for binary search tree operations."""

import time
import functools
import logging
from typing import Dict, List, Callable, Optional
from dataclasses import dataclass, field
import statistics
from collections import defaultdict

logger = logging.getLogger(__name__)


@dataclass
class OperationMetrics:
    """Timing statistics for a single tracked operation."""
    call_count: int = 0
    total_time: float = 0.0
    min_time: float = float('inf')
    max_time: float = 0.0
    times: List[float] = field(default_factory=list)

    def add_measurement(self, elapsed: float) -> None:
        self.call_count += 1
        self.total_time += elapsed
        self.min_time = min(self.min_time, elapsed)
        self.max_time = max(self.max_time, elapsed)
        self.times.append(elapsed)

    @property
    def avg_time(self) -> float:
        return self.total_time / self.call_count if self.call_count > 0 else 0

    @property
    def median_time(self) -> float:
        return statistics.median(self.times) if self.times else 0

    def __str__(self) -> str:
        return (f"Calls: {self.call_count}, "
                f"Total: {self.total_time:.6f}s, "
                f"Avg: {self.avg_time:.6f}s, "
                f"Min: {self.min_time:.6f}s, "
                f"Max: {self.max_time:.6f}s, "
                f"Median: {self.median_time:.6f}s")


class PerformanceTracker:
    """Process-wide collector of operation timings."""

    _instance = None

    @classmethod
    def get_instance(cls) -> 'PerformanceTracker':
        """Singleton accessor."""
        if cls._instance is None:
            cls._instance = PerformanceTracker()
        return cls._instance

    def __init__(self):
        self.metrics: Dict[str, OperationMetrics] = defaultdict(OperationMetrics)
        self.enabled = True

    def add_measurement(self, operation: str, elapsed: float) -> None:
        if self.enabled:
            self.metrics[operation].add_measurement(elapsed)

    def reset(self) -> None:
        logger.debug("Resetting %d tracked operations", len(self.metrics))
        self.metrics.clear()

    def enable(self) -> None:
        self.enabled = True

    def disable(self) -> None:
        self.enabled = False

    def report(self, sort_by: str = 'total_time') -> str:
        """
        Render a table of all tracked operations.

        Args:
            sort_by: Any OperationMetrics attribute; rows are sorted on it
                in descending order.
        """
        if not self.metrics:
            return "No performance data collected."

        lines = ["Performance Metrics:"]
        lines.append("-" * 80)
        lines.append(f"{'Operation':<40} {'Calls':>8} {'Total (s)':>12} {'Avg (s)':>12} {'Median (s)':>12}")
        lines.append("-" * 80)

        sorted_items = sorted(
            self.metrics.items(),
            key=lambda x: getattr(x[1], sort_by),
            reverse=True
        )

        for operation, metrics in sorted_items:
            lines.append(f"{operation:<40} {metrics.call_count:>8} {metrics.total_time:>12.6f} "
                         f"{metrics.avg_time:>12.6f} {metrics.median_time:>12.6f}")

        return "\n".join(lines)


def track_performance(method: Optional[Callable] = None, *,
                      tag: Optional[str] = None) -> Callable:
    """
    Decorator to record the execution time of a callable.

    Args:
        method: The callable to track
        tag: Optional name to record under instead of the qualified name

    Returns:
        The wrapped callable
    """
    def decorator(func):
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            tracker = PerformanceTracker.get_instance()
            if not tracker.enabled:
                return func(*args, **kwargs)

            operation = tag or f"{func.__qualname__}"
            start_time = time.perf_counter()
            try:
                return func(*args, **kwargs)
            finally:
                tracker.add_measurement(operation, time.perf_counter() - start_time)
        return wrapper

    # Handle both @track_performance and @track_performance(tag="name") forms
    if method is None:
        return decorator
    return decorator(method)
