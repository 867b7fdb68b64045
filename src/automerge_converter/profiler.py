"""Performance profiler for conversion operations."""

import logging
import threading
import time
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, Dict, Iterator, List, Optional

import psutil


@dataclass
class PerformanceMetrics:
    """Performance metrics for a single conversion."""
    operation_name: str
    duration: float
    input_size: int
    output_size: int
    memory_start_mb: float
    memory_end_mb: float
    throughput_mbps: float


class ProfileSession:
    """State of one profiled operation; filled in by the caller."""

    def __init__(self, operation_name: str, input_size: int):
        self.operation_name = operation_name
        self.input_size = input_size
        self.output_size = 0
        self.start_time = time.perf_counter()
        self.start_memory = _rss_mb()


def _rss_mb() -> float:
    return psutil.Process().memory_info().rss / 1024 / 1024


class PerformanceProfiler:
    """
    Records duration, memory and throughput of encode/decode calls.

    Each call to profile_operation gets its own session, so operations
    running concurrently in executor threads do not interfere.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize the performance profiler.

        Args:
            logger: Optional logger instance
        """
        self.logger = logger or logging.getLogger(__name__)
        self.metrics_history: List[PerformanceMetrics] = []
        self._lock = threading.Lock()

    @contextmanager
    def profile_operation(self, operation_name: str, input_size: int = 0) -> Iterator[ProfileSession]:
        """
        Context manager for profiling operations.

        Metrics are recorded only when the block completes without raising.

        Args:
            operation_name: Name of the operation being profiled
            input_size: Size of input data in bytes
        """
        session = ProfileSession(operation_name, input_size)
        yield session
        self._finish(session)

    def _finish(self, session: ProfileSession) -> PerformanceMetrics:
        duration = time.perf_counter() - session.start_time
        end_memory = _rss_mb()
        throughput = (session.input_size / 1024 / 1024) / duration if duration > 0 else 0

        metrics = PerformanceMetrics(
            operation_name=session.operation_name,
            duration=duration,
            input_size=session.input_size,
            output_size=session.output_size,
            memory_start_mb=session.start_memory,
            memory_end_mb=end_memory,
            throughput_mbps=throughput,
        )
        with self._lock:
            self.metrics_history.append(metrics)

        self.logger.debug(
            f"{session.operation_name}: {duration * 1000:.1f}ms, "
            f"{session.input_size}B -> {session.output_size}B, "
            f"{throughput:.2f} MB/s, memory {session.start_memory:.1f} -> {end_memory:.1f} MB"
        )
        return metrics

    def get_performance_summary(self) -> Dict[str, Any]:
        """
        Get summary of all performance metrics.

        Returns:
            Dictionary with performance summary
        """
        with self._lock:
            history = list(self.metrics_history)

        if not history:
            return {"total_operations": 0}

        return {
            "total_operations": len(history),
            "total_duration": sum(m.duration for m in history),
            "total_input_bytes": sum(m.input_size for m in history),
            "total_output_bytes": sum(m.output_size for m in history),
            "average_throughput_mbps": sum(m.throughput_mbps for m in history) / len(history),
            "max_memory_mb": max(m.memory_end_mb for m in history),
        }
