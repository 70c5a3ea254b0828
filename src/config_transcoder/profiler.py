"""Performance profiler for conversion operations."""

import logging
import threading
import time
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator, List, Optional

import psutil


@dataclass
class ConversionMetrics:
    """Performance metrics for one conversion."""
    operation_name: str
    duration: float
    input_size: int
    output_size: int
    memory_start_mb: float
    memory_end_mb: float
    success: bool


class ProfilingSession:
    """Mutable record of an operation while it runs."""

    def __init__(self, operation_name: str, input_size: int, memory_start_mb: float):
        self.operation_name = operation_name
        self.input_size = input_size
        self.output_size = 0
        self.success = False
        self.memory_start_mb = memory_start_mb
        self.start_time = time.perf_counter()


class ConversionProfiler:
    """
    Records duration, sizes and resident memory of conversions.

    Metrics are logged at debug level and kept in ``metrics_history``.
    Conversions on worker threads share one profiler, so each operation
    gets its own session object.
    """

    def __init__(self, logger: Optional[logging.Logger] = None, max_history: int = 1000):
        """
        Initialize the profiler.

        Args:
            logger: Optional logger instance
            max_history: Number of metrics records to keep
        """
        self.logger = logger or logging.getLogger(__name__)
        self.max_history = max_history
        self.metrics_history: List[ConversionMetrics] = []
        self._lock = threading.Lock()

    @contextmanager
    def profile_operation(self, operation_name: str, input_size: int = 0) -> Iterator[ProfilingSession]:
        """
        Context manager for profiling an operation.

        The caller sets ``output_size`` and ``success`` on the yielded
        session before leaving the block.

        Args:
            operation_name: Name of the operation being profiled
            input_size: Size of input data in bytes
        """
        session = ProfilingSession(operation_name, input_size, self._memory_mb())
        try:
            yield session
        finally:
            self._record(session)

    def _record(self, session: ProfilingSession) -> ConversionMetrics:
        metrics = ConversionMetrics(
            operation_name=session.operation_name,
            duration=time.perf_counter() - session.start_time,
            input_size=session.input_size,
            output_size=session.output_size,
            memory_start_mb=session.memory_start_mb,
            memory_end_mb=self._memory_mb(),
            success=session.success
        )
        with self._lock:
            self.metrics_history.append(metrics)
            if len(self.metrics_history) > self.max_history:
                del self.metrics_history[:-self.max_history]

        self.logger.debug(
            f"{metrics.operation_name}: {metrics.duration * 1000:.1f}ms, "
            f"{metrics.input_size}B -> {metrics.output_size}B, "
            f"rss {metrics.memory_end_mb:.1f}MB, success={metrics.success}"
        )
        return metrics

    def _memory_mb(self) -> float:
        try:
            return psutil.Process().memory_info().rss / 1024 / 1024
        except psutil.Error as e:
            self.logger.warning(f"Memory sampling failed: {e}")
            return 0.0
