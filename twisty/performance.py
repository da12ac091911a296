"""
Performance timing utilities for the solver.

Provides a decorator and context managers for measuring execution time of
search phases (goal set construction, frontier expansion, path
reconstruction) with hierarchical output.

Timing is only recorded while SearchConfig.enable_performance_logging is set.
"""

import functools
import logging
import threading
import time
from contextlib import contextmanager
from typing import Any, Dict, List, Optional

from twisty.solver.config import SearchConfig

logger = logging.getLogger(__name__)


class PerformanceTimer:
    """Thread-safe performance timer with hierarchical timing support."""

    def __init__(self):
        self._local = threading.local()

    def _get_stack(self) -> List[Dict[str, Any]]:
        if not hasattr(self._local, 'stack'):
            self._local.stack = []
        return self._local.stack

    def _get_results(self) -> List[Dict[str, Any]]:
        if not hasattr(self._local, 'results'):
            self._local.results = []
        return self._local.results

    def clear(self):
        """Drop recorded timings of the current thread."""
        self._local.results = []

    @contextmanager
    def time_block(self, name: str):
        """Context manager for timing a code block.

        Args:
            name: Name of the code block being timed
        """
        if not SearchConfig.enable_performance_logging:
            yield
            return

        stack = self._get_stack()
        timing_info = {
            'name': name,
            'start': time.perf_counter(),
            'depth': len(stack),
            'children': []
        }
        stack.append(timing_info)

        try:
            yield
        finally:
            timing_info['elapsed'] = time.perf_counter() - timing_info['start']
            stack.pop()

            if stack:
                stack[-1]['children'].append(timing_info)
            else:
                self._get_results().append(timing_info)

    def results(self) -> List[Dict[str, Any]]:
        """Top-level timings recorded so far (children nested)."""
        return list(self._get_results())

    def format_report(self) -> str:
        """Format recorded timings as an indented report."""
        results = self._get_results()
        total_time = sum(r['elapsed'] for r in results)
        lines = ["PERFORMANCE TIMING REPORT"]

        def add_timing(timing: Dict[str, Any], parent_time: Optional[float] = None):
            indent = "  " * timing['depth']
            elapsed = timing['elapsed']
            if parent_time:
                lines.append(f"{indent}{timing['name']}: {elapsed:.3f}s "
                             f"({elapsed / parent_time * 100:.1f}%)")
            else:
                lines.append(f"{indent}{timing['name']}: {elapsed:.3f}s")
            for child in timing['children']:
                add_timing(child, elapsed)

        for result in results:
            add_timing(result, total_time)
        lines.append(f"TOTAL: {total_time:.3f}s")
        return "\n".join(lines)

    def log_results(self):
        """Log the timing report and clear it."""
        if not SearchConfig.enable_performance_logging:
            return
        if not self._get_results():
            return
        logger.info("\n%s", self.format_report())
        self.clear()


# Global timer instance
_timer = PerformanceTimer()


def timed(func):
    """Decorator to time function execution.

    Supports hierarchical timing for nested function calls.
    """
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        if not SearchConfig.enable_performance_logging:
            return func(*args, **kwargs)

        with _timer.time_block(f"{func.__module__}.{func.__name__}"):
            return func(*args, **kwargs)

    return wrapper


def log_performance_report():
    """Log the accumulated performance timing report."""
    _timer.log_results()


def get_timer() -> PerformanceTimer:
    """Global timer (used by tests and the driver)."""
    return _timer


@contextmanager
def time_block(name: str):
    """Context manager for timing arbitrary code blocks.

    Example:
        with time_block("expand right"):
            ...
    """
    with _timer.time_block(name):
        yield
