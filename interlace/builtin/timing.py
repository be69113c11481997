"""
Timing and metrics middleware

- TimingMiddleware: measures each dispatch
- MetricsMiddleware: aggregates dispatch statistics
"""

from __future__ import annotations

import logging
import time
from collections import Counter
from typing import Any

from interlace.types import Dispatch, action_type

logger = logging.getLogger(__name__)


class TimingMiddleware:
    """Measures how long the downstream chain takes for each command."""

    def __init__(self):
        self.last_duration_ms: float | None = None

    def __call__(self, api):
        def wrap(next_dispatch: Dispatch) -> Dispatch:
            def dispatch(action: Any) -> Any:
                start = time.perf_counter()
                try:
                    return next_dispatch(action)
                finally:
                    self.last_duration_ms = (time.perf_counter() - start) * 1000
                    logger.debug(
                        "[%s] Duration: %.3fms",
                        action_type(action) or type(action).__name__,
                        self.last_duration_ms,
                    )

            return dispatch

        return wrap


class MetricsMiddleware:
    """Collects dispatch counts, failures and cumulative duration."""

    def __init__(self):
        self.metrics: dict[str, Any] = {}
        self.reset()

    def __call__(self, api):
        def wrap(next_dispatch: Dispatch) -> Dispatch:
            def dispatch(action: Any) -> Any:
                self.metrics["total"] += 1
                kind = action_type(action)
                if kind is not None:
                    self.metrics["by_type"][kind] += 1

                start = time.perf_counter()
                try:
                    result = next_dispatch(action)
                except Exception:
                    self.metrics["failed"] += 1
                    raise
                else:
                    self.metrics["succeeded"] += 1
                    return result
                finally:
                    self.metrics["total_duration_ms"] += (time.perf_counter() - start) * 1000

            return dispatch

        return wrap

    def get_metrics(self) -> dict[str, Any]:
        """Snapshot of the collected metrics"""
        snapshot = self.metrics.copy()
        snapshot["by_type"] = dict(self.metrics["by_type"])
        return snapshot

    def reset(self) -> None:
        self.metrics = {
            "total": 0,
            "succeeded": 0,
            "failed": 0,
            "total_duration_ms": 0.0,
            "by_type": Counter(),
        }
