"""Transition logger - records (prev_state, next_state) around each plain action."""

from __future__ import annotations

import logging
import time
from collections import deque
from dataclasses import dataclass
from typing import Any

from interlace.config import LoggerConfig
from interlace.types import Dispatch, action_type, is_action


@dataclass(frozen=True)
class Transition:
    action: Any
    prev_state: Any
    next_state: Any
    duration_ms: float
    error: BaseException | None = None


class TransitionLogger:
    """
    Middleware factory recording one ``Transition`` per plain action.

    Function and async commands pass through unrecorded; the plain actions
    they dispatch re-enter the chain and are recorded individually.
    """

    def __init__(self, config: LoggerConfig | None = None):
        self.config = config or LoggerConfig()
        self.history: deque[Transition] = deque(maxlen=self.config.max_history)
        self._logger = logging.getLogger(self.config.logger_name)

    def __call__(self, api):
        def wrap(next_dispatch: Dispatch) -> Dispatch:
            def dispatch(action: Any) -> Any:
                if not is_action(action):
                    return next_dispatch(action)

                prev_state = api.get_state()
                start = time.perf_counter()
                try:
                    result = next_dispatch(action)
                except Exception as e:
                    self._record(action, prev_state, api.get_state(), start, e)
                    raise
                self._record(action, prev_state, api.get_state(), start)
                return result

            return dispatch

        return wrap

    def _record(
        self,
        action: Any,
        prev_state: Any,
        next_state: Any,
        start: float,
        error: BaseException | None = None,
    ) -> None:
        duration_ms = (time.perf_counter() - start) * 1000
        transition = Transition(action, prev_state, next_state, duration_ms, error)
        self.history.append(transition)

        if error is not None:
            self._logger.log(self.config.level, "action %s failed: %s", action_type(action), error)
        elif self.config.log_state:
            self._logger.log(
                self.config.level,
                "action %s: %r -> %r (%.3fms)",
                action_type(action),
                prev_state,
                next_state,
                duration_ms,
            )
        else:
            self._logger.log(self.config.level, "action %s (%.3fms)", action_type(action), duration_ms)

    def clear(self) -> None:
        self.history.clear()


def create_logger(config: LoggerConfig | None = None) -> TransitionLogger:
    return TransitionLogger(config)
