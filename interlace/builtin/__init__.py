"""
Built-in middleware

- logger: TransitionLogger / create_logger
- thunk: thunk / with_extra_argument
- promise: promise
- timing: TimingMiddleware / MetricsMiddleware
- validation: create_validator
"""

from interlace.builtin.logger import Transition, TransitionLogger, create_logger
from interlace.builtin.promise import promise
from interlace.builtin.thunk import thunk, with_extra_argument
from interlace.builtin.timing import MetricsMiddleware, TimingMiddleware
from interlace.builtin.validation import create_validator

__all__ = [
    "Transition",
    "TransitionLogger",
    "create_logger",
    "thunk",
    "with_extra_argument",
    "promise",
    "TimingMiddleware",
    "MetricsMiddleware",
    "create_validator",
]
