"""Structured error hierarchy for stores and middleware."""

from __future__ import annotations

from typing import Any


class InterlaceError(Exception):
    def __init__(self, code: str, message: str, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.code = code
        self.cause = cause


class StoreError(InterlaceError):
    pass


class InvalidActionError(StoreError):
    def __init__(self, action: Any) -> None:
        super().__init__(
            "INVALID_ACTION",
            f"Actions must be plain actions with a 'type', got {type(action).__name__}. "
            "Use custom middleware for function or async commands.",
        )
        self.action = action


class StoreShapeError(InterlaceError):
    def __init__(self, missing: str) -> None:
        super().__init__("STORE_SHAPE", f"Store does not expose '{missing}'")
        self.missing = missing


class ActionValidationError(InterlaceError):
    def __init__(
        self,
        message: str,
        errors: list[dict[str, Any]] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__("ACTION_VALIDATION", message, cause)
        self.errors = errors or []
