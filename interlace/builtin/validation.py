"""Validation middleware - parse plain mapping actions into ``Action`` models."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from interlace.config import ValidationConfig
from interlace.errors import ActionValidationError
from interlace.types import Action, Dispatch


def create_validator(config: ValidationConfig | None = None):
    """
    Build a middleware that rejects malformed actions before they reach the store.

    Mappings are validated against ``Action``; ``Action`` instances are
    already valid. Anything else counts as a non-action command.
    """
    config = config or ValidationConfig()
    allowed = set(config.allowed_types) if config.allowed_types is not None else None

    def validate(action: Any) -> Action:
        if isinstance(action, Action):
            parsed = action
        else:
            try:
                parsed = Action.model_validate(dict(action))
            except ValidationError as e:
                raise ActionValidationError(
                    f"Invalid action: {e.error_count()} validation error(s)",
                    errors=e.errors(),
                    cause=e,
                ) from e
        if allowed is not None and parsed.type not in allowed:
            raise ActionValidationError(f"Action type '{parsed.type}' is not allowed")
        return parsed

    def validation_middleware(api):
        def wrap(next_dispatch: Dispatch) -> Dispatch:
            def dispatch(action: Any) -> Any:
                if not isinstance(action, (Action, Mapping)):
                    if not config.allow_non_actions:
                        raise ActionValidationError(
                            f"Non-action command rejected: {type(action).__name__}"
                        )
                    return next_dispatch(action)

                parsed = validate(action)
                return next_dispatch(parsed if config.coerce else action)

            return dispatch

        return wrap

    return validation_middleware
