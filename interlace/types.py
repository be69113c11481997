"""Action model and the callable shapes of the middleware pipeline."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Callable

from pydantic import BaseModel, Field


class Action(BaseModel):
    """Plain action: a tagged variant with a ``type`` and optional payload."""

    type: str = Field(..., min_length=1, description="Action type tag")
    payload: Any = Field(None, description="Action payload")
    meta: dict[str, Any] = Field(default_factory=dict, description="Out-of-band metadata")
    error: bool = Field(False, description="Payload is an error")

    model_config = {"frozen": True, "extra": "forbid"}


Dispatch = Callable[[Any], Any]
GetState = Callable[[], Any]
Reducer = Callable[[Any, Any], Any]


StoreCreator = Callable[..., Any]
Enhancer = Callable[[StoreCreator], StoreCreator]
# (next_dispatch) -> dispatch
Middleware = Callable[[Dispatch], Dispatch]
# (api) -> middleware; api is an ``interlace.middleware.MiddlewareAPI``
MiddlewareFactory = Callable[[Any], Middleware]


def is_action(value: Any) -> bool:
    """True for ``Action`` instances and mappings carrying a ``"type"`` key."""
    if isinstance(value, Action):
        return True
    return isinstance(value, Mapping) and value.get("type") is not None


def action_type(value: Any) -> str | None:
    if isinstance(value, Action):
        return value.type
    if isinstance(value, Mapping):
        return value.get("type")
    return None
