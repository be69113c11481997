"""
Minimal reducer store.

Serves as the base system that ``apply_middleware`` enhances. It only accepts
plain actions; function and async commands need middleware.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable

from interlace.errors import InvalidActionError, StoreError
from interlace.types import Dispatch, Enhancer, GetState, Reducer, action_type, is_action

logger = logging.getLogger(__name__)

INIT = "@@interlace/INIT"
REPLACE = "@@interlace/REPLACE"


@dataclass(frozen=True)
class Store:
    dispatch: Dispatch
    get_state: GetState
    replace_reducer: Callable[[Reducer], None]


def create_store(
    reducer: Reducer,
    preloaded_state: Any = None,
    enhancer: Enhancer | None = None,
) -> Store:
    """
    Create a store holding the state produced by ``reducer``.

    Args:
        reducer: ``(state, action) -> new_state``
        preloaded_state: initial state, passed to the reducer with the init action
        enhancer: optional store enhancer, e.g. ``apply_middleware(...)``

    Returns:
        Store
    """
    if enhancer is not None:
        if not callable(enhancer):
            raise StoreError("INVALID_ENHANCER", "Expected the enhancer to be callable")
        return enhancer(create_store)(reducer, preloaded_state)

    if not callable(reducer):
        raise StoreError("INVALID_REDUCER", "Expected the reducer to be callable")

    current_reducer = reducer
    current_state = preloaded_state
    is_dispatching = False

    def get_state() -> Any:
        return current_state

    def dispatch(action: Any) -> Any:
        nonlocal current_state, is_dispatching

        if not is_action(action):
            raise InvalidActionError(action)
        if is_dispatching:
            raise StoreError("REDUCER_DISPATCH", "Reducers may not dispatch actions")

        is_dispatching = True
        try:
            current_state = current_reducer(current_state, action)
        finally:
            is_dispatching = False

        logger.debug("Reduced action %s", action_type(action))
        return action

    def replace_reducer(next_reducer: Reducer) -> None:
        nonlocal current_reducer
        if not callable(next_reducer):
            raise StoreError("INVALID_REDUCER", "Expected the reducer to be callable")
        current_reducer = next_reducer
        dispatch({"type": REPLACE})

    dispatch({"type": INIT})
    return Store(dispatch=dispatch, get_state=get_state, replace_reducer=replace_reducer)
