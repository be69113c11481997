"""
Middleware pipeline - apply an ordered interceptor chain to a store's dispatch.

Middleware shape::

    def middleware(api):            # once per store build
        def wrap(next_dispatch):    # once, with the rest of the chain
            def dispatch(action):   # per command
                ...
                return next_dispatch(action)
            return dispatch
        return wrap

The first middleware passed to ``apply_middleware`` is the outermost one: it
sees every command first and the result last.
"""

from __future__ import annotations

import copy
import dataclasses
import logging
from collections.abc import Mapping, MutableMapping
from dataclasses import dataclass
from typing import Any

from interlace.compose import compose
from interlace.errors import StoreShapeError
from interlace.types import Dispatch, Enhancer, GetState, MiddlewareFactory, StoreCreator

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MiddlewareAPI:
    """Store view handed to every middleware factory."""

    get_state: GetState
    dispatch: Dispatch


class StoreView:
    """Delegates everything to ``store`` except ``dispatch``."""

    def __init__(self, store: Any, dispatch: Dispatch) -> None:
        object.__setattr__(self, "_store", store)
        object.__setattr__(self, "dispatch", dispatch)

    def __getattr__(self, name: str) -> Any:
        # instances rebuilt by copy/pickle have no _store until their state is restored
        try:
            store = self.__dict__["_store"]
        except KeyError:
            raise AttributeError(name) from None
        return getattr(store, name)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is read-only")

    def __repr__(self) -> str:
        return f"StoreView({self._store!r})"


def _capability(store: Any, name: str) -> Any:
    if isinstance(store, Mapping):
        value = store.get(name)
    else:
        value = getattr(store, name, None)
    if value is None:
        raise StoreShapeError(name)
    return value


def _with_dispatch(store: Any, dispatch: Dispatch) -> Any:
    """
    Return a store shaped like ``store`` whose ``dispatch`` is ``dispatch``.

    - dataclass with a ``dispatch`` field: shallow copy, field overwritten
      (no ``__init__``/``__post_init__`` re-run, frozen dataclasses included)
    - mutable mapping: shallow copy of the same type, key overwritten
    - read-only mapping: a plain ``dict``
    - anything else: a ``StoreView`` over the original object
    """
    if dataclasses.is_dataclass(store) and not isinstance(store, type):
        if any(f.name == "dispatch" for f in dataclasses.fields(store)):
            enhanced = copy.copy(store)
            object.__setattr__(enhanced, "dispatch", dispatch)
            return enhanced
        return StoreView(store, dispatch)
    if isinstance(store, MutableMapping):
        enhanced = copy.copy(store)
        enhanced["dispatch"] = dispatch
        return enhanced
    if isinstance(store, Mapping):
        return {**store, "dispatch": dispatch}
    return StoreView(store, dispatch)


def apply_middleware(*middlewares: MiddlewareFactory) -> Enhancer:
    """
    Create a store enhancer that routes ``dispatch`` through ``middlewares``.

    Each factory is called exactly once with a ``MiddlewareAPI`` whose
    ``dispatch`` always enters the fully composed chain, so a middleware that
    dispatches from inside its handler re-runs every middleware from the top.
    Errors raised by a factory abort the build.

    Args:
        *middlewares: middleware factories, outermost first

    Returns:
        An enhancer: ``enhancer(create_store)(*args, **kwargs)``
    """

    def enhancer(create_store: StoreCreator) -> StoreCreator:
        def create_enhanced_store(*args: Any, **kwargs: Any) -> Any:
            store = create_store(*args, **kwargs)
            base_dispatch = _capability(store, "dispatch")
            get_state = _capability(store, "get_state")

            dispatch = base_dispatch

            def dispatch_through_chain(action: Any) -> Any:
                return dispatch(action)

            api = MiddlewareAPI(get_state=get_state, dispatch=dispatch_through_chain)
            chain = [middleware(api) for middleware in middlewares]
            dispatch = compose(*chain)(base_dispatch)
            logger.debug("Applied %d middleware", len(chain))

            return _with_dispatch(store, dispatch)

        return create_enhanced_store

    return enhancer
