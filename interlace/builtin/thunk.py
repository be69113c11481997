"""Thunk middleware - lets callables be dispatched as commands."""

from __future__ import annotations

from typing import Any

from interlace.types import Dispatch

_NO_EXTRA = object()


def _create_thunk_middleware(extra: Any = _NO_EXTRA):
    def thunk_middleware(api):
        def wrap(next_dispatch: Dispatch) -> Dispatch:
            def dispatch(action: Any) -> Any:
                if not callable(action):
                    return next_dispatch(action)
                if extra is _NO_EXTRA:
                    return action(api.dispatch, api.get_state)
                return action(api.dispatch, api.get_state, extra)

            return dispatch

        return wrap

    return thunk_middleware


def with_extra_argument(extra: Any):
    """
    Build a thunk middleware whose callables receive ``(dispatch, get_state, extra)``.

    ``dispatch`` is the store's full chain, so actions dispatched from a thunk
    pass through every middleware again.
    """
    return _create_thunk_middleware(extra)


# Calls callable commands with (dispatch, get_state) and returns their result.
thunk = _create_thunk_middleware()
