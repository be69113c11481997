"""Promise middleware - dispatch awaitables, then dispatch what they resolve to."""

from __future__ import annotations

import inspect
import logging
from typing import Any

from interlace.types import Dispatch

logger = logging.getLogger(__name__)


def promise(api):
    """
    Awaitable commands return a coroutine instead of reaching the store.

    Awaiting it awaits the command and dispatches the resolved value through
    the full chain; the coroutine returns that dispatch's result. A resolved
    value of ``None`` is not dispatched.
    """

    def wrap(next_dispatch: Dispatch) -> Dispatch:
        def dispatch(action: Any) -> Any:
            if not inspect.isawaitable(action):
                return next_dispatch(action)

            async def resolve() -> Any:
                resolved = await action
                if resolved is None:
                    logger.debug("Awaitable command resolved to None; nothing dispatched")
                    return None
                return api.dispatch(resolved)

            return resolve()

        return dispatch

    return wrap
