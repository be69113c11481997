"""
Pytest Configuration and Fixtures
"""

from typing import Any, Callable

import pytest


def counter(state: Any = None, action: Any = None) -> int:
    """Counter reducer: ``inc`` adds one, ``add`` adds the payload."""
    if state is None:
        state = 0
    kind = action.get("type") if isinstance(action, dict) else getattr(action, "type", None)
    if kind == "inc":
        return state + 1
    if kind == "add":
        payload = action["payload"] if isinstance(action, dict) else action.payload
        return state + payload
    return state


@pytest.fixture
def reducer() -> Callable[[Any, Any], int]:
    """Returns the counter reducer."""
    return counter


@pytest.fixture
def events() -> list[str]:
    """Shared log for recording middleware entry/exit order."""
    return []


@pytest.fixture
def recorder(events: list[str]) -> Callable[[str], Callable]:
    """Returns a builder of middleware that log ``enter:name:type`` / ``exit:name:type``."""

    def make(name: str):
        def middleware(api):
            def wrap(next_dispatch):
                def dispatch(action):
                    kind = action.get("type") if isinstance(action, dict) else "?"
                    events.append(f"enter:{name}:{kind}")
                    result = next_dispatch(action)
                    events.append(f"exit:{name}:{kind}")
                    return result

                return dispatch

            return wrap

        return middleware

    return make
