#!/usr/bin/env python3
"""
interlace - Basic Usage Example

Builds a counter store with a middleware chain and dispatches plain actions,
function commands and awaitable commands through it.
"""

import asyncio
import logging

from interlace import apply_middleware, create_store
from interlace.builtin import MetricsMiddleware, create_logger, promise, thunk
from interlace.visualization import rich_logger


def counter(state=0, action=None):
    if action["type"] == "inc":
        return state + 1
    if action["type"] == "add":
        return state + action["payload"]
    return state


async def fetch_bonus():
    await asyncio.sleep(0.1)
    return {"type": "add", "payload": 10}


async def main():
    logging.basicConfig(level=logging.INFO, format="%(name)s: %(message)s")

    metrics = MetricsMiddleware()
    log = create_logger()
    store = create_store(
        counter,
        0,
        apply_middleware(metrics, log, rich_logger(), promise, thunk),
    )

    print("Example 1: plain action")
    store.dispatch({"type": "inc"})

    print("Example 2: function command")

    def increment_twice(dispatch, get_state):
        dispatch({"type": "inc"})
        dispatch({"type": "inc"})
        return get_state()

    print(f"   thunk returned {store.dispatch(increment_twice)}")

    print("Example 3: awaitable command")
    await store.dispatch(fetch_bonus())

    print(f"Final state: {store.get_state()}")
    print(f"Transitions: {[(t.prev_state, t.next_state) for t in log.history]}")
    print(f"Metrics: {metrics.get_metrics()}")


if __name__ == "__main__":
    asyncio.run(main())
