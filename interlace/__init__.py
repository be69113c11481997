"""
interlace - middleware pipelines for single-dispatch stores.

```python
from interlace import apply_middleware, create_store
from interlace.builtin import create_logger, thunk

def counter(state=0, action=None):
    return state + 1 if action["type"] == "inc" else state

log = create_logger()
store = create_store(counter, 0, apply_middleware(log, thunk))
store.dispatch({"type": "inc"})
```
"""

from interlace.compose import compose
from interlace.errors import (
    ActionValidationError,
    InterlaceError,
    InvalidActionError,
    StoreError,
    StoreShapeError,
)
from interlace.middleware import MiddlewareAPI, StoreView, apply_middleware
from interlace.store import Store, create_store
from interlace.types import Action, action_type, is_action

__version__ = "0.1.0"

__all__ = [
    "compose",
    "apply_middleware",
    "MiddlewareAPI",
    "StoreView",
    "create_store",
    "Store",
    "Action",
    "is_action",
    "action_type",
    "InterlaceError",
    "StoreError",
    "InvalidActionError",
    "StoreShapeError",
    "ActionValidationError",
]
