"""
Rich console printer - one panel per dispatched plain action.
"""

from __future__ import annotations

from typing import Any

from rich.console import Console
from rich.panel import Panel
from rich.pretty import Pretty
from rich.table import Table
from rich.text import Text

from interlace.config import ConsoleConfig
from interlace.types import Dispatch, action_type, is_action


def _render(action: Any, prev_state: Any, next_state: Any, config: ConsoleConfig) -> Panel:
    table = Table(show_header=False, box=None, padding=(0, 1))
    table.add_column("label", style="dim", no_wrap=True)
    table.add_column("value")
    if config.show_prev_state:
        table.add_row("prev state", Pretty(prev_state))
    table.add_row("action", Pretty(action))
    if config.show_next_state:
        table.add_row("next state", Pretty(next_state))

    title = Text(f"action {action_type(action)}", style=config.title_style)
    return Panel(table, title=title, title_align="left", expand=False)


def rich_logger(config: ConsoleConfig | None = None, console: Console | None = None):
    """Build a middleware printing each plain action and its state change."""
    config = config or ConsoleConfig()
    console = console or Console()

    def console_middleware(api):
        def wrap(next_dispatch: Dispatch) -> Dispatch:
            def dispatch(action: Any) -> Any:
                if not is_action(action):
                    return next_dispatch(action)

                prev_state = api.get_state()
                result = next_dispatch(action)
                console.print(_render(action, prev_state, api.get_state(), config))
                return result

            return dispatch

        return wrap

    return console_middleware
