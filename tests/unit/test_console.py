"""
Tests for the rich console printer
"""

import io

from rich.console import Console

from interlace.builtin import thunk
from interlace.config import ConsoleConfig
from interlace.middleware import apply_middleware
from interlace.store import create_store
from interlace.visualization import rich_logger


def make_console() -> Console:
    return Console(file=io.StringIO(), width=100, color_system=None)


class TestRichLogger:
    """Console output"""

    def test_prints_action_and_states(self, reducer):
        """Test the panel shows the action type and both states"""
        console = make_console()
        store = create_store(reducer, 41, apply_middleware(rich_logger(console=console)))

        action = {"type": "inc"}
        assert store.dispatch(action) is action

        output = console.file.getvalue()
        assert "action inc" in output
        assert "prev state" in output
        assert "41" in output
        assert "42" in output

    def test_states_hidden(self, reducer):
        """Test show_prev_state/show_next_state toggle rows"""
        console = make_console()
        config = ConsoleConfig(show_prev_state=False, show_next_state=False)
        store = create_store(reducer, 0, apply_middleware(rich_logger(config, console)))

        store.dispatch({"type": "inc"})

        output = console.file.getvalue()
        assert "prev state" not in output
        assert "next state" not in output

    def test_non_actions_not_printed(self, reducer):
        """Test function commands print nothing themselves"""
        console = make_console()
        store = create_store(reducer, 0, apply_middleware(rich_logger(console=console), thunk))

        store.dispatch(lambda dispatch, get_state: None)

        assert console.file.getvalue() == ""
