"""Main Textual TUI application."""

from typing import Optional

from textual.app import App, ComposeResult
from textual.binding import Binding

from scantriage.app.components.browser_view import BrowserView
from scantriage.app.render_config import DEFAULT_RENDER_CONFIG, RenderConfig
from scantriage.app.state import BrowserState
from scantriage.domain.match_store import MatchStore
from scantriage.domain.models import Match


class TriageApp(App):
    """Browse scan matches and inspect the selected one."""

    CSS = """
    Screen {
        layout: vertical;
    }
    """

    TITLE = "scantriage"

    BINDINGS = [
        Binding("ctrl+c", "quit", "Quit", show=False, priority=True),
    ]

    def __init__(
        self,
        store: MatchStore,
        config: RenderConfig = DEFAULT_RENDER_CONFIG,
        show_details: bool = False,
    ):
        """Initialize the app with an already sorted match store."""
        super().__init__()
        self.store = store
        self.initial_state = BrowserState.initial(store, config, show_details=show_details)
        self.state = self.initial_state

    def compose(self) -> ComposeResult:
        """Create child widgets for the app."""
        yield BrowserView(self.initial_state, id="browser")

    def on_mount(self) -> None:
        """Called when app is mounted."""
        self.theme = "flexoki"
        self.query_one("#browser", BrowserView).focus()

    def on_browser_view_state_changed(self, message: BrowserView.StateChanged) -> None:
        self.state = message.state

    @property
    def selected_match(self) -> Optional[Match]:
        """Match under the cursor, for callers acting on the triage outcome."""
        return self.state.selected_match
