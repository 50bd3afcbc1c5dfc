"""Widget that feeds terminal events to the reducer and paints its frames."""

import logging
from typing import Optional

from rich.console import Group, RenderableType
from textual import events
from textual.message import Message
from textual.timer import Timer
from textual.widget import Widget

from scantriage.app.reducer import update
from scantriage.app.state import (
    BrowserState,
    Effect,
    Event,
    KeyEvent,
    Mode,
    ResizeEvent,
    Transition,
    render_frame,
)

logger = logging.getLogger(__name__)

BLINK_INTERVAL = 0.5


class BrowserView(Widget, can_focus=True):
    """Full-screen match browser."""

    DEFAULT_CSS = """
    BrowserView {
        width: 1fr;
        height: 1fr;
    }
    """

    class StateChanged(Message):
        """Posted after every handled event with the new snapshot."""

        def __init__(self, state: BrowserState) -> None:
            super().__init__()
            self.state = state

    def __init__(self, state: BrowserState, id: str | None = None, **kwargs) -> None:
        super().__init__(id=id, **kwargs)
        self.state = state
        self._cursor_visible = True
        self._blink_timer: Optional[Timer] = None

    def handle_event(self, event: Event) -> Transition:
        """Run one event through the reducer and carry out its effect."""
        transition = update(self.state, event)
        self.state = transition.state
        self._cursor_visible = True
        self.post_message(self.StateChanged(transition.state))
        self._apply_effect(transition)
        self.refresh()
        return transition

    def _apply_effect(self, transition: Transition) -> None:
        effect = transition.effect
        if transition.state.mode is Mode.SCROLL:
            self._stop_blink()
        if effect is Effect.QUIT:
            self.app.exit()
        elif effect is Effect.BLINK:
            self._start_blink()
        elif effect is Effect.NOT_FOUND and transition.state.notice:
            self.app.notify(transition.state.notice, severity="warning")

    def _start_blink(self) -> None:
        if self._blink_timer is None:
            self._blink_timer = self.set_interval(BLINK_INTERVAL, self._toggle_cursor)

    def _stop_blink(self) -> None:
        if self._blink_timer is not None:
            self._blink_timer.stop()
            self._blink_timer = None

    def _toggle_cursor(self) -> None:
        if self.state.mode is not Mode.FILTER_ENTRY:
            return
        self._cursor_visible = not self._cursor_visible
        self.refresh()

    def render(self) -> RenderableType:
        frame = render_frame(self.state, cursor_visible=self._cursor_visible)
        return Group(*frame.lines)

    def on_key(self, event: events.Key) -> None:
        event.stop()
        event.prevent_default()
        self.handle_event(KeyEvent(key=event.key, character=event.character))

    def on_resize(self, event: events.Resize) -> None:
        logger.debug("Resized to %sx%s", event.size.width, event.size.height)
        self.handle_event(ResizeEvent(height=event.size.height, width=event.size.width))
