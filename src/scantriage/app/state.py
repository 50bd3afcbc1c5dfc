"""Browser state snapshots, input events and rendered frames."""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Optional, Union

from rich.console import Group
from rich.text import Text

from scantriage.app.components.filter_input import FilterInput
from scantriage.app.details import DetailsModel
from scantriage.app.render_config import DEFAULT_RENDER_CONFIG, RenderConfig
from scantriage.app.table import TableModel
from scantriage.domain.match_store import MatchStore
from scantriage.domain.models import Match


class Mode(Enum):
    """Where key presses are routed."""

    SCROLL = "scroll"
    FILTER_ENTRY = "filter_entry"


class Effect(Enum):
    """Side effects the host loop must carry out after a transition."""

    QUIT = "quit"
    BLINK = "blink"
    NOT_FOUND = "not_found"


@dataclass(frozen=True)
class KeyEvent:
    """A key press. key is the terminal's key name, character the printable text."""

    key: str
    character: Optional[str] = None


@dataclass(frozen=True)
class ResizeEvent:
    """The space available to the browser changed."""

    height: int
    width: int


Event = Union[KeyEvent, ResizeEvent]


@dataclass(frozen=True)
class Frame:
    """Rendered screen content, one Text per terminal line."""

    lines: tuple[Text, ...] = ()

    @property
    def plain(self) -> list[str]:
        return [line.plain for line in self.lines]

    def __len__(self) -> int:
        return len(self.lines)

    def __rich__(self) -> Group:
        return Group(*self.lines)


@dataclass(frozen=True)
class BrowserState:
    """Everything the browser knows between two events."""

    table: TableModel
    details: DetailsModel = field(default_factory=DetailsModel)
    config: RenderConfig = DEFAULT_RENDER_CONFIG
    mode: Mode = Mode.SCROLL
    filter: FilterInput = field(default_factory=FilterInput)
    show_details: bool = False
    height: int = 0
    width: int = 0
    notice: Optional[str] = None

    @classmethod
    def initial(
        cls,
        store: MatchStore,
        config: RenderConfig = DEFAULT_RENDER_CONFIG,
        *,
        show_details: bool = False,
    ) -> "BrowserState":
        return cls(
            table=TableModel.new(store, config),
            details=DetailsModel(config=config),
            config=config,
            show_details=show_details,
        )

    @property
    def search_expression(self) -> str:
        """Last successfully committed search expression."""
        return self.table.find_expression

    @property
    def selected_index(self) -> Optional[int]:
        return self.table.selected_index

    @property
    def selected_match(self) -> Optional[Match]:
        return self.table.selected_match

    def evolve(self, **changes) -> "BrowserState":
        return replace(self, **changes)


@dataclass(frozen=True)
class Transition:
    """Result of handling one event."""

    state: BrowserState
    frame: Frame
    effect: Optional[Effect] = None


def render_frame(state: BrowserState, *, cursor_visible: bool = True) -> Frame:
    """Render table, filter line and detail pane in screen order."""
    lines: list[Text] = list(state.table.render())

    # in scroll mode there is no prompt line, so the notice takes the header row
    if state.mode is Mode.SCROLL and state.notice and lines:
        lines[0] = _render_notice_line(state)

    # the layout leaves a row free for the prompt unless the screen is too short
    reserved = state.height - state.table.height - state.details.height
    if state.mode is Mode.FILTER_ENTRY and reserved > 0:
        lines.append(_render_filter_line(state, cursor_visible))

    if state.show_details:
        lines.extend(state.details.render(state.selected_match))

    return Frame(lines=tuple(lines))


def _render_notice_line(state: BrowserState) -> Text:
    line = Text(state.config.unselected_marker + state.notice, style=state.config.notice_style)
    if state.width > 0:
        line.truncate(state.width, overflow="crop", pad=True)
    return line


def _render_filter_line(state: BrowserState, cursor_visible: bool) -> Text:
    line = state.filter.render(state.config, cursor_visible=cursor_visible)
    if state.notice:
        line.append("  ")
        line.append(state.notice, style=state.config.notice_style)
    if state.width > 0:
        line.truncate(state.width, overflow="crop", pad=True)
    return line
