"""Height split between the table, filter line and detail pane."""

from dataclasses import dataclass

from scantriage.app.state import BrowserState, Mode

FILTER_LINE_HEIGHT = 1


@dataclass(frozen=True)
class LayoutSplit:
    """Rows assigned to each part of the screen."""

    table_height: int
    details_height: int
    filter_height: int


def compute_layout(height: int, mode: Mode, show_details: bool) -> LayoutSplit:
    """
    Split the available height.

    The detail pane takes half the height (rounded down) when shown; the
    table gets the remainder, minus one row for the filter line while a
    search expression is being typed.
    """
    height = max(0, height)
    details_height = height // 2 if show_details else 0
    table_height = height - details_height

    filter_height = 0
    if mode is Mode.FILTER_ENTRY:
        filter_height = min(FILTER_LINE_HEIGHT, table_height)
        table_height -= filter_height

    return LayoutSplit(
        table_height=table_height,
        details_height=details_height,
        filter_height=filter_height,
    )


def apply_layout(state: BrowserState) -> BrowserState:
    """Propagate the current split and width to the table and detail pane."""
    split = compute_layout(state.height, state.mode, state.show_details)
    table = state.table.set_height(split.table_height).set_width(state.width)
    details = state.details.set_height(split.details_height).set_width(state.width)
    return state.evolve(table=table, details=details)
