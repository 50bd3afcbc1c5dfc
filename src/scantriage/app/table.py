"""Scrollable, searchable table of scan matches."""

from dataclasses import dataclass, replace
from typing import Optional

from rich.cells import cell_len
from rich.text import Text

from scantriage.app.render_config import DEFAULT_RENDER_CONFIG, RenderConfig
from scantriage.domain.exceptions import NotFoundError
from scantriage.domain.match_store import MatchStore
from scantriage.domain.models import Match

HEADER_ROWS = 1


@dataclass(frozen=True)
class TableModel:
    """Viewport over a MatchStore with a single selected row.

    Every operation returns a new TableModel. The selected row always lies
    inside the rendered window whenever the store is non-empty and the window
    has room for at least one row.
    """

    store: MatchStore
    config: RenderConfig = DEFAULT_RENDER_CONFIG
    height: int = 0
    width: int = 0
    window_start: int = 0
    selected_index: Optional[int] = None
    find_expression: str = ""

    @classmethod
    def new(cls, store: MatchStore, config: RenderConfig = DEFAULT_RENDER_CONFIG) -> "TableModel":
        return cls(
            store=store,
            config=config,
            selected_index=None if store.is_empty else 0,
        )

    @property
    def window_size(self) -> int:
        """Number of body rows shown; the header takes one line of the height."""
        return max(0, self.height - HEADER_ROWS)

    @property
    def window_end(self) -> int:
        return self.window_start + self.window_size - 1

    @property
    def selected_match(self) -> Optional[Match]:
        if self.selected_index is None:
            return None
        return self.store[self.selected_index]

    def set_height(self, height: int) -> "TableModel":
        return replace(self, height=max(0, height))._update_window()

    def set_width(self, width: int) -> "TableModel":
        return replace(self, width=max(0, width))._update_window()

    # Navigation

    def move_up(self) -> "TableModel":
        if self.selected_index is None or self.selected_index == 0:
            return self
        return self._select_and_show_row(self.selected_index - 1)

    def move_down(self) -> "TableModel":
        if self.selected_index is None or self.selected_index == self.store.last_index:
            return self
        return self._select_and_show_row(self.selected_index + 1)

    def jump_to_start(self) -> "TableModel":
        if self.selected_index is None:
            return self
        return self._select_and_show_row(0)

    def jump_to_end(self) -> "TableModel":
        if self.selected_index is None:
            return self
        return self._select_and_show_row(self.store.last_index)

    def page_up(self) -> "TableModel":
        if self.selected_index is None:
            return self

        if self.selected_index > self.window_start:
            return replace(self, selected_index=self.window_start)

        # already at the top of the window
        return self._select_and_show_row(max(0, self.selected_index - self.window_size))

    def page_down(self) -> "TableModel":
        if self.selected_index is None:
            return self

        last_row = self.store.last_index
        window_end = self.window_end
        if self.selected_index < window_end:
            return replace(self, selected_index=min(window_end, last_row))

        # already at the bottom of the window
        return self._select_and_show_row(min(last_row, self.selected_index + self.window_size))

    # Search

    def find(self, expr: str) -> "TableModel":
        """
        Select the first row whose package name or vulnerability ID contains expr.

        Raises:
            NotFoundError: If no row matches; the receiver is unchanged
        """
        for i, match in enumerate(self.store):
            if match.matches_expression(expr):
                return replace(self._select_and_show_row(i), find_expression=expr)
        raise NotFoundError(expr)

    def find_next(self, expr: Optional[str] = None) -> "TableModel":
        """Select the next matching row after the selection, wrapping at the end."""
        return self._find_circular(expr, step=1)

    def find_previous(self, expr: Optional[str] = None) -> "TableModel":
        """Select the previous matching row before the selection, wrapping at the start."""
        return self._find_circular(expr, step=-1)

    def _find_circular(self, expr: Optional[str], step: int) -> "TableModel":
        if expr is None:
            expr = self.find_expression
        if self.selected_index is None:
            raise NotFoundError(expr)

        count = len(self.store)
        start = self.selected_index
        i = (start + step) % count
        # stops on returning to the start row, so at most count - 1 comparisons
        while i != start:
            if self.store[i].matches_expression(expr):
                return replace(self._select_and_show_row(i), find_expression=expr)
            i = (i + step) % count
        raise NotFoundError(expr)

    # Window

    def _select_and_show_row(self, index: int) -> "TableModel":
        return replace(self, selected_index=index)._update_window()

    def _update_window(self) -> "TableModel":
        selected = self.selected_index
        if selected is None:
            return self

        if self.window_size == 0:
            # nothing is drawn; keep the window anchored on the selection
            return replace(self, window_start=selected)

        if self.window_start <= selected <= self.window_end:
            return self

        if selected < self.window_start:
            return replace(self, window_start=selected)

        return replace(self, window_start=selected - (self.window_size - 1))

    # Rendering

    def render(self) -> list[Text]:
        """Render the header line followed by exactly window_size body lines.

        A table with no height renders nothing, not even the header.
        """
        if self.height == 0:
            return []

        lines = [self._render_header_row()]
        last_row = self.store.last_index
        for i in range(self.window_start, self.window_start + self.window_size):
            if i > last_row:
                lines.append(self._fit(Text("")))
                continue
            lines.append(self._render_data_row(self.store[i], i == self.selected_index))
        return lines

    def _render_header_row(self) -> Text:
        c = self.config
        unstyled = c.unselected_marker + (
            _render_cell("Package", c.width_package)
            + _render_cell("Version", c.width_version)
            + _render_cell("Type", c.width_type)
            + _render_cell("Vulnerability", c.width_vulnerability)
            + _render_cell("Severity", c.width_severity)
        )
        return self._fit(Text(unstyled, style=c.header_style))

    def _render_data_row(self, match: Match, is_selected: bool) -> Text:
        c = self.config
        row = (
            _render_cell(match.package.name, c.width_package)
            + _render_cell(match.package.version, c.width_version)
            + _render_cell(match.package.type, c.width_type)
            + _render_cell(match.vulnerability.id, c.width_vulnerability)
            + _render_cell(match.vulnerability.severity, c.width_severity)
        )
        if is_selected:
            return self._fit(Text(c.selected_marker + row, style=c.selected_style))
        return self._fit(Text(c.unselected_marker + row, style=c.row_style))

    def _fit(self, line: Text) -> Text:
        if self.width > 0:
            line.truncate(self.width, overflow="crop", pad=True)
        return line


def _render_cell(content: str, size: int) -> str:
    return content + " " * max(0, size - cell_len(content))
