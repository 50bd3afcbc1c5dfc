"""Rendering configuration for the table and detail pane."""

from dataclasses import dataclass


@dataclass(frozen=True)
class RenderConfig:
    """Column widths, styles and prompt text used when drawing a frame.

    Column widths are advisory: cells are padded to them for alignment but
    longer content is never cut.
    """

    width_package: int = 28
    width_version: int = 24
    width_type: int = 12
    width_vulnerability: int = 20
    width_severity: int = 12

    header_style: str = "bold #777777"
    row_style: str = "#777777"
    selected_style: str = "bold #ffffff"

    details_style: str = "on #222233"
    field_name_style: str = "#aaaaaa on #222233"
    field_value_style: str = "#ffffff on #222233"

    filter_prompt: str = "Find: "
    filter_placeholder: str = "package or vulnerability"
    placeholder_style: str = "dim"
    notice_style: str = "bold red"
    selected_marker: str = "> "
    unselected_marker: str = "  "


DEFAULT_RENDER_CONFIG = RenderConfig()
