"""Detail pane showing every field of the selected match."""

import textwrap
from dataclasses import dataclass, replace
from typing import Optional

from rich.text import Text

from scantriage.app.render_config import DEFAULT_RENDER_CONFIG, RenderConfig
from scantriage.domain.models import Match


@dataclass(frozen=True)
class DetailsModel:
    """Fixed field list for one match, clipped and padded to height x width."""

    config: RenderConfig = DEFAULT_RENDER_CONFIG
    height: int = 0
    width: int = 0

    def set_height(self, height: int) -> "DetailsModel":
        return replace(self, height=max(0, height))

    def set_width(self, width: int) -> "DetailsModel":
        return replace(self, width=max(0, width))

    def render(self, match: Optional[Match]) -> list[Text]:
        """Render exactly self.height lines describing match."""
        lines = self._render_fields(match) if match is not None else []
        lines = lines[: self.height]
        while len(lines) < self.height:
            lines.append(Text("", style=self.config.details_style))
        return [self._fit(line) for line in lines]

    def _render_fields(self, match: Match) -> list[Text]:
        package = match.package
        vulnerability = match.vulnerability

        lines = [
            self._field("Package", package.name),
            self._field("Version", package.version),
            self._field("Type", package.type),
            self._field("Origin", package.origin_name),
        ]
        lines.extend(self._locations(package.locations))
        lines.append(Text("", style=self.config.details_style))
        lines.extend(
            [
                self._field("Vulnerability", vulnerability.id),
                self._field("Severity", vulnerability.severity),
                self._field("URL", vulnerability.url),
            ]
        )
        lines.extend(self._description(vulnerability.description))
        return lines

    def _field(self, name: str, value: str) -> Text:
        line = Text(style=self.config.details_style)
        line.append(f"{name}:", style=self.config.field_name_style)
        line.append(" ")
        line.append(value, style=self.config.field_value_style)
        return line

    def _locations(self, locations: tuple[str, ...]) -> list[Text]:
        if len(locations) <= 1:
            return [self._field("Location", locations[0] if locations else "")]

        label = "Locations"
        lines = [self._field(label, locations[0])]
        indent = " " * (len(label) + 2)
        for location in locations[1:]:
            line = Text(indent, style=self.config.details_style)
            line.append(location, style=self.config.field_value_style)
            lines.append(line)
        return lines

    def _description(self, description: str) -> list[Text]:
        label = "Description"
        first_width = self.width - len(label) - 2
        if first_width <= 0 or not description:
            return [self._field(label, description)]

        wrapped = textwrap.wrap(description, width=first_width) or [""]
        lines = [self._field(label, wrapped[0])]
        rest = " ".join(wrapped[1:])
        for chunk in textwrap.wrap(rest, width=self.width):
            lines.append(Text(chunk, style=self.config.field_value_style))
        return lines

    def _fit(self, line: Text) -> Text:
        if self.width > 0:
            line.truncate(self.width, overflow="crop", pad=True)
        return line
