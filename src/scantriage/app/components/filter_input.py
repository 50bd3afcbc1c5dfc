"""Single-line text buffer for the find prompt."""

from dataclasses import dataclass, replace
from typing import Optional

from rich.text import Text

from scantriage.app.render_config import RenderConfig


@dataclass(frozen=True)
class FilterInput:
    """Editable text with a cursor. Keys are ignored while blurred."""

    value: str = ""
    cursor: int = 0
    focused: bool = False

    def get_value(self) -> str:
        """Get the current input value."""
        return self.value

    def set_value(self, value: str) -> "FilterInput":
        """Set the input value and move the cursor to its end."""
        return replace(self, value=value, cursor=len(value))

    def clear(self) -> "FilterInput":
        """Clear the input field."""
        return replace(self, value="", cursor=0)

    def focus(self) -> "FilterInput":
        return replace(self, focused=True)

    def blur(self) -> "FilterInput":
        return replace(self, focused=False)

    def handle_key(self, key: str, character: Optional[str] = None) -> "FilterInput":
        """
        Apply an editing key.

        Args:
            key: Key name as reported by the terminal ("left", "backspace", "a")
            character: Printable character for the key, if any

        Returns:
            The edited input; unchanged for unknown keys or when blurred
        """
        if not self.focused:
            return self

        value, cursor = self.value, self.cursor
        if key == "backspace":
            if cursor == 0:
                return self
            return replace(self, value=value[: cursor - 1] + value[cursor:], cursor=cursor - 1)
        if key == "delete":
            return replace(self, value=value[:cursor] + value[cursor + 1 :])
        if key == "left":
            return replace(self, cursor=max(0, cursor - 1))
        if key == "right":
            return replace(self, cursor=min(len(value), cursor + 1))
        if key in ("home", "ctrl+a"):
            return replace(self, cursor=0)
        if key in ("end", "ctrl+e"):
            return replace(self, cursor=len(value))
        if key == "ctrl+u":
            return replace(self, value=value[cursor:], cursor=0)
        if character is not None and character.isprintable() and len(character) == 1:
            return replace(
                self,
                value=value[:cursor] + character + value[cursor:],
                cursor=cursor + 1,
            )
        return self

    def render(self, config: RenderConfig, *, cursor_visible: bool = True) -> Text:
        """Render the prompt line, showing the placeholder while empty."""
        line = Text(config.filter_prompt)
        show_cursor = self.focused and cursor_visible

        if not self.value:
            placeholder = config.filter_placeholder
            if show_cursor and placeholder:
                line.append(placeholder[0], style="reverse " + config.placeholder_style)
                line.append(placeholder[1:], style=config.placeholder_style)
            else:
                line.append(placeholder, style=config.placeholder_style)
            return line

        line.append(self.value[: self.cursor])
        if show_cursor:
            line.append(self.value[self.cursor : self.cursor + 1] or " ", style="reverse")
            line.append(self.value[self.cursor + 1 :])
        else:
            line.append(self.value[self.cursor :])
        return line
