"""Key bindings for the browser."""

from enum import Enum


class Action(Enum):
    """Logical actions a key can trigger."""

    QUIT = "quit"
    MOVE_UP = "move_up"
    MOVE_DOWN = "move_down"
    PAGE_UP = "page_up"
    PAGE_DOWN = "page_down"
    JUMP_TO_START = "jump_to_start"
    JUMP_TO_END = "jump_to_end"
    ENTER_SEARCH = "enter_search"
    REPEAT_SEARCH_FORWARD = "repeat_search_forward"
    REPEAT_SEARCH_BACKWARD = "repeat_search_backward"
    TOGGLE_DETAILS = "toggle_details"
    COMMIT = "commit"
    CANCEL = "cancel"


# Keys that work in every mode
GLOBAL_BINDINGS: dict[str, Action] = {
    "ctrl+c": Action.QUIT,
}

SCROLL_BINDINGS: dict[str, Action] = {
    "q": Action.QUIT,
    "up": Action.MOVE_UP,
    "k": Action.MOVE_UP,
    "down": Action.MOVE_DOWN,
    "j": Action.MOVE_DOWN,
    "home": Action.JUMP_TO_START,
    "g": Action.JUMP_TO_START,
    "end": Action.JUMP_TO_END,
    "G": Action.JUMP_TO_END,
    "pageup": Action.PAGE_UP,
    "w": Action.PAGE_UP,
    "pagedown": Action.PAGE_DOWN,
    "z": Action.PAGE_DOWN,
    "/": Action.ENTER_SEARCH,
    "n": Action.REPEAT_SEARCH_FORWARD,
    "N": Action.REPEAT_SEARCH_BACKWARD,
    "d": Action.TOGGLE_DETAILS,
    "tab": Action.TOGGLE_DETAILS,
}

FILTER_ENTRY_BINDINGS: dict[str, Action] = {
    "enter": Action.COMMIT,
    "escape": Action.CANCEL,
}

# Terminal key names for printable characters that are not the character itself
_KEY_ALIASES: dict[str, str] = {
    "slash": "/",
    "shift+g": "G",
    "shift+n": "N",
}


def binding_key(key: str, character: str | None = None) -> str:
    """
    Normalize a key press to the name used in the binding tables.

    Printable characters are looked up by the character itself so that
    "G" matches whether the terminal reports "G" or "shift+g".
    """
    if character is not None and len(character) == 1 and character.isprintable() and character != " ":
        return character
    return _KEY_ALIASES.get(key, key)
