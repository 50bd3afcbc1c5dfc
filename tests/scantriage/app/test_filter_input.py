from __future__ import annotations

from scantriage.app.components.filter_input import FilterInput
from scantriage.app.render_config import DEFAULT_RENDER_CONFIG


def type_text(field: FilterInput, text: str) -> FilterInput:
    for ch in text:
        field = field.handle_key(ch, ch)
    return field


def test_typing_inserts_at_cursor():
    field = type_text(FilterInput().focus(), "cve")
    assert field.get_value() == "cve"
    assert field.cursor == 3

    field = field.handle_key("left").handle_key("left")
    field = field.handle_key("X", "X")
    assert field.get_value() == "cXve"


def test_backspace_and_delete():
    field = type_text(FilterInput().focus(), "abcd")
    field = field.handle_key("backspace")
    assert field.get_value() == "abc"

    field = field.handle_key("home").handle_key("delete")
    assert field.get_value() == "bc"
    assert field.handle_key("backspace") == field


def test_blurred_input_ignores_keys():
    field = FilterInput()
    assert field.handle_key("a", "a") == field


def test_non_printable_keys_are_ignored():
    field = FilterInput().focus()
    assert field.handle_key("f5") == field
    assert field.handle_key("enter", "\r") == field


def test_ctrl_u_clears_before_cursor():
    field = type_text(FilterInput().focus(), "abc").handle_key("left")
    assert field.handle_key("ctrl+u").get_value() == "c"


def test_render_shows_prompt_and_placeholder():
    line = FilterInput().render(DEFAULT_RENDER_CONFIG)
    assert line.plain == "Find: package or vulnerability"


def test_render_shows_value():
    field = type_text(FilterInput().focus(), "zlib")
    assert field.render(DEFAULT_RENDER_CONFIG, cursor_visible=False).plain == "Find: zlib"
    assert field.render(DEFAULT_RENDER_CONFIG).plain.rstrip() == "Find: zlib"


def test_set_value_and_clear():
    field = FilterInput().set_value("abc")
    assert field.cursor == 3
    assert field.clear() == FilterInput()
