"""Input mode state machine: (state, event) -> (state, frame, effect)."""

import logging
from typing import Callable, Optional

from scantriage.app.keys import (
    FILTER_ENTRY_BINDINGS,
    GLOBAL_BINDINGS,
    SCROLL_BINDINGS,
    Action,
    binding_key,
)
from scantriage.app.layout import apply_layout
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
from scantriage.app.table import TableModel
from scantriage.domain.exceptions import NotFoundError

logger = logging.getLogger(__name__)

_NAVIGATION: dict[Action, Callable[[TableModel], TableModel]] = {
    Action.MOVE_UP: TableModel.move_up,
    Action.MOVE_DOWN: TableModel.move_down,
    Action.PAGE_UP: TableModel.page_up,
    Action.PAGE_DOWN: TableModel.page_down,
    Action.JUMP_TO_START: TableModel.jump_to_start,
    Action.JUMP_TO_END: TableModel.jump_to_end,
}


def update(state: BrowserState, event: Event) -> Transition:
    """
    Handle one event and render the resulting frame.

    The incoming state is never modified; a new snapshot is returned in the
    transition together with an optional side effect for the host loop.
    """
    if isinstance(event, ResizeEvent):
        new_state = apply_layout(state.evolve(height=max(0, event.height), width=max(0, event.width)))
        return _transition(new_state)

    if isinstance(event, KeyEvent):
        # a notice only lives until the next key press
        if state.notice is not None:
            state = state.evolve(notice=None)
        if state.mode is Mode.FILTER_ENTRY:
            new_state, effect = _handle_filter_entry_key(state, event)
        else:
            new_state, effect = _handle_scroll_key(state, event)
        return _transition(new_state, effect)

    logger.debug("Ignoring unsupported event %r", event)
    return _transition(state)


def replay(state: BrowserState, events) -> Transition:
    """Feed events one at a time, stopping early on a quit effect."""
    transition = _transition(state)
    for event in events:
        transition = update(transition.state, event)
        if transition.effect is Effect.QUIT:
            break
    return transition


def _transition(state: BrowserState, effect: Optional[Effect] = None) -> Transition:
    return Transition(state=state, frame=render_frame(state), effect=effect)


def _handle_scroll_key(state: BrowserState, event: KeyEvent) -> tuple[BrowserState, Optional[Effect]]:
    key = binding_key(event.key, event.character)
    action = GLOBAL_BINDINGS.get(key) or SCROLL_BINDINGS.get(key)

    if action is Action.QUIT:
        return state, Effect.QUIT

    if action in _NAVIGATION:
        return state.evolve(table=_NAVIGATION[action](state.table)), None

    if action is Action.ENTER_SEARCH:
        logger.debug("Entering filter entry mode")
        new_state = state.evolve(mode=Mode.FILTER_ENTRY, filter=state.filter.clear().focus())
        return apply_layout(new_state), Effect.BLINK

    if action is Action.REPEAT_SEARCH_FORWARD:
        return _repeat_search(state, forward=True)

    if action is Action.REPEAT_SEARCH_BACKWARD:
        return _repeat_search(state, forward=False)

    if action is Action.TOGGLE_DETAILS:
        return apply_layout(state.evolve(show_details=not state.show_details)), None

    # the input is blurred here, so this keeps it in step without visible change
    return state.evolve(filter=state.filter.handle_key(event.key, event.character)), None


def _handle_filter_entry_key(
    state: BrowserState, event: KeyEvent
) -> tuple[BrowserState, Optional[Effect]]:
    key = binding_key(event.key, event.character)
    action = GLOBAL_BINDINGS.get(key) or FILTER_ENTRY_BINDINGS.get(key)

    if action is Action.QUIT:
        return state, Effect.QUIT

    if action is Action.COMMIT:
        expr = state.filter.get_value()
        try:
            table = state.table.find(expr)
        except NotFoundError as e:
            logger.debug("Search for %r found nothing", expr)
            return state.evolve(notice=str(e)), Effect.NOT_FOUND
        return _leave_filter_entry(state.evolve(table=table)), None

    if action is Action.CANCEL:
        return _leave_filter_entry(state), None

    return state.evolve(filter=state.filter.handle_key(event.key, event.character)), None


def _leave_filter_entry(state: BrowserState) -> BrowserState:
    logger.debug("Leaving filter entry mode")
    return apply_layout(state.evolve(mode=Mode.SCROLL, filter=state.filter.blur()))


def _repeat_search(state: BrowserState, forward: bool) -> tuple[BrowserState, Optional[Effect]]:
    expr = state.search_expression
    if not expr:
        return state, None

    try:
        if forward:
            table = state.table.find_next(expr)
        else:
            table = state.table.find_previous(expr)
    except NotFoundError as e:
        logger.debug("No other row matches %r", expr)
        return state.evolve(notice=str(e)), Effect.NOT_FOUND

    return state.evolve(table=table), None
