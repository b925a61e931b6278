"""Key event classification for list and dialog navigation."""

from enum import StrEnum

from textual.events import Key


class KeyAction(StrEnum):
    """Commands a key press can trigger."""

    CONFIRM = "confirm"
    CANCEL = "cancel"
    QUIT = "quit"
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    PAGE_UP = "page_up"
    PAGE_DOWN = "page_down"
    HOME = "home"
    END = "end"
    DELETE_BACK = "delete_back"
    CLEAR_LINE = "clear_line"
    INSERT = "insert"
    NONE = "none"


KEY_ACTIONS: dict[str, KeyAction] = {
    "enter": KeyAction.CONFIRM,
    "escape": KeyAction.CANCEL,
    "ctrl+c": KeyAction.QUIT,
    "up": KeyAction.UP,
    "ctrl+p": KeyAction.UP,
    "down": KeyAction.DOWN,
    "ctrl+n": KeyAction.DOWN,
    "left": KeyAction.LEFT,
    "right": KeyAction.RIGHT,
    "pageup": KeyAction.PAGE_UP,
    "pagedown": KeyAction.PAGE_DOWN,
    "home": KeyAction.HOME,
    "end": KeyAction.END,
    "backspace": KeyAction.DELETE_BACK,
    "ctrl+h": KeyAction.DELETE_BACK,
    "ctrl+u": KeyAction.CLEAR_LINE,
}


def split_key(key: str) -> tuple[frozenset[str], str]:
    """Split a key name like ``"ctrl+shift+a"`` into modifiers and base key."""
    *modifiers, name = key.split("+")
    return frozenset(modifiers), name


def matches_key(event: Key, name: str, ctrl: bool = False) -> bool:
    """Check whether ``event`` is the key ``name``.

    Without ``ctrl`` any modifiers are accepted; with it, control must be the
    only modifier.
    """
    modifiers, base = split_key(event.key)
    if base != name:
        return False
    if ctrl:
        return modifiers == {"ctrl"}
    return True


def classify_key(event: Key) -> KeyAction:
    """Map a key event to the action it triggers."""
    action = KEY_ACTIONS.get(event.key)
    if action is not None:
        return action
    if event.is_printable:
        return KeyAction.INSERT
    return KeyAction.NONE
