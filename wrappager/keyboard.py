"""Input event handling using blessed keystrokes."""

from typing import Optional, Union
from dataclasses import dataclass
from enum import Enum


class KeyType(Enum):
    """Types of key events."""
    REGULAR = "regular"
    CTRL = "ctrl"
    SPECIAL = "special"


@dataclass
class KeyEvent:
    """Represents a parsed keyboard event."""
    key_type: KeyType
    value: str  # The base key (e.g., 'q', 'down', 'page_up')
    raw: str  # The raw key string from blessed
    is_sequence: bool = False


@dataclass
class MouseEvent:
    """A mouse report, e.g. button 'scroll_down' or 'left'."""
    button: str
    raw: str = ""


@dataclass
class ResizeEvent:
    """The terminal now has the given size in character cells."""
    width: int
    height: int


InputEvent = Union[KeyEvent, MouseEvent, ResizeEvent]


# blessed names that differ from the short names used for bindings
_SPECIAL_NAMES = {
    'KEY_PGUP': 'page_up',
    'KEY_PGDOWN': 'page_down',
    'KEY_PPAGE': 'page_up',
    'KEY_NPAGE': 'page_down',
    'KEY_ESCAPE': 'escape',
}


class KeyboardHandler:
    """Turns blessed keystrokes into pager input events."""

    def __init__(self, terminal_interface):
        """Initialize with a terminal interface."""
        self.terminal = terminal_interface

    def get_event(self, timeout: Optional[float] = None) -> Optional[InputEvent]:
        """Get the next input event, or None if ``timeout`` elapses."""
        key = self.terminal.get_key(timeout)
        if not key:
            return None
        return self.parse_key(key)

    def parse_key(self, key) -> InputEvent:
        """Parse a blessed keystroke into an input event.

        Args:
            key: blessed.keyboard.Keystroke object

        Returns:
            KeyEvent, MouseEvent or ResizeEvent
        """
        key_str = str(key)
        name = getattr(key, 'name', None) or ''

        if name.startswith('MOUSE_'):
            return MouseEvent(button=name[len('MOUSE_'):].lower(), raw=key_str)

        if name == 'RESIZE_EVENT':
            width, height = self.terminal.size()
            return ResizeEvent(width=width, height=height)

        if name.startswith('KEY_') and getattr(key, 'is_sequence', False):
            value = _SPECIAL_NAMES.get(name, name[len('KEY_'):].lower())
            return KeyEvent(key_type=KeyType.SPECIAL, value=value, raw=key_str, is_sequence=True)

        # Single-byte ASCII control chars (Ctrl-<letter>)
        if len(key_str) == 1:
            o = ord(key_str)
            if 1 <= o <= 26:
                ch = chr(ord('a') + o - 1)
                if ch in ('j', 'm'):
                    return KeyEvent(key_type=KeyType.SPECIAL, value='enter', raw=key_str)
                return KeyEvent(key_type=KeyType.CTRL, value=ch, raw=key_str)

        if key_str == '\x1b':
            return KeyEvent(key_type=KeyType.SPECIAL, value='escape', raw=key_str)

        return KeyEvent(key_type=KeyType.REGULAR, value=key_str, raw=key_str)
