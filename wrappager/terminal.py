"""Terminal session using Blessed for display, input, mouse and resize events."""

import contextlib
import logging
import os
import signal
import sys
from typing import BinaryIO, Optional

import blessed

from .constants import PagerConstants
from .keyboard import InputEvent, KeyboardHandler, ResizeEvent

logger = logging.getLogger(__name__)


class PagerError(Exception):
    """Base class for fatal pager errors."""


class InputReadError(PagerError):
    """Standard input could not be read."""


class TerminalError(PagerError):
    """The terminal could not be configured for full-screen use."""


def read_input(stream: BinaryIO) -> bytes:
    """Read ``stream`` to EOF before anything is drawn."""
    try:
        return stream.read()
    except OSError as e:
        raise InputReadError(f"Could not read standard input: {e}") from e


def attach_tty(stdin_fd: int = 0) -> None:
    """Make the controlling terminal the keyboard source.

    Standard input carries the document, so when it is not a terminal the
    controlling terminal is opened and placed on ``stdin_fd`` where blessed
    expects to read keystrokes.
    """
    if os.isatty(stdin_fd):
        return
    try:
        tty_fd = os.open(PagerConstants.TTY_PATH, os.O_RDWR)
    except OSError as e:
        raise TerminalError(f"Could not open {PagerConstants.TTY_PATH}: {e}") from e
    try:
        os.dup2(tty_fd, stdin_fd)
    finally:
        os.close(tty_fd)
    logger.debug("Attached %s as keyboard input", PagerConstants.TTY_PATH)


class TerminalInterface:
    """Owns the full-screen terminal session.

    Entering the context switches to the alternate screen, hides the cursor,
    enables raw input, mouse capture and resize notification. Leaving it
    restores the terminal on every exit path.
    """

    def __init__(self, terminal: Optional[blessed.Terminal] = None):
        """Initialize with a terminal instance (or create one)."""
        self.term = terminal or blessed.Terminal()
        self.keyboard = KeyboardHandler(self)
        self.is_fullscreen = False
        self._stack: Optional[contextlib.ExitStack] = None
        self._resized = False

    def __enter__(self) -> "TerminalInterface":
        self.setup()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.cleanup()

    def setup(self):
        """Enter fullscreen mode and prepare terminal input."""
        if not self.term.is_a_tty:
            raise TerminalError("Output is not a terminal")
        stack = contextlib.ExitStack()
        try:
            stack.enter_context(self.term.fullscreen())
            stack.enter_context(self.term.hidden_cursor())
            stack.enter_context(self.term.raw())
            timeout = PagerConstants.TERMINAL_QUERY_TIMEOUT
            stack.enter_context(self.term.mouse_enabled(timeout=timeout))
            stack.enter_context(self.term.notify_on_resize(timeout=timeout))
            # In-band resize arrives as a keystroke; SIGWINCH is the fallback.
            if not self.term.does_inband_resize(timeout=timeout):
                previous = signal.signal(signal.SIGWINCH, self._handle_resize)
                stack.callback(signal.signal, signal.SIGWINCH, previous)
            else:
                logger.debug("Using in-band resize notification")
        except BaseException:
            stack.close()
            raise
        self._stack = stack
        self.is_fullscreen = True

    def cleanup(self):
        """Exit fullscreen mode and restore terminal."""
        stack, self._stack = self._stack, None
        self.is_fullscreen = False
        if stack is not None:
            stack.close()
            sys.stdout.flush()

    def _handle_resize(self, signum, frame):
        """Handle terminal resize signal."""
        del signum, frame  # Unused
        self._resized = True

    def size(self) -> tuple[int, int]:
        """Terminal (width, height) in character cells."""
        return self.term.width, self.term.height

    def get_key(self, timeout=None):
        """Get a single keystroke, or an empty keystroke on timeout."""
        return self.term.inkey(timeout=timeout)

    def poll(self, timeout: Optional[float] = None) -> Optional[InputEvent]:
        """Wait up to ``timeout`` seconds for the next input event.

        A pending SIGWINCH is reported as a ResizeEvent before any keystroke.
        """
        if not self._resized:
            event = self.keyboard.get_event(timeout)
            if event is not None:
                return event
        if self._resized:
            self._resized = False
            width, height = self.size()
            return ResizeEvent(width=width, height=height)
        return None

    def clear(self):
        """Clear the entire screen."""
        print(self.term.home + self.term.clear, end='')

    def move_cursor(self, col: int, row: int):
        """Move the cursor to column ``col`` of row ``row``."""
        print(self.term.move_xy(col, row), end='')

    def write(self, text: str):
        print(text, end='')

    def truncate(self, text: str, width: int) -> str:
        """Cut ``text`` to ``width`` cells, accounting for wide characters."""
        return self.term.truncate(text, width)

    def flush(self):
        sys.stdout.flush()
