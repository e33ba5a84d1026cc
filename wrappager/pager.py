"""Main pager controller: event loop, navigation and redraws."""

import logging
from typing import Optional

from .commands import CommandRegistry
from .constants import PagerConstants
from .keyboard import InputEvent, ResizeEvent
from .model import Document, Intent, Viewport, apply_intent, resize
from .terminal import TerminalInterface
from .view import visible_lines

logger = logging.getLogger(__name__)


class Pager:
    """Full-screen pager over an immutable document.

    The loop redraws only when the viewport differs from the last one drawn,
    then waits a bounded time for the next event.
    """

    def __init__(self, document: Document, width: int = 0, height: int = 0):
        self.document = document
        self.viewport = Viewport(offset=0, width=width, height=height)
        self.command_registry = CommandRegistry()
        self.running = False
        # Viewport of the last frame drawn; None forces the next redraw
        self.last_drawn: Optional[Viewport] = None

    @property
    def needs_redraw(self) -> bool:
        return self.last_drawn != self.viewport

    def navigate(self, intent: Intent) -> bool:
        """Apply a navigation intent; return True if the viewport changed."""
        new_viewport = apply_intent(intent, self.viewport, len(self.document))
        changed = new_viewport != self.viewport
        self.viewport = new_viewport
        return changed

    def handle_resize(self, width: int, height: int) -> None:
        """Adopt new terminal dimensions and force a redraw."""
        logger.debug("Resize to %dx%d", width, height)
        self.viewport = resize(self.viewport, width, height)
        self.last_drawn = None

    def process_event(self, event: Optional[InputEvent]) -> None:
        """Handle one polled event (None means the poll timed out)."""
        if event is None:
            return
        if isinstance(event, ResizeEvent):
            self.handle_resize(event.width, event.height)
            return
        command = self.command_registry.command_for(event)
        if command is None:
            logger.debug("Ignoring unbound event %r", event)
            return
        command.execute(self)

    def draw(self, terminal: TerminalInterface) -> None:
        """Clear the screen and draw the current viewport."""
        viewport = self.viewport
        if viewport.is_degenerate:
            logger.debug("Skipping frame for %dx%d terminal", viewport.width, viewport.height)
            return
        terminal.clear()
        for row, line in enumerate(visible_lines(self.document, viewport)):
            terminal.move_cursor(0, row)
            terminal.write(terminal.truncate(line, viewport.width))
        terminal.flush()

    def redraw_if_needed(self, terminal: TerminalInterface) -> bool:
        """Draw if the viewport changed since the last frame."""
        if not self.needs_redraw:
            return False
        self.draw(terminal)
        self.last_drawn = self.viewport
        return True

    def run(self, terminal: TerminalInterface) -> None:
        """Run the event loop inside an entered terminal session until quit."""
        width, height = terminal.size()
        self.handle_resize(width, height)
        self.running = True
        while self.running:
            self.redraw_if_needed(terminal)
            event = terminal.poll(PagerConstants.POLL_TIMEOUT)
            self.process_event(event)
