"""Document and viewport state for the pager."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Iterator, Sequence

from .constants import PagerConstants


class Intent(Enum):
    """Navigation intents produced by input events."""
    SCROLL_DOWN = "scroll_down"
    SCROLL_UP = "scroll_up"
    HOME = "home"
    END = "end"
    PAGE_UP = "page_up"
    PAGE_DOWN = "page_down"
    MOUSE_SCROLL_DOWN = "mouse_scroll_down"
    MOUSE_SCROLL_UP = "mouse_scroll_up"
    QUIT = "quit"


class Document(Sequence[str]):
    """Immutable sequence of logical lines loaded once from raw input."""

    def __init__(self, lines: Sequence[str] = ()):
        self._lines: tuple[str, ...] = tuple(lines)

    @classmethod
    def from_bytes(cls, data: bytes) -> "Document":
        """Decode input lossily as UTF-8 and split it into logical lines.

        Lines end at ``\\n``; a ``\\r`` directly before it belongs to the
        terminator, while a ``\\r`` ending unterminated input stays on the
        last line. A trailing terminator does not open an extra empty line,
        so empty input gives an empty document.
        """
        return cls.from_text(data.decode("utf-8", errors="replace"))

    @classmethod
    def from_text(cls, text: str) -> "Document":
        if not text:
            return cls()
        *terminated, last = text.split("\n")
        lines = [line[:-1] if line.endswith("\r") else line for line in terminated]
        # A final line without "\n" keeps a trailing "\r".
        if last:
            lines.append(last)
        return cls(lines)

    @property
    def lines(self) -> tuple[str, ...]:
        return self._lines

    def __getitem__(self, index):
        return self._lines[index]

    def __len__(self) -> int:
        return len(self._lines)

    def __iter__(self) -> Iterator[str]:
        return iter(self._lines)

    def __repr__(self) -> str:
        return f"Document({len(self._lines)} lines)"


@dataclass(frozen=True)
class Viewport:
    """Visible window into the document: top line offset plus dimensions."""
    offset: int = 0
    width: int = 0
    height: int = 0

    @property
    def is_degenerate(self) -> bool:
        """True when there is no screen area to draw into."""
        return self.width <= 0 or self.height <= 0


def apply_intent(intent: Intent, viewport: Viewport, total_lines: int) -> Viewport:
    """Return the viewport after applying a navigation intent.

    Guards keep the offset within ``[0, total_lines - height]`` (or at 0 when
    the document fits on one screen), so rendering never needs to clamp.
    """
    offset = viewport.offset
    height = viewport.height
    has_more_below = offset + height < total_lines

    if intent is Intent.SCROLL_DOWN:
        if has_more_below:
            offset += 1
    elif intent is Intent.SCROLL_UP:
        if offset > 0:
            offset -= 1
    elif intent is Intent.HOME:
        offset = 0
    elif intent is Intent.END:
        offset = total_lines - height if total_lines > height else 0
    elif intent is Intent.PAGE_UP:
        offset = max(offset - height, 0)
    elif intent is Intent.PAGE_DOWN:
        # Short documents have no last page to clamp against
        if total_lines > height:
            offset = min(offset + height, total_lines - height)
    elif intent is Intent.MOUSE_SCROLL_DOWN:
        if has_more_below:
            offset = min(offset + PagerConstants.MOUSE_SCROLL_LINES, total_lines - height)
    elif intent is Intent.MOUSE_SCROLL_UP:
        if offset > 0:
            offset = max(offset - PagerConstants.MOUSE_SCROLL_LINES, 0)

    if offset == viewport.offset:
        return viewport
    return replace(viewport, offset=offset)


def resize(viewport: Viewport, width: int, height: int) -> Viewport:
    """Replace the viewport dimensions, keeping the offset."""
    return replace(viewport, width=max(width, 0), height=max(height, 0))
