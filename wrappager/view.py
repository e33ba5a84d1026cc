"""Word wrapping of logical lines into display lines.

Widths are measured in terminal cells, so wide characters such as CJK
ideographs count twice and a row that fits never has to be clipped.
"""

from itertools import islice
from typing import Iterable, Iterator

from wcwidth import SequenceTextWrapper

from .constants import PagerConstants
from .model import Viewport

MARKER = PagerConstants.CONTINUATION_MARKER


def _make_wrapper(width: int) -> SequenceTextWrapper:
    if width < 1:
        raise ValueError(f"invalid wrap width {width!r} (must be >= 1)")
    # Continuation rows carry the marker, which counts against the width.
    # Words are never split, neither when too long nor at hyphens.
    return SequenceTextWrapper(
        width=width,
        subsequent_indent=MARKER,
        break_long_words=False,
        break_on_hyphens=False,
    )


def wrap_line(line: str, width: int) -> list[str]:
    """Wrap one logical line into display lines.

    An empty (or whitespace-only) line yields a single empty display line.
    Every row after the first starts with the continuation marker.
    """
    return _make_wrapper(width).wrap(line) or [""]


def iter_display_lines(lines: Iterable[str], width: int) -> Iterator[str]:
    """Lazily yield display lines for ``lines`` in order."""
    wrapper = _make_wrapper(width)
    for line in lines:
        yield from wrapper.wrap(line) or [""]


def wrap_lines(lines: Iterable[str], width: int) -> list[str]:
    """Wrap all ``lines`` at ``width`` terminal cells."""
    return list(iter_display_lines(lines, width))


def visible_lines(lines: Iterable[str], viewport: Viewport) -> list[str]:
    """Display lines for the screen: wrapped from the offset, cut to height.

    Returns an empty list for degenerate geometry.
    """
    if viewport.is_degenerate:
        return []
    remaining = islice(lines, viewport.offset, None)
    return list(islice(iter_display_lines(remaining, viewport.width), viewport.height))


def is_continuation(display_line: str) -> bool:
    """True when ``display_line`` is a soft-wrapped continuation row."""
    return display_line.startswith(MARKER)
