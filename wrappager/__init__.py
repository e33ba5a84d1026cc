"""wrappager - A minimal full-screen pager for standard input."""

from .model import Document, Intent, Viewport, apply_intent, resize
from .view import wrap_lines, wrap_line
from .pager import Pager

__all__ = [
    'Document',
    'Intent',
    'Viewport',
    'apply_intent',
    'resize',
    'wrap_lines',
    'wrap_line',
    'Pager',
]
