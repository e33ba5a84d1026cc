"""Constants and configuration for the pager."""

class PagerConstants:
    """Central configuration constants for the pager."""

    # Input polling
    POLL_TIMEOUT = 0.1  # Bounded wait for the next input event (seconds)
    TERMINAL_QUERY_TIMEOUT = 0.5  # Wait for DEC mode query replies (seconds)

    # Navigation
    MOUSE_SCROLL_LINES = 3  # Lines moved per mouse wheel notch
    QUIT_KEY = "q"

    # Wrapping
    CONTINUATION_MARKER = "↩ "  # Prefix for soft-wrapped continuation rows

    # Controlling terminal
    TTY_PATH = "/dev/tty"

    # Exit codes
    EXIT_OK = 0
    EXIT_FAILURE = 1
    EXIT_INTERRUPTED = 130
