#!/usr/bin/env python3
"""wrappager - A minimal full-screen pager.

Usage:
    some-command | python main.py

Controls:
    Up/Down: Scroll one line
    PageUp/PageDown: Scroll one screen
    Home/End: Jump to start/end
    Mouse wheel: Scroll three lines
    q: Quit
"""

import sys
from wrappager.__main__ import main


if __name__ == "__main__":
    sys.exit(main())
