"""wrappager CLI entry point.

Allows running via `python -m wrappager` and provides the console script
defined in `pyproject.toml`. Reads the whole of standard input, then pages it
full-screen until `q` is pressed.
"""

from __future__ import annotations

import logging
import sys

from .constants import PagerConstants
from .model import Document
from .pager import Pager
from .terminal import PagerError, TerminalInterface, attach_tty, read_input

logger = logging.getLogger("wrappager")


def main() -> int:
    logging.basicConfig(
        level=logging.WARNING,
        format="%(name)s: %(levelname)s: %(message)s",
    )
    try:
        document = Document.from_bytes(read_input(sys.stdin.buffer))
        logger.debug("Loaded %d lines", len(document))
        attach_tty()
        pager = Pager(document)
        with TerminalInterface() as terminal:
            pager.run(terminal)
    except PagerError as e:
        logger.error("%s", e)
        return PagerConstants.EXIT_FAILURE
    except OSError as e:
        logger.error("Terminal I/O failed: %s", e)
        return PagerConstants.EXIT_FAILURE
    except KeyboardInterrupt:
        return PagerConstants.EXIT_INTERRUPTED
    return PagerConstants.EXIT_OK


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
