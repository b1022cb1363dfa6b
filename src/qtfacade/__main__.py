"""
Preview a YAML frame definition.

Usage:
    python -m qtfacade path/to/frame.yaml [--debug]

Opens the window on the main thread and logs every event token from a
consumer thread until the window is closed.
"""

import logging
import sys
import threading
from typing import List, Optional

from PyQt5.QtWidgets import QApplication

from .declarative import FrameDefinitionError, FrameDefinitionLoader, apply_definition
from .errors import InvariantViolation
from .logging import configure_logging, logger
from .views import Frame, create_frame


def _consume(frame: Frame) -> None:
    # Iteration stops after the CLOSED token
    for token in frame.events():
        logger.info(f"Event: {token}")
    frame.invoke_later(QApplication.quit)


def main(argv: Optional[List[str]] = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    debug = "--debug" in args
    paths = [a for a in args if a != "--debug"]
    if len(paths) != 1:
        print(__doc__.strip(), file=sys.stderr)
        return 2

    configure_logging(logging.DEBUG if debug else logging.INFO)

    try:
        definition = FrameDefinitionLoader.load(paths[0])
    except FrameDefinitionError as e:
        logger.error(str(e))
        return 1

    frame = create_frame()
    try:
        apply_definition(frame, definition)
    except InvariantViolation as e:
        logger.error(f"Invalid frame definition: {e}")
        return 1

    frame.show()
    consumer = threading.Thread(target=_consume, args=(frame,), daemon=True)
    consumer.start()
    return frame.exec()


if __name__ == "__main__":
    sys.exit(main())
