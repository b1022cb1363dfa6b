"""
EventChannel - Single ordered stream of interaction tokens.

Every button activation and the window close request end up here as a
plain string. Producers run on the UI thread inside toolkit callbacks;
the consumer pulls from its own thread and blocks until a token arrives.
"""

import queue
import threading
from typing import Iterator, List

from ..logging import logger


# Token pushed when the user asks to close the window
CLOSED = "CLOSED"

# Returned by take() when the wait is interrupted
EMPTY = ""


class _Interrupt:
    """Marker queued by interrupt(); never handed to consumers."""

    def __repr__(self) -> str:
        return "<interrupt>"


_INTERRUPT = _Interrupt()


class EventChannel:
    """
    Thread-safe unbounded FIFO of string tokens.

    Acts as a zero-argument supplier: calling the channel blocks until the
    oldest token is available and returns it.

    Usage:
        channel = frame.events()

        # Pull one token
        token = channel()

        # Or loop until the window closes
        for token in channel:
            handle(token)
    """

    def __init__(self):
        self._queue: "queue.Queue[object]" = queue.Queue()
        self._log_lock = threading.Lock()
        self._event_log: List[str] = []
        self._log_events = False

    def put(self, token: str) -> None:
        """
        Append a token. Never blocks.

        Args:
            token: Button name or CLOSED
        """
        if self._log_events:
            with self._log_lock:
                self._event_log.append(token)
        self._queue.put(token)

    def take(self) -> str:
        """
        Remove and return the oldest token, waiting until one exists.

        Returns:
            The token, or EMPTY if the wait was interrupted
        """
        item = self._queue.get()
        if item is _INTERRUPT:
            logger.debug("Event channel wait interrupted")
            return EMPTY
        return item

    def interrupt(self) -> None:
        """Wake a blocked (or the next) take() with EMPTY."""
        self._queue.put(_INTERRUPT)

    def __call__(self) -> str:
        return self.take()

    def __iter__(self) -> Iterator[str]:
        """Yield tokens in arrival order, stopping after CLOSED."""
        while True:
            token = self.take()
            yield token
            if token == CLOSED:
                return

    def qsize(self) -> int:
        """Approximate number of buffered items."""
        return self._queue.qsize()

    def empty(self) -> bool:
        return self._queue.empty()

    def enable_logging(self, enable: bool = True) -> None:
        """Enable/disable token logging for debugging."""
        self._log_events = enable

    def get_event_log(self) -> List[str]:
        """Get logged tokens (for debugging/testing)."""
        with self._log_lock:
            return list(self._event_log)

    def clear_event_log(self) -> None:
        """Clear the token log."""
        with self._log_lock:
            self._event_log.clear()
