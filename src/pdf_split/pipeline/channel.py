"""Result channel between page extractors and the page writer.

The channel is an unbounded multi-producer/single-consumer FIFO with an
explicit "no more input" signal. Producers never block; the consumer blocks
until either a result is available or the channel is finished and drained.
"""

import logging
import threading
from collections import deque

from schemas.page_result import PageResult

logger: logging.Logger = logging.getLogger(__name__)


class ChannelClosedError(Exception):
    """Raised when a result is pushed after the channel was marked finished."""

    def __init__(self, message: str = "Result channel is finished"):
        self.message = message
        super().__init__(message)


class ResultChannel:
    """
    Thread-safe handoff queue of PageResult values.

    The queue contents and the finished flag are guarded by a single lock,
    shared with the condition variable the consumer waits on.
    """

    def __init__(self) -> None:
        self._queue: deque[PageResult] = deque()
        self._finished = False
        self._cond = threading.Condition(threading.Lock())

    def __repr__(self) -> str:
        return f"ResultChannel(pending={len(self)}, finished={self.finished})"

    def __len__(self) -> int:
        with self._cond:
            return len(self._queue)

    @property
    def finished(self) -> bool:
        with self._cond:
            return self._finished

    def push(self, result: PageResult) -> None:
        """Append a result and wake one waiting consumer.

        Args:
            result: The page result to hand off

        Raises:
            ChannelClosedError: If mark_finished() has already been called
        """
        with self._cond:
            if self._finished:
                raise ChannelClosedError()
            self._queue.append(result)
            self._cond.notify()

    def pop(self) -> PageResult | None:
        """Take the oldest result, blocking until one is available.

        Returns:
            The next result, or None once the channel is finished and empty.
            Every call after that also returns None.
        """
        with self._cond:
            self._cond.wait_for(lambda: self._queue or self._finished)
            if not self._queue:
                return None
            return self._queue.popleft()

    def mark_finished(self) -> None:
        """Signal that no more results will be pushed. Idempotent."""
        with self._cond:
            if not self._finished:
                logger.debug(f"Result channel finished with {len(self._queue)} pending")
            self._finished = True
            self._cond.notify_all()
