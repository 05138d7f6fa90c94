"""Dispatchers that run UI work on the thread owning the UI."""
import queue
import threading
from typing import Callable, Optional, Protocol

from grocery.domain.errors import WrongThreadError
from grocery.utils.logger import get_logger

logger = get_logger(__name__)

UICallback = Callable[[], None]


class Dispatcher(Protocol):
    """Schedules callbacks that mutate UI-observed state."""

    def begin_invoke(self, callback: UICallback) -> None:
        ...


class ImmediateDispatcher:
    """Runs callbacks inline on the calling thread.

    Used where the caller already is the UI thread, like a Streamlit script run.
    """

    def begin_invoke(self, callback: UICallback) -> None:
        callback()


class MainThreadDispatcher:
    """Queues callbacks for the UI thread.

    Any thread may post with begin_invoke. Posted callbacks run in FIFO order,
    and only when the owning thread calls process_pending.
    """

    def __init__(self, owner: Optional[threading.Thread] = None):
        """
        Initialize the dispatcher.

        Args:
            owner: The UI thread (default: the thread creating the dispatcher)
        """
        self._owner = owner or threading.current_thread()
        self._queue: "queue.Queue[UICallback]" = queue.Queue()

    @property
    def owner(self) -> threading.Thread:
        return self._owner

    @property
    def pending(self) -> int:
        """Number of callbacks waiting to run."""
        return self._queue.qsize()

    def is_ui_thread(self) -> bool:
        return threading.current_thread() is self._owner

    def begin_invoke(self, callback: UICallback) -> None:
        self._queue.put(callback)

    def process_pending(self) -> int:
        """
        Run every queued callback, including ones posted while draining.

        Returns:
            Number of callbacks run

        Raises:
            WrongThreadError: If called from a thread other than the owner
        """
        if not self.is_ui_thread():
            raise WrongThreadError(
                "process_pending must run on the UI thread",
                metadata={
                    "owner": self._owner.name,
                    "caller": threading.current_thread().name
                }
            )

        count = 0
        while True:
            try:
                callback = self._queue.get_nowait()
            except queue.Empty:
                break
            callback()
            count += 1

        if count:
            logger.trace("Processed UI callbacks", count=count)
        return count
