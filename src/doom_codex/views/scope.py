"""
Task scope bound to the lifetime of a mounted view.

Fetches run on a shared executor. Their results are handed to a dispatcher
(the GUI thread in the application) and delivered only while the scope is
open. Closing the scope cancels pending tasks and drops late results.
"""

import logging
import threading
from concurrent.futures import Executor, Future
from functools import partial
from typing import Any, Callable, Optional, Set, TypeVar

from .state import FetchResult, capture

T = TypeVar("T")

Dispatch = Callable[[Callable[[], None]], None]
"""Schedules a callable on the thread that owns the view."""

logger = logging.getLogger(__name__)


def call_inline(fn: Callable[[], None]) -> None:
    """Dispatcher that runs the callback on the calling thread."""
    fn()


class ViewScope:
    """Owns the in-flight fetches of one view."""

    def __init__(self, executor: Executor, dispatch: Dispatch = call_inline, name: str = "view"):
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self.name = name
        self._executor = executor
        self._dispatch = dispatch
        self._futures: Set[Future] = set()
        self._lock = threading.Lock()
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def pending_count(self) -> int:
        """Number of launched tasks that have not finished yet."""
        with self._lock:
            return len(self._futures)

    def launch(
        self,
        fn: Callable[..., T],
        *args: Any,
        on_result: Callable[[FetchResult[T]], None],
    ) -> Optional[Future]:
        """Run fn(*args) on the executor and deliver its FetchResult.

        Returns the future, or None if the scope is already closed.
        """
        if self._closed:
            self.logger.debug(f"[{self.name}] launch ignored, scope closed")
            return None

        future = self._executor.submit(capture, fn, *args)
        with self._lock:
            self._futures.add(future)
        future.add_done_callback(partial(self._on_done, on_result))
        return future

    def _on_done(self, on_result: Callable[[FetchResult[Any]], None], future: Future) -> None:
        # Runs on the worker thread (or inline if already done)
        with self._lock:
            self._futures.discard(future)
        if future.cancelled():
            return
        result = future.result()
        self._dispatch(partial(self._deliver, on_result, result))

    def _deliver(self, on_result: Callable[[FetchResult[Any]], None], result: FetchResult[Any]) -> None:
        if self._closed:
            self.logger.debug(f"[{self.name}] dropping result for closed scope")
            return
        on_result(result)

    def close(self) -> None:
        """Cancel pending tasks; results that still arrive are dropped."""
        if self._closed:
            return
        self._closed = True
        with self._lock:
            pending = list(self._futures)
            self._futures.clear()
        cancelled = sum(1 for future in pending if future.cancel())
        self.logger.debug(
            f"[{self.name}] closed: {cancelled} cancelled, "
            f"{len(pending) - cancelled} abandoned in flight"
        )
