"""
Qt dispatcher that hands fetch results back to the GUI thread.
"""

from typing import Callable, Optional

from PySide6.QtCore import QObject, Qt, Signal, Slot


class QtDispatcher(QObject):
    """Callable dispatcher for ViewScope.

    Worker threads call the dispatcher with a callback; the callback is
    queued through a signal and runs on the thread this object lives in.
    """

    _invoke = Signal(object)

    def __init__(self, parent: Optional[QObject] = None):
        super().__init__(parent)
        self._invoke.connect(self._run, Qt.ConnectionType.QueuedConnection)

    def __call__(self, fn: Callable[[], None]) -> None:
        self._invoke.emit(fn)

    @Slot(object)
    def _run(self, fn: Callable[[], None]) -> None:
        fn()
