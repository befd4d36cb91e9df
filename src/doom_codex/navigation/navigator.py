"""
Back-stack navigation between screens.

The navigator keeps exactly one mounted screen. Moving to another route
disposes the current screen first, so its in-flight fetches are cancelled,
then mounts a fresh screen for the target route. Nothing is cached across
navigation events: going back re-mounts (and re-fetches) the previous route.
"""

import logging
from typing import Callable, Generic, List, Optional, Protocol, TypeVar, Union

from .routes import HOME, Route


class Screen(Protocol):
    """Anything the navigator can mount."""

    def dispose(self) -> None: ...


S = TypeVar("S", bound=Screen)


class Navigator(Generic[S]):
    """Owns the back stack and the currently mounted screen."""

    def __init__(self, mount: Callable[[Route], S], start: Union[str, Route] = HOME):
        """
        Args:
            mount: Factory that builds the screen for a route
            start: Route mounted by start()
        """
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self._mount = mount
        self._start = self._as_route(start)
        self._stack: List[Route] = []
        self._current_route: Optional[Route] = None
        self._current_screen: Optional[S] = None
        self._listeners: List[Callable[[Route, S], None]] = []

    @staticmethod
    def _as_route(route: Union[str, Route]) -> Route:
        return route if isinstance(route, Route) else Route.parse(route)

    # === STATE ===

    @property
    def current_route(self) -> Optional[Route]:
        return self._current_route

    @property
    def current_screen(self) -> Optional[S]:
        return self._current_screen

    @property
    def back_stack(self) -> List[Route]:
        """Routes below the current one, oldest first."""
        return list(self._stack)

    @property
    def can_go_back(self) -> bool:
        return bool(self._stack)

    def add_listener(self, listener: Callable[[Route, S], None]) -> None:
        """Register a callback invoked after every mount."""
        self._listeners.append(listener)

    # === NAVIGATION ===

    def start(self) -> S:
        """Mount the start route with an empty back stack."""
        self._stack.clear()
        return self._show(self._start)

    def navigate(self, route: Union[str, Route], clear_stack: bool = False) -> S:
        """Mount a route, pushing the current one onto the back stack."""
        target = self._as_route(route)
        if clear_stack:
            self._stack.clear()
        elif self._current_route is not None:
            self._stack.append(self._current_route)
        self.logger.info(f"Navigate to {target}")
        return self._show(target)

    def back(self) -> bool:
        """Return to the previous route. Returns False at the root."""
        if not self._stack:
            return False
        target = self._stack.pop()
        self.logger.info(f"Back to {target}")
        self._show(target)
        return True

    def reload(self) -> Optional[S]:
        """Re-mount the current route, re-issuing its fetches."""
        if self._current_route is None:
            return None
        return self._show(self._current_route)

    def close(self) -> None:
        """Dispose the mounted screen."""
        self._unmount()
        self._current_route = None

    def _unmount(self) -> None:
        if self._current_screen is not None:
            self._current_screen.dispose()
            self._current_screen = None

    def _show(self, route: Route) -> S:
        self._unmount()
        screen = self._mount(route)
        self._current_route = route
        self._current_screen = screen
        for listener in self._listeners:
            listener(route, screen)
        return screen
