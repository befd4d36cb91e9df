"""
View model for the demon and weapon list screens.

The list fetch and every per-row detail fetch run concurrently in the view's
scope. Rows keep their list position no matter which detail arrives first.
"""

import logging
from functools import partial
from typing import Callable, List, Optional, Sequence

from ..api import EntitySummary, Gateway
from ..navigation import NavigationError, Route
from .entities import DetailRecord, EntityKind, KeyPolicy, normalize_key
from .scope import ViewScope
from .state import Err, Failed, FetchResult, Loaded, Loading, ViewState


class RowViewModel:
    """One list entry with its own detail fetch."""

    def __init__(self, index: int, key: EntitySummary):
        self.index = index
        self.key = key
        self.state: ViewState[DetailRecord] = Loading()

    @property
    def detail(self) -> Optional[DetailRecord]:
        return self.state.data if isinstance(self.state, Loaded) else None

    def __repr__(self) -> str:
        return f"RowViewModel({self.index}, {self.key!r}, {self.state!r})"


class EntityListViewModel:
    """State machine behind a list screen.

    States: Loading -> Loaded(keys) | Failed(message). On Loaded one
    RowViewModel is created per key and each row starts its detail fetch.
    """

    def __init__(
        self,
        kind: EntityKind,
        gateway: Gateway,
        scope: ViewScope,
        navigate: Callable[[Route], object],
        key_policy: KeyPolicy = KeyPolicy.DISPLAY_NAME,
        on_change: Optional[Callable[[], None]] = None,
    ):
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self.kind = kind
        self.gateway = gateway
        self.scope = scope
        self.key_policy = key_policy
        self.on_change = on_change
        self._navigate = navigate

        self.state: ViewState[Sequence[EntitySummary]] = Loading()
        self.rows: List[RowViewModel] = []

    def start(self) -> None:
        """Issue the list fetch."""
        self.logger.debug(f"Loading {self.kind.collection}")
        self.scope.launch(self.kind.fetch_list, self.gateway, on_result=self._on_list_result)

    def _notify(self) -> None:
        if self.on_change:
            self.on_change()

    def _on_list_result(self, result: FetchResult[List[EntitySummary]]) -> None:
        if isinstance(result, Err):
            self.logger.warning(
                f"[{self.kind.collection}] list fetch failed: {result.message}"
            )
            self.state = Failed(self.kind.failure_message)
            self._notify()
            return

        keys = tuple(result.value)
        self.rows = [RowViewModel(index, key) for index, key in enumerate(keys)]
        self.state = Loaded(keys)
        self.logger.info(f"Loaded {len(keys)} {self.kind.collection}")

        for row in self.rows:
            self.scope.launch(
                self.kind.fetch_detail,
                self.gateway,
                row.key,
                on_result=partial(self._on_row_result, row),
            )
        self._notify()

    def _on_row_result(self, row: RowViewModel, result: FetchResult[DetailRecord]) -> None:
        if isinstance(result, Err):
            self.logger.error(
                f"[{self.kind.collection}] detail fetch for '{row.key}' failed: {result.message}"
            )
            row.state = Failed(result.message)
        else:
            row.state = Loaded(result.value)
        self._notify()

    # === RENDERING ===

    @property
    def loaded_rows(self) -> List[RowViewModel]:
        """Rows whose detail has arrived, in list order."""
        return [row for row in self.rows if isinstance(row.state, Loaded)]

    @property
    def is_complete(self) -> bool:
        """True once the list and all row fetches have settled."""
        if isinstance(self.state, Loading):
            return False
        return not any(isinstance(row.state, Loading) for row in self.rows)

    # === SELECTION ===

    def navigation_key(self, row: RowViewModel) -> str:
        """Key passed to the detail route for a loaded row."""
        detail = row.detail
        if detail is None:
            raise ValueError(f"Row '{row.key}' has no detail yet")

        derived = normalize_key(detail.name)
        if derived != row.key:
            self.logger.warning(
                f"Display name '{detail.name}' normalizes to '{derived}', "
                f"which differs from list key '{row.key}'"
            )
        if self.key_policy is KeyPolicy.SUMMARY:
            return row.key
        return derived

    def select(self, index: int) -> Optional[Route]:
        """Open the detail screen for a row.

        Ignored until the row is loaded, and once the view has been closed
        (a click delivered after the first one already navigated away).
        """
        if self.scope.closed:
            return None
        if not isinstance(self.state, Loaded) or not 0 <= index < len(self.rows):
            return None
        row = self.rows[index]
        if row.detail is None:
            self.logger.debug(f"Ignoring selection of row '{row.key}' in state {row.state}")
            return None

        try:
            route = Route(self.kind.detail_route, self.navigation_key(row))
        except NavigationError as e:
            self.logger.error(f"Cannot open row '{row.key}': {e}")
            return None
        self._navigate(route)
        return route
