"""
View model for the demon and weapon detail screens.
"""

import logging
from typing import Callable, List, Optional

from ..api import Gateway, LabeledRow
from .entities import DetailRecord, EntityKind
from .scope import ViewScope
from .state import Err, Failed, FetchResult, Loaded, Loading, ViewState


class EntityDetailViewModel:
    """State machine behind a detail screen: Loading -> Loaded | Failed."""

    def __init__(
        self,
        kind: EntityKind,
        key: str,
        gateway: Gateway,
        scope: ViewScope,
        on_change: Optional[Callable[[], None]] = None,
    ):
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self.kind = kind
        self.key = key
        self.gateway = gateway
        self.scope = scope
        self.on_change = on_change
        self.state: ViewState[DetailRecord] = Loading()

    def start(self) -> None:
        """Issue the detail fetch. Called on every mount; nothing is cached."""
        self.logger.debug(f"Loading {self.kind.detail_route}/{self.key}")
        self.scope.launch(
            self.kind.fetch_detail, self.gateway, self.key, on_result=self._on_result
        )

    def _on_result(self, result: FetchResult[DetailRecord]) -> None:
        if isinstance(result, Err):
            self.logger.error(
                f"[{self.kind.detail_route}] fetch for '{self.key}' failed: {result.message}"
            )
            self.state = Failed(f"Failed to load '{self.key}': {result.message}")
        else:
            self.state = Loaded(result.value)
        if self.on_change:
            self.on_change()

    @property
    def detail(self) -> Optional[DetailRecord]:
        return self.state.data if isinstance(self.state, Loaded) else None

    def rows(self) -> List[LabeledRow]:
        """Labeled display rows, empty until loaded."""
        detail = self.detail
        return detail.labeled_rows() if detail is not None else []
