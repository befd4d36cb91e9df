"""
Toolkit-independent view models for the list and detail screens.

Each mounted screen owns a ViewScope; fetch outcomes arrive as FetchResult
values and are folded into an explicit Loading / Loaded / Failed state.
"""

from .detail_view import EntityDetailViewModel
from .entities import (
    DEMONS,
    ENTITY_KINDS,
    WEAPONS,
    DetailRecord,
    EntityKind,
    KeyPolicy,
    kind_for_route,
    normalize_key,
)
from .list_view import EntityListViewModel, RowViewModel
from .scope import Dispatch, ViewScope, call_inline
from .state import Err, Failed, FetchResult, Loaded, Loading, Ok, ViewState, capture

__all__ = [
    # View models
    "EntityListViewModel",
    "RowViewModel",
    "EntityDetailViewModel",
    # Entity kinds
    "EntityKind",
    "DEMONS",
    "WEAPONS",
    "ENTITY_KINDS",
    "DetailRecord",
    "KeyPolicy",
    "kind_for_route",
    "normalize_key",
    # Task scope
    "ViewScope",
    "Dispatch",
    "call_inline",
    # State types
    "Ok",
    "Err",
    "FetchResult",
    "capture",
    "Loading",
    "Loaded",
    "Failed",
    "ViewState",
]
