"""
Result and view-state types shared by the view models.
"""

from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful fetch."""

    value: T


@dataclass(frozen=True)
class Err:
    """Failed fetch."""

    error: Exception

    @property
    def message(self) -> str:
        return str(self.error) or self.error.__class__.__name__


FetchResult = Union[Ok[T], Err]


def capture(fn: Callable[..., T], *args: Any) -> "FetchResult[T]":
    """Run a fetch and wrap its outcome, turning exceptions into Err."""
    try:
        return Ok(fn(*args))
    except Exception as e:
        return Err(e)


@dataclass(frozen=True)
class Loading:
    """Fetch in flight."""


@dataclass(frozen=True)
class Loaded(Generic[T]):
    """Fetch completed with data."""

    data: T


@dataclass(frozen=True)
class Failed:
    """Fetch failed; reason is shown to the user."""

    reason: str


ViewState = Union[Loading, Loaded[T], Failed]
