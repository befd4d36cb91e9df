"""
HTTP gateway for the DOOM reference API.

Provides the four read-only lookups used by the views. Requests go through
httpx, bodies are parsed with orjson and decoded into typed records.
"""

import logging
from typing import TYPE_CHECKING, Any, List, Optional, Protocol
from urllib.parse import quote

import httpx
import orjson

from .errors import ApiDecodeError, ApiRequestError
from .models import DemonDetail, EntitySummary, WeaponDetail, decode_summaries

if TYPE_CHECKING:
    from ..settings import AppSettings


class Gateway(Protocol):
    """Read-only contract the views depend on."""

    def list_demons(self) -> List[EntitySummary]: ...

    def get_demon_detail(self, key: str) -> DemonDetail: ...

    def list_weapons(self) -> List[EntitySummary]: ...

    def get_weapon_detail(self, key: str) -> WeaponDetail: ...


class DoomApiClient:
    """Typed client for the DOOM API.

    Every call blocks the calling thread until the round-trip completes, so
    views run them on worker threads. The client holds an httpx connection
    pool and must be closed when no longer needed.
    """

    def __init__(
        self,
        base_url: str,
        timeout: Optional[float] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        """Create a client for the given API host.

        Args:
            base_url: Absolute URL of the API host (e.g. "http://localhost:8000").
            timeout: Request timeout in seconds; None disables it.
            transport: Optional httpx transport (used by tests).
        """
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self.base_url = base_url
        self._client = httpx.Client(
            base_url=base_url,
            timeout=timeout,
            transport=transport,
            headers={"Accept": "application/json"},
        )
        self.logger.debug(f"DoomApiClient created for {base_url} (timeout: {timeout})")

    @classmethod
    def from_settings(
        cls, settings: "AppSettings", transport: Optional[httpx.BaseTransport] = None
    ) -> "DoomApiClient":
        """Build a client from the configured API settings."""
        timeout = settings.api.timeout
        return cls(
            settings.api.base_url,
            timeout=timeout if timeout > 0 else None,
            transport=transport,
        )

    # === DEMONS ===

    def list_demons(self) -> List[EntitySummary]:
        """GET /demons."""
        return decode_summaries(self._get("/demons"))

    def get_demon_detail(self, key: str) -> DemonDetail:
        """GET /demons/{key}."""
        return DemonDetail.from_json(self._get(f"/demons/{self._segment(key)}"))

    # === WEAPONS ===

    def list_weapons(self) -> List[EntitySummary]:
        """GET /weapons."""
        return decode_summaries(self._get("/weapons"))

    def get_weapon_detail(self, key: str) -> WeaponDetail:
        """GET /weapons/{key}."""
        return WeaponDetail.from_json(self._get(f"/weapons/{self._segment(key)}"))

    # === HELPERS ===

    @staticmethod
    def _segment(key: str) -> str:
        return quote(key, safe="")

    def _get(self, path: str) -> Any:
        """Issue a GET and return the parsed JSON body."""
        self.logger.debug(f"GET {path}")
        try:
            response = self._client.get(path)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise ApiRequestError(
                f"GET {path} returned {e.response.status_code}",
                url=str(e.request.url),
                status_code=e.response.status_code,
            ) from e
        except httpx.HTTPError as e:
            raise ApiRequestError(f"GET {path} failed: {e}", url=path) from e

        try:
            return orjson.loads(response.content)
        except orjson.JSONDecodeError as e:
            raise ApiDecodeError(f"GET {path} returned invalid JSON: {e}") from e

    def close(self) -> None:
        """Close the underlying connection pool."""
        self._client.close()
        self.logger.debug("DoomApiClient closed")

    def __enter__(self) -> "DoomApiClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
