"""
Gateway to the DOOM reference API.

Exposes a typed client with four read-only lookups and the immutable
records it decodes responses into.
"""

from .client import DoomApiClient, Gateway
from .errors import ApiDecodeError, ApiError, ApiRequestError
from .models import (
    DemonDetail,
    EntitySummary,
    LabeledRow,
    WeaponDetail,
    decode_record,
    decode_summaries,
)

__all__ = [
    # Client
    "DoomApiClient",
    "Gateway",
    # Errors
    "ApiError",
    "ApiRequestError",
    "ApiDecodeError",
    # Models
    "EntitySummary",
    "LabeledRow",
    "DemonDetail",
    "WeaponDetail",
    "decode_record",
    "decode_summaries",
]
