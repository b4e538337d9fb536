"""dev.to platform adapters."""

from __future__ import annotations

from .api import DEFAULT_BASE_URL, DevToApiClient, DevToApiError

__all__ = ["DEFAULT_BASE_URL", "DevToApiClient", "DevToApiError"]
