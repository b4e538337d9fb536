"""dev.to (Forem) articles API client."""

from __future__ import annotations

import json
from typing import Any, Mapping

import requests

from devto_publisher.platforms.base import (
    ArticlePayload,
    ArticlePublisher,
    PlatformError,
    PublishedArticle,
)
from devto_publisher.settings.loader import DEFAULT_BASE_URL
from devto_publisher.utils.logging import get_logger

LOGGER = get_logger(__name__)

_ACCEPT_HEADER = "application/vnd.forem.api-v1+json"


class DevToApiError(PlatformError):
    """Raised when dev.to API calls fail."""


class DevToApiClient(ArticlePublisher):
    """Creates articles through ``POST /api/articles``."""

    def __init__(
        self,
        api_key: str,
        *,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 30.0,
        session: requests.Session | None = None,
    ) -> None:
        if not api_key:
            raise ValueError("api_key must not be empty")
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._owns_session = session is None
        self._session = session if session is not None else requests.Session()

    @property
    def articles_url(self) -> str:
        return f"{self._base_url}/articles"

    def publish(self, payload: ArticlePayload) -> PublishedArticle:
        """Submit ``payload`` and return the created article."""
        data = self._post({"article": payload.as_dict()})
        return PublishedArticle(
            url=str(data.get("url", "")),
            title=str(data.get("title") or payload.title),
            id=data.get("id"),
            published=bool(data.get("published", payload.published)),
        )

    def close(self) -> None:
        if self._owns_session:
            self._session.close()

    def _headers(self) -> dict[str, str]:
        return {
            "api-key": self._api_key,
            "Content-Type": "application/json",
            "Accept": _ACCEPT_HEADER,
        }

    def _post(self, body: Mapping[str, Any]) -> dict[str, Any]:
        try:
            response = self._session.post(
                self.articles_url,
                json=body,
                headers=self._headers(),
                timeout=self._timeout,
            )
        except requests.RequestException as exc:
            raise DevToApiError(str(exc)) from exc

        if not 200 <= response.status_code < 300:
            raise self._error_from_response(response)

        try:
            data = response.json()
        except (json.JSONDecodeError, ValueError) as exc:
            raise DevToApiError(
                "Could not decode dev.to response",
                status=response.status_code,
                details={"response": response.text[:200]},
            ) from exc

        if not isinstance(data, dict):
            raise DevToApiError(
                "Unexpected dev.to response shape",
                status=response.status_code,
                details={"response": response.text[:200]},
            )

        LOGGER.debug(
            "Article created",
            extra={"event": "devto.created", "article_id": data.get("id"), "status": response.status_code},
        )
        return data

    def _error_from_response(self, response: requests.Response) -> DevToApiError:
        status = response.status_code
        api_message: str | None = None
        try:
            data = response.json()
        except (json.JSONDecodeError, ValueError):
            data = None
        if isinstance(data, dict) and data.get("error"):
            api_message = str(data["error"])

        details: dict[str, Any] = {}
        if api_message is None and response.text:
            details["response"] = response.text[:200]
        return DevToApiError(
            f"Request failed with status code {status}",
            api_message=api_message,
            status=status,
            details=details,
        )
