from __future__ import annotations

import json
from typing import Any

import pytest
import requests

from devto_publisher.platforms import ArticlePayload, DictPlatformFactory
from devto_publisher.platforms.devto import DevToApiClient, DevToApiError


class StubResponse:
    def __init__(self, status_code: int, data: Any = None, *, text: str | None = None) -> None:
        self.status_code = status_code
        self._data = data
        if text is None:
            text = json.dumps(data) if data is not None else ""
        self.text = text

    def json(self) -> Any:
        if self._data is None:
            raise ValueError("No JSON object could be decoded")
        return self._data


class StubSession:
    def __init__(self, response: StubResponse | None = None, *, error: Exception | None = None) -> None:
        self.response = response
        self.error = error
        self.calls: list[dict[str, Any]] = []
        self.closed = False

    def post(self, url: str, **kwargs: Any) -> StubResponse:
        self.calls.append({"url": url, **kwargs})
        if self.error is not None:
            raise self.error
        assert self.response is not None
        return self.response

    def close(self) -> None:
        self.closed = True


def _payload() -> ArticlePayload:
    return ArticlePayload(
        title="Hello",
        body_markdown="# Hello",
        published=False,
        tags=["python"],
        organization_id=0,
    )


def test_publish_posts_pruned_article() -> None:
    session = StubSession(
        StubResponse(
            201,
            {"id": 42, "url": "https://dev.to/me/hello-1a2b", "title": "Hello", "published": False},
        )
    )
    client = DevToApiClient("secret", session=session, timeout=5)

    article = client.publish(_payload())

    assert article.as_dict() == {
        "url": "https://dev.to/me/hello-1a2b",
        "title": "Hello",
        "id": 42,
        "published": False,
    }
    call = session.calls[0]
    assert call["url"] == "https://dev.to/api/articles"
    assert call["headers"]["api-key"] == "secret"
    assert call["headers"]["Content-Type"] == "application/json"
    assert call["timeout"] == 5
    assert call["json"] == {
        "article": {
            "title": "Hello",
            "body_markdown": "# Hello",
            "published": False,
            "tags": ["python"],
            "organization_id": 0,
        }
    }


def test_custom_base_url() -> None:
    session = StubSession(StubResponse(201, {"id": 1, "url": "u", "title": "t", "published": True}))
    client = DevToApiClient("secret", base_url="https://forem.example/api/", session=session)

    client.publish(_payload())

    assert session.calls[0]["url"] == "https://forem.example/api/articles"


@pytest.mark.parametrize("response_title", [None, ""])
def test_missing_response_title_falls_back_to_payload(response_title: str | None) -> None:
    session = StubSession(
        StubResponse(201, {"id": 7, "url": "u", "title": response_title, "published": False})
    )
    client = DevToApiClient("secret", session=session)

    assert client.publish(_payload()).title == "Hello"


def test_api_error_message_is_extracted() -> None:
    session = StubSession(StubResponse(422, {"error": "Title has already been taken", "status": 422}))
    client = DevToApiClient("secret", session=session)

    with pytest.raises(DevToApiError) as excinfo:
        client.publish(_payload())

    assert excinfo.value.api_message == "Title has already been taken"
    assert excinfo.value.status == 422
    assert "status code 422" in str(excinfo.value)


def test_non_json_error_keeps_generic_message() -> None:
    session = StubSession(StubResponse(500, None, text="<html>oops</html>"))
    client = DevToApiClient("secret", session=session)

    with pytest.raises(DevToApiError) as excinfo:
        client.publish(_payload())

    assert excinfo.value.api_message is None
    assert str(excinfo.value).startswith("Request failed with status code 500")
    assert excinfo.value.details == {"response": "<html>oops</html>"}


def test_transport_error_is_wrapped() -> None:
    session = StubSession(error=requests.ConnectionError("connection refused"))
    client = DevToApiClient("secret", session=session)

    with pytest.raises(DevToApiError, match="connection refused"):
        client.publish(_payload())


def test_undecodable_success_body() -> None:
    session = StubSession(StubResponse(201, None, text="not json"))
    client = DevToApiClient("secret", session=session)

    with pytest.raises(DevToApiError, match="Could not decode"):
        client.publish(_payload())


def test_empty_api_key_rejected() -> None:
    with pytest.raises(ValueError):
        DevToApiClient("")


def test_injected_session_is_not_closed() -> None:
    session = StubSession(StubResponse(201, {}))
    DevToApiClient("secret", session=session).close()
    assert not session.closed


def test_platform_factory_builds_client() -> None:
    factory = DictPlatformFactory({"DevTo": lambda api_key: DevToApiClient(api_key)})

    client = factory.create("devto", "secret")

    assert isinstance(client, DevToApiClient)
    assert factory.platforms == ["devto"]
    with pytest.raises(ValueError, match="Unsupported platform"):
        factory.create("hashnode", "secret")
    client.close()
