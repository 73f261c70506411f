import json

import httpx
import pytest

from linkedin_oauth2.client import LinkedInApiClient, field_selector
from linkedin_oauth2.errors import (
    AccessDeniedError,
    InformLinkedInError,
    InvalidRequest,
    LinkedInError,
    NotFoundError,
    UnauthorizedError,
    UnavailableError,
)
from linkedin_oauth2.http_client import create_linkedin_client
from linkedin_oauth2.settings import Settings


def test_get_sends_remaining_options_as_query_params(build_client, recorded) -> None:
    client = build_client()
    result = client.get("/companies/~", {"count": 10, "event_type": "status-update"})

    assert result == {"ok": True}
    request = recorded[0]
    assert request.method == "GET"
    assert request.url.path == "/v1/companies/~"
    assert request.url.params["count"] == "10"
    assert request.url.params["event-type"] == "status-update"
    assert request.headers["x-li-format"] == "json"
    client.close()


def test_get_renders_fields_as_selector(build_client, recorded) -> None:
    client = build_client()
    client.get("/companies/1337", {"fields": ["id", "name"], "headers": {"Accept-Language": "fr-FR"}})

    request = recorded[0]
    assert request.url.path == "/v1/companies/1337:(id,name)"
    assert request.headers["accept-language"] == "fr-FR"
    assert "fields" not in request.url.params
    client.close()


def test_field_selector_goes_before_query_string(build_client, recorded) -> None:
    client = build_client()
    client.get("/companies?is-company-admin=true", {"fields": "id"})

    request = recorded[0]
    assert request.url.path == "/v1/companies:(id)"
    assert request.url.params["is-company-admin"] == "true"
    client.close()


def test_field_selector_accepts_single_name() -> None:
    assert field_selector("id") == ":(id)"
    assert field_selector(("id", "name")) == ":(id,name)"


def test_post_mapping_body_is_json(build_client, recorded) -> None:
    client = build_client(lambda request: httpx.Response(201))
    result = client.post("/people/~/following/companies", {"id": "1337"})

    assert result == {}
    request = recorded[0]
    assert request.method == "POST"
    assert json.loads(request.content) == {"id": "1337"}
    assert request.headers["content-type"] == "application/json"
    client.close()


def test_delete_returns_empty_dict_for_no_content(build_client, recorded) -> None:
    client = build_client(lambda request: httpx.Response(204))
    assert client.delete("/people/~/following/companies/id=1337") == {}
    assert recorded[0].method == "DELETE"
    client.close()


@pytest.mark.parametrize(
    ("status_code", "error_class"),
    [
        (400, InvalidRequest),
        (401, UnauthorizedError),
        (403, AccessDeniedError),
        (404, NotFoundError),
        (500, InformLinkedInError),
        (502, UnavailableError),
        (503, UnavailableError),
    ],
)
def test_http_errors_map_to_error_classes(build_client, status_code, error_class) -> None:
    client = build_client(lambda request: httpx.Response(status_code, text="mock failure"))
    with pytest.raises(error_class) as exc:
        client.get("/companies/~")
    assert exc.value.status_code == status_code
    assert str(status_code) in str(exc.value)
    assert "mock failure" in str(exc.value)
    client.close()


def test_unmapped_status_raises_base_error(build_client) -> None:
    client = build_client(lambda request: httpx.Response(429, text="throttled"))
    with pytest.raises(LinkedInError) as exc:
        client.get("/companies/~")
    assert type(exc.value) is LinkedInError
    assert exc.value.body == "throttled"
    client.close()


def test_timeout_surface_readable_error(build_client) -> None:
    def respond(request: httpx.Request) -> httpx.Response:
        raise httpx.TimeoutException("mock timeout", request=request)

    client = build_client(respond)
    with pytest.raises(LinkedInError) as exc:
        client.get("/companies/~")
    assert "timed out" in str(exc.value)
    assert isinstance(exc.value.__cause__, httpx.TimeoutException)
    client.close()


def test_invalid_json_raises(build_client) -> None:
    client = build_client(lambda request: httpx.Response(200, text="<xml/>"))
    with pytest.raises(LinkedInError) as exc:
        client.get("/companies/~")
    assert "invalid JSON" in str(exc.value)
    client.close()


def test_oauth_client_sends_bearer_token() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"id": 1337})

    settings = Settings(api_host="https://api.example.test")
    http = create_linkedin_client(settings, "token-123", transport=httpx.MockTransport(handler))
    client = LinkedInApiClient(http)

    assert client.get("/companies/1337") == {"id": 1337}
    assert seen[0].headers["authorization"] == "Bearer token-123"
    assert seen[0].url.host == "api.example.test"
    assert seen[0].url.path == "/v1/companies/1337"
    client.close()


def test_from_settings_requires_access_token() -> None:
    with pytest.raises(ValueError):
        LinkedInApiClient.from_settings(Settings())


def test_query_in_path_is_kept_alongside_options(build_client, recorded) -> None:
    client = build_client()
    client.get("/companies?email-domain=acme.com", {"start": 0, "fields": ["id"]})

    request = recorded[0]
    assert request.url.path == "/v1/companies:(id)"
    assert request.url.params["email-domain"] == "acme.com"
    assert request.url.params["start"] == "0"
    client.close()


def test_oauth_client_maps_connection_errors() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    http = create_linkedin_client(Settings(), "token-123", transport=httpx.MockTransport(handler))
    assert isinstance(http, httpx.Client)
    client = LinkedInApiClient(http)

    with pytest.raises(LinkedInError) as exc:
        client.get("/companies/~")
    assert "connection refused" in str(exc.value)
    assert isinstance(exc.value.__cause__, httpx.ConnectError)
    client.close()
