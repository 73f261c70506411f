from collections.abc import Callable, Iterator

import httpx
import pytest

from linkedin_oauth2.client import LinkedInApiClient
from linkedin_oauth2.settings import reset_configuration

BASE_URL = "https://api.linkedin.com/v1"


@pytest.fixture(autouse=True)
def _clean_configuration() -> Iterator[None]:
    reset_configuration()
    yield
    reset_configuration()


@pytest.fixture
def recorded() -> list[httpx.Request]:
    return []


@pytest.fixture
def build_client(recorded: list[httpx.Request]) -> Callable[..., LinkedInApiClient]:
    """Return a factory for clients whose requests are recorded and answered by ``respond``."""

    def _build(respond: Callable[[httpx.Request], httpx.Response] | None = None) -> LinkedInApiClient:
        def handler(request: httpx.Request) -> httpx.Response:
            recorded.append(request)
            if respond is not None:
                return respond(request)
            return httpx.Response(200, json={"ok": True})

        return LinkedInApiClient(httpx.Client(transport=httpx.MockTransport(handler), base_url=BASE_URL))

    return _build


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"
