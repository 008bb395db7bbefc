import sys
from pathlib import Path
from typing import Callable, Dict, List, Tuple, Union

import httpx
import pytest

# Adjusted for tests directory
PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from vue_ui.config import AppSettings  # noqa: E402
from vue_ui.docs import ShadcnVueDocs  # noqa: E402
from vue_ui.metadata import MetadataCache, ShadcnVueMetadataExtractor  # noqa: E402
from vue_ui.tool_implementations import ToolServices  # noqa: E402

Route = Union[Tuple[int, str], Exception]


class RecordingTransport(httpx.MockTransport):
    """MockTransport serving canned responses keyed by URL without query string."""

    def __init__(self, routes: Dict[str, Route]):
        self.routes = routes
        self.requests: List[httpx.Request] = []
        super().__init__(self._handle)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        key = f"{request.url.scheme}://{request.url.host}{request.url.path}"
        route = self.routes.get(key)
        if route is None:
            return httpx.Response(404, text="Not Found")
        if isinstance(route, Exception):
            raise route
        status, text = route
        return httpx.Response(status, text=text)


@pytest.fixture
def make_transport() -> Callable[[Dict[str, Route]], RecordingTransport]:
    return RecordingTransport


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings(_env_file=None, ai_api_key=None, ai_model=None)


@pytest.fixture
def make_services(settings):
    def _make(routes: Dict[str, Route], chat=None, cache: MetadataCache = None):
        transport = RecordingTransport(routes)
        client = httpx.AsyncClient(transport=transport)
        services = ToolServices(
            settings=settings,
            docs=ShadcnVueDocs(client),
            metadata=ShadcnVueMetadataExtractor(client, cache or MetadataCache()),
            chat=chat,
        )
        return services, transport

    return _make


class FakeChatModel:
    """Stands in for ChatModel; returns queued replies and records the calls."""

    def __init__(self, replies: List[str]):
        self.replies = list(replies)
        self.calls: List[dict] = []

    async def generate_text(self, system, messages, max_tokens=2000, temperature=0.2):
        self.calls.append({"system": system, "messages": messages, "max_tokens": max_tokens})
        return self.replies.pop(0)


@pytest.fixture
def fake_chat() -> Callable[[List[str]], FakeChatModel]:
    return FakeChatModel
