from typing import Any, Optional

import pytest

from neople import ApiClient, Config, RequestConfig


class RecordingAdapter:
    """In-memory HttpAdapter that records every call."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, Optional[RequestConfig]]] = []
        self.response: Any = {}
        self.error: Optional[Exception] = None

    async def get(self, url: str, config: Optional[RequestConfig] = None) -> Any:
        self.calls.append((url, config))
        if self.error is not None:
            raise self.error
        return self.response

    @property
    def last_call(self) -> tuple[str, Optional[RequestConfig]]:
        return self.calls[-1]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Clean environment variables before each test."""
    monkeypatch.delenv("NEOPLE_API_KEY", raising=False)
    monkeypatch.delenv("NEOPLE_API_URL", raising=False)


@pytest.fixture
def base_url() -> str:
    return "https://api.neople.co.kr"


@pytest.fixture
def api_key() -> str:
    return "test-api-key"


@pytest.fixture
def config(base_url: str, api_key: str) -> Config:
    return Config(api_key=api_key, base_url=base_url)


@pytest.fixture
def recording_adapter() -> RecordingAdapter:
    return RecordingAdapter()


@pytest.fixture
def api_client(config: Config, recording_adapter: RecordingAdapter) -> ApiClient:
    return ApiClient(config, recording_adapter)
