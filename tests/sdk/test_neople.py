import logging

import pytest
from pydantic import ValidationError

from neople import (
    CyphersService,
    CyphersUrlBuilder,
    DungeonFighterService,
    DungeonFighterUrlBuilder,
    HttpxAdapter,
    Neople,
)
from neople._utils.constants import DEFAULT_BASE_URL


class TestNeople:
    class TestConfig:
        def test_explicit_arguments(self, recording_adapter):
            neople = Neople(
                api_key="explicit-key",
                base_url="https://example.test",
                http_adapter=recording_adapter,
            )

            assert neople.api_client.base_url == "https://example.test"
            assert neople.api_client.http_adapter is recording_adapter
            assert neople.df_urls.get_jobs() == "https://example.test/df/jobs?apikey=explicit-key"

        def test_env_fallback(self, monkeypatch: pytest.MonkeyPatch):
            monkeypatch.setenv("NEOPLE_API_KEY", "env-key")
            monkeypatch.setenv("NEOPLE_API_URL", "https://env.example.test")

            neople = Neople()

            assert neople.api_client.base_url == "https://env.example.test"
            assert neople.cyphers_urls.get_cyphers_info() == (
                "https://env.example.test/cy/characters?apikey=env-key"
            )

        def test_arguments_take_precedence_over_env(
            self, monkeypatch: pytest.MonkeyPatch
        ):
            monkeypatch.setenv("NEOPLE_API_KEY", "env-key")

            neople = Neople(api_key="explicit-key")

            assert neople.df_urls.get_servers().endswith("apikey=explicit-key")

        def test_defaults(self):
            neople = Neople(api_key="key")

            assert neople.api_client.base_url == DEFAULT_BASE_URL
            assert isinstance(neople.api_client.http_adapter, HttpxAdapter)

        def test_missing_api_key(self):
            with pytest.raises(ValidationError):
                Neople()

        def test_api_key_is_not_in_repr(self):
            neople = Neople(api_key="secret-key")

            assert "secret-key" not in repr(neople._config)

    class TestComponents:
        def test_components_are_built_once(self):
            neople = Neople(api_key="key")

            assert isinstance(neople.df, DungeonFighterService)
            assert isinstance(neople.cyphers, CyphersService)
            assert isinstance(neople.df_urls, DungeonFighterUrlBuilder)
            assert isinstance(neople.cyphers_urls, CyphersUrlBuilder)
            assert neople.df is neople.df
            assert neople.cyphers_urls is neople.cyphers_urls

        async def test_services_share_the_api_client(self, recording_adapter):
            neople = Neople(api_key="key", http_adapter=recording_adapter)

            await neople.df.get_servers()
            await neople.cyphers.get_cyphers_info()

            assert [url for url, _ in recording_adapter.calls] == [
                f"{DEFAULT_BASE_URL}/df/servers",
                f"{DEFAULT_BASE_URL}/cy/characters",
            ]

    class TestLogging:
        def test_debug_enables_debug_level(self):
            Neople(api_key="key", debug=True)

            assert logging.getLogger("neople").level == logging.DEBUG

        def test_default_level_is_info(self):
            Neople(api_key="key")

            assert logging.getLogger("neople").level == logging.INFO

        async def test_debug_log_omits_api_key(
            self, recording_adapter, caplog: pytest.LogCaptureFixture
        ):
            neople = Neople(api_key="secret-key", http_adapter=recording_adapter)

            with caplog.at_level(logging.DEBUG, logger="neople"):
                await neople.df.search_character("홍길동")

            assert "/df/servers/all/characters" in caplog.text
            assert "secret-key" not in caplog.text
