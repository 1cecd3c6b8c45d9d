import logging

import httpx
import pytest
from pydantic import ValidationError
from pytest_httpx import HTTPXMock

from vk import VK, AppsRegistry, UsersService
from vk._config import Config


class TestConfig:
    def test_defaults(self):
        config = Config()
        assert config.base_url == "https://api.vk.com/method"
        assert config.version == "5.131"
        assert config.access_token is None
        assert config.lang is None

    def test_trailing_slash_is_stripped(self):
        assert Config(base_url="https://api.vk.com/method/").base_url == (
            "https://api.vk.com/method"
        )

    @pytest.mark.parametrize("url", ["not a url", "ftp://api.vk.com/method", ""])
    def test_invalid_url(self, url: str):
        with pytest.raises(ValidationError):
            Config(base_url=url)

    def test_repr_masks_token(self):
        config = Config(access_token="secret-token")
        assert "secret-token" not in repr(config)


class TestSdkConfig:
    def test_config_from_env(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("VK_API_URL", "https://vk.example.com/method")
        monkeypatch.setenv("VK_ACCESS_TOKEN", "1234567890")
        monkeypatch.setenv("VK_API_VERSION", "5.199")
        monkeypatch.setenv("VK_API_LANG", "ru")

        sdk = VK()

        assert sdk._config.base_url == "https://vk.example.com/method"
        assert sdk._config.access_token == "1234567890"
        assert sdk._config.version == "5.199"
        assert sdk._config.lang == "ru"

    def test_config_from_constructor(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("VK_ACCESS_TOKEN", "from-env")

        sdk = VK(access_token="1234567890", base_url="https://vk.example.com/method")

        assert sdk._config.base_url == "https://vk.example.com/method"
        assert sdk._config.access_token == "1234567890"

    def test_no_config(self):
        sdk = VK()
        assert sdk._config.base_url == "https://api.vk.com/method"
        assert sdk._config.access_token is None

    def test_services(self):
        sdk = VK()
        assert isinstance(sdk.users, UsersService)
        assert isinstance(sdk.apps, AppsRegistry)
        assert sdk.apps is sdk.apps
        assert sdk.users is sdk.users

    def test_each_client_has_its_own_registry(self):
        assert VK().apps is not VK().apps

    def test_debug_logging(self):
        VK(debug=True)
        assert logging.getLogger("vk").level == logging.DEBUG

        VK()
        assert logging.getLogger("vk").level == logging.WARNING
        assert len(logging.getLogger("vk").handlers) == 1

    def test_debug_logging_keeps_token_out_of_all_loggers(
        self,
        httpx_mock: HTTPXMock,
        base_url: str,
        caplog: pytest.LogCaptureFixture,
    ):
        caplog.set_level(logging.DEBUG)
        httpx_mock.add_response(status_code=200, json={"response": [{"id": 1}]})

        with VK(access_token="very-secret", base_url=base_url, debug=True) as sdk:
            sdk.users.get(["1"])

        assert any(r.name == "vk" for r in caplog.records)
        assert all("very-secret" not in r.getMessage() for r in caplog.records)
        assert logging.getLogger("httpx").level == logging.WARNING


class TestClientLifecycle:
    def test_close_releases_own_clients(self):
        sdk = VK()
        users = sdk.users

        sdk.close()

        assert users._client.is_closed

    def test_close_without_services(self):
        VK().close()

    def test_given_client_is_left_open(self):
        client = httpx.Client()
        with VK(http_client=client) as sdk:
            assert sdk.users._client is client

        assert not client.is_closed
        client.close()

    @pytest.mark.anyio
    async def test_async_context_manager(self):
        async with VK() as sdk:
            users = sdk.users

        assert users._client.is_closed
        assert users._client_async.is_closed
