import pytest

from vk._config import Config


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Clean environment variables before each test."""
    monkeypatch.delenv("VK_ACCESS_TOKEN", raising=False)
    monkeypatch.delenv("VK_API_URL", raising=False)
    monkeypatch.delenv("VK_API_VERSION", raising=False)
    monkeypatch.delenv("VK_API_LANG", raising=False)


@pytest.fixture
def base_url() -> str:
    return "https://api.test.vk.com/method"


@pytest.fixture
def access_token() -> str:
    return "secret-token"


@pytest.fixture
def version() -> str:
    return "5.131"


@pytest.fixture
def config(base_url: str, access_token: str, version: str) -> Config:
    return Config(base_url=base_url, access_token=access_token, version=version)
