"""Тесты конфигурации StructOCR клиента"""
import pytest

from structocr import ClientConfig, ConfigurationError, StructOCR
from structocr._metadata import DEFAULT_BASE_URL, USER_AGENT


@pytest.fixture(autouse=True)
def _no_env_key(monkeypatch):
    monkeypatch.delenv("STRUCTOCR_API_KEY", raising=False)


def test_missing_api_key_raises():
    with pytest.raises(ConfigurationError):
        StructOCR()


def test_empty_api_key_raises():
    with pytest.raises(ConfigurationError):
        StructOCR(api_key="")


def test_api_key_from_env(monkeypatch):
    monkeypatch.setenv("STRUCTOCR_API_KEY", "env-key")
    client = StructOCR()
    assert client.api_key == "env-key"


def test_explicit_key_wins_over_env(monkeypatch):
    monkeypatch.setenv("STRUCTOCR_API_KEY", "env-key")
    client = StructOCR(api_key="explicit")
    assert client.api_key == "explicit"


def test_default_base_url():
    client = StructOCR(api_key="k")
    assert client.base_url == DEFAULT_BASE_URL


def test_trailing_slash_stripped():
    assert StructOCR("k", "https://x.test/v1/").base_url == "https://x.test/v1"
    assert StructOCR("k", "https://x.test/v1").base_url == "https://x.test/v1"


def test_normalization_idempotent():
    once = ClientConfig.resolve("k", "https://x.test/v1/")
    twice = ClientConfig.resolve("k", once.base_url)
    assert once.base_url == twice.base_url == "https://x.test/v1"


def test_default_headers_and_timeout():
    client = StructOCR(api_key="secret")
    assert client.headers == {
        "x-api-key": "secret",
        "Content-Type": "application/json",
        "User-Agent": USER_AGENT,
    }
    assert client.timeout == 30.0


def test_config_is_frozen():
    client = StructOCR(api_key="k")
    with pytest.raises(AttributeError):
        client.config.base_url = "https://other.test"


def test_repr_hides_api_key():
    client = StructOCR(api_key="top-secret")
    assert "top-secret" not in repr(client)
    assert "top-secret" not in repr(client.config)
