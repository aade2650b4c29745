"""
Unit tests for ClientConfig.
"""

import pytest

from gitlab_rest.config import ClientConfig, DEFAULT_BASE_URL
from gitlab_rest.runtime.errors import InvalidRequestError


@pytest.mark.unit
class TestClientConfig:
    """Tests for configuration values and the derived API URL."""

    def test_defaults(self):
        config = ClientConfig()
        assert config.base_url == DEFAULT_BASE_URL
        assert config.token is None
        assert config.timeout == 30.0
        assert config.verify_ssl is True

    @pytest.mark.parametrize("base_url", [
        "https://gitlab.example.com",
        "https://gitlab.example.com/",
        "https://gitlab.example.com/api/v4",
        "https://gitlab.example.com/api/v4/",
    ])
    def test_api_url(self, base_url):
        assert ClientConfig(base_url=base_url).api_url == "https://gitlab.example.com/api/v4/"

    def test_api_url_keeps_subpath(self):
        config = ClientConfig(base_url="https://example.com/gitlab")
        assert config.api_url == "https://example.com/gitlab/api/v4/"

    def test_frozen(self):
        config = ClientConfig()
        with pytest.raises(AttributeError):
            config.token = "x"

    def test_with_token_returns_copy(self):
        config = ClientConfig()
        other = config.with_token("secret")
        assert other.token == "secret"
        assert config.token is None

    def test_repr_hides_token(self):
        assert "secret" not in repr(ClientConfig(token="secret"))

    @pytest.mark.parametrize("kwargs", [{"base_url": ""}, {"timeout": 0}, {"timeout": -1}])
    def test_invalid(self, kwargs):
        with pytest.raises(InvalidRequestError):
            ClientConfig(**kwargs)


@pytest.mark.unit
class TestClientConfigFromEnv:
    """Tests for loading configuration from the environment."""

    def test_empty_environment(self):
        assert ClientConfig.from_env({}) == ClientConfig()

    def test_all_variables(self):
        config = ClientConfig.from_env({
            "GITLAB_URL": "https://git.internal",
            "GITLAB_TOKEN": "glpat-abc",
            "GITLAB_TIMEOUT": "12.5",
            "GITLAB_VERIFY_SSL": "no",
        })
        assert config.base_url == "https://git.internal"
        assert config.token == "glpat-abc"
        assert config.timeout == 12.5
        assert config.verify_ssl is False

    def test_reads_os_environ(self, monkeypatch):
        monkeypatch.setenv("GITLAB_TOKEN", "from-env")
        assert ClientConfig.from_env().token == "from-env"

    def test_bad_timeout(self):
        with pytest.raises(InvalidRequestError):
            ClientConfig.from_env({"GITLAB_TIMEOUT": "soon"})

    def test_bad_bool(self):
        with pytest.raises(InvalidRequestError):
            ClientConfig.from_env({"GITLAB_VERIFY_SSL": "maybe"})
