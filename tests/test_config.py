"""Tests for configuration."""

from unittest.mock import patch

from pages_showcase.config import DEFAULT_EXCLUDE, ShowcaseConfig


class TestShowcaseConfig:
    def test_defaults(self):
        config = ShowcaseConfig()
        assert config.base_url == "https://api.github.com"
        assert "liamnewmarch.github.io" in config.exclude
        assert "janineandliam.co.uk" in config.exclude
        assert config.token is None

    def test_trailing_slash_stripped(self):
        assert ShowcaseConfig(base_url="https://ghe.example.com/api/v3/").base_url == (
            "https://ghe.example.com/api/v3"
        )

    def test_instances_do_not_share_state(self):
        one = ShowcaseConfig(exclude=frozenset({"a"}))
        two = ShowcaseConfig()
        assert one.exclude == {"a"}
        assert two.exclude == DEFAULT_EXCLUDE

    def test_from_env(self):
        env = {
            "GITHUB_API_URL": "https://ghe.example.com/api/v3",
            "SHOWCASE_EXCLUDE": "one, two,,",
            "GITHUB_TOKEN": "env-token",
        }
        with patch.dict("os.environ", env, clear=True):
            config = ShowcaseConfig.from_env()
        assert config.base_url == "https://ghe.example.com/api/v3"
        assert config.exclude == {"one", "two"}
        assert config.token == "env-token"

    def test_from_env_gh_token(self):
        with patch.dict("os.environ", {"GH_TOKEN": "gh-token"}, clear=True):
            assert ShowcaseConfig.from_env().token == "gh-token"

    def test_from_env_empty(self):
        with patch.dict("os.environ", {}, clear=True):
            config = ShowcaseConfig.from_env()
        assert config == ShowcaseConfig()

    def test_overrides_win_over_env(self):
        with patch.dict("os.environ", {"GITHUB_API_URL": "https://env"}, clear=True):
            config = ShowcaseConfig.from_env(base_url="https://flag", exclude=None)
        assert config.base_url == "https://flag"
        assert config.exclude == DEFAULT_EXCLUDE
