"""Tests for RunConfig."""

import pytest

from latencyprobe.config import RunConfig


class TestRunConfig:
    def test_defaults(self):
        config = RunConfig(url="http://service.test")
        assert config.iterations == 10
        assert config.method == "GET"
        assert config.timeout_s == 10.0
        assert config.delay_s == 0.0
        assert config.field == "time"

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"url": ""},
            {"url": "http://x", "iterations": 0},
            {"url": "http://x", "timeout_s": 0},
            {"url": "http://x", "delay_s": -1},
            {"url": "http://x", "field": ""},
        ],
    )
    def test_validation(self, kwargs):
        with pytest.raises(ValueError):
            RunConfig(**kwargs)


class TestFromEnv:
    def test_reads_environment(self):
        env = {
            "LP_URL": "http://service.test",
            "LP_ITERATIONS": "25",
            "LP_METHOD": "HEAD",
            "LP_TIMEOUT_S": "2.5",
            "LP_DELAY_S": "0.1",
        }
        config = RunConfig.from_env(env)
        assert config == RunConfig(
            url="http://service.test", iterations=25, method="HEAD", timeout_s=2.5, delay_s=0.1
        )

    def test_overrides_win(self):
        env = {"LP_URL": "http://env.test", "LP_ITERATIONS": "25"}
        config = RunConfig.from_env(env, url="http://arg.test", iterations=3)
        assert config.url == "http://arg.test"
        assert config.iterations == 3

    def test_none_overrides_ignored(self):
        env = {"LP_URL": "http://env.test", "LP_ITERATIONS": "7"}
        config = RunConfig.from_env(env, url=None, iterations=None)
        assert config.url == "http://env.test"
        assert config.iterations == 7

    def test_empty_variables_ignored(self):
        config = RunConfig.from_env({"LP_URL": "http://env.test", "LP_ITERATIONS": ""})
        assert config.iterations == 10

    def test_missing_url(self):
        with pytest.raises(ValueError, match="LP_URL"):
            RunConfig.from_env({})

    def test_invalid_number(self):
        with pytest.raises(ValueError, match="LP_ITERATIONS"):
            RunConfig.from_env({"LP_URL": "http://x", "LP_ITERATIONS": "many"})

    def test_unknown_override(self):
        with pytest.raises(TypeError):
            RunConfig.from_env({"LP_URL": "http://x"}, retries=3)

    def test_uses_os_environ_by_default(self, monkeypatch):
        monkeypatch.setenv("LP_URL", "http://os.test")
        monkeypatch.delenv("LP_ITERATIONS", raising=False)
        assert RunConfig.from_env().url == "http://os.test"
