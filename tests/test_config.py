"""Tests for mcp_aiops.config: Settings defaults and env override."""

from __future__ import annotations


class TestSettings:
    def test_default_values(self, monkeypatch):
        monkeypatch.delenv("GEMINI_API_KEY", raising=False)
        monkeypatch.delenv("PORT", raising=False)
        monkeypatch.delenv("PROMETHEUS_URL", raising=False)
        from mcp_aiops.config import Settings
        s = Settings(_env_file=None)
        assert s.app_name == "MCP-AIOps"
        assert s.port == 8080
        assert s.prometheus_url == "http://prometheus:9090"
        assert s.gemini_api_key is None
        assert s.gemini_model == "gemini-2.0-flash"
        assert 5.0 <= s.inference_timeout <= 15.0
        assert s.cpu_query == "rate(node_cpu_seconds_total{mode='user'}[5m])"

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("PORT", "9999")
        monkeypatch.setenv("PROMETHEUS_URL", "http://other:9090")
        monkeypatch.setenv("GEMINI_API_KEY", "abc")
        monkeypatch.setenv("INFERENCE_TIMEOUT", "7.5")
        from mcp_aiops.config import Settings
        s = Settings(_env_file=None)
        assert s.port == 9999
        assert s.prometheus_url == "http://other:9090"
        assert s.gemini_api_key == "abc"
        assert s.inference_timeout == 7.5

    def test_missing_key_does_not_fail(self, monkeypatch):
        monkeypatch.delenv("GEMINI_API_KEY", raising=False)
        from mcp_aiops.config import Settings
        assert Settings(_env_file=None).gemini_api_key is None

    def test_no_env_prefix(self):
        from mcp_aiops.config import Settings
        assert Settings.model_config["env_prefix"] == ""
