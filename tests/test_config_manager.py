from dashboard.config_manager import ConfigManager


def test_environment_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("ENVIRONMENT", "production")
    monkeypatch.setenv("DEBUG", "true")
    monkeypatch.setenv("REDIS_SOCKET_TIMEOUT", "2.5")
    monkeypatch.setenv("UPBIT_TIMEOUT_TOTAL", "12")
    monkeypatch.setenv("TICKER_JOB_INTERVAL", "5")
    monkeypatch.setenv("CORS_ORIGINS", "http://a.test, http://b.test")

    config = ConfigManager(env_file=str(tmp_path / "missing.env"))

    assert config.is_production()
    assert config.cache.socket_timeout == 2.5
    assert config.upbit.timeout_total == 12
    assert config.batch.ticker_interval_seconds == 5
    assert config.webserver.cors_origins == ["http://a.test", "http://b.test"]

    result = config.validate_config()
    assert result["valid"]
    assert "운영 환경에서 디버그 모드가 활성화됨" in result["warnings"]


def test_invalid_interval_fails_validation(monkeypatch, tmp_path):
    monkeypatch.setenv("TICKER_JOB_INTERVAL", "0")

    result = ConfigManager(env_file=str(tmp_path / "missing.env")).validate_config()

    assert not result["valid"]


def test_summary_hides_connection_urls(tmp_path):
    summary = ConfigManager(env_file=str(tmp_path / "missing.env")).get_config_summary()

    assert summary["database"]["driver"].startswith("sqlite")
    assert "url" not in summary["cache"]
