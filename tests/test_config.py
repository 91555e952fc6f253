from advert_alerts.config import Settings


def test_defaults(monkeypatch):
    monkeypatch.delenv("ENVIRONMENT", raising=False)
    settings = Settings(_env_file=None)

    assert settings.expiry_check_hour == 9
    assert settings.expiry_check_minute == 0
    assert settings.expiry_stop_on_first_failure is True
    assert settings.is_production is False


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("ENVIRONMENT", "production")
    monkeypatch.setenv("EXPIRY_STOP_ON_FIRST_FAILURE", "false")
    monkeypatch.setenv("EXPIRY_CHECK_HOUR", "7")

    settings = Settings(_env_file=None)

    assert settings.is_production is True
    assert settings.expiry_stop_on_first_failure is False
    assert settings.expiry_check_hour == 7
