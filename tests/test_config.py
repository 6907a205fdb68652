import pytest

from hr_portal.config import get_settings_module


@pytest.mark.parametrize(
    "env,expected",
    [
        ("production", "hr_portal.config.production"),
        ("PROD", "hr_portal.config.production"),
        ("testing", "hr_portal.config.testing"),
        ("test", "hr_portal.config.testing"),
        ("development", "hr_portal.config.development"),
        ("staging", "hr_portal.config.development"),
    ],
)
def test_settings_module_follows_app_env(monkeypatch, env, expected):
    monkeypatch.setenv("APP_ENV", env)
    assert get_settings_module() == expected


def test_settings_module_defaults_to_development(monkeypatch):
    monkeypatch.delenv("APP_ENV", raising=False)
    assert get_settings_module() == "hr_portal.config.development"
