"""Shared fixtures for the chat service tests."""

import pytest

from mediachat.config import Settings, get_settings
from mediachat.main import app


def make_settings(**overrides) -> Settings:
    values = {"openai_api_key": "sk-test", "openai_model": "gpt-4o", "openai_max_tokens": 1000}
    values.update(overrides)
    return Settings(_env_file=None, **values)


@pytest.fixture
def override_settings():
    """Install settings for the app; call with keyword overrides."""

    def _install(**overrides) -> Settings:
        settings = make_settings(**overrides)
        app.dependency_overrides[get_settings] = lambda: settings
        return settings

    yield _install
    app.dependency_overrides.pop(get_settings, None)
