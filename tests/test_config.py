import pytest

from config import DEFAULT_API_BASE, DEFAULT_MODEL, DEFAULT_PORTS, load_settings


def test_defaults():
    settings = load_settings({})

    assert settings.api_key is None
    assert settings.model == DEFAULT_MODEL
    assert settings.api_base == DEFAULT_API_BASE
    assert settings.timeout == 60.0
    assert settings.ports == DEFAULT_PORTS == (8080, 8081, 8082, 9090, 9091, 3000, 5000)
    assert settings.debug is False


def test_values_from_environment():
    settings = load_settings({
        "GEMINI_API_KEY": "  abc123  ",
        "GEMINI_MODEL": "gemini-pro",
        "GEMINI_TIMEOUT_SECONDS": "12.5",
        "TUTOR_HOST": "127.0.0.1",
        "TUTOR_PORTS": "9000, 9001,",
        "FLASK_DEBUG": "true",
    })

    assert settings.api_key == "abc123"
    assert settings.model == "gemini-pro"
    assert settings.timeout == 12.5
    assert settings.host == "127.0.0.1"
    assert settings.ports == (9000, 9001)
    assert settings.debug is True


def test_blank_key_counts_as_missing():
    assert load_settings({"GEMINI_API_KEY": "   "}).api_key is None


@pytest.mark.parametrize("env", [
    {"TUTOR_PORTS": "http"},
    {"TUTOR_PORTS": "70000"},
    {"TUTOR_PORTS": ","},
    {"GEMINI_TIMEOUT_SECONDS": "0"},
    {"GEMINI_TIMEOUT_SECONDS": "soon"},
])
def test_invalid_values(env):
    with pytest.raises(ValueError):
        load_settings(env)
