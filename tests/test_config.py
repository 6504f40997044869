"""
Tests for settings and derived configuration.
"""

from tom_ai_agent.config import ExternalAPIConfig, RecordStoreConfig, get_settings


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("EPR_SYSTEM", "sqlite")
    monkeypatch.setenv("AZURE_OPENAI_API_KEY", "key")
    monkeypatch.setenv("AZURE_OPENAI_ENDPOINT", "https://tom.openai.azure.com")
    monkeypatch.setenv("TIMEZONE", "Europe/Dublin")

    settings = get_settings()

    assert settings.epr_system == "sqlite"
    assert settings.timezone == "Europe/Dublin"
    assert RecordStoreConfig.from_settings(settings).epr_system == "sqlite"
    assert ExternalAPIConfig.from_settings(settings).is_openai_configured() is True


def test_defaults(monkeypatch):
    for name in ("AZURE_OPENAI_API_KEY", "AZURE_SPEECH_API_KEY", "EPR_SYSTEM"):
        monkeypatch.delenv(name, raising=False)

    settings = get_settings()
    api_config = ExternalAPIConfig.from_settings(settings)

    assert settings.epr_system == "manual"
    assert api_config.openai_deployment_name == "gpt-4o"
    assert api_config.openai_temperature == 0.5
    assert api_config.openai_max_tokens == 1000
    assert api_config.speech_voice == "en-GB-RyanNeural"
    assert api_config.is_speech_configured() is False


def test_speech_url():
    assert ExternalAPIConfig(speech_region="westeurope").get_speech_url() == (
        "https://westeurope.tts.speech.microsoft.com/cognitiveservices/v1"
    )
    assert ExternalAPIConfig(speech_region=None).get_speech_url() is None
