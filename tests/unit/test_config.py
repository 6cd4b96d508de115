import pytest
from pydantic import ValidationError

from cricmirror.config import DEFAULT_BASE_URL, DEFAULT_TIMEOUT, MirrorSettings
from cricmirror.utils.headers import DEFAULT_USER_AGENT

ENV_VARS = ('CRICMIRROR_BASE_URL', 'CRICMIRROR_TIMEOUT', 'CRICMIRROR_USER_AGENT', 'CRICMIRROR_OUTPUT_DIR')


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, mocker):
    for var in ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    # keep a developer's .env out of the tests
    mocker.patch('cricmirror.config.load_dotenv')


def test_defaults():
    settings = MirrorSettings()

    assert settings.base_url == DEFAULT_BASE_URL
    assert settings.timeout == DEFAULT_TIMEOUT
    assert settings.user_agent == DEFAULT_USER_AGENT
    assert settings.output_dir == 'extracted'


def test_from_env(monkeypatch):
    monkeypatch.setenv('CRICMIRROR_BASE_URL', 'https://mirror.example.com/')
    monkeypatch.setenv('CRICMIRROR_TIMEOUT', '12.5')
    monkeypatch.setenv('CRICMIRROR_OUTPUT_DIR', 'snapshots')

    settings = MirrorSettings.from_env()

    assert settings.base_url == 'https://mirror.example.com'
    assert settings.timeout == 12.5
    assert settings.output_dir == 'snapshots'
    assert settings.user_agent == DEFAULT_USER_AGENT


def test_from_env_ignores_empty_values(monkeypatch):
    monkeypatch.setenv('CRICMIRROR_BASE_URL', '')

    assert MirrorSettings.from_env().base_url == DEFAULT_BASE_URL


def test_timeout_must_be_positive():
    with pytest.raises(ValidationError):
        MirrorSettings(timeout=0)
