from unittest.mock import MagicMock

import pytest

from eshook.config import build_hook, load_config
from eshook.config.settings import BackendConfig, HookConfig
from eshook.levels import Level
from eshook.utils.errors import ConfigError


ENV_KEYS = [
    "ESHOOK_URL", "ESHOOK_USERNAME", "ESHOOK_PASSWORD", "ESHOOK_VERIFY_CERTS",
    "ESHOOK_TIMEOUT_SECONDS", "ESHOOK_TYPED", "ESHOOK_HOST", "ESHOOK_LEVEL",
    "ESHOOK_INDEX", "ESHOOK_ROTATION", "ESHOOK_KEEP_INDICES",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


def test_defaults(monkeypatch):
    monkeypatch.setenv("ESHOOK_HOST", "web-1")

    config = load_config()

    assert config.host == "web-1"
    assert config.level is Level.DEBUG
    assert config.index == "logs"
    assert config.rotation == "none"
    assert config.backend.urls == ("http://localhost:9200",)
    assert config.backend.verify_certs is True


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("ESHOOK_URL", "https://a:9200, https://b:9200")
    monkeypatch.setenv("ESHOOK_USERNAME", "admin")
    monkeypatch.setenv("ESHOOK_PASSWORD", "s3cret")
    monkeypatch.setenv("ESHOOK_LEVEL", "warn")
    monkeypatch.setenv("ESHOOK_ROTATION", "Daily")
    monkeypatch.setenv("ESHOOK_KEEP_INDICES", "7")

    config = load_config()

    assert config.backend.urls == ("https://a:9200", "https://b:9200")
    assert config.backend.username == "admin"
    assert config.level is Level.WARNING
    assert config.rotation == "daily"
    assert config.keep_indices == 7


def test_env_file(tmp_path, monkeypatch):
    env_file = tmp_path / ".env"
    env_file.write_text("ESHOOK_INDEX=app-logs\nESHOOK_HOST=from-file\n")
    monkeypatch.setenv("ESHOOK_INDEX", "logs")
    monkeypatch.setenv("ESHOOK_HOST", "from-env")

    config = load_config(str(env_file))

    assert config.index == "app-logs"
    assert config.host == "from-file"


def test_missing_env_file():
    with pytest.raises(ConfigError):
        load_config("/nonexistent/.env")


@pytest.mark.parametrize("key, value", [
    ("ESHOOK_LEVEL", "verbose"),
    ("ESHOOK_ROTATION", "weekly"),
    ("ESHOOK_KEEP_INDICES", "many"),
    ("ESHOOK_TIMEOUT_SECONDS", "0"),
    ("ESHOOK_URL", "localhost:9200"),
    ("ESHOOK_INDEX", "Logs"),
    ("ESHOOK_USERNAME", "admin"),
])
def test_invalid_values(monkeypatch, key, value):
    monkeypatch.setenv(key, value)

    with pytest.raises(ConfigError):
        load_config()


def test_build_hook_with_rotation_and_cleanup():
    client = MagicMock()
    client.indices.exists.return_value = True
    config = HookConfig(
        host="h1",
        backend=BackendConfig(),
        level=Level.INFO,
        index="app",
        rotation="daily",
        keep_indices=2,
    )

    hook = build_hook(config, client=client)

    index = client.indices.exists.call_args.kwargs["index"]
    assert index.startswith("app-")
    assert hook.provisioned == {index: True}
    assert hook.levels()[-1] is Level.INFO
