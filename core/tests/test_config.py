from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from cobj_core.config import AppConfig, load_app_config


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch) -> None:
    for name in AppConfig.model_fields:
        monkeypatch.delenv(name.upper(), raising=False)


def test_load_app_config_defaults_when_unset() -> None:
    cfg = load_app_config(env_file=None)
    assert cfg.port == 3000
    assert cfg.bind_host == "127.0.0.1"
    assert cfg.hubspot_access_token is None
    assert cfg.objects_url == "https://api.hubapi.com/crm/v3/objects/p50294925_pets"


def test_load_app_config_reads_process_environment(monkeypatch) -> None:
    monkeypatch.setenv("HUBSPOT_ACCESS_TOKEN", "pat-na1-secret")
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("CUSTOM_OBJECT_TYPE", "p123_pets")

    cfg = load_app_config(env_file=None)
    assert cfg.hubspot_access_token == "pat-na1-secret"
    assert cfg.port == 8080
    assert cfg.portal_id == "123"


def test_load_app_config_reads_env_file(tmp_path: Path) -> None:
    env_file = tmp_path / ".env"
    env_file.write_text("HUBSPOT_ACCESS_TOKEN=from-file\nLOG_LEVEL=debug\n", encoding="utf-8")

    cfg = load_app_config(env_file=env_file)
    assert cfg.hubspot_access_token == "from-file"
    assert cfg.log_level == "DEBUG"


def test_explicit_values_override_environment(monkeypatch) -> None:
    monkeypatch.setenv("PORT", "8080")

    cfg = load_app_config({"PORT": "9090", "UNRELATED": "x"}, env_file=None)
    assert cfg.port == 9090


def test_base_url_trailing_slash_is_dropped() -> None:
    cfg = load_app_config({"HUBSPOT_API_BASE_URL": "http://127.0.0.1:9999/"}, env_file=None)
    assert cfg.objects_url == "http://127.0.0.1:9999/crm/v3/objects/p50294925_pets"


@pytest.mark.parametrize(
    "environ",
    [
        {"PORT": "not-an-int"},
        {"PORT": "70000"},
        {"CUSTOM_OBJECT_TYPE": "pets"},
        {"HUBSPOT_TIMEOUT_SECONDS": "0"},
    ],
)
def test_load_app_config_validation_error(environ: dict[str, str]) -> None:
    with pytest.raises(ValidationError):
        load_app_config(environ, env_file=None)


def test_config_is_immutable() -> None:
    cfg = load_app_config(env_file=None)
    with pytest.raises(ValidationError):
        cfg.port = 1234  # type: ignore[misc]
