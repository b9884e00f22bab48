from pathlib import Path

import pytest
import yaml

from base64fix import config as config_module
from base64fix.config import DEFAULT_CONFIG, AppConfig, dump_default_config, load_config
from base64fix.errors import ConfigError


@pytest.fixture
def isolated(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(config_module, "user_config_dir", lambda: tmp_path / "user")
    return tmp_path


def test_defaults_when_no_file(isolated: Path) -> None:
    loaded = load_config()
    assert loaded == DEFAULT_CONFIG
    assert loaded is not DEFAULT_CONFIG
    assert loaded.decode.alphabet == "std"
    assert loaded.logging.normalized_level() == "INFO"


def test_explicit_path(isolated: Path) -> None:
    target = isolated / "custom.yaml"
    target.write_text("decode:\n  alphabet: URL\nlogging:\n  level: debug\n", encoding="utf-8")
    loaded = load_config(target)
    assert loaded.decode.alphabet == "url"
    assert loaded.logging.normalized_level() == "DEBUG"


def test_cwd_config_is_found(isolated: Path) -> None:
    target = isolated / ".base64fix" / "config.yaml"
    target.parent.mkdir()
    target.write_text("decode:\n  alphabet: url\n", encoding="utf-8")
    assert load_config().decode.alphabet == "url"


def test_invalid_alphabet_rejected(isolated: Path) -> None:
    target = isolated / "bad.yaml"
    target.write_text("decode:\n  alphabet: hex\n", encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(target)


def test_dump_default_config_round_trips(isolated: Path) -> None:
    target = isolated / "nested" / "config.yaml"
    dump_default_config(target)
    data = yaml.safe_load(target.read_text(encoding="utf-8"))
    assert AppConfig.model_validate(data) == DEFAULT_CONFIG
