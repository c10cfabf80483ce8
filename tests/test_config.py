import yaml
import pytest

from suitelog.config import AppConfig, load_config


def test_defaults_without_path():
    cfg = load_config()
    assert cfg.channel == "suitelog"
    assert cfg.level == "NOTICE"
    assert cfg.timezone == "UTC"
    assert cfg.file is None and cfg.console_filter is None


def test_load_yaml(tmp_path):
    cfg_path = tmp_path / "suitelog.yml"
    with open(cfg_path, "w", encoding="utf-8") as fh:
        yaml.safe_dump({
            "channel": "PHPUnit",
            "level": "info",
            "timezone": "Europe/Paris",
            "file": {"path": str(tmp_path / "x.log"), "rotate": False},
            "console_filter": {"level": "notice"},
        }, fh)
    cfg = load_config(str(cfg_path))
    assert cfg.channel == "PHPUnit"
    assert cfg.level == "INFO"
    assert cfg.file.rotate is False
    assert cfg.file.backup_count == 7
    assert cfg.console_filter.level == "NOTICE"
    assert cfg.console_filter.pattern == "^Results"


def test_empty_yaml_gives_defaults(tmp_path):
    cfg_path = tmp_path / "empty.yml"
    cfg_path.write_text("")
    assert load_config(str(cfg_path)) == AppConfig()


def test_invalid_level(tmp_path):
    cfg_path = tmp_path / "bad.yml"
    with open(cfg_path, "w", encoding="utf-8") as fh:
        yaml.safe_dump({"level": "loud"}, fh)
    with pytest.raises(ValueError):
        load_config(str(cfg_path))


def test_invalid_timezone():
    with pytest.raises(ValueError):
        AppConfig(timezone="Mars/Olympus_Mons")


def test_negative_backup_count():
    with pytest.raises(ValueError):
        AppConfig.model_validate({"file": {"path": "x.log", "backup_count": -1}})
