import json

import pytest

from gutenblocks.config import ConverterConfig, config_from_dict, load_config


def test_defaults():
    cfg = load_config()
    assert cfg == ConverterConfig()
    assert cfg.block_namespace == "core"
    assert cfg.client_ids is False


def test_reads_converter_section(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"converter": {"block_namespace": "acme", "json_indent": 4}}), encoding="utf-8")
    cfg = load_config(path)
    assert cfg.block_namespace == "acme"
    assert cfg.json_indent == 4
    assert cfg.parser == "html.parser"


def test_environment_overrides_file(tmp_path, monkeypatch):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"converter": {"block_namespace": "acme"}}), encoding="utf-8")
    monkeypatch.setenv("GUTENBLOCKS_NAMESPACE", "other")
    monkeypatch.setenv("GUTENBLOCKS_CLIENT_IDS", "yes")
    monkeypatch.setenv("GUTENBLOCKS_JSON_INDENT", "0")
    cfg = load_config(path)
    assert cfg.block_namespace == "other"
    assert cfg.client_ids is True
    assert cfg.json_indent == 0


def test_unknown_setting_is_rejected():
    with pytest.raises(ValueError):
        config_from_dict({"namespace": "core"})


def test_missing_config_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "nope.json")
