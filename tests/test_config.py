from pathlib import Path

import pytest

from feedback_report.config import (
    CONFIG_ENV_VAR,
    CONFIG_FILENAME,
    ConfigError,
    ReportConfig,
    find_config_path,
    load_config,
)


def _write(path: Path, text: str) -> Path:
    path.write_text(text, encoding="utf-8")
    return path


def test_load_config_without_file_returns_defaults():
    cfg = load_config(None)
    assert cfg == ReportConfig()
    assert cfg.encoding == "utf-8"
    assert cfg.delimiter == ","
    assert cfg.skip_blank_rows is True
    assert cfg.ragged_rows == "pad"
    assert cfg.empty_input == "error"


def test_load_config_reads_values(tmp_path):
    path = _write(
        tmp_path / "cfg.yaml",
        "encoding: latin-1\n"
        "delimiter: ';'\n"
        "skip_blank_rows: false\n"
        "ragged_rows: Reject\n"
        "empty_input: empty\n",
    )
    cfg = load_config(path)
    assert cfg.config_path == path.resolve()
    assert cfg.encoding == "latin-1"
    assert cfg.delimiter == ";"
    assert cfg.skip_blank_rows is False
    assert cfg.ragged_rows == "reject"
    assert cfg.empty_input == "empty"


def test_load_config_empty_file_uses_defaults(tmp_path):
    cfg = load_config(_write(tmp_path / "cfg.yaml", ""))
    assert cfg.ragged_rows == "pad"
    assert cfg.empty_input == "error"


def test_load_config_missing_file(tmp_path):
    with pytest.raises(ConfigError, match="not found"):
        load_config(tmp_path / "nope.yaml")


@pytest.mark.parametrize(
    "text, message",
    [
        ("- a\n- b\n", "must contain a mapping"),
        ("ragged_rows: sometimes\n", "ragged_rows"),
        ("empty_input: 3\n", "empty_input"),
        ("delimiter: ';;'\n", "single character"),
        ("skip_blank_rows: 'yes'\n", "boolean"),
        ("encoding: no-such-codec\n", "Unknown encoding"),
        ("title: My report\n", "unknown key"),
        ("ragged_rows: [pad\n", "Failed to read YAML"),
    ],
)
def test_load_config_rejects_invalid_values(tmp_path, text, message):
    path = _write(tmp_path / "cfg.yaml", text)
    with pytest.raises(ConfigError, match=message):
        load_config(path)


def test_find_config_path_prefers_cli(tmp_path, monkeypatch):
    monkeypatch.setenv(CONFIG_ENV_VAR, str(tmp_path / "env.yaml"))
    assert find_config_path("cli.yaml") == Path("cli.yaml")


def test_find_config_path_uses_environment(tmp_path, monkeypatch):
    monkeypatch.setenv(CONFIG_ENV_VAR, str(tmp_path / "env.yaml"))
    assert find_config_path(None) == tmp_path / "env.yaml"


def test_find_config_path_uses_file_in_cwd(tmp_path, monkeypatch):
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    monkeypatch.chdir(tmp_path)
    assert find_config_path(None) is None

    _write(tmp_path / CONFIG_FILENAME, "ragged_rows: truncate\n")
    assert find_config_path(None) == tmp_path / CONFIG_FILENAME
