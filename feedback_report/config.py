# Feedback Report
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""
Configuration loading and validation.

This module handles reading `feedback-report.yaml`, validating its keys, and
falling back to defaults so that the pipeline can rely on a typed config
object. The configuration only covers how the input is read and how
irregular tables are treated. The HTML shell itself is fixed.
"""

import codecs
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from feedback_report.render import RAGGED_PAD, RAGGED_ROW_POLICIES
from feedback_report.yaml_io import ConfigError, read_yaml_mapping


CONFIG_FILENAME = "feedback-report.yaml"
CONFIG_ENV_VAR = "FEEDBACK_REPORT_CONFIG"

EMPTY_INPUT_ERROR = "error"
EMPTY_INPUT_EMPTY = "empty"
EMPTY_INPUT_POLICIES = (EMPTY_INPUT_ERROR, EMPTY_INPUT_EMPTY)

__all__ = [
    "CONFIG_ENV_VAR",
    "CONFIG_FILENAME",
    "ConfigError",
    "EMPTY_INPUT_EMPTY",
    "EMPTY_INPUT_ERROR",
    "ReportConfig",
    "find_config_path",
    "load_config",
]


@dataclass(frozen=True)
class ReportConfig:
    """
    Parsed configuration for a report run.

    Attributes:
        config_path:
            Path to the YAML file used for this run, or None if only defaults
            are in effect.
        encoding:
            Text encoding of the CSV input.
        delimiter:
            CSV field delimiter (a single character).
        skip_blank_rows:
            If True, completely empty lines in the input produce no row.
        ragged_rows:
            Policy for data rows whose cell count differs from the header
            count. One of `pad`, `truncate`, `reject`.
        empty_input:
            Policy for an input without any row. `error` aborts, `empty`
            writes a report without entries.
    """

    config_path: Path | None = None
    encoding: str = "utf-8"
    delimiter: str = ","
    skip_blank_rows: bool = True
    ragged_rows: str = RAGGED_PAD
    empty_input: str = EMPTY_INPUT_ERROR


def find_config_path(cli_path: str | None) -> Path | None:
    """
    Determine which YAML config file to use.

    Lookup order: the command line, the `FEEDBACK_REPORT_CONFIG` environment
    variable, then `./feedback-report.yaml` if it exists.

    Args:
        cli_path:
            Optional config path provided on the command line.

    Returns:
        The Path to load, or None when no config file applies.
    """

    if cli_path:
        return Path(cli_path)

    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path)

    default = Path.cwd() / CONFIG_FILENAME
    if default.is_file():
        return default

    return None


def load_config(path: Path | None) -> ReportConfig:
    """
    Load and validate a `feedback-report.yaml` configuration file.

    Args:
        path:
            Path to the YAML config file. If None, the defaults are returned.

    Returns:
        A validated ReportConfig instance.

    Raises:
        ConfigError:
            If the file is missing, cannot be parsed as YAML, or contains
            invalid values.
    """

    if path is None:
        return ReportConfig()

    if not path.exists():
        raise ConfigError(f"Config file not found: {path}")
    if not path.is_file():
        raise ConfigError(f"Config path is not a file: {path}")

    raw = read_yaml_mapping(path)

    known = {"encoding", "delimiter", "skip_blank_rows", "ragged_rows", "empty_input"}
    unknown = sorted(str(k) for k in raw if k not in known)
    if unknown:
        raise ConfigError(f"Config contains unknown key(s): {', '.join(unknown)}")

    return ReportConfig(
        config_path=path.resolve(),
        encoding=_parse_encoding(raw.get("encoding", ReportConfig.encoding)),
        delimiter=_parse_delimiter(raw.get("delimiter", ReportConfig.delimiter)),
        skip_blank_rows=_parse_bool(
            raw.get("skip_blank_rows", ReportConfig.skip_blank_rows), key="skip_blank_rows"
        ),
        ragged_rows=_parse_choice(
            raw.get("ragged_rows", ReportConfig.ragged_rows),
            key="ragged_rows",
            choices=RAGGED_ROW_POLICIES,
        ),
        empty_input=_parse_choice(
            raw.get("empty_input", ReportConfig.empty_input),
            key="empty_input",
            choices=EMPTY_INPUT_POLICIES,
        ),
    )


def _parse_encoding(value: Any) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ConfigError("'encoding' must be a non-empty string")

    try:
        codecs.lookup(value.strip())
    except LookupError as exc:
        raise ConfigError(f"Unknown encoding: {value}") from exc

    return value.strip()


def _parse_delimiter(value: Any) -> str:
    if not isinstance(value, str) or len(value) != 1:
        raise ConfigError("'delimiter' must be a single character")
    if value in {'"', "\r", "\n"}:
        raise ConfigError(f"'delimiter' cannot be {value!r}")

    return value


def _parse_bool(value: Any, *, key: str) -> bool:
    if not isinstance(value, bool):
        raise ConfigError(f"'{key}' must be a boolean")

    return value


def _parse_choice(value: Any, *, key: str, choices: tuple[str, ...]) -> str:
    """
    Validate an enumerated string option.

    Values are compared case-insensitively and returned in lower case.
    """

    if not isinstance(value, str) or not value.strip():
        raise ConfigError(f"'{key}' must be a non-empty string")

    normalized = value.strip().lower()
    if normalized not in choices:
        allowed = ", ".join(f"'{c}'" for c in choices)
        raise ConfigError(f"'{key}' must be one of {allowed}")

    return normalized
