# Feedback Report
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""YAML I/O helpers."""

from pathlib import Path
from typing import Any

import yaml


class ConfigError(RuntimeError):
    """
    Raised when the YAML configuration is missing, invalid, or cannot be parsed.
    """

    pass


def read_yaml_mapping(path: Path) -> dict[str, Any]:
    """Read a YAML file into a dictionary.

    An empty document is treated as an empty mapping.

    Args:
        path:
            YAML file path.

    Returns:
        Parsed YAML mapping.

    Raises:
        ConfigError:
            If the file cannot be read or does not contain a mapping.
    """

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except Exception as exc:  # noqa: BLE001
        raise ConfigError(f"Failed to read YAML file '{path}': {exc}") from exc

    if raw is None:
        return {}

    if not isinstance(raw, dict):
        raise ConfigError(f"YAML file must contain a mapping: {path}")

    return raw
