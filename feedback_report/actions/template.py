# Feedback Report
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""
Template configuration generator.

This action writes a ready-to-edit `feedback-report.yaml` file into the current
directory (or a user-specified path). All values in the template are the
defaults.
"""

import argparse
from dataclasses import dataclass
from pathlib import Path

from feedback_report.cli_io import is_interactive_tty, prompt_overwrite
from feedback_report.config import CONFIG_FILENAME, ConfigError, ReportConfig


@dataclass(frozen=True)
class TemplateAction:
    """
    `template` subcommand.

    This action does not load a YAML config because it produces one.
    """

    name: str = "template"
    help: str = "Write a template feedback-report.yaml config"
    requires_config: bool = False

    _TEMPLATE_YAML: str = "\n".join(
        [
            "# Text encoding of the CSV export.",
            "# A UTF-8 byte order mark is ignored.",
            "encoding: utf-8",
            "",
            "# Field delimiter (a single character).",
            'delimiter: ","',
            "",
            "# Ignore empty lines and lines holding only whitespace in the CSV file.",
            "skip_blank_rows: true",
            "",
            "# What to do when a row has more or fewer cells than the header row:",
            "#   pad:      fill missing cells with empty text, refuse surplus cells",
            "#   truncate: only render columns present in both header and row",
            "#   reject:   abort on the first mismatching row",
            "ragged_rows: pad",
            "",
            "# What to do when the CSV file contains no rows at all:",
            "#   error: abort without writing a report",
            "#   empty: write a report without entries",
            "empty_input: error",
            "",
        ]
    )

    def add_arguments(self, parser: argparse.ArgumentParser) -> None:
        """
        Register CLI arguments for the `template` subcommand.

        Args:
            parser:
                Subparser for this command.

        Returns:
            None
        """

        parser.add_argument(
            "path",
            nargs="?",
            default=CONFIG_FILENAME,
            help=f"Destination path for the template (default: ./{CONFIG_FILENAME})",
        )
        parser.add_argument(
            "-f",
            "--force",
            action="store_true",
            help="Allow overwriting an existing file",
        )

    def run(self, args: argparse.Namespace, config: ReportConfig | None) -> None:
        """
        Execute the template writer.

        Args:
            args:
                Parsed args for the subcommand.
            config:
                Unused for this action.

        Returns:
            None

        Raises:
            ConfigError:
                If the destination exists, `--force` is not set and the user
                cannot be asked.
        """

        _ = config
        dest = Path(args.path)

        if dest.exists() and not bool(args.force):
            if not is_interactive_tty():
                raise ConfigError(f"Refusing to overwrite existing file: {dest} (use --force)")
            if not prompt_overwrite(dest):
                print(f"Keeping existing file: {dest}")
                return

        dest.parent.mkdir(parents=True, exist_ok=True)
        dest.write_text(self._TEMPLATE_YAML, encoding="utf-8")
        print(f"Wrote template config to: {dest}")
