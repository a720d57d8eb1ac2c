# Feedback Report
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""
Report writer action.

The `render` subcommand reads a CSV feedback export and writes the HTML report.
Input and output paths are the last two positional arguments.
"""

import argparse
from dataclasses import dataclass
from pathlib import Path

from feedback_report.config import ReportConfig
from feedback_report.pipeline import build_report


@dataclass(frozen=True)
class RenderAction:
    """
    `render` subcommand.

    Overwrites the output file if it exists, like any build step would.
    """

    name: str = "render"
    help: str = "Render a CSV feedback export as an HTML report"
    requires_config: bool = True

    def add_arguments(self, parser: argparse.ArgumentParser) -> None:
        """
        Register CLI arguments for the `render` subcommand.

        Args:
            parser:
                Subparser for this command.

        Returns:
            None
        """

        parser.add_argument("input", help="CSV file with a header row")
        parser.add_argument("output", help="Destination HTML file")

    def run(self, args: argparse.Namespace, config: ReportConfig | None) -> None:
        """
        Execute the report generation.

        Args:
            args:
                Parsed args for the subcommand.
            config:
                Loaded configuration.

        Returns:
            None

        Raises:
            ReportError:
                If the input table cannot be parsed or rendered.
            OSError:
                If a file cannot be read or written.
        """

        if config is None:
            raise RuntimeError("RenderAction requires a config, but none was provided")

        input_path = Path(args.input)
        output_path = Path(args.output)

        if config.config_path is not None:
            print(f"Using config: {config.config_path}")
        print(f"Reading feedback table: {input_path}")

        result = build_report(input_path, output_path, config)

        print(f"Wrote HTML report: {result.output_path} ({result.row_count} row(s))")
