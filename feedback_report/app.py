from __future__ import annotations

"""
CLI entrypoint for the feedback report tool.

This module builds a git-style subcommand CLI (via argparse) and dispatches
execution to action modules.
"""

import argparse
import sys
from dotenv import find_dotenv, load_dotenv

from feedback_report.actions.base import Action
from feedback_report.actions.render import RenderAction
from feedback_report.actions.template import TemplateAction
from feedback_report.config import CONFIG_ENV_VAR, CONFIG_FILENAME, ConfigError, find_config_path, load_config
from feedback_report.errors import ReportError


def _action_repository() -> dict[str, Action]:
	"""
	Construct the action registry.

	Returns:
		A mapping from subcommand name to an action instance.
	"""
	actions: list[Action] = [
		TemplateAction(),
		RenderAction(),
	]
	return {a.name: a for a in actions}


def build_parser() -> argparse.ArgumentParser:
	"""
	Build the top-level argument parser.

	The parser uses subcommands (similar to `git`) where each action registers its
	own arguments.

	Returns:
		The configured ArgumentParser instance.
	"""
	parser = argparse.ArgumentParser(
		prog="feedback-report",
		description="Turn a CSV feedback export into a static HTML report.",
	)

	actions = _action_repository()

	config_parent = argparse.ArgumentParser(add_help=False)
	config_parent.add_argument(
		"--config",
		"-c",
		help=(
			f"Path to {CONFIG_FILENAME}. If omitted, ${CONFIG_ENV_VAR} or "
			f"./{CONFIG_FILENAME} is used when present, otherwise defaults apply."
		),
	)

	subparsers = parser.add_subparsers(dest="action", metavar="COMMAND", required=True)

	for name, action in actions.items():
		parents = [config_parent] if action.requires_config else []
		sub = subparsers.add_parser(name, help=action.help, parents=parents)
		action.add_arguments(sub)
		sub.set_defaults(_action_name=name)

	return parser


def main(argv: list[str] | None = None) -> int:
	"""
	Run the CLI.

	Args:
		argv:
			Optional argument list (without program name). If omitted, argparse
			reads from sys.argv.

	Returns:
		Process exit code. `0` on success, `1` if the input table cannot be
		rendered, `2` on configuration/usage errors. I/O errors are not
		handled here and end the process with a traceback.
	"""
	# Look for .env in the working directory, not next to this module.
	load_dotenv(find_dotenv(usecwd=True))

	parser = build_parser()
	args = parser.parse_args(argv)

	try:
		actions = _action_repository()
		action_name = getattr(args, "_action_name", None)
		if not action_name or action_name not in actions:
			parser.error("Unknown or missing command")
			return 2

		action = actions[action_name]

		config = None
		if action.requires_config:
			config_path = find_config_path(getattr(args, "config", None))
			config = load_config(config_path)

		action.run(args, config)
		return 0
	except ConfigError as exc:
		print(f"error: {exc}", file=sys.stderr)
		return 2
	except ReportError as exc:
		print(f"error: {exc}", file=sys.stderr)
		return 1


if __name__ == "__main__":
	raise SystemExit(main())
