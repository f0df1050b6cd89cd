"""
CLI entrypoint for the Ridekick research extension.

This module builds a git-style subcommand CLI (via argparse) and dispatches
execution to command modules.
"""

import argparse
import logging
import sys
from dotenv import load_dotenv

from ridekick_research.commands.base import Command
from ridekick_research.commands.guide import GuideCommand
from ridekick_research.commands.run import RunCommand
from ridekick_research.commands.status import StatusCommand
from ridekick_research.config import ConfigError, find_config_path, load_settings
from ridekick_research.tools.base import ToolInputError, ToolNotFoundError


def _command_repository() -> dict[str, Command]:
    """
    Construct the command registry.

    Returns:
        A mapping from subcommand name to a command instance.
    """
    commands: list[Command] = [
        StatusCommand(),
        GuideCommand(),
        RunCommand(),
    ]
    return {c.name: c for c in commands}


def build_parser() -> argparse.ArgumentParser:
    """
    Build the top-level argument parser.

    Returns:
        The configured ArgumentParser instance.
    """
    parser = argparse.ArgumentParser(
        prog="ridekick-research",
        description="Query Ridekick user research: speakers, hypotheses and pain points.",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging",
    )

    commands = _command_repository()

    config_parent = argparse.ArgumentParser(add_help=False)
    config_parent.add_argument(
        "--config",
        "-c",
        help="Path to ridekick.yaml. If omitted, ./ridekick.yaml is used when present.",
    )

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND", required=True)

    for name, command in commands.items():
        parents = [config_parent] if command.requires_config else []
        sub = subparsers.add_parser(name, help=command.help, parents=parents)
        command.add_arguments(sub)
        sub.set_defaults(_command_name=name)

    return parser


def main(argv: list[str] | None = None) -> int:
    """
    Run the CLI.

    Args:
        argv:
            Optional argument list (without program name). If omitted, argparse
            reads from sys.argv.

    Returns:
        Process exit code. `0` on success, `2` on configuration/usage errors.
    """
    load_dotenv()

    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        commands = _command_repository()
        command_name = getattr(args, "_command_name", None)
        if not command_name or command_name not in commands:
            parser.error("Unknown or missing command")
            return 2

        command = commands[command_name]

        settings = None
        if command.requires_config:
            cli_path = getattr(args, "config", None)
            settings = load_settings(find_config_path(cli_path), required=bool(cli_path))

        command.run(args, settings)
        return 0
    except ConfigError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    except (ToolInputError, ToolNotFoundError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
