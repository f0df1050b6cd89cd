# Ridekick Research
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""
Tool runner command.

Calls one of the extension's tools in CLI mode (records are read from the data
store REST API) and prints the result as YAML.
"""

import argparse
import asyncio
from dataclasses import dataclass
from typing import Any

import yaml

from ridekick_research.config import Settings
from ridekick_research.context import ToolContext
from ridekick_research.extension import extension
from ridekick_research.tools.base import ToolInputError


@dataclass(frozen=True)
class RunCommand:
    """`run` subcommand."""

    name: str = "run"
    help: str = "Run a research tool and print the result as YAML"
    requires_config: bool = True

    def add_arguments(self, parser: argparse.ArgumentParser) -> None:
        """
        Register CLI arguments for the `run` subcommand.

        Args:
            parser:
                Subparser for this command.

        Returns:
            None
        """

        parser.add_argument(
            "tool",
            help="Tool name, e.g. ridekick_pain_points",
        )
        parser.add_argument(
            "--arg",
            "-a",
            action="append",
            default=[],
            metavar="KEY=VALUE",
            help="Tool argument (may be repeated)",
        )

    def run(self, args: argparse.Namespace, settings: Settings | None) -> None:
        """
        Execute the tool.

        Raises:
            ToolInputError:
                If an argument is not in KEY=VALUE form or the tool rejects it.
            ToolNotFoundError:
                If the tool does not exist.
            ConfigError:
                If the data store credentials are missing.
        """

        tool_args = parse_tool_args(args.arg)
        context = ToolContext(mode="cli", settings=settings or Settings())

        result = asyncio.run(extension.call_tool(args.tool, tool_args, context))
        print(yaml.safe_dump(result, sort_keys=False, allow_unicode=True), end="")


def parse_tool_args(pairs: list[str]) -> dict[str, Any]:
    """
    Turn `KEY=VALUE` strings into a tool argument mapping.

    Values stay strings; the tools convert numbers and flags themselves.
    """

    out: dict[str, Any] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key.strip():
            raise ToolInputError(f"Invalid tool argument (expected KEY=VALUE): {pair}")
        out[key.strip()] = value
    return out
