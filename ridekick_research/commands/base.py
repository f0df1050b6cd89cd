from __future__ import annotations

"""
Command protocol for the `ridekick-research` CLI.

`app._command_repository()` registers one instance per subcommand. The
`requires_config` flag decides whether the subcommand gets the `--config`
option and receives the parsed `ridekick.yaml` settings.
"""

import argparse
from typing import Protocol

from ridekick_research.config import Settings


class Command(Protocol):
    """A CLI subcommand (`status`, `help`, `run`)."""

    name: str
    help: str
    requires_config: bool

    def add_arguments(self, parser: argparse.ArgumentParser) -> None:
        """Add the subcommand's own options to its subparser."""

    def run(self, args: argparse.Namespace, settings: Settings | None) -> None:
        """
        Execute the subcommand.

        Args:
            args:
                Parsed arguments for this subcommand.
            settings:
                Settings from `ridekick.yaml` (or defaults), `None` unless
                `requires_config` is set.

        Raises:
            ConfigError:
                If the data store credentials are needed but missing.
            ToolInputError:
                If a tool argument given on the command line is invalid.
        """
