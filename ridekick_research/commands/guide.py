from __future__ import annotations

"""Static usage guide for the research tools."""

import argparse
from dataclasses import dataclass

from ridekick_research.config import Settings


@dataclass(frozen=True)
class GuideCommand:
    """
    `help` subcommand.

    Prints how the tools are meant to be used. Does not need any configuration.
    """

    name: str = "help"
    help: str = "Show usage help for the research tools"
    requires_config: bool = False

    _GUIDE: str = "\n".join(
        [
            "Ridekick research tools",
            "",
            "  ridekick_speakers     Speaker profiles across all interviews.",
            "                        Arguments: speaker (optional filter), project",
            "",
            "  ridekick_hypothesis   Test a hypothesis against interview evidence.",
            "                        Arguments: hypothesis (required), project",
            '                        Example: hypothesis="Users find car pricing confusing"',
            "",
            "  ridekick_pain_points  Pain points ranked by frequency, with sample quotes.",
            "                        Arguments: project, limit (default: 10)",
            "",
            "  ridekick_ai_analysis  Ask an AI model about the research (needs LLM_OPENAI_API_KEY).",
            "                        Arguments: question (required), project, max_sources,",
            "                        save_as_document",
            "",
            "Run a tool from the command line:",
            "",
            "  ridekick-research run ridekick_pain_points --arg limit=5",
            "",
            "Outside the host, records are read from the data store REST API",
            "(SUPABASE_URL and SUPABASE_ANON_KEY must be set).",
        ]
    )

    def add_arguments(self, parser: argparse.ArgumentParser) -> None:
        _ = parser

    def run(self, args: argparse.Namespace, settings: Settings | None) -> None:
        _ = args, settings
        print(self._GUIDE)
