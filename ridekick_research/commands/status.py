# Ridekick Research
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""
Status command.

Prints the extension version, its tools, and which external services are
configured. Secrets are never printed.
"""

import argparse
from dataclasses import dataclass

from ridekick_research.config import Settings, datastore_configured, llm_configured
from ridekick_research.extension import extension


@dataclass(frozen=True)
class StatusCommand:
    """`status` subcommand."""

    name: str = "status"
    help: str = "Show extension status and configuration"
    requires_config: bool = True

    def add_arguments(self, parser: argparse.ArgumentParser) -> None:
        _ = parser

    def run(self, args: argparse.Namespace, settings: Settings | None) -> None:
        _ = args
        settings = settings or Settings()

        print(f"{extension.name} {extension.version}")
        print(f"Default project: {settings.default_project}")
        print(f"Record limit: {settings.record_limit}")
        print(f"Data store (SUPABASE_URL/SUPABASE_ANON_KEY): {_state(datastore_configured())}")
        print(f"AI analysis (LLM_OPENAI_API_KEY): {_state(llm_configured())}")
        print("Tools:")
        for definition in extension.definitions():
            print(f"  - {definition.name}")


def _state(ok: bool) -> str:
    return "configured" if ok else "not configured"
