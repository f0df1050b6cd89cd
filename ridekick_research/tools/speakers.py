# Ridekick Research
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""
Speaker profile tool.

Shows who said what across all interviews of a project.
"""

from dataclasses import dataclass
from typing import Any, Mapping

from ridekick_research.analysis.speakers import aggregate_speakers
from ridekick_research.context import ToolContext
from ridekick_research.sources import fetch_records
from ridekick_research.tools.base import optional_str, project_property


@dataclass(frozen=True)
class SpeakersTool:
    """
    `ridekick_speakers` tool.

    Aggregates appearances and theme keywords per interview participant.
    """

    name: str = "ridekick_speakers"
    description: str = (
        "Get speaker profiles from Ridekick user interviews. Shows who said what across all "
        "interviews, with key themes and notable quotes."
    )

    def input_schema(self) -> dict[str, Any]:
        return {
            "type": "object",
            "properties": {
                "speaker": {
                    "type": "string",
                    "description": "Filter to a specific speaker name (optional)",
                },
                "project": project_property(),
            },
        }

    async def run(self, args: Mapping[str, Any], context: ToolContext) -> dict[str, Any]:
        """
        Build speaker profiles.

        Args:
            args:
                `speaker` (optional name filter) and `project`.
            context:
                Tool execution context.

        Returns:
            `total_speakers` and `profiles`.
        """

        speaker = optional_str(args, "speaker")
        project = optional_str(args, "project")

        records = await fetch_records(project, context)
        return aggregate_speakers(records, speaker).to_dict()
