# Ridekick Research
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""
Pain point tool.

Aggregates car-buying pain points with frequency counts and sample quotes.
"""

from dataclasses import dataclass
from typing import Any, Mapping

from ridekick_research.analysis.pain_points import DEFAULT_LIMIT, classify_pain_points
from ridekick_research.context import ToolContext
from ridekick_research.sources import fetch_records
from ridekick_research.tools.base import optional_int, optional_str, project_property


@dataclass(frozen=True)
class PainPointsTool:
    """`ridekick_pain_points` tool."""

    name: str = "ridekick_pain_points"
    description: str = (
        "Aggregate pain points from Ridekick user research with frequency counts. Identifies "
        "common themes and frustrations."
    )

    def input_schema(self) -> dict[str, Any]:
        return {
            "type": "object",
            "properties": {
                "project": project_property(),
                "limit": {
                    "type": "number",
                    "description": "Maximum pain points to return (default: 10)",
                    "default": DEFAULT_LIMIT,
                },
            },
        }

    async def run(self, args: Mapping[str, Any], context: ToolContext) -> dict[str, Any]:
        project = optional_str(args, "project")
        limit = optional_int(args, "limit", DEFAULT_LIMIT)

        records = await fetch_records(project, context)
        return classify_pain_points(records, limit).to_dict()
