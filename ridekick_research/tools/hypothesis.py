# Ridekick Research
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""
Hypothesis testing tool.

Validates an assumption against the interview records and returns supporting
and contradicting evidence together with a verdict.
"""

from dataclasses import dataclass
from typing import Any, Mapping

from ridekick_research.analysis.hypothesis import evaluate_hypothesis
from ridekick_research.context import ToolContext
from ridekick_research.sources import fetch_records
from ridekick_research.tools.base import optional_str, project_property, required_str


@dataclass(frozen=True)
class HypothesisTool:
    """
    `ridekick_hypothesis` tool.

    The hypothesis argument is validated before any record is fetched.
    """

    name: str = "ridekick_hypothesis"
    description: str = (
        "Test a hypothesis against Ridekick user research evidence. Returns supporting and "
        "contradicting evidence."
    )

    def input_schema(self) -> dict[str, Any]:
        return {
            "type": "object",
            "properties": {
                "hypothesis": {
                    "type": "string",
                    "description": 'The hypothesis to test (e.g., "Users find car pricing confusing")',
                },
                "project": project_property(),
            },
            "required": ["hypothesis"],
        }

    async def run(self, args: Mapping[str, Any], context: ToolContext) -> dict[str, Any]:
        hypothesis = required_str(args, "hypothesis")
        project = optional_str(args, "project")

        records = await fetch_records(project, context)
        return evaluate_hypothesis(hypothesis, records).to_dict()
