# Ridekick Research
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""
AI analysis tool.

Forwards a research question together with the project's records to an
OpenAI-compatible completion endpoint. The answer can optionally be saved as a
document, which the host keeps pending until a human approves it.

API failures are returned as a structured error payload instead of being
raised, so the host does not need to special-case this tool.
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Mapping

import yaml

from ridekick_research.ai_llm import LLMError, ai_conversation, llm_model
from ridekick_research.config import llm_configured
from ridekick_research.context import ToolContext
from ridekick_research.records import ResearchRecord
from ridekick_research.sources import fetch_records
from ridekick_research.tools.base import (
    optional_bool,
    optional_int,
    optional_str,
    project_property,
    required_str,
)


logger = logging.getLogger(__name__)

CONTENT_EXCERPT_LENGTH = 1500


@dataclass(frozen=True)
class AIAnalysisTool:
    """
    `ridekick_ai_analysis` tool.

    Requires `LLM_OPENAI_API_KEY`. Without it the tool answers with an error
    payload and fetches nothing.
    """

    name: str = "ridekick_ai_analysis"
    description: str = (
        "Ask an AI model a question about Ridekick user research. The model answers based on "
        "the interview records and cites its sources. Optionally saves the answer as a document "
        "pending approval."
    )

    def input_schema(self) -> dict[str, Any]:
        return {
            "type": "object",
            "properties": {
                "question": {
                    "type": "string",
                    "description": 'The question to answer (e.g., "Why do users distrust dealers?")',
                },
                "project": project_property(),
                "max_sources": {
                    "type": "number",
                    "description": "Maximum number of records passed to the model (default: 30)",
                },
                "save_as_document": {
                    "type": "boolean",
                    "description": "Propose the answer as a new document (requires approval)",
                    "default": False,
                },
            },
            "required": ["question"],
        }

    async def run(self, args: Mapping[str, Any], context: ToolContext) -> dict[str, Any]:
        """
        Answer a research question with the LLM.

        Args:
            args:
                `question`, `project`, `max_sources`, `save_as_document`.
            context:
                Tool execution context.

        Returns:
            `status: ok` with the analysis, or `status: error` with `message`
            and `details`.

        Raises:
            ToolInputError:
                If the question is missing.
        """

        question = required_str(args, "question")
        project = optional_str(args, "project") or context.settings.default_project
        max_sources = optional_int(args, "max_sources", context.settings.max_ai_sources)
        save = optional_bool(args, "save_as_document")

        if not llm_configured():
            return {
                "status": "error",
                "message": "AI analysis is unavailable: LLM_OPENAI_API_KEY is not set",
                "details": None,
            }

        records = (await fetch_records(project, context))[:max_sources]

        try:
            answer = await ai_conversation(
                [
                    {"role": "system", "content": self._build_system_prompt()},
                    {"role": "user", "content": self._build_user_message(question, project, records)},
                ]
            )
        except LLMError as error:
            logger.warning("AI analysis failed: %s", error)
            return {
                "status": "error",
                "message": str(error),
                "details": error.details,
            }

        result: dict[str, Any] = {
            "status": "ok",
            "question": question,
            "project": project,
            "model": llm_model(),
            "sources_analyzed": len(records),
            "analysis": answer,
        }

        if save:
            result["document"] = await self._propose_document(question, project, answer, records, context)

        return result

    def _build_system_prompt(self) -> str:
        system_parts = [
            "You are a user research analyst for a car-buying product.",
            "Answer the question using only the interview records provided.",
            "Cite the record titles that support each finding.",
            "Do not invent evidence. If the records do not answer the question, say so.",
        ]
        return " ".join(system_parts)

    def _build_user_message(self, question: str, project: str, records: list[ResearchRecord]) -> str:
        """
        Build the user message.

        The records are serialized to YAML for readability.
        """

        payload = {
            "question": question,
            "project": project,
            "records": [
                {
                    "title": r.title,
                    "participants": list(r.participants),
                    "summary": r.summary,
                    "content": r.content[:CONTENT_EXCERPT_LENGTH],
                }
                for r in records
            ],
        }
        return yaml.safe_dump(payload, sort_keys=False, allow_unicode=True)

    async def _propose_document(
        self,
        question: str,
        project: str,
        answer: str,
        records: list[ResearchRecord],
        context: ToolContext,
    ) -> dict[str, Any]:
        """
        Submit the answer as a document proposal.

        Returns:
            Proposal status. Missing host support is reported, not raised.
        """

        if context.propose is None:
            return {
                "status": "unavailable",
                "message": "Saving documents requires the host's propose capability",
            }

        change = {
            "type": "create_document",
            "title": f"AI analysis: {question}",
            "content": self._document_markdown(question, project, answer, records),
            "project": project,
            "reason": "Generated by ridekick_ai_analysis",
        }

        try:
            proposal = await context.propose(change)
        except Exception as exc:  # noqa: BLE001
            logger.warning("Document proposal failed: %s", exc)
            return {"status": "error", "message": f"Document proposal failed: {exc}"}

        return {"proposal_id": proposal.get("id"), "status": "pending_approval"}

    def _document_markdown(
        self,
        question: str,
        project: str,
        answer: str,
        records: list[ResearchRecord],
    ) -> str:
        lines = [
            f"# {question}",
            "",
            f"Project: {project}  ",
            f"Generated: {datetime.now(timezone.utc).isoformat()}  ",
            f"Model: {llm_model()}",
            "",
            "## Analysis",
            "",
            answer.strip(),
            "",
            "## Sources",
            "",
        ]
        lines.extend(f"- {r.title}" for r in records)
        return "\n".join(lines) + "\n"
