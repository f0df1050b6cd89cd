"""Shared fixtures for the test suite."""

from __future__ import annotations

from typing import Any

import pytest

from ridekick_research.context import ToolContext
from ridekick_research.records import ResearchRecord


class FakeQuery:
    """Stand-in for the host's query capability that records its calls."""

    def __init__(self, rows: list[dict[str, Any]] | None = None, error: Exception | None = None):
        self.rows = rows or []
        self.error = error
        self.calls: list[dict[str, Any]] = []

    async def __call__(self, options: dict[str, Any]) -> list[dict[str, Any]]:
        self.calls.append(options)
        if self.error is not None:
            raise self.error
        return self.rows


@pytest.fixture
def make_record():
    """Factory for research records with sensible defaults."""

    counter = {"n": 0}

    def _make(
        title: str | None = None,
        summary: str = "",
        content: str = "",
        participants: tuple[str, ...] | list[str] = (),
    ) -> ResearchRecord:
        counter["n"] += 1
        return ResearchRecord(
            id=f"rec-{counter['n']}",
            title=title or f"Interview {counter['n']}",
            summary=summary,
            content=content,
            participants=tuple(participants),
            projects=("ridekick",),
        )

    return _make


@pytest.fixture
def fake_query_cls():
    return FakeQuery


@pytest.fixture
def no_env(monkeypatch):
    """Remove all external service variables from the environment."""

    for name in (
        "SUPABASE_URL",
        "SUPABASE_ANON_KEY",
        "LLM_OPENAI_API_KEY",
        "LLM_OPENAI_MODEL",
        "LLM_OPENAI_BASE_URL",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def host_context():
    """Build a host-mode context backed by a FakeQuery."""

    def _build(rows: list[dict[str, Any]] | None = None, **kwargs: Any) -> tuple[ToolContext, FakeQuery]:
        query = FakeQuery(rows)
        return ToolContext(mode="mcp", query=query, **kwargs), query

    return _build
