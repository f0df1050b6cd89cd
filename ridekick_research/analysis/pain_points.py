# Ridekick Research
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""Pain point classification.

Each record is matched against ten fixed car-buying pain point categories.
A category counts at most once per record. For every match, one representative
sentence is kept as a sample quote (up to three per category).
"""

import re
from dataclasses import dataclass, field
from typing import Any, Iterable, Sequence

from ridekick_research.records import ResearchRecord


@dataclass(frozen=True)
class PainPointRule:
    pattern: re.Pattern[str]
    category: str
    keywords: tuple[str, ...]


PAIN_POINT_RULES: tuple[PainPointRule, ...] = (
    PainPointRule(
        re.compile(r"pric(e|ing|es)", re.IGNORECASE),
        "Pricing Confusion",
        ("price", "pricing", "cost", "expensive", "overpriced"),
    ),
    PainPointRule(
        re.compile(r"trust|honest|scam|shady", re.IGNORECASE),
        "Trust Issues",
        ("trust", "honest", "scam", "shady", "skeptical"),
    ),
    PainPointRule(
        re.compile(r"time|hours|long|slow", re.IGNORECASE),
        "Time Consuming",
        ("time", "hours", "long", "slow", "waiting"),
    ),
    PainPointRule(
        re.compile(r"negotiat", re.IGNORECASE),
        "Negotiation Stress",
        ("negotiate", "negotiation", "haggle", "bargain"),
    ),
    PainPointRule(
        re.compile(r"dealer|salesperson|sales", re.IGNORECASE),
        "Dealer Experience",
        ("dealer", "salesperson", "pushy", "pressure"),
    ),
    PainPointRule(
        re.compile(r"research|information|compare", re.IGNORECASE),
        "Research Burden",
        ("research", "information", "compare", "options"),
    ),
    PainPointRule(
        re.compile(r"confus|overwhelm|complicated", re.IGNORECASE),
        "Complexity",
        ("confusing", "overwhelming", "complicated", "complex"),
    ),
    PainPointRule(
        re.compile(r"financ|loan|credit|payment", re.IGNORECASE),
        "Financing",
        ("financing", "loan", "credit", "payment", "interest"),
    ),
    PainPointRule(
        re.compile(r"trade.?in|value", re.IGNORECASE),
        "Trade-in Value",
        ("trade-in", "value", "worth"),
    ),
    PainPointRule(
        re.compile(r"hidden|fee|surprise", re.IGNORECASE),
        "Hidden Costs",
        ("hidden", "fees", "surprise", "unexpected"),
    ),
)

NONE_IDENTIFIED = "None identified"
DEFAULT_LIMIT = 10
MAX_QUOTES = 3
MAX_SAMPLE_SOURCES = 3
MIN_QUOTE_LENGTH = 20
MAX_QUOTE_LENGTH = 200
MIN_RELIABLE_SOURCES = 5
COVERAGE_NOTE = "Limited data - need more user interviews for reliable pain point analysis"

_SENTENCE_SPLIT_RE = re.compile(r"[.!?]+")


@dataclass
class PainPointCategory:
    """
    Aggregated matches of one pain point category.

    Attributes:
        category:
            Category label.
        frequency:
            Number of records matching the category.
        sources:
            Distinct titles of matching records.
        quotes:
            Sample sentences (at most three).
    """

    category: str
    frequency: int = 0
    sources: list[str] = field(default_factory=list)
    quotes: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "category": self.category,
            "frequency": self.frequency,
            "sources_count": len(self.sources),
            "sample_sources": self.sources[:MAX_SAMPLE_SOURCES],
            "sample_quotes": list(self.quotes),
        }


@dataclass(frozen=True)
class PainPointSummary:
    total_sources_analyzed: int
    pain_points: list[PainPointCategory]

    @property
    def top_pain_point(self) -> str:
        return self.pain_points[0].category if self.pain_points else NONE_IDENTIFIED

    @property
    def coverage_note(self) -> str | None:
        return COVERAGE_NOTE if self.total_sources_analyzed < MIN_RELIABLE_SOURCES else None

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {
            "total_sources_analyzed": self.total_sources_analyzed,
            "pain_points": [p.to_dict() for p in self.pain_points],
            "top_pain_point": self.top_pain_point,
        }
        if self.coverage_note is not None:
            out["coverage_note"] = self.coverage_note
        return out


def extract_quote(text: str, keywords: Sequence[str]) -> str | None:
    """
    Find a sample quote for a category.

    Args:
        text:
            Original-case record text.
        keywords:
            Category keywords (lowercase).

    Returns:
        The first sentence mentioning a keyword whose untrimmed length lies
        strictly between 20 and 200 characters (trimmed), or None.
    """

    for sentence in _SENTENCE_SPLIT_RE.split(text):
        lowered = sentence.lower()
        if not any(k in lowered for k in keywords):
            continue
        if MIN_QUOTE_LENGTH < len(sentence) < MAX_QUOTE_LENGTH:
            return sentence.strip()

    return None


def classify_pain_points(records: Iterable[ResearchRecord], limit: int = DEFAULT_LIMIT) -> PainPointSummary:
    """
    Count pain point categories across records.

    Args:
        records:
            Records to classify.
        limit:
            Maximum number of categories returned.

    Returns:
        A PainPointSummary with categories sorted by descending frequency.
    """

    records = list(records)
    by_category: dict[str, PainPointCategory] = {}

    for record in records:
        text = record.text

        for rule in PAIN_POINT_RULES:
            if not rule.pattern.search(text):
                continue

            entry = by_category.get(rule.category)
            if entry is None:
                entry = PainPointCategory(category=rule.category)
                by_category[rule.category] = entry

            entry.frequency += 1
            if record.title not in entry.sources:
                entry.sources.append(record.title)

            if len(entry.quotes) < MAX_QUOTES:
                quote = extract_quote(text, rule.keywords)
                if quote is not None:
                    entry.quotes.append(quote)

    ranked = sorted(by_category.values(), key=lambda p: p.frequency, reverse=True)

    return PainPointSummary(
        total_sources_analyzed=len(records),
        pain_points=ranked[:limit],
    )
