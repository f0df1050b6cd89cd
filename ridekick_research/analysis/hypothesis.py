# Ridekick Research
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""Hypothesis evaluation.

A hypothesis is checked against the records with a deliberately simple
heuristic:

1. Salient keywords are taken from the hypothesis text.
2. Every record mentioning at least one keyword gets a sentiment vote from two
   fixed word lists.
3. Records with more negative than positive words count as supporting, records
   with more positive words as contradicting.
4. A verdict and confidence level are derived from the two counts.

Negative sentiment is always treated as support. This only makes sense for
hypotheses that describe a problem (which is what the tool is used for), so
results for positively phrased hypotheses are unreliable.
"""

from dataclasses import dataclass, field
from typing import Any, Iterable

from ridekick_research.records import ResearchRecord


STOP_WORDS: frozenset[str] = frozenset(
    {"users", "find", "the", "a", "an", "is", "are", "that", "this", "to", "for", "of", "in", "on", "with"}
)

POSITIVE_WORDS: tuple[str, ...] = ("love", "great", "easy", "helpful", "good", "like", "enjoy", "simple")

NEGATIVE_WORDS: tuple[str, ...] = (
    "hate",
    "confusing",
    "hard",
    "difficult",
    "frustrating",
    "stress",
    "annoying",
    "pain",
    "problem",
)

SUPPORTED = "SUPPORTED"
CONTRADICTED = "CONTRADICTED"
MIXED = "MIXED"
INSUFFICIENT_EVIDENCE = "INSUFFICIENT_EVIDENCE"

HIGH = "HIGH"
MEDIUM = "MEDIUM"
LOW = "LOW"

MIN_EVIDENCE = 3
HIGH_CONFIDENCE_EVIDENCE = 5
MAX_EVIDENCE_ITEMS = 5
SNIPPET_LENGTH = 200

RECOMMENDATIONS: dict[str, str] = {
    INSUFFICIENT_EVIDENCE: "Need more user interviews to validate this hypothesis",
    MIXED: "Consider segmenting users - hypothesis may be true for some segments",
}


@dataclass(frozen=True)
class Evidence:
    source: str
    evidence: str

    def to_dict(self) -> dict[str, str]:
        return {"source": self.source, "evidence": self.evidence}


@dataclass(frozen=True)
class HypothesisVerdict:
    """
    Outcome of a hypothesis evaluation.

    Attributes:
        hypothesis:
            The evaluated hypothesis text.
        verdict:
            One of SUPPORTED, CONTRADICTED, MIXED, INSUFFICIENT_EVIDENCE.
        confidence:
            One of HIGH, MEDIUM, LOW.
        supporting:
            Supporting evidence (at most five entries).
        contradicting:
            Contradicting evidence (at most five entries).
        neutral_mentions:
            Records that matched several keywords without a sentiment lean.
        recommendation:
            Advisory text for inconclusive verdicts.
    """

    hypothesis: str
    verdict: str
    confidence: str
    supporting: list[Evidence] = field(default_factory=list)
    contradicting: list[Evidence] = field(default_factory=list)
    neutral_mentions: int = 0
    recommendation: str | None = None

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {
            "hypothesis": self.hypothesis,
            "verdict": self.verdict,
            "confidence": self.confidence,
            "supporting": [e.to_dict() for e in self.supporting],
            "contradicting": [e.to_dict() for e in self.contradicting],
            "neutral_mentions": self.neutral_mentions,
        }
        if self.recommendation is not None:
            out["recommendation"] = self.recommendation
        return out


def extract_keywords(hypothesis: str) -> list[str]:
    """Return lowercase tokens longer than three characters that are not stop words."""

    return [w for w in hypothesis.lower().split() if len(w) > 3 and w not in STOP_WORDS]


def derive_verdict(supporting: int, contradicting: int) -> tuple[str, str]:
    """
    Map evidence counts to a (verdict, confidence) pair.

    Args:
        supporting:
            Number of supporting records (untruncated).
        contradicting:
            Number of contradicting records (untruncated).

    Returns:
        Verdict and confidence labels.
    """

    if supporting + contradicting < MIN_EVIDENCE:
        return INSUFFICIENT_EVIDENCE, LOW

    if supporting > contradicting * 2:
        return SUPPORTED, HIGH if supporting >= HIGH_CONFIDENCE_EVIDENCE else MEDIUM

    if contradicting > supporting * 2:
        return CONTRADICTED, HIGH if contradicting >= HIGH_CONFIDENCE_EVIDENCE else MEDIUM

    return MIXED, MEDIUM


def evaluate_hypothesis(hypothesis: str, records: Iterable[ResearchRecord]) -> HypothesisVerdict:
    """
    Evaluate a hypothesis against research records.

    Args:
        hypothesis:
            Free-text hypothesis, e.g. "Users find car pricing confusing".
        records:
            Records to scan.

    Returns:
        The HypothesisVerdict.

    Raises:
        ValueError:
            If the hypothesis is empty.
    """

    if not hypothesis:
        raise ValueError("hypothesis is required")

    keywords = extract_keywords(hypothesis)

    supporting: list[Evidence] = []
    contradicting: list[Evidence] = []
    neutral = 0

    for record in records:
        text = record.text.lower()
        match_count = sum(1 for k in keywords if k in text)
        if match_count == 0:
            continue

        positive = sum(1 for w in POSITIVE_WORDS if w in text)
        negative = sum(1 for w in NEGATIVE_WORDS if w in text)
        snippet = record.summary[:SNIPPET_LENGTH] or "No summary available"

        if negative > positive:
            supporting.append(Evidence(source=record.title, evidence=snippet))
        elif positive > negative:
            contradicting.append(Evidence(source=record.title, evidence=snippet))
        elif match_count >= 2:
            neutral += 1

    verdict, confidence = derive_verdict(len(supporting), len(contradicting))

    return HypothesisVerdict(
        hypothesis=hypothesis,
        verdict=verdict,
        confidence=confidence,
        supporting=supporting[:MAX_EVIDENCE_ITEMS],
        contradicting=contradicting[:MAX_EVIDENCE_ITEMS],
        neutral_mentions=neutral,
        recommendation=RECOMMENDATIONS.get(verdict),
    )
