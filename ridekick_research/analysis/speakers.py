# Ridekick Research
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""Speaker aggregation.

Groups records by participant name and collects, per speaker, the records they
appear in and the theme keywords found in those records' summaries.
"""

from dataclasses import dataclass, field
from typing import Any, Iterable

from ridekick_research.records import ResearchRecord


THEME_KEYWORDS: tuple[str, ...] = (
    "pricing",
    "trust",
    "time",
    "dealer",
    "negotiation",
    "research",
    "stress",
    "confidence",
)

MAX_SOURCES_PER_SPEAKER = 5
MAX_PROFILES = 10


@dataclass
class SpeakerProfile:
    """
    Aggregated appearances of one speaker.

    Attributes:
        name:
            Participant name exactly as listed in the record.
        appearances:
            Number of records the speaker appears in.
        sources:
            Titles of those records (first five).
        themes:
            Theme keywords found in the summaries, in first-seen order.
    """

    name: str
    appearances: int = 0
    sources: list[str] = field(default_factory=list)
    themes: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "appearances": self.appearances,
            "sources": self.sources[:MAX_SOURCES_PER_SPEAKER],
            "themes": list(self.themes),
        }


@dataclass(frozen=True)
class SpeakerSummary:
    total_speakers: int
    profiles: list[SpeakerProfile]

    def to_dict(self) -> dict[str, Any]:
        return {
            "total_speakers": self.total_speakers,
            "profiles": [p.to_dict() for p in self.profiles],
        }


def aggregate_speakers(
    records: Iterable[ResearchRecord],
    speaker_filter: str | None = None,
) -> SpeakerSummary:
    """
    Build speaker profiles from records.

    Args:
        records:
            Records to aggregate.
        speaker_filter:
            Optional name filter. Only names containing the filter
            (case-insensitive) are counted.

    Returns:
        A SpeakerSummary. `total_speakers` counts all matching speakers, while
        `profiles` is capped at ten entries unless a filter was given.
    """

    needle = speaker_filter.lower() if speaker_filter else None
    by_name: dict[str, SpeakerProfile] = {}

    for record in records:
        summary = record.summary.lower()
        found_themes = [k for k in THEME_KEYWORDS if k in summary]

        for participant in record.participants:
            if needle is not None and needle not in participant.lower():
                continue

            profile = by_name.get(participant)
            if profile is None:
                profile = SpeakerProfile(name=participant)
                by_name[participant] = profile

            profile.appearances += 1
            if len(profile.sources) < MAX_SOURCES_PER_SPEAKER:
                profile.sources.append(record.title)

            for theme in found_themes:
                if theme not in profile.themes:
                    profile.themes.append(theme)

    # sorted() is stable, so ties keep first-seen order.
    profiles = sorted(by_name.values(), key=lambda p: p.appearances, reverse=True)

    return SpeakerSummary(
        total_speakers=len(profiles),
        profiles=profiles if needle is not None else profiles[:MAX_PROFILES],
    )
