"""Text analytics over research records.

Every analyzer is a pure function of the fetched records. The keyword and
pattern tables are module-level constants and are never modified at runtime.
"""

from ridekick_research.analysis.hypothesis import HypothesisVerdict, evaluate_hypothesis
from ridekick_research.analysis.pain_points import PainPointSummary, classify_pain_points
from ridekick_research.analysis.speakers import SpeakerSummary, aggregate_speakers

__all__ = [
    "HypothesisVerdict",
    "PainPointSummary",
    "SpeakerSummary",
    "aggregate_speakers",
    "classify_pain_points",
    "evaluate_hypothesis",
]
