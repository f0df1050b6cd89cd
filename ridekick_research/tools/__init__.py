"""Extension tools.

Each tool fetches the project's records through the shared record source and
reduces them to a structured result.
"""

from ridekick_research.tools.ai_analysis import AIAnalysisTool
from ridekick_research.tools.base import Tool, ToolDefinition, ToolInputError, ToolNotFoundError
from ridekick_research.tools.hypothesis import HypothesisTool
from ridekick_research.tools.pain_points import PainPointsTool
from ridekick_research.tools.speakers import SpeakersTool

__all__ = [
    "AIAnalysisTool",
    "HypothesisTool",
    "PainPointsTool",
    "SpeakersTool",
    "Tool",
    "ToolDefinition",
    "ToolInputError",
    "ToolNotFoundError",
]
