"""
Ridekick research extension package.

This package contains a host extension that supports user research on the
Ridekick project:
- speaker profiles: who said what across interviews,
- hypothesis testing: validate assumptions with evidence,
- pain point tracking: aggregate pain points with frequency,
- AI analysis: ask an LLM about the interview records.
"""

from __future__ import annotations
