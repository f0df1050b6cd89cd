# Ridekick Research
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""Research record model.

Rows from the data store and records handed over by the host are normalized
into `ResearchRecord` objects here, so that the analyzers never have to check
for missing fields.
"""

from dataclasses import dataclass
from typing import Any, Mapping


@dataclass(frozen=True)
class ResearchRecord:
    """
    One unit of research data, e.g. an interview transcript.

    Attributes:
        id:
            Opaque identifier.
        title:
            Short display string.
        summary:
            Short free text. Empty if the source has none.
        content:
            Long free text. Empty if the source has none.
        participants:
            Speaker names in source order.
        projects:
            Project tags the record belongs to.
        created_at:
            Creation timestamp as delivered by the source (ordering only).
    """

    id: str
    title: str
    summary: str = ""
    content: str = ""
    participants: tuple[str, ...] = ()
    projects: tuple[str, ...] = ()
    created_at: str | None = None

    @property
    def text(self) -> str:
        """Summary and content joined by a single space."""

        return f"{self.summary} {self.content}"

    @classmethod
    def from_mapping(cls, row: Mapping[str, Any]) -> "ResearchRecord":
        """
        Build a record from a data store row or host payload.

        Absent or null text fields become empty strings and absent lists
        become empty tuples. Both `created_at` and `createdAt` are accepted.
        """

        created_at = row.get("created_at")
        if created_at is None:
            created_at = row.get("createdAt")

        return cls(
            id=str(row.get("id") or ""),
            title=_as_text(row.get("title")),
            summary=_as_text(row.get("summary")),
            content=_as_text(row.get("content")),
            participants=_as_names(row.get("participants")),
            projects=_as_names(row.get("projects")),
            created_at=str(created_at) if created_at is not None else None,
        )


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


def _as_names(value: Any) -> tuple[str, ...]:
    if not isinstance(value, (list, tuple)):
        return ()
    return tuple(x for x in value if isinstance(x, str))
