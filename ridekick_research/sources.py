# Ridekick Research
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""Research record sources.

All analysis tools read their records through `fetch_records()`. Two sources
exist:

- `HostQuerySource` uses the query capability injected by the host when the
  plugin runs inside the host's tool runtime.
- `RestSource` calls the hosted data store REST interface directly. It is used
  whenever no query capability was injected (e.g. CLI mode).

Upstream failures never reach the caller: they are logged and an empty record
list is returned. Missing credentials for the REST source are a configuration
error, though.
"""

import logging
from collections.abc import Mapping, Sequence
from typing import Any, Protocol

import httpx

from ridekick_research.config import DEFAULT_PROJECT, DataStoreConfig, load_datastore_config
from ridekick_research.context import QueryFunction, ToolContext
from ridekick_research.records import ResearchRecord


logger = logging.getLogger(__name__)

_COLUMNS = "id,title,summary,participants,content,created_at"


class RecordSource(Protocol):
    """Interface for a research record source."""

    async def fetch(self, project: str, limit: int) -> list[ResearchRecord]:
        """Return up to `limit` records of the given project, newest first."""


class HostQuerySource:
    """Fetch records through the host's query capability."""

    def __init__(self, query: QueryFunction) -> None:
        self._query = query

    async def fetch(self, project: str, limit: int) -> list[ResearchRecord]:
        try:
            rows = await self._query({"project": project, "limit": limit})
        except Exception as exc:  # noqa: BLE001
            logger.warning("Host query for project '%s' failed: %s", project, exc)
            return []

        return _to_records(rows)


class RestSource:
    """Fetch records from the `sources` table of the hosted data store."""

    def __init__(self, config: DataStoreConfig, *, transport: httpx.AsyncBaseTransport | None = None) -> None:
        self._config = config
        self._transport = transport

    def request_params(self, project: str, limit: int) -> dict[str, str]:
        """Build the query parameters of the table request."""

        return {
            "select": _COLUMNS,
            "projects": f"cs.{{{project}}}",
            "order": "created_at.desc",
            "limit": str(limit),
        }

    async def fetch(self, project: str, limit: int) -> list[ResearchRecord]:
        headers = {
            "apikey": self._config.key,
            "Authorization": f"Bearer {self._config.key}",
        }

        try:
            async with httpx.AsyncClient(timeout=None, transport=self._transport) as client:
                response = await client.get(
                    f"{self._config.rest_url}/sources",
                    params=self.request_params(project, limit),
                    headers=headers,
                )
        except httpx.HTTPError as exc:
            logger.warning("Data store request for project '%s' failed: %s", project, exc)
            return []

        if not response.is_success:
            logger.warning(
                "Data store returned HTTP %s for project '%s'",
                response.status_code,
                project,
            )
            return []

        try:
            rows = response.json()
        except ValueError as exc:
            logger.warning("Data store returned invalid JSON for project '%s': %s", project, exc)
            return []

        return _to_records(rows)


def select_source(context: ToolContext) -> RecordSource:
    """
    Choose the record source for a tool call.

    Args:
        context:
            Tool execution context.

    Returns:
        The host query source if the host injected a query capability,
        otherwise the REST source.

    Raises:
        ConfigError:
            If the REST source is needed but its credentials are missing.
    """

    if context.query is not None:
        return HostQuerySource(context.query)

    return RestSource(load_datastore_config())


async def fetch_records(
    project: str | None,
    context: ToolContext,
    *,
    source: RecordSource | None = None,
) -> list[ResearchRecord]:
    """
    Fetch the records of a project.

    Args:
        project:
            Project name. Empty or None falls back to the configured default.
        context:
            Tool execution context.
        source:
            Optional explicit source (mainly for tests).

    Returns:
        The fetched records. Empty if the upstream source is unavailable.
    """

    project = project or context.settings.default_project or DEFAULT_PROJECT
    source = source or select_source(context)

    records = await source.fetch(project, context.settings.record_limit)
    logger.debug("Fetched %d record(s) for project '%s'", len(records), project)
    return records


def _to_records(rows: Any) -> list[ResearchRecord]:
    """
    Convert the rows returned by a source into records.

    Any sequence except a string is accepted. Rows may be mappings or
    ready-made `ResearchRecord` instances. Everything else is dropped.
    """

    if isinstance(rows, (str, bytes)) or not isinstance(rows, Sequence):
        logger.warning("Record source returned %s instead of a sequence", type(rows).__name__)
        return []

    records: list[ResearchRecord] = []
    dropped = 0

    for row in rows:
        if isinstance(row, ResearchRecord):
            records.append(row)
        elif isinstance(row, Mapping):
            records.append(ResearchRecord.from_mapping(row))
        else:
            dropped += 1

    if dropped:
        logger.warning("Dropped %d record row(s) that are not mappings", dropped)

    return records
