"""Tests for the record sources."""

from __future__ import annotations

import logging
from types import MappingProxyType

import httpx
import pytest

from ridekick_research.config import ConfigError, DataStoreConfig, Settings
from ridekick_research.context import ToolContext
from ridekick_research.records import ResearchRecord
from ridekick_research.sources import HostQuerySource, RestSource, fetch_records, select_source

CONFIG = DataStoreConfig(url="https://example.supabase.co/", key="anon-key")

ROWS = [
    {
        "id": "1",
        "title": "Interview with Sam",
        "summary": None,
        "participants": ["Sam", "Pat"],
        "content": "We compared prices.",
        "created_at": "2025-01-02T00:00:00Z",
    },
    {"id": "2", "title": "Notes"},
]


def _transport(handler):
    return httpx.MockTransport(handler)


class TestResearchRecord:
    def test_missing_fields_get_defaults(self):
        record = ResearchRecord.from_mapping({"id": 7, "title": "T"})

        assert record.id == "7"
        assert record.summary == ""
        assert record.content == ""
        assert record.participants == ()
        assert record.created_at is None

    def test_camel_case_timestamp(self):
        record = ResearchRecord.from_mapping({"id": "1", "title": "T", "createdAt": "2025-01-01"})

        assert record.created_at == "2025-01-01"

    def test_text_joins_summary_and_content(self):
        record = ResearchRecord(id="1", title="T", summary="a", content="b")

        assert record.text == "a b"


class TestRestSource:
    """Tests for RestSource."""

    @pytest.mark.asyncio
    async def test_request_shape(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["request"] = request
            return httpx.Response(200, json=ROWS)

        source = RestSource(CONFIG, transport=_transport(handler))
        records = await source.fetch("ridekick", 200)

        request = seen["request"]
        assert request.method == "GET"
        assert request.url.path == "/rest/v1/sources"
        assert request.url.params["select"] == "id,title,summary,participants,content,created_at"
        assert request.url.params["projects"] == "cs.{ridekick}"
        assert request.url.params["order"] == "created_at.desc"
        assert request.url.params["limit"] == "200"
        assert request.headers["apikey"] == "anon-key"
        assert request.headers["authorization"] == "Bearer anon-key"

        assert [r.title for r in records] == ["Interview with Sam", "Notes"]
        assert records[0].summary == ""
        assert records[0].participants == ("Sam", "Pat")
        assert records[1].participants == ()

    @pytest.mark.asyncio
    async def test_error_status_yields_empty_list(self):
        source = RestSource(CONFIG, transport=_transport(lambda request: httpx.Response(500, text="boom")))

        assert await source.fetch("ridekick", 200) == []

    @pytest.mark.asyncio
    async def test_transport_error_yields_empty_list(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("unreachable", request=request)

        source = RestSource(CONFIG, transport=_transport(handler))

        assert await source.fetch("ridekick", 200) == []

    @pytest.mark.asyncio
    async def test_invalid_json_yields_empty_list(self):
        source = RestSource(CONFIG, transport=_transport(lambda request: httpx.Response(200, text="<html>")))

        assert await source.fetch("ridekick", 200) == []

    @pytest.mark.asyncio
    async def test_non_list_payload_yields_empty_list(self):
        source = RestSource(CONFIG, transport=_transport(lambda request: httpx.Response(200, json={"a": 1})))

        assert await source.fetch("ridekick", 200) == []


class TestHostQuerySource:
    @pytest.mark.asyncio
    async def test_passes_project_and_limit(self, fake_query_cls):
        query = fake_query_cls(ROWS)

        records = await HostQuerySource(query).fetch("other", 50)

        assert query.calls == [{"project": "other", "limit": 50}]
        assert len(records) == 2

    @pytest.mark.asyncio
    async def test_tuple_of_rows(self, fake_query_cls):
        records = await HostQuerySource(fake_query_cls(tuple(ROWS))).fetch("ridekick", 200)

        assert [r.title for r in records] == ["Interview with Sam", "Notes"]

    @pytest.mark.asyncio
    async def test_read_only_mapping_rows(self, fake_query_cls):
        rows = [MappingProxyType(row) for row in ROWS]

        records = await HostQuerySource(fake_query_cls(rows)).fetch("ridekick", 200)

        assert [r.id for r in records] == ["1", "2"]
        assert records[0].participants == ("Sam", "Pat")

    @pytest.mark.asyncio
    async def test_record_objects_pass_through(self, fake_query_cls):
        record = ResearchRecord(id="9", title="Ready", summary="Already built")

        records = await HostQuerySource(fake_query_cls([record])).fetch("ridekick", 200)

        assert records == [record]
        assert records[0] is record

    @pytest.mark.asyncio
    async def test_invalid_rows_are_dropped(self, fake_query_cls, caplog):
        rows = [ROWS[0], "not a row", 42, ROWS[1]]

        with caplog.at_level(logging.WARNING, logger="ridekick_research.sources"):
            records = await HostQuerySource(fake_query_cls(rows)).fetch("ridekick", 200)

        assert [r.id for r in records] == ["1", "2"]
        assert "Dropped 2 record row(s)" in caplog.text

    @pytest.mark.asyncio
    @pytest.mark.parametrize("payload", ["1,2", {"id": "1", "title": "T"}, 42])
    async def test_non_sequence_payload(self, fake_query_cls, payload):
        assert await HostQuerySource(fake_query_cls(payload)).fetch("ridekick", 200) == []

    @pytest.mark.asyncio
    async def test_failure_yields_empty_list(self, fake_query_cls):
        query = fake_query_cls(error=RuntimeError("host down"))

        assert await HostQuerySource(query).fetch("ridekick", 200) == []


class TestSelectSource:
    def test_prefers_host_query(self, fake_query_cls, no_env):
        context = ToolContext(query=fake_query_cls())

        assert isinstance(select_source(context), HostQuerySource)

    def test_rest_source_needs_credentials(self, no_env):
        with pytest.raises(ConfigError):
            select_source(ToolContext(mode="cli"))

    def test_rest_source_from_environment(self, monkeypatch):
        monkeypatch.setenv("SUPABASE_URL", "https://example.supabase.co")
        monkeypatch.setenv("SUPABASE_ANON_KEY", "key")

        assert isinstance(select_source(ToolContext(mode="cli")), RestSource)


class TestFetchRecords:
    @pytest.mark.asyncio
    async def test_defaults_to_ridekick_project(self, host_context):
        context, query = host_context(ROWS)

        records = await fetch_records(None, context)

        assert query.calls == [{"project": "ridekick", "limit": 200}]
        assert len(records) == 2

    @pytest.mark.asyncio
    async def test_empty_project_uses_settings(self, host_context):
        context, query = host_context(ROWS, settings=Settings(default_project="other", record_limit=10))

        await fetch_records("", context)

        assert query.calls == [{"project": "other", "limit": 10}]
