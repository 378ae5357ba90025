"""Tests for TorreClient (job platform REST proxy)."""

from __future__ import annotations

import json

import httpx
import pytest

from candidate_fit.clients.torre_client import TorreClient, build_search_body
from candidate_fit.errors import UpstreamError
from candidate_fit.models.search import LanguageFilter, SearchFilters, SearchOptions, SkillFilter


def _client(handler) -> TorreClient:
    return TorreClient(transport=httpx.MockTransport(handler))


class TestBuildSearchBody:
    def test_empty_filters(self):
        assert build_search_body(SearchFilters()) == {"and": []}

    def test_all_filters(self):
        filters = SearchFilters(
            keyword="designer",
            language=LanguageFilter(term="English"),
            skills=[SkillFilter(text="Figma"), SkillFilter(text="UX", proficiency="expert")],
            status="open",
        )
        body = build_search_body(filters, lang="es")
        assert body == {
            "and": [
                {"keywords": {"term": "designer", "locale": "es"}},
                {"language": {"term": "English", "fluency": "conversational"}},
                {"skill/role": {"text": "Figma", "proficiency": "proficient"}},
                {"skill/role": {"text": "UX", "proficiency": "expert"}},
                {"status": {"code": "open"}},
            ]
        }


class TestSearch:
    async def test_forwards_body_and_query(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["url"] = request.url
            seen["body"] = json.loads(request.content)
            return httpx.Response(200, json={"total": 1, "results": [{"id": "a"}]})

        async with _client(handler) as torre:
            status, data = await torre.search({"and": []}, size=5)

        assert status == 200
        assert data["total"] == 1
        assert seen["body"] == {"and": []}
        assert seen["url"].host == "search.torre.co"
        assert seen["url"].params["size"] == "5"
        assert seen["url"].params["currency"] == "USD"
        assert seen["url"].params["periodicity"] == "hourly"
        assert seen["url"].params["lang"] == "en"
        assert seen["url"].params["contextFeature"] == "job_feed"

    async def test_default_size(self):
        def handler(request: httpx.Request) -> httpx.Response:
            assert request.url.params["size"] == "10"
            return httpx.Response(200, json={})

        async with _client(handler) as torre:
            await torre.search({"and": []})

    async def test_upstream_status_passed_through(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(429, json={"message": "slow down"})

        async with _client(handler) as torre:
            status, data = await torre.search({"and": []})

        assert status == 429
        assert data == {"message": "slow down"}

    async def test_non_json_body_becomes_error_envelope(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(502, text="<html>bad gateway</html>")

        async with _client(handler) as torre:
            status, data = await torre.search({"and": []})

        assert status == 502
        assert "error" in data

    async def test_search_opportunities_parses(self):
        def handler(request: httpx.Request) -> httpx.Response:
            body = json.loads(request.content)
            assert body == {"and": [{"keywords": {"term": "python", "locale": "en"}}]}
            return httpx.Response(
                200, json={"total": 2, "results": [{"id": "a", "objective": "Dev"}, {"id": "b"}]}
            )

        async with _client(handler) as torre:
            response = await torre.search_opportunities(
                SearchFilters(keyword="python"), SearchOptions(size=2)
            )

        assert response.total == 2
        assert response.results[0].objective == "Dev"

    async def test_search_opportunities_raises_on_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(404, json={})

        async with _client(handler) as torre:
            with pytest.raises(UpstreamError, match="Search failed: Not Found") as exc_info:
                await torre.search_opportunities(SearchFilters())

        assert exc_info.value.status_code == 404


class TestFetchRecords:
    async def test_get_job(self, sample_job_dict):
        def handler(request: httpx.Request) -> httpx.Response:
            assert request.url.path == "/api/suite/opportunities/KWNqmBmd"
            return httpx.Response(200, json=sample_job_dict)

        async with _client(handler) as torre:
            job = await torre.get_job("KWNqmBmd")

        assert job.objective == "Senior Designer"

    async def test_get_genome(self, sample_genome_dict):
        def handler(request: httpx.Request) -> httpx.Response:
            assert request.url.path == "/api/genome/bios/janedoe"
            return httpx.Response(200, json=sample_genome_dict)

        async with _client(handler) as torre:
            candidate = await torre.get_genome("janedoe")

        assert candidate.person.name == "Jane Doe"

    async def test_path_segments_are_escaped(self):
        def handler(request: httpx.Request) -> httpx.Response:
            assert request.url.raw_path == b"/api/genome/bios/a%2Fb"
            return httpx.Response(200, json={})

        async with _client(handler) as torre:
            await torre.fetch_genome("a/b")

    async def test_get_job_raises_on_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(404, json={"code": "404"})

        async with _client(handler) as torre:
            with pytest.raises(UpstreamError, match="Failed to fetch job details: Not Found"):
                await torre.get_job("missing")

    async def test_get_genome_raises_on_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(500, json={})

        async with _client(handler) as torre:
            with pytest.raises(UpstreamError, match="Failed to fetch genome: Internal Server Error"):
                await torre.get_genome("janedoe")

    async def test_transport_errors_propagate(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused")

        async with _client(handler) as torre:
            with pytest.raises(httpx.ConnectError):
                await torre.fetch_job("x")
