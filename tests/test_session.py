"""
Tests for the workflow session that ties containers to the store.
"""

import asyncio

import pytest

from scholarmatch.env import Settings
from scholarmatch.services import (
    HttpSuggestionService,
    MockSuggestionService,
    UploadedFile,
)
from scholarmatch.session import MISSING_PROFILE_DATA, MatchSession, build_session

SCHOLAR_URL = "https://scholar.google.com/citations?user=X"


def page(ids, has_more=False, number=1):
    return {
        "success": True,
        "data": [{"id": i} for i in ids],
        "total": len(ids),
        "page": number,
        "hasMore": has_more,
        "filters": {},
    }


class TestResumeAndProfile:
    """Test populating the résumé and profile slots."""

    @pytest.mark.asyncio
    async def test_upload_populates_resume_slot(self, session, pdf_file):
        result = await session.upload_resume(pdf_file)

        assert result.ok
        assert session.store.state.resume_record["id"] == result.value["data"]["id"]
        assert session.resume.data == result.value

    @pytest.mark.asyncio
    async def test_invalid_upload_sets_error_and_keeps_profile(self, session):
        await session.link_profile(SCHOLAR_URL)
        profile = session.store.state.profile_record

        bad = UploadedFile(filename="cv.png", content_type="image/png", size=10)
        result = await session.upload_resume(bad)

        state = session.store.state
        assert not result.ok
        assert state.last_error == "Please upload a PDF or DOCX file"
        assert state.profile_record == profile
        assert state.resume_record is None
        assert session.resume.loading is False

    @pytest.mark.asyncio
    async def test_invalid_profile_url(self, session):
        result = await session.link_profile("https://example.com/not-scholar")

        assert result.error == "Please enter a valid Google Scholar profile URL"
        assert session.store.state.last_error == result.error
        assert session.store.state.profile_record is None

    @pytest.mark.asyncio
    async def test_error_persists_until_dismissed(self, session, pdf_file):
        await session.link_profile("nope")
        await session.upload_resume(pdf_file)

        assert session.store.state.last_error is not None
        session.dismiss_error()
        assert session.store.state.last_error is None

    @pytest.mark.asyncio
    async def test_refresh_profile(self, session):
        await session.link_profile(SCHOLAR_URL)
        profile_id = session.store.state.profile_record["id"]

        result = await session.refresh_profile()

        assert result.ok
        assert session.store.state.profile_record["id"] == profile_id

    @pytest.mark.asyncio
    async def test_refresh_profile_requires_link(self, session):
        result = await session.refresh_profile()

        assert not result.ok
        assert session.store.state.last_error == result.error


class TestSuggestions:
    """Test suggestion fetching, filters and paging."""

    @pytest.mark.asyncio
    async def test_requires_resume_or_profile(self, session):
        result = await session.refresh_suggestions()

        assert result.error == MISSING_PROFILE_DATA
        assert session.store.state.last_error == MISSING_PROFILE_DATA

    @pytest.mark.asyncio
    async def test_refresh_populates_slot(self, session, pdf_file):
        await session.upload_resume(pdf_file)

        result = await session.refresh_suggestions()

        assert result.ok
        assert len(session.store.state.suggestion_list) == result.value["total"]

    @pytest.mark.asyncio
    async def test_update_filters_merges_and_resets_page(self, session):
        await session.link_profile(SCHOLAR_URL)
        session.page = 3

        await session.update_filters(difficulty=["Advanced"])
        result = await session.update_filters(collaboration_type=["Industry"])

        assert session.page == 1
        assert session.filters.difficulty == ["Advanced"]
        assert [p["id"] for p in result.value["data"]] == ["proj_4"]

    @pytest.mark.asyncio
    async def test_invalid_filter_sets_error(self, session):
        await session.link_profile(SCHOLAR_URL)

        result = await session.update_filters(sort_by="random")

        assert not result.ok
        assert "sort order" in session.store.state.last_error

    @pytest.mark.asyncio
    async def test_bare_string_skills_sets_error(self, session):
        await session.link_profile(SCHOLAR_URL)

        result = await session.update_filters(skills="Python")

        assert not result.ok
        assert session.store.state.last_error == "Filter 'skills' must be a list of strings"
        assert session.filters.skills is None

    @pytest.mark.asyncio
    async def test_response_without_data_sets_error(self, store, resume_service, profile_service, quiet_logger):
        class NoData(MockSuggestionService):
            async def suggest(self, resume_id, profile_id, filters, page, limit):
                return {"success": True, "items": []}

        session = MatchSession(store, resume_service, profile_service, NoData(delay_scale=0), logger=quiet_logger)
        await session.link_profile(SCHOLAR_URL)

        result = await session.refresh_suggestions()

        assert not result.ok
        assert result.error == "Malformed response from server"
        assert session.suggestions.error == "Malformed response from server"
        assert session.store.state.last_error == "Malformed response from server"
        assert session.store.state.suggestion_list == ()
        assert session.last_response is None

    @pytest.mark.asyncio
    async def test_load_more_pages_through(self, session):
        session.page_size = 1
        await session.link_profile(SCHOLAR_URL)
        await session.refresh_suggestions()
        first = session.store.state.suggestion_list

        result = await session.load_more()

        assert result.ok
        assert session.page == 2
        assert session.store.state.suggestion_list != first

    @pytest.mark.asyncio
    async def test_load_more_stops_at_end(self, session):
        await session.link_profile(SCHOLAR_URL)
        await session.refresh_suggestions()

        assert await session.load_more() is None

    @pytest.mark.asyncio
    async def test_out_of_order_responses(self, store, resume_service, profile_service, quiet_logger, gated_suggestions):
        """An older refresh finishing last must not overwrite the newer one."""
        suggestions = gated_suggestions([page(["old"]), page(["new"])])
        session = MatchSession(store, resume_service, profile_service, suggestions, logger=quiet_logger)
        await session.link_profile(SCHOLAR_URL)

        first = asyncio.create_task(session.refresh_suggestions())
        second = asyncio.create_task(session.refresh_suggestions())
        await asyncio.sleep(0)

        suggestions.gates[1].set()
        await second
        suggestions.gates[0].set()
        stale = await first

        assert stale.stale
        assert session.store.state.suggestion_list == ({"id": "new"},)
        assert session.last_response["data"] == [{"id": "new"}]


class TestProjectActions:
    """Test bookmark and apply through the session."""

    @pytest.mark.asyncio
    async def test_bookmark(self, session, suggestion_service):
        result = await session.bookmark("proj_3")

        assert result.ok
        assert "proj_3" in suggestion_service.bookmarked

    @pytest.mark.asyncio
    async def test_bookmark_unknown_sets_error(self, session):
        result = await session.bookmark("proj_404")

        assert not result.ok
        assert "not found" in session.store.state.last_error

    @pytest.mark.asyncio
    async def test_apply(self, session, suggestion_service):
        result = await session.apply("proj_1", {"coverLetter": "Hi"})

        assert result.ok
        assert "proj_1" in suggestion_service.applications


class TestBuildSession:
    """Test service wiring from settings."""

    def test_mock_wiring(self, quiet_logger):
        session = build_session(Settings(use_mocks=True, mock_delay_scale=0), logger=quiet_logger)
        assert isinstance(session, MatchSession)
        assert session.store.state.resume_record is None

    def test_http_wiring(self, quiet_logger):
        session = build_session(Settings(use_mocks=False, api_url="http://api.test/api"), logger=quiet_logger)
        operation = session.suggestions.operation
        assert isinstance(operation.args[0], HttpSuggestionService)
        assert operation.args[0].client.base_url == "http://api.test/api"

    def test_each_session_has_its_own_store(self, quiet_logger):
        settings = Settings(use_mocks=True, mock_delay_scale=0)
        a = build_session(settings, logger=quiet_logger)
        b = build_session(settings, logger=quiet_logger)
        assert a.store is not b.store
        assert isinstance(a.suggestions.operation.args[0], MockSuggestionService)
