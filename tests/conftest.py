"""
Pytest configuration and shared fixtures.
"""

import asyncio

import pytest

from scholarmatch.logger import StructuredLogger, get_logger

# Create the global logger quiet and off disk before any module grabs it
get_logger(enable_file=False, enable_console=False)

from scholarmatch.services import (  # noqa: E402
    MockAcademicProfileService,
    MockResumeExtractionService,
    MockSuggestionService,
    UploadedFile,
)
from scholarmatch.session import MatchSession  # noqa: E402
from scholarmatch.state import Store  # noqa: E402

PDF = "application/pdf"


@pytest.fixture
def quiet_logger() -> StructuredLogger:
    """Logger with no handlers, metrics still tracked."""
    return StructuredLogger(name="test", enable_file=False, enable_console=False)


@pytest.fixture
def pdf_file() -> UploadedFile:
    """Small valid PDF upload."""
    return UploadedFile(filename="cv.pdf", content_type=PDF, size=2048, content=b"%PDF-1.4")


@pytest.fixture
def resume_service() -> MockResumeExtractionService:
    return MockResumeExtractionService(delay_scale=0)


@pytest.fixture
def profile_service() -> MockAcademicProfileService:
    return MockAcademicProfileService(delay_scale=0)


@pytest.fixture
def suggestion_service() -> MockSuggestionService:
    return MockSuggestionService(delay_scale=0)


@pytest.fixture
def store(quiet_logger) -> Store:
    return Store(logger=quiet_logger)


@pytest.fixture
def session(store, resume_service, profile_service, suggestion_service, quiet_logger) -> MatchSession:
    """Session wired to zero-delay mock services."""
    return MatchSession(
        store,
        resume_service,
        profile_service,
        suggestion_service,
        logger=quiet_logger,
    )


class GatedSuggestionService(MockSuggestionService):
    """
    Suggestion service whose calls block until released, so tests can
    control the order in which overlapping requests complete.
    """

    def __init__(self, responses):
        super().__init__(delay_scale=0)
        self.responses = list(responses)
        self.gates = []

    async def suggest(self, resume_id, profile_id, filters, page, limit):
        index = len(self.gates)
        gate = asyncio.Event()
        self.gates.append(gate)
        await gate.wait()
        return self.responses[index]


class RecordingProfileService(MockAcademicProfileService):
    """Profile service that records every fetch it receives."""

    def __init__(self):
        super().__init__(delay_scale=0)
        self.fetched = []

    async def fetch(self, profile_url):
        self.fetched.append(profile_url)
        return await super().fetch(profile_url)


class RecordingResumeService(MockResumeExtractionService):
    """Résumé service that records every file sent for extraction."""

    def __init__(self):
        super().__init__(delay_scale=0)
        self.extracted = []

    async def extract(self, file):
        self.extracted.append(file)
        return await super().extract(file)


@pytest.fixture
def recording_profile_service() -> RecordingProfileService:
    return RecordingProfileService()


@pytest.fixture
def recording_resume_service() -> RecordingResumeService:
    return RecordingResumeService()


@pytest.fixture
def gated_suggestions():
    """Factory for a GatedSuggestionService with canned responses."""
    return GatedSuggestionService
