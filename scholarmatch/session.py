"""
Workflow session: the composition root consumers drive.

Each user-facing action runs through its own AsyncStateContainer and, on
completion, lands in the shared Store. Results are applied per slot with
request tokens, so an older call finishing late cannot overwrite a newer
one.
"""

from functools import partial
from typing import Any, Callable, Dict, Optional

from .api import ApiClient
from .async_state import AsyncStateContainer
from .env import Settings
from .errors import ValidationError
from .filters import ProjectFilters
from .logger import StructuredLogger, get_logger
from .result import OperationResult
from .services import (
    HttpAcademicProfileService,
    HttpResumeExtractionService,
    HttpSuggestionService,
    MockAcademicProfileService,
    MockResumeExtractionService,
    MockSuggestionService,
    UploadedFile,
    apply_to_project,
    bookmark_project,
    fetch_profile,
    get_suggestions,
    refresh_profile,
    upload_resume,
)
from .services.projects import DEFAULT_PAGE_SIZE
from .state import (
    Action,
    Slot,
    Store,
    clear_error,
    replace_profile,
    replace_resume,
    replace_suggestions,
    set_error,
)

MISSING_PROFILE_DATA = (
    "Upload your resume or connect your Google Scholar profile to get project suggestions"
)


class MatchSession:
    def __init__(
        self,
        store: Store,
        resume_service,
        profile_service,
        suggestion_service,
        logger: Optional[StructuredLogger] = None,
        page_size: int = DEFAULT_PAGE_SIZE,
    ):
        self.store = store
        self.logger = logger or get_logger()
        self.page_size = page_size
        self.filters = ProjectFilters()
        self.page = 1
        self.last_response: Optional[Dict[str, Any]] = None

        def container(operation, name):
            return AsyncStateContainer(operation, name=name, logger=self.logger)

        self.resume = container(partial(upload_resume, service=resume_service), "upload_resume")
        self.profile = container(partial(fetch_profile, service=profile_service), "fetch_profile")
        self.profile_refresh = container(
            partial(refresh_profile, service=profile_service), "refresh_profile"
        )
        self.suggestions = container(partial(get_suggestions, suggestion_service), "get_suggestions")
        self.bookmarks = container(partial(bookmark_project, service=suggestion_service), "bookmark_project")
        self.applications = container(
            partial(apply_to_project, service=suggestion_service), "apply_to_project"
        )

    async def _run(
        self,
        slot: Slot,
        container: AsyncStateContainer,
        on_success: Callable[[Any], Action],
        *args,
        **kwargs,
    ) -> OperationResult:
        token = self.store.issue_token(slot)
        result = await container.execute(*args, **kwargs)
        if result.stale:
            return result
        if result.ok:
            self.store.dispatch_if_latest(slot, token, on_success(result.value))
        else:
            self.store.dispatch_if_latest(slot, token, set_error(result.error))
        return result

    async def upload_resume(self, file: UploadedFile) -> OperationResult:
        return await self._run(
            Slot.RESUME, self.resume, lambda r: replace_resume(r["data"]), file
        )

    async def link_profile(self, profile_url: str) -> OperationResult:
        return await self._run(
            Slot.PROFILE, self.profile, lambda r: replace_profile(r["data"]), profile_url
        )

    async def refresh_profile(self) -> OperationResult:
        record = self.store.state.profile_record
        if not record:
            message = "Connect your Google Scholar profile before refreshing it"
            self.store.dispatch(set_error(message))
            return OperationResult.failure(message)
        return await self._run(Slot.PROFILE, self.profile_refresh, replace_profile, record["id"])

    async def refresh_suggestions(self, page: Optional[int] = None) -> OperationResult:
        """Fetch a page of suggestions for the current résumé/profile and filters."""
        state = self.store.state
        if not state.resume_record and not state.profile_record:
            self.store.dispatch(set_error(MISSING_PROFILE_DATA))
            return OperationResult.failure(MISSING_PROFILE_DATA)

        requested = page or self.page

        def on_success(response):
            self.page = requested
            self.last_response = response
            return replace_suggestions(response["data"])

        return await self._run(
            Slot.SUGGESTIONS,
            self.suggestions,
            on_success,
            resume_id=(state.resume_record or {}).get("id"),
            profile_id=(state.profile_record or {}).get("id"),
            filters=self.filters,
            page=requested,
            limit=self.page_size,
        )

    async def update_filters(self, **changes) -> OperationResult:
        """Shallow-merge filter changes, go back to page 1 and refetch."""
        try:
            self.filters = self.filters.merged(**changes)
        except ValidationError as e:
            self.store.dispatch(set_error(e.message))
            return OperationResult.failure(e.message)
        self.page = 1
        return await self.refresh_suggestions(page=1)

    async def load_more(self) -> Optional[OperationResult]:
        if not self.last_response or not self.last_response.get("hasMore"):
            return None
        return await self.refresh_suggestions(page=self.page + 1)

    async def bookmark(self, project_id: str) -> OperationResult:
        result = await self.bookmarks.execute(project_id)
        if not result.ok and not result.stale:
            self.store.dispatch(set_error(result.error))
        return result

    async def apply(self, project_id: str, application: Dict[str, Any]) -> OperationResult:
        result = await self.applications.execute(project_id, application)
        if not result.ok and not result.stale:
            self.store.dispatch(set_error(result.error))
        return result

    def dismiss_error(self) -> None:
        self.store.dispatch(clear_error())


def build_session(
    settings: Optional[Settings] = None,
    logger: Optional[StructuredLogger] = None,
) -> MatchSession:
    """Wire mock or HTTP-backed services according to settings."""
    settings = settings or Settings.from_env()
    logger = logger or get_logger()
    logger.set_level(settings.log_level)

    if settings.use_mocks:
        resume_service = MockResumeExtractionService(settings.mock_delay_scale)
        profile_service = MockAcademicProfileService(settings.mock_delay_scale)
        suggestion_service = MockSuggestionService(settings.mock_delay_scale)
    else:
        client = ApiClient(settings.api_url, timeout=settings.http_timeout)
        resume_service = HttpResumeExtractionService(client)
        profile_service = HttpAcademicProfileService(client)
        suggestion_service = HttpSuggestionService(client)

    logger.debug("Session built", mocks=settings.use_mocks, api_url=settings.api_url)
    return MatchSession(
        Store(logger=logger),
        resume_service,
        profile_service,
        suggestion_service,
        logger=logger,
    )
