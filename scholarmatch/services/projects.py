from typing import Any, Dict, List, Optional, Protocol

from ..api import ApiClient
from ..errors import DomainError
from ..filters import ProjectFilters
from ..logger import get_logger
from ..schema import require_valid, validate_identifier, validate_page
from .common import require_data, simulate_latency
from .samples import AVAILABLE_FACETS, SAMPLE_PROJECTS, fresh

logger = get_logger()

DEFAULT_PAGE_SIZE = 12


class SuggestionService(Protocol):
    """Produces project suggestions for a résumé and/or Scholar profile."""

    async def suggest(
        self,
        resume_id: Optional[str],
        profile_id: Optional[str],
        filters: ProjectFilters,
        page: int,
        limit: int,
    ) -> Dict[str, Any]: ...

    async def get(self, project_id: str) -> Dict[str, Any]: ...

    async def bookmark(self, project_id: str) -> None: ...

    async def apply(self, project_id: str, application: Dict[str, Any]) -> None: ...


def paginate(records: List[Dict[str, Any]], page: int, limit: int) -> Dict[str, Any]:
    start = (page - 1) * limit
    return {
        "data": records[start:start + limit],
        "total": len(records),
        "page": page,
        "hasMore": start + limit < len(records),
    }


class MockSuggestionService:
    """Filters and pages the canned project list after a 1-1.5 second delay."""

    def __init__(self, delay_scale: float = 1.0, projects: Optional[List[Dict[str, Any]]] = None):
        self.delay_scale = delay_scale
        self.projects = fresh(projects if projects is not None else SAMPLE_PROJECTS)
        self.bookmarked: set = {p["id"] for p in self.projects if p.get("isBookmarked")}
        self.applications: Dict[str, Dict[str, Any]] = {}

    def _find(self, project_id: str) -> Dict[str, Any]:
        for project in self.projects:
            if project["id"] == project_id:
                return project
        raise DomainError(f"Project not found: {project_id}", status=404, code="not_found")

    async def suggest(self, resume_id, profile_id, filters, page, limit):
        await simulate_latency(1.0, 1.5, self.delay_scale)
        matched = filters.apply(fresh(self.projects))
        return {"success": True, **paginate(matched, page, limit), "filters": fresh(AVAILABLE_FACETS)}

    async def get(self, project_id: str) -> Dict[str, Any]:
        return fresh(self._find(project_id))

    async def bookmark(self, project_id: str) -> None:
        project = self._find(project_id)
        # Toggle
        project["isBookmarked"] = not project.get("isBookmarked", False)
        if project["isBookmarked"]:
            self.bookmarked.add(project_id)
        else:
            self.bookmarked.discard(project_id)

    async def apply(self, project_id: str, application: Dict[str, Any]) -> None:
        project = self._find(project_id)
        project["applicationStatus"] = "applied"
        self.applications[project_id] = dict(application)


class HttpSuggestionService:
    def __init__(self, client: ApiClient):
        self.client = client

    async def suggest(self, resume_id, profile_id, filters, page, limit):
        return await self.client.acall(
            "/projects/suggestions",
            method="POST",
            json={
                "resumeId": resume_id,
                "scholarId": profile_id,
                "filters": filters.to_payload(),
                "page": page,
                "limit": limit,
            },
        )

    async def get(self, project_id: str) -> Dict[str, Any]:
        return await self.client.acall(f"/projects/{project_id}")

    async def bookmark(self, project_id: str) -> None:
        await self.client.acall(f"/projects/{project_id}/bookmark", method="POST")

    async def apply(self, project_id: str, application: Dict[str, Any]) -> None:
        await self.client.acall(f"/projects/{project_id}/apply", method="POST", json=application)


async def get_suggestions(
    service: SuggestionService,
    resume_id: Optional[str] = None,
    profile_id: Optional[str] = None,
    filters: Optional[ProjectFilters] = None,
    page: int = 1,
    limit: int = DEFAULT_PAGE_SIZE,
) -> Dict[str, Any]:
    """
    Fetch one page of project suggestions.

    At least one of resume_id/profile_id is expected but not enforced.

    Returns:
        {"success", "data", "total", "page", "hasMore", "filters"} where
        "filters" lists the available facet values.
    """
    require_valid(validate_page(page, limit))
    if resume_id is None and profile_id is None:
        logger.warning("Suggestions requested without a resume or profile")
    response = await service.suggest(resume_id, profile_id, filters or ProjectFilters(), page, limit)
    data = require_data(response, list)
    logger.debug(
        "Suggestions fetched",
        page=page,
        returned=len(data),
        total=response.get("total"),
    )
    return response


async def get_project(project_id: str, service: SuggestionService) -> Dict[str, Any]:
    require_valid(validate_identifier(project_id, "project_id"))
    return await service.get(project_id)


async def bookmark_project(project_id: str, service: SuggestionService) -> None:
    require_valid(validate_identifier(project_id, "project_id"))
    await service.bookmark(project_id)


async def apply_to_project(
    project_id: str, application: Dict[str, Any], service: SuggestionService
) -> None:
    require_valid(validate_identifier(project_id, "project_id"))
    await service.apply(project_id, application)
    logger.info("Application submitted", project_id=project_id)
