import time
from typing import Any, Dict, Protocol

from ..api import ApiClient
from ..errors import DomainError, TransportError
from ..logger import get_logger
from ..schema import require_valid, validate_identifier, validate_profile_url
from .common import elapsed_since, new_record_id, require_data, simulate_latency
from .samples import SAMPLE_PROFILE, fresh

logger = get_logger()


class AcademicProfileService(Protocol):
    """Looks up publication and citation metrics for a Scholar profile."""

    async def fetch(self, profile_url: str) -> Dict[str, Any]: ...

    async def get(self, profile_id: str) -> Dict[str, Any]: ...

    async def refresh(self, profile_id: str) -> Dict[str, Any]: ...


class MockAcademicProfileService:
    """Returns the canned profile after a simulated 1.5-2.5 second delay."""

    def __init__(self, delay_scale: float = 1.0):
        self.delay_scale = delay_scale
        self._records: Dict[str, Dict[str, Any]] = {}

    async def fetch(self, profile_url: str) -> Dict[str, Any]:
        await simulate_latency(1.5, 2.5, self.delay_scale)
        record = {"id": new_record_id("scholar"), "profileUrl": profile_url, **fresh(SAMPLE_PROFILE)}
        self._records[record["id"]] = record
        return fresh(record)

    async def get(self, profile_id: str) -> Dict[str, Any]:
        if profile_id not in self._records:
            raise DomainError(f"Scholar profile not found: {profile_id}", status=404, code="not_found")
        return fresh(self._records[profile_id])

    async def refresh(self, profile_id: str) -> Dict[str, Any]:
        current = await self.get(profile_id)
        await simulate_latency(1.5, 2.5, self.delay_scale)
        return current


class HttpAcademicProfileService:
    def __init__(self, client: ApiClient):
        self.client = client

    async def fetch(self, profile_url: str) -> Dict[str, Any]:
        response = await self.client.acall(
            "/scholar/fetch", method="POST", json={"profileUrl": profile_url}
        )
        return require_data(response, dict)

    async def get(self, profile_id: str) -> Dict[str, Any]:
        return await self.client.acall(f"/scholar/{profile_id}")

    async def refresh(self, profile_id: str) -> Dict[str, Any]:
        return await self.client.acall(f"/scholar/{profile_id}/refresh", method="POST")


async def fetch_profile(profile_url: str, service: AcademicProfileService) -> Dict[str, Any]:
    """
    Validate a Google Scholar profile URL and fetch the profile.

    Returns:
        {"success": True, "data": ProfileRecord, "fetchTime": seconds}

    Raises:
        ValidationError: Empty URL or not a scholar.google.com/citations URL.
    """
    require_valid(validate_profile_url(profile_url))
    started = time.perf_counter()
    record = await service.fetch(profile_url.strip())
    if not isinstance(record, dict):
        raise TransportError("Malformed response from server")
    fetch_time = elapsed_since(started)
    logger.info(
        "Scholar profile fetched",
        url=profile_url,
        publications=len(record.get("publications", [])),
        citations=record.get("totalCitations"),
    )
    return {"success": True, "data": record, "fetchTime": fetch_time}


async def get_profile(profile_id: str, service: AcademicProfileService) -> Dict[str, Any]:
    require_valid(validate_identifier(profile_id, "profile_id"))
    return await service.get(profile_id)


async def refresh_profile(profile_id: str, service: AcademicProfileService) -> Dict[str, Any]:
    require_valid(validate_identifier(profile_id, "profile_id"))
    return await service.refresh(profile_id)
