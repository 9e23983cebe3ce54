import time
from typing import Any, Dict, Protocol

from ..api import ApiClient
from ..errors import DomainError, TransportError
from ..logger import get_logger
from ..schema import require_valid, validate_identifier, validate_resume_file
from .common import UploadedFile, elapsed_since, new_record_id, require_data, simulate_latency
from .samples import SAMPLE_RESUME, fresh

logger = get_logger()


class ResumeExtractionService(Protocol):
    """Turns an uploaded document into a structured résumé record."""

    async def extract(self, file: UploadedFile) -> Dict[str, Any]: ...

    async def get(self, resume_id: str) -> Dict[str, Any]: ...

    async def update(self, resume_id: str, changes: Dict[str, Any]) -> Dict[str, Any]: ...


class MockResumeExtractionService:
    """Returns the canned résumé after a simulated 2-3 second delay."""

    def __init__(self, delay_scale: float = 1.0):
        self.delay_scale = delay_scale
        self._records: Dict[str, Dict[str, Any]] = {}

    async def extract(self, file: UploadedFile) -> Dict[str, Any]:
        await simulate_latency(2.0, 3.0, self.delay_scale)
        record = {"id": new_record_id("resume"), **fresh(SAMPLE_RESUME)}
        self._records[record["id"]] = record
        return fresh(record)

    async def get(self, resume_id: str) -> Dict[str, Any]:
        if resume_id not in self._records:
            raise DomainError(f"Resume not found: {resume_id}", status=404, code="not_found")
        return fresh(self._records[resume_id])

    async def update(self, resume_id: str, changes: Dict[str, Any]) -> Dict[str, Any]:
        current = await self.get(resume_id)
        current.update(changes)
        current["id"] = resume_id
        self._records[resume_id] = current
        return fresh(current)


class HttpResumeExtractionService:
    def __init__(self, client: ApiClient):
        self.client = client

    async def extract(self, file: UploadedFile) -> Dict[str, Any]:
        response = await self.client.aupload_file(file, "/resume/upload")
        return require_data(response, dict)

    async def get(self, resume_id: str) -> Dict[str, Any]:
        return await self.client.acall(f"/resume/{resume_id}")

    async def update(self, resume_id: str, changes: Dict[str, Any]) -> Dict[str, Any]:
        return await self.client.acall(f"/resume/{resume_id}", method="PUT", json=changes)


async def upload_resume(file: UploadedFile, service: ResumeExtractionService) -> Dict[str, Any]:
    """
    Validate a résumé document and send it for extraction.

    Returns:
        {"success": True, "data": ResumeRecord, "processingTime": seconds}

    Raises:
        ValidationError: Unsupported media type or file over 10MB. Raised
            before the extraction service is touched.
    """
    require_valid(validate_resume_file(file))
    started = time.perf_counter()
    record = await service.extract(file)
    if not isinstance(record, dict):
        raise TransportError("Malformed response from server")
    processing_time = elapsed_since(started)
    logger.info(
        "Resume processed",
        filename=file.filename,
        skills=len(record.get("skills", [])),
        seconds=processing_time,
    )
    return {"success": True, "data": record, "processingTime": processing_time}


async def get_resume(resume_id: str, service: ResumeExtractionService) -> Dict[str, Any]:
    require_valid(validate_identifier(resume_id, "resume_id"))
    return await service.get(resume_id)


async def update_resume(
    resume_id: str, changes: Dict[str, Any], service: ResumeExtractionService
) -> Dict[str, Any]:
    require_valid(validate_identifier(resume_id, "resume_id"))
    return await service.update(resume_id, changes)
