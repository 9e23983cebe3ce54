from typing import Any, Dict, List, Optional

from .errors import ValidationError

ALLOWED_RESUME_TYPES = [
    "application/pdf",
    "application/msword",
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
]
MAX_RESUME_BYTES = 10 * 1024 * 1024  # 10MB

SCHOLAR_URL_MARKER = "scholar.google.com/citations"

DIFFICULTY_LEVELS = ["Beginner", "Intermediate", "Advanced"]
COLLABORATION_TYPES = ["Research", "Industry", "Academic"]
SORT_ORDERS = ["relevance", "date", "match_score"]


def _is_non_empty_str(v: Any) -> bool:
    return isinstance(v, str) and v.strip() != ""


def validate_resume_file(file) -> List[str]:
    """
    Returns a list of validation error messages for an UploadedFile.
    Empty list means the file may be sent for extraction.
    """
    errors: List[str] = []
    if file.content_type not in ALLOWED_RESUME_TYPES:
        errors.append("Please upload a PDF or DOCX file")
    if file.size > MAX_RESUME_BYTES:
        errors.append("File size must be less than 10MB")
    return errors


def validate_profile_url(url: Optional[str]) -> List[str]:
    if not _is_non_empty_str(url):
        return ["Please enter a Google Scholar profile URL"]
    if SCHOLAR_URL_MARKER not in url:
        return ["Please enter a valid Google Scholar profile URL"]
    return []


def validate_page(page: Any, limit: Any) -> List[str]:
    errors: List[str] = []
    if not isinstance(page, int) or isinstance(page, bool) or page < 1:
        errors.append("Field 'page' must be a positive integer")
    if not isinstance(limit, int) or isinstance(limit, bool) or limit < 1:
        errors.append("Field 'limit' must be a positive integer")
    return errors


def validate_identifier(value: Any, field: str) -> List[str]:
    if not _is_non_empty_str(value):
        return [f"Field '{field}' must be a non-empty string"]
    return []


def _is_str_list(v: Any) -> bool:
    return isinstance(v, (list, tuple)) and all(isinstance(item, str) for item in v)


def validate_filters(data: Dict[str, Any]) -> List[str]:
    """Check filter facet types, then enumerated facets against their allowed values."""
    errors: List[str] = []
    for field in ("collaboration_type", "difficulty", "skills"):
        value = data.get(field)
        if value is not None and not _is_str_list(value):
            errors.append(f"Filter '{field}' must be a list of strings")
    for field in ("duration", "location"):
        value = data.get(field)
        if value is not None and not isinstance(value, str):
            errors.append(f"Filter '{field}' must be a string")
    compensation = data.get("compensation")
    if compensation is not None and not isinstance(compensation, bool):
        errors.append("Filter 'compensation' must be true or false")
    if errors:
        return errors

    for level in data.get("difficulty") or []:
        if level not in DIFFICULTY_LEVELS:
            errors.append(f"Unknown difficulty: {level}")
    for kind in data.get("collaboration_type") or []:
        if kind not in COLLABORATION_TYPES:
            errors.append(f"Unknown collaboration type: {kind}")
    sort_by = data.get("sort_by")
    if sort_by is not None and sort_by not in SORT_ORDERS:
        errors.append(f"Unknown sort order: {sort_by}")
    return errors


def require_valid(errors: List[str]) -> None:
    """Raise ValidationError carrying the first message, if any."""
    if errors:
        raise ValidationError(errors[0])
