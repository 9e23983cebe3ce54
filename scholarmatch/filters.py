"""
Project suggestion filters.

Every facet is optional. An absent facet (None, or an empty list) applies
no narrowing on that facet. Present facets combine with AND.
"""

from dataclasses import asdict, dataclass, replace
from typing import Any, Dict, List, Optional

from .schema import require_valid, validate_filters

_PAYLOAD_KEYS = {
    "collaboration_type": "collaborationType",
    "difficulty": "difficulty",
    "skills": "skills",
    "duration": "duration",
    "location": "location",
    "compensation": "compensation",
    "sort_by": "sortBy",
}


@dataclass(frozen=True)
class ProjectFilters:
    collaboration_type: Optional[List[str]] = None
    difficulty: Optional[List[str]] = None
    skills: Optional[List[str]] = None
    duration: Optional[str] = None
    location: Optional[str] = None
    compensation: Optional[bool] = None
    sort_by: Optional[str] = None

    def __post_init__(self):
        require_valid(validate_filters(asdict(self)))

    def merged(self, **changes) -> "ProjectFilters":
        """Shallow merge: each given field replaces the previous value whole."""
        return replace(self, **changes)

    def to_payload(self) -> Dict[str, Any]:
        """camelCase dict for the HTTP API, absent facets omitted."""
        return {
            _PAYLOAD_KEYS[k]: v for k, v in asdict(self).items() if v is not None
        }

    def matches(self, record: Dict[str, Any]) -> bool:
        if self.collaboration_type and record.get("collaborationType") not in self.collaboration_type:
            return False
        if self.difficulty and record.get("difficulty") not in self.difficulty:
            return False
        if self.skills:
            wanted = {s.lower() for s in self.skills}
            offered = {
                s.lower()
                for s in (record.get("skillsRequired") or []) + (record.get("skillsPreferred") or [])
            }
            if not wanted & offered:
                return False
        if self.duration and record.get("duration") != self.duration:
            return False
        if self.location:
            where = (record.get("organization") or {}).get("location") or ""
            if self.location.lower() not in where.lower():
                return False
        if self.compensation and not record.get("compensation"):
            return False
        return True

    def apply(self, records: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        """Filter then sort records according to the present facets."""
        result = [r for r in records if self.matches(r)]
        if self.sort_by == "match_score":
            result.sort(key=lambda r: r.get("matchScore", 0), reverse=True)
        elif self.sort_by == "date":
            # Missing deadlines go last
            result.sort(key=lambda r: (r.get("deadline") is None, r.get("deadline") or ""))
        return result
