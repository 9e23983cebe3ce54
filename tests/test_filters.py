"""
Tests for project suggestion filters.
"""

import pytest

from scholarmatch.errors import ValidationError
from scholarmatch.filters import ProjectFilters
from scholarmatch.services.samples import SAMPLE_PROJECTS, fresh


@pytest.fixture
def projects():
    return fresh(SAMPLE_PROJECTS)


def ids(records):
    return [r["id"] for r in records]


class TestMatching:
    """Test each facet narrows independently."""

    def test_no_filters_keeps_everything(self, projects):
        assert ids(ProjectFilters().apply(projects)) == ids(projects)

    def test_empty_list_is_no_narrowing(self, projects):
        assert len(ProjectFilters(difficulty=[], skills=[]).apply(projects)) == len(projects)

    def test_difficulty(self, projects):
        result = ProjectFilters(difficulty=["Advanced"]).apply(projects)
        assert result
        assert all(r["difficulty"] == "Advanced" for r in result)

    def test_collaboration_type(self, projects):
        result = ProjectFilters(collaboration_type=["Academic"]).apply(projects)
        assert ids(result) == ["proj_3"]

    def test_skills_case_insensitive_overlap(self, projects):
        result = ProjectFilters(skills=["pytorch"]).apply(projects)
        # proj_1 prefers PyTorch, proj_4 requires it
        assert ids(result) == ["proj_1", "proj_4"]

    def test_location_substring(self, projects):
        result = ProjectFilters(location="san francisco").apply(projects)
        assert ids(result) == ["proj_2"]

    def test_compensation(self, projects):
        result = ProjectFilters(compensation=True).apply(projects)
        assert "proj_3" not in ids(result)

    def test_duration(self, projects):
        result = ProjectFilters(duration="12-18 months").apply(projects)
        assert ids(result) == ["proj_1", "proj_4"]

    def test_facets_combine(self, projects):
        result = ProjectFilters(difficulty=["Advanced"], collaboration_type=["Industry"]).apply(projects)
        assert ids(result) == ["proj_4"]


class TestSorting:
    """Test sort orders."""

    def test_match_score_descending(self, projects):
        result = ProjectFilters(sort_by="match_score").apply(projects)
        scores = [r["matchScore"] for r in result]
        assert scores == sorted(scores, reverse=True)

    def test_date_ascending_missing_last(self, projects):
        result = ProjectFilters(sort_by="date").apply(projects)
        assert ids(result) == ["proj_2", "proj_1", "proj_4", "proj_3"]


class TestMergeAndPayload:
    """Test shallow merge and HTTP payload rendering."""

    def test_merge_replaces_whole_fields(self):
        base = ProjectFilters(difficulty=["Advanced"], skills=["Python"])
        merged = base.merged(difficulty=["Beginner"])
        assert merged.difficulty == ["Beginner"]
        assert merged.skills == ["Python"]
        assert base.difficulty == ["Advanced"]

    def test_merge_can_clear_a_facet(self):
        merged = ProjectFilters(location="Boston").merged(location=None)
        assert merged.location is None

    def test_payload_uses_api_keys(self):
        payload = ProjectFilters(collaboration_type=["Research"], sort_by="date").to_payload()
        assert payload == {"collaborationType": ["Research"], "sortBy": "date"}

    def test_invalid_facet_rejected(self):
        with pytest.raises(ValidationError):
            ProjectFilters(difficulty=["Expert"])

    def test_bare_string_skills_rejected(self):
        with pytest.raises(ValidationError, match="list of strings"):
            ProjectFilters(skills="Python")

    def test_bare_string_difficulty_names_the_field(self):
        with pytest.raises(ValidationError, match="'difficulty'"):
            ProjectFilters(difficulty="Advanced")
