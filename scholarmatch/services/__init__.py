"""Operation contracts and the capability services behind them."""

from .common import UploadedFile
from .projects import (
    HttpSuggestionService,
    MockSuggestionService,
    SuggestionService,
    apply_to_project,
    bookmark_project,
    get_project,
    get_suggestions,
)
from .resume import (
    HttpResumeExtractionService,
    MockResumeExtractionService,
    ResumeExtractionService,
    get_resume,
    update_resume,
    upload_resume,
)
from .scholar import (
    AcademicProfileService,
    HttpAcademicProfileService,
    MockAcademicProfileService,
    fetch_profile,
    get_profile,
    refresh_profile,
)

__all__ = [
    "UploadedFile",
    "AcademicProfileService",
    "HttpAcademicProfileService",
    "MockAcademicProfileService",
    "fetch_profile",
    "get_profile",
    "refresh_profile",
    "ResumeExtractionService",
    "HttpResumeExtractionService",
    "MockResumeExtractionService",
    "upload_resume",
    "get_resume",
    "update_resume",
    "SuggestionService",
    "HttpSuggestionService",
    "MockSuggestionService",
    "get_suggestions",
    "get_project",
    "bookmark_project",
    "apply_to_project",
]
