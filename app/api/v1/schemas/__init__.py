from app.api.v1.schemas.cv import LatexRequest, LatexResponse, RenderResponse
from app.api.v1.schemas.jobs import (
    CoverLetterResponse,
    FeedIngestRequest,
    FeedSelectRequest,
    FeedSelectResponse,
    GeneratedJobsResponse,
    JobDetailsResponse,
    JobRequest,
    JobSearchRequest,
    JobSearchResponse,
    JobSourceRequest,
    MatchResponse,
    PolishRequest,
    PolishResponse,
    SearchLinksRequest,
    SearchLinksResponse,
    TailorResponse,
)
from app.api.v1.schemas.profile import (
    ContactUpdateRequest,
    ProfileImportRequest,
    ProfileImportResponse,
    SectionOrderRequest,
    SectionOrderResponse,
)

__all__ = [
    "ContactUpdateRequest",
    "ProfileImportRequest",
    "ProfileImportResponse",
    "SectionOrderRequest",
    "SectionOrderResponse",
    "RenderResponse",
    "LatexRequest",
    "LatexResponse",
    "JobSourceRequest",
    "JobRequest",
    "MatchResponse",
    "TailorResponse",
    "CoverLetterResponse",
    "PolishRequest",
    "PolishResponse",
    "FeedIngestRequest",
    "JobDetailsResponse",
    "FeedSelectRequest",
    "FeedSelectResponse",
    "JobSearchRequest",
    "JobSearchResponse",
    "GeneratedJobsResponse",
    "SearchLinksRequest",
    "SearchLinksResponse",
]
