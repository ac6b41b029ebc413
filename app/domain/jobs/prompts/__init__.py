from app.domain.jobs.prompts.feed import (
    EXTRACT_FEED_ITEM_HUMAN,
    EXTRACT_FEED_ITEM_SYSTEM,
    EXTRACT_JOB_DETAILS_HUMAN,
    EXTRACT_JOB_DETAILS_SYSTEM,
)
from app.domain.jobs.prompts.matching import (
    PROFILE_MATCH_HUMAN,
    PROFILE_MATCH_SYSTEM,
    TAILOR_RESUME_HUMAN,
    TAILOR_RESUME_SYSTEM,
)
from app.domain.jobs.prompts.search import (
    FIND_JOBS_HUMAN,
    FIND_JOBS_SYSTEM,
    SEARCH_QUERIES_HUMAN,
    SEARCH_QUERIES_SYSTEM,
    SELECT_JOB_FEED_HUMAN,
    SELECT_JOB_FEED_SYSTEM,
)
from app.domain.jobs.prompts.writing import (
    COVER_LETTER_HUMAN,
    COVER_LETTER_SYSTEM,
    DEFAULT_APPLICANT,
    POLISH_TEXT_HUMAN,
    POLISH_TEXT_SYSTEM,
)

__all__ = [
    "PROFILE_MATCH_SYSTEM",
    "PROFILE_MATCH_HUMAN",
    "TAILOR_RESUME_SYSTEM",
    "TAILOR_RESUME_HUMAN",
    "COVER_LETTER_SYSTEM",
    "COVER_LETTER_HUMAN",
    "DEFAULT_APPLICANT",
    "POLISH_TEXT_SYSTEM",
    "POLISH_TEXT_HUMAN",
    "EXTRACT_FEED_ITEM_SYSTEM",
    "EXTRACT_FEED_ITEM_HUMAN",
    "EXTRACT_JOB_DETAILS_SYSTEM",
    "EXTRACT_JOB_DETAILS_HUMAN",
    "SELECT_JOB_FEED_SYSTEM",
    "SELECT_JOB_FEED_HUMAN",
    "FIND_JOBS_SYSTEM",
    "FIND_JOBS_HUMAN",
    "SEARCH_QUERIES_SYSTEM",
    "SEARCH_QUERIES_HUMAN",
]
