from app.domain.jobs.schemas import JobFeed

JOBS_AC_UK = "https://www.jobs.ac.uk"

UK_LOCATIONS = "UK Locations"
INTERNATIONAL_LOCATIONS = "International Locations"
SUBJECT_AREAS = "Subject Areas"
PROFESSIONAL_SERVICES = "Professional Services"
JOB_LEVELS = "Job Levels"
GENERAL = "General"

ALL_JOBS_FEED_URL = f"{JOBS_AC_UK}/?format=rss"

# (url 경로 조각, 카테고리)
_FEED_SEGMENTS: tuple[tuple[str, str], ...] = (
    ("london", UK_LOCATIONS),
    ("midlands-of-england", UK_LOCATIONS),
    ("northern-england", UK_LOCATIONS),
    ("northern-ireland", UK_LOCATIONS),
    ("scotland", UK_LOCATIONS),
    ("south-east-england", UK_LOCATIONS),
    ("south-west-england", UK_LOCATIONS),
    ("wales", UK_LOCATIONS),
    ("europe", INTERNATIONAL_LOCATIONS),
    ("asia-and-middle-east", INTERNATIONAL_LOCATIONS),
    ("north-south-and-central-america", INTERNATIONAL_LOCATIONS),
    ("australasia", INTERNATIONAL_LOCATIONS),
    ("africa", INTERNATIONAL_LOCATIONS),
    ("biological-sciences", SUBJECT_AREAS),
    ("business-and-management-studies", SUBJECT_AREAS),
    ("computer-sciences", SUBJECT_AREAS),
    ("economics", SUBJECT_AREAS),
    ("engineering-and-technology", SUBJECT_AREAS),
    ("health-and-medical", SUBJECT_AREAS),
    ("law", SUBJECT_AREAS),
    ("mathematics-and-statistics", SUBJECT_AREAS),
    ("physical-and-environmental-sciences", SUBJECT_AREAS),
    ("psychology", SUBJECT_AREAS),
    ("artificial-intelligence", SUBJECT_AREAS),
    ("software-engineering", SUBJECT_AREAS),
    ("cyber-security", SUBJECT_AREAS),
    ("administrative", PROFESSIONAL_SERVICES),
    ("finance-and-procurement", PROFESSIONAL_SERVICES),
    ("human-resources", PROFESSIONAL_SERVICES),
    ("it-services", PROFESSIONAL_SERVICES),
    ("project-management-and-consulting", PROFESSIONAL_SERVICES),
    ("web-design-and-development", PROFESSIONAL_SERVICES),
    ("academic-or-research", JOB_LEVELS),
    ("masters", JOB_LEVELS),
    ("phds", JOB_LEVELS),
    ("professional-or-managerial", JOB_LEVELS),
    ("technical", JOB_LEVELS),
)

NAME_OVERRIDES = {
    "computer-sciences": "Computer Science",
    "phds": "PhDs",
    "it-services": "IT Services",
}


def _feed_name(segment: str) -> str:
    if segment in NAME_OVERRIDES:
        return NAME_OVERRIDES[segment]
    return " ".join(word.capitalize() for word in segment.split("-"))


def _build_catalogue() -> list[JobFeed]:
    feeds = [
        JobFeed(
            name=_feed_name(segment),
            url=f"{JOBS_AC_UK}/jobs/{segment}/?format=rss",
            category=category,
        )
        for segment, category in _FEED_SEGMENTS
    ]
    feeds.append(
        JobFeed(name="All Jobs", url=ALL_JOBS_FEED_URL, category=GENERAL)
    )
    return sorted(feeds, key=lambda f: (f.category, f.name))


JOB_FEEDS: list[JobFeed] = _build_catalogue()


def find_feeds(category: str | None = None) -> list[JobFeed]:
    """카테고리별 피드 조회 - 대소문자 무시, None이면 전체"""
    if not category:
        return list(JOB_FEEDS)
    wanted = category.strip().lower()
    return [feed for feed in JOB_FEEDS if feed.category.lower() == wanted]
