from collections.abc import Sequence
from urllib.parse import quote

from app.domain.jobs.schemas import JobSearchLink

# (사이트 이름, 검색 URL 템플릿)
JOB_SITES: tuple[tuple[str, str], ...] = (
    ("Indeed UK", "https://uk.indeed.com/jobs?q={query}"),
    ("Glassdoor UK", "https://www.glassdoor.co.uk/Job/jobs.htm?sc.keyword={query}"),
    ("Jobs.ac.uk", "https://www.jobs.ac.uk/search/?keywords={query}"),
)


def build_search_links(queries: Sequence[str]) -> list[JobSearchLink]:
    """검색어마다 채용 사이트별 검색 링크 생성

    검색어 순서, 사이트 순서를 유지하고 빈 검색어는 건너뛴다.
    """
    links = []
    for query in queries:
        query = query.strip()
        if not query:
            continue
        encoded = quote(query, safe="")
        links.extend(
            JobSearchLink(site_name=name, query=query, url=template.format(query=encoded))
            for name, template in JOB_SITES
        )
    return links
