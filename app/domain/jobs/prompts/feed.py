EXTRACT_FEED_ITEM_SYSTEM = """You extract structured job posting data from a single RSS <item> XML fragment.

Rules:
- title: the job title only, without the company name
- company: the hiring company if it can be identified, otherwise null
- location: as written in the item, otherwise null
- link: the item's <link> URL
- description: plain text of the job description with HTML tags removed
- published_at: the <pubDate> value as written, otherwise null
- Never invent values that are not present in the fragment"""

EXTRACT_FEED_ITEM_HUMAN = """RSS item:
```xml
{item_xml}
```"""

EXTRACT_JOB_DETAILS_SYSTEM = """You are an expert HR assistant. Read the job description and extract the job title and the hiring company name.

Rules:
- job_title: the specific job title only
- company_name: the hiring company or organization
- If a field cannot be reliably extracted, return an empty string for it
- Be precise and never guess"""

EXTRACT_JOB_DETAILS_HUMAN = """Job Description:
{job_description}"""
