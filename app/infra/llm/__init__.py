from app.infra.llm.base import BaseLLMClient
from app.infra.llm.client import (
    LLM_CALL_ERRORS,
    calculate_profile_match,
    extract_feed_item,
    extract_job_details,
    extract_profile_from_cv,
    generate_cover_letter,
    generate_job_postings,
    generate_latex_cv,
    polish_text,
    select_job_feed,
    suggest_search_queries,
    suggest_section_order,
    tailor_resume,
)
from app.infra.llm.factory import (
    get_evaluator_client,
    get_generator_client,
    reset_clients,
)
from app.infra.llm.gemini_client import GeminiClient
from app.infra.llm.openai_client import OpenAIClient
from app.infra.llm.vllm_client import VLLMClient

__all__ = [
    "BaseLLMClient",
    "OpenAIClient",
    "VLLMClient",
    "GeminiClient",
    "get_generator_client",
    "get_evaluator_client",
    "reset_clients",
    "LLM_CALL_ERRORS",
    "suggest_section_order",
    "generate_latex_cv",
    "generate_cover_letter",
    "calculate_profile_match",
    "tailor_resume",
    "polish_text",
    "extract_feed_item",
    "extract_profile_from_cv",
    "extract_job_details",
    "select_job_feed",
    "generate_job_postings",
    "suggest_search_queries",
]
