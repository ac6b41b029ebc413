from app.domain.profile.prompts.extraction import EXTRACT_PROFILE_HUMAN, EXTRACT_PROFILE_SYSTEM

__all__ = [
    "EXTRACT_PROFILE_SYSTEM",
    "EXTRACT_PROFILE_HUMAN",
]
