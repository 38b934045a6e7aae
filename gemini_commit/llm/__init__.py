"""LLM Client Package"""

from gemini_commit.llm.base import LLMClient, LLMResponse, LLMError, sanitize_commit_message
from gemini_commit.llm.gemini import GeminiClient, GenerateContentRequest, GenerateContentResponse

__all__ = [
    "LLMClient",
    "LLMResponse",
    "LLMError",
    "GeminiClient",
    "GenerateContentRequest",
    "GenerateContentResponse",
    "sanitize_commit_message",
]
