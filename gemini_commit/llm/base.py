"""LLM Base Classes and Shared Code"""

from abc import ABC, abstractmethod
from dataclasses import dataclass

QUOTE_CHARS = "\"'"


def sanitize_commit_message(text: str) -> str:
    """Strip surrounding whitespace, then any leading/trailing quote characters.

    Quotes are stripped as a character set, so a lone leading or trailing
    quote is removed too.
    """
    return text.strip().strip(QUOTE_CHARS)


@dataclass
class LLMResponse:
    """Structured response from any LLM provider."""
    content: str
    model: str = ""
    tokens_used: int = 0


class LLMError(Exception):
    """Raised when LLM operations fail."""
    pass


class LLMClient(ABC):
    """Abstract base for LLM clients."""

    @abstractmethod
    def generate(self, prompt: str) -> LLMResponse:
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        pass
