"""Gemini (Google Generative Language) LLM Client"""

import os
import json
import http.client
import urllib.parse
import urllib.request
import urllib.error
from dataclasses import dataclass, field

from gemini_commit.llm.base import LLMClient, LLMResponse, LLMError, sanitize_commit_message


@dataclass
class Part:
    text: str = ""


@dataclass
class Content:
    parts: list[Part] = field(default_factory=list)


@dataclass
class GenerateContentRequest:
    """Body of a generateContent call: one content holding one text part."""
    contents: list[Content] = field(default_factory=list)

    @classmethod
    def from_prompt(cls, prompt: str) -> 'GenerateContentRequest':
        return cls(contents=[Content(parts=[Part(text=prompt)])])

    def to_dict(self) -> dict:
        return {
            "contents": [
                {"parts": [{"text": part.text} for part in content.parts]}
                for content in self.contents
            ]
        }


@dataclass
class Candidate:
    content: Content = field(default_factory=Content)


@dataclass
class GenerateContentResponse:
    """Parsed generateContent reply. Missing keys become empty lists, null text becomes ''.

    Raises ValueError when a candidate, content or part has the wrong JSON type.
    """
    candidates: list[Candidate] = field(default_factory=list)
    total_tokens: int = 0

    @staticmethod
    def _expect(value, kind: type, what: str):
        if not isinstance(value, kind):
            raise ValueError(f"expected {what} to be a {kind.__name__}, got {type(value).__name__}")
        return value

    @classmethod
    def from_dict(cls, data: dict) -> 'GenerateContentResponse':
        candidates = []
        for raw in cls._expect(data.get("candidates") or [], list, "candidates"):
            content = cls._expect(cls._expect(raw, dict, "candidate").get("content") or {}, dict, "content")
            parts = []
            for p in cls._expect(content.get("parts") or [], list, "parts"):
                text = cls._expect(cls._expect(p, dict, "part").get("text") or "", str, "text")
                parts.append(Part(text=text))
            candidates.append(Candidate(content=Content(parts=parts)))

        usage = data.get("usageMetadata")
        total_tokens = usage.get("totalTokenCount", 0) if isinstance(usage, dict) else 0
        return cls(candidates=candidates, total_tokens=total_tokens)

    def first_text(self) -> str | None:
        """Text of the first candidate's first part, or None if there is none."""
        if not self.candidates or not self.candidates[0].content.parts:
            return None
        return self.candidates[0].content.parts[0].text


class GeminiClient(LLMClient):
    """Gemini API client. Requires GEMINI_API_KEY env var."""

    DEFAULT_MODEL = "gemini-1.5-flash-latest"
    DEFAULT_HOST = "https://generativelanguage.googleapis.com"
    API_VERSION = "v1beta"

    def __init__(self, api_key: str | None = None, model: str | None = None, host: str | None = None):
        self.api_key = api_key or os.environ.get("GEMINI_API_KEY")
        self.model = model or self.DEFAULT_MODEL
        self.host = (host or self.DEFAULT_HOST).rstrip('/')

        if not self.api_key:
            raise LLMError(
                "GEMINI_API_KEY environment variable is required:\n"
                "  export GEMINI_API_KEY='your-key-here'"
            )

    @property
    def name(self) -> str:
        return f"Gemini ({self.model})"

    @property
    def url(self) -> str:
        query = urllib.parse.urlencode({"key": self.api_key})
        return f"{self.host}/{self.API_VERSION}/models/{self.model}:generateContent?{query}"

    def _call_api(self, prompt: str) -> dict:
        """POST a single generateContent request and return the decoded JSON body."""
        data = json.dumps(GenerateContentRequest.from_prompt(prompt).to_dict()).encode('utf-8')
        req = urllib.request.Request(self.url, data=data, method="POST", headers={"Content-Type": "application/json"})

        with urllib.request.urlopen(req) as response:
            body = response.read().decode('utf-8', errors='replace')
            if response.status != 200:
                raise LLMError(f"Gemini API error (status {response.status}): {body}")

        try:
            return json.loads(body)
        except json.JSONDecodeError as e:
            raise LLMError(f"Invalid JSON response from Gemini: {e}")

    def generate(self, prompt: str) -> LLMResponse:
        """Ask Gemini for a commit message. One request, no retries."""
        try:
            result = self._call_api(prompt)
        except urllib.error.HTTPError as e:
            body = e.read().decode('utf-8', errors='replace')
            raise LLMError(f"Gemini API error (status {e.code}): {body}")
        except urllib.error.URLError as e:
            raise LLMError(f"API call failed: {e.reason}")
        except http.client.HTTPException as e:
            raise LLMError(f"API call failed: incomplete response ({e})")
        except OSError as e:
            raise LLMError(f"API call failed: {e}")

        if not isinstance(result, dict):
            raise LLMError(f"Invalid response from Gemini: expected a JSON object, got {type(result).__name__}")
        try:
            parsed = GenerateContentResponse.from_dict(result)
        except ValueError as e:
            raise LLMError(f"Invalid response from Gemini: {e}")

        text = parsed.first_text()
        if text is None:
            raise LLMError("no response from Gemini")

        return LLMResponse(
            content=sanitize_commit_message(text),
            model=self.model,
            tokens_used=parsed.total_tokens
        )
