"""Completion provider abstraction with Groq (default) and Google AI implementations."""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass

from codetutor.config.settings import Settings
from codetutor.errors import ProviderError, ProviderErrorKind
from codetutor.utils.cost_tracker import log_cost

logger = logging.getLogger(__name__)

QUOTA_ERROR_CODES = {"insufficient_quota", "rate_limit_exceeded"}


@dataclass(frozen=True)
class ModelParams:
    model: str
    temperature: float
    max_tokens: int


class CompletionProvider(ABC):
    @abstractmethod
    async def complete(self, messages: list[dict], params: ModelParams) -> str:
        """Return the generated reply text. Raises ProviderError on any failure."""
        ...


def _groq_error_code(body) -> str | None:
    if isinstance(body, dict):
        error = body.get("error", body)
        if isinstance(error, dict):
            return error.get("code") or error.get("type")
    return None


def _groq_error_message(exc, body) -> str:
    if isinstance(body, dict):
        error = body.get("error", body)
        if isinstance(error, dict) and error.get("message"):
            return error["message"]
    return getattr(exc, "message", None) or str(exc)


def classify_groq_error(exc: Exception) -> ProviderError:
    """Map a Groq SDK exception onto the provider error taxonomy."""
    import groq

    if isinstance(exc, groq.APIStatusError):
        body = exc.body
        code = _groq_error_code(body)
        kind = (
            ProviderErrorKind.QUOTA_EXCEEDED
            if exc.status_code == 429 or code in QUOTA_ERROR_CODES
            else ProviderErrorKind.OTHER
        )
        return ProviderError(kind, _groq_error_message(exc, body))
    if isinstance(exc, groq.APIError):
        return ProviderError(ProviderErrorKind.OTHER, exc.message)
    return ProviderError(ProviderErrorKind.OTHER, str(exc) or "Failed to get AI guidance")


class GroqClient(CompletionProvider):
    def __init__(self, api_key: str):
        self._api_key = api_key
        self._client = None

    def _get_client(self):
        if not self._api_key:
            raise ProviderError(ProviderErrorKind.OTHER, "GROQ_API_KEY environment variable not set")
        if self._client is None:
            from groq import AsyncGroq
            self._client = AsyncGroq(api_key=self._api_key)
        return self._client

    async def complete(self, messages: list[dict], params: ModelParams) -> str:
        client = self._get_client()
        try:
            response = await client.chat.completions.create(
                model=params.model,
                messages=messages,
                temperature=params.temperature,
                max_tokens=params.max_tokens,
            )
            text = response.choices[0].message.content or ""
            if response.usage:
                log_cost(response.usage.prompt_tokens, response.usage.completion_tokens, params.model)
        except Exception as e:
            raise classify_groq_error(e) from e
        return text


class GoogleAIClient(CompletionProvider):
    def __init__(self, api_key: str, model: str):
        self._api_key = api_key
        self._model = model
        self._genai = None

    def _get_genai(self):
        if not self._api_key:
            raise ProviderError(ProviderErrorKind.OTHER, "GOOGLE_AI_API_KEY environment variable not set")
        if self._genai is None:
            import google.generativeai as genai
            genai.configure(api_key=self._api_key)
            self._genai = genai
        return self._genai

    @staticmethod
    def _convert_messages(messages: list[dict]) -> tuple[str | None, list[dict]]:
        """Convert OpenAI-style messages to Gemini format."""
        system = None
        history = []
        for msg in messages:
            if msg["role"] == "system":
                system = msg["content"]
            else:
                role = "user" if msg["role"] == "user" else "model"
                history.append({"role": role, "parts": [msg["content"]]})
        return system, history

    async def complete(self, messages: list[dict], params: ModelParams) -> str:
        genai = self._get_genai()
        from google.api_core import exceptions as google_exceptions

        system, history = self._convert_messages(messages)
        # Last message is the user prompt; history is everything before
        last = history[-1] if history else {"parts": [""]}
        try:
            gen_model = genai.GenerativeModel(self._model, system_instruction=system)
            chat = gen_model.start_chat(history=history[:-1])
            response = await chat.send_message_async(
                last["parts"][0],
                generation_config=genai.GenerationConfig(
                    temperature=params.temperature,
                    max_output_tokens=params.max_tokens,
                ),
            )
            text = response.text
            if response.usage_metadata:
                log_cost(
                    response.usage_metadata.prompt_token_count,
                    response.usage_metadata.candidates_token_count,
                    self._model,
                )
        except google_exceptions.ResourceExhausted as e:
            raise ProviderError(ProviderErrorKind.QUOTA_EXCEEDED, e.message) from e
        except Exception as e:
            raise ProviderError(ProviderErrorKind.OTHER, str(e) or "Failed to get AI guidance") from e
        return text


def build_provider(settings: Settings) -> CompletionProvider:
    if settings.LLM_PROVIDER == "groq":
        return GroqClient(settings.GROQ_API_KEY)
    if settings.LLM_PROVIDER == "google":
        return GoogleAIClient(settings.GOOGLE_AI_API_KEY, settings.GOOGLE_MODEL)
    raise ValueError(f"Unknown LLM provider: {settings.LLM_PROVIDER}")
