"""Chat-completion client for OpenRouter's OpenAI-compatible endpoint."""

import os
from typing import Any, Dict, List, Optional

from openai import APIConnectionError, InternalServerError, OpenAI, OpenAIError
from tenacity import retry, retry_if_exception_type, stop_after_attempt, wait_exponential

from worksheet.common.errors import ConfigurationError, EmptyResponseError, TranslationRequestError
from worksheet.common.logging import log_debug


OPENROUTER_BASE_URL = "https://openrouter.ai/api/v1"
DEFAULT_MODEL = "allenai/molmo-7b-d:free"
DEFAULT_TIMEOUT_S = 30.0


class OpenRouterClient:
    def __init__(
        self,
        model: Optional[str] = None,
        timeout: float = DEFAULT_TIMEOUT_S,
        client: Any = None,
        debug: bool = False,
    ) -> None:
        self.model = model or os.environ.get("OPENROUTER_MODEL", DEFAULT_MODEL)
        self.timeout = timeout
        self.debug = debug
        api_key = os.environ.get("OPENROUTER_API_KEY")
        if not api_key:
            raise ConfigurationError("OPENROUTER_API_KEY is not set in environment")
        if client is None:
            # Retries are handled below so the SDK must not add its own
            client = OpenAI(api_key=api_key, base_url=OPENROUTER_BASE_URL, timeout=timeout, max_retries=0)
        self.client = client

    @retry(
        reraise=True,
        stop=stop_after_attempt(2),
        wait=wait_exponential(multiplier=1, min=1, max=4),
        retry=retry_if_exception_type((APIConnectionError, InternalServerError)),
    )
    def _create(self, messages: List[Dict[str, str]], timeout: float) -> Any:
        """One chat-completion request; retried once on transient failures."""
        return self.client.chat.completions.create(
            model=self.model,
            messages=messages,
            timeout=timeout,
        )

    def complete_text(self, user: str, timeout: Optional[float] = None) -> str:
        """Send a single user message and return the reply text.

        Args:
            user: Message content
            timeout: Per-call deadline in seconds (defaults to the client timeout)

        Raises TranslationRequestError on transport, status or envelope
        failures and EmptyResponseError when no choices come back.
        """
        messages = [{"role": "user", "content": user}]
        log_debug(self.debug, f"Request model={self.model} messages={messages}")
        try:
            resp = self._create(messages, timeout if timeout is not None else self.timeout)
        except OpenAIError as e:
            raise TranslationRequestError(f"Chat completion request failed: {e}") from e
        except ValueError as e:
            # Malformed JSON envelope
            raise TranslationRequestError(f"Could not decode chat completion response: {e}") from e

        choices = _field(resp, "choices")
        if not isinstance(choices, list):
            # e.g. an HTML error page or {"error": ...} served with status 200
            raise TranslationRequestError(f"Malformed chat completion response: {resp!r:.200}")
        if not choices:
            raise EmptyResponseError("No choices in chat completion response")
        message = _field(choices[0], "message")
        text = _field(message, "content")
        if not isinstance(text, str):
            raise TranslationRequestError(f"Chat completion choice has no message content: {choices[0]!r:.200}")
        log_debug(self.debug, f"Reply content: {text!r}")
        return text


def _field(obj: Any, name: str) -> Any:
    """Read a response field from an SDK model or a plain dict."""
    if isinstance(obj, dict):
        return obj.get(name)
    return getattr(obj, name, None)
