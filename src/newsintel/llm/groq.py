"""Groq-backed chat completion over its OpenAI-compatible HTTP API."""

import os

import httpx

from newsintel.errors import MissingCredentialError, UpstreamUnavailableError
from newsintel.llm.base import complete_or_sentinel

API_KEY_ENV_VAR = "GROQ_API_KEY"
GROQ_CHAT_URL = "https://api.groq.com/openai/v1/chat/completions"


class GroqCompletion:
    """Complete prompts with a Groq-hosted model.

    Args:
        model: Groq model ID.
        api_key: API key (defaults to GROQ_API_KEY env var).
        max_tokens: Maximum tokens in the completion.
        temperature: Sampling temperature.
        timeout: Request timeout in seconds.
    """

    def __init__(
        self,
        *,
        model: str = "llama-3.1-8b-instant",
        api_key: str | None = None,
        max_tokens: int = 2048,
        temperature: float = 0.5,
        timeout: float = 60.0,
    ) -> None:
        self._model = model
        self._api_key = api_key or os.environ.get(API_KEY_ENV_VAR)
        self._max_tokens = max_tokens
        self._temperature = temperature
        self._timeout = timeout

    async def complete(self, system_prompt: str, user_prompt: str) -> str:
        return await complete_or_sentinel(
            "groq", lambda: self._create(system_prompt, user_prompt)
        )

    async def _create(self, system_prompt: str, user_prompt: str) -> str:
        if not self._api_key:
            raise MissingCredentialError("groq", API_KEY_ENV_VAR)

        payload = {
            "model": self._model,
            "max_tokens": self._max_tokens,
            "temperature": self._temperature,
            "messages": [
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": user_prompt},
            ],
        }
        headers = {"Authorization": f"Bearer {self._api_key}"}
        try:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                response = await client.post(GROQ_CHAT_URL, json=payload, headers=headers)
                response.raise_for_status()
                data = response.json()
        except httpx.TimeoutException as e:
            raise UpstreamUnavailableError("groq", "timeout") from e
        except httpx.HTTPStatusError as e:
            raise UpstreamUnavailableError("groq", f"http {e.response.status_code}") from e
        except httpx.RequestError as e:
            raise UpstreamUnavailableError("groq", f"transport error: {e}") from e
        except ValueError as e:
            raise UpstreamUnavailableError("groq", "malformed payload") from e

        try:
            return str(data["choices"][0]["message"]["content"] or "")
        except (KeyError, IndexError, TypeError) as e:
            raise UpstreamUnavailableError("groq", "malformed payload") from e
