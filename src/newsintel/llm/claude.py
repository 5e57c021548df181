"""Claude-backed chat completion."""

import os

import anthropic

from newsintel.errors import MissingCredentialError, UpstreamUnavailableError
from newsintel.llm.base import complete_or_sentinel

API_KEY_ENV_VAR = "CLAUDE_API_KEY"


class ClaudeCompletion:
    """Complete prompts with Anthropic's Claude API.

    Args:
        model: Anthropic model ID to use.
        api_key: API key (defaults to CLAUDE_API_KEY env var).
        max_tokens: Maximum tokens in the completion.
        temperature: Sampling temperature.
        timeout: Request timeout in seconds.
    """

    def __init__(
        self,
        *,
        model: str = "claude-haiku-4-5-20251001",
        api_key: str | None = None,
        max_tokens: int = 2048,
        temperature: float = 0.5,
        timeout: float = 60.0,
    ) -> None:
        self._model = model
        self._max_tokens = max_tokens
        self._temperature = temperature
        resolved_key = api_key or os.environ.get(API_KEY_ENV_VAR)
        # No client without a key; complete() reports the missing credential
        self._client = (
            anthropic.AsyncAnthropic(api_key=resolved_key, timeout=timeout)
            if resolved_key
            else None
        )

    async def complete(self, system_prompt: str, user_prompt: str) -> str:
        return await complete_or_sentinel(
            "claude", lambda: self._create(system_prompt, user_prompt)
        )

    async def _create(self, system_prompt: str, user_prompt: str) -> str:
        if self._client is None:
            raise MissingCredentialError("claude", API_KEY_ENV_VAR)

        try:
            response = await self._client.messages.create(
                model=self._model,
                max_tokens=self._max_tokens,
                temperature=self._temperature,
                system=system_prompt,
                messages=[{"role": "user", "content": user_prompt}],
            )
        except anthropic.APITimeoutError as e:
            raise UpstreamUnavailableError("claude", "timeout") from e
        except anthropic.APIStatusError as e:
            raise UpstreamUnavailableError("claude", f"http {e.status_code}") from e
        except anthropic.APIConnectionError as e:
            raise UpstreamUnavailableError("claude", "connection error") from e

        response_text = ""
        for block in response.content:
            if hasattr(block, "text"):
                response_text += block.text
        return response_text
