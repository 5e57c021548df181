"""Protocol and failure handling shared by LLM completion backends."""

import logging
from collections.abc import Awaitable, Callable
from typing import Protocol

from newsintel.errors import MissingCredentialError, UpstreamUnavailableError

logger = logging.getLogger(__name__)

ERROR_PREFIX = "Error: "
UPSTREAM_ERROR_MESSAGE = f"{ERROR_PREFIX}The language model is unavailable. Try again later."


class ChatCompletion(Protocol):
    """Interface for single-turn chat completions."""

    async def complete(self, system_prompt: str, user_prompt: str) -> str:
        """Complete a prompt.

        Args:
            system_prompt: Instructions for the model.
            user_prompt: The user turn.

        Returns:
            Free-text completion, or a sentinel string starting with
            ``"Error: "`` when the backend is unconfigured or unavailable.
        """
        ...


def missing_key_message(env_var: str) -> str:
    return f"{ERROR_PREFIX}{env_var} is not set. Cannot generate a response."


def is_error_message(text: str) -> bool:
    """Whether a completion is one of the sentinel error strings."""
    return text.startswith(ERROR_PREFIX)


async def complete_or_sentinel(service: str, call: Callable[[], Awaitable[str]]) -> str:
    """Run a completion call, converting upstream failures to sentinel text."""
    try:
        return await call()
    except MissingCredentialError as e:
        logger.warning(f"{service} completion skipped: {e.env_var} is not set")
        return missing_key_message(e.env_var)
    except UpstreamUnavailableError as e:
        logger.error(f"{service} completion failed ({e.reason})")
        return UPSTREAM_ERROR_MESSAGE
