"""Exceptions raised at external-service boundaries."""


class UpstreamUnavailableError(RuntimeError):
    """An upstream service (news API, LLM) could not produce a usable response.

    Args:
        service: Name of the upstream service.
        reason: Short failure cause, e.g. ``"timeout"`` or ``"http 503"``.
    """

    def __init__(self, service: str, reason: str) -> None:
        super().__init__(f"{service} unavailable: {reason}")
        self.service = service
        self.reason = reason


class MissingCredentialError(UpstreamUnavailableError):
    """No API key was configured for an upstream service."""

    def __init__(self, service: str, env_var: str) -> None:
        super().__init__(service, f"{env_var} is not set")
        self.env_var = env_var
