"""Pydantic configuration models for newsintel components."""

from typing import Annotated, Literal

from pydantic import BaseModel, Field

# ============================================================
# News Config
# ============================================================


class NewsAPIConfig(BaseModel):
    """Configuration for NewsAPIClient."""

    type: Literal["newsapi"] = "newsapi"
    country: str = "us"
    base_url: str = "https://newsapi.org/v2"
    timeout_seconds: float = Field(default=30.0, gt=0)

    model_config = {"frozen": True}


# ============================================================
# Completion Configs
# ============================================================


class ClaudeCompletionConfig(BaseModel):
    """Configuration for ClaudeCompletion."""

    type: Literal["claude"] = "claude"
    model: str = "claude-haiku-4-5-20251001"
    max_tokens: int = Field(default=2048, gt=0)
    temperature: float = Field(default=0.5, ge=0.0, le=1.0)
    timeout_seconds: float = Field(default=60.0, gt=0)

    model_config = {"frozen": True}


class GroqCompletionConfig(BaseModel):
    """Configuration for GroqCompletion."""

    type: Literal["groq"] = "groq"
    model: str = "llama-3.1-8b-instant"
    max_tokens: int = Field(default=2048, gt=0)
    temperature: float = Field(default=0.5, ge=0.0, le=2.0)
    timeout_seconds: float = Field(default=60.0, gt=0)

    model_config = {"frozen": True}


CompletionConfig = Annotated[
    ClaudeCompletionConfig | GroqCompletionConfig,
    Field(discriminator="type"),
]


# ============================================================
# Briefing Config
# ============================================================


class BriefingConfig(BaseModel):
    """Context sizes for briefings and perspective views."""

    context_limit: int = Field(default=10, gt=0)
    related_k: int = Field(default=3, ge=0)
    articles_per_perspective: int = Field(default=5, ge=0)

    model_config = {"frozen": True}


# ============================================================
# Root Config
# ============================================================


class NewsIntelConfig(BaseModel):
    """Root configuration for newsintel."""

    news: NewsAPIConfig = Field(default_factory=NewsAPIConfig)
    completion: CompletionConfig = Field(default_factory=ClaudeCompletionConfig)
    briefing: BriefingConfig = Field(default_factory=BriefingConfig)

    model_config = {"frozen": True}
