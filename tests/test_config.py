"""Tests for configuration loading and factory functions."""

from pathlib import Path
from tempfile import NamedTemporaryFile

import pytest
from pydantic import ValidationError

from newsintel.briefing import BriefingService
from newsintel.config import (
    BriefingConfig,
    ClaudeCompletionConfig,
    GroqCompletionConfig,
    NewsAPIConfig,
    NewsIntelConfig,
    create_from_config,
    get_default_config_path,
    load_config,
)
from newsintel.config.factory import create_completion, create_news_fetcher
from newsintel.llm import ClaudeCompletion, GroqCompletion
from newsintel.news import NewsAPIClient
from newsintel.search import KeywordSearchIndex, get_search_index


class TestConfigModels:
    """Tests for Pydantic config models."""

    def test_news_config_defaults(self) -> None:
        config = NewsAPIConfig()
        assert config.type == "newsapi"
        assert config.country == "us"
        assert config.timeout_seconds == 30.0

    def test_claude_config_defaults(self) -> None:
        config = ClaudeCompletionConfig()
        assert config.type == "claude"
        assert config.model == "claude-haiku-4-5-20251001"
        assert config.temperature == 0.5

    def test_groq_config_defaults(self) -> None:
        config = GroqCompletionConfig()
        assert config.type == "groq"
        assert config.model == "llama-3.1-8b-instant"

    def test_briefing_config_defaults(self) -> None:
        config = BriefingConfig()
        assert config.context_limit == 10
        assert config.related_k == 3
        assert config.articles_per_perspective == 5

    def test_root_defaults(self) -> None:
        config = NewsIntelConfig()
        assert isinstance(config.completion, ClaudeCompletionConfig)

    def test_completion_discriminator(self) -> None:
        config = NewsIntelConfig.model_validate({"completion": {"type": "groq"}})
        assert isinstance(config.completion, GroqCompletionConfig)

    def test_rejects_unknown_completion_type(self) -> None:
        with pytest.raises(ValidationError):
            NewsIntelConfig.model_validate({"completion": {"type": "gpt"}})

    def test_rejects_invalid_values(self) -> None:
        with pytest.raises(ValidationError):
            BriefingConfig(context_limit=0)
        with pytest.raises(ValidationError):
            NewsAPIConfig(timeout_seconds=-1)
        with pytest.raises(ValidationError):
            ClaudeCompletionConfig(temperature=1.5)

    def test_frozen(self) -> None:
        config = BriefingConfig()
        with pytest.raises(ValidationError):
            config.context_limit = 3  # type: ignore[misc]


class TestConfigLoading:
    """Tests for YAML loading."""

    def test_load_config(self) -> None:
        yaml_content = """
news:
  type: newsapi
  country: gb
completion:
  type: groq
  temperature: 1.2
briefing:
  context_limit: 6
"""
        with NamedTemporaryFile(mode="w", suffix=".yaml", delete=False) as f:
            f.write(yaml_content)
            f.flush()
            config = load_config(f.name)

        assert config.news.country == "gb"
        assert isinstance(config.completion, GroqCompletionConfig)
        assert config.completion.temperature == 1.2
        assert config.briefing.context_limit == 6
        assert config.briefing.related_k == 3

    def test_load_empty_config(self, tmp_path: Path) -> None:
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert load_config(path) == NewsIntelConfig()

    def test_load_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "missing.yaml")

    def test_get_default_config_path(self) -> None:
        path = get_default_config_path()
        assert path.name == "default.yaml"
        assert path.parent.name == "configs"

    def test_load_default_config(self) -> None:
        config = load_config(get_default_config_path())
        assert isinstance(config.completion, ClaudeCompletionConfig)
        assert config.briefing.context_limit == 10

    def test_load_config_without_path_uses_default(self) -> None:
        assert load_config() == load_config(get_default_config_path())

    def test_load_config_rejects_non_mapping(self, tmp_path: Path) -> None:
        path = tmp_path / "list.yaml"
        path.write_text("- news\n- completion\n")
        with pytest.raises(ValueError, match="must be a mapping"):
            load_config(path)

    def test_partial_config_keeps_section_defaults(self, tmp_path: Path) -> None:
        path = tmp_path / "partial.yaml"
        path.write_text("briefing:\n  related_k: 0\n")
        config = load_config(path)
        assert config.briefing.related_k == 0
        assert config.briefing.context_limit == 10
        assert config.news == NewsAPIConfig()


class TestFactory:
    """Tests for factory functions."""

    def test_create_news_fetcher(self) -> None:
        fetcher = create_news_fetcher(NewsAPIConfig(country="gb", timeout_seconds=5))
        assert isinstance(fetcher, NewsAPIClient)
        assert fetcher._country == "gb"
        assert fetcher._timeout == 5

    def test_create_completion_claude(self) -> None:
        assert isinstance(create_completion(ClaudeCompletionConfig()), ClaudeCompletion)

    def test_create_completion_groq(self) -> None:
        completion = create_completion(GroqCompletionConfig(model="llama-3.3-70b-versatile"))
        assert isinstance(completion, GroqCompletion)
        assert completion._model == "llama-3.3-70b-versatile"

    def test_create_completion_unknown(self) -> None:
        with pytest.raises(ValueError, match="Unknown completion config type"):
            create_completion(BriefingConfig())  # type: ignore[arg-type]

    def test_create_from_config(self) -> None:
        index = KeywordSearchIndex()
        service = create_from_config(
            NewsIntelConfig(briefing=BriefingConfig(context_limit=4)), index=index
        )
        assert isinstance(service, BriefingService)
        assert service._index is index
        assert service._context_limit == 4

    def test_create_from_config_uses_shared_index(self) -> None:
        service = create_from_config(NewsIntelConfig())
        assert service._index is get_search_index()
