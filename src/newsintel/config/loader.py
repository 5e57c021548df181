"""YAML configuration loading utilities."""

from pathlib import Path

import yaml

from newsintel.config.models import NewsIntelConfig


def load_config(path: Path | str | None = None) -> NewsIntelConfig:
    """Load configuration from YAML file.

    Args:
        path: Path to YAML config file. Defaults to ``configs/default.yaml``.

    Returns:
        Validated NewsIntelConfig. An empty file yields all defaults; omitted
        sections keep their defaults.

    Raises:
        FileNotFoundError: If config file doesn't exist.
        ValueError: If the YAML document is not a mapping.
        pydantic.ValidationError: If config is invalid.
    """
    path = Path(path) if path is not None else get_default_config_path()
    with path.open() as f:
        raw = yaml.safe_load(f)

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ValueError(f"Config root in {path} must be a mapping, got {type(raw).__name__}")

    return NewsIntelConfig.model_validate(raw)


def get_default_config_path() -> Path:
    """Path to ``configs/default.yaml`` at the project root."""
    return Path(__file__).parents[3] / "configs" / "default.yaml"
