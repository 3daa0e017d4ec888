"""Configuration management for Feed Enhancer."""

import logging
from pathlib import Path
from typing import Any, List, Optional

import yaml
from pydantic import BaseModel, Field, validator
from pydantic import ConfigDict, ValidationError, model_validator


logger = logging.getLogger(__name__)

# Alternate spellings accepted in YAML files, mapped onto the canonical keys
KEY_ALIASES = {
    "allowList": ("allow_list", "allow-list", "allowlist", "include"),
    "blockList": ("block_list", "block-list", "blocklist", "exclude"),
    "feedExtensions": ("feed_extensions", "feed-extensions", "extensions"),
    "logLevel": ("log_level", "log-level"),
}


class FilterConfig(BaseModel):
    """Allow-list and block-list configuration for feed filtering."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    allow_list: Optional[List[str]] = Field(default=None, alias="allowList")
    block_list: Optional[List[str]] = Field(default=None, alias="blockList")
    feed_extensions: List[str] = Field(
        default_factory=lambda: [".xml"],
        alias="feedExtensions",
        description="File extensions treated as feed documents",
    )
    log_level: str = Field(default="INFO", alias="logLevel", description="Logging level")

    @model_validator(mode="before")
    @classmethod
    def _apply_key_aliases(cls, data: Any) -> Any:
        """Support snake_case, kebab-case and include/exclude keys."""
        if not isinstance(data, dict):
            return data

        data = data.copy()

        for canonical, aliases in KEY_ALIASES.items():
            if canonical in data:
                continue
            for key in aliases:
                if key in data:
                    data[canonical] = data.pop(key)
                    break

        return data

    @validator('allow_list', 'block_list', pre=True)
    def normalize_terms(cls, value):
        if value is None:
            return None
        if isinstance(value, (str, int, float)):
            value = [value]
        if not isinstance(value, (list, tuple)):
            return value
        # YAML turns bare years and numbers into ints, keep them as terms
        terms = [str(term) for term in value if term is not None and not isinstance(term, (dict, list))]
        return [term for term in terms if term.strip()]

    @validator('feed_extensions', pre=True)
    def normalize_extensions(cls, value):
        if isinstance(value, str):
            value = [value]
        if not isinstance(value, (list, tuple)):
            return value
        normalized = []
        for ext in value:
            ext = str(ext).strip().lower()
            if not ext:
                continue
            normalized.append(ext if ext.startswith(".") else f".{ext}")
        return normalized

    @validator('log_level')
    def validate_log_level(cls, v):
        allowed = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in allowed:
            raise ValueError(f"Log level must be one of {allowed}")
        return v.upper()

    @property
    def has_filters(self) -> bool:
        """Whether either list contains terms."""
        return bool(self.allow_list or self.block_list)


def load_config(config_file: Optional[Path] = None) -> Optional[FilterConfig]:
    """
    Load filter configuration from a YAML file.

    Missing or malformed configuration means "no filtering" and yields None
    instead of raising.

    Args:
        config_file: Optional path to config file

    Returns:
        FilterConfig object, or None when there is nothing usable
    """
    if config_file is None:
        return None

    config_file = Path(config_file)
    if not config_file.exists():
        logger.warning(f"Config file not found, filtering disabled: {config_file}")
        return None

    try:
        with open(config_file, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        logger.warning(f"Error reading config from {config_file}, filtering disabled: {e}")
        return None

    if data is None:
        logger.info(f"Config file {config_file} is empty, filtering disabled")
        return None

    if not isinstance(data, dict):
        logger.warning(f"Config in {config_file} is not a mapping, filtering disabled")
        return None

    try:
        config = FilterConfig(**data)
    except ValidationError as e:
        logger.warning(f"Invalid config in {config_file}, filtering disabled: {e}")
        return None

    logger.debug(f"Loaded config from {config_file}")
    return config


def dump_config(config: FilterConfig) -> str:
    """Serialize a configuration to YAML using the camelCase keys."""
    return yaml.dump(config.dict(by_alias=True), default_flow_style=False, indent=2, sort_keys=False)


def create_example_config() -> str:
    """Create an example configuration YAML string."""
    example_config = FilterConfig(
        allow_list=["tech", "python"],
        block_list=["sponsored", "advertisement"],
        feed_extensions=[".xml", ".rss"],
        log_level="INFO",
    )

    return dump_config(example_config)
