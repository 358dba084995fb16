"""
Configuration file handling.

The file is JSON, by default at ~/.my-assistant/config.json:

    {
      "agent": {"provider": "glm", "apiKey": "", "model": "glm-4.6", "baseURL": "..."},
      "channels": [],
      "logLevel": "info"
    }

For the glm provider, GLM_API_KEY and GLM_URL (environment or .env) take
precedence over apiKey and baseURL.
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import List, Literal, Optional, Union

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, ConfigDict, Field, ValidationError


class ConfigError(RuntimeError):
    pass


class AgentConfig(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    provider: Literal["anthropic", "openai", "google", "glm"]
    api_key: str = Field(default="", alias="apiKey")
    model: str
    base_url: Optional[str] = Field(default=None, alias="baseURL")  # GLM and other custom endpoints


class ChannelConfig(BaseModel):
    platform: Literal["discord", "slack"]
    token: str
    enabled: bool = False


class Config(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    agent: AgentConfig
    channels: List[ChannelConfig] = Field(default_factory=list)
    log_level: Literal["debug", "info", "warn", "error"] = Field(default="info", alias="logLevel")

    def masked_api_key(self) -> str:
        key = self.agent.api_key
        return f"{key[:8]}..." if key else "not set"


def default_config() -> Config:
    return Config(
        agent=AgentConfig(provider="anthropic", api_key="", model="claude-3-5-sonnet-20241022"),
        channels=[],
        log_level="info",
    )


def default_config_path() -> Path:
    home = os.getenv("HOME") or os.getenv("USERPROFILE") or "."
    return Path(home) / ".my-assistant" / "config.json"


def _apply_env_overrides(cfg: Config) -> Config:
    if cfg.agent.provider != "glm":
        return cfg
    api_key = os.getenv("GLM_API_KEY")
    base_url = os.getenv("GLM_URL")
    updates = {}
    if api_key:
        updates["api_key"] = api_key
    if base_url:
        updates["base_url"] = base_url
    if not updates:
        return cfg
    return cfg.model_copy(update={"agent": cfg.agent.model_copy(update=updates)})


def load_config(path: Union[str, Path, None] = None) -> Config:
    load_dotenv(find_dotenv(usecwd=True))

    p = Path(path) if path is not None else default_config_path()
    if not p.exists():
        raise ConfigError(f"Config file not found: {p}")

    try:
        raw = json.loads(p.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in config file {p}: {e}") from e

    try:
        cfg = Config.model_validate(raw)
    except ValidationError as e:
        raise ConfigError(f"Invalid config file {p}: {e}") from e

    return _apply_env_overrides(cfg)
