"""Application configuration loaded from config.yaml and the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

import yaml

DEFAULT_MODEL = "claude-haiku-4-5-20251001"
MODEL_ENV_VAR = "ANTHROPIC_MODEL"


@dataclass(frozen=True)
class LLMConfig:
    model: str = DEFAULT_MODEL
    max_tokens: int = 4096
    temperature: float = 0.2
    timeout: int = 120

    def __post_init__(self):
        if self.timeout < 1:
            raise ValueError(f"llm.timeout must be >= 1, got {self.timeout}")
        if self.max_tokens < 1:
            raise ValueError(f"llm.max_tokens must be >= 1, got {self.max_tokens}")
        if not 0.0 <= self.temperature <= 1.0:
            raise ValueError(f"llm.temperature must be within 0..1, got {self.temperature}")


@dataclass(frozen=True)
class TorreConfig:
    search_url: str = "https://search.torre.co/opportunities/_search"
    job_url: str = "https://torre.ai/api/suite/opportunities"
    genome_url: str = "https://torre.ai/api/genome/bios"
    default_size: int = 10
    currency: str = "USD"
    periodicity: str = "hourly"
    lang: str = "en"
    timeout: int = 30

    def __post_init__(self):
        if not 1 <= self.default_size <= 100:
            raise ValueError(f"torre.default_size must be within 1..100, got {self.default_size}")
        if self.timeout < 1:
            raise ValueError(f"torre.timeout must be >= 1, got {self.timeout}")


@dataclass(frozen=True)
class ApiConfig:
    allowed_origins: tuple[str, ...] = ("http://localhost:3000", "http://localhost:8501")
    log_level: str = "INFO"
    host: str = "127.0.0.1"
    port: int = 8000

    def __post_init__(self):
        if not 1 <= self.port <= 65535:
            raise ValueError(f"api.port must be within 1..65535, got {self.port}")
        # YAML lists arrive as lists; keep the dataclass hashable
        object.__setattr__(self, "allowed_origins", tuple(self.allowed_origins))


@dataclass(frozen=True)
class AppConfig:
    llm: LLMConfig = field(default_factory=LLMConfig)
    torre: TorreConfig = field(default_factory=TorreConfig)
    api: ApiConfig = field(default_factory=ApiConfig)


def load_config(path: str | Path | None = None) -> AppConfig:
    """Load config from YAML file, falling back to defaults.

    ANTHROPIC_MODEL overrides ``llm.model`` when set.
    """
    if path is None:
        # Look for config.yaml relative to the project root
        candidates = [
            Path.cwd() / "config.yaml",
            Path(__file__).resolve().parent.parent.parent / "config.yaml",
        ]
        for c in candidates:
            if c.exists():
                path = c
                break

    raw: dict = {}
    if path is not None:
        p = Path(path)
        if p.exists():
            raw = yaml.safe_load(p.read_text()) or {}

    llm_raw = dict(raw.get("llm", {}))
    env_model = os.environ.get(MODEL_ENV_VAR)
    if env_model:
        llm_raw["model"] = env_model

    return AppConfig(
        llm=LLMConfig(**llm_raw),
        torre=TorreConfig(**raw.get("torre", {})),
        api=ApiConfig(**raw.get("api", {})),
    )
