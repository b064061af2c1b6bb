"""Application configuration loaded from config.yaml."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import yaml


@dataclass(frozen=True)
class LLMConfig:
    analysis_model: str = "claude-haiku-4-5-20251001"
    generation_model: str = "claude-sonnet-4-5-20250929"
    max_retries: int = 3
    timeout: int = 60
    max_tokens: int = 4096

    def __post_init__(self) -> None:
        if not 1 <= self.max_retries <= 10:
            raise ValueError(f"llm.max_retries must be between 1 and 10, got {self.max_retries}")
        if self.timeout < 1:
            raise ValueError(f"llm.timeout must be at least 1 second, got {self.timeout}")
        if self.max_tokens < 1:
            raise ValueError(f"llm.max_tokens must be positive, got {self.max_tokens}")


@dataclass(frozen=True)
class ValidationConfig:
    min_job_description_length: int = 50
    min_resume_text_length: int = 50
    max_upload_bytes: int = 5 * 1024 * 1024

    def __post_init__(self) -> None:
        if self.min_job_description_length < 1:
            raise ValueError("validation.min_job_description_length must be at least 1")
        if self.min_resume_text_length < 1:
            raise ValueError("validation.min_resume_text_length must be at least 1")
        if self.max_upload_bytes <= 0:
            raise ValueError("validation.max_upload_bytes must be positive")


@dataclass(frozen=True)
class StorageConfig:
    db_path: str = "~/.resume-insights/records.db"
    store_resume_content: bool = False

    @property
    def resolved_db_path(self) -> Path:
        return Path(self.db_path).expanduser()


@dataclass(frozen=True)
class AppConfig:
    llm: LLMConfig = field(default_factory=LLMConfig)
    validation: ValidationConfig = field(default_factory=ValidationConfig)
    storage: StorageConfig = field(default_factory=StorageConfig)


def load_config(path: str | Path | None = None) -> AppConfig:
    """Load config from YAML file, falling back to defaults."""
    if path is None:
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

    return AppConfig(
        llm=LLMConfig(**raw.get("llm", {})),
        validation=ValidationConfig(**raw.get("validation", {})),
        storage=StorageConfig(**raw.get("storage", {})),
    )
