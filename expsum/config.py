"""Configuration management using pydantic-settings."""

from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Vault
    vault_path: Path
    models_folder: str = "models"
    note_extension: str = ".md"

    # Generated summaries (written to the vault root)
    results_file: str = "📊实验结果汇总.md"
    tasks_file: str = "📝任务列表汇总.md"
    results_title: str = "点云分割结果"
    tasks_title: str = "点云分割后续任务"

    # Sections embedded from each experiment note
    results_anchor: str = "实验结果："
    tasks_anchor: str = "后续任务"

    # Diagnostics
    debug_log_file: str = "experiment-collector-debug.log"
    debug_log_enabled: bool = True

    @field_validator("vault_path")
    @classmethod
    def validate_vault_path(cls, v: Path) -> Path:
        """Ensure vault path exists and is a directory."""
        if not v.exists():
            raise ValueError(f"Vault path does not exist: {v}")
        if not v.is_dir():
            raise ValueError(f"Vault path is not a directory: {v}")
        return v.resolve()

    @field_validator("models_folder")
    @classmethod
    def validate_models_folder(cls, v: str) -> str:
        v = v.strip().strip("/")
        if not v:
            raise ValueError("Models folder must not be empty")
        return v

    @field_validator("note_extension")
    @classmethod
    def validate_note_extension(cls, v: str) -> str:
        if not v.startswith(".") or len(v) < 2:
            raise ValueError(f"Note extension must start with '.': {v!r}")
        return v

    @field_validator("results_file", "tasks_file", "debug_log_file")
    @classmethod
    def validate_file_name(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("File name must not be empty")
        return v.strip()

    @property
    def models_path(self) -> Path:
        """Absolute path of the folder holding experiment notes."""
        return self.vault_path / self.models_folder


def get_settings(**overrides) -> Settings:
    """Load settings from environment, explicit overrides taking precedence."""
    overrides = {k: v for k, v in overrides.items() if v is not None}
    return Settings(**overrides)
