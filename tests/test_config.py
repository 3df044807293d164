"""Tests for config module."""

from pathlib import Path

import pytest

from expsum.config import Settings, get_settings


class TestSettings:
    """Tests for Settings class."""

    def test_defaults(self, tmp_vault: Path, monkeypatch):
        """Test default folder, files and anchors."""
        monkeypatch.setenv("VAULT_PATH", str(tmp_vault))
        for name in ("MODELS_FOLDER", "RESULTS_FILE", "TASKS_FILE", "RESULTS_ANCHOR", "TASKS_ANCHOR"):
            monkeypatch.delenv(name, raising=False)

        settings = Settings(_env_file=None)
        assert settings.models_folder == "models"
        assert settings.note_extension == ".md"
        assert settings.results_file == "📊实验结果汇总.md"
        assert settings.tasks_file == "📝任务列表汇总.md"
        assert settings.results_anchor == "实验结果："
        assert settings.tasks_anchor == "后续任务"
        assert settings.debug_log_enabled is True

    def test_env_overrides(self, tmp_vault: Path, monkeypatch):
        """Test values read from the environment."""
        monkeypatch.setenv("VAULT_PATH", str(tmp_vault))
        monkeypatch.setenv("MODELS_FOLDER", "experiments")
        monkeypatch.setenv("DEBUG_LOG_ENABLED", "false")

        settings = Settings(_env_file=None)
        assert settings.models_folder == "experiments"
        assert settings.debug_log_enabled is False

    def test_models_path(self, tmp_vault: Path):
        settings = Settings(_env_file=None, vault_path=tmp_vault)
        assert settings.models_path == tmp_vault.resolve() / "models"

    def test_models_folder_slashes_stripped(self, tmp_vault: Path):
        settings = Settings(_env_file=None, vault_path=tmp_vault, models_folder="/lab/runs/")
        assert settings.models_folder == "lab/runs"

    def test_models_folder_empty(self, tmp_vault: Path):
        with pytest.raises(ValueError, match="must not be empty"):
            Settings(_env_file=None, vault_path=tmp_vault, models_folder="/")

    def test_note_extension_needs_dot(self, tmp_vault: Path):
        with pytest.raises(ValueError, match="must start with"):
            Settings(_env_file=None, vault_path=tmp_vault, note_extension="md")

    def test_empty_output_file(self, tmp_vault: Path):
        with pytest.raises(ValueError, match="must not be empty"):
            Settings(_env_file=None, vault_path=tmp_vault, results_file="  ")

    def test_vault_path_validation_not_exists(self, tmp_path: Path, monkeypatch):
        """Test vault path validation when path doesn't exist."""
        monkeypatch.setenv("VAULT_PATH", str(tmp_path / "nonexistent"))

        with pytest.raises(ValueError, match="does not exist"):
            Settings(_env_file=None)

    def test_vault_path_validation_not_directory(self, tmp_path: Path, monkeypatch):
        """Test vault path validation when path is not a directory."""
        file_path = tmp_path / "file.txt"
        file_path.touch()
        monkeypatch.setenv("VAULT_PATH", str(file_path))

        with pytest.raises(ValueError, match="not a directory"):
            Settings(_env_file=None)


class TestGetSettings:
    """Tests for get_settings."""

    def test_override_wins_over_env(self, tmp_vault: Path, tmp_path: Path, monkeypatch):
        other = tmp_path / "other"
        other.mkdir()
        monkeypatch.setenv("VAULT_PATH", str(other))
        monkeypatch.chdir(tmp_path)

        settings = get_settings(vault_path=tmp_vault)
        assert settings.vault_path == tmp_vault.resolve()

    def test_none_overrides_ignored(self, tmp_vault: Path, tmp_path: Path, monkeypatch):
        monkeypatch.setenv("VAULT_PATH", str(tmp_vault))
        monkeypatch.delenv("MODELS_FOLDER", raising=False)
        monkeypatch.chdir(tmp_path)

        settings = get_settings(vault_path=None, models_folder=None)
        assert settings.vault_path == tmp_vault.resolve()
        assert settings.models_folder == "models"
