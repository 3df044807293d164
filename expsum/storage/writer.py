"""Create-or-overwrite writer for generated notes."""

import logging
from enum import Enum
from pathlib import Path

logger = logging.getLogger(__name__)


class WriteOutcome(str, Enum):
    CREATED = "created"
    MODIFIED = "modified"


class SummaryWriter:
    """Writes generated notes into the vault, replacing previous versions."""

    def __init__(self, vault_path: Path) -> None:
        self.vault_path = vault_path

    def _validate_path(self, file_name: str) -> Path:
        """Validate that the file stays within the vault and return its path."""
        if file_name.startswith("/"):
            file_name = file_name[1:]

        full_path = (self.vault_path / file_name).resolve()

        try:
            full_path.relative_to(self.vault_path.resolve())
        except ValueError as e:
            raise ValueError(f"Path escapes vault: {file_name}") from e

        return full_path

    def write(self, file_name: str, content: str) -> WriteOutcome:
        """Write ``content`` to ``file_name``, overwriting any existing note."""
        full_path = self._validate_path(file_name)

        if full_path.is_dir():
            raise IsADirectoryError(f"Cannot write note over a folder: {file_name}")

        outcome = WriteOutcome.MODIFIED if full_path.exists() else WriteOutcome.CREATED
        full_path.parent.mkdir(parents=True, exist_ok=True)
        full_path.write_text(content, encoding="utf-8")

        if outcome is WriteOutcome.MODIFIED:
            logger.debug(f"Modified existing file: {file_name}")
        else:
            logger.debug(f"Created new file: {file_name}")
        return outcome
