"""Experiment scanner - collects note files below a vault folder."""

import logging
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NoteFile:
    """A note discovered in the vault."""

    path: str  # vault-relative, "/"-delimited

    @property
    def parts(self) -> list[str]:
        return self.path.split("/")


class ExperimentScanner:
    """Recursively collects notes under a folder of the vault."""

    def __init__(self, vault_path: Path, extension: str = ".md") -> None:
        self.vault_path = vault_path
        self.extension = extension

    def collect_notes(self, folder: str) -> list[NoteFile]:
        """Collect every note below ``folder`` (relative to the vault root).

        Raises:
            FileNotFoundError: If the folder does not exist or is not a directory.
        """
        root = self.vault_path / folder
        if not root.is_dir():
            raise FileNotFoundError(f"Folder not found: {folder}")

        notes: list[NoteFile] = []
        for file_path in root.rglob(f"*{self.extension}"):
            rel = file_path.relative_to(self.vault_path)

            # Skip hidden folders below the root
            if any(part.startswith(".") for part in file_path.relative_to(root).parts[:-1]):
                continue

            # rglob matching is case-insensitive on some platforms
            if not file_path.name.endswith(self.extension) or not file_path.is_file():
                continue

            try:
                rel.as_posix().encode("utf-8")
            except UnicodeEncodeError:
                logger.warning(f"Skipping undecodable file name: {rel!r}")
                continue

            notes.append(NoteFile(path=rel.as_posix()))

        logger.debug(f"Total note files found under {folder}: {len(notes)}")
        return notes
