"""Group experiment notes by model folder."""

import logging
import re
from dataclasses import dataclass

from .scanner import NoteFile

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExperimentEntry:
    """A single experiment note within a model group."""

    name: str
    path: str


def experiment_label(parts: list[str], extension: str = ".md") -> str:
    """Join the path segments below the model folder into an experiment name.

    The note extension is removed case-insensitively, so ``run/seed1/Exp.MD``
    becomes ``run/seed1/Exp``.
    """
    label = "/".join(parts)
    return re.sub(rf"{re.escape(extension)}\Z", "", label, flags=re.IGNORECASE)


def group_experiments(
    notes: list[NoteFile], root_folder: str, extension: str = ".md"
) -> dict[str, list[ExperimentEntry]]:
    """Partition notes into groups keyed by the first folder below ``root_folder``.

    Notes sitting directly in the root folder have no model and are skipped.
    Entries keep discovery order; sorting happens at render time.
    """
    root_parts = root_folder.strip("/").split("/")
    grouped: dict[str, list[ExperimentEntry]] = {}

    for note in notes:
        try:
            parts = note.parts
            logger.debug(f"processing file: {note.path}, parts length: {len(parts)}")

            if parts[: len(root_parts)] != root_parts:
                logger.debug(f"Skipping {note.path}: outside {root_folder}")
                continue

            below = parts[len(root_parts) :]
            if len(below) < 2:
                continue

            model = below[0]
            entry = ExperimentEntry(name=experiment_label(below[1:], extension), path=note.path)
            grouped.setdefault(model, []).append(entry)

        except Exception as e:
            logger.warning(f"Error processing file: {note.path}, {e}")
            continue

    return grouped
