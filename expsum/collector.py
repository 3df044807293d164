"""Experiment collector - builds the results and task list summaries."""

import logging
from contextlib import nullcontext
from dataclasses import dataclass, field

from expsum.config import Settings
from expsum.indexer.grouping import ExperimentEntry, group_experiments
from expsum.indexer.render import (
    SummaryTemplate,
    render_summary,
    results_template,
    tasks_template,
)
from expsum.indexer.scanner import ExperimentScanner
from expsum.storage.debug_log import attach_debug_log
from expsum.storage.writer import SummaryWriter, WriteOutcome

logger = logging.getLogger(__name__)


class CollectError(Exception):
    """Raised when there is nothing to summarize."""


@dataclass
class CollectResult:
    """Outcome of a collection run."""

    success: bool
    message: str
    written: list[tuple[str, WriteOutcome]] = field(default_factory=list)
    failed: list[str] = field(default_factory=list)
    note_count: int = 0


class ExperimentCollector:
    """Scans the models folder and writes the two summary notes to the vault root."""

    def __init__(self, settings: Settings) -> None:
        self.settings = settings
        self.scanner = ExperimentScanner(settings.vault_path, settings.note_extension)
        self.writer = SummaryWriter(settings.vault_path)

    def summaries(self) -> list[tuple[str, SummaryTemplate]]:
        """Output file names paired with their templates, in write order."""
        return [
            (self.settings.results_file, results_template(self.settings)),
            (self.settings.tasks_file, tasks_template(self.settings)),
        ]

    def load_groups(self) -> dict[str, list[ExperimentEntry]]:
        """Scan and group the experiment notes.

        Raises:
            CollectError: If the models folder is missing, unreadable or empty.
        """
        folder = self.settings.models_folder

        if not self.settings.models_path.is_dir():
            raise CollectError(f"Models folder not found: {folder}, skipping")

        try:
            notes = self.scanner.collect_notes(folder)
        except OSError as e:
            logger.exception(f"collect_notes failed for {folder}")
            raise CollectError(f"Failed to collect notes: {e}") from e

        groups = group_experiments(notes, folder, self.settings.note_extension)
        if not groups:
            raise CollectError(f"No experiment notes found under {folder}")

        return groups

    def render(self) -> dict[str, str]:
        """Render both summaries without writing them, keyed by file name."""
        groups = self.load_groups()
        return {name: render_summary(groups, template) for name, template in self.summaries()}

    def collect(self) -> CollectResult:
        """Run a full collection. Failures are logged and reported in the result."""
        if self.settings.debug_log_enabled:
            debug_log = attach_debug_log(self.settings.vault_path / self.settings.debug_log_file)
        else:
            debug_log = nullcontext()

        with debug_log:
            logger.debug("collect started")
            result = self._collect()
            logger.debug(f"collect finished: {result.message}")
            return result

    def _collect(self) -> CollectResult:
        try:
            groups = self.load_groups()
        except CollectError as e:
            logger.warning(str(e))
            return CollectResult(success=False, message=str(e))

        note_count = sum(len(entries) for entries in groups.values())
        logger.info(f"Found {note_count} experiment notes in {len(groups)} models")

        written: list[tuple[str, WriteOutcome]] = []
        failed: list[str] = []

        # Each summary is written independently; one failing leaves the other in place
        for file_name, template in self.summaries():
            try:
                content = render_summary(groups, template)
                outcome = self.writer.write(file_name, content)
                written.append((file_name, outcome))
                logger.info(f"{outcome.value.capitalize()} {file_name}")
            except (OSError, ValueError):
                logger.exception(f"Failed to write {file_name}")
                failed.append(file_name)

        if failed:
            return CollectResult(
                success=False,
                message=f"Failed to write: {', '.join(failed)}",
                written=written,
                failed=failed,
                note_count=note_count,
            )

        return CollectResult(
            success=True,
            message=f"Experiment results and task list summaries updated ({note_count} notes)",
            written=written,
            note_count=note_count,
        )
