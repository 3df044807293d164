"""Experiment indexing - scans the models folder and renders summaries."""

from .grouping import ExperimentEntry, experiment_label, group_experiments
from .render import (
    SummaryTemplate,
    embed_reference,
    render_summary,
    results_template,
    tasks_template,
)
from .scanner import ExperimentScanner, NoteFile

__all__ = [
    "ExperimentEntry",
    "ExperimentScanner",
    "NoteFile",
    "SummaryTemplate",
    "embed_reference",
    "experiment_label",
    "group_experiments",
    "render_summary",
    "results_template",
    "tasks_template",
]
