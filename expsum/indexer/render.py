"""Render experiment groups into summary notes."""

from dataclasses import dataclass

from expsum.config import Settings

from .grouping import ExperimentEntry


@dataclass(frozen=True)
class SummaryTemplate:
    """Fixed text fragments of one summary document."""

    title: str
    group_heading: str  # formatted with {group}
    anchor: str
    entry_heading: str = "###### 🧪{name}"
    separator: str = "---"


def results_template(settings: Settings) -> SummaryTemplate:
    """Template for the experiment results summary."""
    return SummaryTemplate(
        title=settings.results_title,
        group_heading="### 🤖{group}",
        anchor=settings.results_anchor,
    )


def tasks_template(settings: Settings) -> SummaryTemplate:
    """Template for the follow-up task list summary."""
    return SummaryTemplate(
        title=settings.tasks_title,
        group_heading="## 🤖{group} 后续任务",
        anchor=settings.tasks_anchor,
    )


def embed_reference(path: str, anchor: str) -> str:
    """Build an Obsidian embed pointing at a section of another note."""
    return f"![[{path}#{anchor}]]"


def render_summary(groups: dict[str, list[ExperimentEntry]], template: SummaryTemplate) -> str:
    """Render grouped experiments as Markdown.

    Groups and entries are emitted in ascending order, so the output only
    depends on the set of notes and not on the order they were discovered in.
    """
    blocks = [f"## {template.title}"]

    for group in sorted(groups):
        blocks.append(template.group_heading.format(group=group))
        for entry in sorted(groups[group], key=lambda e: (e.name, e.path)):
            blocks.append(template.entry_heading.format(name=entry.name))
            blocks.append(embed_reference(entry.path, template.anchor))
        blocks.append(template.separator)

    return "".join(f"{block}\n\n" for block in blocks)
