"""
Engine executor — the short-circuiting step pipeline.

An installation is an ordered list of Steps. Each step takes the shared
InstallContext and returns a StepResult. The first failed *fatal* step
stops the run; failed non-fatal steps are reported and skipped over.
Nothing already done is rolled back.

Flow:
    steps → run in order → collect results → stop on first fatal failure
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal

from drupal_setup.adapters.registry import AdapterRegistry
from drupal_setup.core.models.config import InstallerConfig
from drupal_setup.core.models.project import DrupalProject
from drupal_setup.core.models.step import Provider, Reporter, StepResult

logger = logging.getLogger(__name__)

# (question, default) -> answer
Prompt = Callable[[str, str], str]


@dataclass
class InstallContext:
    """State shared by the steps of one run.

    ``project`` is filled in by the scaffold step; every step after it
    runs its commands inside ``project.path``.
    """

    registry: AdapterRegistry
    reporter: Reporter
    prompt: Prompt
    config: InstallerConfig = field(default_factory=InstallerConfig)
    provider: Provider = Provider.DOCKER
    workdir: Path = field(default_factory=Path.cwd)

    # Answers supplied up front (CLI options); None = ask interactively
    project_name: str | None = None
    generate_content: bool | None = None

    # Filled in as the run progresses
    project: DrupalProject | None = None
    site_url: str | None = None

    @property
    def project_dir(self) -> str:
        """Working directory for project-scoped commands."""
        if self.project is None:
            raise RuntimeError("Project directory requested before scaffolding")
        return str(self.project.path)


StepFn = Callable[[InstallContext], StepResult]


@dataclass
class Step:
    """A named pipeline stage.

    A failed fatal step aborts the run. A failed non-fatal step prints its
    message at ``failure_level``, then ``warning`` if set, and the run
    continues.
    """

    name: str
    run: StepFn
    fatal: bool = True
    warning: str = ""
    failure_level: Literal["warning", "error"] = "warning"


@dataclass
class PipelineReport:
    """Outcome of a pipeline run."""

    results: list[tuple[str, StepResult]] = field(default_factory=list)
    aborted_at: str | None = None

    @property
    def ok(self) -> bool:
        return self.aborted_at is None

    @property
    def exit_code(self) -> int:
        return 0 if self.ok else 1

    @property
    def steps_run(self) -> list[str]:
        return [name for name, _ in self.results]

    def result_for(self, name: str) -> StepResult | None:
        for step_name, result in self.results:
            if step_name == name:
                return result
        return None

    def to_dict(self) -> dict:
        return {
            "status": "ok" if self.ok else "failed",
            "aborted_at": self.aborted_at,
            "steps": [
                {"name": name, **result.model_dump(mode="json")}
                for name, result in self.results
            ],
        }


def run_pipeline(steps: list[Step], context: InstallContext) -> PipelineReport:
    """Run steps in order, stopping at the first failed fatal step.

    Args:
        steps: Ordered pipeline.
        context: Shared run state.

    Returns:
        PipelineReport; ``exit_code`` is 1 if a fatal step failed.
    """
    report = PipelineReport()

    for step in steps:
        logger.debug("Step %s starting", step.name)
        result = step.run(context)
        report.results.append((step.name, result))

        status_marker = "✓" if result.ok else "✗" if result.failed else "⊘"
        logger.info("%s %s → %s", status_marker, step.name, result.status)

        if not result.failed:
            continue

        if step.fatal:
            if result.message:
                context.reporter.error(result.message)
            report.aborted_at = step.name
            logger.info("Pipeline aborted at %s", step.name)
            break

        if result.message:
            report_failure = (
                context.reporter.error
                if step.failure_level == "error"
                else context.reporter.warning
            )
            report_failure(result.message)
        if step.warning:
            context.reporter.warning(step.warning)

    return report
