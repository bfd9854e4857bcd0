"""
Pipeline — runs the bootstrap steps in fixed order.

Flow:
    preflight → brew → mise → project trust/install → named tool → verify

Each step either returns a details dict or raises. A ``BootstrapError``
(or anything unexpected) stops the run right there; later steps never
start. Tolerated failures are the steps' own business and never reach
this loop.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from mise_bootstrap.core.context import BootstrapContext
from mise_bootstrap.core.errors import BootstrapError
from mise_bootstrap.core.observability import console
from mise_bootstrap.core.services.named_tool import install_named_tool
from mise_bootstrap.core.services.package_manager import ensure_brew
from mise_bootstrap.core.services.platform_guard import require_supported_os
from mise_bootstrap.core.services.project_tools import trust_project_config
from mise_bootstrap.core.services.verification import verify_step
from mise_bootstrap.core.services.version_manager import ensure_mise

logger = logging.getLogger(__name__)

StepFn = Callable[[BootstrapContext], dict[str, Any]]

DEFAULT_STEPS: tuple[tuple[str, StepFn], ...] = (
    ("require_macos", require_supported_os),
    ("ensure_brew", ensure_brew),
    ("ensure_mise", ensure_mise),
    ("trust_project_config", trust_project_config),
    ("install_named_tool", install_named_tool),
    ("verify_tools", verify_step),
)

DONE_MESSAGE = "Done. Open a new terminal or 'source {rc_file}' to ensure PATH is updated."


@dataclass
class StepResult:
    """Outcome of one pipeline step."""

    name: str
    status: str = "ok"  # ok | failed
    details: dict[str, Any] = field(default_factory=dict)
    error: str | None = None
    duration_ms: int = 0

    @property
    def ok(self) -> bool:
        return self.status == "ok"

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "status": self.status,
            "details": self.details,
            "error": self.error,
            "duration_ms": self.duration_ms,
        }


@dataclass
class PipelineReport:
    """Result of a bootstrap run."""

    steps: list[StepResult] = field(default_factory=list)
    dry_run: bool = False

    @property
    def failed_step(self) -> StepResult | None:
        for step in self.steps:
            if not step.ok:
                return step
        return None

    @property
    def ok(self) -> bool:
        return self.failed_step is None

    @property
    def exit_code(self) -> int:
        return 0 if self.ok else 1

    def to_dict(self) -> dict[str, Any]:
        failed = self.failed_step
        return {
            "status": "ok" if self.ok else "failed",
            "dry_run": self.dry_run,
            "failed_step": failed.name if failed else None,
            "steps": [s.to_dict() for s in self.steps],
        }


def run_pipeline(
    ctx: BootstrapContext,
    steps: tuple[tuple[str, StepFn], ...] = DEFAULT_STEPS,
) -> PipelineReport:
    """Run ``steps`` in order, stopping at the first fatal failure."""
    report = PipelineReport(dry_run=ctx.dry_run)

    for name, fn in steps:
        logger.info("Step %s", name)
        result = StepResult(name=name)
        start = time.monotonic()
        try:
            result.details = fn(ctx) or {}
        except BootstrapError as e:
            result.status = "failed"
            result.error = str(e)
            console.error(str(e))
        except Exception as e:
            logger.debug("Step %s raised", name, exc_info=True)
            result.status = "failed"
            result.error = f"Unexpected error: {e}"
            console.error(result.error)
        result.duration_ms = int((time.monotonic() - start) * 1000)
        report.steps.append(result)

        if not result.ok:
            console.error(f"Failed at step {name}.")
            return report

    console.log(DONE_MESSAGE.format(rc_file=ctx.config.rc_file))
    return report
