# topmark:header:start
#
#   project      : MvnCheck
#   file         : settings.py
#   file_relpath : src/mvncheck/pipeline/steps/settings.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Write the configured Maven settings file into the project."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from mvncheck.checks import Conclusion
from mvncheck.config.logging import get_logger
from mvncheck.constants import SETTINGS_RELPATH
from mvncheck.pipeline.outcomes import failure, success
from mvncheck.pipeline.status import status_reason

from .base import BaseStep

if TYPE_CHECKING:
    from pathlib import Path

    from mvncheck.config.logging import MvnCheckLogger
    from mvncheck.pipeline.context import EventContext, MvnParameters
    from mvncheck.pipeline.outcomes import Outcome

logger: MvnCheckLogger = get_logger(__name__)


@dataclass
class SettingsStep(BaseStep):
    """Write ``settings`` verbatim to ``.m2/settings.xml`` below the project root."""

    name: str = "settings"

    def run_when(self, ctx: EventContext, params: MvnParameters) -> bool:
        """Run only when settings content is configured."""
        return bool(ctx.config.settings)

    def run(self, ctx: EventContext, params: MvnParameters) -> Outcome:
        """Write the file and remember its path for the ``mvn`` step."""
        path: Path = params.require_project().path(*SETTINGS_RELPATH.split("/"))
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(ctx.config.settings or "", encoding="utf-8")
        except OSError as exc:
            logger.error("Cannot write %s: %s", path, exc)
            params.body.append(f"Writing Maven settings file failed: {exc}")
            params.update_check(Conclusion.FAILURE)
            return failure(
                status_reason("Writing Maven settings file failed", ctx.repo, ctx.commit)
            )

        params.settings_path = path
        params.body.append("Wrote Maven settings file")
        params.update_check()
        return success()
