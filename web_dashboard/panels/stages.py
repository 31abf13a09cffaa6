# ============================================================================
# STAGES_PANEL
# ============================================================================
# STATUS: Dashboard panel - Stage progress index
# PURPOSE: Active, completed and failed stages with progress and shuffle I/O
# LAST_REVIEWED: 18 OCT 2026
# EXPORTS: StagesPanel, STAGE_TABLE_HEADERS, STAGE_TABLES
# DEPENDENCIES: azure.functions, core.logic, core.progress_listener, config
# ============================================================================
"""
Stages panel for the dashboard.

Renders a point-in-time snapshot of the progress listener:

    job summary (CPU time, shuffle read, shuffle write)
    Active Stages     table
    Completed Stages  table (most recent first)
    Failed Stages     table (most recent first)

Every table is always present, even when empty. The request carries no
parameters this panel reads; the tables re-poll themselves through the
"stage-tables" fragment.

Exports:
    StagesPanel: Registered panel class
"""

import html as html_module
import logging
from typing import Callable, List, Optional

import azure.functions as func

from config import DashboardConfig, get_config
from core.logic.summaries import (
    JobSummary,
    StageRow,
    build_stage_row,
    collect_stage_metrics,
    compute_job_summary,
)
from core.models.enums import StageStatus
from core.models.stage import Stage
from core.progress_listener import JobProgressListener, get_listener
from core.utils import current_time_millis
from exceptions import PanelRenderError
from web_dashboard.base_panel import BasePanel
from web_dashboard.registry import PanelRegistry

logger = logging.getLogger(__name__)

STAGE_TABLE_HEADERS = [
    "Stage Id",
    "Origin",
    "Submitted",
    "Duration",
    ("Tasks: Complete/Total", 2),
    "Shuffle Read",
    "Shuffle Write",
    "Stored Dataset",
]

# Page order of the three tables
STAGE_TABLES = [
    (StageStatus.ACTIVE, "Active Stages"),
    (StageStatus.COMPLETED, "Completed Stages"),
    (StageStatus.FAILED, "Failed Stages"),
]

_CELL_CLASSES = [
    "small",
    "small",
    "small",
    "small",
    "progress-cell",
    "tasks-cell small",
    "small",
    "small",
    "small",
]


@PanelRegistry.register
class StagesPanel(BasePanel):
    """Stage progress panel -- job summary plus three stage tables."""

    name = "stages"
    label = "Stages"
    order = 1
    sections = [("index", "All Stages")]

    def __init__(
        self,
        listener: Optional[JobProgressListener] = None,
        dashboard: Optional[DashboardConfig] = None,
        clock: Optional[Callable[[], int]] = None,
    ):
        self._listener = listener
        self._dashboard = dashboard
        self._clock = clock or current_time_millis

    @property
    def listener(self) -> JobProgressListener:
        if self._listener is None:
            self._listener = get_listener()
        return self._listener

    @property
    def dashboard(self) -> DashboardConfig:
        if self._dashboard is None:
            self._dashboard = get_config().dashboard
        return self._dashboard

    def render_section(self, request: func.HttpRequest, section: str) -> str:
        dispatch = {
            "index": self._render_index,
        }
        handler = dispatch.get(section)
        if not handler:
            raise PanelRenderError(f"Unknown stages section: {section}")
        return handler(request)

    def render_fragment(self, request: func.HttpRequest, fragment_name: str) -> str:
        dispatch = {
            "stage-tables": self._fragment_stage_tables,
        }
        handler = dispatch.get(fragment_name)
        if not handler:
            raise PanelRenderError(f"Unknown stages fragment: {fragment_name}")
        return handler(request)

    def get_panel_css(self) -> Optional[str]:
        return PANEL_CSS

    # -----------------------------------------------------------------------
    # INDEX section (auto-refresh)
    # -----------------------------------------------------------------------

    def _render_index(self, request: func.HttpRequest) -> str:
        """Render the snapshot inside the auto-refresh wrapper."""
        return self.auto_refresh(
            "stages-refresh-wrapper",
            f"/api/dashboard?tab={self.name}&fragment=stage-tables",
            self.dashboard.refresh_seconds,
            self.render_snapshot(),
        )

    def _fragment_stage_tables(self, request: func.HttpRequest) -> str:
        """Fragment: snapshot content only (no wrapper)."""
        return self.render_snapshot()

    # -----------------------------------------------------------------------
    # Snapshot assembly
    # -----------------------------------------------------------------------

    def render_snapshot(self) -> str:
        """
        Assemble summary and the three stage tables.

        "now" is read once so every duration on the page shares one
        reference point. Active tasks are read once and reused per row.
        """
        now = self._clock()
        listener = self.listener
        active_tasks = listener.active_tasks_by_stage()

        def make_row(stage: Stage) -> list:
            metrics = collect_stage_metrics(listener, stage, active_tasks)
            return self._row_cells(build_stage_row(stage, metrics, now, self.dashboard))

        parts = [self._job_summary(compute_job_summary(listener, now))]
        counts = {}
        for status, heading in STAGE_TABLES:
            stages = listener.stages(status)
            counts[status.value] = len(stages)
            table = self.stage_table(make_row, stages, f"{status.value}-stages")
            parts.append(f"<h2>{heading}</h2>{table}")
        logger.debug(f"Rendered stage snapshot: {counts}")
        return "".join(parts)

    def stage_table(
        self,
        make_row: Callable[[Stage], list],
        stages: List[Stage],
        table_id: str,
    ) -> str:
        """One row per stage, in the order given."""
        rows = [make_row(stage) for stage in stages]
        return self.data_table(
            STAGE_TABLE_HEADERS,
            rows,
            table_id=table_id,
            cell_classes=_CELL_CLASSES,
            table_class="data-table sortable",
        )

    def _job_summary(self, summary: JobSummary) -> str:
        counts = {"CPU time": summary.cpu_time}
        if summary.shuffle_read_text is not None:
            counts["Shuffle read"] = summary.shuffle_read_text
        if summary.shuffle_write_text is not None:
            counts["Shuffle write"] = summary.shuffle_write_text
        return self.stat_strip(counts)

    def _row_cells(self, row: StageRow) -> list:
        stored = ""
        if row.dataset_url is not None:
            stored = self.link(row.dataset_url, row.dataset_label)
        return [
            str(row.stage_id),
            self.link(row.origin_url, row.name),
            html_module.escape(row.submitted),
            html_module.escape(row.duration),
            self.progress_bar(row.progress.complete_percent, row.progress.started_percent),
            html_module.escape(row.tasks_label),
            html_module.escape(row.shuffle_read),
            html_module.escape(row.shuffle_write),
            stored,
        ]


PANEL_CSS = """
.data-table td.small { font-size: small; }
.data-table td.tasks-cell { border-left: 0; text-align: center; white-space: nowrap; }
.data-table td.progress-cell { min-width: 120px; }
.progress {
    display: flex;
    height: 15px;
    margin-bottom: 0;
    overflow: hidden;
    background: var(--track, #E5E9F0);
    border-radius: 4px;
}
.progress .bar { flex: none; height: 100%; }
.progress .bar-done { background: var(--accent, #0071BC); }
.progress .bar-running { background: #A5D8FF; }
"""
