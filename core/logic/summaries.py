# ============================================================================
# STAGE AND JOB SUMMARIES
# ============================================================================
# STATUS: Core - Read-side aggregation over the progress listener
# PURPOSE: Build per-request stage rows and the job summary
# LAST_REVIEWED: 18 OCT 2026
# ============================================================================
"""
Stage and Job Summaries.

Reads the progress listener once per value and reduces it into immutable
view objects. Nothing here is cached: every call reflects the listener
as it is now, and every object is discarded with the response.

Exports:
    StageMetrics: Raw per-stage counters read from the listener
    StageRow: Display-ready values for one stage table row
    JobSummary: Job-wide CPU time and shuffle totals
    collect_stage_metrics: Read one stage's counters with defaults
    build_stage_row: Derive a StageRow from a stage and its metrics
    compute_job_summary: Aggregate job-wide figures at a point in time
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Dict, List, Optional

from config import DashboardConfig
from ..models.stage import Stage
from ..models.task import TaskInfo
from ..utils import format_duration, format_timestamp, format_bytes
from .calculations import (
    UNKNOWN,
    ProgressWidths,
    active_task_time,
    calculate_fraction,
    elapsed_time,
    format_shuffle,
    progress_widths,
    task_count_label,
)

if TYPE_CHECKING:
    from ..progress_listener import JobProgressListener


@dataclass(frozen=True)
class StageMetrics:
    """Counters for one stage as read from the listener."""
    stage_id: int
    total_tasks: int
    started_tasks: int = 0
    completed_tasks: int = 0
    failed_tasks: int = 0
    shuffle_read: int = 0
    shuffle_write: int = 0

    @property
    def started_fraction(self) -> float:
        return calculate_fraction(self.started_tasks, self.total_tasks)

    @property
    def completed_fraction(self) -> float:
        return calculate_fraction(self.completed_tasks, self.total_tasks)


@dataclass(frozen=True)
class StageRow:
    """Display-ready values for one stage table row."""
    stage_id: int
    name: str
    origin_url: str
    submitted: str
    duration: str
    progress: ProgressWidths
    tasks_label: str
    shuffle_read: str
    shuffle_write: str
    dataset_label: Optional[str] = None
    dataset_url: Optional[str] = None


@dataclass(frozen=True)
class JobSummary:
    """Job-wide totals. Shuffle lines are shown only when non-zero."""
    cpu_time_ms: int
    shuffle_read: int
    shuffle_write: int

    @property
    def cpu_time(self) -> str:
        return format_duration(self.cpu_time_ms)

    @property
    def shuffle_read_text(self) -> Optional[str]:
        return format_bytes(self.shuffle_read) if self.shuffle_read > 0 else None

    @property
    def shuffle_write_text(self) -> Optional[str]:
        return format_bytes(self.shuffle_write) if self.shuffle_write > 0 else None


def collect_stage_metrics(
    listener: "JobProgressListener",
    stage: Stage,
    active_tasks: Dict[int, List[TaskInfo]],
) -> StageMetrics:
    """
    Read one stage's counters.

    Args:
        listener: Progress listener to read counters from
        stage: Stage being rendered (supplies the partition total)
        active_tasks: Stage id -> active attempts, read once per render

    Returns:
        StageMetrics; a stage the listener has never seen reads as all zeros
    """
    sid = stage.stage_id
    return StageMetrics(
        stage_id=sid,
        total_tasks=stage.num_partitions,
        started_tasks=len(active_tasks.get(sid, ())),
        completed_tasks=listener.completed_task_count(sid),
        failed_tasks=listener.failed_task_count(sid),
        shuffle_read=listener.shuffle_read_bytes(sid),
        shuffle_write=listener.shuffle_write_bytes(sid),
    )


def build_stage_row(
    stage: Stage,
    metrics: StageMetrics,
    now: int,
    dashboard: DashboardConfig,
) -> StageRow:
    """
    Derive the display values of one stage row.

    Running stages measure their duration up to now; finished stages use
    their completion time, so re-rendering them does not change the text.
    """
    if stage.submission_time is None:
        submitted = UNKNOWN
    else:
        submitted = format_timestamp(
            stage.submission_time, dashboard.date_format, dashboard.tzinfo()
        )

    end = stage.completion_time if stage.completion_time is not None else now

    dataset_label = None
    dataset_url = None
    if stage.dataset.is_cached:
        dataset_label = stage.dataset.display_name
        dataset_url = dashboard.dataset_link(stage.dataset.dataset_id)

    return StageRow(
        stage_id=stage.stage_id,
        name=stage.name,
        origin_url=dashboard.stage_link(stage.stage_id),
        submitted=submitted,
        duration=elapsed_time(stage.submission_time, end),
        progress=progress_widths(
            metrics.started_tasks, metrics.completed_tasks, metrics.total_tasks
        ),
        tasks_label=task_count_label(
            metrics.completed_tasks, metrics.total_tasks, metrics.failed_tasks
        ),
        shuffle_read=format_shuffle(metrics.shuffle_read),
        shuffle_write=format_shuffle(metrics.shuffle_write),
        dataset_label=dataset_label,
        dataset_url=dataset_url,
    )


def compute_job_summary(listener: "JobProgressListener", now: int) -> JobSummary:
    """
    Aggregate job-wide figures.

    CPU time is the listener's finished-task total plus the time spent so
    far by every task still running, so it keeps growing while work is
    in flight.
    """
    running = active_task_time(listener.active_tasks_by_stage(), now)
    return JobSummary(
        cpu_time_ms=listener.total_cpu_time() + running,
        shuffle_read=listener.total_shuffle_read_bytes(),
        shuffle_write=listener.total_shuffle_write_bytes(),
    )
