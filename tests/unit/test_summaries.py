"""
Stage row and job summary tests.
"""

from config import DashboardConfig
from core.logic.calculations import UNKNOWN
from core.logic.summaries import (
    JobSummary,
    StageMetrics,
    build_stage_row,
    collect_stage_metrics,
    compute_job_summary,
)
from core.models import DatasetRef, Stage, TaskEndReason, TaskMetrics
from tests.factories.model_factories import make_stage

SUBMITTED = 1_760_796_187_000


class TestCollectStageMetrics:

    def test_unseen_stage_reads_as_zeros(self, listener):
        stage = Stage(**make_stage(stage_id=8, num_partitions=6))
        metrics = collect_stage_metrics(listener, stage, {})
        assert metrics == StageMetrics(stage_id=8, total_tasks=6)

    def test_reads_counters(self, listener, task_factory):
        stage = Stage(**make_stage(stage_id=1, num_partitions=4))
        done = task_factory(1, 1)
        listener.on_task_start(done)
        listener.on_task_end(done, TaskEndReason.SUCCESS, TaskMetrics(shuffle_write_bytes=2048))
        failed = task_factory(2, 1)
        listener.on_task_start(failed)
        listener.on_task_end(failed, TaskEndReason.KILLED)
        listener.on_task_start(task_factory(3, 1))

        metrics = collect_stage_metrics(listener, stage, listener.active_tasks_by_stage())

        assert metrics.started_tasks == 1
        assert metrics.completed_tasks == 1
        assert metrics.failed_tasks == 1
        assert metrics.shuffle_write == 2048
        assert metrics.completed_fraction == 0.25


class TestBuildStageRow:

    def _row(self, stage, metrics=None, now=SUBMITTED, dashboard=None):
        metrics = metrics or StageMetrics(stage_id=stage.stage_id, total_tasks=stage.num_partitions)
        return build_stage_row(stage, metrics, now, dashboard or DashboardConfig())

    def test_unsubmitted_stage(self):
        row = self._row(Stage(**make_stage(stage_id=2)))
        assert row.submitted == UNKNOWN
        assert row.duration == UNKNOWN

    def test_running_stage_measures_to_now(self):
        stage = Stage(**make_stage(stage_id=2, submission_time=SUBMITTED))
        row = self._row(stage, now=SUBMITTED + 30_000)
        assert row.submitted == "2025/10/18 14:03:07"
        assert row.duration == "30.0 s"

    def test_completed_stage_ignores_now(self):
        stage = Stage(**make_stage(
            stage_id=2, submission_time=SUBMITTED, completion_time=SUBMITTED + 90_000
        ))
        first = self._row(stage, now=SUBMITTED + 100_000)
        later = self._row(stage, now=SUBMITTED + 10_000_000)
        assert first.duration == later.duration == "1.5 min"

    def test_links_follow_templates(self):
        dashboard = DashboardConfig(
            stage_url="/stages/{stage_id}", dataset_url="/storage/{dataset_id}"
        )
        stage = Stage(**make_stage(
            stage_id=4,
            dataset=DatasetRef(dataset_id=9, name="events", storage_level="MEMORY_ONLY"),
        ))
        row = self._row(stage, dashboard=dashboard)
        assert row.origin_url == "/stages/4"
        assert row.dataset_url == "/storage/9"
        assert row.dataset_label == "events"

    def test_uncached_dataset_has_no_link(self):
        stage = Stage(**make_stage(stage_id=4, dataset=DatasetRef(dataset_id=9)))
        row = self._row(stage)
        assert row.dataset_url is None
        assert row.dataset_label is None

    def test_tasks_label_and_shuffle_cells(self):
        stage = Stage(**make_stage(stage_id=1, num_partitions=5))
        metrics = StageMetrics(
            stage_id=1, total_tasks=5, completed_tasks=3, failed_tasks=2, shuffle_write=2048
        )
        row = self._row(stage, metrics=metrics)
        assert row.tasks_label == "3 / 5(2 failed)"
        assert row.shuffle_read == ""
        assert row.shuffle_write == "2.0 KB"


class TestJobSummary:

    def test_includes_running_tasks(self, listener, task_factory):
        finished = task_factory(1, 1, launch_time=0)
        listener.on_task_start(finished)
        listener.on_task_end(finished, TaskEndReason.SUCCESS, TaskMetrics(executor_run_time=1000))
        now = SUBMITTED
        listener.on_task_start(task_factory(2, 1, launch_time=now - 500))

        first = compute_job_summary(listener, now)
        later = compute_job_summary(listener, now + 100)

        assert first.cpu_time_ms >= 1500
        assert later.cpu_time_ms > first.cpu_time_ms
        assert later.cpu_time_ms == 1600

    def test_shuffle_text_hidden_when_zero(self):
        summary = JobSummary(cpu_time_ms=0, shuffle_read=0, shuffle_write=4096)
        assert summary.cpu_time == "0 ms"
        assert summary.shuffle_read_text is None
        assert summary.shuffle_write_text == "4.0 KB"
